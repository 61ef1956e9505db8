import logging

import pytest

import hello.main
from hello.logging import _handler


@pytest.fixture
def served(monkeypatch):
    calls = []
    monkeypatch.setattr(hello.main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    yield calls
    logging.getLogger().removeHandler(_handler)


def test_run_serves_app_on_fixed_port(served):
    hello.main.run()
    assert len(served) == 1
    args, kwargs = served[0]
    assert args == (hello.main.app,)
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 3000
    assert kwargs["log_level"] == "info"


def test_run_logs_listen_address(served, caplog):
    caplog.set_level(logging.INFO, logger="hello.main")
    hello.main.run()
    assert "Listening on http://0.0.0.0:3000" in caplog.text


def test_run_propagates_bind_failure(monkeypatch):
    def fail(*args, **kwargs):
        raise OSError(98, "Address already in use")

    monkeypatch.setattr(hello.main.uvicorn, "run", fail)
    try:
        with pytest.raises(OSError):
            hello.main.run()
    finally:
        logging.getLogger().removeHandler(_handler)
