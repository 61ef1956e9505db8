import html
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .logging import configure_logging

logger = logging.getLogger(__name__)

GREETING = "Hello World!"


def escape_path(path: str) -> str:
    """HTML-escape a path with numeric entities for quotes (``&#39;``, ``&#34;``)."""
    return html.escape(path, quote=False).replace("'", "&#39;").replace('"', "&#34;")


def original_path(request: Request) -> str:
    # Undecoded path as sent by the client, query string removed
    raw = request.scope.get("raw_path")
    if raw is None:
        return request.url.path
    return raw.decode("latin-1").split("?", 1)[0]


async def not_found(request: Request, exc: StarletteHTTPException):
    # Unmatched paths (404) and unmatched methods (405) both read "Cannot ..."
    if exc.status_code not in (404, 405):
        return await http_exception_handler(request, exc)
    body = f"Cannot {request.method} {escape_path(original_path(request))}"
    return PlainTextResponse(body, status_code=404)


def setup() -> FastAPI:
    """Build the application with its single route.

    Kept separate from ``run`` so tests can drive the app without a socket.
    """
    app = FastAPI(title="Hello Service", version="1.0.0")
    app.add_exception_handler(StarletteHTTPException, not_found)

    @app.get("/", response_class=PlainTextResponse)
    @app.head("/", response_class=PlainTextResponse)
    def index() -> str:
        return GREETING

    return app


app = setup()


def run() -> None:
    configure_logging(settings.log_level)
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
