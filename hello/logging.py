import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "info") -> None:
    """Attach a single stdout handler to the root logger.

    Calling it again only updates the level, so repeated setup (tests, reloads)
    never duplicates output.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _handler not in root.handlers:
        root.addHandler(_handler)
