"""Logging configuration: one stdout handler, request id on every line."""

import logging
import sys

from crm.core.config import get_settings
from crm.shared.context import current_request_id

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class RequestIdFilter(logging.Filter):
    """Attach the current request id (or '-') to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id() or "-"
        return True


class _StdoutHandler(logging.StreamHandler):
    """Marker type so setup_logging can tell its handler is already installed."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)
        self.setFormatter(logging.Formatter(LOG_FORMAT))
        self.addFilter(RequestIdFilter())


def setup_logging() -> None:
    """Configure the root logger once (DEBUG when settings.debug, else INFO).

    Calling again only updates the level.
    """
    settings = get_settings()
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if not any(isinstance(h, _StdoutHandler) for h in root.handlers):
        root.addHandler(_StdoutHandler())
    # SQL echo follows DATABASE_ECHO only
    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
