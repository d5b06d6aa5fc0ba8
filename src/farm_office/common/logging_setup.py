from __future__ import annotations

import logging

_logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Basic logging configuration used by the application.

    Sets a short timestamped format if no handlers are configured yet.
    """
    if logging.getLogger().handlers:
        # Assume logging already configured (pytest, gunicorn, ...)
        return
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    _logger.debug("Logging configured")
