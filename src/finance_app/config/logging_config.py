"""Logging configuration."""

import logging
import sys
from typing import Optional

from finance_app.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are chatty at INFO
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "yfinance": logging.WARNING,
    "peewee": logging.WARNING,
    "urllib3": logging.WARNING,
}


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging to stdout.

    ``level`` defaults to the ``log_level`` setting. Unknown level names
    fall back to INFO.
    """
    name = (level or get_settings().log_level).upper()
    resolved = getattr(logging, name, None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("finance_app").setLevel(resolved)

    for logger_name, logger_level in _QUIET_LOGGERS.items():
        logging.getLogger(logger_name).setLevel(logger_level)
