"""Core utilities and shared functionality."""

from finance_app.core.timezone import (
    now_local,
    today_local,
    parse_date,
    EASTERN_TZ,
)
from finance_app.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ConfigurationError,
    AuthorizationError,
)

__all__ = [
    "now_local",
    "today_local",
    "parse_date",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
    "AuthorizationError",
]
