"""Timezone and calendar-date utilities."""

from datetime import date, datetime
from typing import Optional, Union

import pytz
from dateutil import parser as date_parser

from finance_app.config.settings import get_settings

EASTERN_TZ = pytz.timezone("US/Eastern")


def local_tz() -> pytz.BaseTzInfo:
    """Return the configured local timezone (US/Eastern unless overridden)."""
    name = get_settings().timezone
    if name == EASTERN_TZ.zone:
        return EASTERN_TZ
    return pytz.timezone(name)


def now_local() -> datetime:
    """Return the current time in the local timezone."""
    return datetime.now(local_tz())


def today_local() -> date:
    """Return today's calendar date in the local timezone."""
    return now_local().date()


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Parse a calendar date.

    Accepts ``date``/``datetime`` instances and strings in any format dateutil
    understands (``2024-06-15``, ``06/15/2024``, ISO timestamps). Empty values
    return None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(value).date()
