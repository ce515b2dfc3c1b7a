"""
Pay period date arithmetic.

All functions are pure and work on calendar dates. A pay frequency is either
weekly (7-day periods) or biweekly (14-day periods); the anchor is the last
pay date the user saved, which may be stale by any number of periods.
"""

import calendar
from datetime import date, timedelta
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from finance_app.domain.models.enums import PayFrequency
from finance_app.domain.views.pay_period import PayPeriod


def period_length(frequency: Union[PayFrequency, str]) -> int:
    """Return the number of days in one pay period."""
    return 7 if PayFrequency(frequency) == PayFrequency.WEEKLY else 14


def next_pay_date(
    last_pay_date: date,
    frequency: Union[PayFrequency, str],
    today: date,
) -> date:
    """Return the first pay date strictly after today."""
    step = timedelta(days=period_length(frequency))
    next_date = last_pay_date + step
    while next_date <= today:
        next_date += step
    return next_date


def current_pay_period(
    last_pay_date: date,
    frequency: Union[PayFrequency, str],
    today: date,
) -> PayPeriod:
    """
    Return the pay period containing today, used for pending bills.

    Runs from the most recent pay date to the next one, both inclusive, so a
    bill due on payday shows up in the period that ends that day.
    """
    length = period_length(frequency)
    end = next_pay_date(last_pay_date, frequency, today)
    return PayPeriod(start=end - timedelta(days=length), end=end, end_inclusive=True)


def next_pay_period(
    last_pay_date: date,
    frequency: Union[PayFrequency, str],
    today: date,
) -> PayPeriod:
    """Return the period starting on the next pay date (end-exclusive)."""
    length = period_length(frequency)
    start = next_pay_date(last_pay_date, frequency, today)
    return PayPeriod(start=start, end=start + timedelta(days=length), end_inclusive=False)


def budget_pay_period(
    last_pay_date: date,
    frequency: Union[PayFrequency, str],
    today: date,
) -> PayPeriod:
    """Return the budget window for today: ``[pay date, pay date + length - 1]``."""
    step = timedelta(days=period_length(frequency))
    start = last_pay_date
    while start > today:
        start -= step
    while start + step <= today:
        start += step
    return PayPeriod(start=start, end=start + step - timedelta(days=1), end_inclusive=True)


def past_pay_periods(
    last_pay_date: date,
    frequency: Union[PayFrequency, str],
    today: date,
    count: int,
) -> list[PayPeriod]:
    """
    Return ``count`` consecutive pay periods ending on or before today.

    The newest period ends on the latest pay date that is not after today.
    Result is ordered oldest first.
    """
    length = period_length(frequency)
    step = timedelta(days=length)
    end = last_pay_date
    while end > today:
        end -= step

    periods: list[PayPeriod] = []
    for _ in range(count):
        start = end - timedelta(days=length - 1)
        periods.insert(0, PayPeriod(start=start, end=end, end_inclusive=True))
        end -= step
    return periods


def clamp_day(year: int, month: int, day: int) -> date:
    """Return ``year-month-day`` with the day clamped to the month length."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def days_in_month(value: date) -> int:
    """Return the number of days in the month of ``value``."""
    return calendar.monthrange(value.year, value.month)[1]


def due_date_in_period(due_day: int, period: PayPeriod) -> Optional[date]:
    """
    Return the date a monthly bill falls due inside ``period``, if any.

    Candidates are the due day in the month the period starts in and in the
    following month; the earlier candidate wins when both qualify.
    """
    first_month = period.start.replace(day=1)
    for month_start in (first_month, first_month + relativedelta(months=1)):
        candidate = clamp_day(month_start.year, month_start.month, due_day)
        if period.contains(candidate):
            return candidate
    return None


def days_between(start: date, end: date) -> int:
    """Return the inclusive number of days from start to end."""
    return (end - start).days + 1
