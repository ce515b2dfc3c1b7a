"""Enumerations for domain models."""

from enum import Enum


class PayFrequency(str, Enum):
    """How often the user is paid (drives pay period length)."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"


class IncomeFrequency(str, Enum):
    """Pay frequency options for income data."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"
    MONTHLY = "monthly"


class BudgetPeriodType(str, Enum):
    """Window used by the budget analysis."""

    MONTH = "month"
    BIWEEKLY = "biweekly"
    CUSTOM = "custom"


class Theme(str, Enum):
    """UI theme preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
