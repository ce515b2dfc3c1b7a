"""Income and savings plan domain models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from finance_app.domain.models.enums import IncomeFrequency


@dataclass
class IncomeData:
    """Regular paycheck and work schedule (single row)."""

    id: Optional[str] = None
    pay_amount: Decimal = Decimal("2500")
    pay_frequency: IncomeFrequency = IncomeFrequency.BIWEEKLY
    work_hours_per_week: int = 40
    work_days_per_week: int = 5
    bonus_percentage: Decimal = Decimal("10")

    def __post_init__(self) -> None:
        if isinstance(self.pay_frequency, str):
            self.pay_frequency = IncomeFrequency(self.pay_frequency)


@dataclass
class IncomeEntry:
    """A received payment (paycheck, side job, gift, ...)."""

    id: str
    source: str
    amount: Decimal
    date: date
    is_recurring: bool = False
    frequency: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class SavingsPlan:
    """Retirement savings assumptions (single row)."""

    id: Optional[str] = None
    current_age: int = 30
    retirement_age: int = 65
    current_savings: Decimal = Decimal("100000")
    yearly_contribution: Decimal = Decimal("20000")
    yearly_bonus: Decimal = Decimal("5000")
    annual_return: Decimal = Decimal("7")
