"""Recurring bills, pay settings and per-period bill state."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from finance_app.domain.models.enums import PayFrequency


@dataclass
class PaySettings:
    """Anchor for pay period arithmetic."""

    id: str
    last_pay_date: date
    frequency: PayFrequency = PayFrequency.BIWEEKLY

    def __post_init__(self) -> None:
        if isinstance(self.frequency, str):
            self.frequency = PayFrequency(self.frequency)


@dataclass
class RecurringCategory:
    """Grouping for recurring bills (housing, utilities, ...)."""

    id: str
    name: str
    color: str = "#6B7280"
    is_active: bool = True


@dataclass
class RecurringTransaction:
    """Monthly bill due on a fixed day of the month (1..31)."""

    id: str
    name: str
    amount: Decimal
    due_date: int
    is_essential: bool = False
    category_id: Optional[str] = None


@dataclass
class CompletedTransaction:
    """Marks a bill as paid for one pay period."""

    id: str
    recurring_transaction_id: str
    pay_period_start: date
    pay_period_end: date
    completed_date: date


@dataclass
class PendingOverride:
    """Replaces a bill's usual amount for one pay period."""

    id: str
    recurring_transaction_id: str
    pay_period_start: date
    pay_period_end: date
    amount: Decimal


@dataclass
class ManualPendingTransaction:
    """One-off pending payment the user adds to a pay period by hand."""

    id: str
    name: str
    amount: Decimal
    due_date: Optional[date] = None
    category_id: Optional[str] = None
    notes: Optional[str] = None
    pay_period_start: Optional[date] = None
    pay_period_end: Optional[date] = None
    is_completed: bool = False
