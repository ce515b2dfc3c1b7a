"""View models for pay periods and the bills falling inside them."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PayPeriod:
    """Date window between paydays."""

    start: date
    end: date
    end_inclusive: bool = True

    def contains(self, value: date) -> bool:
        if self.end_inclusive:
            return self.start <= value <= self.end
        return self.start <= value < self.end

    @property
    def last_day(self) -> date:
        """Last calendar day inside the period."""
        if self.end_inclusive:
            return self.end
        return date.fromordinal(self.end.toordinal() - 1)

    @property
    def day_count(self) -> int:
        return (self.last_day - self.start).days + 1


@dataclass
class PendingBill:
    """A recurring bill as it applies to one pay period."""

    recurring_transaction_id: str
    name: str
    amount: Decimal
    base_amount: Decimal
    due_date: date
    days_until_due: int
    pay_period_start: date
    pay_period_end: date
    is_essential: bool = False
    category_id: Optional[str] = None
    is_completed: bool = False
    has_override: bool = False


@dataclass
class PendingBillsView:
    """Bills due in a pay period with totals."""

    period: Optional[PayPeriod] = None
    bills: list[PendingBill] = field(default_factory=list)

    @property
    def total_amount(self) -> Decimal:
        return sum((b.amount for b in self.bills), Decimal("0"))

    @property
    def pending_amount(self) -> Decimal:
        """Total of bills not yet marked completed."""
        return sum((b.amount for b in self.bills if not b.is_completed), Decimal("0"))

    @property
    def count(self) -> int:
        return len(self.bills)
