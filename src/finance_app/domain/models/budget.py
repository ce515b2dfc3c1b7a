"""Budget category and spending transaction domain models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class BudgetCategory:
    """
    Spending category with a monthly allocation.

    Tracking categories (``is_budget_category=False``) record spending
    without counting against the budget.
    """

    id: str
    name: str
    allocated_amount: Decimal
    color: str = "#3B82F6"
    is_active: bool = True
    is_budget_category: bool = True


@dataclass
class Transaction:
    """
    Single spending entry against a budget category.

    Amounts are positive outflows. Cash back reduces the effective spend;
    a pending tip is money still to leave the checking account.
    """

    id: str
    date: date
    category_id: str
    name: str
    amount: Decimal
    cash_back: Decimal = Decimal("0")
    cashback_posted: bool = False
    notes: Optional[str] = None
    pending: bool = False
    pending_tip_amount: Decimal = Decimal("0")
    sort_order: int = 0

    @property
    def net_amount(self) -> Decimal:
        """Amount after cash back."""
        return self.amount - self.cash_back
