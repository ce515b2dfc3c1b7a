"""Asset snapshot, fund account and credit card domain models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

ZERO = Decimal("0")

# Balance fields that make up an asset snapshot's total
ASSET_BALANCE_FIELDS = (
    "cash",
    "stocks",
    "interest",
    "checking",
    "retirement_401k",
    "house_fund",
    "vacation_fund",
    "emergency_fund",
)


@dataclass
class AssetSnapshot:
    """
    Point-in-time record of the user's balances.

    Snapshots are append-only; the latest one is the current state.
    """

    id: Optional[str]
    date: date
    cash: Decimal = ZERO
    stocks: Decimal = ZERO
    interest: Decimal = ZERO
    checking: Decimal = ZERO
    retirement_401k: Decimal = ZERO
    house_fund: Decimal = ZERO
    vacation_fund: Decimal = ZERO
    emergency_fund: Decimal = ZERO

    @property
    def total_assets(self) -> Decimal:
        """Sum of every balance in the snapshot."""
        return sum((getattr(self, name) for name in ASSET_BALANCE_FIELDS), ZERO)

    @property
    def total_funds(self) -> Decimal:
        """Savings earmarked for house, vacation and emergencies."""
        return self.house_fund + self.vacation_fund + self.emergency_fund


@dataclass
class FundAccount:
    """Named savings bucket (e.g. a high-yield account or brokerage cash)."""

    id: str
    name: str
    amount: Decimal = ZERO
    description: Optional[str] = None
    color: str = "#3B82F6"
    icon: Optional[str] = None
    is_active: bool = True
    is_investing: bool = False
    sort_order: int = 0


@dataclass
class CreditCard:
    """Credit card with its outstanding balance."""

    id: str
    name: str
    balance: Decimal
    limit: Decimal
    color: str = "#000000"

    @property
    def utilization_percent(self) -> Decimal:
        """Balance as a percentage of the limit."""
        if self.limit == ZERO:
            return ZERO
        return (self.balance / self.limit * 100).quantize(Decimal("0.01"))
