"""Investment holding domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Investment:
    """
    Stock or fund holding with its cost basis.

    ``current_price`` is the latest known market price and
    ``prev_day_price`` the price saved by the daily snapshot; the two drive
    the day change figures.
    """

    id: str
    symbol: str
    name: str
    shares: Decimal
    avg_price: Decimal
    current_price: Optional[Decimal] = None
    prev_day_price: Optional[Decimal] = None
    last_updated: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        self.symbol = self.symbol.upper()

    @property
    def market_price(self) -> Decimal:
        """Current price, or average price when none is known."""
        return self.current_price if self.current_price else self.avg_price

    @property
    def market_value(self) -> Decimal:
        return self.shares * self.market_price

    @property
    def cost_basis(self) -> Decimal:
        return self.shares * self.avg_price
