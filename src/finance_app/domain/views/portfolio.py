"""View models for market data and investment portfolio outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from finance_app.domain.models import Investment


@dataclass
class Quote:
    """Market quote data for a symbol."""

    symbol: str
    last_price: Decimal
    prev_close: Optional[Decimal]
    as_of: datetime
    currency: Optional[str] = None


@dataclass
class PortfolioSummaryView:
    """Aggregate value, gain/loss and day change of all holdings."""

    investments: list[Investment] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    total_cost: Decimal = field(default_factory=lambda: Decimal("0"))
    total_gain_loss: Decimal = field(default_factory=lambda: Decimal("0"))
    total_gain_loss_percent: Decimal = field(default_factory=lambda: Decimal("0"))
    day_change: Decimal = field(default_factory=lambda: Decimal("0"))
    day_change_percent: Decimal = field(default_factory=lambda: Decimal("0"))
    last_updated: Optional[datetime] = None


@dataclass
class PriceRefreshView:
    """Result of refreshing holdings from the market data provider."""

    summary: PortfolioSummaryView
    updated_symbols: list[str] = field(default_factory=list)
    failed_symbols: list[str] = field(default_factory=list)


@dataclass
class StockPriceView:
    """Single-symbol price lookup; ``error`` is set instead of raising."""

    symbol: str
    price: Optional[Decimal] = None
    previous_close: Optional[Decimal] = None
    change: Optional[Decimal] = None
    change_percent: Optional[Decimal] = None
    currency: Optional[str] = None
    last_updated: Optional[datetime] = None
    error: Optional[str] = None
