"""Investment holdings, portfolio summary and price refresh."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from finance_app.core.exceptions import NotFoundError, ValidationError
from finance_app.core.timezone import now_local
from finance_app.domain.models import Investment
from finance_app.domain.views import PortfolioSummaryView, PriceRefreshView, StockPriceView
from finance_app.repositories.protocols import InvestmentRepository
from finance_app.services.market_data_service import MarketDataService

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")


def _stamp() -> datetime:
    """Local wall-clock time without tzinfo, as stored in the database."""
    return now_local().replace(tzinfo=None, microsecond=0)


@dataclass
class InvestmentCreate:
    symbol: str
    name: str
    shares: Decimal
    avg_price: Decimal
    current_price: Optional[Decimal] = None


@dataclass
class InvestmentUpdate:
    symbol: Optional[str] = None
    name: Optional[str] = None
    shares: Optional[Decimal] = None
    avg_price: Optional[Decimal] = None
    current_price: Optional[Decimal] = None


class InvestmentService:
    """
    Service for stock and fund holdings.

    Prices come from the market data service on refresh, or from manual
    entry. ``prev_day_price`` is the reference for day change and is set by
    the daily snapshot or by the quote's previous close.
    """

    def __init__(
        self,
        investment_repo: InvestmentRepository,
        market_data: MarketDataService,
    ):
        self._investment_repo = investment_repo
        self._market_data = market_data

    def list_investments(self) -> list[Investment]:
        return self._investment_repo.list_all()

    def get_investment(self, investment_id: str) -> Investment:
        investment = self._investment_repo.get_by_id(investment_id)
        if not investment:
            raise NotFoundError("Investment", investment_id)
        return investment

    def create_investment(self, data: InvestmentCreate) -> Investment:
        symbol = (data.symbol or "").strip().upper()
        if not symbol:
            raise ValidationError("Symbol is required")
        name = (data.name or "").strip() or symbol
        self._validate_position(data.shares, data.avg_price)
        if data.current_price is not None and data.current_price <= 0:
            raise ValidationError("Current price must be greater than zero")

        investment = Investment(
            id=str(uuid.uuid4()),
            symbol=symbol,
            name=name,
            shares=data.shares,
            avg_price=data.avg_price,
            current_price=data.current_price or data.avg_price,
            last_updated=_stamp(),
        )
        return self._investment_repo.create(investment)

    def update_investment(self, investment_id: str, patch: InvestmentUpdate) -> Investment:
        investment = self.get_investment(investment_id)

        if patch.symbol is not None:
            if not patch.symbol.strip():
                raise ValidationError("Symbol is required")
            investment.symbol = patch.symbol.strip().upper()
        if patch.name is not None:
            investment.name = patch.name.strip() or investment.symbol
        if patch.shares is not None:
            investment.shares = patch.shares
        if patch.avg_price is not None:
            investment.avg_price = patch.avg_price
        if patch.current_price is not None:
            if patch.current_price <= 0:
                raise ValidationError("Current price must be greater than zero")
            investment.current_price = patch.current_price
            investment.last_updated = _stamp()
        self._validate_position(investment.shares, investment.avg_price)

        return self._investment_repo.update(investment)

    def delete_investment(self, investment_id: str) -> None:
        self.get_investment(investment_id)
        self._investment_repo.delete(investment_id)

    def update_price(self, investment_id: str, price: Decimal) -> Investment:
        """Set a holding's current price by hand."""
        if price is None or price <= 0:
            raise ValidationError("Price must be greater than zero")
        investment = self.get_investment(investment_id)
        investment.current_price = price
        investment.last_updated = _stamp()
        return self._investment_repo.update(investment)

    def save_daily_snapshot(self) -> int:
        """
        Copy each holding's current price into ``prev_day_price``.

        Runs once a day (cron endpoint) so the next day's change is measured
        from today's close. Returns the number of holdings snapshotted.
        """
        count = 0
        for investment in self._investment_repo.list_all():
            if investment.current_price:
                investment.prev_day_price = investment.current_price
                self._investment_repo.update(investment)
                count += 1
        logger.info("Saved daily price snapshot for %d holdings", count)
        return count

    def portfolio_summary(self) -> PortfolioSummaryView:
        """Aggregate value, gain/loss and day change across holdings."""
        investments = self._investment_repo.list_all()

        total_value = sum((i.market_value for i in investments), ZERO)
        total_cost = sum((i.cost_basis for i in investments), ZERO)
        gain_loss = total_value - total_cost
        gain_loss_pct = gain_loss / total_cost * 100 if total_cost else ZERO

        day_change = ZERO
        prev_value = ZERO
        for investment in investments:
            if investment.prev_day_price and investment.prev_day_price > 0:
                day_change += (investment.market_price - investment.prev_day_price) * investment.shares
                prev_value += investment.prev_day_price * investment.shares
        day_change_pct = day_change / prev_value * 100 if prev_value else ZERO

        stamps = [i.last_updated for i in investments if i.last_updated]
        return PortfolioSummaryView(
            investments=investments,
            total_value=total_value.quantize(CENT),
            total_cost=total_cost.quantize(CENT),
            total_gain_loss=gain_loss.quantize(CENT),
            total_gain_loss_percent=gain_loss_pct.quantize(CENT),
            day_change=day_change.quantize(CENT),
            day_change_percent=day_change_pct.quantize(CENT),
            last_updated=max(stamps) if stamps else None,
        )

    def total_value(self) -> Decimal:
        return self.portfolio_summary().total_value

    def refresh_prices(self) -> PriceRefreshView:
        """
        Pull quotes for every held symbol and store them.

        Holdings without a quote keep their stored prices and are reported in
        ``failed_symbols``. Never raises on market data failures.
        """
        investments = self._investment_repo.list_all()
        symbols = sorted({i.symbol for i in investments})
        quotes = self._market_data.get_quotes(symbols) if symbols else {}

        stamp = _stamp()
        updated: set[str] = set()
        for investment in investments:
            quote = quotes.get(investment.symbol)
            if quote is None:
                continue
            investment.current_price = quote.last_price
            if quote.prev_close is not None:
                investment.prev_day_price = quote.prev_close
            investment.last_updated = stamp
            self._investment_repo.update(investment)
            updated.add(investment.symbol)

        failed = [s for s in symbols if s not in updated]
        if failed:
            logger.warning("No quote for %s; kept stored prices", ", ".join(failed))
        logger.info("Refreshed prices for %d of %d symbols", len(updated), len(symbols))
        return PriceRefreshView(
            summary=self.portfolio_summary(),
            updated_symbols=sorted(updated),
            failed_symbols=failed,
        )

    def lookup_price(self, symbol: str) -> StockPriceView:
        """Quote a single symbol; failures come back in ``error``."""
        key = (symbol or "").strip().upper()
        if not key:
            raise ValidationError("Stock symbol is required")

        try:
            quote = self._market_data.get_quote(key)
        except Exception as exc:
            logger.warning("Price lookup for %s failed: %s", key, exc)
            return StockPriceView(
                symbol=key,
                last_updated=_stamp(),
                error=str(exc) or "Failed to fetch stock price",
            )

        if quote is None:
            return StockPriceView(symbol=key, last_updated=_stamp(), error="No price data available")

        change = None
        change_pct = None
        if quote.prev_close:
            change = (quote.last_price - quote.prev_close).quantize(CENT)
            change_pct = ((quote.last_price - quote.prev_close) / quote.prev_close * 100).quantize(CENT)
        return StockPriceView(
            symbol=key,
            price=quote.last_price,
            previous_close=quote.prev_close,
            change=change,
            change_percent=change_pct,
            currency=quote.currency,
            last_updated=quote.as_of,
        )

    @staticmethod
    def _validate_position(shares: Decimal, avg_price: Decimal) -> None:
        if shares is None or shares <= 0:
            raise ValidationError("Shares must be greater than zero")
        if avg_price is None or avg_price <= 0:
            raise ValidationError("Average price must be greater than zero")
