"""
Unit tests for InvestmentService.

Tests cover:
- Holding creation defaults and validation
- Portfolio summary (gain/loss, day change)
- Price refresh through the market data service, including misses
- Daily snapshot and single-symbol lookups
"""

import pytest
from decimal import Decimal

from finance_app.core.exceptions import NotFoundError, ValidationError
from finance_app.services import (
    InvestmentService,
    InvestmentCreate,
    InvestmentUpdate,
    MarketDataService,
)


def _holding(service: InvestmentService, symbol: str, shares: str, avg_price: str, **kwargs):
    return service.create_investment(
        InvestmentCreate(
            symbol=symbol,
            name=kwargs.pop("name", ""),
            shares=Decimal(shares),
            avg_price=Decimal(avg_price),
            **kwargs,
        )
    )


# =============================================================================
# HOLDING TESTS
# =============================================================================


class TestHoldings:
    """Tests for creating and editing holdings."""

    def test_create_defaults(self, investment_service: InvestmentService):
        """
        GIVEN a lower-case symbol, no name and no current price
        WHEN I create the holding
        THEN the symbol is upper-cased, named after itself and priced at cost
        """
        investment = _holding(investment_service, " aapl ", "10", "150")

        assert investment.symbol == "AAPL"
        assert investment.name == "AAPL"
        assert investment.current_price == Decimal("150")
        assert investment.last_updated is not None

    @pytest.mark.parametrize("shares,avg_price", [("0", "150"), ("10", "0"), ("-1", "150")])
    def test_position_must_be_positive(self, investment_service: InvestmentService, shares, avg_price):
        with pytest.raises(ValidationError):
            _holding(investment_service, "AAPL", shares, avg_price)

    def test_blank_symbol_rejected(self, investment_service: InvestmentService):
        with pytest.raises(ValidationError):
            _holding(investment_service, "  ", "1", "1")

    def test_update_and_manual_price(self, investment_service: InvestmentService):
        investment = _holding(investment_service, "VOO", "2", "400", name="Vanguard S&P 500")

        updated = investment_service.update_investment(
            investment.id, InvestmentUpdate(shares=Decimal("3"))
        )
        assert updated.shares == Decimal("3")
        assert updated.name == "Vanguard S&P 500"

        priced = investment_service.update_price(investment.id, Decimal("450"))
        assert priced.current_price == Decimal("450")

        with pytest.raises(ValidationError):
            investment_service.update_price(investment.id, Decimal("0"))

    def test_delete_then_get_raises(self, investment_service: InvestmentService):
        investment = _holding(investment_service, "TSLA", "1", "200")

        investment_service.delete_investment(investment.id)

        with pytest.raises(NotFoundError):
            investment_service.get_investment(investment.id)


# =============================================================================
# SUMMARY AND REFRESH TESTS
# =============================================================================


class TestPortfolio:
    """Tests for summary and price refresh."""

    def test_empty_portfolio_summary(self, investment_service: InvestmentService):
        summary = investment_service.portfolio_summary()

        assert summary.investments == []
        assert summary.total_value == Decimal("0")
        assert summary.total_gain_loss_percent == Decimal("0")
        assert summary.last_updated is None

    def test_refresh_updates_prices_and_day_change(self, investment_service: InvestmentService):
        """
        GIVEN 10 AAPL at $150 and a quote of 185.50 (prev close 184.25)
        WHEN I refresh prices
        THEN value, gain and day change follow the quote
        """
        _holding(investment_service, "AAPL", "10", "150")

        result = investment_service.refresh_prices()

        assert result.updated_symbols == ["AAPL"]
        assert result.failed_symbols == []
        summary = result.summary
        assert summary.total_value == Decimal("1855.00")
        assert summary.total_cost == Decimal("1500.00")
        assert summary.total_gain_loss == Decimal("355.00")
        assert summary.total_gain_loss_percent == Decimal("23.67")
        assert summary.day_change == Decimal("12.50")
        assert summary.day_change_percent == Decimal("0.68")

    def test_refresh_reports_symbols_without_quotes(self, investment_service: InvestmentService):
        _holding(investment_service, "MSFT", "1", "300")
        unknown = _holding(investment_service, "ZZZZ", "5", "10")

        result = investment_service.refresh_prices()

        assert result.updated_symbols == ["MSFT"]
        assert result.failed_symbols == ["ZZZZ"]
        assert investment_service.get_investment(unknown.id).current_price == Decimal("10")

    def test_refresh_survives_provider_failure(self, investment_repo, failing_provider):
        service = InvestmentService(
            investment_repo=investment_repo,
            market_data=MarketDataService(provider=failing_provider),
        )
        _holding(service, "AAPL", "1", "150")

        result = service.refresh_prices()

        assert result.updated_symbols == []
        assert result.failed_symbols == ["AAPL"]
        assert result.summary.total_value == Decimal("150.00")

    def test_daily_snapshot_sets_reference_price(self, investment_service: InvestmentService):
        """
        GIVEN a holding priced by hand
        WHEN the daily snapshot runs and the price moves later
        THEN day change is measured from the snapshot price
        """
        investment = _holding(investment_service, "VOO", "2", "400", current_price=Decimal("440"))

        assert investment_service.save_daily_snapshot() == 1
        investment_service.update_price(investment.id, Decimal("445"))

        summary = investment_service.portfolio_summary()
        assert summary.day_change == Decimal("10.00")


# =============================================================================
# PRICE LOOKUP TESTS
# =============================================================================


class TestLookupPrice:
    """Tests for single-symbol lookups."""

    def test_known_symbol(self, investment_service: InvestmentService):
        view = investment_service.lookup_price("tsla")

        assert view.symbol == "TSLA"
        assert view.price == Decimal("248.75")
        assert view.change == Decimal("-1.35")
        assert view.change_percent == Decimal("-0.54")
        assert view.currency == "USD"
        assert view.error is None

    def test_unknown_symbol_sets_error(self, investment_service: InvestmentService):
        view = investment_service.lookup_price("ZZZZ")

        assert view.price is None
        assert view.error == "No price data available"

    def test_symbol_required(self, investment_service: InvestmentService):
        with pytest.raises(ValidationError) as exc_info:
            investment_service.lookup_price(" ")

        assert exc_info.value.message == "Stock symbol is required"
