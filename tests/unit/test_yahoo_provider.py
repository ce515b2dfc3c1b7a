"""
Unit tests for YahooMarketDataProvider with yfinance mocked out.

Tests cover:
- Price field preference (currentPrice, then regularMarketPrice)
- Per-symbol failures dropped from the result
- Whole-batch failures raised to the caller
"""

import pytest
from decimal import Decimal
from unittest.mock import MagicMock, PropertyMock, patch

from finance_app.providers import YahooMarketDataProvider


def _ticker(info):
    ticker = MagicMock()
    ticker.info = info
    return ticker


def _tickers(mapping):
    tickers = MagicMock()
    tickers.tickers = mapping
    return tickers


class TestYahooProvider:
    """Tests for YahooMarketDataProvider.get_quotes."""

    def test_builds_quotes_from_info(self):
        """
        GIVEN yfinance info with currentPrice and previousClose
        WHEN I fetch quotes
        THEN the quote carries both prices and the currency
        """
        info = {"currentPrice": 185.5, "previousClose": 184.25, "currency": "USD"}
        with patch(
            "finance_app.providers.yahoo_provider.yf.Tickers",
            return_value=_tickers({"AAPL": _ticker(info)}),
        ) as tickers_cls:
            quotes = YahooMarketDataProvider().get_quotes(["aapl"])

        tickers_cls.assert_called_once_with("AAPL")
        assert quotes["AAPL"].last_price == Decimal("185.5000")
        assert quotes["AAPL"].prev_close == Decimal("184.2500")
        assert quotes["AAPL"].currency == "USD"

    def test_falls_back_to_regular_market_fields(self):
        info = {"regularMarketPrice": 445.1, "regularMarketPreviousClose": 443.9}
        with patch(
            "finance_app.providers.yahoo_provider.yf.Tickers",
            return_value=_tickers({"VOO": _ticker(info)}),
        ):
            quotes = YahooMarketDataProvider().get_quotes(["VOO"])

        assert quotes["VOO"].last_price == Decimal("445.1000")
        assert quotes["VOO"].prev_close == Decimal("443.9000")

    def test_symbols_without_price_or_with_errors_are_dropped(self):
        """
        GIVEN one good symbol, one without a price and one whose info raises
        WHEN I fetch quotes
        THEN only the good symbol is returned
        """
        broken = MagicMock()
        type(broken).info = PropertyMock(side_effect=RuntimeError("404"))
        mapping = {
            "AAPL": _ticker({"currentPrice": 185.5}),
            "NOPE": _ticker({"currentPrice": None}),
            "FAIL": broken,
        }
        with patch(
            "finance_app.providers.yahoo_provider.yf.Tickers",
            return_value=_tickers(mapping),
        ):
            quotes = YahooMarketDataProvider().get_quotes(["AAPL", "NOPE", "FAIL"])

        assert list(quotes) == ["AAPL"]
        assert quotes["AAPL"].prev_close is None

    def test_batch_failure_is_raised(self):
        with patch(
            "finance_app.providers.yahoo_provider.yf.Tickers",
            side_effect=ConnectionError("offline"),
        ):
            with pytest.raises(ConnectionError):
                YahooMarketDataProvider().get_quotes(["AAPL"])

    def test_empty_symbols_skip_yfinance(self):
        with patch("finance_app.providers.yahoo_provider.yf.Tickers") as tickers_cls:
            assert YahooMarketDataProvider().get_quotes(["", "  "]) == {}
        tickers_cls.assert_not_called()
