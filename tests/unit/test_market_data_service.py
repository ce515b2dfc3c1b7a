"""
Unit tests for MarketDataService and the stub provider.

Tests cover:
- Getting quotes from provider
- Symbol normalization
- Quote caching behavior and TTL expiration
- Graceful degradation on provider failure
- Stub provider determinism
"""

import pytest
from decimal import Decimal
from unittest.mock import patch

from finance_app.services import MarketDataService
from finance_app.providers import StubMarketDataProvider

from tests.conftest import (
    DeterministicMarketProvider,
    FailingMarketProvider,
)


# =============================================================================
# BASIC QUOTE RETRIEVAL TESTS
# =============================================================================


class TestGetQuotes:
    """Tests for basic quote retrieval."""

    def test_get_quotes_returns_quote_data(
        self,
        deterministic_provider: DeterministicMarketProvider,
    ):
        """
        GIVEN a market data provider with AAPL quote
        WHEN I call get_quotes(["AAPL"])
        THEN result contains Quote with last_price, prev_close, as_of
        """
        service = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)

        quotes = service.get_quotes(["AAPL"])

        assert "AAPL" in quotes
        quote = quotes["AAPL"]
        assert quote.last_price == Decimal("185.50")
        assert quote.prev_close == Decimal("184.25")
        assert quote.as_of is not None

    def test_symbols_are_normalized_and_deduplicated(
        self,
        deterministic_provider: DeterministicMarketProvider,
    ):
        """
        GIVEN lower-case, padded and repeated symbols
        WHEN I call get_quotes
        THEN the provider is asked once per upper-cased symbol
        """
        service = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)

        quotes = service.get_quotes(["aapl", " AAPL ", "msft", ""])

        assert set(quotes) == {"AAPL", "MSFT"}
        assert deterministic_provider.calls == [["AAPL", "MSFT"]]

    def test_get_quotes_empty_list_skips_provider(
        self,
        deterministic_provider: DeterministicMarketProvider,
    ):
        service = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)

        assert service.get_quotes([]) == {}
        assert deterministic_provider.calls == []

    def test_unknown_symbol_is_omitted(self, market_data_service: MarketDataService):
        quotes = market_data_service.get_quotes(["AAPL", "ZZZZ"])

        assert list(quotes) == ["AAPL"]
        assert market_data_service.get_quote("ZZZZ") is None


# =============================================================================
# CACHING TESTS
# =============================================================================


class TestQuoteCache:
    """Tests for the per-symbol TTL cache."""

    def test_cached_quotes_are_not_refetched(
        self,
        deterministic_provider: DeterministicMarketProvider,
    ):
        """
        GIVEN a quote fetched moments ago
        WHEN I request it again within the TTL
        THEN the provider is not called again
        """
        service = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)

        service.get_quotes(["AAPL"])
        service.get_quotes(["AAPL"])

        assert len(deterministic_provider.calls) == 1

    def test_only_missing_symbols_are_fetched(
        self,
        deterministic_provider: DeterministicMarketProvider,
    ):
        service = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)

        service.get_quotes(["AAPL"])
        service.get_quotes(["AAPL", "MSFT"])

        assert deterministic_provider.calls == [["AAPL"], ["MSFT"]]

    def test_expired_quotes_are_refetched(
        self,
        deterministic_provider: DeterministicMarketProvider,
    ):
        """
        GIVEN a cached quote older than the TTL
        WHEN I request it again
        THEN the provider is called again
        """
        service = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)

        with patch("finance_app.services.market_data_service.time.monotonic", return_value=1000.0):
            service.get_quotes(["AAPL"])
        with patch("finance_app.services.market_data_service.time.monotonic", return_value=1061.0):
            service.get_quotes(["AAPL"])

        assert len(deterministic_provider.calls) == 2

    def test_clear_cache_forces_refetch(
        self,
        deterministic_provider: DeterministicMarketProvider,
    ):
        service = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)

        service.get_quotes(["AAPL"])
        service.clear_cache()
        service.get_quotes(["AAPL"])

        assert len(deterministic_provider.calls) == 2


# =============================================================================
# GRACEFUL DEGRADATION TESTS
# =============================================================================


class TestProviderFailure:
    """Tests for degraded behavior when the provider raises."""

    def test_failure_with_empty_cache_returns_nothing(
        self,
        failing_provider: FailingMarketProvider,
    ):
        """
        GIVEN a provider that always raises
        WHEN I request quotes with nothing cached
        THEN an empty dict is returned instead of an exception
        """
        service = MarketDataService(provider=failing_provider, cache_ttl_seconds=60)

        assert service.get_quotes(["AAPL"]) == {}

    def test_failure_serves_expired_cache(
        self,
        deterministic_provider: DeterministicMarketProvider,
    ):
        """
        GIVEN an expired cached quote
        WHEN the provider starts failing
        THEN the stale quote is served
        """
        service = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)
        with patch("finance_app.services.market_data_service.time.monotonic", return_value=1000.0):
            service.get_quotes(["AAPL"])

        service._provider = FailingMarketProvider()
        with patch("finance_app.services.market_data_service.time.monotonic", return_value=5000.0):
            quotes = service.get_quotes(["AAPL", "MSFT"])

        assert list(quotes) == ["AAPL"]
        assert quotes["AAPL"].last_price == Decimal("185.50")


# =============================================================================
# STUB PROVIDER TESTS
# =============================================================================


class TestStubProvider:
    """Tests for StubMarketDataProvider."""

    def test_known_symbol_has_fixed_prices(self):
        quotes = StubMarketDataProvider().get_quotes(["voo"])

        assert quotes["VOO"].last_price == Decimal("445.10")
        assert quotes["VOO"].prev_close == Decimal("443.90")
        assert quotes["VOO"].currency == "USD"

    def test_unknown_symbol_price_is_deterministic(self):
        """
        GIVEN an unknown symbol
        WHEN quoted twice by separate stub instances
        THEN both quotes agree and the previous close is 1% lower
        """
        first = StubMarketDataProvider().get_quotes(["ABCD"])["ABCD"]
        second = StubMarketDataProvider().get_quotes(["ABCD"])["ABCD"]

        assert first.last_price == second.last_price
        assert Decimal("50") <= first.last_price < Decimal("250")
        assert first.prev_close == (first.last_price * Decimal("0.99")).quantize(Decimal("0.01"))

    def test_blank_symbols_are_skipped(self):
        assert StubMarketDataProvider().get_quotes(["  "]) == {}
