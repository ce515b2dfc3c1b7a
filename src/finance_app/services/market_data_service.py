"""Market data service: quote cache in front of a provider."""

import logging
import time
from typing import Optional

from finance_app.domain.views import Quote
from finance_app.providers.market_data_provider import MarketDataProvider

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    Service for fetching market quotes.

    Wraps provider with a per-symbol TTL cache and graceful degradation:
    when the provider fails, whatever is cached (even if expired) is served.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache_ttl_seconds: float = 120,
    ):
        self._provider = provider
        self._cache_ttl = cache_ttl_seconds
        # symbol -> (quote, cached_at monotonic seconds)
        self._quote_cache: dict[str, tuple[Quote, float]] = {}

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for symbols with caching.

        Returns dict mapping upper-cased symbol -> Quote. Symbols without a
        quote (provider miss or failure with nothing cached) are omitted.
        """
        keys = []
        for symbol in symbols:
            key = (symbol or "").strip().upper()
            if key and key not in keys:
                keys.append(key)
        if not keys:
            return {}

        now = time.monotonic()
        result: dict[str, Quote] = {}
        missing: list[str] = []
        for key in keys:
            cached = self._quote_cache.get(key)
            if cached and now - cached[1] < self._cache_ttl:
                result[key] = cached[0]
            else:
                missing.append(key)

        if not missing:
            return result

        try:
            fetched = self._provider.get_quotes(missing)
        except Exception as exc:
            logger.warning("Quote fetch failed for %s: %s", ", ".join(missing), exc)
            for key in missing:
                if key in self._quote_cache:
                    result[key] = self._quote_cache[key][0]
            return {k: result[k] for k in keys if k in result}

        fetched_at = time.monotonic()
        for key, quote in fetched.items():
            key = key.upper()
            self._quote_cache[key] = (quote, fetched_at)
            result[key] = quote

        return {k: result[k] for k in keys if k in result}

    def get_quote(self, symbol: str) -> Optional[Quote]:
        """Return the quote for a single symbol, or None."""
        return self.get_quotes([symbol]).get((symbol or "").strip().upper())

    def clear_cache(self) -> None:
        self._quote_cache.clear()
