"""Market data provider protocol."""

from typing import Protocol

from finance_app.domain.views import Quote


class MarketDataProvider(Protocol):
    """
    Protocol for market data providers.

    Implementations fetch the latest quote (last_price, prev_close) for a
    batch of symbols. Symbols the provider cannot price are omitted from the
    result rather than raising.
    """

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for multiple symbols.

        Returns dict mapping upper-cased symbol -> Quote.
        """
        ...
