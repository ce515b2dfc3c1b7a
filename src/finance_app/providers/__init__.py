"""Market data providers module."""

from finance_app.providers.market_data_provider import MarketDataProvider
from finance_app.providers.stub_provider import StubMarketDataProvider
from finance_app.providers.yahoo_provider import YahooMarketDataProvider

__all__ = [
    "MarketDataProvider",
    "StubMarketDataProvider",
    "YahooMarketDataProvider",
]
