"""
Yahoo Finance market data provider (via yfinance).

The fetch runs in a single worker thread with a timeout so a slow Yahoo
response cannot hang a request. Per-symbol failures are dropped from the
result; a timeout or a failure of the whole batch raises to the caller
(MarketDataService falls back to its cache).
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal, InvalidOperation
from typing import Optional

import yfinance as yf

from finance_app.core.timezone import now_local
from finance_app.domain.views import Quote

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT_SECONDS = 10


def _to_price(value) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        price = Decimal(str(value)).quantize(Decimal("0.0001"))
    except (InvalidOperation, ValueError):
        return None
    return price if price > 0 else None


def _quote_from_info(symbol: str, info: dict, as_of) -> Optional[Quote]:
    """Build a Quote from a yfinance ``info`` dict, or None without a price."""
    # currentPrice preferred, then regularMarketPrice
    price = _to_price(info.get("currentPrice"))
    if price is None:
        price = _to_price(info.get("regularMarketPrice"))
    if price is None:
        return None
    prev_close = _to_price(info.get("previousClose"))
    if prev_close is None:
        prev_close = _to_price(info.get("regularMarketPreviousClose"))
    return Quote(
        symbol=symbol,
        last_price=price,
        prev_close=prev_close,
        as_of=as_of,
        currency=info.get("currency"),
    )


def _fetch_quotes_impl(symbols: list[str]) -> dict[str, Quote]:
    """Call yfinance for all symbols at once. No cache."""
    tickers = yf.Tickers(" ".join(symbols))
    as_of = now_local()
    result: dict[str, Quote] = {}
    for symbol in symbols:
        try:
            ticker = tickers.tickers.get(symbol)
            info = ticker.info if ticker is not None else None
        except Exception as exc:
            logger.warning("Quote lookup failed for %s: %s", symbol, exc)
            continue
        if not isinstance(info, dict):
            continue
        quote = _quote_from_info(symbol, info, as_of)
        if quote is not None:
            result[symbol] = quote
    return result


class YahooMarketDataProvider:
    """Fetches quotes from Yahoo Finance via yfinance."""

    def __init__(self, fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS):
        self._fetch_timeout = fetch_timeout_seconds

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        keys = [s.strip().upper() for s in symbols if s and s.strip()]
        if not keys:
            return {}
        ex = ThreadPoolExecutor(max_workers=1)
        try:
            fut = ex.submit(_fetch_quotes_impl, keys)
            return fut.result(timeout=self._fetch_timeout)
        finally:
            # Do not block on a fetch that already timed out
            ex.shutdown(wait=False)
