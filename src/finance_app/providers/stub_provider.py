"""Stub market data provider for offline/testing use."""

import hashlib
from decimal import Decimal

from finance_app.core.timezone import now_local
from finance_app.domain.views import Quote


# (last price, previous close) for funds and stocks common in household portfolios
_STUB_PRICES: dict[str, tuple[Decimal, Decimal]] = {
    "VOO": (Decimal("445.10"), Decimal("443.90")),
    "VTI": (Decimal("252.30"), Decimal("251.80")),
    "VXUS": (Decimal("58.40"), Decimal("58.65")),
    "BND": (Decimal("72.15"), Decimal("72.10")),
    "SCHD": (Decimal("77.85"), Decimal("77.20")),
    "QQQ": (Decimal("418.75"), Decimal("417.50")),
    "AAPL": (Decimal("185.50"), Decimal("184.25")),
    "MSFT": (Decimal("378.25"), Decimal("376.80")),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Known symbols get fixed prices; any other symbol gets a price derived
    from a hash of its name, so repeated calls agree.
    """

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        as_of = now_local()
        result: dict[str, Quote] = {}

        for symbol in symbols:
            upper_symbol = symbol.strip().upper()
            if not upper_symbol:
                continue
            if upper_symbol in _STUB_PRICES:
                last_price, prev_close = _STUB_PRICES[upper_symbol]
            else:
                last_price, prev_close = self._derived_prices(upper_symbol)

            result[upper_symbol] = Quote(
                symbol=upper_symbol,
                last_price=last_price,
                prev_close=prev_close,
                as_of=as_of,
                currency="USD",
            )

        return result

    @staticmethod
    def _derived_prices(symbol: str) -> tuple[Decimal, Decimal]:
        digest = int(hashlib.sha256(symbol.encode()).hexdigest()[:8], 16)
        last_price = (Decimal(50) + Decimal(digest % 20000) / 100).quantize(Decimal("0.01"))
        prev_close = (last_price * Decimal("0.99")).quantize(Decimal("0.01"))
        return last_price, prev_close
