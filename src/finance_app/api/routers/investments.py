"""Investment holdings, price refresh and stock quotes."""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, Query

from finance_app.api.deps import get_investment_service
from finance_app.api.schemas.investment import (
    InvestmentCreateRequest,
    InvestmentUpdateRequest,
    InvestmentResponse,
    PriceUpdateRequest,
    PortfolioSummaryResponse,
    PriceRefreshResponse,
    SnapshotResponse,
    StockPriceResponse,
)
from finance_app.config.settings import get_settings
from finance_app.core.exceptions import AuthorizationError
from finance_app.services import InvestmentService, InvestmentCreate, InvestmentUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/investments", tags=["investments"])
market_router = APIRouter(tags=["investments"])


@router.get("", response_model=PortfolioSummaryResponse)
def list_investments(service: InvestmentService = Depends(get_investment_service)):
    """Holdings with portfolio totals and day change."""
    return PortfolioSummaryResponse.model_validate(service.portfolio_summary())


@router.post("", response_model=InvestmentResponse, status_code=201)
def create_investment(
    data: InvestmentCreateRequest,
    service: InvestmentService = Depends(get_investment_service),
):
    investment = service.create_investment(InvestmentCreate(**data.model_dump()))
    return InvestmentResponse.model_validate(investment)


@router.post("/refresh-prices", response_model=PriceRefreshResponse)
def refresh_prices(service: InvestmentService = Depends(get_investment_service)):
    """Fetch quotes for every holding. Symbols without a quote keep their prices."""
    return PriceRefreshResponse.model_validate(service.refresh_prices())


@router.post("/snapshot", response_model=SnapshotResponse)
def save_snapshot(service: InvestmentService = Depends(get_investment_service)):
    count = service.save_daily_snapshot()
    return SnapshotResponse(count=count, message=f"Saved price snapshot for {count} investments")


@router.get("/{investment_id}", response_model=InvestmentResponse)
def get_investment(
    investment_id: str,
    service: InvestmentService = Depends(get_investment_service),
):
    return InvestmentResponse.model_validate(service.get_investment(investment_id))


@router.put("/{investment_id}", response_model=InvestmentResponse)
def update_investment(
    investment_id: str,
    data: InvestmentUpdateRequest,
    service: InvestmentService = Depends(get_investment_service),
):
    patch = InvestmentUpdate(**data.model_dump(exclude_unset=True))
    investment = service.update_investment(investment_id, patch)
    return InvestmentResponse.model_validate(investment)


@router.put("/{investment_id}/price", response_model=InvestmentResponse)
def update_investment_price(
    investment_id: str,
    data: PriceUpdateRequest,
    service: InvestmentService = Depends(get_investment_service),
):
    investment = service.update_price(investment_id, data.price)
    return InvestmentResponse.model_validate(investment)


@router.delete("/{investment_id}", status_code=204)
def delete_investment(
    investment_id: str,
    service: InvestmentService = Depends(get_investment_service),
):
    service.delete_investment(investment_id)


# =============================================================================
# Scheduled snapshot and quotes
# =============================================================================


@market_router.get("/cron/investment-snapshot", response_model=SnapshotResponse)
def cron_investment_snapshot(
    key: Optional[str] = Query(None, description="Shared secret from FINANCE_CRON_API_KEY"),
    service: InvestmentService = Depends(get_investment_service),
):
    """Daily price snapshot for an external scheduler."""
    expected = get_settings().cron_api_key
    if not expected or not key or not secrets.compare_digest(key, expected):
        logger.warning("Rejected investment snapshot request with invalid key")
        raise AuthorizationError()
    count = service.save_daily_snapshot()
    return SnapshotResponse(count=count, message=f"Saved price snapshot for {count} investments")


@market_router.get("/stock-price", response_model=StockPriceResponse)
def get_stock_price(
    symbol: str = Query(..., description="Ticker symbol"),
    service: InvestmentService = Depends(get_investment_service),
):
    """Quote one symbol. Lookup failures come back with ``price`` null and an ``error``."""
    return StockPriceResponse.model_validate(service.lookup_price(symbol))
