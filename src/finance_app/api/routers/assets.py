"""Asset snapshots, fund accounts and credit cards."""

from fastapi import APIRouter, Depends, Query

from finance_app.api.deps import get_asset_service
from finance_app.api.schemas.assets import (
    AssetSnapshotRequest,
    AssetSnapshotResponse,
    FundAccountCreateRequest,
    FundAccountUpdateRequest,
    FundAccountResponse,
    FundAccountListResponse,
    CreditCardCreateRequest,
    CreditCardUpdateRequest,
    CreditCardResponse,
    CreditCardListResponse,
)
from finance_app.services import (
    AssetService,
    AssetBalances,
    FundAccountCreate,
    FundAccountUpdate,
    CreditCardCreate,
    CreditCardUpdate,
)

router = APIRouter(prefix="/assets", tags=["assets"])
fund_accounts_router = APIRouter(prefix="/fund-accounts", tags=["assets"])
credit_cards_router = APIRouter(prefix="/credit-cards", tags=["assets"])


@router.get("", response_model=AssetSnapshotResponse)
def get_latest_assets(service: AssetService = Depends(get_asset_service)):
    """Most recent balances; all zero before the first snapshot."""
    return AssetSnapshotResponse.model_validate(service.get_latest())


@router.post("", response_model=AssetSnapshotResponse, status_code=201)
def record_assets(
    data: AssetSnapshotRequest,
    service: AssetService = Depends(get_asset_service),
):
    """Record today's balances."""
    snapshot = service.record_snapshot(AssetBalances(**data.model_dump()))
    return AssetSnapshotResponse.model_validate(snapshot)


@router.get("/history", response_model=list[AssetSnapshotResponse])
def get_asset_history(
    limit: int = Query(30, ge=1, le=365),
    service: AssetService = Depends(get_asset_service),
):
    return [AssetSnapshotResponse.model_validate(s) for s in service.list_history(limit)]


# =============================================================================
# Fund accounts
# =============================================================================


@fund_accounts_router.get("", response_model=FundAccountListResponse)
def list_fund_accounts(service: AssetService = Depends(get_asset_service)):
    """Active fund accounts with totals."""
    return FundAccountListResponse.model_validate(service.list_fund_accounts())


@fund_accounts_router.post("", response_model=FundAccountResponse, status_code=201)
def create_fund_account(
    data: FundAccountCreateRequest,
    service: AssetService = Depends(get_asset_service),
):
    account = service.create_fund_account(FundAccountCreate(**data.model_dump()))
    return FundAccountResponse.model_validate(account)


@fund_accounts_router.put("/{account_id}", response_model=FundAccountResponse)
def update_fund_account(
    account_id: str,
    data: FundAccountUpdateRequest,
    service: AssetService = Depends(get_asset_service),
):
    patch = FundAccountUpdate(**data.model_dump(exclude_unset=True))
    account = service.update_fund_account(account_id, patch)
    return FundAccountResponse.model_validate(account)


@fund_accounts_router.delete("/{account_id}", status_code=204)
def delete_fund_account(account_id: str, service: AssetService = Depends(get_asset_service)):
    """Deactivate a fund account; it disappears from the list."""
    service.delete_fund_account(account_id)


# =============================================================================
# Credit cards
# =============================================================================


@credit_cards_router.get("", response_model=CreditCardListResponse)
def list_credit_cards(service: AssetService = Depends(get_asset_service)):
    return CreditCardListResponse.model_validate(service.list_credit_cards())


@credit_cards_router.post("", response_model=CreditCardResponse, status_code=201)
def create_credit_card(
    data: CreditCardCreateRequest,
    service: AssetService = Depends(get_asset_service),
):
    card = service.create_credit_card(CreditCardCreate(**data.model_dump()))
    return CreditCardResponse.model_validate(card)


@credit_cards_router.get("/{card_id}", response_model=CreditCardResponse)
def get_credit_card(card_id: str, service: AssetService = Depends(get_asset_service)):
    return CreditCardResponse.model_validate(service.get_credit_card(card_id))


@credit_cards_router.put("/{card_id}", response_model=CreditCardResponse)
def update_credit_card(
    card_id: str,
    data: CreditCardUpdateRequest,
    service: AssetService = Depends(get_asset_service),
):
    patch = CreditCardUpdate(**data.model_dump(exclude_unset=True))
    card = service.update_credit_card(card_id, patch)
    return CreditCardResponse.model_validate(card)


@credit_cards_router.delete("/{card_id}", status_code=204)
def delete_credit_card(card_id: str, service: AssetService = Depends(get_asset_service)):
    service.delete_credit_card(card_id)
