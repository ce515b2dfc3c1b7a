"""Recurring bills, pay settings and per-pay-period bill state."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from finance_app.api.deps import get_recurring_service, get_settings_service
from finance_app.api.schemas.recurring import (
    RecurringCategoryCreateRequest,
    RecurringCategoryUpdateRequest,
    RecurringCategoryResponse,
    RecurringTransactionCreateRequest,
    RecurringTransactionUpdateRequest,
    RecurringTransactionResponse,
    PaySettingsRequest,
    PaySettingsResponse,
    PendingBillsResponse,
    PendingOverrideRequest,
    PendingOverrideResponse,
    CompletedTransactionRequest,
    CompletedTransactionResponse,
    ManualPendingCreateRequest,
    ManualPendingUpdateRequest,
    ManualPendingCompletionRequest,
    ManualPendingResponse,
)
from finance_app.services import (
    RecurringService,
    SettingsService,
    RecurringTransactionCreate,
    RecurringTransactionUpdate,
    ManualPendingCreate,
    ManualPendingUpdate,
)

categories_router = APIRouter(prefix="/recurring-categories", tags=["recurring"])
router = APIRouter(prefix="/recurring-transactions", tags=["recurring"])
pay_settings_router = APIRouter(prefix="/pay-settings", tags=["recurring"])
pending_router = APIRouter(prefix="/pending-transactions", tags=["recurring"])
completed_router = APIRouter(prefix="/completed-transactions", tags=["recurring"])
manual_pending_router = APIRouter(prefix="/manual-pending-transactions", tags=["recurring"])


# =============================================================================
# Recurring categories
# =============================================================================


@categories_router.get("", response_model=list[RecurringCategoryResponse])
def list_recurring_categories(service: RecurringService = Depends(get_recurring_service)):
    return [RecurringCategoryResponse.model_validate(c) for c in service.list_categories()]


@categories_router.post("", response_model=RecurringCategoryResponse, status_code=201)
def create_recurring_category(
    data: RecurringCategoryCreateRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    category = service.create_category(data.name, color=data.color, is_active=data.is_active)
    return RecurringCategoryResponse.model_validate(category)


@categories_router.put("/{category_id}", response_model=RecurringCategoryResponse)
def update_recurring_category(
    category_id: str,
    data: RecurringCategoryUpdateRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    category = service.update_category(category_id, **data.model_dump())
    return RecurringCategoryResponse.model_validate(category)


@categories_router.delete("/{category_id}", status_code=204)
def delete_recurring_category(
    category_id: str,
    service: RecurringService = Depends(get_recurring_service),
):
    """Delete a category; its bills are kept without a category."""
    service.delete_category(category_id)


# =============================================================================
# Recurring transactions
# =============================================================================


@router.get("", response_model=list[RecurringTransactionResponse])
def list_recurring_transactions(service: RecurringService = Depends(get_recurring_service)):
    return [RecurringTransactionResponse.model_validate(b) for b in service.list_bills()]


@router.post("", response_model=RecurringTransactionResponse, status_code=201)
def create_recurring_transaction(
    data: RecurringTransactionCreateRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    bill = service.create_bill(RecurringTransactionCreate(**data.model_dump()))
    return RecurringTransactionResponse.model_validate(bill)


@router.get("/{bill_id}", response_model=RecurringTransactionResponse)
def get_recurring_transaction(
    bill_id: str,
    service: RecurringService = Depends(get_recurring_service),
):
    return RecurringTransactionResponse.model_validate(service.get_bill(bill_id))


@router.put("/{bill_id}", response_model=RecurringTransactionResponse)
def update_recurring_transaction(
    bill_id: str,
    data: RecurringTransactionUpdateRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    patch = RecurringTransactionUpdate(**data.model_dump(exclude_unset=True))
    bill = service.update_bill(bill_id, patch)
    return RecurringTransactionResponse.model_validate(bill)


@router.delete("/{bill_id}", status_code=204)
def delete_recurring_transaction(
    bill_id: str,
    service: RecurringService = Depends(get_recurring_service),
):
    service.delete_bill(bill_id)


# =============================================================================
# Pay settings
# =============================================================================


@pay_settings_router.get("", response_model=Optional[PaySettingsResponse])
def get_pay_settings(service: SettingsService = Depends(get_settings_service)):
    """Saved pay schedule, or null before it has been set up."""
    settings = service.get_pay_settings()
    return PaySettingsResponse.model_validate(settings) if settings else None


@pay_settings_router.post("", response_model=PaySettingsResponse)
def save_pay_settings(
    data: PaySettingsRequest,
    service: SettingsService = Depends(get_settings_service),
):
    settings = service.save_pay_settings(data.last_pay_date, data.frequency)
    return PaySettingsResponse.model_validate(settings)


# =============================================================================
# Pending bills
# =============================================================================


@pending_router.get("", response_model=PendingBillsResponse)
def get_pending_transactions(service: RecurringService = Depends(get_recurring_service)):
    """Bills due in the current pay period with completions and overrides applied."""
    return PendingBillsResponse.model_validate(service.get_pending_bills())


@pending_router.get("/next", response_model=PendingBillsResponse)
def get_next_period_transactions(service: RecurringService = Depends(get_recurring_service)):
    return PendingBillsResponse.model_validate(service.get_next_period_bills())


@pending_router.put("", response_model=PendingOverrideResponse)
def override_pending_amount(
    data: PendingOverrideRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    """Change a bill's amount for one pay period only."""
    override = service.set_pending_override(
        data.recurring_transaction_id,
        data.amount,
        data.pay_period_start,
        data.pay_period_end,
    )
    return PendingOverrideResponse.model_validate(override)


# =============================================================================
# Completed bills
# =============================================================================


@completed_router.get("", response_model=list[CompletedTransactionResponse])
def list_completed_transactions(
    pay_period_start: Optional[date] = Query(None),
    pay_period_end: Optional[date] = Query(None),
    service: RecurringService = Depends(get_recurring_service),
):
    completions = service.list_completed(pay_period_start, pay_period_end)
    return [CompletedTransactionResponse.model_validate(c) for c in completions]


@completed_router.post("", response_model=CompletedTransactionResponse, status_code=201)
def mark_transaction_completed(
    data: CompletedTransactionRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    """Mark a bill paid for a pay period. Marking it again returns the existing record."""
    completion = service.mark_completed(
        data.recurring_transaction_id,
        data.pay_period_start,
        data.pay_period_end,
    )
    return CompletedTransactionResponse.model_validate(completion)


@completed_router.delete("/{completion_id}", status_code=204)
def unmark_transaction_completed(
    completion_id: str,
    service: RecurringService = Depends(get_recurring_service),
):
    service.unmark_completed(completion_id)


# =============================================================================
# Manual pending transactions
# =============================================================================


@manual_pending_router.get("", response_model=list[ManualPendingResponse])
def list_manual_pending(
    pay_period_start: Optional[date] = Query(None),
    pay_period_end: Optional[date] = Query(None),
    service: RecurringService = Depends(get_recurring_service),
):
    items = service.list_manual_pending(pay_period_start, pay_period_end)
    return [ManualPendingResponse.model_validate(i) for i in items]


@manual_pending_router.post("", response_model=ManualPendingResponse, status_code=201)
def create_manual_pending(
    data: ManualPendingCreateRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    item = service.create_manual_pending(ManualPendingCreate(**data.model_dump()))
    return ManualPendingResponse.model_validate(item)


@manual_pending_router.put("/{item_id}", response_model=ManualPendingResponse)
def update_manual_pending(
    item_id: str,
    data: ManualPendingUpdateRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    patch = ManualPendingUpdate(**data.model_dump(exclude_unset=True))
    item = service.update_manual_pending(item_id, patch)
    return ManualPendingResponse.model_validate(item)


@manual_pending_router.patch("/{item_id}/completion", response_model=ManualPendingResponse)
def set_manual_pending_completion(
    item_id: str,
    data: ManualPendingCompletionRequest,
    service: RecurringService = Depends(get_recurring_service),
):
    item = service.set_manual_pending_completion(item_id, data.is_completed)
    return ManualPendingResponse.model_validate(item)


@manual_pending_router.delete("/{item_id}", status_code=204)
def delete_manual_pending(
    item_id: str,
    service: RecurringService = Depends(get_recurring_service),
):
    service.delete_manual_pending(item_id)
