"""Budget categories, spending transactions and budget analyses."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from finance_app.api.deps import get_budget_service, get_budget_analysis_service
from finance_app.api.schemas.budget import (
    BudgetCategoryCreateRequest,
    BudgetCategoryUpdateRequest,
    BudgetCategoryResponse,
    BudgetCategoryListResponse,
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionResponse,
    TransactionListResponse,
    BulkTransactionRequest,
    BulkTransactionResponse,
    ReorderRequest,
    BudgetAnalysisResponse,
    OverspendingAnalysisResponse,
    TotalSpendingResponse,
)
from finance_app.domain.models import BudgetPeriodType
from finance_app.services import (
    BudgetService,
    BudgetAnalysisService,
    BudgetCategoryCreate,
    BudgetCategoryUpdate,
    TransactionCreate,
    TransactionUpdate,
)

router = APIRouter(prefix="/budget-categories", tags=["budget"])
transactions_router = APIRouter(prefix="/transactions", tags=["budget"])
analysis_router = APIRouter(tags=["budget"])


@router.get("", response_model=BudgetCategoryListResponse)
def list_budget_categories(
    active_only: bool = Query(False),
    service: BudgetService = Depends(get_budget_service),
):
    """List categories with the monthly total of active budget categories."""
    categories = service.list_categories(active_only=active_only)
    return BudgetCategoryListResponse(
        categories=[BudgetCategoryResponse.model_validate(c) for c in categories],
        total_allocated=service.total_allocated(),
    )


@router.post("", response_model=BudgetCategoryResponse, status_code=201)
def create_budget_category(
    data: BudgetCategoryCreateRequest,
    service: BudgetService = Depends(get_budget_service),
):
    category = service.create_category(BudgetCategoryCreate(**data.model_dump()))
    return BudgetCategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=BudgetCategoryResponse)
def update_budget_category(
    category_id: str,
    data: BudgetCategoryUpdateRequest,
    service: BudgetService = Depends(get_budget_service),
):
    patch = BudgetCategoryUpdate(**data.model_dump(exclude_unset=True))
    category = service.update_category(category_id, patch)
    return BudgetCategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=204)
def delete_budget_category(category_id: str, service: BudgetService = Depends(get_budget_service)):
    """Delete a category together with its transactions."""
    service.delete_category(category_id)


# =============================================================================
# Transactions
# =============================================================================


@transactions_router.get("", response_model=TransactionListResponse)
def list_transactions(
    start_date: Optional[date] = Query(None, description="Inclusive"),
    end_date: Optional[date] = Query(None, description="Inclusive"),
    limit: Optional[int] = Query(None, ge=1, le=10000),
    service: BudgetService = Depends(get_budget_service),
):
    """List transactions newest first."""
    transactions = service.list_transactions(start_date=start_date, end_date=end_date, limit=limit)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        count=len(transactions),
    )


@transactions_router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: TransactionCreateRequest,
    service: BudgetService = Depends(get_budget_service),
):
    transaction = service.create_transaction(TransactionCreate(**data.model_dump()))
    return TransactionResponse.model_validate(transaction)


@transactions_router.post("/bulk", response_model=BulkTransactionResponse, status_code=201)
def bulk_create_transactions(
    data: BulkTransactionRequest,
    service: BudgetService = Depends(get_budget_service),
):
    """
    Create many transactions at once.

    Invalid items are skipped and reported in ``errors``; the request fails
    only when no item could be created.
    """
    result = service.bulk_create(data.transactions)
    return BulkTransactionResponse(
        created=len(result.created),
        transactions=[TransactionResponse.model_validate(t) for t in result.created],
        errors=result.errors,
    )


@transactions_router.put("/reorder", status_code=204)
def reorder_transactions(
    data: ReorderRequest,
    service: BudgetService = Depends(get_budget_service),
):
    service.reorder(data.transaction_ids)


@transactions_router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(transaction_id: str, service: BudgetService = Depends(get_budget_service)):
    return TransactionResponse.model_validate(service.get_transaction(transaction_id))


@transactions_router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    data: TransactionUpdateRequest,
    service: BudgetService = Depends(get_budget_service),
):
    patch = TransactionUpdate(**data.model_dump(exclude_unset=True))
    transaction = service.update_transaction(transaction_id, patch)
    return TransactionResponse.model_validate(transaction)


@transactions_router.delete("/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: str, service: BudgetService = Depends(get_budget_service)):
    service.delete_transaction(transaction_id)


# =============================================================================
# Analyses
# =============================================================================


@analysis_router.get("/budget-analysis", response_model=BudgetAnalysisResponse)
def budget_analysis(
    period_type: BudgetPeriodType = Query(BudgetPeriodType.MONTH),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    service: BudgetAnalysisService = Depends(get_budget_analysis_service),
):
    """Allocated vs. spent per active category for the month, pay period or a custom window."""
    view = service.budget_analysis(
        period_type=period_type,
        start_date=start_date,
        end_date=end_date,
    )
    return BudgetAnalysisResponse.model_validate(view)


@analysis_router.get("/overspending-analysis", response_model=OverspendingAnalysisResponse)
def overspending_analysis(
    periods: int = Query(6, ge=1, le=26, description="Number of past pay periods"),
    service: BudgetAnalysisService = Depends(get_budget_analysis_service),
):
    return OverspendingAnalysisResponse.model_validate(service.overspending_analysis(periods))


@analysis_router.get("/total-spending", response_model=TotalSpendingResponse)
def total_spending(
    start_date: date = Query(...),
    end_date: date = Query(...),
    service: BudgetAnalysisService = Depends(get_budget_analysis_service),
):
    return TotalSpendingResponse.model_validate(service.total_spending(start_date, end_date))
