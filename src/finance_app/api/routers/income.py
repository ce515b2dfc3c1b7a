"""Income data, income entries and the savings plan."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from finance_app.api.deps import get_income_service
from finance_app.api.schemas.income import (
    IncomeDataRequest,
    IncomeDataResponse,
    IncomeEntryCreateRequest,
    IncomeEntryUpdateRequest,
    IncomeEntryResponse,
    IncomeEntryListResponse,
    SavingsPlanRequest,
    SavingsPlanResponse,
    SavingsProjectionResponse,
)
from finance_app.domain.models import IncomeData, SavingsPlan
from finance_app.services import IncomeService, IncomeEntryCreate, IncomeEntryUpdate

router = APIRouter(prefix="/income", tags=["income"])
entries_router = APIRouter(prefix="/income-entries", tags=["income"])
savings_plan_router = APIRouter(prefix="/savings-plan", tags=["income"])


def _income_response(income: IncomeData, service: IncomeService) -> IncomeDataResponse:
    response = IncomeDataResponse.model_validate(income)
    response.pay_period_income = service.pay_period_income()
    return response


@router.get("", response_model=IncomeDataResponse)
def get_income(service: IncomeService = Depends(get_income_service)):
    """Saved income data (or defaults) with the biweekly pay period income."""
    return _income_response(service.get_income(), service)


@router.post("", response_model=IncomeDataResponse)
def save_income(data: IncomeDataRequest, service: IncomeService = Depends(get_income_service)):
    saved = service.save_income(IncomeData(**data.model_dump()))
    return _income_response(saved, service)


# =============================================================================
# Income entries
# =============================================================================


@entries_router.get("", response_model=IncomeEntryListResponse)
def list_income_entries(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    service: IncomeService = Depends(get_income_service),
):
    entries, total = service.list_entries(start_date=start_date, end_date=end_date)
    return IncomeEntryListResponse(
        entries=[IncomeEntryResponse.model_validate(e) for e in entries],
        total=total,
    )


@entries_router.post("", response_model=IncomeEntryResponse, status_code=201)
def create_income_entry(
    data: IncomeEntryCreateRequest,
    service: IncomeService = Depends(get_income_service),
):
    entry = service.create_entry(IncomeEntryCreate(**data.model_dump()))
    return IncomeEntryResponse.model_validate(entry)


@entries_router.put("/{entry_id}", response_model=IncomeEntryResponse)
def update_income_entry(
    entry_id: str,
    data: IncomeEntryUpdateRequest,
    service: IncomeService = Depends(get_income_service),
):
    patch = IncomeEntryUpdate(**data.model_dump(exclude_unset=True))
    entry = service.update_entry(entry_id, patch)
    return IncomeEntryResponse.model_validate(entry)


@entries_router.delete("/{entry_id}", status_code=204)
def delete_income_entry(entry_id: str, service: IncomeService = Depends(get_income_service)):
    service.delete_entry(entry_id)


# =============================================================================
# Savings plan
# =============================================================================


@savings_plan_router.get("", response_model=SavingsPlanResponse)
def get_savings_plan(service: IncomeService = Depends(get_income_service)):
    return SavingsPlanResponse.model_validate(service.get_savings_plan())


@savings_plan_router.post("", response_model=SavingsPlanResponse)
def save_savings_plan(
    data: SavingsPlanRequest,
    service: IncomeService = Depends(get_income_service),
):
    plan = service.save_savings_plan(SavingsPlan(**data.model_dump()))
    return SavingsPlanResponse.model_validate(plan)


@savings_plan_router.get("/projection", response_model=SavingsProjectionResponse)
def get_savings_projection(service: IncomeService = Depends(get_income_service)):
    """Year-by-year balance for the saved plan."""
    return SavingsProjectionResponse.model_validate(service.project())
