"""Pydantic schemas for budget categories, transactions and analyses."""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field

from finance_app.domain.models import BudgetPeriodType


class BudgetCategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    allocated_amount: Decimal = Field(default=Decimal("0"), ge=0, description="Monthly budget")
    color: str = Field(default="#3B82F6", max_length=20)
    is_active: bool = True
    is_budget_category: bool = Field(
        default=True,
        description="False for tracking-only categories",
    )


class BudgetCategoryUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    allocated_amount: Optional[Decimal] = Field(default=None, ge=0)
    color: Optional[str] = Field(default=None, max_length=20)
    is_active: Optional[bool] = None
    is_budget_category: Optional[bool] = None


class BudgetCategoryResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    allocated_amount: Decimal
    color: str
    is_active: bool
    is_budget_category: bool


class BudgetCategoryListResponse(BaseModel):
    categories: list[BudgetCategoryResponse]
    total_allocated: Decimal


class TransactionCreateRequest(BaseModel):
    """Request schema for recording a spending transaction."""

    date: dt.date
    category_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0)
    cash_back: Decimal = Field(default=Decimal("0"), ge=0)
    cashback_posted: bool = False
    notes: Optional[str] = Field(default=None, max_length=1000)
    pending: bool = False
    pending_tip_amount: Decimal = Field(default=Decimal("0"), ge=0)


class TransactionUpdateRequest(BaseModel):
    """Request schema for updating a transaction (partial update)."""

    date: Optional[dt.date] = None
    category_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(default=None, ge=0)
    cash_back: Optional[Decimal] = Field(default=None, ge=0)
    cashback_posted: Optional[bool] = None
    notes: Optional[str] = Field(default=None, max_length=1000)
    pending: Optional[bool] = None
    pending_tip_amount: Optional[Decimal] = Field(default=None, ge=0)


class TransactionResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    date: dt.date
    category_id: str
    name: str
    amount: Decimal
    cash_back: Decimal
    cashback_posted: bool
    notes: Optional[str] = None
    pending: bool
    pending_tip_amount: Decimal
    sort_order: int


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse]
    count: int


class BulkTransactionRequest(BaseModel):
    """Raw items; each one is validated separately so one bad row does not fail the batch."""

    transactions: list[dict[str, Any]]


class BulkTransactionResponse(BaseModel):
    created: int
    transactions: list[TransactionResponse]
    errors: list[str] = Field(default_factory=list)


class ReorderRequest(BaseModel):
    transaction_ids: list[str] = Field(..., description="Ids in display order, first on top")


class CategoryBudgetResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    color: str
    allocated_amount: Decimal
    full_month_amount: Decimal
    spent: Decimal
    cash_back: Decimal
    raw_spent: Decimal
    remaining: Decimal
    days_in_period: int


class BudgetSummaryResponse(BaseModel):
    model_config = {"from_attributes": True}

    total_allocated: Decimal
    total_monthly_allocated: Decimal
    total_spent: Decimal
    total_cash_back: Decimal
    total_raw_spent: Decimal
    total_remaining: Decimal
    total_pending_tip_amount: Decimal
    total_pending_cashback_amount: Decimal
    start_date: dt.date
    end_date: dt.date
    days_in_period: int
    period_type: BudgetPeriodType


class BudgetAnalysisResponse(BaseModel):
    model_config = {"from_attributes": True}

    categories: list[CategoryBudgetResponse]
    summary: BudgetSummaryResponse


class CategoryOverspendResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    color: str
    budget_amount: Decimal
    spent: Decimal
    overspent: Decimal
    overspent_percentage: Decimal
    transactions: list[TransactionResponse]


class OverspendingPeriodResponse(BaseModel):
    model_config = {"from_attributes": True}

    start_date: dt.date
    end_date: dt.date
    total_budget: Decimal
    total_spent: Decimal
    overspent: Decimal
    categories: list[CategoryOverspendResponse]
    biggest_transactions: list[TransactionResponse]


class ProblematicCategoryResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    color: str
    total_overspent: Decimal
    occurrences: int
    average_overspent: Decimal


class OverspendingSummaryResponse(BaseModel):
    model_config = {"from_attributes": True}

    total_overspent: Decimal
    average_overspent: Decimal
    periods_analyzed: int
    problematic_categories: list[ProblematicCategoryResponse]


class OverspendingAnalysisResponse(BaseModel):
    model_config = {"from_attributes": True}

    periods: list[OverspendingPeriodResponse]
    summary: OverspendingSummaryResponse
    pay_frequency: str


class CategorySpendingResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    color: str
    spent: Decimal
    cash_back: Decimal
    raw_spent: Decimal
    allocated_amount: Decimal
    is_budget_category: bool


class SpendingGroupResponse(BaseModel):
    model_config = {"from_attributes": True}

    total_spent: Decimal
    total_cash_back: Decimal
    total_raw_spent: Decimal
    category_count: int


class TotalSpendingResponse(BaseModel):
    model_config = {"from_attributes": True}

    budget_categories: list[CategorySpendingResponse]
    tracking_categories: list[CategorySpendingResponse]
    budget: SpendingGroupResponse
    tracking: SpendingGroupResponse
    overall: SpendingGroupResponse
    start_date: dt.date
    end_date: dt.date
