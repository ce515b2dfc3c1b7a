"""Pydantic schemas for recurring bills, pay settings and pay period state."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from finance_app.domain.models import PayFrequency


class RecurringCategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    color: str = Field(default="#6B7280", max_length=20)
    is_active: bool = True


class RecurringCategoryUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    color: Optional[str] = Field(default=None, max_length=20)
    is_active: Optional[bool] = None


class RecurringCategoryResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    color: str
    is_active: bool


class RecurringTransactionCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0)
    due_date: int = Field(..., ge=1, le=31, description="Day of the month the bill is due")
    is_essential: bool = False
    category_id: Optional[str] = None


class RecurringTransactionUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(default=None, ge=0)
    due_date: Optional[int] = Field(default=None, ge=1, le=31)
    is_essential: Optional[bool] = None
    category_id: Optional[str] = None


class RecurringTransactionResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    amount: Decimal
    due_date: int
    is_essential: bool
    category_id: Optional[str] = None


class PaySettingsRequest(BaseModel):
    last_pay_date: date = Field(..., description="Most recent payday")
    frequency: PayFrequency = PayFrequency.BIWEEKLY


class PaySettingsResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    last_pay_date: date
    frequency: PayFrequency


class PayPeriodResponse(BaseModel):
    model_config = {"from_attributes": True}

    start: date
    end: date
    end_inclusive: bool


class PendingBillResponse(BaseModel):
    model_config = {"from_attributes": True}

    recurring_transaction_id: str
    name: str
    amount: Decimal
    base_amount: Decimal
    due_date: date
    days_until_due: int
    pay_period_start: date
    pay_period_end: date
    is_essential: bool
    category_id: Optional[str] = None
    is_completed: bool
    has_override: bool


class PendingBillsResponse(BaseModel):
    """Bills due in one pay period; ``period`` is null before pay settings exist."""

    model_config = {"from_attributes": True}

    period: Optional[PayPeriodResponse] = None
    bills: list[PendingBillResponse]
    total_amount: Decimal
    pending_amount: Decimal
    count: int


class PendingOverrideRequest(BaseModel):
    recurring_transaction_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, description="Amount for this pay period only")
    pay_period_start: date
    pay_period_end: date


class PendingOverrideResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    recurring_transaction_id: str
    pay_period_start: date
    pay_period_end: date
    amount: Decimal


class CompletedTransactionRequest(BaseModel):
    recurring_transaction_id: str = Field(..., min_length=1)
    pay_period_start: date
    pay_period_end: date


class CompletedTransactionResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    recurring_transaction_id: str
    pay_period_start: date
    pay_period_end: date
    completed_date: date


class ManualPendingCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0)
    due_date: Optional[date] = None
    category_id: Optional[str] = None
    notes: Optional[str] = Field(default=None, max_length=1000)
    pay_period_start: Optional[date] = None
    pay_period_end: Optional[date] = None
    is_completed: bool = False


class ManualPendingUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(default=None, ge=0)
    due_date: Optional[date] = None
    category_id: Optional[str] = None
    notes: Optional[str] = Field(default=None, max_length=1000)
    pay_period_start: Optional[date] = None
    pay_period_end: Optional[date] = None
    is_completed: Optional[bool] = None


class ManualPendingCompletionRequest(BaseModel):
    is_completed: bool


class ManualPendingResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    amount: Decimal
    due_date: Optional[date] = None
    category_id: Optional[str] = None
    notes: Optional[str] = None
    pay_period_start: Optional[date] = None
    pay_period_end: Optional[date] = None
    is_completed: bool
