"""Pydantic schemas for income and the savings plan."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from finance_app.domain.models import IncomeFrequency


class IncomeDataRequest(BaseModel):
    pay_amount: Decimal = Field(..., ge=0, description="Amount of one paycheck")
    pay_frequency: IncomeFrequency = IncomeFrequency.BIWEEKLY
    work_hours_per_week: int = Field(default=40, ge=1, le=168)
    work_days_per_week: int = Field(default=5, ge=1, le=7)
    bonus_percentage: Decimal = Field(default=Decimal("10"), ge=0, le=100)


class IncomeDataResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: Optional[str] = None
    pay_amount: Decimal
    pay_frequency: IncomeFrequency
    work_hours_per_week: int
    work_days_per_week: int
    bonus_percentage: Decimal
    pay_period_income: Optional[Decimal] = None


class IncomeEntryCreateRequest(BaseModel):
    source: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., ge=0)
    date: dt.date
    is_recurring: bool = False
    frequency: Optional[str] = Field(default=None, max_length=20)
    notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("frequency")
    @classmethod
    def validate_frequency(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in {f.value for f in IncomeFrequency}:
            raise ValueError(f"Unknown frequency: {v}")
        return v


class IncomeEntryUpdateRequest(BaseModel):
    source: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(default=None, ge=0)
    date: Optional[dt.date] = None
    is_recurring: Optional[bool] = None
    frequency: Optional[str] = Field(default=None, max_length=20)
    notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("frequency")
    @classmethod
    def validate_frequency(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in {f.value for f in IncomeFrequency}:
            raise ValueError(f"Unknown frequency: {v}")
        return v


class IncomeEntryResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    source: str
    amount: Decimal
    date: dt.date
    is_recurring: bool
    frequency: Optional[str] = None
    notes: Optional[str] = None


class IncomeEntryListResponse(BaseModel):
    entries: list[IncomeEntryResponse]
    total: Decimal


class SavingsPlanRequest(BaseModel):
    current_age: int = Field(..., ge=18, le=100)
    retirement_age: int = Field(..., le=100)
    current_savings: Decimal = Field(default=Decimal("0"), ge=0)
    yearly_contribution: Decimal = Field(default=Decimal("0"), ge=0)
    yearly_bonus: Decimal = Field(default=Decimal("0"), ge=0)
    annual_return: Decimal = Field(default=Decimal("7"), ge=-100, le=100, description="Percent per year")


class SavingsPlanResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: Optional[str] = None
    current_age: int
    retirement_age: int
    current_savings: Decimal
    yearly_contribution: Decimal
    yearly_bonus: Decimal
    annual_return: Decimal


class SavingsProjectionResponse(BaseModel):
    model_config = {"from_attributes": True}

    ages: list[int]
    totals: list[Decimal]
    projected_amount: Decimal
    total_contributions: Decimal
    total_growth: Decimal
