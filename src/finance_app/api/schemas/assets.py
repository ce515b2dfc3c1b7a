"""Pydantic schemas for asset, fund account and credit card endpoints."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class AssetSnapshotRequest(BaseModel):
    """Request schema for recording today's balances."""

    cash: Decimal = Field(default=Decimal("0"), description="Cash on hand")
    stocks: Decimal = Field(default=Decimal("0"))
    interest: Decimal = Field(default=Decimal("0"), description="High-yield savings")
    checking: Decimal = Field(default=Decimal("0"))
    retirement_401k: Decimal = Field(default=Decimal("0"))
    house_fund: Decimal = Field(default=Decimal("0"))
    vacation_fund: Decimal = Field(default=Decimal("0"))
    emergency_fund: Decimal = Field(default=Decimal("0"))


class AssetSnapshotResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: Optional[str] = None
    date: dt.date
    cash: Decimal
    stocks: Decimal
    interest: Decimal
    checking: Decimal
    retirement_401k: Decimal
    house_fund: Decimal
    vacation_fund: Decimal
    emergency_fund: Decimal
    total_assets: Decimal


class FundAccountCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(default=Decimal("0"), ge=0)
    description: Optional[str] = Field(default=None, max_length=1000)
    color: str = Field(default="#3B82F6", max_length=20)
    icon: Optional[str] = Field(default=None, max_length=50)
    is_active: bool = True
    is_investing: bool = False
    sort_order: int = 0


class FundAccountUpdateRequest(BaseModel):
    """Partial update; omitted fields are unchanged."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(default=None, ge=0)
    description: Optional[str] = Field(default=None, max_length=1000)
    color: Optional[str] = Field(default=None, max_length=20)
    icon: Optional[str] = Field(default=None, max_length=50)
    is_active: Optional[bool] = None
    is_investing: Optional[bool] = None
    sort_order: Optional[int] = None


class FundAccountResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    amount: Decimal
    description: Optional[str] = None
    color: str
    icon: Optional[str] = None
    is_active: bool
    is_investing: bool
    sort_order: int


class FundAccountListResponse(BaseModel):
    model_config = {"from_attributes": True}

    accounts: list[FundAccountResponse]
    total: Decimal
    investing_total: Decimal


class CreditCardCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    balance: Decimal = Field(default=Decimal("0"), ge=0)
    limit: Decimal = Field(..., gt=0, description="Credit limit")
    color: str = Field(default="#000000", max_length=20)


class CreditCardUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    balance: Optional[Decimal] = Field(default=None, ge=0)
    limit: Optional[Decimal] = Field(default=None, gt=0)
    color: Optional[str] = Field(default=None, max_length=20)


class CreditCardResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    name: str
    balance: Decimal
    limit: Decimal
    color: str
    utilization_percent: Decimal


class CreditCardListResponse(BaseModel):
    model_config = {"from_attributes": True}

    cards: list[CreditCardResponse]
    total_balance: Decimal
    total_limit: Decimal
    utilization_percent: Decimal
