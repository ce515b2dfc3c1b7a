"""Pydantic schemas for investment endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class InvestmentCreateRequest(BaseModel):
    """Request schema for adding a holding."""

    symbol: str = Field(..., min_length=1, max_length=20, description="Ticker symbol")
    name: str = Field(default="", max_length=255)
    shares: Decimal = Field(..., gt=0)
    avg_price: Decimal = Field(..., gt=0, description="Average cost per share")
    current_price: Optional[Decimal] = Field(default=None, gt=0)

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()


class InvestmentUpdateRequest(BaseModel):
    symbol: Optional[str] = Field(default=None, min_length=1, max_length=20)
    name: Optional[str] = Field(default=None, max_length=255)
    shares: Optional[Decimal] = Field(default=None, gt=0)
    avg_price: Optional[Decimal] = Field(default=None, gt=0)
    current_price: Optional[Decimal] = Field(default=None, gt=0)

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().upper() if v else v


class PriceUpdateRequest(BaseModel):
    price: Decimal = Field(..., gt=0)


class InvestmentResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    symbol: str
    name: str
    shares: Decimal
    avg_price: Decimal
    current_price: Optional[Decimal] = None
    prev_day_price: Optional[Decimal] = None
    last_updated: Optional[datetime] = None
    market_value: Decimal
    cost_basis: Decimal


class PortfolioSummaryResponse(BaseModel):
    """Holdings with portfolio totals."""

    model_config = {"from_attributes": True}

    investments: list[InvestmentResponse]
    total_value: Decimal
    total_cost: Decimal
    total_gain_loss: Decimal
    total_gain_loss_percent: Decimal
    day_change: Decimal
    day_change_percent: Decimal
    last_updated: Optional[datetime] = None


class PriceRefreshResponse(BaseModel):
    model_config = {"from_attributes": True}

    summary: PortfolioSummaryResponse
    updated_symbols: list[str]
    failed_symbols: list[str]


class SnapshotResponse(BaseModel):
    success: bool = True
    count: int
    message: str


class StockPriceResponse(BaseModel):
    """Single quote; ``price`` is null and ``error`` set when no quote was found."""

    model_config = {"from_attributes": True}

    symbol: str
    price: Optional[Decimal] = None
    previous_close: Optional[Decimal] = None
    change: Optional[Decimal] = None
    change_percent: Optional[Decimal] = None
    currency: Optional[str] = None
    last_updated: Optional[datetime] = None
    error: Optional[str] = None
