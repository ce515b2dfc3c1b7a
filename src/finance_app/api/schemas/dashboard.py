"""Pydantic schemas for the dashboard summary."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from finance_app.api.schemas.assets import AssetSnapshotResponse


class NetWorthResponse(BaseModel):
    model_config = {"from_attributes": True}

    total_savings: Decimal
    total_debt: Decimal
    net_worth: Decimal


class ProjectedSavingsResponse(BaseModel):
    model_config = {"from_attributes": True}

    pay_period_income: Decimal
    recurring_expenses: Decimal
    budget_allocation: Decimal
    projected_savings: Decimal


class DashboardResponse(BaseModel):
    model_config = {"from_attributes": True}

    assets: AssetSnapshotResponse
    net_worth: NetWorthResponse
    projected_savings: ProjectedSavingsResponse
    next_pay_date: Optional[date] = None
    days_until_payday: Optional[int] = None
    pending_bills_total: Decimal
    pending_tip_total: Decimal
    pending_cashback_total: Decimal
    available_checking: Decimal
    budget_remaining: Decimal
