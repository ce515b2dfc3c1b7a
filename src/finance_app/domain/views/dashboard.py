"""View models for dashboard, savings and account totals."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from finance_app.domain.models import AssetSnapshot, CreditCard, FundAccount


@dataclass
class FundAccountsView:
    accounts: list[FundAccount] = field(default_factory=list)
    total: Decimal = field(default_factory=lambda: Decimal("0"))
    investing_total: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class CreditCardsView:
    cards: list[CreditCard] = field(default_factory=list)
    total_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    total_limit: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def utilization_percent(self) -> Decimal:
        if self.total_limit == 0:
            return Decimal("0")
        return (self.total_balance / self.total_limit * 100).quantize(Decimal("0.01"))


@dataclass
class NetWorthView:
    """Savings minus credit card debt."""

    total_savings: Decimal
    total_debt: Decimal
    net_worth: Decimal


@dataclass
class ProjectedSavingsView:
    """What should be left over after the next pay period."""

    pay_period_income: Decimal
    recurring_expenses: Decimal
    budget_allocation: Decimal
    projected_savings: Decimal


@dataclass
class SavingsProjectionView:
    """Year-by-year retirement savings projection."""

    ages: list[int]
    totals: list[Decimal]
    projected_amount: Decimal
    total_contributions: Decimal
    total_growth: Decimal


@dataclass
class DashboardView:
    assets: AssetSnapshot
    net_worth: NetWorthView
    projected_savings: ProjectedSavingsView
    next_pay_date: Optional[date] = None
    days_until_payday: Optional[int] = None
    pending_bills_total: Decimal = field(default_factory=lambda: Decimal("0"))
    pending_tip_total: Decimal = field(default_factory=lambda: Decimal("0"))
    pending_cashback_total: Decimal = field(default_factory=lambda: Decimal("0"))
    available_checking: Decimal = field(default_factory=lambda: Decimal("0"))
    budget_remaining: Decimal = field(default_factory=lambda: Decimal("0"))
