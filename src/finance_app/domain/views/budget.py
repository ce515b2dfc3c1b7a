"""View models for budget, overspending and spending analyses."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from finance_app.domain.models import BudgetPeriodType, Transaction

ZERO = Decimal("0")


@dataclass
class CategoryBudgetView:
    """Allocation vs. spending for one category in a window."""

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


@dataclass
class BudgetSummaryView:
    """Totals across categories for a budget window."""

    total_allocated: Decimal
    total_monthly_allocated: Decimal
    total_spent: Decimal
    total_cash_back: Decimal
    total_raw_spent: Decimal
    total_remaining: Decimal
    total_pending_tip_amount: Decimal
    total_pending_cashback_amount: Decimal
    start_date: date
    end_date: date
    days_in_period: int
    period_type: BudgetPeriodType


@dataclass
class BudgetAnalysisView:
    categories: list[CategoryBudgetView]
    summary: BudgetSummaryView


@dataclass
class CategoryOverspendView:
    """A category that went over its prorated budget in one period."""

    id: str
    name: str
    color: str
    budget_amount: Decimal
    spent: Decimal
    overspent: Decimal
    overspent_percentage: Decimal
    transactions: list[Transaction] = field(default_factory=list)


@dataclass
class OverspendingPeriodView:
    start_date: date
    end_date: date
    total_budget: Decimal
    total_spent: Decimal
    overspent: Decimal
    categories: list[CategoryOverspendView] = field(default_factory=list)
    biggest_transactions: list[Transaction] = field(default_factory=list)


@dataclass
class ProblematicCategoryView:
    """Category that overspends repeatedly across periods."""

    id: str
    name: str
    color: str
    total_overspent: Decimal
    occurrences: int
    average_overspent: Decimal


@dataclass
class OverspendingSummaryView:
    total_overspent: Decimal
    average_overspent: Decimal
    periods_analyzed: int
    problematic_categories: list[ProblematicCategoryView] = field(default_factory=list)


@dataclass
class OverspendingAnalysisView:
    periods: list[OverspendingPeriodView]
    summary: OverspendingSummaryView
    pay_frequency: str


@dataclass
class CategorySpendingView:
    """Spending for one category, budget or tracking."""

    id: str
    name: str
    color: str
    spent: Decimal
    cash_back: Decimal
    raw_spent: Decimal
    allocated_amount: Decimal
    is_budget_category: bool


@dataclass
class SpendingGroupSummary:
    total_spent: Decimal = ZERO
    total_cash_back: Decimal = ZERO
    total_raw_spent: Decimal = ZERO
    category_count: int = 0


@dataclass
class TotalSpendingView:
    """Budget vs. tracking spending between two dates."""

    budget_categories: list[CategorySpendingView]
    tracking_categories: list[CategorySpendingView]
    budget: SpendingGroupSummary
    tracking: SpendingGroupSummary
    overall: SpendingGroupSummary
    start_date: date
    end_date: date


@dataclass
class BulkCreateResult:
    """Outcome of a bulk transaction insert."""

    created: list[Transaction] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
