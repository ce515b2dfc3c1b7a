"""View models for service outputs."""

from finance_app.domain.views.pay_period import PayPeriod, PendingBill, PendingBillsView
from finance_app.domain.views.budget import (
    CategoryBudgetView,
    BudgetSummaryView,
    BudgetAnalysisView,
    CategoryOverspendView,
    OverspendingPeriodView,
    ProblematicCategoryView,
    OverspendingSummaryView,
    OverspendingAnalysisView,
    CategorySpendingView,
    SpendingGroupSummary,
    TotalSpendingView,
    BulkCreateResult,
)
from finance_app.domain.views.portfolio import (
    Quote,
    PortfolioSummaryView,
    PriceRefreshView,
    StockPriceView,
)
from finance_app.domain.views.dashboard import (
    FundAccountsView,
    CreditCardsView,
    NetWorthView,
    ProjectedSavingsView,
    SavingsProjectionView,
    DashboardView,
)
from finance_app.domain.views.backup import ImportSummary

__all__ = [
    "PayPeriod",
    "PendingBill",
    "PendingBillsView",
    "CategoryBudgetView",
    "BudgetSummaryView",
    "BudgetAnalysisView",
    "CategoryOverspendView",
    "OverspendingPeriodView",
    "ProblematicCategoryView",
    "OverspendingSummaryView",
    "OverspendingAnalysisView",
    "CategorySpendingView",
    "SpendingGroupSummary",
    "TotalSpendingView",
    "BulkCreateResult",
    "Quote",
    "PortfolioSummaryView",
    "PriceRefreshView",
    "StockPriceView",
    "FundAccountsView",
    "CreditCardsView",
    "NetWorthView",
    "ProjectedSavingsView",
    "SavingsProjectionView",
    "DashboardView",
    "ImportSummary",
]
