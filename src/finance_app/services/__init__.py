"""Service layer - business logic orchestration."""

from finance_app.services.asset_service import (
    AssetService,
    AssetBalances,
    FundAccountCreate,
    FundAccountUpdate,
    CreditCardCreate,
    CreditCardUpdate,
)
from finance_app.services.budget_service import (
    BudgetService,
    BudgetCategoryCreate,
    BudgetCategoryUpdate,
    TransactionCreate,
    TransactionUpdate,
)
from finance_app.services.budget_analysis_service import BudgetAnalysisService
from finance_app.services.recurring_service import (
    RecurringService,
    RecurringTransactionCreate,
    RecurringTransactionUpdate,
    ManualPendingCreate,
    ManualPendingUpdate,
)
from finance_app.services.income_service import (
    IncomeService,
    IncomeEntryCreate,
    IncomeEntryUpdate,
)
from finance_app.services.settings_service import SettingsService
from finance_app.services.market_data_service import MarketDataService
from finance_app.services.investment_service import (
    InvestmentService,
    InvestmentCreate,
    InvestmentUpdate,
)
from finance_app.services.dashboard_service import DashboardService

__all__ = [
    "AssetService",
    "AssetBalances",
    "FundAccountCreate",
    "FundAccountUpdate",
    "CreditCardCreate",
    "CreditCardUpdate",
    "BudgetService",
    "BudgetCategoryCreate",
    "BudgetCategoryUpdate",
    "TransactionCreate",
    "TransactionUpdate",
    "BudgetAnalysisService",
    "RecurringService",
    "RecurringTransactionCreate",
    "RecurringTransactionUpdate",
    "ManualPendingCreate",
    "ManualPendingUpdate",
    "IncomeService",
    "IncomeEntryCreate",
    "IncomeEntryUpdate",
    "SettingsService",
    "MarketDataService",
    "InvestmentService",
    "InvestmentCreate",
    "InvestmentUpdate",
    "DashboardService",
]
