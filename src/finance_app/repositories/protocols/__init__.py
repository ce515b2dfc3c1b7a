"""Repository protocol definitions (interfaces)."""

from finance_app.repositories.protocols.asset_repo import (
    AssetSnapshotRepository,
    FundAccountRepository,
    CreditCardRepository,
)
from finance_app.repositories.protocols.budget_repo import (
    BudgetCategoryRepository,
    TransactionRepository,
)
from finance_app.repositories.protocols.recurring_repo import (
    RecurringCategoryRepository,
    RecurringTransactionRepository,
    PayPeriodStateRepository,
    ManualPendingRepository,
)
from finance_app.repositories.protocols.income_repo import IncomeEntryRepository
from finance_app.repositories.protocols.investment_repo import InvestmentRepository
from finance_app.repositories.protocols.settings_repo import (
    PaySettingsRepository,
    IncomeDataRepository,
    SavingsPlanRepository,
    UserSettingsRepository,
)

__all__ = [
    "AssetSnapshotRepository",
    "FundAccountRepository",
    "CreditCardRepository",
    "BudgetCategoryRepository",
    "TransactionRepository",
    "RecurringCategoryRepository",
    "RecurringTransactionRepository",
    "PayPeriodStateRepository",
    "ManualPendingRepository",
    "IncomeEntryRepository",
    "InvestmentRepository",
    "PaySettingsRepository",
    "IncomeDataRepository",
    "SavingsPlanRepository",
    "UserSettingsRepository",
]
