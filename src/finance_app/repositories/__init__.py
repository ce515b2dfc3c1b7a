"""Repository layer - data access abstractions and implementations."""

from finance_app.repositories.protocols import (
    AssetSnapshotRepository,
    FundAccountRepository,
    CreditCardRepository,
    BudgetCategoryRepository,
    TransactionRepository,
    RecurringCategoryRepository,
    RecurringTransactionRepository,
    PayPeriodStateRepository,
    ManualPendingRepository,
    IncomeEntryRepository,
    InvestmentRepository,
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
