"""Domain layer - pure business models with no external dependencies."""

from finance_app.domain.models import (
    AssetSnapshot,
    FundAccount,
    CreditCard,
    BudgetCategory,
    Transaction,
    PaySettings,
    RecurringCategory,
    RecurringTransaction,
    CompletedTransaction,
    PendingOverride,
    ManualPendingTransaction,
    IncomeData,
    IncomeEntry,
    SavingsPlan,
    Investment,
    UserSettings,
    PayFrequency,
    IncomeFrequency,
    BudgetPeriodType,
    Theme,
)

__all__ = [
    "AssetSnapshot",
    "FundAccount",
    "CreditCard",
    "BudgetCategory",
    "Transaction",
    "PaySettings",
    "RecurringCategory",
    "RecurringTransaction",
    "CompletedTransaction",
    "PendingOverride",
    "ManualPendingTransaction",
    "IncomeData",
    "IncomeEntry",
    "SavingsPlan",
    "Investment",
    "UserSettings",
    "PayFrequency",
    "IncomeFrequency",
    "BudgetPeriodType",
    "Theme",
]
