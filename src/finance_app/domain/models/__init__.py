"""Domain models package."""

from finance_app.domain.models.enums import (
    PayFrequency,
    IncomeFrequency,
    BudgetPeriodType,
    Theme,
)
from finance_app.domain.models.assets import (
    AssetSnapshot,
    FundAccount,
    CreditCard,
    ASSET_BALANCE_FIELDS,
)
from finance_app.domain.models.budget import BudgetCategory, Transaction
from finance_app.domain.models.recurring import (
    PaySettings,
    RecurringCategory,
    RecurringTransaction,
    CompletedTransaction,
    PendingOverride,
    ManualPendingTransaction,
)
from finance_app.domain.models.income import IncomeData, IncomeEntry, SavingsPlan
from finance_app.domain.models.investment import Investment
from finance_app.domain.models.user import UserSettings

__all__ = [
    "PayFrequency",
    "IncomeFrequency",
    "BudgetPeriodType",
    "Theme",
    "AssetSnapshot",
    "FundAccount",
    "CreditCard",
    "ASSET_BALANCE_FIELDS",
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
]
