"""Backup sections and the ORM tables they map to."""

from finance_app.repositories.sqlalchemy.orm_models import (
    AssetSnapshotORM,
    FundAccountORM,
    CreditCardORM,
    BudgetCategoryORM,
    TransactionORM,
    PaySettingsORM,
    RecurringCategoryORM,
    RecurringTransactionORM,
    CompletedTransactionORM,
    PendingOverrideORM,
    ManualPendingTransactionORM,
    IncomeDataORM,
    IncomeEntryORM,
    SavingsPlanORM,
    InvestmentORM,
    UserSettingsORM,
)

BACKUP_VERSION = "1.0"

# Parents before children: imports insert in this order, deletes run reversed
BACKUP_SECTIONS = {
    "assets": AssetSnapshotORM,
    "fund_accounts": FundAccountORM,
    "credit_cards": CreditCardORM,
    "budget_categories": BudgetCategoryORM,
    "transactions": TransactionORM,
    "pay_settings": PaySettingsORM,
    "recurring_categories": RecurringCategoryORM,
    "recurring_transactions": RecurringTransactionORM,
    "completed_transactions": CompletedTransactionORM,
    "pending_overrides": PendingOverrideORM,
    "manual_pending_transactions": ManualPendingTransactionORM,
    "income_data": IncomeDataORM,
    "income_entries": IncomeEntryORM,
    "savings_plan": SavingsPlanORM,
    "investments": InvestmentORM,
    "user_settings": UserSettingsORM,
}

# Sections whose rows reference another section's ids, as
# (dependent section, foreign key column, action). When the referenced
# section is replaced without its dependents, rows that would point at a
# missing id are deleted or have the reference cleared.
SECTION_DEPENDENTS = {
    "budget_categories": (
        ("transactions", "category_id", "delete"),
    ),
    "recurring_categories": (
        ("recurring_transactions", "category_id", "detach"),
    ),
    "recurring_transactions": (
        ("completed_transactions", "recurring_transaction_id", "delete"),
        ("pending_overrides", "recurring_transaction_id", "delete"),
    ),
}
