"""SQLAlchemy repository implementations."""

from finance_app.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
    Base,
)
from finance_app.repositories.sqlalchemy.asset_repo import (
    SqlAlchemyAssetSnapshotRepository,
    SqlAlchemyFundAccountRepository,
    SqlAlchemyCreditCardRepository,
)
from finance_app.repositories.sqlalchemy.budget_repo import (
    SqlAlchemyBudgetCategoryRepository,
    SqlAlchemyTransactionRepository,
)
from finance_app.repositories.sqlalchemy.recurring_repo import (
    SqlAlchemyRecurringCategoryRepository,
    SqlAlchemyRecurringTransactionRepository,
    SqlAlchemyPayPeriodStateRepository,
    SqlAlchemyManualPendingRepository,
)
from finance_app.repositories.sqlalchemy.income_repo import SqlAlchemyIncomeEntryRepository
from finance_app.repositories.sqlalchemy.investment_repo import SqlAlchemyInvestmentRepository
from finance_app.repositories.sqlalchemy.settings_repo import (
    SqlAlchemyPaySettingsRepository,
    SqlAlchemyIncomeDataRepository,
    SqlAlchemySavingsPlanRepository,
    SqlAlchemyUserSettingsRepository,
)

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "get_session",
    "init_db",
    "init_db_with_path",
    "reset_database",
    "Base",
    "SqlAlchemyAssetSnapshotRepository",
    "SqlAlchemyFundAccountRepository",
    "SqlAlchemyCreditCardRepository",
    "SqlAlchemyBudgetCategoryRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyRecurringCategoryRepository",
    "SqlAlchemyRecurringTransactionRepository",
    "SqlAlchemyPayPeriodStateRepository",
    "SqlAlchemyManualPendingRepository",
    "SqlAlchemyIncomeEntryRepository",
    "SqlAlchemyInvestmentRepository",
    "SqlAlchemyPaySettingsRepository",
    "SqlAlchemyIncomeDataRepository",
    "SqlAlchemySavingsPlanRepository",
    "SqlAlchemyUserSettingsRepository",
]
