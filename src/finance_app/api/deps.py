"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from finance_app.repositories.sqlalchemy.database import get_db
from finance_app.repositories.sqlalchemy import (
    SqlAlchemyAssetSnapshotRepository,
    SqlAlchemyFundAccountRepository,
    SqlAlchemyCreditCardRepository,
    SqlAlchemyBudgetCategoryRepository,
    SqlAlchemyTransactionRepository,
    SqlAlchemyRecurringCategoryRepository,
    SqlAlchemyRecurringTransactionRepository,
    SqlAlchemyPayPeriodStateRepository,
    SqlAlchemyManualPendingRepository,
    SqlAlchemyIncomeEntryRepository,
    SqlAlchemyInvestmentRepository,
    SqlAlchemyPaySettingsRepository,
    SqlAlchemyIncomeDataRepository,
    SqlAlchemySavingsPlanRepository,
    SqlAlchemyUserSettingsRepository,
)
from finance_app.providers import (
    MarketDataProvider,
    StubMarketDataProvider,
    YahooMarketDataProvider,
)
from finance_app.services import (
    AssetService,
    BudgetService,
    BudgetAnalysisService,
    RecurringService,
    IncomeService,
    SettingsService,
    MarketDataService,
    InvestmentService,
    DashboardService,
)
from finance_app.backup import BackupExporter, BackupImporter
from finance_app.config.settings import get_settings


def get_asset_service(db: Session = Depends(get_db)) -> AssetService:
    """Provide AssetService instance."""
    return AssetService(
        snapshot_repo=SqlAlchemyAssetSnapshotRepository(db),
        fund_account_repo=SqlAlchemyFundAccountRepository(db),
        credit_card_repo=SqlAlchemyCreditCardRepository(db),
    )


def get_budget_service(db: Session = Depends(get_db)) -> BudgetService:
    """Provide BudgetService instance."""
    return BudgetService(
        category_repo=SqlAlchemyBudgetCategoryRepository(db),
        transaction_repo=SqlAlchemyTransactionRepository(db),
    )


def get_budget_analysis_service(db: Session = Depends(get_db)) -> BudgetAnalysisService:
    return BudgetAnalysisService(
        category_repo=SqlAlchemyBudgetCategoryRepository(db),
        transaction_repo=SqlAlchemyTransactionRepository(db),
        pay_settings_repo=SqlAlchemyPaySettingsRepository(db),
    )


def get_recurring_service(db: Session = Depends(get_db)) -> RecurringService:
    """Provide RecurringService instance."""
    return RecurringService(
        category_repo=SqlAlchemyRecurringCategoryRepository(db),
        bill_repo=SqlAlchemyRecurringTransactionRepository(db),
        state_repo=SqlAlchemyPayPeriodStateRepository(db),
        manual_repo=SqlAlchemyManualPendingRepository(db),
        pay_settings_repo=SqlAlchemyPaySettingsRepository(db),
    )


def get_income_service(db: Session = Depends(get_db)) -> IncomeService:
    return IncomeService(
        income_repo=SqlAlchemyIncomeDataRepository(db),
        entry_repo=SqlAlchemyIncomeEntryRepository(db),
        savings_plan_repo=SqlAlchemySavingsPlanRepository(db),
    )


def get_settings_service(db: Session = Depends(get_db)) -> SettingsService:
    return SettingsService(
        pay_settings_repo=SqlAlchemyPaySettingsRepository(db),
        user_settings_repo=SqlAlchemyUserSettingsRepository(db),
    )


def get_market_provider() -> MarketDataProvider:
    """Provide the configured MarketDataProvider ("stub" for offline operation)."""
    settings = get_settings()
    if settings.market_data_provider.lower() == "stub":
        return StubMarketDataProvider()
    return YahooMarketDataProvider(fetch_timeout_seconds=settings.quote_fetch_timeout_seconds)


# Shared across requests so cached quotes outlive a single request
_market_data_service: Optional[MarketDataService] = None


def get_market_data_service() -> MarketDataService:
    """Provide the process-wide MarketDataService instance."""
    global _market_data_service
    if _market_data_service is None:
        settings = get_settings()
        _market_data_service = MarketDataService(
            provider=get_market_provider(),
            cache_ttl_seconds=settings.quote_cache_ttl_seconds,
        )
    return _market_data_service


def reset_market_data_service() -> None:
    """Drop the shared instance so the next request rebuilds it from settings."""
    global _market_data_service
    _market_data_service = None


def get_investment_service(
    db: Session = Depends(get_db),
    market_data_service: MarketDataService = Depends(get_market_data_service),
) -> InvestmentService:
    """Provide InvestmentService instance."""
    return InvestmentService(
        investment_repo=SqlAlchemyInvestmentRepository(db),
        market_data=market_data_service,
    )


def get_dashboard_service(
    asset_service: AssetService = Depends(get_asset_service),
    budget_service: BudgetService = Depends(get_budget_service),
    budget_analysis_service: BudgetAnalysisService = Depends(get_budget_analysis_service),
    recurring_service: RecurringService = Depends(get_recurring_service),
    income_service: IncomeService = Depends(get_income_service),
    investment_service: InvestmentService = Depends(get_investment_service),
) -> DashboardService:
    """Provide DashboardService instance."""
    return DashboardService(
        asset_service=asset_service,
        budget_service=budget_service,
        budget_analysis_service=budget_analysis_service,
        recurring_service=recurring_service,
        income_service=income_service,
        investment_service=investment_service,
    )


def get_backup_exporter(db: Session = Depends(get_db)) -> BackupExporter:
    return BackupExporter(db)


def get_backup_importer(db: Session = Depends(get_db)) -> BackupImporter:
    return BackupImporter(db)
