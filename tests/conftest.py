"""
Pytest configuration and fixtures for finance dashboard tests.

This module provides:
- In-memory SQLite database fixtures
- Repository and service fixtures
- Deterministic and failing market data providers
- Factory helpers for budget categories, transactions and bills
- FastAPI test client wired to the test database
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from finance_app.main import app
from finance_app.api.deps import get_market_data_service, reset_market_data_service
from finance_app.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from finance_app.repositories.sqlalchemy import orm_models  # noqa: F401
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
    BudgetCategoryCreate,
    TransactionCreate,
    RecurringTransactionCreate,
)
from finance_app.domain.models import BudgetCategory, Transaction, RecurringTransaction
from finance_app.domain.views import Quote
from finance_app.core.timezone import EASTERN_TZ, today_local
from finance_app.config.settings import Settings, set_settings, reset_settings


# =============================================================================
# DATE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def snapshot_repo(test_session) -> SqlAlchemyAssetSnapshotRepository:
    return SqlAlchemyAssetSnapshotRepository(test_session)


@pytest.fixture
def fund_account_repo(test_session) -> SqlAlchemyFundAccountRepository:
    return SqlAlchemyFundAccountRepository(test_session)


@pytest.fixture
def credit_card_repo(test_session) -> SqlAlchemyCreditCardRepository:
    return SqlAlchemyCreditCardRepository(test_session)


@pytest.fixture
def budget_category_repo(test_session) -> SqlAlchemyBudgetCategoryRepository:
    return SqlAlchemyBudgetCategoryRepository(test_session)


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyTransactionRepository:
    return SqlAlchemyTransactionRepository(test_session)


@pytest.fixture
def recurring_category_repo(test_session) -> SqlAlchemyRecurringCategoryRepository:
    return SqlAlchemyRecurringCategoryRepository(test_session)


@pytest.fixture
def bill_repo(test_session) -> SqlAlchemyRecurringTransactionRepository:
    return SqlAlchemyRecurringTransactionRepository(test_session)


@pytest.fixture
def state_repo(test_session) -> SqlAlchemyPayPeriodStateRepository:
    return SqlAlchemyPayPeriodStateRepository(test_session)


@pytest.fixture
def manual_pending_repo(test_session) -> SqlAlchemyManualPendingRepository:
    return SqlAlchemyManualPendingRepository(test_session)


@pytest.fixture
def income_entry_repo(test_session) -> SqlAlchemyIncomeEntryRepository:
    return SqlAlchemyIncomeEntryRepository(test_session)


@pytest.fixture
def investment_repo(test_session) -> SqlAlchemyInvestmentRepository:
    return SqlAlchemyInvestmentRepository(test_session)


@pytest.fixture
def pay_settings_repo(test_session) -> SqlAlchemyPaySettingsRepository:
    return SqlAlchemyPaySettingsRepository(test_session)


@pytest.fixture
def income_data_repo(test_session) -> SqlAlchemyIncomeDataRepository:
    return SqlAlchemyIncomeDataRepository(test_session)


@pytest.fixture
def savings_plan_repo(test_session) -> SqlAlchemySavingsPlanRepository:
    return SqlAlchemySavingsPlanRepository(test_session)


@pytest.fixture
def user_settings_repo(test_session) -> SqlAlchemyUserSettingsRepository:
    return SqlAlchemyUserSettingsRepository(test_session)


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Provides fixed quotes with no randomness and counts provider calls.
    """

    FIXED_QUOTES = {
        "AAPL": (Decimal("185.50"), Decimal("184.25")),  # +1.25 / +0.68%
        "GOOGL": (Decimal("142.75"), Decimal("141.50")),  # +1.25 / +0.88%
        "MSFT": (Decimal("378.25"), Decimal("376.80")),  # +1.45 / +0.38%
        "TSLA": (Decimal("248.75"), Decimal("250.10")),  # -1.35 / -0.54% (down)
        "VOO": (Decimal("445.10"), Decimal("443.90")),  # +1.20 / +0.27%
    }

    def __init__(self, as_of: Optional[datetime] = None):
        self._as_of = as_of or eastern_datetime(2024, 6, 15, 16, 0, 0)
        self.calls: list[list[str]] = []

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Return deterministic quotes for requested symbols."""
        self.calls.append(list(symbols))
        result = {}
        for symbol in symbols:
            upper_symbol = symbol.upper()
            if upper_symbol in self.FIXED_QUOTES:
                last_price, prev_close = self.FIXED_QUOTES[upper_symbol]
                result[upper_symbol] = Quote(
                    symbol=upper_symbol,
                    last_price=last_price,
                    prev_close=prev_close,
                    as_of=self._as_of,
                    currency="USD",
                )
        return result


class FailingMarketProvider:
    """Market provider that always raises an exception."""

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def deterministic_provider() -> DeterministicMarketProvider:
    """Provide deterministic market data provider."""
    return DeterministicMarketProvider()


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    """Provide a market provider that always fails."""
    return FailingMarketProvider()


@pytest.fixture
def market_data_service(deterministic_provider) -> MarketDataService:
    """Provide test MarketDataService with deterministic provider."""
    return MarketDataService(
        provider=deterministic_provider,
        cache_ttl_seconds=60,
    )


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def asset_service(snapshot_repo, fund_account_repo, credit_card_repo) -> AssetService:
    return AssetService(
        snapshot_repo=snapshot_repo,
        fund_account_repo=fund_account_repo,
        credit_card_repo=credit_card_repo,
    )


@pytest.fixture
def budget_service(budget_category_repo, transaction_repo) -> BudgetService:
    return BudgetService(
        category_repo=budget_category_repo,
        transaction_repo=transaction_repo,
    )


@pytest.fixture
def budget_analysis_service(
    budget_category_repo,
    transaction_repo,
    pay_settings_repo,
) -> BudgetAnalysisService:
    return BudgetAnalysisService(
        category_repo=budget_category_repo,
        transaction_repo=transaction_repo,
        pay_settings_repo=pay_settings_repo,
    )


@pytest.fixture
def recurring_service(
    recurring_category_repo,
    bill_repo,
    state_repo,
    manual_pending_repo,
    pay_settings_repo,
) -> RecurringService:
    return RecurringService(
        category_repo=recurring_category_repo,
        bill_repo=bill_repo,
        state_repo=state_repo,
        manual_repo=manual_pending_repo,
        pay_settings_repo=pay_settings_repo,
    )


@pytest.fixture
def income_service(income_data_repo, income_entry_repo, savings_plan_repo) -> IncomeService:
    return IncomeService(
        income_repo=income_data_repo,
        entry_repo=income_entry_repo,
        savings_plan_repo=savings_plan_repo,
    )


@pytest.fixture
def settings_service(pay_settings_repo, user_settings_repo) -> SettingsService:
    return SettingsService(
        pay_settings_repo=pay_settings_repo,
        user_settings_repo=user_settings_repo,
    )


@pytest.fixture
def investment_service(investment_repo, market_data_service) -> InvestmentService:
    return InvestmentService(
        investment_repo=investment_repo,
        market_data=market_data_service,
    )


@pytest.fixture
def dashboard_service(
    asset_service,
    budget_service,
    budget_analysis_service,
    recurring_service,
    income_service,
    investment_service,
) -> DashboardService:
    return DashboardService(
        asset_service=asset_service,
        budget_service=budget_service,
        budget_analysis_service=budget_analysis_service,
        recurring_service=recurring_service,
        income_service=income_service,
        investment_service=investment_service,
    )


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def category_factory(budget_service) -> Callable[..., BudgetCategory]:
    """Factory for creating budget categories."""

    def _create_category(
        name: str = "Groceries",
        allocated_amount: Decimal = Decimal("600.00"),
        is_active: bool = True,
        is_budget_category: bool = True,
    ) -> BudgetCategory:
        return budget_service.create_category(
            BudgetCategoryCreate(
                name=name,
                allocated_amount=allocated_amount,
                is_active=is_active,
                is_budget_category=is_budget_category,
            )
        )

    return _create_category


@pytest.fixture
def transaction_factory(budget_service) -> Callable[..., Transaction]:
    """Factory for creating spending transactions."""

    def _create_transaction(
        category_id: str,
        amount: Decimal,
        txn_date: Optional[date] = None,
        name: str = "Purchase",
        cash_back: Decimal = Decimal("0"),
        cashback_posted: bool = False,
        pending: bool = False,
        pending_tip_amount: Decimal = Decimal("0"),
    ) -> Transaction:
        return budget_service.create_transaction(
            TransactionCreate(
                date=txn_date or today_local(),
                category_id=category_id,
                name=name,
                amount=amount,
                cash_back=cash_back,
                cashback_posted=cashback_posted,
                pending=pending,
                pending_tip_amount=pending_tip_amount,
            )
        )

    return _create_transaction


@pytest.fixture
def bill_factory(recurring_service) -> Callable[..., RecurringTransaction]:
    """Factory for creating recurring bills."""

    def _create_bill(
        name: str = "Rent",
        amount: Decimal = Decimal("1500.00"),
        due_date: int = 1,
        is_essential: bool = True,
        category_id: Optional[str] = None,
    ) -> RecurringTransaction:
        return recurring_service.create_bill(
            RecurringTransactionCreate(
                name=name,
                amount=amount,
                due_date=due_date,
                is_essential=is_essential,
                category_id=category_id,
            )
        )

    return _create_bill


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Settings for API tests: temp data dir, offline quotes, known cron key."""
    settings = Settings(
        data_dir=tmp_path,
        market_data_provider="stub",
        cron_api_key="test-cron-key",
    )
    set_settings(settings)
    reset_database()
    reset_market_data_service()
    yield settings
    reset_database()
    reset_market_data_service()
    reset_settings()


@pytest.fixture
def client(test_engine, api_settings, deterministic_provider) -> TestClient:
    """Provide FastAPI test client with test database and deterministic quotes."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    market_data = MarketDataService(provider=deterministic_provider, cache_ttl_seconds=60)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_data_service] = lambda: market_data
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(test_engine, api_settings, failing_provider) -> TestClient:
    """Test client whose market data provider is unreachable."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    market_data = MarketDataService(provider=failing_provider, cache_ttl_seconds=60)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_data_service] = lambda: market_data
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
