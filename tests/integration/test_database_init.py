"""
Integration tests for database configuration and initialization.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import inspect

from finance_app.config.settings import Settings, set_settings, reset_settings
from finance_app.repositories.sqlalchemy.database import (
    get_engine,
    get_session,
    init_db,
    init_db_with_path,
    reset_database,
)
from finance_app.repositories.sqlalchemy import SqlAlchemyUserSettingsRepository
from finance_app.domain.models import UserSettings


@pytest.fixture(autouse=True)
def clean_database_state():
    reset_database()
    yield
    reset_database()
    reset_settings()


class TestDatabaseInit:
    """Tests for init_db and init_db_with_path."""

    def test_init_db_creates_file_under_data_dir(self, tmp_path):
        """
        GIVEN settings pointing at a temporary data directory
        WHEN I initialize the database
        THEN finance.db is created there with every table
        """
        set_settings(Settings(data_dir=tmp_path / "data"))

        init_db()

        assert (tmp_path / "data" / "finance.db").exists()
        tables = set(inspect(get_engine()).get_table_names())
        assert {"assets", "transactions", "recurring_transactions", "investments"} <= tables

    def test_init_db_with_path_persists_across_sessions(self, tmp_path):
        db_path = tmp_path / "custom.db"
        init_db_with_path(db_path)

        session = get_session()
        try:
            SqlAlchemyUserSettingsRepository(session).save(UserSettings(name="Sam"))
        finally:
            session.close()

        session = get_session()
        try:
            assert SqlAlchemyUserSettingsRepository(session).get().name == "Sam"
        finally:
            session.close()
        assert db_path.exists()

    def test_explicit_database_url_wins(self, tmp_path):
        settings = Settings(data_dir=tmp_path, database_url="sqlite:///:memory:")

        assert settings.get_database_url() == "sqlite:///:memory:"

    def test_settings_read_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("FINANCE_QUOTE_CACHE_TTL_SECONDS", "30")
        monkeypatch.setenv("FINANCE_MARKET_DATA_PROVIDER", "stub")

        settings = Settings()

        assert settings.quote_cache_ttl_seconds == 30
        assert settings.market_data_provider == "stub"
        assert settings.quote_fetch_timeout_seconds == 10.0

    def test_provider_name_is_normalized(self):
        assert Settings(market_data_provider=" Stub ").market_data_provider == "stub"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"market_data_provider": "bloomberg"},
            {"timezone": "Mars/Olympus"},
            {"quote_fetch_timeout_seconds": 0},
        ],
    )
    def test_invalid_settings_are_rejected(self, overrides):
        with pytest.raises(PydanticValidationError):
            Settings(**overrides)
