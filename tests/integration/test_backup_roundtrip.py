"""
Integration tests for JSON backup export and import.

Tests cover:
- Export shape (sections, metadata, JSON-safe values)
- Round trip into an empty database
- Partial imports: absent sections untouched, dangling references cleaned up
- Row-level errors and rejected payloads
"""

import json
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker

from finance_app.backup import BackupExporter, BackupImporter, BACKUP_SECTIONS
from finance_app.core.exceptions import ValidationError
from finance_app.domain.models import PayFrequency
from finance_app.repositories.sqlalchemy.database import Base
from finance_app.repositories.sqlalchemy import (
    SqlAlchemyBudgetCategoryRepository,
    SqlAlchemyTransactionRepository,
    SqlAlchemyPaySettingsRepository,
)
from finance_app.services import AssetBalances


@pytest.fixture
def populated(asset_service, settings_service, category_factory, transaction_factory, bill_factory):
    """A database with a snapshot, pay settings, a budget and a bill."""
    asset_service.record_snapshot(AssetBalances(cash=Decimal("1000.25"), checking=Decimal("500")))
    settings_service.save_pay_settings(date(2024, 6, 7), PayFrequency.BIWEEKLY)
    category = category_factory(name="Groceries", allocated_amount=Decimal("600"))
    transaction_factory(category.id, Decimal("42.10"), txn_date=date(2024, 6, 3), name="Market")
    bill_factory(name="Rent", amount=Decimal("1500"), due_date=1)
    return category


@pytest.fixture
def empty_session():
    """A second, empty in-memory database."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


class TestBackupExport:
    """Tests for BackupExporter."""

    def test_export_has_every_section_and_metadata(self, test_session, populated):
        data = BackupExporter(test_session).export()

        for section in BACKUP_SECTIONS:
            assert section in data
        assert data["metadata"]["version"] == "1.0"
        assert data["metadata"]["sections"]["transactions"] == 1
        assert data["metadata"]["sections"]["investments"] == 0

    def test_export_is_json_serializable(self, test_session, populated):
        """
        GIVEN money, dates and enums in the database
        WHEN I export
        THEN the result dumps to JSON with money as strings and enums as values
        """
        data = json.loads(json.dumps(BackupExporter(test_session).export()))

        assert data["assets"][0]["cash"] == "1000.25"
        assert data["pay_settings"][0]["frequency"] == "biweekly"
        assert data["transactions"][0]["date"] == "2024-06-03"


class TestBackupImport:
    """Tests for BackupImporter."""

    def test_round_trip_into_empty_database(self, test_session, populated, empty_session):
        payload = json.loads(json.dumps(BackupExporter(test_session).export()))

        summary = BackupImporter(empty_session).import_data(payload)

        assert summary.error_count == 0
        assert summary.sections["transactions"] == 1
        assert summary.imported_count == sum(summary.sections.values())

        txns = SqlAlchemyTransactionRepository(empty_session).query()
        assert [(t.name, t.amount, t.category_id) for t in txns] == [
            ("Market", Decimal("42.10"), populated.id)
        ]
        pay = SqlAlchemyPaySettingsRepository(empty_session).get()
        assert pay.frequency == PayFrequency.BIWEEKLY
        assert pay.last_pay_date == date(2024, 6, 7)

    def test_partial_import_leaves_other_sections(self, test_session, populated, transaction_repo):
        """
        GIVEN a populated database
        WHEN I import a payload with only investments
        THEN the budget and its transactions stay untouched
        """
        summary = BackupImporter(test_session).import_data({"investments": []})

        assert summary.sections == {"investments": 0}
        categories = SqlAlchemyBudgetCategoryRepository(test_session).list_all()
        assert [c.id for c in categories] == [populated.id]
        assert len(transaction_repo.query()) == 1

    def test_replacing_categories_removes_their_transactions(
        self, test_session, populated, transaction_repo
    ):
        """
        GIVEN a category with a transaction
        WHEN I import budget_categories without a transactions section
        THEN transactions of categories that no longer exist are removed
        """
        payload = {
            "budget_categories": [
                {"id": "cat-new", "name": "Dining", "allocated_amount": "250"},
            ],
        }

        summary = BackupImporter(test_session).import_data(payload)

        assert summary.sections == {"budget_categories": 1}
        categories = SqlAlchemyBudgetCategoryRepository(test_session).list_all()
        assert [(c.id, c.is_active) for c in categories] == [("cat-new", True)]
        assert transaction_repo.query() == []

    def test_restoring_same_category_ids_keeps_transactions(
        self, test_session, populated, transaction_repo
    ):
        payload = {
            "budget_categories": [
                {"id": populated.id, "name": "Groceries", "allocated_amount": "650"},
            ],
        }

        BackupImporter(test_session).import_data(payload)

        txns = transaction_repo.query()
        assert [(t.name, t.category_id) for t in txns] == [("Market", populated.id)]

    def test_replacing_recurring_categories_detaches_bills(
        self, test_session, recurring_service, bill_factory, bill_repo
    ):
        """
        GIVEN a bill in a recurring category
        WHEN I import recurring_categories without that category
        THEN the bill is kept and becomes uncategorized
        """
        category = recurring_service.create_category("Utilities")
        bill = bill_factory(name="Power", amount=Decimal("90"), due_date=12, category_id=category.id)

        BackupImporter(test_session).import_data({"recurring_categories": []})

        kept = bill_repo.get_by_id(bill.id)
        assert kept is not None
        assert kept.category_id is None

    def test_replacing_bills_removes_their_period_state(
        self, test_session, recurring_service, bill_factory, state_repo
    ):
        """
        GIVEN a bill with a completion and an override
        WHEN I import recurring_transactions without that bill
        THEN its completions and overrides are removed too
        """
        start, end = date(2024, 6, 7), date(2024, 6, 21)
        bill = bill_factory(name="Phone", amount=Decimal("65"), due_date=10)
        recurring_service.mark_completed(bill.id, start, end, today=date(2024, 6, 10))
        recurring_service.set_pending_override(bill.id, Decimal("80"), start, end)

        summary = BackupImporter(test_session).import_data({
            "recurring_transactions": [
                {"id": "bill-new", "name": "Gym", "amount": "30", "due_date": 5},
            ],
        })

        assert summary.sections == {"recurring_transactions": 1}
        assert state_repo.list_completions() == []
        assert state_repo.list_overrides(start, end) == []

    def test_bad_rows_are_skipped_and_reported(self, test_session):
        payload = {
            "income_entries": [
                {"source": "Paycheck", "amount": "2500", "date": "2024-06-07"},
                {"source": "Gift", "amount": "abc", "date": "2024-06-08"},
                {"source": "Bonus", "amount": "100"},
            ],
        }

        summary = BackupImporter(test_session).import_data(payload)

        assert summary.imported_count == 1
        assert summary.error_count == 2
        assert summary.errors[0].startswith("income_entries[1]")
        assert "missing required field 'date'" in summary.errors[1]

    def test_section_must_be_a_list(self, test_session):
        summary = BackupImporter(test_session).import_data({"investments": {"symbol": "AAPL"}})

        assert summary.errors == ["investments: expected a list of rows"]
        assert summary.imported_count == 0

    @pytest.mark.parametrize("payload", [[], "backup", {"unknown": []}])
    def test_rejects_payload_without_known_sections(self, test_session, payload):
        with pytest.raises(ValidationError):
            BackupImporter(test_session).import_data(payload)
