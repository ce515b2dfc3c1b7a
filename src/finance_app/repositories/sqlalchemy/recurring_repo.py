"""SQLAlchemy implementations of recurring bill and pay period repositories."""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from finance_app.domain.models import (
    RecurringCategory,
    RecurringTransaction,
    CompletedTransaction,
    PendingOverride,
    ManualPendingTransaction,
)
from finance_app.repositories.sqlalchemy.orm_models import (
    RecurringCategoryORM,
    RecurringTransactionORM,
    CompletedTransactionORM,
    PendingOverrideORM,
    ManualPendingTransactionORM,
)


class SqlAlchemyRecurringCategoryRepository:
    """SQLAlchemy-backed recurring category repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, category: RecurringCategory) -> RecurringCategory:
        orm_category = RecurringCategoryORM(
            id=category.id,
            name=category.name,
            color=category.color,
            is_active=category.is_active,
        )
        self._db.add(orm_category)
        self._db.commit()
        self._db.refresh(orm_category)
        return self._to_domain(orm_category)

    def get_by_id(self, category_id: str) -> Optional[RecurringCategory]:
        orm_category = self._db.query(RecurringCategoryORM).filter(
            RecurringCategoryORM.id == category_id
        ).first()
        return self._to_domain(orm_category) if orm_category else None

    def list_all(self) -> list[RecurringCategory]:
        orm_categories = (
            self._db.query(RecurringCategoryORM)
            .order_by(RecurringCategoryORM.is_active.desc(), RecurringCategoryORM.name)
            .all()
        )
        return [self._to_domain(c) for c in orm_categories]

    def update(self, category: RecurringCategory) -> RecurringCategory:
        orm_category = self._db.query(RecurringCategoryORM).filter(
            RecurringCategoryORM.id == category.id
        ).first()
        if orm_category:
            orm_category.name = category.name
            orm_category.color = category.color
            orm_category.is_active = category.is_active
            self._db.commit()
            self._db.refresh(orm_category)
            return self._to_domain(orm_category)
        raise ValueError(f"Recurring category not found: {category.id}")

    def delete(self, category_id: str) -> None:
        """Delete the category and detach bills that referenced it."""
        self._db.query(RecurringTransactionORM).filter(
            RecurringTransactionORM.category_id == category_id
        ).update({RecurringTransactionORM.category_id: None}, synchronize_session=False)
        self._db.query(RecurringCategoryORM).filter(
            RecurringCategoryORM.id == category_id
        ).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: RecurringCategoryORM) -> RecurringCategory:
        return RecurringCategory(
            id=orm.id,
            name=orm.name,
            color=orm.color,
            is_active=orm.is_active,
        )


class SqlAlchemyRecurringTransactionRepository:
    """SQLAlchemy-backed recurring bill repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, bill: RecurringTransaction) -> RecurringTransaction:
        orm_bill = RecurringTransactionORM(
            id=bill.id,
            name=bill.name,
            amount=bill.amount,
            due_date=bill.due_date,
            is_essential=bill.is_essential,
            category_id=bill.category_id,
        )
        self._db.add(orm_bill)
        self._db.commit()
        self._db.refresh(orm_bill)
        return self._to_domain(orm_bill)

    def get_by_id(self, bill_id: str) -> Optional[RecurringTransaction]:
        orm_bill = self._db.query(RecurringTransactionORM).filter(
            RecurringTransactionORM.id == bill_id
        ).first()
        return self._to_domain(orm_bill) if orm_bill else None

    def list_all(self) -> list[RecurringTransaction]:
        orm_bills = (
            self._db.query(RecurringTransactionORM)
            .order_by(RecurringTransactionORM.due_date, RecurringTransactionORM.name)
            .all()
        )
        return [self._to_domain(b) for b in orm_bills]

    def update(self, bill: RecurringTransaction) -> RecurringTransaction:
        orm_bill = self._db.query(RecurringTransactionORM).filter(
            RecurringTransactionORM.id == bill.id
        ).first()
        if orm_bill:
            orm_bill.name = bill.name
            orm_bill.amount = bill.amount
            orm_bill.due_date = bill.due_date
            orm_bill.is_essential = bill.is_essential
            orm_bill.category_id = bill.category_id
            self._db.commit()
            self._db.refresh(orm_bill)
            return self._to_domain(orm_bill)
        raise ValueError(f"Recurring transaction not found: {bill.id}")

    def delete(self, bill_id: str) -> None:
        """Delete a bill; completions and overrides cascade."""
        orm_bill = self._db.query(RecurringTransactionORM).filter(
            RecurringTransactionORM.id == bill_id
        ).first()
        if orm_bill:
            self._db.delete(orm_bill)
            self._db.commit()

    @staticmethod
    def _to_domain(orm: RecurringTransactionORM) -> RecurringTransaction:
        return RecurringTransaction(
            id=orm.id,
            name=orm.name,
            amount=orm.amount,
            due_date=orm.due_date,
            is_essential=orm.is_essential,
            category_id=orm.category_id,
        )


class SqlAlchemyPayPeriodStateRepository:
    """Completions and amount overrides keyed by bill and pay period."""

    def __init__(self, db: Session):
        self._db = db

    def get_completion(
        self,
        bill_id: str,
        period_start: date,
        period_end: date,
    ) -> Optional[CompletedTransaction]:
        orm_completion = self._db.query(CompletedTransactionORM).filter(
            CompletedTransactionORM.recurring_transaction_id == bill_id,
            CompletedTransactionORM.pay_period_start == period_start,
            CompletedTransactionORM.pay_period_end == period_end,
        ).first()
        return self._completion_to_domain(orm_completion) if orm_completion else None

    def get_completion_by_id(self, completion_id: str) -> Optional[CompletedTransaction]:
        orm_completion = self._db.query(CompletedTransactionORM).filter(
            CompletedTransactionORM.id == completion_id
        ).first()
        return self._completion_to_domain(orm_completion) if orm_completion else None

    def list_completions(
        self,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> list[CompletedTransaction]:
        query = self._db.query(CompletedTransactionORM)
        if period_start:
            query = query.filter(CompletedTransactionORM.pay_period_start == period_start)
        if period_end:
            query = query.filter(CompletedTransactionORM.pay_period_end == period_end)
        query = query.order_by(CompletedTransactionORM.completed_date.desc())
        return [self._completion_to_domain(c) for c in query.all()]

    def create_completion(self, completion: CompletedTransaction) -> CompletedTransaction:
        orm_completion = CompletedTransactionORM(
            id=completion.id,
            recurring_transaction_id=completion.recurring_transaction_id,
            pay_period_start=completion.pay_period_start,
            pay_period_end=completion.pay_period_end,
            completed_date=completion.completed_date,
        )
        self._db.add(orm_completion)
        self._db.commit()
        self._db.refresh(orm_completion)
        return self._completion_to_domain(orm_completion)

    def delete_completion(self, completion_id: str) -> None:
        self._db.query(CompletedTransactionORM).filter(
            CompletedTransactionORM.id == completion_id
        ).delete()
        self._db.commit()

    def list_overrides(self, period_start: date, period_end: date) -> list[PendingOverride]:
        orm_overrides = self._db.query(PendingOverrideORM).filter(
            PendingOverrideORM.pay_period_start == period_start,
            PendingOverrideORM.pay_period_end == period_end,
        ).all()
        return [self._override_to_domain(o) for o in orm_overrides]

    def save_override(self, override: PendingOverride) -> PendingOverride:
        """Insert or replace the override for the bill and period."""
        orm_override = self._db.query(PendingOverrideORM).filter(
            PendingOverrideORM.recurring_transaction_id == override.recurring_transaction_id,
            PendingOverrideORM.pay_period_start == override.pay_period_start,
            PendingOverrideORM.pay_period_end == override.pay_period_end,
        ).first()
        if orm_override:
            orm_override.amount = override.amount
        else:
            orm_override = PendingOverrideORM(
                id=override.id,
                recurring_transaction_id=override.recurring_transaction_id,
                pay_period_start=override.pay_period_start,
                pay_period_end=override.pay_period_end,
                amount=override.amount,
            )
            self._db.add(orm_override)
        self._db.commit()
        self._db.refresh(orm_override)
        return self._override_to_domain(orm_override)

    @staticmethod
    def _completion_to_domain(orm: CompletedTransactionORM) -> CompletedTransaction:
        return CompletedTransaction(
            id=orm.id,
            recurring_transaction_id=orm.recurring_transaction_id,
            pay_period_start=orm.pay_period_start,
            pay_period_end=orm.pay_period_end,
            completed_date=orm.completed_date,
        )

    @staticmethod
    def _override_to_domain(orm: PendingOverrideORM) -> PendingOverride:
        return PendingOverride(
            id=orm.id,
            recurring_transaction_id=orm.recurring_transaction_id,
            pay_period_start=orm.pay_period_start,
            pay_period_end=orm.pay_period_end,
            amount=orm.amount,
        )


class SqlAlchemyManualPendingRepository:
    """SQLAlchemy-backed manual pending transaction repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, item: ManualPendingTransaction) -> ManualPendingTransaction:
        orm_item = ManualPendingTransactionORM(
            id=item.id,
            name=item.name,
            amount=item.amount,
            due_date=item.due_date,
            category_id=item.category_id,
            notes=item.notes,
            pay_period_start=item.pay_period_start,
            pay_period_end=item.pay_period_end,
            is_completed=item.is_completed,
        )
        self._db.add(orm_item)
        self._db.commit()
        self._db.refresh(orm_item)
        return self._to_domain(orm_item)

    def get_by_id(self, item_id: str) -> Optional[ManualPendingTransaction]:
        orm_item = self._db.query(ManualPendingTransactionORM).filter(
            ManualPendingTransactionORM.id == item_id
        ).first()
        return self._to_domain(orm_item) if orm_item else None

    def query(
        self,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> list[ManualPendingTransaction]:
        query = self._db.query(ManualPendingTransactionORM)
        if period_start:
            query = query.filter(ManualPendingTransactionORM.pay_period_start == period_start)
        if period_end:
            query = query.filter(ManualPendingTransactionORM.pay_period_end == period_end)
        query = query.order_by(
            ManualPendingTransactionORM.due_date, ManualPendingTransactionORM.name
        )
        return [self._to_domain(i) for i in query.all()]

    def update(self, item: ManualPendingTransaction) -> ManualPendingTransaction:
        orm_item = self._db.query(ManualPendingTransactionORM).filter(
            ManualPendingTransactionORM.id == item.id
        ).first()
        if orm_item:
            orm_item.name = item.name
            orm_item.amount = item.amount
            orm_item.due_date = item.due_date
            orm_item.category_id = item.category_id
            orm_item.notes = item.notes
            orm_item.pay_period_start = item.pay_period_start
            orm_item.pay_period_end = item.pay_period_end
            orm_item.is_completed = item.is_completed
            self._db.commit()
            self._db.refresh(orm_item)
            return self._to_domain(orm_item)
        raise ValueError(f"Manual pending transaction not found: {item.id}")

    def delete(self, item_id: str) -> None:
        self._db.query(ManualPendingTransactionORM).filter(
            ManualPendingTransactionORM.id == item_id
        ).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: ManualPendingTransactionORM) -> ManualPendingTransaction:
        return ManualPendingTransaction(
            id=orm.id,
            name=orm.name,
            amount=orm.amount,
            due_date=orm.due_date,
            category_id=orm.category_id,
            notes=orm.notes,
            pay_period_start=orm.pay_period_start,
            pay_period_end=orm.pay_period_end,
            is_completed=orm.is_completed,
        )
