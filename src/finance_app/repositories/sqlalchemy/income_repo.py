"""SQLAlchemy implementation of IncomeEntryRepository."""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from finance_app.domain.models import IncomeEntry
from finance_app.repositories.sqlalchemy.orm_models import IncomeEntryORM


class SqlAlchemyIncomeEntryRepository:
    """SQLAlchemy-backed income entry repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, entry: IncomeEntry) -> IncomeEntry:
        orm_entry = IncomeEntryORM(
            id=entry.id,
            source=entry.source,
            amount=entry.amount,
            date=entry.date,
            is_recurring=entry.is_recurring,
            frequency=entry.frequency,
            notes=entry.notes,
        )
        self._db.add(orm_entry)
        self._db.commit()
        self._db.refresh(orm_entry)
        return self._to_domain(orm_entry)

    def get_by_id(self, entry_id: str) -> Optional[IncomeEntry]:
        orm_entry = self._db.query(IncomeEntryORM).filter(IncomeEntryORM.id == entry_id).first()
        return self._to_domain(orm_entry) if orm_entry else None

    def query(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[IncomeEntry]:
        query = self._db.query(IncomeEntryORM)
        if start_date:
            query = query.filter(IncomeEntryORM.date >= start_date)
        if end_date:
            query = query.filter(IncomeEntryORM.date <= end_date)
        query = query.order_by(IncomeEntryORM.date.desc())
        return [self._to_domain(e) for e in query.all()]

    def update(self, entry: IncomeEntry) -> IncomeEntry:
        orm_entry = self._db.query(IncomeEntryORM).filter(IncomeEntryORM.id == entry.id).first()
        if orm_entry:
            orm_entry.source = entry.source
            orm_entry.amount = entry.amount
            orm_entry.date = entry.date
            orm_entry.is_recurring = entry.is_recurring
            orm_entry.frequency = entry.frequency
            orm_entry.notes = entry.notes
            self._db.commit()
            self._db.refresh(orm_entry)
            return self._to_domain(orm_entry)
        raise ValueError(f"Income entry not found: {entry.id}")

    def delete(self, entry_id: str) -> None:
        self._db.query(IncomeEntryORM).filter(IncomeEntryORM.id == entry_id).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: IncomeEntryORM) -> IncomeEntry:
        return IncomeEntry(
            id=orm.id,
            source=orm.source,
            amount=orm.amount,
            date=orm.date,
            is_recurring=orm.is_recurring,
            frequency=orm.frequency,
            notes=orm.notes,
        )
