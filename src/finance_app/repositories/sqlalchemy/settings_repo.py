"""
SQLAlchemy implementations of the single-row settings repositories.

Each table holds at most one row. ``save`` overwrites the existing row in
place, or inserts the first one.
"""

import uuid
from typing import Optional

from sqlalchemy.orm import Session

from finance_app.domain.models import PaySettings, IncomeData, SavingsPlan, UserSettings
from finance_app.repositories.sqlalchemy.orm_models import (
    PaySettingsORM,
    IncomeDataORM,
    SavingsPlanORM,
    UserSettingsORM,
)


class _SingleRowRepository:
    orm_class = None

    def __init__(self, db: Session):
        self._db = db

    def _first(self):
        return self._db.query(self.orm_class).first()

    def _replace(self, orm_obj):
        existing = self._first()
        if existing is None:
            orm_obj.id = orm_obj.id or str(uuid.uuid4())
            self._db.add(orm_obj)
            target = orm_obj
        else:
            for column in self.orm_class.__table__.columns:
                if column.key != "id":
                    setattr(existing, column.key, getattr(orm_obj, column.key))
            target = existing
        self._db.commit()
        self._db.refresh(target)
        return target


class SqlAlchemyPaySettingsRepository(_SingleRowRepository):
    orm_class = PaySettingsORM

    def get(self) -> Optional[PaySettings]:
        orm_settings = self._first()
        return self._to_domain(orm_settings) if orm_settings else None

    def save(self, settings: PaySettings) -> PaySettings:
        orm_settings = self._replace(
            PaySettingsORM(
                id=settings.id,
                last_pay_date=settings.last_pay_date,
                frequency=settings.frequency,
            )
        )
        return self._to_domain(orm_settings)

    @staticmethod
    def _to_domain(orm: PaySettingsORM) -> PaySettings:
        return PaySettings(
            id=orm.id,
            last_pay_date=orm.last_pay_date,
            frequency=orm.frequency,
        )


class SqlAlchemyIncomeDataRepository(_SingleRowRepository):
    orm_class = IncomeDataORM

    def get(self) -> Optional[IncomeData]:
        orm_income = self._first()
        return self._to_domain(orm_income) if orm_income else None

    def save(self, income: IncomeData) -> IncomeData:
        orm_income = self._replace(
            IncomeDataORM(
                id=income.id,
                pay_amount=income.pay_amount,
                pay_frequency=income.pay_frequency,
                work_hours_per_week=income.work_hours_per_week,
                work_days_per_week=income.work_days_per_week,
                bonus_percentage=income.bonus_percentage,
            )
        )
        return self._to_domain(orm_income)

    @staticmethod
    def _to_domain(orm: IncomeDataORM) -> IncomeData:
        return IncomeData(
            id=orm.id,
            pay_amount=orm.pay_amount,
            pay_frequency=orm.pay_frequency,
            work_hours_per_week=orm.work_hours_per_week,
            work_days_per_week=orm.work_days_per_week,
            bonus_percentage=orm.bonus_percentage,
        )


class SqlAlchemySavingsPlanRepository(_SingleRowRepository):
    orm_class = SavingsPlanORM

    def get(self) -> Optional[SavingsPlan]:
        orm_plan = self._first()
        return self._to_domain(orm_plan) if orm_plan else None

    def save(self, plan: SavingsPlan) -> SavingsPlan:
        orm_plan = self._replace(
            SavingsPlanORM(
                id=plan.id,
                current_age=plan.current_age,
                retirement_age=plan.retirement_age,
                current_savings=plan.current_savings,
                yearly_contribution=plan.yearly_contribution,
                yearly_bonus=plan.yearly_bonus,
                annual_return=plan.annual_return,
            )
        )
        return self._to_domain(orm_plan)

    @staticmethod
    def _to_domain(orm: SavingsPlanORM) -> SavingsPlan:
        return SavingsPlan(
            id=orm.id,
            current_age=orm.current_age,
            retirement_age=orm.retirement_age,
            current_savings=orm.current_savings,
            yearly_contribution=orm.yearly_contribution,
            yearly_bonus=orm.yearly_bonus,
            annual_return=orm.annual_return,
        )


class SqlAlchemyUserSettingsRepository(_SingleRowRepository):
    orm_class = UserSettingsORM

    def get(self) -> Optional[UserSettings]:
        orm_settings = self._first()
        return self._to_domain(orm_settings) if orm_settings else None

    def save(self, settings: UserSettings) -> UserSettings:
        orm_settings = self._replace(
            UserSettingsORM(
                id=settings.id,
                name=settings.name,
                email=settings.email,
                theme=settings.theme,
            )
        )
        return self._to_domain(orm_settings)

    @staticmethod
    def _to_domain(orm: UserSettingsORM) -> UserSettings:
        return UserSettings(
            id=orm.id,
            name=orm.name,
            email=orm.email,
            theme=orm.theme,
        )
