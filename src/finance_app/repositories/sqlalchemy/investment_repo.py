"""SQLAlchemy implementation of InvestmentRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from finance_app.domain.models import Investment
from finance_app.repositories.sqlalchemy.orm_models import InvestmentORM


class SqlAlchemyInvestmentRepository:
    """SQLAlchemy-backed investment holding repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, investment: Investment) -> Investment:
        orm_investment = InvestmentORM(
            id=investment.id,
            symbol=investment.symbol,
            name=investment.name,
            shares=investment.shares,
            avg_price=investment.avg_price,
            current_price=investment.current_price,
            prev_day_price=investment.prev_day_price,
            last_updated=investment.last_updated,
        )
        self._db.add(orm_investment)
        self._db.commit()
        self._db.refresh(orm_investment)
        return self._to_domain(orm_investment)

    def get_by_id(self, investment_id: str) -> Optional[Investment]:
        orm_investment = self._db.query(InvestmentORM).filter(
            InvestmentORM.id == investment_id
        ).first()
        return self._to_domain(orm_investment) if orm_investment else None

    def list_all(self) -> list[Investment]:
        orm_investments = self._db.query(InvestmentORM).order_by(InvestmentORM.symbol).all()
        return [self._to_domain(i) for i in orm_investments]

    def update(self, investment: Investment) -> Investment:
        orm_investment = self._db.query(InvestmentORM).filter(
            InvestmentORM.id == investment.id
        ).first()
        if orm_investment:
            orm_investment.symbol = investment.symbol
            orm_investment.name = investment.name
            orm_investment.shares = investment.shares
            orm_investment.avg_price = investment.avg_price
            orm_investment.current_price = investment.current_price
            orm_investment.prev_day_price = investment.prev_day_price
            orm_investment.last_updated = investment.last_updated
            self._db.commit()
            self._db.refresh(orm_investment)
            return self._to_domain(orm_investment)
        raise ValueError(f"Investment not found: {investment.id}")

    def delete(self, investment_id: str) -> None:
        self._db.query(InvestmentORM).filter(InvestmentORM.id == investment_id).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: InvestmentORM) -> Investment:
        return Investment(
            id=orm.id,
            symbol=orm.symbol,
            name=orm.name,
            shares=orm.shares,
            avg_price=orm.avg_price,
            current_price=orm.current_price,
            prev_day_price=orm.prev_day_price,
            last_updated=orm.last_updated,
        )
