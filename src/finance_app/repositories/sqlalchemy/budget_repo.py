"""SQLAlchemy implementations of budget category and transaction repositories."""

from datetime import date
from typing import Optional

from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from finance_app.domain.models import BudgetCategory, Transaction
from finance_app.repositories.sqlalchemy.orm_models import BudgetCategoryORM, TransactionORM


class SqlAlchemyBudgetCategoryRepository:
    """SQLAlchemy-backed budget category repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, category: BudgetCategory) -> BudgetCategory:
        orm_category = BudgetCategoryORM(
            id=category.id,
            name=category.name,
            allocated_amount=category.allocated_amount,
            color=category.color,
            is_active=category.is_active,
            is_budget_category=category.is_budget_category,
        )
        self._db.add(orm_category)
        self._db.commit()
        self._db.refresh(orm_category)
        return self._to_domain(orm_category)

    def get_by_id(self, category_id: str) -> Optional[BudgetCategory]:
        orm_category = self._db.query(BudgetCategoryORM).filter(
            BudgetCategoryORM.id == category_id
        ).first()
        return self._to_domain(orm_category) if orm_category else None

    def list_all(self, active_only: bool = False) -> list[BudgetCategory]:
        query = self._db.query(BudgetCategoryORM)
        if active_only:
            query = query.filter(BudgetCategoryORM.is_active == True)  # noqa: E712
        return [self._to_domain(c) for c in query.order_by(BudgetCategoryORM.name).all()]

    def update(self, category: BudgetCategory) -> BudgetCategory:
        orm_category = self._db.query(BudgetCategoryORM).filter(
            BudgetCategoryORM.id == category.id
        ).first()
        if orm_category:
            orm_category.name = category.name
            orm_category.allocated_amount = category.allocated_amount
            orm_category.color = category.color
            orm_category.is_active = category.is_active
            orm_category.is_budget_category = category.is_budget_category
            self._db.commit()
            self._db.refresh(orm_category)
            return self._to_domain(orm_category)
        raise ValueError(f"Budget category not found: {category.id}")

    def delete(self, category_id: str) -> None:
        """Delete a category; its transactions go with it (ORM cascade)."""
        orm_category = self._db.query(BudgetCategoryORM).filter(
            BudgetCategoryORM.id == category_id
        ).first()
        if orm_category:
            self._db.delete(orm_category)
            self._db.commit()

    @staticmethod
    def _to_domain(orm: BudgetCategoryORM) -> BudgetCategory:
        return BudgetCategory(
            id=orm.id,
            name=orm.name,
            allocated_amount=orm.allocated_amount,
            color=orm.color,
            is_active=orm.is_active,
            is_budget_category=orm.is_budget_category,
        )


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed spending transaction repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, transaction: Transaction) -> Transaction:
        orm_txn = self._to_orm(transaction)
        self._db.add(orm_txn)
        self._db.commit()
        self._db.refresh(orm_txn)
        return self._to_domain(orm_txn)

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.id == transaction_id
        ).first()
        return self._to_domain(orm_txn) if orm_txn else None

    def query(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions in an inclusive date range, newest first."""
        query = self._db.query(TransactionORM)

        conditions = []
        if start_date:
            conditions.append(TransactionORM.date >= start_date)
        if end_date:
            conditions.append(TransactionORM.date <= end_date)
        if conditions:
            query = query.filter(and_(*conditions))

        query = query.order_by(TransactionORM.date.desc(), TransactionORM.sort_order.desc())
        if limit:
            query = query.limit(limit)
        return [self._to_domain(t) for t in query.all()]

    def update(self, transaction: Transaction) -> Transaction:
        orm_txn = self._db.query(TransactionORM).filter(
            TransactionORM.id == transaction.id
        ).first()
        if orm_txn:
            orm_txn.date = transaction.date
            orm_txn.category_id = transaction.category_id
            orm_txn.name = transaction.name
            orm_txn.amount = transaction.amount
            orm_txn.cash_back = transaction.cash_back
            orm_txn.cashback_posted = transaction.cashback_posted
            orm_txn.notes = transaction.notes
            orm_txn.pending = transaction.pending
            orm_txn.pending_tip_amount = transaction.pending_tip_amount
            orm_txn.sort_order = transaction.sort_order
            self._db.commit()
            self._db.refresh(orm_txn)
            return self._to_domain(orm_txn)
        raise ValueError(f"Transaction not found: {transaction.id}")

    def delete(self, transaction_id: str) -> None:
        self._db.query(TransactionORM).filter(TransactionORM.id == transaction_id).delete()
        self._db.commit()

    def max_sort_order(self) -> int:
        return self._db.query(func.max(TransactionORM.sort_order)).scalar() or 0

    def set_sort_orders(self, orders: dict[str, int]) -> None:
        orm_txns = self._db.query(TransactionORM).filter(TransactionORM.id.in_(list(orders))).all()
        for orm_txn in orm_txns:
            orm_txn.sort_order = orders[orm_txn.id]
        self._db.commit()

    @staticmethod
    def _to_orm(txn: Transaction) -> TransactionORM:
        return TransactionORM(
            id=txn.id,
            date=txn.date,
            category_id=txn.category_id,
            name=txn.name,
            amount=txn.amount,
            cash_back=txn.cash_back,
            cashback_posted=txn.cashback_posted,
            notes=txn.notes,
            pending=txn.pending,
            pending_tip_amount=txn.pending_tip_amount,
            sort_order=txn.sort_order,
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        return Transaction(
            id=orm.id,
            date=orm.date,
            category_id=orm.category_id,
            name=orm.name,
            amount=orm.amount,
            cash_back=orm.cash_back,
            cashback_posted=orm.cashback_posted,
            notes=orm.notes,
            pending=orm.pending,
            pending_tip_amount=orm.pending_tip_amount,
            sort_order=orm.sort_order,
        )
