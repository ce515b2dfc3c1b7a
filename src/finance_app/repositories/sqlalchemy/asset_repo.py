"""SQLAlchemy implementations of asset, fund account and credit card repositories."""

from typing import Optional

from sqlalchemy.orm import Session

from finance_app.domain.models import AssetSnapshot, FundAccount, CreditCard
from finance_app.repositories.sqlalchemy.orm_models import (
    AssetSnapshotORM,
    FundAccountORM,
    CreditCardORM,
)


class SqlAlchemyAssetSnapshotRepository:
    """SQLAlchemy-backed asset snapshot repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, snapshot: AssetSnapshot) -> AssetSnapshot:
        """Persist a new snapshot (total is stored for history queries)."""
        orm_snapshot = AssetSnapshotORM(
            id=snapshot.id,
            date=snapshot.date,
            cash=snapshot.cash,
            stocks=snapshot.stocks,
            interest=snapshot.interest,
            checking=snapshot.checking,
            retirement_401k=snapshot.retirement_401k,
            house_fund=snapshot.house_fund,
            vacation_fund=snapshot.vacation_fund,
            emergency_fund=snapshot.emergency_fund,
            total_assets=snapshot.total_assets,
        )
        self._db.add(orm_snapshot)
        self._db.commit()
        self._db.refresh(orm_snapshot)
        return self._to_domain(orm_snapshot)

    def get_latest(self) -> Optional[AssetSnapshot]:
        """Return the most recent snapshot."""
        orm_snapshot = (
            self._db.query(AssetSnapshotORM)
            .order_by(AssetSnapshotORM.date.desc(), AssetSnapshotORM.created_at.desc())
            .first()
        )
        return self._to_domain(orm_snapshot) if orm_snapshot else None

    def list_recent(self, limit: int) -> list[AssetSnapshot]:
        """List snapshots, newest first."""
        orm_snapshots = (
            self._db.query(AssetSnapshotORM)
            .order_by(AssetSnapshotORM.date.desc(), AssetSnapshotORM.created_at.desc())
            .limit(limit)
            .all()
        )
        return [self._to_domain(s) for s in orm_snapshots]

    @staticmethod
    def _to_domain(orm: AssetSnapshotORM) -> AssetSnapshot:
        return AssetSnapshot(
            id=orm.id,
            date=orm.date,
            cash=orm.cash,
            stocks=orm.stocks,
            interest=orm.interest,
            checking=orm.checking,
            retirement_401k=orm.retirement_401k,
            house_fund=orm.house_fund,
            vacation_fund=orm.vacation_fund,
            emergency_fund=orm.emergency_fund,
        )


class SqlAlchemyFundAccountRepository:
    """SQLAlchemy-backed fund account repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, account: FundAccount) -> FundAccount:
        orm_account = FundAccountORM(
            id=account.id,
            name=account.name,
            amount=account.amount,
            description=account.description,
            color=account.color,
            icon=account.icon,
            is_active=account.is_active,
            is_investing=account.is_investing,
            sort_order=account.sort_order,
        )
        self._db.add(orm_account)
        self._db.commit()
        self._db.refresh(orm_account)
        return self._to_domain(orm_account)

    def get_by_id(self, account_id: str) -> Optional[FundAccount]:
        orm_account = self._db.query(FundAccountORM).filter(
            FundAccountORM.id == account_id
        ).first()
        return self._to_domain(orm_account) if orm_account else None

    def list_active(self) -> list[FundAccount]:
        orm_accounts = (
            self._db.query(FundAccountORM)
            .filter(FundAccountORM.is_active == True)  # noqa: E712
            .order_by(FundAccountORM.sort_order, FundAccountORM.name)
            .all()
        )
        return [self._to_domain(a) for a in orm_accounts]

    def update(self, account: FundAccount) -> FundAccount:
        orm_account = self._db.query(FundAccountORM).filter(
            FundAccountORM.id == account.id
        ).first()
        if orm_account:
            orm_account.name = account.name
            orm_account.amount = account.amount
            orm_account.description = account.description
            orm_account.color = account.color
            orm_account.icon = account.icon
            orm_account.is_active = account.is_active
            orm_account.is_investing = account.is_investing
            orm_account.sort_order = account.sort_order
            self._db.commit()
            self._db.refresh(orm_account)
            return self._to_domain(orm_account)
        raise ValueError(f"Fund account not found: {account.id}")

    @staticmethod
    def _to_domain(orm: FundAccountORM) -> FundAccount:
        return FundAccount(
            id=orm.id,
            name=orm.name,
            amount=orm.amount,
            description=orm.description,
            color=orm.color,
            icon=orm.icon,
            is_active=orm.is_active,
            is_investing=orm.is_investing,
            sort_order=orm.sort_order,
        )


class SqlAlchemyCreditCardRepository:
    """SQLAlchemy-backed credit card repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, card: CreditCard) -> CreditCard:
        orm_card = CreditCardORM(
            id=card.id,
            name=card.name,
            balance=card.balance,
            limit=card.limit,
            color=card.color,
        )
        self._db.add(orm_card)
        self._db.commit()
        self._db.refresh(orm_card)
        return self._to_domain(orm_card)

    def get_by_id(self, card_id: str) -> Optional[CreditCard]:
        orm_card = self._db.query(CreditCardORM).filter(CreditCardORM.id == card_id).first()
        return self._to_domain(orm_card) if orm_card else None

    def list_all(self) -> list[CreditCard]:
        orm_cards = self._db.query(CreditCardORM).order_by(CreditCardORM.name).all()
        return [self._to_domain(c) for c in orm_cards]

    def update(self, card: CreditCard) -> CreditCard:
        orm_card = self._db.query(CreditCardORM).filter(CreditCardORM.id == card.id).first()
        if orm_card:
            orm_card.name = card.name
            orm_card.balance = card.balance
            orm_card.limit = card.limit
            orm_card.color = card.color
            self._db.commit()
            self._db.refresh(orm_card)
            return self._to_domain(orm_card)
        raise ValueError(f"Credit card not found: {card.id}")

    def delete(self, card_id: str) -> None:
        self._db.query(CreditCardORM).filter(CreditCardORM.id == card_id).delete()
        self._db.commit()

    @staticmethod
    def _to_domain(orm: CreditCardORM) -> CreditCard:
        return CreditCard(
            id=orm.id,
            name=orm.name,
            balance=orm.balance,
            limit=orm.limit,
            color=orm.color,
        )
