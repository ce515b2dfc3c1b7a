"""Asset snapshots, fund accounts and credit cards."""

import logging
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from finance_app.core.exceptions import NotFoundError, ValidationError
from finance_app.core.timezone import today_local
from finance_app.core.unset import UNSET, Unset
from finance_app.domain.models import (
    AssetSnapshot,
    FundAccount,
    CreditCard,
    ASSET_BALANCE_FIELDS,
)
from finance_app.domain.views import FundAccountsView, CreditCardsView
from finance_app.repositories.protocols import (
    AssetSnapshotRepository,
    FundAccountRepository,
    CreditCardRepository,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass
class AssetBalances:
    """Input for a new asset snapshot."""

    cash: Decimal = ZERO
    stocks: Decimal = ZERO
    interest: Decimal = ZERO
    checking: Decimal = ZERO
    retirement_401k: Decimal = ZERO
    house_fund: Decimal = ZERO
    vacation_fund: Decimal = ZERO
    emergency_fund: Decimal = ZERO


@dataclass
class FundAccountCreate:
    name: str
    amount: Decimal = ZERO
    description: Optional[str] = None
    color: str = "#3B82F6"
    icon: Optional[str] = None
    is_active: bool = True
    is_investing: bool = False
    sort_order: int = 0


@dataclass
class FundAccountUpdate:
    name: Optional[str] = None
    amount: Optional[Decimal] = None
    description: Union[str, None, Unset] = UNSET
    color: Optional[str] = None
    icon: Union[str, None, Unset] = UNSET
    is_active: Optional[bool] = None
    is_investing: Optional[bool] = None
    sort_order: Optional[int] = None


@dataclass
class CreditCardCreate:
    name: str
    balance: Decimal
    limit: Decimal
    color: str = "#000000"


@dataclass
class CreditCardUpdate:
    name: Optional[str] = None
    balance: Optional[Decimal] = None
    limit: Optional[Decimal] = None
    color: Optional[str] = None


class AssetService:
    """
    Service for the user's balance sheet.

    Asset snapshots are append-only; fund accounts are soft deleted; credit
    cards are plain CRUD.
    """

    def __init__(
        self,
        snapshot_repo: AssetSnapshotRepository,
        fund_account_repo: FundAccountRepository,
        credit_card_repo: CreditCardRepository,
    ):
        self._snapshot_repo = snapshot_repo
        self._fund_account_repo = fund_account_repo
        self._credit_card_repo = credit_card_repo

    # -------------------------------------------------------------------------
    # Asset snapshots
    # -------------------------------------------------------------------------

    def get_latest(self) -> AssetSnapshot:
        """Return the latest snapshot, or an all-zero one (id=None) when empty."""
        latest = self._snapshot_repo.get_latest()
        if latest is None:
            return AssetSnapshot(id=None, date=today_local())
        return latest

    def record_snapshot(self, balances: AssetBalances) -> AssetSnapshot:
        """Append a snapshot dated today."""
        for name in ASSET_BALANCE_FIELDS:
            if getattr(balances, name) is None:
                raise ValidationError(f"Invalid value for {name}")

        snapshot = AssetSnapshot(
            id=str(uuid.uuid4()),
            date=today_local(),
            **{name: getattr(balances, name) for name in ASSET_BALANCE_FIELDS},
        )
        created = self._snapshot_repo.create(snapshot)
        logger.info("Recorded asset snapshot %s (total %s)", created.id, created.total_assets)
        return created

    def list_history(self, limit: int = 30) -> list[AssetSnapshot]:
        if limit <= 0:
            raise ValidationError("limit must be positive")
        return self._snapshot_repo.list_recent(limit)

    # -------------------------------------------------------------------------
    # Fund accounts
    # -------------------------------------------------------------------------

    def list_fund_accounts(self) -> FundAccountsView:
        accounts = self._fund_account_repo.list_active()
        return FundAccountsView(
            accounts=accounts,
            total=sum((a.amount for a in accounts), ZERO),
            investing_total=sum((a.amount for a in accounts if a.is_investing), ZERO),
        )

    def create_fund_account(self, data: FundAccountCreate) -> FundAccount:
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        if data.amount < 0:
            raise ValidationError("Amount must be a valid positive number")

        account = FundAccount(
            id=str(uuid.uuid4()),
            name=name,
            amount=data.amount,
            description=data.description.strip() if data.description else None,
            color=data.color,
            icon=data.icon,
            is_active=data.is_active,
            is_investing=data.is_investing,
            sort_order=data.sort_order,
        )
        return self._fund_account_repo.create(account)

    def update_fund_account(self, account_id: str, patch: FundAccountUpdate) -> FundAccount:
        account = self._fund_account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Fund account", account_id)

        if patch.name is not None:
            if not patch.name.strip():
                raise ValidationError("Name is required")
            account.name = patch.name.strip()
        if patch.amount is not None:
            if patch.amount < 0:
                raise ValidationError("Amount must be a valid positive number")
            account.amount = patch.amount
        if patch.description is not UNSET:
            account.description = patch.description.strip() if patch.description is not None else None
        if patch.color is not None:
            account.color = patch.color
        if patch.icon is not UNSET:
            account.icon = patch.icon
        if patch.is_active is not None:
            account.is_active = patch.is_active
        if patch.is_investing is not None:
            account.is_investing = patch.is_investing
        if patch.sort_order is not None:
            account.sort_order = patch.sort_order

        return self._fund_account_repo.update(account)

    def delete_fund_account(self, account_id: str) -> None:
        """Soft delete: the account is hidden but kept."""
        account = self._fund_account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Fund account", account_id)
        account.is_active = False
        self._fund_account_repo.update(account)

    # -------------------------------------------------------------------------
    # Credit cards
    # -------------------------------------------------------------------------

    def list_credit_cards(self) -> CreditCardsView:
        cards = self._credit_card_repo.list_all()
        return CreditCardsView(
            cards=cards,
            total_balance=sum((c.balance for c in cards), ZERO),
            total_limit=sum((c.limit for c in cards), ZERO),
        )

    def get_credit_card(self, card_id: str) -> CreditCard:
        card = self._credit_card_repo.get_by_id(card_id)
        if not card:
            raise NotFoundError("Credit card", card_id)
        return card

    def create_credit_card(self, data: CreditCardCreate) -> CreditCard:
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        self._validate_card_amounts(data.balance, data.limit)

        card = CreditCard(
            id=str(uuid.uuid4()),
            name=name,
            balance=data.balance,
            limit=data.limit,
            color=data.color,
        )
        return self._credit_card_repo.create(card)

    def update_credit_card(self, card_id: str, patch: CreditCardUpdate) -> CreditCard:
        card = self.get_credit_card(card_id)

        if patch.name is not None:
            if not patch.name.strip():
                raise ValidationError("Name is required")
            card.name = patch.name.strip()
        if patch.balance is not None:
            card.balance = patch.balance
        if patch.limit is not None:
            card.limit = patch.limit
        if patch.color is not None:
            card.color = patch.color
        self._validate_card_amounts(card.balance, card.limit)

        return self._credit_card_repo.update(card)

    def delete_credit_card(self, card_id: str) -> None:
        self.get_credit_card(card_id)
        self._credit_card_repo.delete(card_id)

    def total_credit_card_debt(self) -> Decimal:
        return sum((c.balance for c in self._credit_card_repo.list_all()), ZERO)

    @staticmethod
    def _validate_card_amounts(balance: Decimal, limit: Decimal) -> None:
        if balance < 0:
            raise ValidationError("Balance cannot be negative")
        if limit <= 0:
            raise ValidationError("Credit limit must be greater than zero")
