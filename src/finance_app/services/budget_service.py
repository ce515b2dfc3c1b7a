"""Budget categories and spending transactions."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from finance_app.core.exceptions import NotFoundError, ValidationError
from finance_app.core.timezone import parse_date
from finance_app.core.unset import UNSET, Unset
from finance_app.domain.models import BudgetCategory, Transaction
from finance_app.domain.views import BulkCreateResult
from finance_app.repositories.protocols import BudgetCategoryRepository, TransactionRepository

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass
class BudgetCategoryCreate:
    name: str
    allocated_amount: Decimal = ZERO
    color: str = "#3B82F6"
    is_active: bool = True
    is_budget_category: bool = True


@dataclass
class BudgetCategoryUpdate:
    name: Optional[str] = None
    allocated_amount: Optional[Decimal] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None
    is_budget_category: Optional[bool] = None


@dataclass
class TransactionCreate:
    """Input data for recording a spending transaction."""

    date: date
    category_id: str
    name: str
    amount: Decimal
    cash_back: Decimal = ZERO
    cashback_posted: bool = False
    notes: Optional[str] = None
    pending: bool = False
    pending_tip_amount: Decimal = ZERO


@dataclass
class TransactionUpdate:
    """Partial update data for editing a transaction."""

    date: Optional[date] = None
    category_id: Optional[str] = None
    name: Optional[str] = None
    amount: Optional[Decimal] = None
    cash_back: Optional[Decimal] = None
    cashback_posted: Optional[bool] = None
    notes: Union[str, None, Unset] = UNSET
    pending: Optional[bool] = None
    pending_tip_amount: Optional[Decimal] = None


class BudgetService:
    """Service for budget categories and the spending ledger."""

    def __init__(
        self,
        category_repo: BudgetCategoryRepository,
        transaction_repo: TransactionRepository,
    ):
        self._category_repo = category_repo
        self._transaction_repo = transaction_repo

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    def list_categories(self, active_only: bool = False) -> list[BudgetCategory]:
        return self._category_repo.list_all(active_only=active_only)

    def total_allocated(self) -> Decimal:
        """Monthly allocation summed over active budget categories."""
        return sum(
            (
                c.allocated_amount
                for c in self._category_repo.list_all(active_only=True)
                if c.is_budget_category
            ),
            ZERO,
        )

    def get_category(self, category_id: str) -> BudgetCategory:
        category = self._category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Budget category", category_id)
        return category

    def create_category(self, data: BudgetCategoryCreate) -> BudgetCategory:
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        if data.allocated_amount < 0:
            raise ValidationError("Allocated amount cannot be negative")

        category = BudgetCategory(
            id=str(uuid.uuid4()),
            name=name,
            allocated_amount=data.allocated_amount,
            color=data.color,
            is_active=data.is_active,
            is_budget_category=data.is_budget_category,
        )
        return self._category_repo.create(category)

    def update_category(self, category_id: str, patch: BudgetCategoryUpdate) -> BudgetCategory:
        category = self.get_category(category_id)

        if patch.name is not None:
            if not patch.name.strip():
                raise ValidationError("Name is required")
            category.name = patch.name.strip()
        if patch.allocated_amount is not None:
            if patch.allocated_amount < 0:
                raise ValidationError("Allocated amount cannot be negative")
            category.allocated_amount = patch.allocated_amount
        if patch.color is not None:
            category.color = patch.color
        if patch.is_active is not None:
            category.is_active = patch.is_active
        if patch.is_budget_category is not None:
            category.is_budget_category = patch.is_budget_category

        return self._category_repo.update(category)

    def delete_category(self, category_id: str) -> None:
        """Delete a category together with its transactions."""
        self.get_category(category_id)
        self._category_repo.delete(category_id)
        logger.info("Deleted budget category %s and its transactions", category_id)

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        if start_date and end_date and start_date > end_date:
            raise ValidationError("start_date must be on or before end_date")
        if limit is not None and limit <= 0:
            raise ValidationError("limit must be positive")
        return self._transaction_repo.query(start_date=start_date, end_date=end_date, limit=limit)

    def get_transaction(self, transaction_id: str) -> Transaction:
        transaction = self._transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    def create_transaction(self, data: TransactionCreate) -> Transaction:
        """Record a transaction at the end of the manual sort order."""
        self._validate_transaction(data)
        self.get_category(data.category_id)

        transaction = Transaction(
            id=str(uuid.uuid4()),
            date=data.date,
            category_id=data.category_id,
            name=data.name.strip(),
            amount=data.amount,
            cash_back=data.cash_back,
            cashback_posted=data.cashback_posted,
            notes=data.notes,
            pending=data.pending,
            pending_tip_amount=data.pending_tip_amount,
            sort_order=self._transaction_repo.max_sort_order() + 1,
        )
        return self._transaction_repo.create(transaction)

    def update_transaction(self, transaction_id: str, patch: TransactionUpdate) -> Transaction:
        transaction = self.get_transaction(transaction_id)

        if patch.date is not None:
            transaction.date = patch.date
        if patch.category_id is not None:
            self.get_category(patch.category_id)
            transaction.category_id = patch.category_id
        if patch.name is not None:
            transaction.name = patch.name.strip()
        if patch.amount is not None:
            transaction.amount = patch.amount
        if patch.cash_back is not None:
            transaction.cash_back = patch.cash_back
        if patch.cashback_posted is not None:
            transaction.cashback_posted = patch.cashback_posted
        if patch.notes is not UNSET:
            transaction.notes = patch.notes
        if patch.pending is not None:
            transaction.pending = patch.pending
        if patch.pending_tip_amount is not None:
            transaction.pending_tip_amount = patch.pending_tip_amount

        self._validate_transaction(transaction)
        return self._transaction_repo.update(transaction)

    def delete_transaction(self, transaction_id: str) -> None:
        self.get_transaction(transaction_id)
        self._transaction_repo.delete(transaction_id)

    def bulk_create(self, items: list[dict[str, Any]]) -> BulkCreateResult:
        """
        Create transactions from raw dicts, one at a time.

        Invalid items are skipped and reported as "Transaction N: reason"
        (1-based). Raises ValidationError only when nothing was created.
        """
        if not items:
            raise ValidationError("transactions array is required")

        result = BulkCreateResult()
        for index, item in enumerate(items, start=1):
            try:
                data = self._parse_bulk_item(item)
                result.created.append(self.create_transaction(data))
            except (ValidationError, NotFoundError) as exc:
                result.errors.append(f"Transaction {index}: {exc.message}")

        if result.errors:
            logger.warning("Bulk import skipped %d of %d transactions", len(result.errors), len(items))
        if not result.created:
            raise ValidationError("No transactions were created: " + "; ".join(result.errors))
        return result

    def reorder(self, transaction_ids: list[str]) -> None:
        """Assign sort order by list position (first id sorts highest)."""
        if not transaction_ids:
            return
        count = len(transaction_ids)
        self._transaction_repo.set_sort_orders(
            {txn_id: count - position for position, txn_id in enumerate(transaction_ids)}
        )

    @staticmethod
    def _validate_transaction(data) -> None:
        if not (data.name or "").strip():
            raise ValidationError("Name is required")
        if data.amount < 0:
            raise ValidationError("Amount cannot be negative")
        if data.cash_back < 0:
            raise ValidationError("Cash back must be a non-negative number")
        if data.pending_tip_amount < 0:
            raise ValidationError("Pending tip amount must be a non-negative number")

    @staticmethod
    def _parse_bulk_item(item: dict[str, Any]) -> TransactionCreate:
        if not isinstance(item, dict):
            raise ValidationError("Each transaction must be an object")
        if not item.get("date") or not item.get("name") or item.get("amount") is None:
            raise ValidationError("Date, name, and amount are required fields")
        if not item.get("category_id"):
            raise ValidationError("category_id is required")
        try:
            txn_date = parse_date(item["date"])
        except (ValueError, OverflowError):
            raise ValidationError("Date must be in YYYY-MM-DD format")

        def to_decimal(key: str, label: str) -> Decimal:
            value = item.get(key)
            if value is None:
                return ZERO
            try:
                return Decimal(str(value))
            except InvalidOperation:
                raise ValidationError(f"{label} must be a number")

        return TransactionCreate(
            date=txn_date,
            category_id=str(item["category_id"]),
            name=str(item["name"]),
            amount=to_decimal("amount", "Amount"),
            cash_back=to_decimal("cash_back", "Cash back"),
            cashback_posted=bool(item.get("cashback_posted", False)),
            notes=item.get("notes"),
            pending=bool(item.get("pending", False)),
            pending_tip_amount=to_decimal("pending_tip_amount", "Pending tip amount"),
        )
