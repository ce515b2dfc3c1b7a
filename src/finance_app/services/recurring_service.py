"""Recurring bills, pay period windows and per-period bill state."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from finance_app.core.exceptions import NotFoundError, ValidationError
from finance_app.core.pay_periods import (
    current_pay_period,
    next_pay_period,
    due_date_in_period,
)
from finance_app.core.timezone import today_local
from finance_app.core.unset import UNSET, Unset
from finance_app.domain.models import (
    RecurringCategory,
    RecurringTransaction,
    CompletedTransaction,
    PendingOverride,
    ManualPendingTransaction,
)
from finance_app.domain.views import PayPeriod, PendingBill, PendingBillsView
from finance_app.repositories.protocols import (
    RecurringCategoryRepository,
    RecurringTransactionRepository,
    PayPeriodStateRepository,
    ManualPendingRepository,
    PaySettingsRepository,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass
class RecurringTransactionCreate:
    name: str
    amount: Decimal
    due_date: int
    is_essential: bool = False
    category_id: Optional[str] = None


@dataclass
class RecurringTransactionUpdate:
    name: Optional[str] = None
    amount: Optional[Decimal] = None
    due_date: Optional[int] = None
    is_essential: Optional[bool] = None
    category_id: Union[str, None, Unset] = UNSET


@dataclass
class ManualPendingCreate:
    name: str
    amount: Decimal
    due_date: Optional[date] = None
    category_id: Optional[str] = None
    notes: Optional[str] = None
    pay_period_start: Optional[date] = None
    pay_period_end: Optional[date] = None
    is_completed: bool = False


@dataclass
class ManualPendingUpdate:
    name: Optional[str] = None
    amount: Optional[Decimal] = None
    due_date: Union[date, None, Unset] = UNSET
    category_id: Union[str, None, Unset] = UNSET
    notes: Union[str, None, Unset] = UNSET
    pay_period_start: Union[date, None, Unset] = UNSET
    pay_period_end: Union[date, None, Unset] = UNSET
    is_completed: Optional[bool] = None


class RecurringService:
    """
    Service for monthly bills and how they land in pay periods.

    A bill is due on a day of the month; the pending view shows the bills
    whose due date falls inside the current pay period, with per-period
    completion flags and amount overrides applied.
    """

    def __init__(
        self,
        category_repo: RecurringCategoryRepository,
        bill_repo: RecurringTransactionRepository,
        state_repo: PayPeriodStateRepository,
        manual_repo: ManualPendingRepository,
        pay_settings_repo: PaySettingsRepository,
    ):
        self._category_repo = category_repo
        self._bill_repo = bill_repo
        self._state_repo = state_repo
        self._manual_repo = manual_repo
        self._pay_settings_repo = pay_settings_repo

    # -------------------------------------------------------------------------
    # Recurring categories
    # -------------------------------------------------------------------------

    def list_categories(self) -> list[RecurringCategory]:
        return self._category_repo.list_all()

    def get_category(self, category_id: str) -> RecurringCategory:
        category = self._category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("Recurring category", category_id)
        return category

    def create_category(
        self,
        name: str,
        color: str = "#6B7280",
        is_active: bool = True,
    ) -> RecurringCategory:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        category = RecurringCategory(
            id=str(uuid.uuid4()),
            name=name,
            color=color,
            is_active=is_active,
        )
        return self._category_repo.create(category)

    def update_category(
        self,
        category_id: str,
        name: Optional[str] = None,
        color: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> RecurringCategory:
        category = self.get_category(category_id)
        if name is not None:
            if not name.strip():
                raise ValidationError("Name is required")
            category.name = name.strip()
        if color is not None:
            category.color = color
        if is_active is not None:
            category.is_active = is_active
        return self._category_repo.update(category)

    def delete_category(self, category_id: str) -> None:
        """Delete a category; its bills become uncategorized."""
        self.get_category(category_id)
        self._category_repo.delete(category_id)

    # -------------------------------------------------------------------------
    # Recurring transactions (bills)
    # -------------------------------------------------------------------------

    def list_bills(self) -> list[RecurringTransaction]:
        return self._bill_repo.list_all()

    def get_bill(self, bill_id: str) -> RecurringTransaction:
        bill = self._bill_repo.get_by_id(bill_id)
        if not bill:
            raise NotFoundError("Recurring transaction", bill_id)
        return bill

    def create_bill(self, data: RecurringTransactionCreate) -> RecurringTransaction:
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        self._validate_bill_values(data.amount, data.due_date)

        bill = RecurringTransaction(
            id=str(uuid.uuid4()),
            name=name,
            amount=data.amount,
            due_date=data.due_date,
            is_essential=data.is_essential,
            category_id=self._checked_category_id(data.category_id, name),
        )
        return self._bill_repo.create(bill)

    def update_bill(self, bill_id: str, patch: RecurringTransactionUpdate) -> RecurringTransaction:
        bill = self.get_bill(bill_id)

        if patch.name is not None:
            if not patch.name.strip():
                raise ValidationError("Name is required")
            bill.name = patch.name.strip()
        if patch.amount is not None:
            bill.amount = patch.amount
        if patch.due_date is not None:
            bill.due_date = patch.due_date
        if patch.is_essential is not None:
            bill.is_essential = patch.is_essential
        if patch.category_id is not UNSET:
            bill.category_id = self._checked_category_id(patch.category_id, bill.name)
        self._validate_bill_values(bill.amount, bill.due_date)

        return self._bill_repo.update(bill)

    def delete_bill(self, bill_id: str) -> None:
        """Delete a bill with its completions and overrides."""
        self.get_bill(bill_id)
        self._bill_repo.delete(bill_id)

    # -------------------------------------------------------------------------
    # Pay period views
    # -------------------------------------------------------------------------

    def current_period(self, today: Optional[date] = None) -> Optional[PayPeriod]:
        settings = self._pay_settings_repo.get()
        if settings is None:
            return None
        return current_pay_period(settings.last_pay_date, settings.frequency, today or today_local())

    def next_period(self, today: Optional[date] = None) -> Optional[PayPeriod]:
        settings = self._pay_settings_repo.get()
        if settings is None:
            return None
        return next_pay_period(settings.last_pay_date, settings.frequency, today or today_local())

    def get_pending_bills(self, today: Optional[date] = None) -> PendingBillsView:
        """
        Bills due in the current pay period.

        Completion flags and per-period amount overrides are applied. Returns
        an empty view when pay settings have not been saved.
        """
        today = today or today_local()
        period = self.current_period(today)
        if period is None:
            return PendingBillsView()

        overrides = {
            o.recurring_transaction_id: o.amount
            for o in self._state_repo.list_overrides(period.start, period.end)
        }
        completed = {
            c.recurring_transaction_id
            for c in self._state_repo.list_completions(period.start, period.end)
        }
        bills = self._bills_in_period(period, today, overrides, completed)
        return PendingBillsView(period=period, bills=bills)

    def get_next_period_bills(self, today: Optional[date] = None) -> PendingBillsView:
        """Bills due in the pay period after the current one (no state applied)."""
        today = today or today_local()
        period = self.next_period(today)
        if period is None:
            return PendingBillsView()
        return PendingBillsView(period=period, bills=self._bills_in_period(period, today))

    def monthly_recurring_total(self) -> Decimal:
        return sum((b.amount for b in self._bill_repo.list_all()), ZERO)

    def set_pending_override(
        self,
        bill_id: str,
        amount: Decimal,
        period_start: date,
        period_end: date,
    ) -> PendingOverride:
        """Replace a bill's amount for one pay period only."""
        self.get_bill(bill_id)
        if amount < 0:
            raise ValidationError("Amount cannot be negative")
        self._validate_period(period_start, period_end)
        override = PendingOverride(
            id=str(uuid.uuid4()),
            recurring_transaction_id=bill_id,
            pay_period_start=period_start,
            pay_period_end=period_end,
            amount=amount,
        )
        return self._state_repo.save_override(override)

    # -------------------------------------------------------------------------
    # Completions
    # -------------------------------------------------------------------------

    def list_completed(
        self,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> list[CompletedTransaction]:
        return self._state_repo.list_completions(period_start, period_end)

    def mark_completed(
        self,
        bill_id: str,
        period_start: date,
        period_end: date,
        today: Optional[date] = None,
    ) -> CompletedTransaction:
        """Mark a bill paid for a period. Marking twice returns the first record."""
        self.get_bill(bill_id)
        self._validate_period(period_start, period_end)

        existing = self._state_repo.get_completion(bill_id, period_start, period_end)
        if existing:
            return existing

        completion = CompletedTransaction(
            id=str(uuid.uuid4()),
            recurring_transaction_id=bill_id,
            pay_period_start=period_start,
            pay_period_end=period_end,
            completed_date=today or today_local(),
        )
        return self._state_repo.create_completion(completion)

    def unmark_completed(self, completion_id: str) -> None:
        if not self._state_repo.get_completion_by_id(completion_id):
            raise NotFoundError("Completed transaction", completion_id)
        self._state_repo.delete_completion(completion_id)

    # -------------------------------------------------------------------------
    # Manual pending transactions
    # -------------------------------------------------------------------------

    def list_manual_pending(
        self,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> list[ManualPendingTransaction]:
        return self._manual_repo.query(period_start, period_end)

    def get_manual_pending(self, item_id: str) -> ManualPendingTransaction:
        item = self._manual_repo.get_by_id(item_id)
        if not item:
            raise NotFoundError("Manual pending transaction", item_id)
        return item

    def create_manual_pending(self, data: ManualPendingCreate) -> ManualPendingTransaction:
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        if data.amount < 0:
            raise ValidationError("Amount cannot be negative")

        item = ManualPendingTransaction(
            id=str(uuid.uuid4()),
            name=name,
            amount=data.amount,
            due_date=data.due_date,
            category_id=data.category_id,
            notes=data.notes,
            pay_period_start=data.pay_period_start,
            pay_period_end=data.pay_period_end,
            is_completed=data.is_completed,
        )
        return self._manual_repo.create(item)

    def update_manual_pending(
        self,
        item_id: str,
        patch: ManualPendingUpdate,
    ) -> ManualPendingTransaction:
        item = self.get_manual_pending(item_id)

        if patch.name is not None:
            if not patch.name.strip():
                raise ValidationError("Name is required")
            item.name = patch.name.strip()
        if patch.amount is not None:
            if patch.amount < 0:
                raise ValidationError("Amount cannot be negative")
            item.amount = patch.amount
        if patch.due_date is not UNSET:
            item.due_date = patch.due_date
        if patch.category_id is not UNSET:
            item.category_id = patch.category_id
        if patch.notes is not UNSET:
            item.notes = patch.notes
        if patch.pay_period_start is not UNSET:
            item.pay_period_start = patch.pay_period_start
        if patch.pay_period_end is not UNSET:
            item.pay_period_end = patch.pay_period_end
        if patch.is_completed is not None:
            item.is_completed = patch.is_completed

        return self._manual_repo.update(item)

    def set_manual_pending_completion(
        self,
        item_id: str,
        is_completed: bool,
    ) -> ManualPendingTransaction:
        item = self.get_manual_pending(item_id)
        item.is_completed = is_completed
        return self._manual_repo.update(item)

    def delete_manual_pending(self, item_id: str) -> None:
        self.get_manual_pending(item_id)
        self._manual_repo.delete(item_id)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _bills_in_period(
        self,
        period: PayPeriod,
        today: date,
        overrides: Optional[dict[str, Decimal]] = None,
        completed: Optional[set[str]] = None,
    ) -> list[PendingBill]:
        overrides = overrides or {}
        completed = completed or set()
        pending: list[PendingBill] = []

        for bill in self._bill_repo.list_all():
            due = due_date_in_period(bill.due_date, period)
            if due is None:
                continue
            amount = overrides.get(bill.id, bill.amount)
            pending.append(
                PendingBill(
                    recurring_transaction_id=bill.id,
                    name=bill.name,
                    amount=amount,
                    base_amount=bill.amount,
                    due_date=due,
                    days_until_due=max(0, (due - today).days),
                    pay_period_start=period.start,
                    pay_period_end=period.end,
                    is_essential=bill.is_essential,
                    category_id=bill.category_id,
                    is_completed=bill.id in completed,
                    has_override=bill.id in overrides,
                )
            )

        pending.sort(key=lambda b: (b.days_until_due, b.name))
        return pending

    def _checked_category_id(self, category_id: Optional[str], bill_name: str) -> Optional[str]:
        """Drop a category reference that points at nothing."""
        if not category_id:
            return None
        if self._category_repo.get_by_id(category_id) is None:
            logger.warning(
                "Recurring category %s not found for bill %r; storing it uncategorized",
                category_id,
                bill_name,
            )
            return None
        return category_id

    @staticmethod
    def _validate_bill_values(amount: Decimal, due_day: int) -> None:
        if amount < 0:
            raise ValidationError("Amount cannot be negative")
        if not 1 <= due_day <= 31:
            raise ValidationError("Due date must be a day of the month between 1 and 31")

    @staticmethod
    def _validate_period(period_start: date, period_end: date) -> None:
        if period_start > period_end:
            raise ValidationError("Pay period start must be on or before its end")
