"""Recurring bill and pay period state repository protocols."""

from datetime import date
from typing import Protocol, Optional

from finance_app.domain.models import (
    RecurringCategory,
    RecurringTransaction,
    CompletedTransaction,
    PendingOverride,
    ManualPendingTransaction,
)


class RecurringCategoryRepository(Protocol):
    """Interface for recurring category data access."""

    def create(self, category: RecurringCategory) -> RecurringCategory:
        ...

    def get_by_id(self, category_id: str) -> Optional[RecurringCategory]:
        ...

    def list_all(self) -> list[RecurringCategory]:
        ...

    def update(self, category: RecurringCategory) -> RecurringCategory:
        ...

    def delete(self, category_id: str) -> None:
        """Delete the category and detach bills that referenced it."""
        ...


class RecurringTransactionRepository(Protocol):
    """Interface for recurring bill data access."""

    def create(self, bill: RecurringTransaction) -> RecurringTransaction:
        ...

    def get_by_id(self, bill_id: str) -> Optional[RecurringTransaction]:
        ...

    def list_all(self) -> list[RecurringTransaction]:
        """List bills ordered by due day, then name."""
        ...

    def update(self, bill: RecurringTransaction) -> RecurringTransaction:
        ...

    def delete(self, bill_id: str) -> None:
        """Delete a bill with its completions and overrides."""
        ...


class PayPeriodStateRepository(Protocol):
    """Interface for per-period bill completions and amount overrides."""

    def get_completion(
        self,
        bill_id: str,
        period_start: date,
        period_end: date,
    ) -> Optional[CompletedTransaction]:
        ...

    def get_completion_by_id(self, completion_id: str) -> Optional[CompletedTransaction]:
        ...

    def list_completions(
        self,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> list[CompletedTransaction]:
        ...

    def create_completion(self, completion: CompletedTransaction) -> CompletedTransaction:
        ...

    def delete_completion(self, completion_id: str) -> None:
        ...

    def list_overrides(self, period_start: date, period_end: date) -> list[PendingOverride]:
        ...

    def save_override(self, override: PendingOverride) -> PendingOverride:
        """Insert or replace the override for the bill and period."""
        ...


class ManualPendingRepository(Protocol):
    """Interface for manual pending transaction data access."""

    def create(self, item: ManualPendingTransaction) -> ManualPendingTransaction:
        ...

    def get_by_id(self, item_id: str) -> Optional[ManualPendingTransaction]:
        ...

    def query(
        self,
        period_start: Optional[date] = None,
        period_end: Optional[date] = None,
    ) -> list[ManualPendingTransaction]:
        ...

    def update(self, item: ManualPendingTransaction) -> ManualPendingTransaction:
        ...

    def delete(self, item_id: str) -> None:
        ...
