"""Budget category and spending transaction repository protocols."""

from datetime import date
from typing import Protocol, Optional

from finance_app.domain.models import BudgetCategory, Transaction


class BudgetCategoryRepository(Protocol):
    """Interface for budget category data access."""

    def create(self, category: BudgetCategory) -> BudgetCategory:
        ...

    def get_by_id(self, category_id: str) -> Optional[BudgetCategory]:
        ...

    def list_all(self, active_only: bool = False) -> list[BudgetCategory]:
        """List categories ordered by name."""
        ...

    def update(self, category: BudgetCategory) -> BudgetCategory:
        ...

    def delete(self, category_id: str) -> None:
        """Delete a category together with its transactions."""
        ...


class TransactionRepository(Protocol):
    """Interface for spending transaction data access."""

    def create(self, transaction: Transaction) -> Transaction:
        ...

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        ...

    def query(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions in an inclusive date range, newest first."""
        ...

    def update(self, transaction: Transaction) -> Transaction:
        ...

    def delete(self, transaction_id: str) -> None:
        ...

    def max_sort_order(self) -> int:
        """Return the highest sort order in use (0 when empty)."""
        ...

    def set_sort_orders(self, orders: dict[str, int]) -> None:
        """Assign sort orders by transaction ID in one commit."""
        ...
