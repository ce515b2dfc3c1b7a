"""Income entry repository protocol."""

from datetime import date
from typing import Protocol, Optional

from finance_app.domain.models import IncomeEntry


class IncomeEntryRepository(Protocol):
    """Interface for income entry data access."""

    def create(self, entry: IncomeEntry) -> IncomeEntry:
        ...

    def get_by_id(self, entry_id: str) -> Optional[IncomeEntry]:
        ...

    def query(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[IncomeEntry]:
        """List entries in an inclusive date range, newest first."""
        ...

    def update(self, entry: IncomeEntry) -> IncomeEntry:
        ...

    def delete(self, entry_id: str) -> None:
        ...

