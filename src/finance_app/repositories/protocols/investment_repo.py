"""Investment repository protocol."""

from typing import Protocol, Optional

from finance_app.domain.models import Investment


class InvestmentRepository(Protocol):
    """Interface for investment holding data access."""

    def create(self, investment: Investment) -> Investment:
        """Persist a new holding."""
        ...

    def get_by_id(self, investment_id: str) -> Optional[Investment]:
        """Retrieve holding by ID."""
        ...

    def list_all(self) -> list[Investment]:
        """List holdings ordered by symbol."""
        ...

    def update(self, investment: Investment) -> Investment:
        """Update an existing holding (prices included)."""
        ...

    def delete(self, investment_id: str) -> None:
        """Delete a holding."""
        ...
