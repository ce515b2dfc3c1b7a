"""Asset snapshot, fund account and credit card repository protocols."""

from typing import Protocol, Optional

from finance_app.domain.models import AssetSnapshot, FundAccount, CreditCard


class AssetSnapshotRepository(Protocol):
    """Interface for asset snapshot data access."""

    def create(self, snapshot: AssetSnapshot) -> AssetSnapshot:
        """Persist a new snapshot."""
        ...

    def get_latest(self) -> Optional[AssetSnapshot]:
        """Return the most recent snapshot."""
        ...

    def list_recent(self, limit: int) -> list[AssetSnapshot]:
        """List snapshots, newest first."""
        ...


class FundAccountRepository(Protocol):
    """Interface for fund account data access."""

    def create(self, account: FundAccount) -> FundAccount:
        ...

    def get_by_id(self, account_id: str) -> Optional[FundAccount]:
        ...

    def list_active(self) -> list[FundAccount]:
        """List active accounts ordered by sort order, then name."""
        ...

    def update(self, account: FundAccount) -> FundAccount:
        ...


class CreditCardRepository(Protocol):
    """Interface for credit card data access."""

    def create(self, card: CreditCard) -> CreditCard:
        ...

    def get_by_id(self, card_id: str) -> Optional[CreditCard]:
        ...

    def list_all(self) -> list[CreditCard]:
        ...

    def update(self, card: CreditCard) -> CreditCard:
        ...

    def delete(self, card_id: str) -> None:
        ...
