"""Repository protocols for single-row settings records."""

from typing import Protocol, Optional

from finance_app.domain.models import PaySettings, IncomeData, SavingsPlan, UserSettings


class PaySettingsRepository(Protocol):
    def get(self) -> Optional[PaySettings]:
        ...

    def save(self, settings: PaySettings) -> PaySettings:
        """Replace the stored pay settings."""
        ...


class IncomeDataRepository(Protocol):
    def get(self) -> Optional[IncomeData]:
        ...

    def save(self, income: IncomeData) -> IncomeData:
        ...


class SavingsPlanRepository(Protocol):
    def get(self) -> Optional[SavingsPlan]:
        ...

    def save(self, plan: SavingsPlan) -> SavingsPlan:
        ...


class UserSettingsRepository(Protocol):
    def get(self) -> Optional[UserSettings]:
        ...

    def save(self, settings: UserSettings) -> UserSettings:
        ...
