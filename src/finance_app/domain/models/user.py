"""User settings domain model."""

from dataclasses import dataclass
from typing import Optional

from finance_app.domain.models.enums import Theme


@dataclass
class UserSettings:
    """Display preferences (single row)."""

    id: Optional[str] = None
    name: str = "User"
    email: Optional[str] = None
    theme: Theme = Theme.LIGHT

    def __post_init__(self) -> None:
        if isinstance(self.theme, str):
            self.theme = Theme(self.theme)
