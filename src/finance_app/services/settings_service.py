"""Pay settings and user display settings."""

import logging
import uuid
from datetime import date
from typing import Optional, Union

from finance_app.core.exceptions import ValidationError
from finance_app.domain.models import PayFrequency, PaySettings, Theme, UserSettings
from finance_app.repositories.protocols import PaySettingsRepository, UserSettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for the single-row settings records."""

    def __init__(
        self,
        pay_settings_repo: PaySettingsRepository,
        user_settings_repo: UserSettingsRepository,
    ):
        self._pay_settings_repo = pay_settings_repo
        self._user_settings_repo = user_settings_repo

    def get_pay_settings(self) -> Optional[PaySettings]:
        """Stored pay schedule, or None before onboarding."""
        return self._pay_settings_repo.get()

    def save_pay_settings(
        self,
        last_pay_date: date,
        frequency: Union[PayFrequency, str] = PayFrequency.BIWEEKLY,
    ) -> PaySettings:
        if last_pay_date is None:
            raise ValidationError("last_pay_date is required")
        try:
            frequency = PayFrequency(frequency)
        except ValueError:
            raise ValidationError("Frequency must be 'weekly' or 'biweekly'")

        saved = self._pay_settings_repo.save(
            PaySettings(id=str(uuid.uuid4()), last_pay_date=last_pay_date, frequency=frequency)
        )
        logger.info("Pay settings saved: %s from %s", saved.frequency.value, saved.last_pay_date)
        return saved

    def get_user_settings(self) -> UserSettings:
        return self._user_settings_repo.get() or UserSettings()

    def save_user_settings(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        theme: Optional[Union[Theme, str]] = None,
    ) -> UserSettings:
        """Update the given fields; others keep their stored values."""
        current = self.get_user_settings()
        if name is not None:
            if not name.strip():
                raise ValidationError("Name cannot be empty")
            current.name = name.strip()
        if email is not None:
            current.email = email.strip() or None
        if theme is not None:
            try:
                current.theme = Theme(theme)
            except ValueError:
                raise ValidationError("Theme must be 'light', 'dark' or 'system'")
        return self._user_settings_repo.save(current)
