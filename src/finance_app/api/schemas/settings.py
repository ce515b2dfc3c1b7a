"""Pydantic schemas for user settings."""

from typing import Optional

from pydantic import BaseModel, Field

from finance_app.domain.models import Theme


class UserSettingsRequest(BaseModel):
    """Partial update; omitted fields keep their stored values."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    theme: Optional[Theme] = None


class UserSettingsResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: Optional[str] = None
    name: str
    email: Optional[str] = None
    theme: Theme
