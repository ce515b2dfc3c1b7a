"""User display settings."""

from fastapi import APIRouter, Depends

from finance_app.api.deps import get_settings_service
from finance_app.api.schemas.settings import UserSettingsRequest, UserSettingsResponse
from finance_app.services import SettingsService

router = APIRouter(prefix="/user-settings", tags=["settings"])


@router.get("", response_model=UserSettingsResponse)
def get_user_settings(service: SettingsService = Depends(get_settings_service)):
    return UserSettingsResponse.model_validate(service.get_user_settings())


@router.post("", response_model=UserSettingsResponse)
def save_user_settings(
    data: UserSettingsRequest,
    service: SettingsService = Depends(get_settings_service),
):
    settings = service.save_user_settings(name=data.name, email=data.email, theme=data.theme)
    return UserSettingsResponse.model_validate(settings)
