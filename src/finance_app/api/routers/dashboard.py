"""Home screen summary."""

from fastapi import APIRouter, Depends

from finance_app.api.deps import get_dashboard_service
from finance_app.api.schemas.dashboard import DashboardResponse
from finance_app.services import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
def get_dashboard(service: DashboardService = Depends(get_dashboard_service)):
    """Net worth, projected savings, payday countdown and what checking can cover."""
    return DashboardResponse.model_validate(service.summary())
