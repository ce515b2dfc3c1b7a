"""API routers package."""

from finance_app.api.routers.assets import (
    router as assets_router,
    fund_accounts_router,
    credit_cards_router,
)
from finance_app.api.routers.budget import (
    router as budget_categories_router,
    transactions_router,
    analysis_router as budget_analysis_router,
)
from finance_app.api.routers.recurring import (
    categories_router as recurring_categories_router,
    router as recurring_transactions_router,
    pay_settings_router,
    pending_router as pending_transactions_router,
    completed_router as completed_transactions_router,
    manual_pending_router,
)
from finance_app.api.routers.income import (
    router as income_router,
    entries_router as income_entries_router,
    savings_plan_router,
)
from finance_app.api.routers.investments import (
    router as investments_router,
    market_router,
)
from finance_app.api.routers.settings import router as user_settings_router
from finance_app.api.routers.dashboard import router as dashboard_router
from finance_app.api.routers.backup import router as backup_router

__all__ = [
    "assets_router",
    "fund_accounts_router",
    "credit_cards_router",
    "budget_categories_router",
    "transactions_router",
    "budget_analysis_router",
    "recurring_categories_router",
    "recurring_transactions_router",
    "pay_settings_router",
    "pending_transactions_router",
    "completed_transactions_router",
    "manual_pending_router",
    "income_router",
    "income_entries_router",
    "savings_plan_router",
    "investments_router",
    "market_router",
    "user_settings_router",
    "dashboard_router",
    "backup_router",
]
