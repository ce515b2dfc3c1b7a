"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from finance_app.config.settings import get_settings
from finance_app.config.logging_config import setup_logging
from finance_app.repositories.sqlalchemy.database import init_db
from finance_app.api.routers import (
    assets_router,
    fund_accounts_router,
    credit_cards_router,
    budget_categories_router,
    transactions_router,
    budget_analysis_router,
    recurring_categories_router,
    recurring_transactions_router,
    pay_settings_router,
    pending_transactions_router,
    completed_transactions_router,
    manual_pending_router,
    income_router,
    income_entries_router,
    savings_plan_router,
    investments_router,
    market_router,
    user_settings_router,
    dashboard_router,
    backup_router,
)
from finance_app.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Local-first personal finance dashboard: assets, budget, bills, income and investments",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
for router in (
    assets_router,
    fund_accounts_router,
    credit_cards_router,
    budget_categories_router,
    transactions_router,
    budget_analysis_router,
    recurring_categories_router,
    recurring_transactions_router,
    pay_settings_router,
    pending_transactions_router,
    completed_transactions_router,
    manual_pending_router,
    income_router,
    income_entries_router,
    savings_plan_router,
    investments_router,
    market_router,
    user_settings_router,
    dashboard_router,
    backup_router,
):
    app.include_router(router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
