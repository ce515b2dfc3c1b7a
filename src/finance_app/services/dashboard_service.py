"""Dashboard figures derived from the other services."""

from datetime import date
from decimal import Decimal
from typing import Optional

from finance_app.core.timezone import today_local
from finance_app.domain.models import BudgetPeriodType
from finance_app.domain.views import DashboardView, NetWorthView, ProjectedSavingsView
from finance_app.services.asset_service import AssetService
from finance_app.services.budget_analysis_service import BudgetAnalysisService
from finance_app.services.budget_service import BudgetService
from finance_app.services.income_service import IncomeService
from finance_app.services.investment_service import InvestmentService
from finance_app.services.recurring_service import RecurringService

ZERO = Decimal("0")
HALF = Decimal("0.5")
CENT = Decimal("0.01")


class DashboardService:
    """
    Read-only aggregation for the home screen.

    Owns no data: every figure is computed from the asset, budget, recurring,
    income and investment services.
    """

    def __init__(
        self,
        asset_service: AssetService,
        budget_service: BudgetService,
        budget_analysis_service: BudgetAnalysisService,
        recurring_service: RecurringService,
        income_service: IncomeService,
        investment_service: InvestmentService,
    ):
        self._assets = asset_service
        self._budget = budget_service
        self._analysis = budget_analysis_service
        self._recurring = recurring_service
        self._income = income_service
        self._investments = investment_service

    def net_worth(self, investment_total: Optional[Decimal] = None) -> NetWorthView:
        """Cash + interest + portfolio value, less credit card balances."""
        latest = self._assets.get_latest()
        if investment_total is None:
            investment_total = self._investments.total_value()
        total_savings = latest.cash + latest.interest + investment_total
        total_debt = self._assets.total_credit_card_debt()
        return NetWorthView(
            total_savings=total_savings,
            total_debt=total_debt,
            net_worth=total_savings - total_debt,
        )

    def projected_savings(self, today: Optional[date] = None) -> ProjectedSavingsView:
        """What one pay period's income leaves after bills and budget."""
        today = today or today_local()
        income = self._income.pay_period_income()

        next_bills = self._recurring.get_next_period_bills(today)
        if next_bills.bills:
            recurring = next_bills.total_amount
        else:
            recurring = (self._recurring.monthly_recurring_total() * HALF).quantize(CENT)

        budget = (self._budget.total_allocated() * HALF).quantize(CENT)
        return ProjectedSavingsView(
            pay_period_income=income,
            recurring_expenses=recurring,
            budget_allocation=budget,
            projected_savings=income - recurring - budget,
        )

    def summary(self, today: Optional[date] = None) -> DashboardView:
        today = today or today_local()
        latest = self._assets.get_latest()

        view = DashboardView(
            assets=latest,
            net_worth=self.net_worth(),
            projected_savings=self.projected_savings(today),
        )

        next_period = self._recurring.next_period(today)
        if next_period is not None:
            view.next_pay_date = next_period.start
            view.days_until_payday = (next_period.start - today).days

        pending = self._recurring.get_pending_bills(today)
        manual_total = ZERO
        if pending.period is not None:
            manual_total = sum(
                (
                    m.amount
                    for m in self._recurring.list_manual_pending(
                        pending.period.start, pending.period.end
                    )
                    if not m.is_completed
                ),
                ZERO,
            )
        view.pending_bills_total = pending.pending_amount + manual_total

        period_type = BudgetPeriodType.BIWEEKLY if next_period else BudgetPeriodType.MONTH
        budget = self._analysis.budget_analysis(period_type=period_type, today=today).summary
        view.pending_tip_total = budget.total_pending_tip_amount
        view.pending_cashback_total = budget.total_pending_cashback_amount
        view.budget_remaining = budget.total_allocated - (
            budget.total_spent + budget.total_pending_tip_amount
        )

        total_pending = view.pending_bills_total + view.pending_tip_total - view.pending_cashback_total
        view.available_checking = latest.checking - total_pending
        return view
