"""
Budget analysis over date windows.

Budgets are monthly allocations. A window shorter than a month gets a
prorated allocation:

* ``month``    - the full monthly amount
* ``biweekly`` - half the monthly amount (the pay period window)
* ``custom``   - monthly / days-in-month(start) x days in window

The overspending analysis uses a flat 30-day month instead, so past pay
periods of equal length get equal budgets.
"""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from finance_app.core.exceptions import ConfigurationError, ValidationError
from finance_app.core.pay_periods import (
    budget_pay_period,
    past_pay_periods,
    days_in_month,
    days_between,
)
from finance_app.core.timezone import today_local
from finance_app.domain.models import BudgetCategory, BudgetPeriodType, Transaction
from finance_app.domain.views import (
    CategoryBudgetView,
    BudgetSummaryView,
    BudgetAnalysisView,
    CategoryOverspendView,
    OverspendingPeriodView,
    ProblematicCategoryView,
    OverspendingSummaryView,
    OverspendingAnalysisView,
    CategorySpendingView,
    SpendingGroupSummary,
    TotalSpendingView,
)
from finance_app.repositories.protocols import (
    BudgetCategoryRepository,
    TransactionRepository,
    PaySettingsRepository,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")
BIWEEKLY_FACTOR = Decimal("0.5")
OVERSPEND_MONTH_DAYS = 30
MAX_OVERSPENDING_PERIODS = 26
BIGGEST_TRANSACTIONS = 10
TOP_PROBLEMATIC = 5


def _q(value: Decimal) -> Decimal:
    return value.quantize(CENT)


class BudgetAnalysisService:
    """Read-only analyses of spending against budget categories."""

    def __init__(
        self,
        category_repo: BudgetCategoryRepository,
        transaction_repo: TransactionRepository,
        pay_settings_repo: PaySettingsRepository,
    ):
        self._category_repo = category_repo
        self._transaction_repo = transaction_repo
        self._pay_settings_repo = pay_settings_repo

    def budget_analysis(
        self,
        period_type: Union[BudgetPeriodType, str] = BudgetPeriodType.MONTH,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        today: Optional[date] = None,
    ) -> BudgetAnalysisView:
        """Allocated vs. spent per active category for a window."""
        try:
            period_type = BudgetPeriodType(period_type)
        except ValueError:
            raise ValidationError(f"Unknown period type: {period_type}")
        today = today or today_local()

        if period_type == BudgetPeriodType.BIWEEKLY:
            settings = self._pay_settings_repo.get()
            if settings is None:
                logger.info("No pay settings saved; biweekly budget falls back to the month")
                period_type = BudgetPeriodType.MONTH
            else:
                window = budget_pay_period(settings.last_pay_date, settings.frequency, today)
                start_date, end_date = window.start, window.end

        if period_type == BudgetPeriodType.CUSTOM and not (start_date and end_date):
            raise ValidationError("Custom periods require start_date and end_date")

        if period_type == BudgetPeriodType.MONTH and not (start_date and end_date):
            start_date = today.replace(day=1)
            end_date = today.replace(day=days_in_month(today))

        if start_date > end_date:
            raise ValidationError("start_date must be on or before end_date")

        day_count = days_between(start_date, end_date)
        transactions = self._transaction_repo.query(start_date=start_date, end_date=end_date)
        by_category = self._group_by_category(transactions)

        categories: list[CategoryBudgetView] = []
        for category in self._category_repo.list_all(active_only=True):
            txns = by_category.get(category.id, [])
            raw_spent = sum((t.amount for t in txns), ZERO)
            cash_back = sum((t.cash_back for t in txns), ZERO)
            spent = abs(raw_spent - cash_back)
            allocated = self._prorate(category.allocated_amount, period_type, start_date, day_count)
            categories.append(
                CategoryBudgetView(
                    id=category.id,
                    name=category.name,
                    color=category.color,
                    allocated_amount=allocated,
                    full_month_amount=category.allocated_amount,
                    spent=_q(spent),
                    cash_back=_q(cash_back),
                    raw_spent=_q(raw_spent),
                    remaining=_q(allocated - spent),
                    days_in_period=day_count,
                )
            )

        active_ids = {c.id for c in categories}
        active_txns = [t for t in transactions if t.category_id in active_ids]
        total_allocated = sum((c.allocated_amount for c in categories), ZERO)
        total_spent = sum((c.spent for c in categories), ZERO)

        summary = BudgetSummaryView(
            total_allocated=total_allocated,
            total_monthly_allocated=sum((c.full_month_amount for c in categories), ZERO),
            total_spent=total_spent,
            total_cash_back=sum((c.cash_back for c in categories), ZERO),
            total_raw_spent=sum((c.raw_spent for c in categories), ZERO),
            total_remaining=total_allocated - total_spent,
            total_pending_tip_amount=_q(
                sum((t.pending_tip_amount for t in active_txns if t.pending), ZERO)
            ),
            total_pending_cashback_amount=_q(
                sum((t.cash_back for t in active_txns if not t.cashback_posted), ZERO)
            ),
            start_date=start_date,
            end_date=end_date,
            days_in_period=day_count,
            period_type=period_type,
        )
        return BudgetAnalysisView(categories=categories, summary=summary)

    def overspending_analysis(
        self,
        periods: int = 6,
        today: Optional[date] = None,
    ) -> OverspendingAnalysisView:
        """Per-category overspending over the last ``periods`` pay periods."""
        if not 1 <= periods <= MAX_OVERSPENDING_PERIODS:
            raise ValidationError(f"periods must be between 1 and {MAX_OVERSPENDING_PERIODS}")
        settings = self._pay_settings_repo.get()
        if settings is None:
            raise ConfigurationError(
                "Pay settings not configured. Please set up your pay schedule first."
            )

        categories = self._category_repo.list_all(active_only=True)
        windows = past_pay_periods(
            settings.last_pay_date, settings.frequency, today or today_local(), periods
        )
        period_views = [
            self._analyze_period(window.start, window.end, categories) for window in windows
        ]

        return OverspendingAnalysisView(
            periods=period_views,
            summary=self._overspending_summary(period_views),
            pay_frequency=settings.frequency.value,
        )

    def total_spending(self, start_date: date, end_date: date) -> TotalSpendingView:
        """Spending split into budget and tracking-only categories."""
        if not start_date or not end_date:
            raise ValidationError("start_date and end_date are required")
        if start_date > end_date:
            raise ValidationError("start_date must be on or before end_date")

        by_category = self._group_by_category(
            self._transaction_repo.query(start_date=start_date, end_date=end_date)
        )
        budget_views: list[CategorySpendingView] = []
        tracking_views: list[CategorySpendingView] = []

        for category in self._category_repo.list_all(active_only=True):
            txns = by_category.get(category.id, [])
            raw_spent = sum((abs(t.amount) for t in txns), ZERO)
            cash_back = sum((t.cash_back for t in txns), ZERO)
            view = CategorySpendingView(
                id=category.id,
                name=category.name,
                color=category.color,
                spent=_q(raw_spent - cash_back),
                cash_back=_q(cash_back),
                raw_spent=_q(raw_spent),
                allocated_amount=category.allocated_amount,
                is_budget_category=category.is_budget_category,
            )
            if category.is_budget_category:
                budget_views.append(view)
            else:
                tracking_views.append(view)

        return TotalSpendingView(
            budget_categories=budget_views,
            tracking_categories=tracking_views,
            budget=self._group_summary(budget_views),
            tracking=self._group_summary(tracking_views),
            overall=self._group_summary(budget_views + tracking_views),
            start_date=start_date,
            end_date=end_date,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _prorate(
        monthly: Decimal,
        period_type: BudgetPeriodType,
        start_date: date,
        day_count: int,
    ) -> Decimal:
        if period_type == BudgetPeriodType.BIWEEKLY:
            return _q(monthly * BIWEEKLY_FACTOR)
        if period_type == BudgetPeriodType.CUSTOM:
            return _q(monthly / days_in_month(start_date) * day_count)
        return monthly

    @staticmethod
    def _group_by_category(transactions: list[Transaction]) -> dict[str, list[Transaction]]:
        grouped: dict[str, list[Transaction]] = defaultdict(list)
        for txn in transactions:
            grouped[txn.category_id].append(txn)
        return grouped

    def _analyze_period(
        self,
        start_date: date,
        end_date: date,
        categories: list[BudgetCategory],
    ) -> OverspendingPeriodView:
        transactions = self._transaction_repo.query(start_date=start_date, end_date=end_date)
        by_category = self._group_by_category(transactions)
        day_count = days_between(start_date, end_date)

        total_budget = ZERO
        total_spent = ZERO
        overspent_categories: list[CategoryOverspendView] = []

        for category in categories:
            budget = category.allocated_amount / OVERSPEND_MONTH_DAYS * day_count
            txns = by_category.get(category.id, [])
            spent = sum((abs(t.amount) for t in txns), ZERO)
            total_budget += budget
            total_spent += spent

            overspent = max(ZERO, spent - budget)
            if overspent > 0:
                percentage = overspent / budget * 100 if budget > 0 else ZERO
                overspent_categories.append(
                    CategoryOverspendView(
                        id=category.id,
                        name=category.name,
                        color=category.color,
                        budget_amount=_q(budget),
                        spent=_q(spent),
                        overspent=_q(overspent),
                        overspent_percentage=_q(percentage),
                        transactions=txns,
                    )
                )

        overspent_categories.sort(key=lambda c: c.overspent, reverse=True)
        biggest = sorted(transactions, key=lambda t: abs(t.amount), reverse=True)

        return OverspendingPeriodView(
            start_date=start_date,
            end_date=end_date,
            total_budget=_q(total_budget),
            total_spent=_q(total_spent),
            overspent=_q(max(ZERO, total_spent - total_budget)),
            categories=overspent_categories,
            biggest_transactions=biggest[:BIGGEST_TRANSACTIONS],
        )

    @staticmethod
    def _overspending_summary(periods: list[OverspendingPeriodView]) -> OverspendingSummaryView:
        total_overspent = sum((p.overspent for p in periods), ZERO)
        average = _q(total_overspent / len(periods)) if periods else ZERO

        totals: dict[str, ProblematicCategoryView] = {}
        for period in periods:
            for cat in period.categories:
                entry = totals.get(cat.id)
                if entry is None:
                    entry = ProblematicCategoryView(
                        id=cat.id,
                        name=cat.name,
                        color=cat.color,
                        total_overspent=ZERO,
                        occurrences=0,
                        average_overspent=ZERO,
                    )
                    totals[cat.id] = entry
                entry.total_overspent += cat.overspent
                entry.occurrences += 1

        for entry in totals.values():
            entry.average_overspent = _q(entry.total_overspent / entry.occurrences)

        problematic = sorted(totals.values(), key=lambda e: e.total_overspent, reverse=True)
        return OverspendingSummaryView(
            total_overspent=total_overspent,
            average_overspent=average,
            periods_analyzed=len(periods),
            problematic_categories=problematic[:TOP_PROBLEMATIC],
        )

    @staticmethod
    def _group_summary(views: list[CategorySpendingView]) -> SpendingGroupSummary:
        return SpendingGroupSummary(
            total_spent=sum((v.spent for v in views), ZERO),
            total_cash_back=sum((v.cash_back for v in views), ZERO),
            total_raw_spent=sum((v.raw_spent for v in views), ZERO),
            category_count=len(views),
        )
