"""Income data, income entries and the retirement savings plan."""

import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from finance_app.core.exceptions import NotFoundError, ValidationError
from finance_app.core.unset import UNSET, Unset
from finance_app.domain.models import IncomeData, IncomeEntry, IncomeFrequency, SavingsPlan
from finance_app.domain.views import SavingsProjectionView
from finance_app.repositories.protocols import (
    IncomeDataRepository,
    IncomeEntryRepository,
    SavingsPlanRepository,
)

ZERO = Decimal("0")
CENT = Decimal("0.01")

# Paycheck multipliers that convert one paycheck into one biweekly period
_BIWEEKLY_MULTIPLIERS = {
    IncomeFrequency.WEEKLY: Decimal("2"),
    IncomeFrequency.BIWEEKLY: Decimal("1"),
    IncomeFrequency.SEMIMONTHLY: Decimal("24") / Decimal("26"),
    IncomeFrequency.MONTHLY: Decimal("12") / Decimal("26"),
}


@dataclass
class IncomeEntryCreate:
    source: str
    amount: Decimal
    date: date
    is_recurring: bool = False
    frequency: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class IncomeEntryUpdate:
    source: Optional[str] = None
    amount: Optional[Decimal] = None
    date: Optional[date] = None
    is_recurring: Optional[bool] = None
    frequency: Union[str, None, Unset] = UNSET
    notes: Union[str, None, Unset] = UNSET


class IncomeService:
    """Service for what the user earns and what they plan to save."""

    def __init__(
        self,
        income_repo: IncomeDataRepository,
        entry_repo: IncomeEntryRepository,
        savings_plan_repo: SavingsPlanRepository,
    ):
        self._income_repo = income_repo
        self._entry_repo = entry_repo
        self._savings_plan_repo = savings_plan_repo

    # -------------------------------------------------------------------------
    # Income data
    # -------------------------------------------------------------------------

    def get_income(self) -> IncomeData:
        """Stored income data, or the defaults when none was saved."""
        return self._income_repo.get() or IncomeData()

    def save_income(self, income: IncomeData) -> IncomeData:
        if income.pay_amount < 0:
            raise ValidationError("Pay amount cannot be negative")
        if not 1 <= income.work_hours_per_week <= 168:
            raise ValidationError("Work hours per week must be between 1 and 168")
        if not 1 <= income.work_days_per_week <= 7:
            raise ValidationError("Work days per week must be between 1 and 7")
        if not 0 <= income.bonus_percentage <= 100:
            raise ValidationError("Bonus percentage must be between 0 and 100")
        return self._income_repo.save(income)

    def pay_period_income(self) -> Decimal:
        """Income for one biweekly pay period."""
        income = self.get_income()
        return (income.pay_amount * _BIWEEKLY_MULTIPLIERS[income.pay_frequency]).quantize(CENT)

    # -------------------------------------------------------------------------
    # Income entries
    # -------------------------------------------------------------------------

    def list_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> tuple[list[IncomeEntry], Decimal]:
        """Entries newest first, with their total."""
        if start_date and end_date and start_date > end_date:
            raise ValidationError("start_date must be on or before end_date")
        entries = self._entry_repo.query(start_date=start_date, end_date=end_date)
        return entries, sum((e.amount for e in entries), ZERO)

    def get_entry(self, entry_id: str) -> IncomeEntry:
        entry = self._entry_repo.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("Income entry", entry_id)
        return entry

    def create_entry(self, data: IncomeEntryCreate) -> IncomeEntry:
        source = (data.source or "").strip()
        if not source:
            raise ValidationError("Source is required")
        if data.amount < 0:
            raise ValidationError("Amount cannot be negative")

        entry = IncomeEntry(
            id=str(uuid.uuid4()),
            source=source,
            amount=data.amount,
            date=data.date,
            is_recurring=data.is_recurring,
            frequency=data.frequency if data.is_recurring else None,
            notes=data.notes,
        )
        return self._entry_repo.create(entry)

    def update_entry(self, entry_id: str, patch: IncomeEntryUpdate) -> IncomeEntry:
        entry = self.get_entry(entry_id)

        if patch.source is not None:
            if not patch.source.strip():
                raise ValidationError("Source is required")
            entry.source = patch.source.strip()
        if patch.amount is not None:
            if patch.amount < 0:
                raise ValidationError("Amount cannot be negative")
            entry.amount = patch.amount
        if patch.date is not None:
            entry.date = patch.date
        if patch.is_recurring is not None:
            entry.is_recurring = patch.is_recurring
        if patch.frequency is not UNSET:
            entry.frequency = patch.frequency
        if patch.notes is not UNSET:
            entry.notes = patch.notes
        if not entry.is_recurring:
            entry.frequency = None

        return self._entry_repo.update(entry)

    def delete_entry(self, entry_id: str) -> None:
        self.get_entry(entry_id)
        self._entry_repo.delete(entry_id)

    # -------------------------------------------------------------------------
    # Savings plan
    # -------------------------------------------------------------------------

    def get_savings_plan(self) -> SavingsPlan:
        return self._savings_plan_repo.get() or SavingsPlan()

    def save_savings_plan(self, plan: SavingsPlan) -> SavingsPlan:
        if not 18 <= plan.current_age <= 100:
            raise ValidationError("Current age must be between 18 and 100")
        if plan.retirement_age <= plan.current_age or plan.retirement_age > 100:
            raise ValidationError(
                "Retirement age must be greater than current age and at most 100"
            )
        return self._savings_plan_repo.save(plan)

    def project(self, plan: Optional[SavingsPlan] = None) -> SavingsProjectionView:
        """
        Year-by-year balance from current age to retirement age.

        Each year's recorded balance is taken before that year's deposit;
        the deposit (contribution + bonus) is added and then the annual return
        is applied. The retirement-age balance gets neither.
        """
        plan = plan or self.get_savings_plan()
        years = plan.retirement_age - plan.current_age
        growth = 1 + _dec(plan.annual_return) / 100
        deposit = _dec(plan.yearly_contribution) + _dec(plan.yearly_bonus)

        savings = _dec(plan.current_savings)
        total_contributions = savings
        ages: list[int] = []
        totals: list[Decimal] = []

        for year in range(years + 1):
            ages.append(plan.current_age + year)
            totals.append(_whole_dollars(savings))
            if year < years:
                savings += deposit
                total_contributions += deposit
                savings *= growth

        projected = _whole_dollars(savings)
        return SavingsProjectionView(
            ages=ages,
            totals=totals,
            projected_amount=projected,
            total_contributions=total_contributions,
            total_growth=projected - total_contributions,
        )


def _dec(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _whole_dollars(value: Decimal) -> Decimal:
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
