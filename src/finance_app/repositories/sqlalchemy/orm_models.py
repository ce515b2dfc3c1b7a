"""SQLAlchemy ORM model definitions."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    Date,
    DateTime,
    Boolean,
    Integer,
    Text,
    ForeignKey,
    Numeric,
    UniqueConstraint,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from finance_app.repositories.sqlalchemy.database import Base
from finance_app.domain.models.enums import PayFrequency, IncomeFrequency, Theme

MONEY = Numeric(precision=18, scale=2)
PRICE = Numeric(precision=18, scale=4)
SHARES = Numeric(precision=18, scale=6)


def _enum_column_type(enum_cls) -> SqlEnum:
    """Enum column storing member values (e.g. 'biweekly') rather than names."""
    return SqlEnum(enum_cls, values_callable=lambda members: [m.value for m in members])


# =============================================================================
# ASSETS
# =============================================================================


class AssetSnapshotORM(Base):
    """SQLAlchemy model for AssetSnapshot."""

    __tablename__ = "assets"

    id = Column(String(36), primary_key=True)
    date = Column(Date, nullable=False, index=True)
    cash = Column(MONEY, default=Decimal("0"), nullable=False)
    stocks = Column(MONEY, default=Decimal("0"), nullable=False)
    interest = Column(MONEY, default=Decimal("0"), nullable=False)
    checking = Column(MONEY, default=Decimal("0"), nullable=False)
    retirement_401k = Column(MONEY, default=Decimal("0"), nullable=False)
    house_fund = Column(MONEY, default=Decimal("0"), nullable=False)
    vacation_fund = Column(MONEY, default=Decimal("0"), nullable=False)
    emergency_fund = Column(MONEY, default=Decimal("0"), nullable=False)
    total_assets = Column(MONEY, default=Decimal("0"), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class FundAccountORM(Base):
    """SQLAlchemy model for FundAccount."""

    __tablename__ = "fund_accounts"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    amount = Column(MONEY, default=Decimal("0"), nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String(20), default="#3B82F6", nullable=False)
    icon = Column(String(50), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    is_investing = Column(Boolean, default=False, nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)


class CreditCardORM(Base):
    """SQLAlchemy model for CreditCard."""

    __tablename__ = "credit_cards"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    balance = Column(MONEY, default=Decimal("0"), nullable=False)
    limit = Column("credit_limit", MONEY, nullable=False)
    color = Column(String(20), default="#000000", nullable=False)


# =============================================================================
# BUDGET
# =============================================================================


class BudgetCategoryORM(Base):
    """SQLAlchemy model for BudgetCategory."""

    __tablename__ = "budget_categories"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    allocated_amount = Column(MONEY, default=Decimal("0"), nullable=False)
    color = Column(String(20), default="#3B82F6", nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    is_budget_category = Column(Boolean, default=True, nullable=False)

    transactions = relationship(
        "TransactionORM",
        back_populates="category",
        cascade="all, delete-orphan",
    )


class TransactionORM(Base):
    """SQLAlchemy model for a spending Transaction."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True)
    date = Column(Date, nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("budget_categories.id"), nullable=False)
    name = Column(String(255), nullable=False)
    amount = Column(MONEY, nullable=False)
    cash_back = Column(MONEY, default=Decimal("0"), nullable=False)
    cashback_posted = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)
    pending = Column(Boolean, default=False, nullable=False)
    pending_tip_amount = Column(MONEY, default=Decimal("0"), nullable=False)
    sort_order = Column(Integer, default=0, nullable=False)

    category = relationship("BudgetCategoryORM", back_populates="transactions")


# =============================================================================
# RECURRING BILLS AND PAY PERIODS
# =============================================================================


class PaySettingsORM(Base):
    """SQLAlchemy model for PaySettings (single row)."""

    __tablename__ = "pay_settings"

    id = Column(String(36), primary_key=True)
    last_pay_date = Column(Date, nullable=False)
    frequency = Column(
        _enum_column_type(PayFrequency),
        default=PayFrequency.BIWEEKLY,
        nullable=False,
    )


class RecurringCategoryORM(Base):
    """SQLAlchemy model for RecurringCategory."""

    __tablename__ = "recurring_categories"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    color = Column(String(20), default="#6B7280", nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class RecurringTransactionORM(Base):
    """SQLAlchemy model for RecurringTransaction (a monthly bill)."""

    __tablename__ = "recurring_transactions"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    amount = Column(MONEY, nullable=False)
    due_date = Column(Integer, nullable=False)
    is_essential = Column(Boolean, default=False, nullable=False)
    category_id = Column(String(36), ForeignKey("recurring_categories.id"), nullable=True)

    completions = relationship(
        "CompletedTransactionORM",
        back_populates="recurring_transaction",
        cascade="all, delete-orphan",
    )
    overrides = relationship(
        "PendingOverrideORM",
        back_populates="recurring_transaction",
        cascade="all, delete-orphan",
    )


class CompletedTransactionORM(Base):
    """SQLAlchemy model for CompletedTransaction."""

    __tablename__ = "completed_transactions"
    __table_args__ = (
        UniqueConstraint(
            "recurring_transaction_id",
            "pay_period_start",
            "pay_period_end",
            name="uq_completed_bill_period",
        ),
    )

    id = Column(String(36), primary_key=True)
    recurring_transaction_id = Column(
        String(36), ForeignKey("recurring_transactions.id"), nullable=False
    )
    pay_period_start = Column(Date, nullable=False)
    pay_period_end = Column(Date, nullable=False)
    completed_date = Column(Date, nullable=False)

    recurring_transaction = relationship("RecurringTransactionORM", back_populates="completions")


class PendingOverrideORM(Base):
    """SQLAlchemy model for PendingOverride."""

    __tablename__ = "pending_transaction_overrides"
    __table_args__ = (
        UniqueConstraint(
            "recurring_transaction_id",
            "pay_period_start",
            "pay_period_end",
            name="uq_override_bill_period",
        ),
    )

    id = Column(String(36), primary_key=True)
    recurring_transaction_id = Column(
        String(36), ForeignKey("recurring_transactions.id"), nullable=False
    )
    pay_period_start = Column(Date, nullable=False)
    pay_period_end = Column(Date, nullable=False)
    amount = Column(MONEY, nullable=False)

    recurring_transaction = relationship("RecurringTransactionORM", back_populates="overrides")


class ManualPendingTransactionORM(Base):
    """SQLAlchemy model for ManualPendingTransaction."""

    __tablename__ = "manual_pending_transactions"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    amount = Column(MONEY, nullable=False)
    due_date = Column(Date, nullable=True)
    category_id = Column(String(36), nullable=True)
    notes = Column(Text, nullable=True)
    pay_period_start = Column(Date, nullable=True)
    pay_period_end = Column(Date, nullable=True)
    is_completed = Column(Boolean, default=False, nullable=False)


# =============================================================================
# INCOME AND SAVINGS
# =============================================================================


class IncomeDataORM(Base):
    """SQLAlchemy model for IncomeData (single row)."""

    __tablename__ = "income_data"

    id = Column(String(36), primary_key=True)
    pay_amount = Column(MONEY, nullable=False)
    pay_frequency = Column(_enum_column_type(IncomeFrequency), nullable=False)
    work_hours_per_week = Column(Integer, nullable=False)
    work_days_per_week = Column(Integer, nullable=False)
    bonus_percentage = Column(Numeric(precision=5, scale=2), nullable=False)


class IncomeEntryORM(Base):
    """SQLAlchemy model for IncomeEntry."""

    __tablename__ = "income"

    id = Column(String(36), primary_key=True)
    source = Column(String(255), nullable=False)
    amount = Column(MONEY, nullable=False)
    date = Column(Date, nullable=False, index=True)
    is_recurring = Column(Boolean, default=False, nullable=False)
    frequency = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)


class SavingsPlanORM(Base):
    """SQLAlchemy model for SavingsPlan (single row)."""

    __tablename__ = "savings_plan"

    id = Column(String(36), primary_key=True)
    current_age = Column(Integer, nullable=False)
    retirement_age = Column(Integer, nullable=False)
    current_savings = Column(MONEY, nullable=False)
    yearly_contribution = Column(MONEY, nullable=False)
    yearly_bonus = Column(MONEY, nullable=False)
    annual_return = Column(Numeric(precision=6, scale=2), nullable=False)


# =============================================================================
# INVESTMENTS AND SETTINGS
# =============================================================================


class InvestmentORM(Base):
    """SQLAlchemy model for Investment."""

    __tablename__ = "investments"

    id = Column(String(36), primary_key=True)
    symbol = Column(String(20), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    shares = Column(SHARES, nullable=False)
    avg_price = Column(PRICE, nullable=False)
    current_price = Column(PRICE, nullable=True)
    prev_day_price = Column(PRICE, nullable=True)
    last_updated = Column(DateTime, nullable=True)


class UserSettingsORM(Base):
    """SQLAlchemy model for UserSettings (single row)."""

    __tablename__ = "user_settings"

    id = Column(String(36), primary_key=True)
    name = Column(String(255), default="User", nullable=False)
    email = Column(String(255), nullable=True)
    theme = Column(_enum_column_type(Theme), default=Theme.LIGHT, nullable=False)
