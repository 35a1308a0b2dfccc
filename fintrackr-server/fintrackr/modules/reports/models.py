"""Report shapes returned by the reporting service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fintrackr.modules.wallets import CurrencyTotal

UNCATEGORIZED_ID = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"
UNCATEGORIZED_COLOR = "#6B7280"

WEEKLY = "weekly"
MONTHLY = "monthly"
YEARLY = "yearly"
PERIODS = frozenset({WEEKLY, MONTHLY, YEARLY})


@dataclass(slots=True)
class CategoryReportRow:
    category_id: str
    category_name: str
    category_color: str
    total_income: Decimal = Decimal("0.00")
    total_expense: Decimal = Decimal("0.00")


@dataclass(slots=True)
class CategoryReport:
    date_from: date
    date_to: date
    rows: list[CategoryReportRow] = field(default_factory=list)

    @property
    def total_income(self) -> Decimal:
        return sum((row.total_income for row in self.rows), Decimal("0.00"))

    @property
    def total_expense(self) -> Decimal:
        return sum((row.total_expense for row in self.rows), Decimal("0.00"))


@dataclass(slots=True)
class MonthlyTotals:
    month: int
    income: Decimal = Decimal("0.00")
    expenses: Decimal = Decimal("0.00")

    @property
    def savings(self) -> Decimal:
        return self.income - self.expenses


@dataclass(slots=True)
class DashboardSummary:
    balances: list[CurrencyTotal]
    wallet_count: int
    month_income: Decimal
    month_expense: Decimal
    income_count: int
    expense_count: int
