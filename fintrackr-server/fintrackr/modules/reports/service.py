"""Read-only aggregations over wallets and transactions."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.modules.categories import CategoryService
from fintrackr.modules.common import ValidationError
from fintrackr.modules.transactions import INCOME, TransactionService
from fintrackr.modules.wallets import WalletService

from .models import (
    MONTHLY,
    PERIODS,
    UNCATEGORIZED_COLOR,
    UNCATEGORIZED_ID,
    UNCATEGORIZED_NAME,
    WEEKLY,
    CategoryReport,
    CategoryReportRow,
    DashboardSummary,
    MonthlyTotals,
)


def period_range(period: str, today: date) -> tuple[date, date]:
    """Resolve a quick-filter period to an inclusive date range containing ``today``."""
    if period not in PERIODS:
        raise ValidationError(f"unknown report period: {period}")
    if period == WEEKLY:
        # weeks start on Sunday
        start = today - timedelta(days=(today.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
    if period == MONTHLY:
        last_day = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last_day)
    return date(today.year, 1, 1), date(today.year, 12, 31)


@dataclass(slots=True)
class ReportService:
    transactions: TransactionService
    categories: CategoryService
    wallets: WalletService

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ReportService":
        return cls(
            TransactionService.with_session(session),
            CategoryService.with_session(session),
            WalletService.with_session(session),
        )

    async def category_report(self, owner_id: str, date_from: date, date_to: date) -> CategoryReport:
        if date_from > date_to:
            raise ValidationError("date_from must not be after date_to")
        categories = {category.id: category for category in await self.categories.list_categories(owner_id)}
        rows: dict[str, CategoryReportRow] = {}
        uncategorized = CategoryReportRow(UNCATEGORIZED_ID, UNCATEGORIZED_NAME, UNCATEGORIZED_COLOR)

        for tx in await self.transactions.in_range(owner_id, date_from, date_to):
            category = categories.get(tx.category_id) if tx.category_id else None
            if category is None:
                row = uncategorized
            else:
                row = rows.setdefault(
                    category.id,
                    CategoryReportRow(category.id, category.name, category.color),
                )
            if tx.type == INCOME:
                row.total_income += tx.amount
            else:
                row.total_expense += tx.amount

        report_rows = sorted(rows.values(), key=lambda row: row.category_name.lower())
        if uncategorized.total_income > 0 or uncategorized.total_expense > 0:
            report_rows.append(uncategorized)
        return CategoryReport(date_from=date_from, date_to=date_to, rows=report_rows)

    async def category_report_for_period(self, owner_id: str, period: str, today: date) -> CategoryReport:
        date_from, date_to = period_range(period, today)
        return await self.category_report(owner_id, date_from, date_to)

    async def monthly_summary(self, owner_id: str, year: int) -> list[MonthlyTotals]:
        months = [MonthlyTotals(month=month) for month in range(1, 13)]
        for tx in await self.transactions.in_range(owner_id, date(year, 1, 1), date(year, 12, 31)):
            bucket = months[tx.date.month - 1]
            if tx.type == INCOME:
                bucket.income += tx.amount
            else:
                bucket.expenses += tx.amount
        return months

    async def dashboard(self, owner_id: str, today: date) -> DashboardSummary:
        balances = await self.wallets.total_balance(owner_id)
        date_from, date_to = period_range(MONTHLY, today)
        month = await self.transactions.in_range(owner_id, date_from, date_to)
        incomes = [tx.amount for tx in month if tx.type == INCOME]
        expenses = [tx.amount for tx in month if tx.type != INCOME]
        return DashboardSummary(
            balances=balances,
            wallet_count=sum(total.wallet_count for total in balances),
            month_income=sum(incomes, Decimal("0.00")),
            month_expense=sum(expenses, Decimal("0.00")),
            income_count=len(incomes),
            expense_count=len(expenses),
        )
