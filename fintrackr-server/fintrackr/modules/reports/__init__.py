"""Exports for reporting"""

from .models import (
    MONTHLY,
    PERIODS,
    UNCATEGORIZED_ID,
    WEEKLY,
    YEARLY,
    CategoryReport,
    CategoryReportRow,
    DashboardSummary,
    MonthlyTotals,
)
from .service import ReportService, period_range

__all__ = [
    "MONTHLY",
    "PERIODS",
    "UNCATEGORIZED_ID",
    "WEEKLY",
    "YEARLY",
    "CategoryReport",
    "CategoryReportRow",
    "DashboardSummary",
    "MonthlyTotals",
    "ReportService",
    "period_range",
]
