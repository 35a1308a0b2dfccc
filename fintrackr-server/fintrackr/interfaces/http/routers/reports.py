"""Read-only reporting endpoints."""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrackr.interfaces.http.deps import get_current_owner, get_db_session
from fintrackr.interfaces.http.errors import domain_errors
from fintrackr.modules.reports import ReportService
from fintrackr.schemas import (
    CategoryReportResponse,
    DashboardResponse,
    MonthlySummaryResponse,
    MonthlyTotalsResponse,
)

router = APIRouter()


@router.get("/categories", response_model=CategoryReportResponse, summary="Income and expense per category")
async def category_report(
    period: Optional[str] = Query(None, description="weekly, monthly or yearly"),
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> CategoryReportResponse:
    """Either ``period`` or both ``date_from`` and ``date_to`` must be given."""
    service = ReportService.with_session(db)
    with domain_errors():
        if period is not None:
            report = await service.category_report_for_period(owner_id, period, date.today())
        elif date_from is not None and date_to is not None:
            report = await service.category_report(owner_id, date_from, date_to)
        else:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Provide either period or both date_from and date_to",
            )
    return CategoryReportResponse.model_validate(report)


@router.get("/monthly", response_model=MonthlySummaryResponse, summary="Income, expenses and savings per month")
async def monthly_summary(
    year: Optional[int] = Query(None, ge=1900, le=9999),
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> MonthlySummaryResponse:
    year = year or date.today().year
    with domain_errors():
        months = await ReportService.with_session(db).monthly_summary(owner_id, year)
    return MonthlySummaryResponse(
        year=year,
        months=[MonthlyTotalsResponse.model_validate(month) for month in months],
    )


@router.get("/dashboard", response_model=DashboardResponse, summary="Balances and this month's activity")
async def dashboard(
    owner_id: str = Depends(get_current_owner),
    db: AsyncSession = Depends(get_db_session),
) -> DashboardResponse:
    with domain_errors():
        summary = await ReportService.with_session(db).dashboard(owner_id, date.today())
    return DashboardResponse.model_validate(summary)
