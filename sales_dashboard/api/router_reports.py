"""
Report download endpoints.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from sales_dashboard.data.store import DataStore
from sales_dashboard.data.schemas import MonthFilter
from sales_dashboard.api.dependencies import get_store, parse_month_filter
from sales_dashboard.reports.statistics_report import generate_excel
from sales_dashboard.errors import dependency_errors

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/statistics")
def statistics_workbook(
    month_filter: MonthFilter = Depends(parse_month_filter),
    store: DataStore = Depends(get_store),
):
    """Download the month's statistics as an Excel workbook."""
    with dependency_errors("Error generating statistics report"):
        path = generate_excel(store, month_filter)
    return FileResponse(
        path=str(path),
        filename=path.name,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
