"""
Statistics endpoints — summary, bar chart, pie chart, combined.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from sales_dashboard.data.store import DataStore
from sales_dashboard.data.schemas import MonthFilter
from sales_dashboard.api.dependencies import get_store, parse_month_filter
from sales_dashboard.api.response_models import (
    SummaryResponse, PriceRangeCount, CategoryCount, CombinedResponse, ErrorResponse,
)
from sales_dashboard.analytics.statistics import (
    sales_summary,
    price_range_counts_async,
    category_distribution,
    combined_statistics,
)
from sales_dashboard.errors import dependency_errors

router = APIRouter(
    prefix="/api",
    tags=["statistics"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("/statistics", response_model=SummaryResponse)
def statistics(
    month_filter: MonthFilter = Depends(parse_month_filter),
    store: DataStore = Depends(get_store),
):
    """Total sale amount, sold and not-sold item counts for the month."""
    with dependency_errors("Error fetching statistics"):
        return sales_summary(store, month_filter)


@router.get("/bar-chart", response_model=list[PriceRangeCount])
async def bar_chart(
    month_filter: MonthFilter = Depends(parse_month_filter),
    store: DataStore = Depends(get_store),
):
    """Item counts per price range for the month."""
    with dependency_errors("Error fetching bar chart data"):
        return await price_range_counts_async(store, month_filter)


@router.get("/pie-chart", response_model=list[CategoryCount])
def pie_chart(
    month_filter: MonthFilter = Depends(parse_month_filter),
    store: DataStore = Depends(get_store),
):
    """Item counts per category for the month."""
    with dependency_errors("Error fetching pie chart data"):
        return category_distribution(store, month_filter)


@router.get("/combined-statistics", response_model=CombinedResponse)
async def combined(
    month_filter: MonthFilter = Depends(parse_month_filter),
    store: DataStore = Depends(get_store),
):
    """Summary, bar chart and pie chart in one response."""
    with dependency_errors("Error fetching combined data"):
        return await combined_statistics(store, month_filter)
