"""
Monthly statistics — summary totals, price-range bar chart, category pie chart.

Every computation is scoped by the month filter only (never the search text).
Each entry point pins one view of the store; the async variants then fan
independent queries out to the threadpool and join them before returning.
"""
from __future__ import annotations

import asyncio

from fastapi.concurrency import run_in_threadpool

from sales_dashboard.data.store import DataStore
from sales_dashboard.data.schemas import MonthFilter, price_ranges
from sales_dashboard.analytics.common import round_money


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def sales_summary(store: DataStore, month_filter: MonthFilter) -> dict:
    """Total sale amount plus sold / not-sold item counts (by the sold flag)."""
    store = store.view()
    return {
        "totalSaleAmount": round_money(store.total_price(month_filter)),
        "soldItems": store.count(month_filter, sold=True),
        "notSoldItems": store.count(month_filter, sold=False),
    }


# ---------------------------------------------------------------------------
# Bar chart
# ---------------------------------------------------------------------------

def price_range_counts(store: DataStore, month_filter: MonthFilter) -> list[dict]:
    """[{priceRange, count}] for every configured bucket, in bucket order."""
    store = store.view()
    return [
        {"priceRange": r.label, "count": store.count(month_filter, price_range=r)}
        for r in price_ranges()
    ]


async def price_range_counts_async(store: DataStore, month_filter: MonthFilter) -> list[dict]:
    """Same as price_range_counts, one concurrent count per bucket."""
    store = store.view()
    ranges = price_ranges()
    counts = await asyncio.gather(*[
        run_in_threadpool(store.count, month_filter, price_range=r) for r in ranges
    ])
    return [{"priceRange": r.label, "count": c} for r, c in zip(ranges, counts)]


# ---------------------------------------------------------------------------
# Pie chart
# ---------------------------------------------------------------------------

def category_distribution(store: DataStore, month_filter: MonthFilter) -> list[dict]:
    """[{category, count}] for categories with at least one sale in the month."""
    return store.group_count(month_filter, "category")


# ---------------------------------------------------------------------------
# Combined
# ---------------------------------------------------------------------------

async def combined_statistics(store: DataStore, month_filter: MonthFilter) -> dict:
    """All three views over the same month filter, computed concurrently."""
    store = store.view()
    statistics, bar_chart, pie_chart = await asyncio.gather(
        run_in_threadpool(sales_summary, store, month_filter),
        price_range_counts_async(store, month_filter),
        run_in_threadpool(category_distribution, store, month_filter),
    )
    return {
        "statistics": statistics,
        "barChartData": bar_chart,
        "pieChartData": pie_chart,
    }
