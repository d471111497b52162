"""
Monthly Statistics Report — summary KPIs, price-range and category breakdowns.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from sales_dashboard.config import REPORTS_FOLDER
from sales_dashboard.data.store import DataStore
from sales_dashboard.data.schemas import MonthFilter
from sales_dashboard.analytics.common import sanitize_for_json
from sales_dashboard.analytics.statistics import sales_summary, price_range_counts, category_distribution
from sales_dashboard.excel.writer import ExcelWriter


PRICE_RANGE_COLS = [
    ("priceRange", "text", "Price Range"),
    ("count", "number", "Items"),
]

CATEGORY_COLS = [
    ("category", "text", "Category"),
    ("count", "number", "Items"),
]


def default_output_path(month_filter: MonthFilter) -> Path:
    return REPORTS_FOLDER / f"Statistics_{month_filter.name}.xlsx"


def generate_json(store: DataStore, month_filter: MonthFilter) -> dict:
    store = store.view()
    summary = sales_summary(store, month_filter)
    return sanitize_for_json({
        "month": month_filter.name,
        "statistics": summary,
        "totalItems": summary["soldItems"] + summary["notSoldItems"],
        "barChartData": price_range_counts(store, month_filter),
        "pieChartData": category_distribution(store, month_filter),
    })


def generate_excel(
    store: DataStore,
    month_filter: MonthFilter,
    output_path: str | Path | None = None,
) -> Path:
    data = generate_json(store, month_filter)
    s = data["statistics"]
    ew = ExcelWriter()

    ws = ew.add_sheet("Summary")
    ew.write_title(ws, "SALES STATISTICS",
                   f"{data['month']} (all years)  |  Generated {pd.Timestamp.now():%B %d, %Y}")
    row = ew.write_section(ws, 5, "SALES OVERVIEW")
    ew.write_kpi_row(ws, row, [
        (s["totalSaleAmount"], "TOTAL SALE AMOUNT", "currency"),
        (s["soldItems"], "SOLD ITEMS", "number"),
        (s["notSoldItems"], "NOT SOLD ITEMS", "number"),
        (data["totalItems"], "TOTAL ITEMS", "number"),
    ])

    ws_r = ew.add_sheet("By Price Range")
    ew.write_table(ws_r, 1, PRICE_RANGE_COLS, data["barChartData"],
                   highlight_fn=lambda r: r["count"] > 0, show_total=True)

    ws_c = ew.add_sheet("By Category")
    ew.write_table(ws_c, 1, CATEGORY_COLS, data["pieChartData"], show_total=True)

    return ew.save(output_path or default_output_path(month_filter))
