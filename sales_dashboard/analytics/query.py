"""
Transactions table — request parsing and paginated search.
"""
from __future__ import annotations

from typing import Optional

from sales_dashboard.config import DEFAULT_PAGE, DEFAULT_PER_PAGE
from sales_dashboard.data.store import DataStore
from sales_dashboard.data.schemas import MonthFilter, TransactionQuery
from sales_dashboard.data.normalize import frame_to_records
from sales_dashboard.errors import InvalidRequest


def _positive_int(value, name: str) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise InvalidRequest(f"{name} must be a positive integer")
    if n < 1:
        raise InvalidRequest(f"{name} must be a positive integer")
    return n


def build_transaction_query(
    month: Optional[str],
    search: Optional[str] = "",
    page=DEFAULT_PAGE,
    per_page=DEFAULT_PER_PAGE,
) -> TransactionQuery:
    """Validate raw request values into a TransactionQuery.

    Raises InvalidRequest for a missing/unknown month or non-positive paging.
    """
    return TransactionQuery(
        month_filter=MonthFilter.from_name(month),
        search=search or "",
        page=_positive_int(page, "page"),
        per_page=_positive_int(per_page, "perPage"),
    )


def list_transactions(store: DataStore, query: TransactionQuery) -> list[dict]:
    """One page of matching transactions as JSON-ready dicts."""
    return frame_to_records(store.find(query))
