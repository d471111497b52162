"""
FastAPI dependencies — DataStore singleton, month parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import Query

from sales_dashboard.data.store import DataStore
from sales_dashboard.data.schemas import MonthFilter
from sales_dashboard.errors import DependencyFailure

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore | None) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    if _store is None:
        raise DependencyFailure("Server not initialized yet")
    if not _store.is_loaded:
        raise DependencyFailure("Data not loaded yet")
    return _store


def get_store_or_empty() -> DataStore:
    """Return the store even if it has no data (for health and reseed endpoints)."""
    if _store is None:
        raise DependencyFailure("Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Month parsing from query params
# ---------------------------------------------------------------------------

def parse_month_filter(
    month: Optional[str] = Query(None, description="Month name, e.g. March"),
) -> MonthFilter:
    """Parse ?month= into a MonthFilter. Raises InvalidRequest (400)."""
    return MonthFilter.from_name(month)
