"""
Transactions table endpoint — month filter, search, pagination.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from sales_dashboard.config import DEFAULT_PAGE, DEFAULT_PER_PAGE
from sales_dashboard.data.store import DataStore
from sales_dashboard.api.dependencies import get_store
from sales_dashboard.api.response_models import TransactionOut, ErrorResponse
from sales_dashboard.analytics.query import build_transaction_query, list_transactions
from sales_dashboard.errors import dependency_errors

router = APIRouter(prefix="/api", tags=["transactions"])


@router.get(
    "/transactions",
    response_model=list[TransactionOut],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def transactions(
    month: Optional[str] = Query(None, description="Month name, e.g. March"),
    search: str = Query("", description="Matches title/description, or price if numeric"),
    page: int = Query(DEFAULT_PAGE),
    per_page: int = Query(DEFAULT_PER_PAGE, alias="perPage"),
    store: DataStore = Depends(get_store),
):
    """One page of the month's transactions matching the search text."""
    query = build_transaction_query(month, search, page, per_page)
    with dependency_errors("Error fetching transactions"):
        return list_transactions(store, query)
