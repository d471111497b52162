"""
Meta endpoints: health, months with data, reseed.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from sales_dashboard.data.store import DataStore
from sales_dashboard.data.loader import reseed
from sales_dashboard.api.dependencies import get_store, get_store_or_empty
from sales_dashboard.api.response_models import HealthResponse, MonthsResponse, SeedResponse, ErrorResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store_or_empty)):
    return HealthResponse(
        status="ok" if store.is_loaded else "loading",
        rows=store.row_count(),
        months=len(store.months_available()),
    )


@router.get("/months", response_model=MonthsResponse)
def list_months(store: DataStore = Depends(get_store)):
    return MonthsResponse(months=store.months_available())


@router.post(
    "/initialize-database",
    response_model=SeedResponse,
    responses={500: {"model": ErrorResponse}},
)
def initialize_database(store: DataStore = Depends(get_store_or_empty)):
    """Delete every transaction and reload from the third-party feed.

    Concurrent calls are serialised by the store; the last reseed wins.
    """
    count = reseed(store)
    return SeedResponse(message="Database initialized with seed data.", count=count)
