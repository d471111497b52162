"""
Sales Dashboard — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sales_dashboard.data.store import DataStore
from sales_dashboard.errors import InvalidRequest, DependencyFailure
from sales_dashboard.api.dependencies import set_store
from sales_dashboard.api.router_meta import router as meta_router
from sales_dashboard.api.router_transactions import router as transactions_router
from sales_dashboard.api.router_statistics import router as statistics_router
from sales_dashboard.api.router_reports import router as reports_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the transaction snapshot at startup."""
    from sales_dashboard.config import BASE_FOLDER, REPORTS_FOLDER
    for d in [BASE_FOLDER, REPORTS_FOLDER]:
        d.mkdir(parents=True, exist_ok=True)

    store = DataStore()
    store.load()
    set_store(store)

    if store.row_count() > 0:
        print(f"\nSales Dashboard ready — {store.row_count():,} transactions, "
              f"{len(store.months_available())} months\n")
    else:
        print("\nSales Dashboard ready — no data yet. POST /api/initialize-database to seed.\n")
    yield


# ---------------------------------------------------------------------------
# Error responses: {error, details?}
# ---------------------------------------------------------------------------

async def _invalid_request(request: Request, exc: InvalidRequest) -> JSONResponse:
    return JSONResponse(status_code=400, content=exc.to_dict())


async def _dependency_failure(request: Request, exc: DependencyFailure) -> JSONResponse:
    print(f"  {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=exc.to_dict())


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request parameters", "details": details})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Sales Dashboard API",
        description="Monthly transaction statistics — table search, summary, bar and pie charts",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidRequest, _invalid_request)
    app.add_exception_handler(DependencyFailure, _dependency_failure)
    app.add_exception_handler(RequestValidationError, _validation_error)

    app.include_router(meta_router)
    app.include_router(transactions_router)
    app.include_router(statistics_router)
    app.include_router(reports_router)

    return app


app = create_app()
