"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class TransactionOut(BaseModel):
    id: int
    title: str
    description: str
    price: float
    dateOfSale: Optional[str] = None
    category: str
    sold: bool


class SummaryResponse(BaseModel):
    totalSaleAmount: float
    soldItems: int
    notSoldItems: int


class PriceRangeCount(BaseModel):
    priceRange: str
    count: int


class CategoryCount(BaseModel):
    category: str
    count: int


class CombinedResponse(BaseModel):
    statistics: SummaryResponse
    barChartData: list[PriceRangeCount]
    pieChartData: list[CategoryCount]


class SeedResponse(BaseModel):
    message: str
    count: int


class MonthCount(BaseModel):
    month: int
    name: str
    count: int


class MonthsResponse(BaseModel):
    months: list[MonthCount]


class HealthResponse(BaseModel):
    status: str
    rows: int
    months: int


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
