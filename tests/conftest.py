"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from sales_dashboard.api.dependencies import set_store
from sales_dashboard.data.store import DataStore
from sales_dashboard.main import app


SAMPLE_RECORDS = [
    {"title": "Fjallraven Backpack", "description": "Your perfect pack for everyday use",
     "price": 109.95, "dateOfSale": "2021-03-27T10:00:00Z", "category": "men's clothing", "sold": False},
    {"title": "Mens Casual T-Shirt", "description": "Slim-fitting style",
     "price": 22.3, "dateOfSale": "2022-03-05T08:30:00Z", "category": "men's clothing", "sold": False},
    {"title": "Solid Gold Petite Micropave", "description": "Satisfaction Guaranteed",
     "price": 150, "dateOfSale": "2022-03-15T12:00:00Z", "category": "jewelery", "sold": True},
    {"title": "WD 2TB Elements Portable Hard Drive", "description": "USB 3.0 and USB 2.0 compatibility",
     "price": 64, "dateOfSale": "2021-03-20T17:45:00Z", "category": "electronics", "sold": True},
    {"title": "Samsung 49-Inch Monitor", "description": "49 INCH SUPER ULTRAWIDE",
     "price": 999.99, "dateOfSale": "2022-03-01T00:00:00Z", "category": "electronics", "sold": False},
    {"title": "Opna Short Sleeve", "description": "100% Polyester",
     "price": 150, "dateOfSale": "2021-04-10T09:00:00Z", "category": "women's clothing", "sold": True},
    {"title": "Womens Rain Jacket", "description": "Lightweight, perfect for trip",
     "price": 39.99, "dateOfSale": "2021-03-09T14:20:00Z", "category": "women's clothing", "sold": True},
    {"title": "Acer Monitor", "description": "21.5 inches Full HD",
     "price": 599, "dateOfSale": "2022-01-12T11:00:00Z", "category": "electronics", "sold": False},
]


@pytest.fixture
def records():
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture
def store(records):
    """In-memory store with the sample records and no snapshot file."""
    s = DataStore(snapshot_path=None)
    s.insert_many(records)
    return s


@pytest.fixture
def client(store):
    """API client bound to the sample store (lifespan not run)."""
    set_store(store)
    yield TestClient(app)
    set_store(None)
