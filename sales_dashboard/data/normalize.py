"""
Type coercion for raw transaction records (upstream feed or snapshot).
"""
from __future__ import annotations

import pandas as pd

from sales_dashboard.config import TRANSACTION_COLUMNS, TEXT_COLUMNS

_TRUE_STRINGS = {"true", "1", "yes", "y", "t"}


def _to_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return False
    return bool(value)


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Keep known columns, coerce types, add derived month column."""
    df = df.reindex(columns=TRANSACTION_COLUMNS).copy()

    for col in TEXT_COLUMNS:
        df[col] = df[col].fillna("").astype(str)

    # Price → non-negative float
    df["price"] = pd.to_numeric(df["price"], errors="coerce").fillna(0.0).clip(lower=0.0).astype(float)

    # Datetime (UTC so month-of-sale matches the feed's timestamps)
    df["dateOfSale"] = pd.to_datetime(df["dateOfSale"].astype("object"), errors="coerce", utc=True, format="ISO8601")

    df["sold"] = df["sold"].map(_to_bool).astype(bool)

    # Month for period filtering; 0 = no parseable date, never matches
    df["month"] = df["dateOfSale"].dt.month.fillna(0).astype("int8")

    return df


def records_to_frame(records: list[dict]) -> pd.DataFrame:
    """Build a normalized frame from a list of record dicts."""
    return normalize_columns(pd.DataFrame(records))


def frame_to_records(df: pd.DataFrame) -> list[dict]:
    """Serialize store rows to JSON-safe dicts (ISO dates, native types)."""
    out = []
    for row in df.to_dict("records"):
        date = row.get("dateOfSale")
        out.append({
            "id": int(row["id"]),
            "title": row["title"],
            "description": row["description"],
            "price": float(row["price"]),
            "dateOfSale": date.isoformat() if pd.notna(date) else None,
            "category": row["category"],
            "sold": bool(row["sold"]),
        })
    return out
