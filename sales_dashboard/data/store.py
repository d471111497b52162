"""
DataStore — In-memory transaction collection backed by pandas.

Loaded once at startup from the JSON snapshot, queried on every request,
replaced wholesale by a reseed. Query methods read a single reference to the
current frame, so a concurrent reseed never exposes a half-written dataset.
"""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

import pandas as pd

from sales_dashboard.config import SNAPSHOT_PATH, TRANSACTION_COLUMNS, MONTH_NAMES
from sales_dashboard.data.loader import load_snapshot, save_snapshot
from sales_dashboard.data.normalize import records_to_frame, frame_to_records
from sales_dashboard.data.schemas import MonthFilter, PriceRange, TransactionQuery

_COLUMNS = ["id"] + TRANSACTION_COLUMNS + ["month"]


def _empty_frame() -> pd.DataFrame:
    df = records_to_frame([])
    df.insert(0, "id", pd.Series(dtype="int64"))
    return df[_COLUMNS]


class DataStore:
    """Transaction records with filter/aggregate/count/insert/delete-all primitives."""

    def __init__(self, snapshot_path: Optional[Path] = SNAPSHOT_PATH) -> None:
        self.snapshot_path = Path(snapshot_path) if snapshot_path else None
        self.df: pd.DataFrame = _empty_frame()
        self._next_id = 1
        self._lock = threading.Lock()
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading / persistence
    # ------------------------------------------------------------------

    def load(self) -> "DataStore":
        """Load the saved snapshot (if any) into memory."""
        print("Loading transactions...")
        path = self.snapshot_path
        records = load_snapshot(path) if path else []
        with self._lock:
            self.df = self._build(records, start_id=1)
            self._next_id = len(self.df) + 1
        if self.df.empty:
            print("  No snapshot found — starting with empty collection")
        else:
            print(f"  Loaded {len(self.df):,} transactions from {path}")
        self._loaded = True
        return self

    def save(self) -> Optional[Path]:
        """Persist current records to the snapshot file (no-op without a path)."""
        with self._lock:
            return self._write_snapshot(self.df)

    def _write_snapshot(self, df: pd.DataFrame) -> Optional[Path]:
        if self.snapshot_path is None:
            return None
        return save_snapshot(frame_to_records(df), self.snapshot_path)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    @staticmethod
    def _build(records: list[dict], start_id: int) -> pd.DataFrame:
        if not records:
            return _empty_frame()
        df = records_to_frame(records)
        df.insert(0, "id", range(start_id, start_id + len(df)))
        df["id"] = df["id"].astype("int64")
        return df[_COLUMNS].reset_index(drop=True)

    def insert_many(self, records: list[dict]) -> int:
        """Append records, assigning sequential ids. Returns inserted count."""
        with self._lock:
            new = self._build(records, start_id=self._next_id)
            if new.empty:
                return 0
            frames = [f for f in (self.df, new) if not f.empty]
            self.df = pd.concat(frames, ignore_index=True)
            self._next_id += len(new)
            self._loaded = True
            return len(new)

    def delete_all(self) -> int:
        """Drop every record. Returns the number deleted."""
        with self._lock:
            deleted = len(self.df)
            self.df = _empty_frame()
            self._next_id = 1
            return deleted

    def replace_all(self, records: list[dict], persist: bool = False) -> int:
        """Delete everything and insert records as one swap. Returns inserted count.

        With persist=True the snapshot is written from the new frame before the
        swap; if the write fails the in-memory records are left unchanged.
        """
        new = self._build(records, start_id=1)
        with self._lock:
            if persist:
                self._write_snapshot(new)
            self.df = new
            self._next_id = len(new) + 1
            self._loaded = True
            return len(new)

    def view(self) -> "DataStore":
        """Read-only store pinned to the current frame.

        Queries that combine several sub-queries run against one view so a
        concurrent reseed cannot mix two datasets into one response.
        """
        pinned = DataStore(snapshot_path=None)
        pinned.df = self.df
        pinned._next_id = self._next_id
        pinned._loaded = self._loaded
        return pinned

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(self, query: TransactionQuery) -> pd.DataFrame:
        """Matching rows in id order, paginated by query.skip / query.limit."""
        df = self.df
        matched = df[query.mask(df)].sort_values("id")
        return matched.iloc[query.skip:query.skip + query.limit]

    def count(
        self,
        month_filter: MonthFilter,
        sold: Optional[bool] = None,
        price_range: Optional[PriceRange] = None,
    ) -> int:
        """Count month matches, optionally narrowed by sold flag and price bucket."""
        df = self.df
        m = month_filter.mask(df)
        if sold is not None:
            m &= df["sold"] == sold
        if price_range is not None:
            m &= price_range.mask(df["price"])
        return int(m.sum())

    def total_price(self, month_filter: MonthFilter) -> float:
        """Sum of price over month matches (0.0 when none)."""
        df = self.df
        return float(df.loc[month_filter.mask(df), "price"].sum())

    def group_count(self, month_filter: MonthFilter, field: str = "category") -> list[dict]:
        """[{field: value, count: n}] over month matches, sorted by value."""
        df = self.df
        counts = df.loc[month_filter.mask(df), field].value_counts(sort=False).sort_index()
        return [{field: key, "count": int(n)} for key, n in counts.items()]

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def row_count(self) -> int:
        return len(self.df)

    def months_available(self) -> list[dict]:
        """[{month, name, count}] for months that have at least one record."""
        df = self.df
        counts = df.loc[df["month"] > 0, "month"].value_counts().sort_index()
        return [
            {"month": int(m), "name": MONTH_NAMES[int(m) - 1], "count": int(n)}
            for m, n in counts.items()
        ]
