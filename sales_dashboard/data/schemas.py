"""
Query schemas — month filter, paginated transaction query, price ranges.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from sales_dashboard.config import MONTH_NAMES, PRICE_RANGES, DEFAULT_PAGE, DEFAULT_PER_PAGE
from sales_dashboard.errors import InvalidRequest


_NUMBER_RE = re.compile(r"^\s*[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\s*$")


def parse_month(name: Optional[str]) -> int:
    """Map a month name ("January".."December", case-sensitive) to 1-12."""
    if name is None or not name.strip():
        raise InvalidRequest("Month parameter is required")
    try:
        return MONTH_NAMES.index(name.strip()) + 1
    except ValueError:
        raise InvalidRequest("Invalid month format")


def parse_number(text: str) -> Optional[float]:
    """Return text as a float if it is a plain decimal number, else None."""
    if text is None or not _NUMBER_RE.match(text):
        return None
    return float(text)


@dataclass(frozen=True)
class MonthFilter:
    """Matches records sold in a calendar month of any year."""
    month: int  # 1-12

    @classmethod
    def from_name(cls, name: Optional[str]) -> "MonthFilter":
        return cls(parse_month(name))

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def mask(self, df: pd.DataFrame) -> pd.Series:
        return df["month"] == self.month


@dataclass(frozen=True)
class TransactionQuery:
    """Month + free-text search + pagination for the transactions table."""
    month_filter: MonthFilter
    search: str = ""
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page

    def mask(self, df: pd.DataFrame) -> pd.Series:
        """Month match AND (title/description contains search OR price == search)."""
        matched = self.month_filter.mask(df)
        if not self.search:
            return matched

        text = (
            df["title"].str.contains(self.search, case=False, regex=False, na=False)
            | df["description"].str.contains(self.search, case=False, regex=False, na=False)
        )
        price = parse_number(self.search)
        if price is not None:
            text = text | (df["price"] == price)
        return matched & text


@dataclass(frozen=True)
class PriceRange:
    """One bar-chart bucket.

    A price belongs to the bucket with the greatest lower edge <= price, so
    fractional prices between labelled edges (e.g. 100.5) are not lost.
    """
    low: float
    high: Optional[float]
    next_low: Optional[float] = None

    @property
    def label(self) -> str:
        high = "above" if self.high is None else f"{self.high:g}"
        return f"{self.low:g}-{high}"

    def mask(self, prices: pd.Series) -> pd.Series:
        m = prices >= self.low
        if self.next_low is not None:
            m &= prices < self.next_low
        return m


def price_ranges() -> list[PriceRange]:
    """Configured bar-chart buckets in ascending order."""
    edges = PRICE_RANGES
    out = []
    for i, (low, high) in enumerate(edges):
        next_low = edges[i + 1][0] if i + 1 < len(edges) else None
        out.append(PriceRange(low, high, next_low))
    return out
