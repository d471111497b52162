"""
Error types surfaced by the query layer and mapped to HTTP responses in main.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Optional


class InvalidRequest(Exception):
    """Bad client input (missing/unknown month, bad paging). HTTP 400."""

    def __init__(self, error: str) -> None:
        super().__init__(error)
        self.error = error

    def to_dict(self) -> dict:
        return {"error": self.error}


class DependencyFailure(Exception):
    """Store or upstream feed failed, or returned unusable data. HTTP 500."""

    def __init__(self, error: str, details: Optional[str] = None) -> None:
        super().__init__(f"{error}: {details}" if details else error)
        self.error = error
        self.details = details

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details:
            body["details"] = self.details
        return body


@contextmanager
def dependency_errors(context: str):
    """Re-raise anything except our own error types as DependencyFailure(context)."""
    try:
        yield
    except (InvalidRequest, DependencyFailure):
        raise
    except Exception as exc:
        raise DependencyFailure(context, str(exc)) from exc
