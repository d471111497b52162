"""
Upstream feed fetching and on-disk snapshot load/save.
"""
from __future__ import annotations

import json
import tempfile
from pathlib import Path

import requests

from sales_dashboard.config import SEED_URL, SEED_TIMEOUT, SNAPSHOT_PATH
from sales_dashboard.errors import DependencyFailure


# ---------------------------------------------------------------------------
# Upstream feed
# ---------------------------------------------------------------------------

def fetch_seed_records(url: str = SEED_URL, timeout: float = SEED_TIMEOUT) -> list[dict]:
    """GET the third-party feed and return its JSON array of records.

    Raises DependencyFailure when the request fails or the payload is not a
    non-empty JSON array.
    """
    print(f"Fetching data from third-party API: {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as exc:
        raise DependencyFailure("Error fetching seed data", str(exc)) from exc
    except ValueError as exc:
        raise DependencyFailure("Error fetching seed data", f"Invalid JSON: {exc}") from exc

    if not isinstance(data, list) or len(data) == 0:
        print("  No data fetched from the third-party API")
        raise DependencyFailure("No data fetched from the third-party API")

    records = [r for r in data if isinstance(r, dict)]
    if not records:
        raise DependencyFailure("No data fetched from the third-party API", "Payload contains no objects")

    print(f"  Fetched {len(records):,} records")
    return records


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

def load_snapshot(path: Path = SNAPSHOT_PATH) -> list[dict]:
    """Read the saved transaction snapshot. Missing file = no records."""
    path = Path(path)
    if not path.exists():
        return []
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return data if isinstance(data, list) else []


def save_snapshot(records: list[dict], path: Path = SNAPSHOT_PATH) -> Path:
    """Write the transaction snapshot (records orient, ISO dates)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", dir=path.parent, prefix=path.stem, suffix=".tmp", delete=False,
    ) as f:
        tmp = Path(f.name)
        try:
            json.dump(records, f)
        except Exception:
            f.close()
            tmp.unlink(missing_ok=True)
            raise
    try:
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise
    return path


# ---------------------------------------------------------------------------
# Reseed
# ---------------------------------------------------------------------------

def reseed(store, url: str = SEED_URL, timeout: float = SEED_TIMEOUT) -> int:
    """Replace every record in store with a fresh fetch of the feed.

    The payload is validated and the snapshot written before anything is
    replaced, so a failed fetch or write leaves the store as it was. Returns
    the number of inserted records.
    """
    records = fetch_seed_records(url, timeout)
    try:
        inserted = store.replace_all(records, persist=True)
    except Exception as exc:
        raise DependencyFailure("Error initializing database", str(exc)) from exc
    print(f"  Inserted {inserted:,} records into the store")
    return inserted
