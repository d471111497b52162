import json

import pytest
import requests

import sales_dashboard.data.loader as loader_mod
from sales_dashboard.data.loader import fetch_seed_records, reseed, save_snapshot
from sales_dashboard.data.store import DataStore
from sales_dashboard.errors import DependencyFailure


class _Response:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._payload


def _patch_get(monkeypatch, response):
    calls = []

    def _get(url, timeout=None):
        calls.append((url, timeout))
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(loader_mod.requests, "get", _get)
    return calls


def test_fetch_returns_records(monkeypatch, records):
    calls = _patch_get(monkeypatch, _Response(records))
    assert fetch_seed_records("https://feed.example/data.json", timeout=5) == records
    assert calls == [("https://feed.example/data.json", 5)]


@pytest.mark.parametrize("payload", [[], {"items": []}, "nope", None, [1, 2, 3]])
def test_fetch_rejects_unusable_payload(monkeypatch, payload):
    _patch_get(monkeypatch, _Response(payload))
    with pytest.raises(DependencyFailure) as exc_info:
        fetch_seed_records("https://feed.example/data.json")
    assert exc_info.value.error == "No data fetched from the third-party API"


def test_fetch_wraps_http_errors(monkeypatch):
    _patch_get(monkeypatch, _Response(status_code=503))
    with pytest.raises(DependencyFailure) as exc_info:
        fetch_seed_records("https://feed.example/data.json")
    assert "503" in exc_info.value.details


def test_fetch_wraps_connection_errors(monkeypatch):
    _patch_get(monkeypatch, requests.ConnectionError("connection refused"))
    with pytest.raises(DependencyFailure) as exc_info:
        fetch_seed_records("https://feed.example/data.json")
    assert exc_info.value.error == "Error fetching seed data"


def test_fetch_wraps_invalid_json(monkeypatch):
    _patch_get(monkeypatch, _Response(json_error=ValueError("Expecting value")))
    with pytest.raises(DependencyFailure, match="Invalid JSON"):
        fetch_seed_records("https://feed.example/data.json")


def test_reseed_replaces_records_and_saves_snapshot(monkeypatch, tmp_path, records):
    store = DataStore(snapshot_path=tmp_path / "transactions.json")
    store.insert_many(records[:2])
    _patch_get(monkeypatch, _Response(records))

    assert reseed(store, url="https://feed.example/data.json") == len(records)
    assert store.row_count() == len(records)
    assert store.df["id"].tolist() == list(range(1, len(records) + 1))
    assert (tmp_path / "transactions.json").exists()


@pytest.mark.parametrize("payload", [[], {"not": "a list"}])
def test_failed_reseed_leaves_empty_store_empty(monkeypatch, payload):
    store = DataStore(snapshot_path=None)
    _patch_get(monkeypatch, _Response(payload))

    with pytest.raises(DependencyFailure):
        reseed(store, url="https://feed.example/data.json")
    assert store.row_count() == 0


def test_failed_reseed_keeps_existing_records(monkeypatch, store, records):
    _patch_get(monkeypatch, _Response([]))
    with pytest.raises(DependencyFailure):
        reseed(store, url="https://feed.example/data.json")
    assert store.row_count() == len(records)


def test_reseed_wraps_store_failure(monkeypatch, records):
    class _BrokenStore(DataStore):
        def replace_all(self, records, persist=False):
            raise RuntimeError("disk full")

    _patch_get(monkeypatch, _Response(records))
    with pytest.raises(DependencyFailure) as exc_info:
        reseed(_BrokenStore(snapshot_path=None), url="https://feed.example/data.json")
    assert exc_info.value.error == "Error initializing database"
    assert exc_info.value.details == "disk full"


def test_failed_snapshot_write_keeps_existing_records(monkeypatch, tmp_path, records):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    store = DataStore(snapshot_path=blocker / "transactions.json")
    store.insert_many(records)
    _patch_get(monkeypatch, _Response(records[:2]))

    with pytest.raises(DependencyFailure) as exc_info:
        reseed(store, url="https://feed.example/data.json")

    assert exc_info.value.error == "Error initializing database"
    assert store.row_count() == len(records)
    assert store.df["title"].tolist() == [r["title"] for r in records]


def test_snapshot_writes_leave_no_temp_files(tmp_path, records):
    path = tmp_path / "transactions.json"
    save_snapshot(records[:1], path)
    save_snapshot(records, path)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["transactions.json"]
    assert len(json.loads(path.read_text())) == len(records)


def test_failed_snapshot_write_removes_temp_file(monkeypatch, tmp_path, records):
    path = tmp_path / "transactions.json"

    def _broken_dump(obj, fp):
        fp.write("[")
        raise OSError("disk full")

    monkeypatch.setattr(loader_mod.json, "dump", _broken_dump)
    with pytest.raises(OSError, match="disk full"):
        save_snapshot(records, path)
    assert list(tmp_path.iterdir()) == []
