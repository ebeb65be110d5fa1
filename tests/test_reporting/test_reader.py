"""Tests for blackout_efficiency.reporting.reader."""

from __future__ import annotations

import json
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path

from blackout_efficiency.reporting.reader import (
    check_freshness,
    find_latest_file,
    load_efficiency_report,
)


# ── find_latest_file ──────────────────────────────────────────────────────────


def test_find_latest_file_returns_most_recent(tmp_path: Path) -> None:
    """The most-recently-modified file is returned when multiple files match."""
    older = tmp_path / "efficiency_2026-10-01.json"
    newer = tmp_path / "efficiency_2026-10-10.json"
    older.write_text("{}", encoding="utf-8")
    time.sleep(0.01)
    newer.write_text("{}", encoding="utf-8")

    assert find_latest_file(tmp_path, "efficiency_*.json") == newer


def test_find_latest_file_no_directory(tmp_path: Path) -> None:
    assert find_latest_file(tmp_path / "nonexistent", "*.json") is None


def test_find_latest_file_no_match(tmp_path: Path) -> None:
    (tmp_path / "other_file.txt").write_text("x")
    assert find_latest_file(tmp_path, "*.json") is None


# ── check_freshness ───────────────────────────────────────────────────────────


def test_check_freshness_recent_zulu_timestamp() -> None:
    """A trailing ``Z`` is accepted and a 1 h old report is fresh."""
    ts = (datetime.now(tz=timezone.utc) - timedelta(hours=1)).strftime("%Y-%m-%dT%H:%M:%SZ")
    is_fresh, age = check_freshness(ts, max_hours=24.0)
    assert is_fresh is True
    assert age is not None
    assert 0.5 <= age <= 1.5


def test_check_freshness_stale_date_only() -> None:
    is_fresh, age = check_freshness("2020-01-01", max_hours=24.0)
    assert is_fresh is False
    assert age is not None and age > 24.0


def test_check_freshness_missing() -> None:
    assert check_freshness(None) == (False, None)
    assert check_freshness("") == (False, None)


def test_check_freshness_unparseable() -> None:
    assert check_freshness("yesterday-ish") == (False, None)


# ── load_efficiency_report ────────────────────────────────────────────────────


def test_load_efficiency_report_file(tmp_path: Path) -> None:
    path = tmp_path / "report.json"
    path.write_text(json.dumps({"generated_at": "2026-10-18", "entries": []}))
    assert load_efficiency_report(path) == {"generated_at": "2026-10-18", "entries": []}


def test_load_efficiency_report_directory_picks_latest(tmp_path: Path) -> None:
    (tmp_path / "efficiency_a.json").write_text(json.dumps({"entries": [], "v": 1}))
    time.sleep(0.01)
    (tmp_path / "efficiency_b.json").write_text(json.dumps({"entries": [], "v": 2}))
    report = load_efficiency_report(tmp_path)
    assert report is not None
    assert report["v"] == 2


def test_load_efficiency_report_empty_directory(tmp_path: Path) -> None:
    assert load_efficiency_report(tmp_path) is None


def test_load_efficiency_report_missing(tmp_path: Path) -> None:
    assert load_efficiency_report(tmp_path / "missing.json") is None


def test_load_efficiency_report_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert load_efficiency_report(path) is None


def test_load_efficiency_report_not_an_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")
    assert load_efficiency_report(path) is None
