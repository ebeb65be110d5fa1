"""
Reporting data reader: discovers and loads precomputed efficiency reports.

All loaders return ``None`` rather than raising when no file is found,
so CLI commands can emit a friendly "no data yet" message without try/except
at the call site.

File-discovery convention:
  The cost model writes files named ``efficiency_{date}.json``.
  ``find_latest_file()`` picks the most-recently-modified match, so stale
  files from previous runs are never silently preferred over the latest one.

Freshness conventions:
  ``check_freshness()`` compares ``generated_at`` (ISO string in the report)
  against the current UTC wall clock.  Reports older than *max_hours* are
  flagged as stale so the caller can warn the user.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)


# ── File discovery ─────────────────────────────────────────────────────────────

def find_latest_file(directory: Path, glob_pattern: str) -> Path | None:
    """Return the most recently *modified* file matching ``glob_pattern``.

    Args:
        directory:    Directory to search (returns None if it does not exist).
        glob_pattern: Glob pattern relative to ``directory`` (e.g.
                      ``"efficiency_*.json"``).

    Returns:
        Path of the most recently modified matching file, or None.
    """
    if not directory.exists():
        return None
    matches = list(directory.glob(glob_pattern))
    if not matches:
        return None
    return max(matches, key=lambda p: p.stat().st_mtime)


# ── Freshness ─────────────────────────────────────────────────────────────────

def check_freshness(
    generated_at: str | None,
    max_hours: float = 24.0,
) -> tuple[bool, float | None]:
    """Check whether a report timestamp is within the freshness window.

    Handles both date-only (``"2026-10-18"``) and full ISO datetime strings,
    including a trailing ``Z``.  Date-only strings are treated as midnight UTC.

    Returns:
        ``(is_fresh, age_hours)`` — ``age_hours`` is None when the string
        cannot be parsed.
    """
    if not generated_at:
        return False, None
    try:
        ts = generated_at.replace("Z", "+00:00")
        if "T" in ts or " " in ts:
            dt = datetime.fromisoformat(ts)
        else:
            dt = datetime.fromisoformat(ts + "T00:00:00")
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        now = datetime.now(tz=timezone.utc)
        age_hours = (now - dt).total_seconds() / 3600.0
        return age_hours <= max_hours, age_hours
    except (ValueError, OverflowError):
        return False, None


# ── Loaders ───────────────────────────────────────────────────────────────────

def load_efficiency_report(path: Path) -> dict | None:
    """Load an efficiency report JSON.

    ``path`` may be a file or a directory; for a directory the latest
    ``efficiency_*.json`` inside it is used.

    Returns:
        Parsed JSON dict, or None if no file is found / parse fails.
    """
    if path.is_dir():
        latest = find_latest_file(path, "efficiency_*.json")
        if latest is None:
            logger.debug("No efficiency report found in %s", path)
            return None
        path = latest

    if not path.exists():
        logger.debug("Efficiency report %s does not exist", path)
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to load efficiency report %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Efficiency report %s is not a JSON object", path)
        return None
    return data
