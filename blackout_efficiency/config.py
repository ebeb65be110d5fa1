"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local overrides (gitignored)
  4. Environment variables        — ``BLACKOUT_*`` prefix

A relative ``data.efficiency_report`` is resolved against the project root,
so the console script works from any directory.

Entry point: ``load_config(config_path=None) -> AppConfig``

The dashboard renderer and CLI commands receive an ``AppConfig`` instance (or
one of its sections) — never raw dicts or env var lookups scattered through
the codebase.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Display constants ─────────────────────────────────────────────────────────

ASCII_BAR_FULL = "█"
ASCII_BAR_EMPTY = "░"
DASHBOARD_WIDTH = 70
MIN_DASHBOARD_WIDTH = 40

LAMPORTS_PER_SOL = 1_000_000_000

# ── Sub-config models ─────────────────────────────────────────────────────────


class DashboardConfig(BaseModel):
    """Layout and presentation strings for the efficiency dashboard."""

    model_config = ConfigDict(frozen=True)

    width: int = DASHBOARD_WIDTH
    bar_length: int = 20
    bar_full: str = ASCII_BAR_FULL
    bar_empty: str = ASCII_BAR_EMPTY
    title: str = "BLACKOUT KOSTENEFFIZIENZ"
    tip: str = "💡 TIP: Use multi-wallet transfers to increase your anonymity."
    single_recipient_tips: tuple[str, ...] = (
        "   The optimized implementation results in only minimal additional costs.",
        "   Use --multi=addr1,addr2,... for multi-wallet transfers.",
    )

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: int) -> int:
        if v < MIN_DASHBOARD_WIDTH:
            raise ValueError(
                f"Dashboard width must be >= {MIN_DASHBOARD_WIDTH}, got {v}."
            )
        return v

    @field_validator("bar_length")
    @classmethod
    def validate_bar_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"bar_length must be >= 1, got {v}.")
        return v

    @field_validator("bar_full", "bar_empty")
    @classmethod
    def validate_bar_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"Bar characters must be exactly one character, got {v!r}.")
        return v


class CurrencyConfig(BaseModel):
    """Currency units used by ``format_amount``.

    Amounts are always carried in the smallest unit (lamports).  Values of
    at least ``display_threshold`` whole units are shown in whole units;
    below ``precise_below`` they get three decimals instead of two.
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = "SOL"
    base_unit_name: str = "Lamports"
    base_units_per_unit: int = LAMPORTS_PER_SOL
    display_threshold: float = 0.01
    precise_below: float = 0.1

    @field_validator("base_units_per_unit")
    @classmethod
    def validate_base_units(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"base_units_per_unit must be positive, got {v}.")
        return v


class DataConfig(BaseModel):
    """Filesystem paths for precomputed efficiency reports."""

    model_config = ConfigDict(frozen=True)

    efficiency_report: str = "config/efficiency/sample_efficiency_report.json"
    max_report_age_hours: float = 24.0


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + env vars.
    """

    model_config = ConfigDict(frozen=True)

    dashboard: DashboardConfig = DashboardConfig()
    currency: CurrencyConfig = CurrencyConfig()
    data: DataConfig = DataConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config PATH."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply BLACKOUT_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Relative report paths are relative to the project root
    data = raw.setdefault("data", {})
    report = Path(data.get("efficiency_report", DataConfig().efficiency_report))
    if not report.is_absolute():
        data["efficiency_report"] = str(root / report)

    # 5. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply BLACKOUT_* env vars to the raw config dict.

    Supported overrides:
      BLACKOUT_EFFICIENCY_REPORT → raw["data"]["efficiency_report"]
      BLACKOUT_LOG_LEVEL         → raw["logging"]["level"]
      BLACKOUT_DEBUG             → raw["debug"]
    """
    if report := os.environ.get("BLACKOUT_EFFICIENCY_REPORT"):
        raw.setdefault("data", {})["efficiency_report"] = report

    if log_level := os.environ.get("BLACKOUT_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("BLACKOUT_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        dashboard=DashboardConfig(**raw.get("dashboard", {})),
        currency=CurrencyConfig(**raw.get("currency", {})),
        data=DataConfig(**raw.get("data", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
