"""
Shared pytest fixtures for the Blackout efficiency dashboard test suite.

Provides:
  - Sample ``EfficiencyResult`` / ``EfficiencyComparison`` factories.
  - ``StaticCalculator``: an in-memory ``EfficiencyCalculator`` that records
    the calls it receives.
  - ``report_file``: the sample comparison written as a report JSON in
    ``tmp_path``.
  - Paths to the committed default config and sample report.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from blackout_efficiency.models.efficiency import (
    CostBreakdown,
    EfficiencyComparison,
    EfficiencyResult,
)

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_CONFIG = PROJECT_ROOT / "config" / "default.toml"
SAMPLE_REPORT = PROJECT_ROOT / "config" / "efficiency" / "sample_efficiency_report.json"


class StaticCalculator:
    """Returns fixed results regardless of input and remembers each call."""

    def __init__(self, optimized: EfficiencyResult, baseline: EfficiencyResult) -> None:
        self.optimized = optimized
        self.baseline = baseline
        self.calls: list[tuple[str, int, int]] = []

    def calculate_efficiency(self, amount: int, recipient_count: int) -> EfficiencyResult:
        self.calls.append(("optimized", amount, recipient_count))
        return self.optimized

    def calculate_baseline_efficiency(
        self, amount: int, recipient_count: int
    ) -> EfficiencyResult:
        self.calls.append(("baseline", amount, recipient_count))
        return self.baseline


# ── Sample domain object factories ────────────────────────────────────────────

@pytest.fixture
def sample_optimized() -> EfficiencyResult:
    """Optimized single-recipient result (rent 509,820 lamports)."""
    return EfficiencyResult(
        efficiency=92.5,
        total_cost=520_000,
        savings_vs_baseline=1_574_280,
        savings_percent=75.2,
        cost_breakdown=CostBreakdown(tx_fee=5_000, rent=509_820, compute=5_180),
    )


@pytest.fixture
def sample_baseline() -> EfficiencyResult:
    """Baseline single-recipient result (rent 2,039,280 lamports)."""
    return EfficiencyResult(
        efficiency=77.5,
        total_cost=2_094_280,
        cost_breakdown=CostBreakdown(tx_fee=50_000, rent=2_039_280, compute=5_000),
    )


@pytest.fixture
def sample_comparison(
    sample_optimized: EfficiencyResult, sample_baseline: EfficiencyResult
) -> EfficiencyComparison:
    """1 SOL to a single recipient."""
    return EfficiencyComparison(
        amount=1_000_000_000,
        recipient_count=1,
        optimized=sample_optimized,
        baseline=sample_baseline,
    )


@pytest.fixture
def static_calculator(
    sample_optimized: EfficiencyResult, sample_baseline: EfficiencyResult
) -> StaticCalculator:
    return StaticCalculator(sample_optimized, sample_baseline)


@pytest.fixture
def report_file(tmp_path: Path, sample_comparison: EfficiencyComparison) -> Path:
    """Report JSON containing the sample comparison for 1 and 3 recipients."""
    multi = sample_comparison.model_copy(update={"recipient_count": 3})
    payload = {
        "generated_at": "2026-10-18T09:00:00Z",
        "entries": [sample_comparison.model_dump(), multi.model_dump()],
    }
    path = tmp_path / "efficiency_2026-10-18.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def default_config_path() -> Path:
    """The committed ``config/default.toml``."""
    return DEFAULT_CONFIG


@pytest.fixture
def sample_report_path() -> Path:
    """The committed sample efficiency report."""
    return SAMPLE_REPORT
