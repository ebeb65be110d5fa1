"""Tests for CostBreakdown, EfficiencyResult and EfficiencyComparison."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from blackout_efficiency.models.efficiency import (
    CostBreakdown,
    EfficiencyComparison,
    EfficiencyResult,
)


class TestEfficiencyResult:
    def test_valid_construction(self, sample_optimized):
        r = sample_optimized
        assert r.efficiency == 92.5
        assert r.total_cost == 520_000
        assert r.cost_breakdown.rent == 509_820

    def test_savings_default_to_zero(self, sample_baseline):
        assert sample_baseline.savings_vs_baseline == 0
        assert sample_baseline.savings_percent == 0.0

    def test_frozen(self, sample_optimized):
        with pytest.raises(ValidationError):
            sample_optimized.efficiency = 50.0

    def test_missing_breakdown_raises(self):
        with pytest.raises(ValidationError, match="cost_breakdown"):
            EfficiencyResult(efficiency=90.0, total_cost=1)

    def test_fractional_cost_raises(self):
        with pytest.raises(ValidationError):
            CostBreakdown(tx_fee=1.5, rent=0, compute=0)


class TestEfficiencyComparison:
    def test_efficiency_diff(self, sample_comparison):
        assert sample_comparison.efficiency_diff == pytest.approx(15.0)

    def test_rent_reduction(self, sample_comparison):
        assert sample_comparison.rent_reduction_pct == pytest.approx(75.0)

    def test_rent_reduction_zero_baseline_is_none(self, sample_optimized, sample_baseline):
        baseline = sample_baseline.model_copy(
            update={"cost_breakdown": CostBreakdown(tx_fee=0, rent=0, compute=0)}
        )
        comparison = EfficiencyComparison(
            amount=1, optimized=sample_optimized, baseline=baseline
        )
        assert comparison.rent_reduction_pct is None

    def test_rent_increase_is_negative(self, sample_optimized, sample_baseline):
        comparison = EfficiencyComparison(
            amount=1, optimized=sample_baseline, baseline=sample_optimized
        )
        assert comparison.rent_reduction_pct < 0

    def test_recipient_count_defaults_to_one(self, sample_optimized, sample_baseline):
        comparison = EfficiencyComparison(
            amount=1, optimized=sample_optimized, baseline=sample_baseline
        )
        assert comparison.recipient_count == 1

    def test_zero_recipients_raises(self, sample_optimized, sample_baseline):
        with pytest.raises(ValidationError, match="recipient_count"):
            EfficiencyComparison(
                amount=1,
                recipient_count=0,
                optimized=sample_optimized,
                baseline=sample_baseline,
            )

    def test_validates_from_dict(self):
        raw = {
            "amount": 1_000_000_000,
            "recipient_count": 2,
            "optimized": {
                "efficiency": 80,
                "total_cost": 10,
                "cost_breakdown": {"tx_fee": 5, "rent": 3, "compute": 2},
            },
            "baseline": {
                "efficiency": 60,
                "total_cost": 20,
                "cost_breakdown": {"tx_fee": 10, "rent": 6, "compute": 4},
            },
        }
        comparison = EfficiencyComparison.model_validate(raw)
        assert comparison.efficiency_diff == pytest.approx(20.0)
        assert comparison.rent_reduction_pct == pytest.approx(50.0)
