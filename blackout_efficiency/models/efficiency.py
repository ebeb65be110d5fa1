"""
Transfer cost-efficiency models.

``EfficiencyResult`` is one cost estimate for a transfer — either the
optimized path or the baseline it is compared against.  All cost fields are
integers in the smallest currency unit (lamports).

``EfficiencyComparison`` pairs an optimized and a baseline result for a
single ``(amount, recipient_count)`` transfer and derives the figures the
dashboard shows next to them.

All models are frozen — results are precomputed elsewhere and only read here.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class CostBreakdown(BaseModel):
    """Per-component costs in lamports.

    Attributes:
        tx_fee: Transaction fees.
        rent: Rent-exemption deposits for created accounts.
        compute: Compute-unit costs.
    """

    model_config = ConfigDict(frozen=True)

    tx_fee: int
    rent: int
    compute: int


class EfficiencyResult(BaseModel):
    """Cost estimate for one transfer strategy.

    Attributes:
        efficiency: Transfer efficiency score, a percentage expected in 0–100.
            Not clamped; out-of-range values render as given.
        total_cost: Total cost in lamports.
        savings_vs_baseline: Absolute savings against the baseline, lamports.
        savings_percent: Savings as a percentage of the baseline cost.
        cost_breakdown: Component costs.
    """

    model_config = ConfigDict(frozen=True)

    efficiency: float
    total_cost: int
    savings_vs_baseline: int = 0
    savings_percent: float = 0.0
    cost_breakdown: CostBreakdown


class EfficiencyComparison(BaseModel):
    """Optimized vs baseline estimate for one transfer."""

    model_config = ConfigDict(frozen=True)

    amount: int
    recipient_count: int = 1
    optimized: EfficiencyResult
    baseline: EfficiencyResult

    @field_validator("recipient_count")
    @classmethod
    def validate_recipient_count(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"recipient_count must be >= 1, got {v}.")
        return v

    @property
    def efficiency_diff(self) -> float:
        """Efficiency improvement in percentage points (may be negative)."""
        return self.optimized.efficiency - self.baseline.efficiency

    @property
    def rent_reduction_pct(self) -> Optional[float]:
        """Rent reduction vs the baseline in percent, or None if baseline rent is 0."""
        baseline_rent = self.baseline.cost_breakdown.rent
        if baseline_rent == 0:
            return None
        optimized_rent = self.optimized.cost_breakdown.rent
        return (baseline_rent - optimized_rent) / baseline_rent * 100
