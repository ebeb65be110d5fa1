"""
Efficiency calculators consumed by the dashboard.

The dashboard never computes cost figures itself.  It talks to anything
implementing ``EfficiencyCalculator``::

    calculate_efficiency(amount, recipient_count)          -> EfficiencyResult
    calculate_baseline_efficiency(amount, recipient_count) -> EfficiencyResult

``ReportEfficiencySource`` is the file-backed implementation: it serves
results precomputed by the cost model and persisted as a JSON report::

    {
      "generated_at": "2026-10-18T09:00:00Z",
      "entries": [
        {"amount": 1000000000, "recipient_count": 1,
         "optimized": {...EfficiencyResult...},
         "baseline":  {...EfficiencyResult...}}
      ]
    }

Lookups are exact on ``(amount, recipient_count)``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol

from blackout_efficiency.models.efficiency import EfficiencyComparison, EfficiencyResult
from blackout_efficiency.reporting.reader import load_efficiency_report

logger = logging.getLogger(__name__)


class EfficiencyLookupError(LookupError):
    """Raised when no precomputed result exists for a transfer."""

    def __init__(self, amount: int, recipient_count: int) -> None:
        super().__init__(
            f"No efficiency result for amount={amount} "
            f"recipient_count={recipient_count}."
        )
        self.amount = amount
        self.recipient_count = recipient_count


class EfficiencyCalculator(Protocol):
    """Source of optimized and baseline efficiency results."""

    def calculate_efficiency(
        self, amount: int, recipient_count: int
    ) -> EfficiencyResult: ...

    def calculate_baseline_efficiency(
        self, amount: int, recipient_count: int
    ) -> EfficiencyResult: ...


class ReportEfficiencySource:
    """``EfficiencyCalculator`` backed by a precomputed efficiency report.

    Args:
        comparisons:  Validated report entries.  When two entries share the
                      same ``(amount, recipient_count)`` the later one wins.
        generated_at: ISO timestamp of the report, if known.
    """

    def __init__(
        self,
        comparisons: Iterable[EfficiencyComparison],
        generated_at: Optional[str] = None,
    ) -> None:
        self.generated_at = generated_at
        self._entries: dict[tuple[int, int], EfficiencyComparison] = {}
        for comparison in comparisons:
            key = (comparison.amount, comparison.recipient_count)
            if key in self._entries:
                logger.warning(
                    "Duplicate efficiency entry amount=%d recipient_count=%d; "
                    "keeping the later one.",
                    *key,
                )
            self._entries[key] = comparison

    @classmethod
    def from_file(cls, path: Path) -> "ReportEfficiencySource":
        """Load and validate a report file.

        Raises:
            FileNotFoundError: If the report is missing or cannot be parsed.
            pydantic.ValidationError: If an entry is malformed.
        """
        report = load_efficiency_report(Path(path))
        if report is None:
            raise FileNotFoundError(f"Efficiency report not found or unreadable: {path}")

        entries = report.get("entries", [])
        comparisons = [EfficiencyComparison.model_validate(e) for e in entries]
        logger.info("Loaded %d efficiency entries from %s", len(comparisons), path)
        return cls(comparisons, generated_at=report.get("generated_at"))

    def available_pairs(self) -> list[tuple[int, int]]:
        """Return the loaded ``(amount, recipient_count)`` keys, sorted."""
        return sorted(self._entries)

    def get_comparison(self, amount: int, recipient_count: int) -> EfficiencyComparison:
        """Return the full comparison for a transfer.

        Raises:
            EfficiencyLookupError: If the pair is not in the report.
        """
        try:
            return self._entries[(amount, recipient_count)]
        except KeyError:
            raise EfficiencyLookupError(amount, recipient_count) from None

    def calculate_efficiency(self, amount: int, recipient_count: int) -> EfficiencyResult:
        return self.get_comparison(amount, recipient_count).optimized

    def calculate_baseline_efficiency(
        self, amount: int, recipient_count: int
    ) -> EfficiencyResult:
        return self.get_comparison(amount, recipient_count).baseline
