"""
Efficiency dashboard entry points.

``render_efficiency_dashboard()`` asks an ``EfficiencyCalculator`` for the
optimized and baseline results of a transfer and formats them;
``display_efficiency_dashboard()`` writes the same text to stdout.
"""

from __future__ import annotations

import logging
import sys

from blackout_efficiency.config import AppConfig
from blackout_efficiency.efficiency.source import EfficiencyCalculator
from blackout_efficiency.models.efficiency import EfficiencyComparison
from blackout_efficiency.reporting.formatters import format_efficiency_dashboard

logger = logging.getLogger(__name__)


def render_efficiency_dashboard(
    amount: int,
    recipient_count: int = 1,
    *,
    calculator: EfficiencyCalculator,
    config: AppConfig | None = None,
) -> str:
    """Render the cost-efficiency dashboard for one transfer.

    Args:
        amount:          Transfer amount in lamports.
        recipient_count: Number of recipients (>= 1).
        calculator:      Source of optimized and baseline results.
        config:          Display settings; defaults to ``AppConfig()``.

    Returns:
        Multi-line dashboard text.

    Raises:
        Whatever ``calculator`` raises (e.g. ``EfficiencyLookupError``).
    """
    config = config or AppConfig()
    optimized = calculator.calculate_efficiency(amount, recipient_count)
    baseline = calculator.calculate_baseline_efficiency(amount, recipient_count)

    comparison = EfficiencyComparison(
        amount=amount,
        recipient_count=recipient_count,
        optimized=optimized,
        baseline=baseline,
    )
    logger.debug(
        "Rendering efficiency dashboard amount=%d recipients=%d "
        "efficiency=%.1f baseline=%.1f",
        amount,
        recipient_count,
        optimized.efficiency,
        baseline.efficiency,
    )
    if comparison.rent_reduction_pct is None:
        logger.warning(
            "Baseline rent is 0 for amount=%d recipients=%d; rent reduction shown as n/a",
            amount,
            recipient_count,
        )

    return format_efficiency_dashboard(comparison, config.dashboard, config.currency)


def display_efficiency_dashboard(
    amount: int,
    recipient_count: int = 1,
    *,
    calculator: EfficiencyCalculator,
    config: AppConfig | None = None,
) -> None:
    """Render the dashboard and write it to stdout."""
    text = render_efficiency_dashboard(
        amount, recipient_count, calculator=calculator, config=config
    )
    sys.stdout.write(text + "\n")
