"""
Terminal formatters for the cost-efficiency dashboard.

All formatters accept already-validated models / plain numbers and return
plain strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``) — the only
"styling" is literal box-drawing and block characters.

Dashboard layout (default 70 columns)::

  ┌────────────────────────────────────────────────────────────────────┐
  │                      BLACKOUT KOSTENEFFIZIENZ                      │
  ├────────────────────────────────────────────────────────────────────┤
  │  Transfer: 1.00 SOL with 1 recipient                               │
  ├────────────────────────────────────────────────────────────────────┤
  │  Transfer efficiency:          92.5%                               │
  │  ██████████████████░░  vs  ███████████████░░░░░                    │
  │  Improvement: +15.0 percentage points                              │
  ├────────────────────────────────────────────────────────────────────┤
  ...

Every box line is padded by ``format_box()`` from the measured content
length, so wide values grow the box instead of pushing the right border
out of line.
"""

from __future__ import annotations

import math
from typing import Sequence

from blackout_efficiency.config import (
    ASCII_BAR_EMPTY,
    ASCII_BAR_FULL,
    DASHBOARD_WIDTH,
    CurrencyConfig,
    DashboardConfig,
)
from blackout_efficiency.models.efficiency import EfficiencyComparison

_LABEL_WIDTH = 30
_BREAKDOWN_LABEL_WIDTH = 12


# ── Primitives ────────────────────────────────────────────────────────────────


def create_progress_bar(
    percent: float,
    length: int = 20,
    full: str = ASCII_BAR_FULL,
    empty: str = ASCII_BAR_EMPTY,
) -> str:
    """Return a bar of exactly ``length`` characters.

    ``floor(length * percent / 100)`` cells are filled.  The filled count is
    clamped to ``[0, length]``; NaN counts as 0.

    Example::

        >>> create_progress_bar(50, 10)
        '█████░░░░░'
    """
    if math.isnan(percent):
        filled = 0
    elif math.isinf(percent):
        filled = length if percent > 0 else 0
    else:
        filled = min(max(math.floor(length * (percent / 100)), 0), length)
    return full * filled + empty * (length - filled)


def format_amount(amount: int | float, currency: CurrencyConfig | None = None) -> str:
    """Format a lamport amount for display.

    Amounts worth at least ``display_threshold`` whole units are shown in
    whole units (3 decimals below ``precise_below``, else 2).  Smaller
    amounts are shown as a comma-grouped lamport count.

    Examples::

        1_000_000_000 -> "1.00 SOL"
           50_000_000 -> "0.050 SOL"
            5_000_000 -> "5,000,000 Lamports"
    """
    currency = currency or CurrencyConfig()
    units = amount / currency.base_units_per_unit

    if units >= currency.display_threshold:
        decimals = 3 if units < currency.precise_below else 2
        return f"{units:.{decimals}f} {currency.symbol}"
    if isinstance(amount, int):
        return f"{amount:,} {currency.base_unit_name}"
    return f"{amount:,.0f} {currency.base_unit_name}"


def format_box(
    title: str,
    sections: Sequence[Sequence[str]],
    width: int = DASHBOARD_WIDTH,
    padding: int = 2,
) -> list[str]:
    """Lay out a titled box with divider-separated sections.

    Args:
        title:    Centered in the header row.
        sections: Rows per section; a ``├─┤`` divider precedes each section.
        width:    Minimum total line width including both borders.
        padding:  Spaces between the left border and each row.

    Returns:
        Box lines, all of identical length.  The inner width is the larger
        of ``width - 2`` and the widest padded row or title.
    """
    indent = " " * padding
    rows = [indent + row for section in sections for row in section]
    inner = max([width - 2, len(title)] + [len(r) for r in rows])

    lines = [f"┌{'─' * inner}┐", f"│{title.center(inner)}│"]
    for section in sections:
        lines.append(f"├{'─' * inner}┤")
        for row in section:
            lines.append(f"│{(indent + row).ljust(inner)}│")
    lines.append(f"└{'─' * inner}┘")
    return lines


# ── Freshness banner ─────────────────────────────────────────────────────────


def format_freshness_banner(
    is_fresh: bool,
    age_hours: float | None,
    source_file: str = "",
) -> str:
    """Return a one-line freshness indicator for a precomputed report.

    Args:
        is_fresh:    True if age <= the configured threshold.
        age_hours:   Hours since the report was generated (None = unknown).
        source_file: Optional report path shown on a second line.
    """
    if age_hours is None:
        tag     = "[AGE UNKNOWN]"
        age_str = "generated_at not available"
    elif is_fresh:
        tag     = "[FRESH]"
        age_str = f"Generated {age_hours:.1f}h ago"
    else:
        tag     = "[STALE]"
        age_str = f"Generated {age_hours:.1f}h ago -- costs may not reflect current fees"

    parts = [f"  {tag} {age_str}"]
    if source_file:
        parts.append(f"  Source: {source_file}")
    return "\n".join(parts)


# ── Efficiency dashboard ──────────────────────────────────────────────────────


def format_efficiency_dashboard(
    comparison: EfficiencyComparison,
    dashboard: DashboardConfig | None = None,
    currency: CurrencyConfig | None = None,
) -> str:
    """Format the optimized-vs-baseline comparison as a boxed report.

    Sections: transfer summary, efficiency with side-by-side bars, total
    cost and savings, cost breakdown.  A tip follows the box; single
    recipient transfers get two extra lines pointing at ``--multi``.

    A zero baseline rent has no meaningful reduction and renders ``(n/a)``.

    Returns:
        Multi-line string starting with a blank line.
    """
    dashboard = dashboard or DashboardConfig()
    currency = currency or CurrencyConfig()
    optimized = comparison.optimized
    baseline = comparison.baseline
    n = comparison.recipient_count

    def bar(percent: float) -> str:
        return create_progress_bar(
            percent, dashboard.bar_length, dashboard.bar_full, dashboard.bar_empty
        )

    def amount(value: int) -> str:
        return format_amount(value, currency)

    transfer = [
        f"Transfer: {amount(comparison.amount)} with {n} recipient{'s' if n > 1 else ''}",
    ]

    efficiency = [
        f"{'Transfer efficiency:':<{_LABEL_WIDTH}}{optimized.efficiency:.1f}%",
        f"{bar(optimized.efficiency)}  vs  {bar(baseline.efficiency)}",
        f"Improvement: {comparison.efficiency_diff:+.1f} percentage points",
    ]

    costs = [
        f"{'Total costs:':<{_LABEL_WIDTH}}{amount(optimized.total_cost)}",
        f"Savings: {amount(optimized.savings_vs_baseline)} "
        f"({optimized.savings_percent:.1f}%)",
    ]

    rent_reduction = comparison.rent_reduction_pct
    rent_str = "(n/a)" if rent_reduction is None else f"({-rent_reduction:+.1f}%)"
    breakdown = optimized.cost_breakdown
    cost_breakdown = [
        "Cost breakdown:",
        f"├─ {'Tx fees:':<{_BREAKDOWN_LABEL_WIDTH}}{amount(breakdown.tx_fee)}",
        f"├─ {'Rent costs:':<{_BREAKDOWN_LABEL_WIDTH}}{amount(breakdown.rent)} {rent_str}",
        f"└─ {'Compute:':<{_BREAKDOWN_LABEL_WIDTH}}{amount(breakdown.compute)}",
    ]

    lines: list[str] = [""]
    lines.extend(
        format_box(
            dashboard.title,
            [transfer, efficiency, costs, cost_breakdown],
            width=dashboard.width,
        )
    )
    lines.append("")
    lines.append(dashboard.tip)
    if n == 1:
        lines.extend(dashboard.single_recipient_tips)

    return "\n".join(lines)
