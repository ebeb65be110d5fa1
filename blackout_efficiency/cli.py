"""
Blackout efficiency dashboard — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Load the precomputed efficiency report and render.
  5. Report result to stdout.

Install and run::

    pip install -e .
    blackout-efficiency --help
    blackout-efficiency validate-config
    blackout-efficiency show-efficiency --amount 1000000000
    blackout-efficiency show-efficiency --amount 1000000000 --multi=addr1,addr2,addr3
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="blackout-efficiency",
    help="Blackout transfer cost-efficiency dashboard.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from blackout_efficiency.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from blackout_efficiency.utils.logging import configure_logging
    configure_logging(config.logging)


def _parse_multi(multi: str) -> list[str]:
    """Split a ``--multi`` value into non-empty, stripped addresses."""
    return [addr.strip() for addr in multi.split(",") if addr.strip()]


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Efficiency report: {config.data.efficiency_report}")
    typer.echo(f"  Dashboard width:   {config.dashboard.width}")
    typer.echo(f"  Currency:          {config.currency.symbol} / {config.currency.base_unit_name}")
    typer.echo(f"  Log level:         {config.logging.level}")
    typer.echo(f"  Debug mode:        {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str, ensure_ascii=False))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("show-efficiency")
def show_efficiency(
    amount: int = typer.Option(
        ...,
        "--amount",
        "-a",
        help="Transfer amount in lamports (1 SOL = 1,000,000,000).",
    ),
    recipients: int = typer.Option(
        1,
        "--recipients",
        "-n",
        min=1,
        help="Number of recipients. Ignored when --multi is given.",
    ),
    multi: Optional[str] = typer.Option(
        None,
        "--multi",
        help="Comma-separated recipient addresses (addr1,addr2,...).",
    ),
    report_path: Optional[str] = typer.Option(
        None,
        "--report",
        help=(
            "Efficiency report JSON, or a directory holding efficiency_*.json. "
            "Defaults to config.data.efficiency_report."
        ),
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Show the optimized vs baseline cost-efficiency dashboard for a transfer.

    \b
    Figures are read from a precomputed efficiency report; this command
    never computes costs itself.  The (amount, recipients) pair must be
    present in the report.
    """
    from pydantic import ValidationError

    from blackout_efficiency.efficiency.source import (
        EfficiencyLookupError,
        ReportEfficiencySource,
    )
    from blackout_efficiency.reporting.dashboard import display_efficiency_dashboard
    from blackout_efficiency.reporting.formatters import format_freshness_banner
    from blackout_efficiency.reporting.reader import check_freshness

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    if multi is not None:
        addresses = _parse_multi(multi)
        if not addresses:
            typer.echo("[ERROR] --multi must list at least one address.", err=True)
            raise typer.Exit(code=1)
        recipients = len(addresses)

    source_path = Path(report_path) if report_path else Path(config.data.efficiency_report)

    try:
        source = ReportEfficiencySource.from_file(source_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid efficiency report {source_path}: {exc}", err=True)
        raise typer.Exit(code=1)

    try:
        source.get_comparison(amount, recipients)
    except EfficiencyLookupError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        pairs = ", ".join(f"{a}/{n}" for a, n in source.available_pairs())
        typer.echo(f"  Available amount/recipients: {pairs or '(none)'}", err=True)
        raise typer.Exit(code=1)

    is_fresh, age_hours = check_freshness(
        source.generated_at, max_hours=config.data.max_report_age_hours
    )
    typer.echo(format_freshness_banner(is_fresh, age_hours, str(source_path)))
    display_efficiency_dashboard(amount, recipients, calculator=source, config=config)


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
