"""
blackout_efficiency.reporting — Efficiency report reading and terminal display.

This package reads already-persisted efficiency reports (JSON) and formats
them for CLI display.  It does NOT compute cost figures.

Modules:
  reader     — Report discovery, loading helpers, freshness checks.
  formatters — Progress bars, amount formatting, box layout, dashboard text.
  dashboard  — ``render_efficiency_dashboard`` / ``display_efficiency_dashboard``.
"""
