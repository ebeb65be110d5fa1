"""Blackout transfer cost-efficiency dashboard."""

__version__ = "0.1.0"
