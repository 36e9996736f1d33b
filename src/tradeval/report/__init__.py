"""Report formatting for evaluated trades."""

from .export import format_positions, format_salary, render_trade_report

__all__ = ["format_positions", "format_salary", "render_trade_report"]
