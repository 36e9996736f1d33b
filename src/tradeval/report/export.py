"""Plain-text trade report export."""

from __future__ import annotations

from typing import Mapping, Sequence

from tradeval.config import DEFAULT_TRACKED_STATS, TrackedStat
from tradeval.trade import GroupAggregate, TradeEvaluation


def format_salary(value: float) -> str:
    return f"${value:,.0f}"


def format_positions(position_counts: Mapping[str, int]) -> str:
    if not position_counts:
        return "-"
    return ", ".join(f"{tag}: {count}" for tag, count in position_counts.items())


def _heading(text: str, underline: str = "-") -> list[str]:
    return [text, underline * len(text)]


def _group_lines(group: GroupAggregate, tracked_stats: Sequence[TrackedStat]) -> list[str]:
    noun = "player" if group.count == 1 else "players"
    lines = _heading(f"Team {group.label} ({group.count} {noun})")
    lines.append(f"Players: {', '.join(group.player_names) or '-'}")
    lines.append(f"Total Score: {group.total_score:.2f}")
    lines.append(f"TA Score: {group.total_relative_value:.2f}")
    lines.append(f"Total Salary: {format_salary(group.total_salary)}")
    lines.append(f"Average Age: {group.average_age_display}")
    lines.append(f"Positions: {format_positions(group.position_counts)}")
    for stat in tracked_stats:
        lines.append(f"{stat.label}: {group.stat_totals.get(stat.key, 0.0):g}")
    return lines


def render_trade_report(
    evaluation: TradeEvaluation,
    *,
    tracked_stats: Sequence[TrackedStat] = DEFAULT_TRACKED_STATS,
) -> str:
    """Render the same figures the UI shows as a plain-text report."""

    lines = _heading("Trade Analysis Report", "=")
    for group in evaluation.groups:
        lines.append("")
        lines.extend(_group_lines(group, tracked_stats))

    verdict = evaluation.verdict
    lines.append("")
    lines.extend(_heading("Verdict"))
    lines.append(verdict.message)
    lines.append(f"Net Score Impact (A - B): {verdict.score_impact:+.2f}")
    lines.append(f"TA Score Gap (A - B): {verdict.relative_gap:+.2f}")
    if verdict.best_value is not None:
        lines.append("Team C: best value" if verdict.best_value else "Team C: not the best value")

    return "\n".join(lines) + "\n"


__all__ = [
    "format_positions",
    "format_salary",
    "render_trade_report",
]
