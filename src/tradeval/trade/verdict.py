"""Side-by-side verdict for aggregated trade groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from tradeval.config.settings import DEFAULT_TIE_TOLERANCE

from .aggregate import GroupAggregate


Winner = Literal["A", "B", "Even"]


@dataclass(frozen=True)
class TradeVerdict:
    score_impact: float
    relative_gap: float
    winner: Winner
    best_value: Optional[bool] = None

    @property
    def message(self) -> str:
        if self.winner == "A":
            return "Team A wins the trade"
        if self.winner == "B":
            return "Team B wins the trade"
        return "Even trade"


def pick_winner(a_value: float, b_value: float, *, tie_tolerance: float = DEFAULT_TIE_TOLERANCE) -> Winner:
    """Return the side whose TA Score clears the other's by more than the tolerance."""

    if a_value > b_value + tie_tolerance:
        return "A"
    if b_value > a_value + tie_tolerance:
        return "B"
    return "Even"


def compare_groups(
    a: GroupAggregate,
    b: GroupAggregate,
    c: GroupAggregate | None = None,
    *,
    tie_tolerance: float = DEFAULT_TIE_TOLERANCE,
) -> TradeVerdict:
    best_value: Optional[bool] = None
    if c is not None:
        # No tolerance here, unlike the A/B winner.
        best_value = c.total_relative_value > max(a.total_relative_value, b.total_relative_value)
    return TradeVerdict(
        score_impact=a.total_score - b.total_score,
        relative_gap=a.total_relative_value - b.total_relative_value,
        winner=pick_winner(a.total_relative_value, b.total_relative_value, tie_tolerance=tie_tolerance),
        best_value=best_value,
    )


@dataclass(frozen=True)
class TradeEvaluation:
    """Aggregates for each side plus the resulting verdict."""

    team_a: GroupAggregate
    team_b: GroupAggregate
    verdict: TradeVerdict
    team_c: Optional[GroupAggregate] = None

    @property
    def groups(self) -> tuple[GroupAggregate, ...]:
        if self.team_c is None:
            return (self.team_a, self.team_b)
        return (self.team_a, self.team_b, self.team_c)
