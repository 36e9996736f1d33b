"""Group totals for one side of a trade."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from tradeval.config import DEFAULT_TRACKED_STATS
from tradeval.models import PlayerRecord, split_positions

from .index import LookupIndex


@dataclass(frozen=True)
class GroupAggregate:
    """Totals and position tally for the resolved members of a selection."""

    label: str
    total_score: float
    total_salary: float
    total_age: float
    average_age: float
    total_relative_value: float
    count: int
    stat_totals: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    position_counts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    players: Tuple[PlayerRecord, ...] = ()

    @property
    def average_age_display(self) -> str:
        return f"{self.average_age:.1f}"

    @property
    def player_names(self) -> List[str]:
        return [player.name for player in self.players]


def resolve_selection(selection: Sequence[str], index: LookupIndex) -> List[PlayerRecord]:
    """Resolve names in selection order, skipping blanks and misses."""

    resolved: List[PlayerRecord] = []
    for entry in selection:
        if not entry or not entry.strip():
            continue
        player = index.get(entry)
        if player is not None:
            resolved.append(player)
    return resolved


def aggregate_group(
    selection: Sequence[str],
    index: LookupIndex,
    *,
    label: str = "",
    tracked_stats: Sequence[str] | None = None,
) -> GroupAggregate:
    """Sum the selection's resolved players into a :class:`GroupAggregate`.

    Blank entries and names missing from ``index`` contribute nothing. Totals
    use ``math.fsum`` so they do not depend on the order of the selection.
    A player listed under several positions counts once toward each tag.
    """

    if tracked_stats is None:
        tracked_stats = [stat.key for stat in DEFAULT_TRACKED_STATS]
    players = resolve_selection(selection, index)

    position_counts: Dict[str, int] = {}
    for player in players:
        for tag in split_positions(player.position):
            position_counts[tag] = position_counts.get(tag, 0) + 1

    count = len(players)
    total_age = math.fsum(player.age for player in players)
    return GroupAggregate(
        label=label,
        total_score=math.fsum(player.score for player in players),
        total_salary=math.fsum(player.salary for player in players),
        total_age=total_age,
        average_age=total_age / count if count else 0.0,
        total_relative_value=math.fsum(player.relative_value for player in players),
        count=count,
        stat_totals=MappingProxyType(
            {key: math.fsum(player.stat(key) for player in players) for key in tracked_stats}
        ),
        position_counts=MappingProxyType(position_counts),
        players=tuple(players),
    )


class AggregateCache:
    """Memoizes the latest aggregate per label for one index.

    One entry is kept per label; a new selection for a label replaces it.
    """

    def __init__(self, index: LookupIndex, *, tracked_stats: Sequence[str] | None = None):
        self.index = index
        self.tracked_stats = tuple(tracked_stats) if tracked_stats is not None else None
        self._entries: Dict[str, Tuple[Tuple[str, ...], GroupAggregate]] = {}

    def get(self, selection: Sequence[str], *, label: str = "") -> GroupAggregate:
        key = tuple(selection)
        entry = self._entries.get(label)
        if entry is not None and entry[0] == key:
            return entry[1]
        aggregate = aggregate_group(
            key,
            self.index,
            label=label,
            tracked_stats=self.tracked_stats,
        )
        self._entries[label] = (key, aggregate)
        return aggregate

    def __len__(self) -> int:
        return len(self._entries)
