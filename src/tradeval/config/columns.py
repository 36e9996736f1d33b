"""Column recognition tables for roster uploads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class TrackedStat:
    key: str
    label: str
    aliases: Tuple[str, ...]


DEFAULT_TRACKED_STATS: Tuple[TrackedStat, ...] = (
    TrackedStat(key="goals", label="Goals", aliases=("g", "goals")),
    TrackedStat(key="assists", label="Assists", aliases=("a", "assists")),
    TrackedStat(
        key="pim",
        label="Penalty Minutes",
        aliases=("pim", "penalty minutes", "penalty_minutes"),
    ),
    TrackedStat(
        key="ppp",
        label="Power-Play Points",
        aliases=("ppp", "power play points", "power-play points", "powerplay points"),
    ),
    TrackedStat(
        key="sog",
        label="Shots on Goal",
        aliases=("sog", "shots", "shots on goal", "shots_on_goal"),
    ),
)


CORE_COLUMN_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name": ("player", "name", "player name"),
    "score": ("score", "fpts", "points"),
    "position": ("position", "pos", "positions"),
    "salary": ("salary", "cap hit", "aav"),
    "age": ("age",),
}


def column_key(header: str) -> str:
    """Return the comparison key for a header cell."""

    return header.strip().casefold()


def iter_aliases(tracked_stats: Iterable[TrackedStat]) -> Iterable[Tuple[str, Tuple[str, ...]]]:
    """Yield ``(field, aliases)`` for the core columns then each tracked stat."""

    yield from CORE_COLUMN_ALIASES.items()
    for stat in tracked_stats:
        yield stat.key, stat.aliases

