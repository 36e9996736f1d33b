"""Session-scoped state: the active roster and the trade selections."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from tradeval.config import AnalyzerSettings, get_settings
from tradeval.errors import NoRosterError
from tradeval.ingest import Roster, check_upload, decode_upload, load_roster, load_roster_file
from tradeval.report import render_trade_report
from tradeval.trade import AggregateCache, GroupAggregate, TradeEvaluation, compare_groups


logger = logging.getLogger(__name__)

GROUP_LABELS = ("A", "B", "C")


class TradeSession:
    """Holds one roster and the A/B/C selections evaluated against it.

    The roster is only ever replaced wholesale. A failed load raises before any
    state changes, so the previous roster stays active. Selections survive a
    roster swap and simply re-resolve against the new players.
    """

    def __init__(self, settings: AnalyzerSettings | None = None):
        self.settings = settings or get_settings()
        self._roster: Optional[Roster] = None
        self._cache: Optional[AggregateCache] = None
        self._selections: Dict[str, List[str]] = {label: [] for label in GROUP_LABELS}

    @property
    def roster(self) -> Optional[Roster]:
        return self._roster

    def _replace_roster(self, roster: Optional[Roster]) -> None:
        self._roster = roster
        self._cache = (
            AggregateCache(roster.index, tracked_stats=self.settings.tracked_keys)
            if roster is not None
            else None
        )

    def load_csv(self, text: str, *, mapping: Mapping[str, str] | None = None) -> Roster:
        roster = load_roster(text, mapping=mapping, settings=self.settings)
        self._replace_roster(roster)
        return roster

    def load_upload(
        self,
        filename: str | None,
        contents: bytes,
        *,
        mapping: Mapping[str, str] | None = None,
    ) -> Roster:
        check_upload(filename, len(contents), self.settings)
        return self.load_csv(decode_upload(contents), mapping=mapping)

    def load_file(self, path: Path, *, mapping: Mapping[str, str] | None = None) -> Roster:
        roster = load_roster_file(path, mapping=mapping, settings=self.settings)
        self._replace_roster(roster)
        return roster

    def reset(self) -> None:
        self._replace_roster(None)
        for label in GROUP_LABELS:
            self._selections[label] = []
        logger.info("Session reset")

    def player_names(self, query: str | None = None) -> List[str]:
        if self._roster is None:
            return []
        names = self._roster.index.names()
        if query and query.strip():
            needle = query.strip().casefold()
            names = [name for name in names if needle in name.casefold()]
        return names

    def _check_label(self, label: str) -> str:
        key = label.upper()
        if key not in self._selections:
            raise ValueError(f"Unknown trade group {label!r}; expected one of {', '.join(GROUP_LABELS)}")
        return key

    def set_selection(self, label: str, names: Sequence[str]) -> None:
        self._selections[self._check_label(label)] = list(names)

    def selection(self, label: str) -> List[str]:
        return list(self._selections[self._check_label(label)])

    def has_selection(self, label: str) -> bool:
        return any(name.strip() for name in self._selections[self._check_label(label)])

    def aggregate(self, label: str) -> GroupAggregate:
        key = self._check_label(label)
        if self._cache is None:
            raise NoRosterError("Load a roster before evaluating a trade")
        return self._cache.get(self._selections[key], label=key)

    def evaluate(self) -> TradeEvaluation:
        team_a = self.aggregate("A")
        team_b = self.aggregate("B")
        team_c = self.aggregate("C") if self.has_selection("C") else None
        verdict = compare_groups(team_a, team_b, team_c, tie_tolerance=self.settings.tie_tolerance)
        return TradeEvaluation(team_a=team_a, team_b=team_b, team_c=team_c, verdict=verdict)

    def report(self) -> str:
        return render_trade_report(self.evaluate(), tracked_stats=self.settings.tracked_stats)
