"""Name lookup for resolving free-text selections against a roster."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from tradeval.models import PlayerRecord


logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    return name.strip().casefold()


class LookupIndex:
    """Immutable normalized-name index built once per roster."""

    __slots__ = ("_by_key",)

    def __init__(self, by_key: Mapping[str, PlayerRecord]):
        self._by_key: Mapping[str, PlayerRecord] = MappingProxyType(dict(by_key))

    @classmethod
    def build(cls, players: Iterable[PlayerRecord]) -> "LookupIndex":
        by_key: dict[str, PlayerRecord] = {}
        for player in players:
            key = normalize_name(player.name)
            if not key:
                continue
            if key in by_key:
                logger.warning("Duplicate player name %r; keeping the later row", player.name)
            by_key[key] = player
        return cls(by_key)

    def get(self, name: str) -> Optional[PlayerRecord]:
        """Exact match on the normalized key; no fuzzy matching."""

        return self._by_key.get(normalize_name(name))

    def names(self) -> List[str]:
        return [player.name for player in self._by_key.values()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._by_key

    def __len__(self) -> int:
        return len(self._by_key)
