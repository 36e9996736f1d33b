"""Runtime settings for the analyzer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple

from .columns import DEFAULT_TRACKED_STATS, TrackedStat


logger = logging.getLogger(__name__)

DEFAULT_TIE_TOLERANCE = 0.1
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class AnalyzerSettings:
    tie_tolerance: float = DEFAULT_TIE_TOLERANCE
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    allowed_extensions: Tuple[str, ...] = (".csv", ".tsv", ".txt")
    unknown_position: str = "Unknown"
    tracked_stats: Tuple[TrackedStat, ...] = DEFAULT_TRACKED_STATS

    @property
    def tracked_keys(self) -> Tuple[str, ...]:
        return tuple(stat.key for stat in self.tracked_stats)


def _env_number(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", name, raw)
        return default


def get_settings() -> AnalyzerSettings:
    """Build settings from defaults plus ``TRADEVAL_*`` environment overrides."""

    return AnalyzerSettings(
        tie_tolerance=_env_number("TRADEVAL_TIE_TOLERANCE", float, DEFAULT_TIE_TOLERANCE),
        max_upload_bytes=_env_number("TRADEVAL_MAX_UPLOAD_BYTES", int, DEFAULT_MAX_UPLOAD_BYTES),
    )
