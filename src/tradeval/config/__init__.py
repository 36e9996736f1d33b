"""Configuration helpers for column recognition and analyzer settings."""

from .columns import (
    CORE_COLUMN_ALIASES,
    DEFAULT_TRACKED_STATS,
    TrackedStat,
    column_key,
    iter_aliases,
)
from .settings import AnalyzerSettings, get_settings

__all__ = [
    "AnalyzerSettings",
    "CORE_COLUMN_ALIASES",
    "DEFAULT_TRACKED_STATS",
    "TrackedStat",
    "column_key",
    "get_settings",
    "iter_aliases",
]
