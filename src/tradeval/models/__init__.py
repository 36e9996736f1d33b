"""Shared data models."""

from .player import MAX_MAGNITUDE, PlayerRecord, split_positions

__all__ = ["MAX_MAGNITUDE", "PlayerRecord", "split_positions"]
