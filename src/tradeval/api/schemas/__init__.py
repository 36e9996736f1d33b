"""Pydantic models for API I/O."""

from .roster import PlayerListResponse, PlayerResponse, RosterSummaryResponse
from .trade import GroupAggregateResponse, TradeRequest, TradeResponse, VerdictResponse

__all__ = [
    "GroupAggregateResponse",
    "PlayerListResponse",
    "PlayerResponse",
    "RosterSummaryResponse",
    "TradeRequest",
    "TradeResponse",
    "VerdictResponse",
]
