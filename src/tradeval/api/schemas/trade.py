from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, Field

from .roster import PlayerResponse


class TradeRequest(BaseModel):
    team_a: List[str] = Field(default_factory=list)
    team_b: List[str] = Field(default_factory=list)
    team_c: List[str] | None = None


class GroupAggregateResponse(BaseModel):
    label: str
    count: int
    players: List[PlayerResponse]
    total_score: float
    total_salary: float
    total_age: float
    average_age: float
    total_relative_value: float
    stat_totals: Dict[str, float]
    position_counts: Dict[str, int]


class VerdictResponse(BaseModel):
    winner: Literal["A", "B", "Even"]
    message: str
    score_impact: float
    relative_gap: float
    best_value: bool | None = None


class TradeResponse(BaseModel):
    teams: List[GroupAggregateResponse]
    verdict: VerdictResponse
