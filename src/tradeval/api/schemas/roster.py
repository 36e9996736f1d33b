from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class PlayerResponse(BaseModel):
    name: str
    position: str
    score: float
    salary: float
    age: float
    relative_value: float
    stats: Dict[str, float] = Field(default_factory=dict)


class RosterSummaryResponse(BaseModel):
    players: int
    scored_players: int
    skipped_rows: int
    mean: float
    std_dev: float
    columns: List[str]
    tracked_stats: List[str]


class PlayerListResponse(BaseModel):
    players: List[str]
