"""Canonical player models shared across ingestion and trade layers."""

from __future__ import annotations

from typing import Annotated, Dict, List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


# Numeric cells beyond this magnitude are treated as non-numeric.
MAX_MAGNITUDE = 1e15


BoundedFloat = Annotated[float, Field(allow_inf_nan=False, ge=-MAX_MAGNITUDE, le=MAX_MAGNITUDE)]


def split_positions(position: str) -> List[str]:
    """Split a comma-delimited position string into trimmed, non-empty tags."""

    return [tag.strip() for tag in position.split(",") if tag.strip()]


class PlayerRecord(BaseModel):
    """Normalized roster member with its derived TA Score."""

    name: str = Field(..., min_length=1)
    position: str = "Unknown"
    score: BoundedFloat = 0.0
    has_score: bool = False
    salary: BoundedFloat = 0.0
    age: BoundedFloat = 0.0
    stats: Dict[str, BoundedFloat] = Field(default_factory=dict)
    extras: Dict[str, str] = Field(default_factory=dict)
    relative_value: float = Field(default=0.0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)

    @property
    def positions(self) -> List[str]:
        return split_positions(self.position)

    def stat(self, key: str) -> float:
        return self.stats.get(key, 0.0)
