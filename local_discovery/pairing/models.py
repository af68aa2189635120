from __future__ import annotations

from pydantic import BaseModel, Field

from ..candidates.models import BusinessCandidate


class PairingSuggestion(BaseModel):
    source_id: str
    target_id: str
    target_name: str
    distance_miles: float = Field(ge=0)
    walk_minutes: int = Field(ge=0)
    pairing_score: float
    reason: str


class Route(BaseModel):
    stops: list[BusinessCandidate] = Field(min_length=2, max_length=3)
    total_distance_miles: float = Field(ge=0)
    total_walk_minutes: int = Field(ge=0)
    score: float
    description: str

    @property
    def stop_ids(self) -> list[str]:
        return [stop.id for stop in self.stops]
