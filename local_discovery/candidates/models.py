from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    food = "Food"
    retail = "Retail"
    services = "Services"
    entertainment = "Entertainment"
    health = "Health"
    other = "Other"


def _coordinate(value, limit: float) -> float | None:
    """Parse a coordinate; anything unusable means the location is unknown."""
    if value is None:
        return None
    try:
        coordinate = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(coordinate) or abs(coordinate) > limit:
        return None
    return coordinate


class BusinessCandidate(BaseModel):
    """A normalized venue record. Never mutated once built."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: Category = Category.other
    description: str = ""
    address: str = ""
    provider_types: frozenset[str] = Field(default_factory=frozenset)
    rating: float = 0.0
    review_count: int = Field(default=0, ge=0)
    latitude: float | None = None
    longitude: float | None = None

    @field_validator("description", "address", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("provider_types", mode="before")
    @classmethod
    def _normalize_types(cls, value):
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return frozenset(str(t).strip().lower() for t in value if str(t).strip())

    @field_validator("rating", mode="before")
    @classmethod
    def _normalize_rating(cls, value):
        if value is None:
            return 0.0
        raw = str(value).strip()
        # Handle "X/5" format (e.g. "4.1/5")
        if "/" in raw:
            raw = raw.split("/")[0].strip()
        try:
            rating = float(raw)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(rating):
            return 0.0
        return max(0.0, min(5.0, rating))

    @field_validator("review_count", mode="before")
    @classmethod
    def _default_review_count(cls, value):
        return 0 if value is None else value

    @field_validator("latitude", mode="before")
    @classmethod
    def _valid_latitude(cls, value) -> float | None:
        return _coordinate(value, 90)

    @field_validator("longitude", mode="before")
    @classmethod
    def _valid_longitude(cls, value) -> float | None:
        return _coordinate(value, 180)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None
