from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import pandas as pd
from pydantic import ValidationError

from .models import BusinessCandidate, Category

logger = logging.getLogger(__name__)


# Provider taxonomy tag -> our category, checked in this order
_TYPE_CATEGORIES: list[tuple[Category, frozenset[str]]] = [
    (Category.food, frozenset({
        "restaurant", "cafe", "bakery", "bar", "food", "meal_delivery", "meal_takeaway",
    })),
    (Category.retail, frozenset({
        "store", "clothing_store", "shoe_store", "book_store", "shopping_mall",
        "convenience_store", "florist", "jewelry_store", "gift_shop",
    })),
    (Category.services, frozenset({
        "hair_care", "beauty_salon", "spa", "laundry", "car_repair",
    })),
    (Category.entertainment, frozenset({
        "movie_theater", "art_gallery", "museum", "night_club", "bowling_alley",
    })),
    (Category.health, frozenset({
        "gym", "hospital", "dentist", "doctor", "pharmacy", "physiotherapist",
    })),
]


class CandidateValidationError(ValueError):
    """A provider record could not be turned into a BusinessCandidate."""

    def __init__(self, index: int, errors: list[dict[str, Any]]):
        self.index = index
        self.errors = errors
        fields = ", ".join(".".join(str(p) for p in e.get("loc", ())) for e in errors)
        super().__init__(f"Invalid candidate record at index {index}: {fields or 'unknown field'}")


def category_for_types(types: Iterable[str]) -> Category:
    """Map provider taxonomy tags to a Category, ``Other`` when nothing matches."""
    for t in types:
        tag = str(t).strip().lower()
        for category, tags in _TYPE_CATEGORIES:
            if tag in tags:
                return category
    return Category.other


def _first_present(record: Mapping[str, Any], keys: list[str]) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _coordinates(record: Mapping[str, Any]) -> tuple[Any, Any]:
    lat = _first_present(record, ["latitude", "lat"])
    lng = _first_present(record, ["longitude", "lng", "lon"])
    if lat is None or lng is None:
        location = (record.get("geometry") or {}).get("location") or {}
        lat = location.get("lat", lat)
        lng = location.get("lng", lng)
    return lat, lng


def _to_candidate_fields(record: Mapping[str, Any]) -> dict[str, Any]:
    # Accept our snake_case schema, the application's camelCase and raw
    # Google-Places style keys.
    types = _first_present(record, ["provider_types", "providerTypes", "types"]) or []
    if isinstance(types, str):
        types = [types]
    category = _first_present(record, ["category"])
    if not category:
        category = category_for_types(types)

    record_id = _first_present(record, ["id", "place_id"])
    lat, lng = _coordinates(record)

    return {
        "id": str(record_id) if record_id is not None else None,
        "name": record.get("name"),
        "category": category,
        "description": record.get("description"),
        "address": _first_present(record, ["address", "vicinity", "formatted_address"]),
        "provider_types": types,
        "rating": _first_present(record, ["rating", "averageRating", "average_rating"]),
        "review_count": _first_present(
            record, ["review_count", "reviewCount", "user_ratings_total"]
        ),
        "latitude": lat,
        "longitude": lng,
    }


def candidate_from_record(record: Mapping[str, Any], index: int = 0) -> BusinessCandidate:
    """Build one candidate, raising ``CandidateValidationError`` if malformed."""
    try:
        return BusinessCandidate(**_to_candidate_fields(record))
    except ValidationError as exc:
        raise CandidateValidationError(index, exc.errors()) from exc


def load_candidates(
    records: Iterable[Mapping[str, Any]],
    strict: bool = True,
) -> list[BusinessCandidate]:
    """
    Validate provider records into a deduplicated candidate pool.

    With ``strict`` the first malformed record raises; otherwise malformed
    records are logged and skipped. Later duplicates of an id are dropped.
    """
    candidates: list[BusinessCandidate] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        try:
            candidate = candidate_from_record(record, index)
        except CandidateValidationError as exc:
            if strict:
                raise
            logger.warning("Skipping malformed candidate: %s", exc)
            continue
        if candidate.id in seen:
            logger.debug("Dropping duplicate candidate id %s", candidate.id)
            continue
        seen.add(candidate.id)
        candidates.append(candidate)
    return candidates


def candidates_from_frame(df: pd.DataFrame, strict: bool = True) -> list[BusinessCandidate]:
    """Load candidates from a DataFrame with one venue per row."""
    if df.empty:
        return []
    # NaN cells mean "absent", same as a missing key
    cleaned = df.astype(object).where(pd.notna(df), None)
    return load_candidates(cleaned.to_dict(orient="records"), strict=strict)
