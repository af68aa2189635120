from __future__ import annotations

import logging
import math
from typing import Iterable

from ..candidates.models import BusinessCandidate
from ..geo.distance import distances_from
from .config import DEFAULT_PAIRING_CONFIG, PairingConfig
from .models import PairingSuggestion, Route

logger = logging.getLogger(__name__)


def walk_minutes(distance: float, config: PairingConfig = DEFAULT_PAIRING_CONFIG) -> int:
    return int(math.floor(distance * config.walk_minutes_per_mile + 0.5))


def _pairing_reason(
    source: BusinessCandidate,
    target: BusinessCandidate,
    minutes: int,
    config: PairingConfig,
) -> str:
    key = f"{source.category.value}-{target.category.value}"
    template = config.reason_templates.get(key, config.default_reason)
    return template.format(minutes=minutes)


def _specific_pairing(source_name: str, target_name: str, config: PairingConfig) -> bool:
    for source_fragment, target_fragments in config.specific_pairings.items():
        if source_fragment in source_name and any(t in target_name for t in target_fragments):
            return True
    return False


def _score_pair(
    source: BusinessCandidate,
    target: BusinessCandidate,
    distance: float,
    config: PairingConfig,
) -> float:
    score = 0.0

    if target.category in config.complementary_categories.get(source.category, ()):
        score += config.complementary_bonus

    for max_miles, bonus in config.distance_tiers:
        if distance <= max_miles:
            score += bonus
            break

    score += min(target.rating * config.rating_multiplier, config.rating_bonus_cap)

    if _specific_pairing(source.name.lower(), target.name.lower(), config):
        score += config.specific_pairing_bonus

    return score


def find_pairs(
    source: BusinessCandidate,
    pool: Iterable[BusinessCandidate],
    max_distance: float | None = None,
    min_distance: float | None = None,
    config: PairingConfig = DEFAULT_PAIRING_CONFIG,
) -> list[PairingSuggestion]:
    """
    Suggest up to five complementary venues within walking distance of *source*.

    Pool members without coordinates, and *source* itself, are skipped.
    Only distances inside ``[min_distance, max_distance]`` miles qualify.
    """
    if not source.has_location:
        return []

    max_distance = config.max_distance if max_distance is None else max_distance
    min_distance = config.min_distance if min_distance is None else min_distance

    located = [c for c in pool if c.id != source.id and c.has_location]
    if not located:
        return []

    distances = distances_from(
        source.latitude,
        source.longitude,
        [c.latitude for c in located],
        [c.longitude for c in located],
    )

    suggestions: list[PairingSuggestion] = []
    for target, distance in zip(located, distances):
        distance = float(distance)
        if not min_distance <= distance <= max_distance:
            continue
        minutes = walk_minutes(distance, config)
        suggestions.append(PairingSuggestion(
            source_id=source.id,
            target_id=target.id,
            target_name=target.name,
            distance_miles=distance,
            walk_minutes=minutes,
            pairing_score=_score_pair(source, target, distance, config),
            reason=_pairing_reason(source, target, minutes, config),
        ))

    suggestions.sort(key=lambda s: s.pairing_score, reverse=True)
    return suggestions[: config.max_pairs]


def find_batch_pairings(
    pool: Iterable[BusinessCandidate],
    max_distance: float | None = None,
    config: PairingConfig = DEFAULT_PAIRING_CONFIG,
) -> dict[str, list[PairingSuggestion]]:
    """Pre-compute pairings for every candidate; ids with no pairs are left out."""
    candidates = list(pool)
    pairings: dict[str, list[PairingSuggestion]] = {}
    for candidate in candidates:
        pairs = find_pairs(candidate, candidates, max_distance=max_distance, config=config)
        if pairs:
            pairings[candidate.id] = pairs
    return pairings


def _route(
    stops: list[BusinessCandidate],
    total_distance: float,
    score: float,
    config: PairingConfig,
) -> Route:
    return Route(
        stops=stops,
        total_distance_miles=total_distance,
        total_walk_minutes=walk_minutes(total_distance, config),
        score=score,
        description=" -> ".join(stop.name for stop in stops),
    )


def find_route(
    start: BusinessCandidate,
    pool: Iterable[BusinessCandidate],
    max_total_distance: float | None = None,
    config: PairingConfig = DEFAULT_PAIRING_CONFIG,
) -> list[Route]:
    """
    Plan up to three short walking routes beginning at *start*.

    Each first-stop suggestion yields one route: a third stop is added when
    one fits ``max_total_distance`` (start -> first -> second), otherwise the
    route stays at two stops.
    """
    if not start.has_location:
        return []

    max_total_distance = (
        config.max_route_distance if max_total_distance is None else max_total_distance
    )
    candidates = list(pool)
    by_id = {c.id: c for c in candidates}

    routes: list[Route] = []
    for first in find_pairs(start, candidates, config=config):
        first_stop = by_id[first.target_id]
        second_stops = [
            s for s in find_pairs(first_stop, candidates, config=config)
            if s.target_id != start.id
            and first.distance_miles + s.distance_miles <= max_total_distance
        ]

        if not second_stops:
            routes.append(_route(
                [start, first_stop], first.distance_miles, first.pairing_score, config,
            ))
            continue

        second = second_stops[0]
        routes.append(_route(
            [start, first_stop, by_id[second.target_id]],
            first.distance_miles + second.distance_miles,
            first.pairing_score + second.pairing_score / 2,
            config,
        ))

    routes.sort(key=lambda r: r.score, reverse=True)
    logger.debug("Built %d routes from %s", len(routes), start.id)
    return routes[: config.max_routes]
