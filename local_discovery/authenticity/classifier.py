from __future__ import annotations

import logging
import math
from typing import Iterable

import pandas as pd

from ..candidates.models import BusinessCandidate
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig
from ..matching import all_matches, first_match
from .models import (
    AuthenticityScore,
    ClassificationAnalysis,
    ClassifiedCandidate,
    Confidence,
)

logger = logging.getLogger(__name__)

FRAME_COLUMNS: list[str] = [
    "id",
    "name",
    "category",
    "chain_score",
    "size_score",
    "locality_score",
    "overall_score",
    "is_local",
    "confidence",
    "rejected_reason",
]


def _clamp(score: float) -> float:
    return max(0.0, min(100.0, score))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _chain_score(
    candidate: BusinessCandidate,
    config: ScoringConfig,
) -> tuple[float, str | None]:
    """Return the chain score and the known-chain literal that hit, if any.

    100 means nothing about the record looks corporate.
    """
    matcher = config.matcher
    name = candidate.name.lower()
    description = candidate.description.lower()
    address = candidate.address.lower()

    score = 100.0

    # One brand hit is enough; never stack the big penalty
    chain_hit = first_match(matcher, name, config.known_chains)
    if chain_hit:
        score -= config.known_chain_penalty

    description_hits = all_matches(matcher, description, config.description_chain_indicators)
    score -= config.description_chain_penalty * len(description_hits)

    name_hits = all_matches(matcher, name, config.name_chain_indicators)
    score -= config.name_chain_penalty * len(name_hits)

    for indicator in config.local_indicators:
        if matcher.contains(name, indicator) or (
            config.local_indicators_in_description and matcher.contains(description, indicator)
        ):
            score += config.local_indicator_bonus

    if first_match(matcher, name, config.possessive_patterns):
        score += config.possessive_bonus

    if address or not config.street_level_requires_address:
        if not first_match(matcher, address, config.street_level_exclusions):
            score += config.street_level_bonus

    if candidate.name.isupper() and len(candidate.name) > config.all_caps_min_length:
        score -= config.all_caps_penalty

    if len(candidate.name.split()) < 2:
        score -= config.single_word_penalty

    if candidate.rating >= 5.0 and candidate.review_count < config.perfect_rating_max_reviews:
        score -= config.perfect_rating_penalty

    if candidate.provider_types & config.preferred_types:
        score += config.preferred_type_bonus

    return _clamp(score), chain_hit


def _size_score(candidate: BusinessCandidate, config: ScoringConfig) -> float:
    """Fewer reviews and a hand-written story point to a small business."""
    score = 100.0

    review_count = candidate.review_count
    for threshold, adjustment in config.review_tiers:
        if review_count > threshold:
            score += adjustment
            break
    else:
        if review_count < config.few_reviews_below:
            score += config.few_reviews_bonus

    desc_length = len(candidate.description)
    if desc_length > config.long_description_chars:
        score += config.long_description_bonus
    if desc_length < config.short_description_chars:
        score -= config.short_description_penalty

    return _clamp(score)


def _locality_score(candidate: BusinessCandidate, config: ScoringConfig) -> float:
    matcher = config.matcher
    text = f"{candidate.name} {candidate.description}".lower()

    score = config.locality_base
    if first_match(matcher, text, config.neighborhoods):
        score += config.neighborhood_bonus

    community_hits = all_matches(matcher, text, config.community_terms)
    score += config.community_term_bonus * len(community_hits)

    return _clamp(score)


def _rejection(
    candidate: BusinessCandidate,
    chain_hit: str | None,
    config: ScoringConfig,
) -> str | None:
    excluded = candidate.provider_types & config.excluded_types
    if excluded:
        return f"excluded provider type: {sorted(excluded)[0]}"
    if candidate.review_count > config.review_hard_reject:
        return f"more than {config.review_hard_reject} provider reviews"
    if chain_hit and config.known_chain_rejects:
        return f"known chain: {chain_hit}"
    return None


def classify(
    candidate: BusinessCandidate,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> AuthenticityScore:
    """
    Compute the Local Business Authenticity Index for one candidate.

    LBAI = chain × 0.5 + size × 0.3 + locality × 0.2 (weights from *config*).
    A hard reject (excluded provider type, huge review volume, known chain)
    forces ``overall_score`` to 0 while still reporting the sub-scores.
    """
    chain_score, chain_hit = _chain_score(candidate, config)
    size_score = _size_score(candidate, config)
    locality_score = _locality_score(candidate, config)

    rejected_reason = _rejection(candidate, chain_hit, config)
    if rejected_reason:
        return AuthenticityScore(
            chain_score=chain_score,
            size_score=size_score,
            locality_score=locality_score,
            overall_score=0,
            is_local=False,
            confidence=Confidence.low,
            rejected_reason=rejected_reason,
        )

    lbai = (
        chain_score * config.chain_weight
        + size_score * config.size_weight
        + locality_score * config.locality_weight
    )
    overall = int(_clamp(_round_half_up(lbai)))

    is_local = overall >= config.local_threshold and chain_score >= config.chain_threshold
    if overall >= config.high_confidence_threshold and chain_score >= config.high_confidence_chain:
        confidence = Confidence.high
    elif is_local:
        confidence = Confidence.medium
    else:
        confidence = Confidence.low

    return AuthenticityScore(
        chain_score=chain_score,
        size_score=size_score,
        locality_score=locality_score,
        overall_score=overall,
        is_local=is_local,
        confidence=confidence,
    )


def filter_and_rank(
    candidates: Iterable[BusinessCandidate],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> list[ClassifiedCandidate]:
    """Keep only local candidates, best LBAI first, ties broken by name."""
    classified: list[ClassifiedCandidate] = []
    total = 0
    for candidate in candidates:
        total += 1
        score = classify(candidate, config)
        if score.is_local:
            classified.append(ClassifiedCandidate(
                id=candidate.id,
                candidate=candidate,
                authenticity_score=score,
            ))

    classified.sort(key=lambda c: (-c.authenticity_score.overall_score, c.candidate.name))
    logger.debug("Kept %d of %d candidates as local", len(classified), total)
    return classified


def _reasoning(score: AuthenticityScore) -> list[str]:
    reasons: list[str] = []
    if score.rejected_reason:
        reasons.append(f"Rejected: {score.rejected_reason}")

    if score.chain_score < 50:
        reasons.append("Name matches known corporate chain")
    elif score.chain_score > 80:
        reasons.append("No chain indicators found")

    if score.size_score > 70:
        reasons.append("Small review count suggests local business")
    elif score.size_score < 50:
        reasons.append("High review volume typical of chains")

    if score.locality_score > 70:
        reasons.append("Strong community/local language")

    return reasons


def analyze_classification(
    candidate: BusinessCandidate,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> ClassificationAnalysis:
    """Explain why a candidate was classified as local or chain."""
    score = classify(candidate, config)
    return ClassificationAnalysis(
        business=candidate.name,
        classification="local" if score.is_local else "chain",
        score=score,
        reasoning=_reasoning(score),
    )


def classification_frame(
    candidates: Iterable[BusinessCandidate],
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> pd.DataFrame:
    """One row per candidate with every sub-score, for tuning presets offline."""
    rows: list[dict] = []
    for candidate in candidates:
        score = classify(candidate, config)
        rows.append({
            "id": candidate.id,
            "name": candidate.name,
            "category": candidate.category.value,
            "chain_score": score.chain_score,
            "size_score": score.size_score,
            "locality_score": score.locality_score,
            "overall_score": score.overall_score,
            "is_local": score.is_local,
            "confidence": score.confidence.value,
            "rejected_reason": score.rejected_reason,
        })
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
