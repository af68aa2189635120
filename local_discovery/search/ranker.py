from __future__ import annotations

import logging
from typing import Iterable

from ..candidates.models import BusinessCandidate
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import QueryExpansion

logger = logging.getLogger(__name__)


def _text_blob(candidate: BusinessCandidate, with_address: bool = False) -> str:
    parts = [candidate.name, candidate.description, candidate.category.value]
    if with_address:
        parts.append(candidate.address)
    return " ".join(parts).lower()


def rank(
    candidates: Iterable[BusinessCandidate],
    expansion: QueryExpansion,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[BusinessCandidate]:
    """
    Filter and order *candidates* by lexical relevance to *expansion*.

    Strict pass: keep candidates whose name, description or category contain
    one of the leading expanded terms. Candidates matching the query itself
    come before those matched only through a synonym; input order is kept
    within each tier.

    Fallback pass (strict pass empty): every expanded term plus each longer
    query word, also searched in the address, with no tiering.

    An empty query means no filter and returns the candidates unchanged.
    """
    pool = list(candidates)
    if expansion.is_empty or not pool:
        return pool

    direct_terms = {t for t in (expansion.original, expansion.corrected) if t}
    strict_terms = expansion.expanded_terms[: config.max_provider_queries]

    direct: list[BusinessCandidate] = []
    via_synonym: list[BusinessCandidate] = []
    for candidate in pool:
        blob = _text_blob(candidate)
        if any(term in blob for term in direct_terms):
            direct.append(candidate)
        elif any(term in blob for term in strict_terms):
            via_synonym.append(candidate)

    if direct or via_synonym:
        return direct + via_synonym

    fallback_terms = list(expansion.expanded_terms)
    for word in expansion.corrected.split():
        if len(word) >= config.min_fallback_word_length and word not in fallback_terms:
            fallback_terms.append(word)

    matches = [
        candidate
        for candidate in pool
        if any(term in _text_blob(candidate, with_address=True) for term in fallback_terms)
    ]
    logger.debug(
        "No strict matches for %r, fallback kept %d of %d",
        expansion.corrected, len(matches), len(pool),
    )
    return matches


def relevance_score(candidate: BusinessCandidate, expansion: QueryExpansion) -> float:
    """Continuous 0-100 match score; name hits count more than description hits."""
    if expansion.is_empty:
        return 0.0

    query = expansion.corrected
    name = candidate.name.lower()
    description = candidate.description.lower()
    combined = _text_blob(candidate, with_address=True)

    score = 0.0
    if query in name:
        score += 50

    for word in query.split():
        if len(word) > 2 and word in name:
            score += 20

    for term in expansion.expanded_terms:
        if term in name:
            score += 15
        elif term in description:
            score += 10
        elif term in combined:
            score += 5

    if expansion.category is not None and candidate.category == expansion.category:
        score += 10

    return min(100.0, score)
