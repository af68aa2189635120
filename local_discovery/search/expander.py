from __future__ import annotations

import logging

from ..candidates.models import Category
from ..matching import first_match
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import QueryExpansion

logger = logging.getLogger(__name__)


def _correct(query: str, config: SearchConfig) -> str:
    """Fix a misspelt query as a whole first, then word by word."""
    whole = config.corrections.get(query)
    if whole:
        return whole

    words = query.split()
    fixed = [config.corrections.get(word, word) for word in words]
    if fixed == words:
        return query
    return " ".join(fixed)


def _synonym_tables(config: SearchConfig) -> list[dict[str, tuple[str, ...]]]:
    return [config.food_terms, config.cuisine_terms, config.service_terms]


def _infer_category(
    corrected: str,
    expanded: list[str],
    food_hit: bool,
    config: SearchConfig,
) -> Category | None:
    if not corrected:
        return None
    if food_hit:
        return Category.food
    expanded_set = set(expanded)
    for category, keywords in config.category_keywords.items():
        if (
            first_match(config.keyword_matcher, corrected, keywords)
            or expanded_set.intersection(keywords)
        ):
            return category
    return None


def expand(query: str | None, config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> QueryExpansion:
    """
    Expand a free-text query into related terms and provider search phrases.

    Steps:
    - Trim and lowercase.
    - Apply the spelling corrections table.
    - Add synonyms for the whole query, then for each of its words.
    - Cap the expanded terms into provider queries.

    A query that matches no table expands to itself only.
    """
    original = (query or "").strip().lower()
    corrected = _correct(original, config)

    expanded: list[str] = [corrected]
    seen = {corrected}

    def _add(terms: tuple[str, ...]) -> None:
        for term in terms:
            if term not in seen:
                seen.add(term)
                expanded.append(term)

    food_hit = False
    lookups = [corrected]
    words = corrected.split()
    if len(words) > 1:
        lookups.extend(words)

    for lookup in lookups:
        for table in _synonym_tables(config):
            terms = table.get(lookup)
            if terms:
                _add(terms)
                if table is config.food_terms or table is config.cuisine_terms:
                    food_hit = True

    provider_queries = expanded[: config.max_provider_queries] if corrected else []
    category = _infer_category(corrected, expanded, food_hit, config)

    if corrected != original:
        logger.debug("Corrected query %r to %r", original, corrected)

    return QueryExpansion(
        original=original,
        corrected=corrected,
        expanded_terms=expanded,
        provider_queries=provider_queries,
        category=category,
    )


def suggest(partial: str | None, config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> list[str]:
    """Return vocabulary terms that start with *partial*."""
    lower = (partial or "").strip().lower()
    if len(lower) < config.min_suggestion_chars:
        return []

    suggestions: list[str] = []
    for table in _synonym_tables(config):
        for term in table:
            if term.startswith(lower) and term not in suggestions:
                suggestions.append(term)
    return suggestions[: config.max_suggestions]


def local_business_queries(
    category: Category | str | None = None,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[str]:
    """Provider queries aimed at independents, used when the user typed nothing."""
    if category is None or category == "All":
        return list(config.local_queries)
    try:
        category = Category(category)
    except ValueError:
        return list(config.local_queries)
    return list(config.category_local_queries.get(category, config.local_queries))
