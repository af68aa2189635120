from __future__ import annotations

from dataclasses import dataclass, field

from ..candidates.models import Category
from ..config import DEFAULT_ENGINE_CONFIG
from ..matching import TextMatcher, WordStartMatcher
from .vocabulary import (
    CATEGORY_KEYWORDS,
    CATEGORY_LOCAL_QUERIES,
    CUISINE_TERMS,
    FOOD_TERMS,
    LOCAL_BUSINESS_QUERIES,
    SERVICE_TERMS,
    SPELLING_CORRECTIONS,
)


@dataclass(frozen=True)
class SearchConfig:
    corrections: dict[str, str] = field(default_factory=lambda: dict(SPELLING_CORRECTIONS))
    food_terms: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(FOOD_TERMS))
    cuisine_terms: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(CUISINE_TERMS))
    service_terms: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(SERVICE_TERMS))
    category_keywords: dict[Category, tuple[str, ...]] = field(
        default_factory=lambda: dict(CATEGORY_KEYWORDS)
    )
    local_queries: tuple[str, ...] = LOCAL_BUSINESS_QUERIES
    category_local_queries: dict[Category, tuple[str, ...]] = field(
        default_factory=lambda: dict(CATEGORY_LOCAL_QUERIES)
    )
    max_provider_queries: int = DEFAULT_ENGINE_CONFIG.max_provider_queries
    min_fallback_word_length: int = 3
    min_suggestion_chars: int = 2
    max_suggestions: int = 5
    # Category keywords must start a word: "eat" is not inside "theater"
    keyword_matcher: TextMatcher = field(default_factory=WordStartMatcher, compare=False)


DEFAULT_SEARCH_CONFIG = SearchConfig()
