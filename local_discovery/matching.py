from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable, Protocol


class TextMatcher(Protocol):
    def contains(self, text: str, term: str) -> bool:
        ...


class SubstringMatcher:
    """Raw containment: "inn" also matches inside "dinner"."""

    def contains(self, text: str, term: str) -> bool:
        return term in text


class WordBoundaryMatcher:
    """Only match ``term`` where it is not glued to other letters or digits."""

    def contains(self, text: str, term: str) -> bool:
        return _boundary_pattern(term).search(text) is not None


class WordStartMatcher:
    """Match ``term`` only at the start of a word, so plurals still count."""

    def contains(self, text: str, term: str) -> bool:
        return _word_start_pattern(term).search(text) is not None


@lru_cache(maxsize=1024)
def _boundary_pattern(term: str) -> re.Pattern[str]:
    return re.compile(r"(?<![a-z0-9])" + re.escape(term) + r"(?![a-z0-9])")


@lru_cache(maxsize=1024)
def _word_start_pattern(term: str) -> re.Pattern[str]:
    return re.compile(r"(?<![a-z0-9])" + re.escape(term))


def first_match(matcher: TextMatcher, text: str, terms: Iterable[str]) -> str | None:
    for term in terms:
        if matcher.contains(text, term):
            return term
    return None


def all_matches(matcher: TextMatcher, text: str, terms: Iterable[str]) -> list[str]:
    return [term for term in terms if matcher.contains(text, term)]
