"""
Query expansion and relevance ranking.

Responsibilities:
- Normalize a free-text query and fix common misspellings.
- Expand it into related cuisines, venue types and service synonyms.
- Produce a capped list of provider-facing search phrases.
- Filter and order a candidate pool by lexical relevance, with a wider
  fallback pass when the strict pass finds nothing.
"""
