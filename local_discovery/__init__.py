"""
Local business discovery and ranking engine.

Responsibilities:
- Score provider-returned venues for "localness" and keep the independents.
- Expand free-text queries and rank a candidate pool by relevance.
- Suggest nearby walking pairings and short multi-stop routes.

Every operation is a pure function over in-memory candidates; nothing here
performs I/O or keeps state between calls.
"""

from .authenticity.classifier import (
    analyze_classification,
    classification_frame,
    classify,
    filter_and_rank,
)
from .authenticity.presets import get_preset
from .candidates.ingest import CandidateValidationError, load_candidates
from .candidates.models import BusinessCandidate, Category
from .engine import discover
from .geo.distance import distance_miles
from .pairing.engine import find_batch_pairings, find_pairs, find_route
from .search.expander import expand, local_business_queries, suggest
from .search.ranker import rank, relevance_score

__all__ = [
    "BusinessCandidate",
    "CandidateValidationError",
    "Category",
    "analyze_classification",
    "classification_frame",
    "classify",
    "discover",
    "distance_miles",
    "expand",
    "filter_and_rank",
    "find_batch_pairings",
    "find_pairs",
    "find_route",
    "get_preset",
    "load_candidates",
    "local_business_queries",
    "rank",
    "relevance_score",
    "suggest",
]
