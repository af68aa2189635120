from __future__ import annotations

import logging
from typing import Iterable

from pydantic import BaseModel, Field

from .authenticity.classifier import filter_and_rank
from .authenticity.config import ScoringConfig
from .authenticity.models import ClassifiedCandidate
from .authenticity.presets import get_preset
from .candidates.models import BusinessCandidate
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .search.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .search.expander import expand
from .search.models import QueryExpansion
from .search.ranker import rank

logger = logging.getLogger(__name__)


class DiscoveryResult(BaseModel):
    results: list[ClassifiedCandidate] = Field(default_factory=list)
    total_candidates: int
    expansion: QueryExpansion | None = None


def discover(
    candidates: Iterable[BusinessCandidate],
    query: str | None = None,
    scoring_config: ScoringConfig | None = None,
    search_config: SearchConfig = DEFAULT_SEARCH_CONFIG,
    engine_config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> DiscoveryResult:
    """
    Candidates that are both local and relevant to *query*.

    Without a query the local candidates come back best LBAI first. With one,
    relevance order wins and the authenticity classifier acts as a filter.
    """
    pool = list(candidates)
    config = scoring_config or get_preset(engine_config.preset)
    local = filter_and_rank(pool, config)

    if not query or not query.strip():
        return DiscoveryResult(results=local, total_candidates=len(pool))

    expansion = expand(query, search_config)
    local_by_id = {c.id: c for c in local}
    results = [local_by_id[c.id] for c in rank(pool, expansion, search_config) if c.id in local_by_id]

    logger.debug(
        "Query %r: %d local, %d local and relevant of %d",
        expansion.corrected, len(local), len(results), len(pool),
    )
    return DiscoveryResult(results=results, total_candidates=len(pool), expansion=expansion)
