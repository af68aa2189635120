from __future__ import annotations

from pydantic import BaseModel, Field

from ..candidates.models import Category


class QueryExpansion(BaseModel):
    original: str
    corrected: str
    expanded_terms: list[str] = Field(default_factory=list)
    provider_queries: list[str] = Field(default_factory=list)
    category: Category | None = None

    @property
    def was_corrected(self) -> bool:
        return self.corrected != self.original

    @property
    def is_empty(self) -> bool:
        return not self.corrected
