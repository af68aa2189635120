from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..candidates.models import BusinessCandidate


class Confidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class AuthenticityScore(BaseModel):
    chain_score: float = Field(ge=0, le=100)
    size_score: float = Field(ge=0, le=100)
    locality_score: float = Field(ge=0, le=100)
    overall_score: int = Field(ge=0, le=100)
    is_local: bool
    confidence: Confidence
    rejected_reason: str | None = None


class ClassifiedCandidate(BaseModel):
    id: str
    candidate: BusinessCandidate
    authenticity_score: AuthenticityScore


class ClassificationAnalysis(BaseModel):
    business: str
    classification: str
    score: AuthenticityScore
    reasoning: list[str] = Field(default_factory=list)
