from __future__ import annotations

import pytest

from local_discovery.authenticity.classifier import (
    FRAME_COLUMNS,
    analyze_classification,
    classification_frame,
    classify,
    filter_and_rank,
)
from local_discovery.authenticity.config import ScoringConfig
from local_discovery.authenticity.models import Confidence
from local_discovery.candidates.models import BusinessCandidate, Category
from local_discovery.matching import SubstringMatcher, WordBoundaryMatcher


def _candidate(**overrides) -> BusinessCandidate:
    fields = {"id": "c1", "name": "Blue Door Bakery", "category": Category.food}
    fields.update(overrides)
    return BusinessCandidate(**fields)


JOES = _candidate(
    id="joes",
    name="Joe's Family Diner",
    description="A cozy neighborhood diner run by the Smith family since 1990",
    review_count=12,
    rating=4.6,
)
HILTON = _candidate(
    id="hilton",
    name="Hilton Garden Inn Chicago",
    category=Category.other,
    provider_types=["lodging"],
)
MCDONALDS = _candidate(id="mcd", name="McDonald's Downtown", review_count=3)
ZEDS = _candidate(
    id="zeds",
    name="Zed's Bakery",
    description="A family-owned neighborhood bakery in Pilsen",
    review_count=3,
)
ABES = _candidate(id="abes", name="Abe's Bakery", review_count=3)
BLUE_DOOR = _candidate(id="blue", name="Blue Door Bakery", review_count=3)

SAMPLE_POOL = [
    JOES,
    HILTON,
    MCDONALDS,
    ZEDS,
    ABES,
    BLUE_DOOR,
    _candidate(id="busy", name="Busy Corner Cafe", review_count=1500),
    _candidate(id="franchise", name="Fresh Market Grill",
               description="Part of a nationwide franchise with 300 locations"),
    _candidate(id="suite", name="Tax Helpers", address="200 W Madison, Suite 400",
               review_count=60, description="x" * 60),
]


class TestScenarios:
    def test_family_diner_is_local(self):
        score = classify(JOES)
        assert score.chain_score == 100
        assert score.size_score == 100
        assert score.locality_score == 65
        assert score.overall_score == 93
        assert score.is_local
        assert score.confidence in (Confidence.medium, Confidence.high)

    def test_hotel_excluded_by_provider_type(self):
        score = classify(HILTON)
        assert not score.is_local
        assert score.overall_score == 0
        assert score.confidence == Confidence.low
        assert score.rejected_reason == "excluded provider type: lodging"

    def test_known_chain_never_local(self):
        score = classify(MCDONALDS)
        assert not score.is_local
        assert score.rejected_reason.startswith("known chain")
        assert score.chain_score < 70

    def test_known_chain_with_local_words_still_rejected(self):
        c = _candidate(
            name="McDonald's Family Local Artisan Homemade",
            description="Locally sourced, independent, community, small batch",
        )
        assert not classify(c).is_local

    def test_huge_review_count_never_local(self):
        c = _candidate(
            name="Joe's Family Diner",
            description="A cozy neighborhood diner run by the Smith family since 1990",
            review_count=1001,
        )
        score = classify(c)
        assert not score.is_local
        assert score.overall_score == 0
        assert "reviews" in score.rejected_reason


class TestSubScores:
    def test_missing_description_lowers_size_score(self):
        score = classify(BLUE_DOOR)
        # +10 for under five reviews, -20 for an empty description
        assert score.size_score == 90
        assert score.overall_score == 87
        assert score.confidence == Confidence.high

    def test_review_tiers(self):
        assert classify(_candidate(review_count=60, description="x" * 60)).size_score == 80
        assert classify(_candidate(review_count=30, description="x" * 60)).size_score == 90
        assert classify(_candidate(review_count=150, description="y" * 200)).size_score == 70

    def test_description_chain_indicators_stack(self):
        c = _candidate(name="Fresh Market Grill",
                       description="Part of a nationwide franchise with 300 locations")
        score = classify(c)
        assert score.chain_score == 15
        assert not score.is_local
        assert score.rejected_reason is None

    def test_known_chain_penalty_applied_once(self):
        assert classify(_candidate(name="Starbucks Target")).chain_score == 25

    def test_suite_address_misses_street_bonus(self):
        with_suite = classify(_candidate(name="Quiet Corner", address="10 Main St, Suite 2",
                                         description="a nationwide brand"))
        street = classify(_candidate(name="Quiet Corner", address="10 Main St",
                                     description="a nationwide brand"))
        assert street.chain_score - with_suite.chain_score == 5

    def test_preferred_type_bonus(self):
        plain = classify(_candidate(name="Sunrise Loaves", description="a nationwide brand"))
        preferred = classify(_candidate(name="Sunrise Loaves", description="a nationwide brand",
                                        provider_types=["bakery"]))
        assert plain.chain_score == 75
        assert preferred.chain_score == 90

    def test_neighborhood_counted_once(self):
        c = _candidate(name="Corner Spot", description="Serving Wicker Park and Logan Square")
        assert classify(c).locality_score == 70

    def test_community_terms_each_count(self):
        c = _candidate(name="Zed's Bakery", description="A family-owned neighborhood bakery in Pilsen")
        assert classify(c).locality_score == 100


class TestInvariants:
    @pytest.mark.parametrize("candidate", SAMPLE_POOL, ids=lambda c: c.id)
    def test_scores_within_bounds(self, candidate):
        score = classify(candidate)
        for value in (score.chain_score, score.size_score, score.locality_score, score.overall_score):
            assert 0 <= value <= 100

    @pytest.mark.parametrize("candidate", SAMPLE_POOL, ids=lambda c: c.id)
    def test_is_local_matches_thresholds(self, candidate):
        score = classify(candidate)
        assert score.is_local == (score.overall_score >= 75 and score.chain_score >= 70)

    @pytest.mark.parametrize("candidate", SAMPLE_POOL, ids=lambda c: c.id)
    def test_overall_is_weighted_composite_unless_rejected(self, candidate):
        score = classify(candidate)
        if score.rejected_reason:
            assert score.overall_score == 0
        else:
            lbai = score.chain_score * 0.5 + score.size_score * 0.3 + score.locality_score * 0.2
            assert abs(score.overall_score - lbai) <= 0.5


class TestFilterAndRank:
    def test_only_local_sorted_by_score_then_name(self):
        ranked = filter_and_rank(SAMPLE_POOL)
        assert [c.id for c in ranked] == ["zeds", "joes", "abes", "blue", "suite"]
        assert all(c.authenticity_score.is_local for c in ranked)

    def test_result_carries_id_and_candidate(self):
        ranked = filter_and_rank([JOES])
        assert ranked[0].id == "joes"
        assert ranked[0].candidate is JOES

    def test_empty_pool(self):
        assert filter_and_rank([]) == []


class TestConfiguration:
    def test_synthetic_word_lists(self):
        config = ScoringConfig(
            known_chains=("acme",),
            local_indicators=(),
            neighborhoods=(),
            community_terms=(),
        )
        assert classify(_candidate(name="Acme Foods"), config).rejected_reason == "known chain: acme"
        assert classify(_candidate(name="Blue Door Bakery"), config).is_local

    def test_word_boundary_matcher_avoids_partial_words(self):
        substring = ScoringConfig(known_chains=("inn",), matcher=SubstringMatcher())
        boundary = ScoringConfig(known_chains=("inn",), matcher=WordBoundaryMatcher())
        dinner = _candidate(name="Dinner Club")
        assert classify(dinner, substring).rejected_reason == "known chain: inn"
        assert classify(dinner, boundary).rejected_reason is None
        assert classify(_candidate(name="Lakeside Inn"), boundary).rejected_reason == "known chain: inn"

    def test_hard_reject_on_chain_can_be_disabled(self):
        config = ScoringConfig(known_chain_rejects=False)
        score = classify(MCDONALDS, config)
        assert score.rejected_reason is None
        assert not score.is_local


class TestAnalysis:
    def test_local_analysis(self):
        analysis = analyze_classification(JOES)
        assert analysis.business == "Joe's Family Diner"
        assert analysis.classification == "local"
        assert "No chain indicators found" in analysis.reasoning

    def test_rejected_analysis_leads_with_reason(self):
        analysis = analyze_classification(HILTON)
        assert analysis.classification == "chain"
        assert analysis.reasoning[0].startswith("Rejected: excluded provider type")

    def test_classification_frame(self):
        df = classification_frame(SAMPLE_POOL)
        assert list(df.columns) == FRAME_COLUMNS
        assert len(df) == len(SAMPLE_POOL)
        assert df.set_index("id").loc["hilton", "overall_score"] == 0
        assert bool(df.set_index("id").loc["joes", "is_local"])
