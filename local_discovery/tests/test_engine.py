from local_discovery.authenticity.config import ScoringConfig
from local_discovery.candidates.models import BusinessCandidate, Category
from local_discovery.config import EngineConfig
from local_discovery.engine import discover

JOES = BusinessCandidate(
    id="joes",
    name="Joe's Family Diner",
    category=Category.food,
    description="A cozy neighborhood diner run by the Smith family since 1990",
    review_count=12,
    rating=4.6,
)
ZEDS = BusinessCandidate(
    id="zeds",
    name="Zed's Bakery",
    category=Category.food,
    description="A family-owned neighborhood bakery in Pilsen",
    review_count=3,
)
HILTON = BusinessCandidate(
    id="hilton", name="Hilton Garden Inn Chicago", provider_types=["lodging"],
)
MCDONALDS = BusinessCandidate(
    id="mcd", name="McDonald's Downtown", category=Category.food, review_count=3,
)

POOL = [JOES, HILTON, MCDONALDS, ZEDS]


def _ids(result):
    return [c.id for c in result.results]


def test_no_query_returns_local_by_score():
    result = discover(POOL)
    assert _ids(result) == ["zeds", "joes"]
    assert result.total_candidates == 4
    assert result.expansion is None


def test_blank_query_is_no_query():
    assert _ids(discover(POOL, query="  ")) == ["zeds", "joes"]


def test_query_filters_to_relevant_local():
    result = discover(POOL, query="diner")
    assert _ids(result) == ["joes"]
    assert result.expansion.corrected == "diner"


def test_query_matches_through_synonyms():
    assert _ids(discover(POOL, query="pastry")) == ["zeds"]


def test_chains_never_returned():
    result = discover(POOL, query="downtown")
    assert result.results == []


def test_results_carry_scores():
    result = discover(POOL)
    assert all(c.authenticity_score.is_local for c in result.results)
    assert result.results[0].candidate == ZEDS


def test_explicit_scoring_config():
    result = discover(POOL, scoring_config=ScoringConfig(review_hard_reject=10))
    assert _ids(result) == ["zeds"]


def test_preset_from_engine_config():
    result = discover(POOL, engine_config=EngineConfig(preset="places"))
    assert "hilton" not in _ids(result)
    assert "mcd" not in _ids(result)
