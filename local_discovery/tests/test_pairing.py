import math

import pytest

from local_discovery.candidates.models import BusinessCandidate, Category
from local_discovery.pairing.engine import find_batch_pairings, find_pairs, find_route, walk_minutes

ORIGIN_LAT, ORIGIN_LON = 41.9, -87.63
MILES_PER_DEGREE = 3959.0 * math.pi / 180


def _at(miles: float, **fields) -> BusinessCandidate:
    """Candidate *miles* due north of the origin."""
    return BusinessCandidate(
        latitude=ORIGIN_LAT + miles / MILES_PER_DEGREE,
        longitude=ORIGIN_LON,
        **fields,
    )


CAFE = _at(0.0, id="s", name="Sunny Cafe", category=Category.food)
BOOKS = _at(0.2, id="a", name="Page Turner Book Store", category=Category.retail, rating=4.5)
CINEMA = _at(0.4, id="b", name="Late Show Cinema", category=Category.entertainment, rating=5)
TOO_CLOSE = _at(0.03, id="c", name="Next Door Deli", category=Category.food, rating=5)
TOO_FAR = _at(0.8, id="d", name="Far Away Records", category=Category.retail, rating=5)
NO_LOCATION = BusinessCandidate(id="e", name="Mystery Shop", category=Category.retail)
CLINIC = _at(0.1, id="f", name="Corner Clinic", category=Category.health, rating=4)
BAKERY = _at(0.45, id="g", name="Crumb Bakery", category=Category.food, rating=4.8)

POOL = [CAFE, BOOKS, CINEMA, TOO_CLOSE, TOO_FAR, NO_LOCATION, CLINIC]


class TestFindPairs:
    def test_scores_and_order(self):
        pairs = find_pairs(CAFE, POOL)
        assert [p.target_id for p in pairs] == ["a", "b", "f"]
        assert [p.pairing_score for p in pairs] == pytest.approx([123, 90, 46])

    def test_reasons_follow_category_pair(self):
        reasons = {p.target_id: p.reason for p in find_pairs(CAFE, POOL)}
        assert reasons["a"] == "Perfect coffee break while shopping - 4 min away"
        assert reasons["b"] == "Grab dinner before your show - just 8 min walk"
        assert reasons["f"] == "Just 2 min walk away - great combo!"

    def test_distance_and_walk_time(self):
        pair = find_pairs(CAFE, POOL)[0]
        assert pair.source_id == "s"
        assert pair.target_name == "Page Turner Book Store"
        assert pair.distance_miles == pytest.approx(0.2, abs=1e-6)
        assert pair.walk_minutes == 4

    def test_excludes_self_unlocated_and_out_of_range(self):
        ids = {p.target_id for p in find_pairs(CAFE, POOL)}
        assert ids.isdisjoint({"s", "c", "d", "e"})

    def test_max_distance_override(self):
        pairs = find_pairs(CAFE, POOL, max_distance=0.3)
        assert [p.target_id for p in pairs] == ["a", "f"]

    def test_source_without_location(self):
        assert find_pairs(NO_LOCATION, POOL) == []

    def test_at_most_five(self):
        pool = [CAFE] + [
            _at(0.1 + i * 0.02, id=f"shop{i}", name=f"Shop {i}", category=Category.retail)
            for i in range(8)
        ]
        assert len(find_pairs(CAFE, pool)) == 5


def test_walk_minutes_rounds_half_up():
    assert walk_minutes(0.125) == 3
    assert walk_minutes(0.1) == 2
    assert walk_minutes(0) == 0


def test_batch_pairings_skips_candidates_without_pairs():
    pairings = find_batch_pairings([CAFE, BOOKS, NO_LOCATION])
    assert set(pairings) == {"s", "a"}
    assert pairings["a"][0].target_id == "s"


class TestFindRoute:
    def test_two_stop_route_when_nothing_follows(self):
        routes = find_route(CAFE, [CAFE, BOOKS])
        assert len(routes) == 1
        route = routes[0]
        assert route.stop_ids == ["s", "a"]
        assert route.score == pytest.approx(123)
        assert route.total_walk_minutes == 4
        assert route.description == "Sunny Cafe -> Page Turner Book Store"

    def test_three_stop_routes(self):
        routes = find_route(CAFE, [CAFE, BOOKS, BAKERY])
        assert [r.stop_ids for r in routes] == [["s", "a", "g"], ["s", "g", "a"]]
        best = routes[0]
        assert best.score == pytest.approx(172.6)
        assert best.total_distance_miles == pytest.approx(0.45, abs=1e-6)
        assert best.total_walk_minutes == 9
        assert routes[1].score == pytest.approx(113.2)

    def test_total_distance_limit_drops_third_stop(self):
        routes = find_route(CAFE, [CAFE, BOOKS, BAKERY], max_total_distance=0.4)
        assert [r.stop_ids for r in routes] == [["s", "a"], ["s", "g"]]

    def test_second_stop_over_limit_keeps_two_stops(self):
        bistro = _at(0.65, id="h", name="Evening Bistro", category=Category.food, rating=4)
        pool = [CAFE, BOOKS, bistro]

        assert [r.stop_ids for r in find_route(CAFE, pool)] == [["s", "a", "h"]]

        routes = find_route(CAFE, pool, max_total_distance=0.6)
        assert len(routes) == 1
        assert routes[0].stop_ids == ["s", "a"]
        assert routes[0].score == pytest.approx(123)
        assert routes[0].total_distance_miles == pytest.approx(0.2, abs=1e-6)

    def test_start_without_location(self):
        assert find_route(NO_LOCATION, POOL) == []
