from __future__ import annotations

from dataclasses import dataclass, field

from ..candidates.models import Category
from ..config import DEFAULT_ENGINE_CONFIG

# When at a business in the key category, suggest these categories
COMPLEMENTARY_CATEGORIES: dict[Category, tuple[Category, ...]] = {
    Category.food: (Category.entertainment, Category.retail, Category.services),
    Category.entertainment: (Category.food, Category.retail),
    Category.retail: (Category.food, Category.services),
    Category.services: (Category.food, Category.retail),
    Category.health: (Category.food, Category.retail),
    Category.other: (Category.food, Category.retail, Category.entertainment),
}

# Source name fragment -> target name fragments that make a good combo
SPECIFIC_PAIRINGS: dict[str, tuple[str, ...]] = {
    "cafe": ("book store", "bookstore", "art gallery", "bakery", "florist"),
    "restaurant": ("movie theater", "art gallery", "bar", "night club"),
    "bookstore": ("cafe", "bakery", "restaurant"),
    "movie theater": ("restaurant", "cafe", "ice cream shop"),
    "hair salon": ("cafe", "clothing store", "spa"),
    "gym": ("health food store", "smoothie bar", "spa"),
    "bakery": ("cafe", "florist", "gift shop"),
}

REASON_TEMPLATES: dict[str, str] = {
    "Food-Entertainment": "Grab dinner before your show - just {minutes} min walk",
    "Food-Retail": "Perfect coffee break while shopping - {minutes} min away",
    "Entertainment-Food": "Get food before or after - {minutes} min walk",
    "Retail-Food": "Take a break with coffee nearby - {minutes} min away",
    "Services-Food": "Treat yourself after your appointment - {minutes} min walk",
    "Food-Services": "Pamper yourself after lunch - {minutes} min away",
}

DEFAULT_REASON = "Just {minutes} min walk away - great combo!"


@dataclass(frozen=True)
class PairingConfig:
    complementary_categories: dict[Category, tuple[Category, ...]] = field(
        default_factory=lambda: dict(COMPLEMENTARY_CATEGORIES)
    )
    specific_pairings: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(SPECIFIC_PAIRINGS)
    )
    reason_templates: dict[str, str] = field(default_factory=lambda: dict(REASON_TEMPLATES))
    default_reason: str = DEFAULT_REASON

    max_distance: float = DEFAULT_ENGINE_CONFIG.max_pair_distance
    min_distance: float = 0.05
    max_route_distance: float = DEFAULT_ENGINE_CONFIG.max_route_distance
    walk_minutes_per_mile: float = 20

    complementary_bonus: float = 50
    # (max miles, bonus); first tier that fits wins
    distance_tiers: tuple[tuple[float, float], ...] = ((0.3, 30), (0.5, 20))
    rating_multiplier: float = 4
    rating_bonus_cap: float = 20
    specific_pairing_bonus: float = 25

    max_pairs: int = 5
    max_routes: int = 3


DEFAULT_PAIRING_CONFIG = PairingConfig()
