from __future__ import annotations

from dataclasses import dataclass, field

from ..matching import SubstringMatcher, TextMatcher

KNOWN_CHAINS: tuple[str, ...] = (
    # Hotels
    "fairmont", "trump", "swissotel", "royal sonesta", "four seasons", "crowne plaza",
    "marriott", "hilton", "hyatt", "sheraton", "westin", "doubletree", "holiday inn",
    # Major retailers
    "target", "walmart", "costco", "macy's", "marshalls", "nordstrom", "sears",
    "best buy", "home depot", "lowe's", "kohl's", "tj maxx", "burlington",
    # Fast food and chain restaurants
    "mcdonald's", "burger king", "wendy's", "arby's", "subway", "chipotle",
    "panera", "starbucks", "dunkin", "taco bell", "kfc", "pizza hut",
    # Chain cafes
    "yolk", "potbelly", "jimmy john's", "einstein bros", "caribou coffee",
    # Gyms, salons, pharmacies
    "la fitness", "24 hour fitness", "planet fitness", "anytime fitness",
    "great clips", "supercuts", "sport clips", "fantastic sams",
    "cvs", "walgreens", "rite aid",
    # Banks
    "bank of america", "chase bank", "wells fargo", "citibank",
    # Chain stores
    "barnes & noble", "books-a-million", "half price books",
    "ulta beauty", "sephora", "sally beauty",
    "petsmart", "petco",
    # Generic corporate words
    "hotel", "resort", "tower", "international", "corporation", "inc.",
    "llc", "franchise", "nationwide", "multi-location",
)

DESCRIPTION_CHAIN_INDICATORS: tuple[str, ...] = (
    "chain", "franchise", "locations", "nationwide", "corporation",
)

LOCAL_INDICATORS: tuple[str, ...] = (
    "family", "mom", "pop", "local", "neighborhood", "community",
    "artisan", "craft", "homemade", "handmade", "boutique",
    # Possessive names suggest an owner behind the counter
    "'s ", "joe's", "maria's", "tony's", "anna's", "mike's",
    "hidden gem", "authentic", "original", "since", "est.",
    "owned", "operated", "independent",
)

NEIGHBORHOODS: tuple[str, ...] = (
    "loop", "gold coast", "lincoln park", "wicker park", "pilsen",
    "hyde park", "andersonville", "bucktown", "logan square", "bridgeport",
    "chinatown", "little italy", "greektown", "ukrainian village",
)

COMMUNITY_TERMS: tuple[str, ...] = (
    "local", "neighborhood", "community", "family-owned",
    "family operated", "locally sourced", "chicago-based",
    "independent", "small batch", "homemade",
)

EXCLUDED_TYPES: frozenset[str] = frozenset({
    "lodging", "hotel", "car_rental", "gas_station", "convenience_store",
    "department_store", "drugstore", "pharmacy", "supermarket", "bank", "atm",
    "airport", "train_station", "bus_station", "transit_station", "car_dealer",
    "car_wash", "storage", "parking", "funeral_home", "cemetery",
})

PREFERRED_TYPES: frozenset[str] = frozenset({
    "bakery", "book_store", "cafe", "florist", "hair_care", "beauty_salon",
    "art_gallery", "jewelry_store", "bicycle_store", "pet_store", "liquor_store",
    "home_goods_store", "furniture_store", "electronics_store", "gift_shop",
})


@dataclass(frozen=True)
class ScoringConfig:
    """
    Every word list, bonus, penalty and threshold used by the classifier.

    Penalties are positive numbers that get subtracted. A zero bonus or an
    empty word list switches the corresponding rule off.
    """

    # Chain score
    known_chains: tuple[str, ...] = KNOWN_CHAINS
    known_chain_penalty: float = 80
    known_chain_rejects: bool = True
    description_chain_indicators: tuple[str, ...] = DESCRIPTION_CHAIN_INDICATORS
    description_chain_penalty: float = 30
    name_chain_indicators: tuple[str, ...] = ()
    name_chain_penalty: float = 15
    local_indicators: tuple[str, ...] = LOCAL_INDICATORS
    local_indicator_bonus: float = 15
    local_indicators_in_description: bool = True
    possessive_patterns: tuple[str, ...] = ()
    possessive_bonus: float = 10
    street_level_exclusions: tuple[str, ...] = ("suite", "floor")
    street_level_bonus: float = 5
    street_level_requires_address: bool = False
    all_caps_penalty: float = 0
    all_caps_min_length: int = 5
    single_word_penalty: float = 0
    perfect_rating_penalty: float = 0
    perfect_rating_max_reviews: int = 10

    # Provider taxonomy
    excluded_types: frozenset[str] = EXCLUDED_TYPES
    preferred_types: frozenset[str] = PREFERRED_TYPES
    preferred_type_bonus: float = 15

    # Size score
    review_hard_reject: int = 1000
    review_tiers: tuple[tuple[int, float], ...] = ((100, -40), (50, -20), (20, -10))
    few_reviews_below: int = 5
    few_reviews_bonus: float = 10
    long_description_chars: int = 150
    long_description_bonus: float = 10
    short_description_chars: int = 50
    short_description_penalty: float = 20

    # Locality score
    locality_base: float = 50
    neighborhoods: tuple[str, ...] = NEIGHBORHOODS
    neighborhood_bonus: float = 20
    community_terms: tuple[str, ...] = COMMUNITY_TERMS
    community_term_bonus: float = 15

    # Composite
    chain_weight: float = 0.5
    size_weight: float = 0.3
    locality_weight: float = 0.2
    local_threshold: float = 75
    chain_threshold: float = 70
    high_confidence_threshold: float = 85
    high_confidence_chain: float = 90

    matcher: TextMatcher = field(default_factory=SubstringMatcher, compare=False)


DEFAULT_SCORING_CONFIG = ScoringConfig()
