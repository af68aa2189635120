"""
Scoring presets
===============

Two scorers grew up independently in the discovery site before being merged
into the single :mod:`classifier`. Each survives here as a named
:class:`ScoringConfig` so either behaviour can be selected without a second
code path.

* **canonical** - the composite LBAI scorer
  ``0.5 × chain  +  0.3 × size  +  0.2 × locality``.
  Local indicators are searched in name *and* description, each worth +15.

* **places** - the provider-types filter used on raw place-search results.
  It knows many more chain brands, punishes corporate words in the name,
  looks for local indicators in the name only (+20 each), and distrusts
  shouty all-caps names, single-word names and perfect ratings with almost
  no reviews.

The two disagree on the local-indicator bonus (+15 vs +20) and on how much
review volume matters below the 1000-review hard reject; ``canonical`` is the
default.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .config import DEFAULT_SCORING_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)

DEFAULT_PRESET = "canonical"

PLACES_KNOWN_CHAINS: tuple[str, ...] = (
    # Hotels & hospitality
    "marriott", "hilton", "hyatt", "holiday inn", "best western", "comfort inn",
    "doubletree", "sheraton", "westin", "radisson", "ramada", "days inn",
    "la quinta", "super 8", "motel 6", "courtyard", "residence inn", "hampton inn",
    "fairfield inn", "springhill suites", "towneplace suites", "aloft", "w hotel",
    "ritz-carlton", "four seasons", "waldorf astoria", "st. regis", "intercontinental",
    "crowne plaza", "ihg", "wyndham", "choice hotels", "red roof inn", "extended stay",
    "homewood suites", "embassy suites", "candlewood suites", "staybridge suites",
    # Fast food & restaurants
    "mcdonalds", "mcdonald's", "burger king", "wendy's", "wendys", "taco bell",
    "kfc", "pizza hut", "dominos", "domino's", "subway", "starbucks", "dunkin",
    "chipotle", "panera", "panda express", "chick-fil-a", "chickfila", "five guys",
    "shake shack", "in-n-out", "whataburger", "sonic", "arby's", "arbys",
    "popeyes", "jimmy johns", "jersey mikes", "firehouse subs", "quiznos",
    "papa johns", "papa john's", "little caesars", "buffalo wild wings", "applebees",
    "applebee's", "chilis", "chili's", "olive garden", "red lobster", "outback",
    "texas roadhouse", "longhorn steakhouse", "cracker barrel", "ihop", "denny's",
    "cheesecake factory", "california pizza kitchen", "pf changs", "pf chang's",
    "yard house", "twin peaks", "hooters", "tilted kilt", "bdubs", "wing stop",
    # Retail
    "walmart", "target", "costco", "best buy", "home depot", "lowes", "lowe's",
    "walgreens", "cvs", "rite aid", "kroger", "safeway", "albertsons", "publix",
    "whole foods", "trader joes", "trader joe's", "aldi", "7-eleven", "circle k",
    "shell", "exxon", "chevron", "bp", "mobil", "texaco", "sunoco",
    "old navy", "gap", "banana republic", "h&m", "zara", "forever 21", "uniqlo",
    "macys", "macy's", "nordstrom", "kohls", "kohl's", "jcpenney", "sears",
    "dillards", "dillard's", "neiman marcus", "saks", "bloomingdales", "bloomingdale's",
    # Coffee
    "dunkin donuts", "tim hortons", "peets", "peet's coffee",
    "caribou coffee", "dutch bros", "costa coffee", "second cup",
    # Gyms & fitness
    "planet fitness", "la fitness", "24 hour fitness", "gold's gym", "golds gym",
    "anytime fitness", "snap fitness", "crunch fitness", "equinox", "lifetime fitness",
    "orangetheory", "pure barre", "soulcycle", "barry's bootcamp", "barrys bootcamp",
    # Banks
    "bank of america", "chase bank", "wells fargo", "citibank", "us bank", "pnc bank",
    "capital one", "td bank", "fifth third", "regions bank", "suntrust", "bb&t",
    # Pharmacies
    "walmart pharmacy", "kroger pharmacy",
    # Other
    "amc theaters", "regal cinemas", "cinemark", "tj maxx", "marshalls", "ross",
    "dollar tree", "dollar general", "family dollar", "big lots", "harbor freight",
    "autozone", "advance auto", "o'reilly", "o'reilly auto", "pep boys", "napa",
)

PLACES_CHAIN_INDICATORS: tuple[str, ...] = (
    "hotel", "inn", "suites", "lodge", "resort", "motel",
    "corporate", "llc", "inc", "corporation", "group",
    "international", "worldwide", "global", "enterprises",
    "franchise", "franchisee", "chain",
)

PLACES_LOCAL_INDICATORS: tuple[str, ...] = (
    "family", "owned", "local", "neighborhood", "community",
    "homemade", "artisan", "craft", "boutique", "indie",
    "mom and pop", "small batch", "handcrafted", "authentic",
    "original", "established", "since", "traditional",
    "house", "kitchen", "shop", "studio", "parlor",
)

PRESETS: dict[str, dict[str, Any]] = {
    "canonical": {
        "label": "Composite LBAI (default)",
        "description": "Chain, size and locality sub-scores over name and description",
        "config": DEFAULT_SCORING_CONFIG,
    },
    "places": {
        "label": "Provider-types filter",
        "description": "Name-centric heuristics tuned for raw place-search results",
        "config": replace(
            DEFAULT_SCORING_CONFIG,
            known_chains=PLACES_KNOWN_CHAINS,
            description_chain_indicators=(),
            name_chain_indicators=PLACES_CHAIN_INDICATORS,
            name_chain_penalty=15,
            local_indicators=PLACES_LOCAL_INDICATORS,
            local_indicator_bonus=20,
            local_indicators_in_description=False,
            possessive_patterns=("'s ", "s' "),
            possessive_bonus=10,
            street_level_requires_address=True,
            all_caps_penalty=10,
            single_word_penalty=5,
            perfect_rating_penalty=5,
        ),
    },
}


def get_preset(name: str = DEFAULT_PRESET) -> ScoringConfig:
    """Return the ScoringConfig for *name*, falling back to ``canonical``."""
    preset = PRESETS.get(name)
    if preset is None:
        logger.warning("Unknown scoring preset %r, using %r", name, DEFAULT_PRESET)
        preset = PRESETS[DEFAULT_PRESET]
    return preset["config"]


def list_presets() -> dict[str, str]:
    return {name: preset["label"] for name, preset in PRESETS.items()}
