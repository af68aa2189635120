from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class EngineConfig:
    preset: str = os.getenv("LOCAL_DISCOVERY_PRESET", "canonical")
    max_provider_queries: int = int(os.getenv("LOCAL_DISCOVERY_MAX_PROVIDER_QUERIES", "5"))
    max_pair_distance: float = float(os.getenv("LOCAL_DISCOVERY_MAX_PAIR_DISTANCE", "0.5"))
    max_route_distance: float = float(os.getenv("LOCAL_DISCOVERY_MAX_ROUTE_DISTANCE", "1.0"))


DEFAULT_ENGINE_CONFIG = EngineConfig()
