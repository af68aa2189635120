from __future__ import annotations

import math

import numpy as np

EARTH_RADIUS_MILES = 3959.0


def distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance in miles between two points.

    Callers must reject missing or NaN coordinates first.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    a = min(1.0, a)
    return 2 * EARTH_RADIUS_MILES * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distances_from(
    lat: float,
    lon: float,
    lats: np.ndarray | list[float],
    lons: np.ndarray | list[float],
) -> np.ndarray:
    """Vectorised ``distance_miles`` from one point to many."""
    lats = np.asarray(lats, dtype=float)
    lons = np.asarray(lons, dtype=float)
    if lats.size == 0:
        return np.zeros(0)

    d_lat = np.radians(lats - lat)
    d_lon = np.radians(lons - lon)

    a = (
        np.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat)) * np.cos(np.radians(lats)) * np.sin(d_lon / 2) ** 2
    )
    # Rounding can push a past 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    return 2 * EARTH_RADIUS_MILES * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
