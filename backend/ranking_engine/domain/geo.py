from __future__ import annotations

import math

from .models import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    phi1, phi2 = math.radians(a.lat), math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlambda = math.radians(b.lon - a.lon)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # atan2 keeps antipodal points well defined where asin would leave its domain
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def distance_score(distance_km: float, max_distance_km: float) -> float:
    """Exponential decay from 1.0 at the user to exp(-3) near the edge, 0 beyond it."""
    if distance_km >= max_distance_km:
        return 0.0
    return math.exp(-3.0 * distance_km / max_distance_km)
