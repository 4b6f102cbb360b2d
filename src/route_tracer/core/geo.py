"""Small spherical helpers used by the mock provider."""
from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import List

from route_tracer.core.models import Coordinate


def haversine_m(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in metres between two WGS-84 points."""
    R = 6_371_000.0  # Earth radius in metres
    lat1r, lon1r, lat2r, lon2r = map(radians, [a.lat, a.lon, b.lat, b.lon])
    dlat = lat2r - lat1r
    dlon = lon2r - lon1r
    h = sin(dlat / 2) ** 2 + cos(lat1r) * cos(lat2r) * sin(dlon / 2) ** 2
    return R * 2 * atan2(sqrt(h), sqrt(1 - h))


def interpolate(a: Coordinate, b: Coordinate, segments: int) -> List[Coordinate]:
    """
    Linear interpolation from *a* to *b* inclusive, ``segments + 1`` points.

    Fine for the short hops the mock provider draws; not a geodesic.
    """
    segments = max(1, segments)
    out: List[Coordinate] = [a]
    for i in range(1, segments):
        frac = i / segments
        out.append(
            Coordinate(
                lon=a.lon + frac * (b.lon - a.lon),
                lat=a.lat + frac * (b.lat - a.lat),
            )
        )
    out.append(b)
    return out
