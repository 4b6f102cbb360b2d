# Map-facing shapes handed to whatever draws the route.
# Everything here is (lat, lon) ordered, the opposite of the directions API.

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple


LatLon = Tuple[float, float]


@dataclass(frozen=True)
class MapMarker:
    title: str
    lat: float
    lon: float


@dataclass(frozen=True)
class MapOverlay:
    polyline: List[LatLon]
    distance_m: float
    duration_s: float
    origin: Optional[MapMarker] = None
    destination: Optional[MapMarker] = None
    color: str = "#FF0000"
