from __future__ import annotations

from typing import Any, Dict, Optional

from route_tracer.config import settings
from route_tracer.core.geo import haversine_m, interpolate
from route_tracer.core.models import RouteRequest
from route_tracer.providers.base import DirectionsProvider


class MockDirectionsProvider(DirectionsProvider):
    """
    Deterministic fake directions so the workflow runs end-to-end without an API key.
    Draws a straight line split into *segments* hops and prices it at a fixed speed.
    """

    def __init__(self, segments: int = 8, speed_kmh: Optional[float] = None):
        self.segments = segments
        self.speed_kmh = speed_kmh if speed_kmh is not None else settings.mock_speed_kmh

    def get_directions(self, request: RouteRequest) -> Dict[str, Any]:
        pts = interpolate(request.origin, request.destination, self.segments)
        distance = haversine_m(request.origin, request.destination)
        duration = distance / (self.speed_kmh / 3.6) if self.speed_kmh > 0 else 0.0

        return {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "LineString",
                        "coordinates": [[p.lon, p.lat] for p in pts],
                    },
                    "properties": {
                        "summary": {
                            "distance": round(distance, 1),
                            "duration": round(duration, 1),
                        }
                    },
                }
            ],
        }
