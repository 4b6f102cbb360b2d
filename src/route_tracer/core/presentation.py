"""Turn a RouteResult (or a RouteError) into something a user can look at."""
from __future__ import annotations

from typing import Optional

from route_tracer.contracts.route_contract import MapMarker, MapOverlay
from route_tracer.core.models import Coordinate, RouteResult
from route_tracer.errors import (
    EmptyRoute,
    InvalidCoordinate,
    MalformedResponse,
    NetworkError,
    RemoteError,
    RouteError,
)


def _marker(title: str, c: Optional[Coordinate]) -> Optional[MapMarker]:
    if c is None:
        return None
    return MapMarker(title=title, lat=c.lat, lon=c.lon)


def to_map_overlay(
    result: RouteResult,
    origin: Optional[Coordinate] = None,
    destination: Optional[Coordinate] = None,
) -> MapOverlay:
    """Swap every point to (lat, lon) and attach origin/destination markers."""
    return MapOverlay(
        polyline=result.lat_lon_points,
        distance_m=result.distance_m,
        duration_s=result.duration_s,
        origin=_marker("Origin (Home)", origin),
        destination=_marker("Destination", destination),
    )


def format_distance(meters: float) -> str:
    if meters < 1000:
        return f"{meters:.0f} m"
    return f"{meters / 1000:.1f} km"


def format_duration(seconds: float) -> str:
    minutes = int(round(seconds / 60.0))
    if minutes < 60:
        return f"{minutes} min"
    return f"{minutes // 60} h {minutes % 60:02d} min"


def describe_failure(exc: RouteError) -> str:
    """One user-facing sentence per failure kind."""
    if isinstance(exc, InvalidCoordinate):
        if exc.text is None or not exc.text.strip():
            return f"Please fill in the {exc.field} coordinate (longitude,latitude)."
        return f"The {exc.field} coordinate '{exc.text}' is not valid: {exc.reason}."
    if isinstance(exc, NetworkError):
        return "Could not reach the directions service. Check your connection and try again."
    if isinstance(exc, RemoteError):
        if exc.status_code in (401, 403):
            return "The directions service rejected the API key."
        return f"The directions service failed (HTTP {exc.status_code})."
    if isinstance(exc, EmptyRoute):
        return "No route was found between those points."
    if isinstance(exc, MalformedResponse):
        return "The directions service sent a response we could not read."
    return str(exc)
