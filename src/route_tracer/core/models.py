from __future__ import annotations

import math
import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, field_validator

from route_tracer.errors import InvalidCoordinate

# Plain ASCII decimal, optional exponent; no "1_0", no non-ASCII digits
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class Coordinate(BaseModel):
    """A (longitude, latitude) pair, in that order, as the directions API uses it."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lon: float = Field(ge=-180.0, le=180.0)
    lat: float = Field(ge=-90.0, le=90.0)

    def to_query(self) -> str:
        """Render as ``"<lon>,<lat>"``; ``repr`` keeps the shortest exact float text."""
        return f"{self.lon!r},{self.lat!r}"

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lon, self.lat)

    def as_lat_lon(self) -> Tuple[float, float]:
        # map widgets want (lat, lon)
        return (self.lat, self.lon)


def parse_coordinate(text: Optional[str], field: str = "coordinate") -> Coordinate:
    """
    Parse ``"<lon>,<lat>"`` into a Coordinate.

    Whitespace around either number is tolerated. Raises InvalidCoordinate
    naming *field* for empty text, a missing/extra comma, non-numeric parts,
    non-finite values or values outside the geographic range.
    """
    if text is None or not text.strip():
        raise InvalidCoordinate(field, text, "value is empty")

    parts = text.split(",")
    if len(parts) != 2:
        raise InvalidCoordinate(field, text, "expected '<lon>,<lat>'")

    lon_text, lat_text = parts[0].strip(), parts[1].strip()
    if not (_NUMBER_RE.fullmatch(lon_text) and _NUMBER_RE.fullmatch(lat_text)):
        raise InvalidCoordinate(field, text, "longitude and latitude must be numbers")
    lon = float(lon_text)
    lat = float(lat_text)

    if not (math.isfinite(lon) and math.isfinite(lat)):
        raise InvalidCoordinate(field, text, "longitude and latitude must be finite")
    if not -180.0 <= lon <= 180.0:
        raise InvalidCoordinate(field, text, "longitude must be within [-180, 180]")
    if not -90.0 <= lat <= 90.0:
        raise InvalidCoordinate(field, text, "latitude must be within [-90, 90]")

    return Coordinate(lon=lon, lat=lat)


class RouteRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    origin: Coordinate
    destination: Coordinate
    api_key: str = Field(repr=False)


class RouteResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    points: List[Coordinate] = Field(min_length=2)
    distance_m: float = Field(ge=0.0)
    duration_s: float = Field(ge=0.0)

    @property
    def lat_lon_points(self) -> List[Tuple[float, float]]:
        return [p.as_lat_lon() for p in self.points]


# ---------------------------------------------------------------------------
# openrouteservice GeoJSON response (only the fields we read)
# ---------------------------------------------------------------------------

class RouteSummary(BaseModel):
    """
    Route totals. ORS leaves out both keys when start == end, so a missing
    value reads as 0 rather than failing as a malformed body.
    """

    distance: StrictFloat = Field(default=0.0, ge=0.0)
    duration: StrictFloat = Field(default=0.0, ge=0.0)


class RouteProperties(BaseModel):
    summary: RouteSummary


class RouteGeometry(BaseModel):
    coordinates: List[List[StrictFloat]]

    @field_validator("coordinates")
    @classmethod
    def _lon_lat_pairs(cls, v: List[List[float]]) -> List[List[float]]:
        for pos in v:
            if len(pos) < 2:
                raise ValueError("each position needs at least [lon, lat]")
        return v


class RouteFeature(BaseModel):
    geometry: RouteGeometry
    properties: RouteProperties


class RouteResponse(BaseModel):
    features: List[RouteFeature]
