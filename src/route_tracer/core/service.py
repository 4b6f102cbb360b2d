from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from route_tracer.config import settings
from route_tracer.core.home import HomeStore
from route_tracer.core.models import (
    Coordinate,
    RouteRequest,
    RouteResponse,
    RouteResult,
    parse_coordinate,
)
from route_tracer.errors import EmptyRoute, InvalidCoordinate, MalformedResponse
from route_tracer.providers.base import DirectionsProvider
from route_tracer.providers.registry import build_provider

log = logging.getLogger(__name__)


def route_from_response(data: Dict[str, Any]) -> RouteResult:
    """
    Normalize a directions response into a RouteResult.

    Only the first feature is used; alternates are ignored. Coordinates keep
    the service's [lon, lat] order.
    """
    try:
        parsed = RouteResponse.model_validate(data)
    except ValidationError as e:
        raise MalformedResponse(f"Unexpected directions response: {e}") from e

    if not parsed.features:
        raise EmptyRoute()

    feature = parsed.features[0]
    try:
        return RouteResult(
            points=[Coordinate(lon=pos[0], lat=pos[1]) for pos in feature.geometry.coordinates],
            distance_m=feature.properties.summary.distance,
            duration_s=feature.properties.summary.duration,
        )
    except ValidationError as e:
        raise MalformedResponse(f"Unusable route geometry: {e}") from e


class RouteRequestService:
    """
    Turn two ``"<lon>,<lat>"`` strings into a route, or fail with a RouteError.

    Stateless apart from its provider, so one instance can serve concurrent
    callers. Nothing is retried or cached.
    """

    def __init__(
        self,
        provider: Optional[DirectionsProvider] = None,
        default_api_key: Optional[str] = None,
    ):
        self.provider = provider or build_provider("ors")
        self.default_api_key = settings.ors_api_key if default_api_key is None else default_api_key

    def build_request(
        self, origin_text: Optional[str], destination_text: Optional[str], api_key: Optional[str] = None
    ) -> RouteRequest:
        origin = parse_coordinate(origin_text, field="origin")
        destination = parse_coordinate(destination_text, field="destination")
        return RouteRequest(
            origin=origin,
            destination=destination,
            api_key=api_key or self.default_api_key,
        )

    def get_route(
        self, origin_text: Optional[str], destination_text: Optional[str], api_key: Optional[str] = None
    ) -> RouteResult:
        request = self.build_request(origin_text, destination_text, api_key)
        data = self.provider.get_directions(request)
        result = route_from_response(data)
        log.info(
            "Route %s -> %s: %d points, %.0f m, %.0f s",
            request.origin.to_query(),
            request.destination.to_query(),
            len(result.points),
            result.distance_m,
            result.duration_s,
        )
        return result

    async def get_route_async(
        self, origin_text: Optional[str], destination_text: Optional[str], api_key: Optional[str] = None
    ) -> RouteResult:
        """``get_route`` on a worker thread so an event loop is never blocked."""
        return await asyncio.to_thread(self.get_route, origin_text, destination_text, api_key)

    def trace_from_home(
        self, destination_text: Optional[str], home_store: HomeStore, api_key: Optional[str] = None
    ) -> RouteResult:
        """Route from the saved home coordinate to *destination_text*."""
        home = home_store.get_home()
        if home is None:
            raise InvalidCoordinate("origin", None, "no home coordinate saved")
        return self.get_route(home, destination_text, api_key)
