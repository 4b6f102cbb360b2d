from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from route_tracer.config import settings
from route_tracer.core.models import RouteRequest
from route_tracer.errors import MalformedResponse, RemoteError
from route_tracer.providers.base import DirectionsProvider
from route_tracer.providers.http import HTTPClient

log = logging.getLogger(__name__)


class OpenRouteServiceProvider(DirectionsProvider):
    """
    openrouteservice directions over HTTP GET:

      {base_url}/v2/directions/{profile}?api_key=...&start=lon,lat&end=lon,lat

    The GET flavour answers with GeoJSON (``features[*].geometry.coordinates``
    in lon,lat order). One attempt per request, no retries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        profile: Optional[str] = None,
        http: Optional[HTTPClient] = None,
    ):
        self.base_url = (base_url or settings.ors_base_url).rstrip("/")
        self.profile = profile or settings.profile
        self.http = http or HTTPClient(user_agent=settings.user_agent, timeout_s=settings.timeout_s)

    @property
    def url(self) -> str:
        return f"{self.base_url}/v2/directions/{self.profile}"

    def get_directions(self, request: RouteRequest) -> Dict[str, Any]:
        params = {
            "api_key": request.api_key,
            "start": request.origin.to_query(),
            "end": request.destination.to_query(),
        }
        log.info("ORS %s start=%s end=%s", self.profile, params["start"], params["end"])
        r = self.http.get(self.url, params=params)

        if not 200 <= r.status_code < 300:
            log.warning("ORS answered HTTP %d", r.status_code)
            raise RemoteError(r.status_code, r.text)

        try:
            data = r.json()
        except ValueError as e:
            raise MalformedResponse(f"Directions response is not JSON: {e}") from e

        if not isinstance(data, dict):
            raise MalformedResponse(f"Directions response must be an object, got {type(data).__name__}")
        return data
