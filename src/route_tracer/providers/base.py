from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from route_tracer.core.models import RouteRequest


class DirectionsProvider(ABC):
    """Fetch a raw directions response (decoded JSON) for one request."""

    @abstractmethod
    def get_directions(self, request: RouteRequest) -> Dict[str, Any]:
        raise NotImplementedError
