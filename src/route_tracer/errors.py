"""Failure taxonomy for the route-acquisition workflow.

Every failure is raised to the immediate caller. Only the presentation layer
(``api.py``, ``cli.py``) turns these into user-visible messages.
"""
from __future__ import annotations

from typing import Optional


class RouteError(Exception):
    """Base class for every failure ``RouteRequestService`` can raise."""

    kind = "route_error"


class InvalidCoordinate(RouteError):
    """Coordinate text is empty, malformed or out of range."""

    kind = "invalid_coordinate"

    def __init__(self, field: str, text: Optional[str], reason: str):
        self.field = field
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid {field} coordinate {text!r}: {reason}")


class NetworkError(RouteError):
    """Transport failure: timeout, DNS, connection reset."""

    kind = "network_error"


class RemoteError(RouteError):
    """The directions service answered with a non-2xx status."""

    kind = "remote_error"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Directions service returned HTTP {status_code}: {body[:200]}")


class EmptyRoute(RouteError):
    """The response parsed but contained zero features."""

    kind = "empty_route"

    def __init__(self, message: str = "Directions service returned no route"):
        super().__init__(message)


class MalformedResponse(RouteError):
    """The response body is not JSON or does not match the route schema."""

    kind = "malformed_response"
