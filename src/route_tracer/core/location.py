from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from route_tracer.core.models import Coordinate


class LocationProvider(ABC):
    """Supplies the device's current position on demand."""

    @abstractmethod
    def current_location(self) -> Optional[Coordinate]:
        """Return the current fix, or None when there is no permission or fix."""
        raise NotImplementedError


class StaticLocationProvider(LocationProvider):
    """Fixed position (or none at all), e.g. from ``--here`` on the CLI."""

    def __init__(self, coordinate: Optional[Coordinate] = None):
        self.coordinate = coordinate

    def current_location(self) -> Optional[Coordinate]:
        return self.coordinate


def destination_from_location(location: LocationProvider) -> Optional[str]:
    """Current position as destination text, or None when unavailable."""
    here = location.current_location()
    if here is None:
        return None
    return here.to_query()
