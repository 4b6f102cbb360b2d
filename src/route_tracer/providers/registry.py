from __future__ import annotations

from route_tracer.providers.base import DirectionsProvider


def build_provider(provider_str: str) -> DirectionsProvider:
    """
    Build a directions provider from a CLI/API token:
      "ors"  -> openrouteservice over HTTP
      "mock" -> deterministic straight-line route, no network
    """
    t = (provider_str or "ors").strip().lower()

    # Local imports to avoid circular imports
    from route_tracer.providers.mock import MockDirectionsProvider
    from route_tracer.providers.ors import OpenRouteServiceProvider

    if t in ("ors", "openrouteservice"):
        return OpenRouteServiceProvider()
    if t == "mock":
        return MockDirectionsProvider()
    raise ValueError(f"Unknown provider token: '{t}' (supported: ors, mock)")
