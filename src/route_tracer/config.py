"""Centralized settings for route-tracer."""
from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "ROUTE_TRACER_"}

    # openrouteservice
    ors_base_url: str = "https://api.openrouteservice.org"
    ors_api_key: str = ""             # empty means callers must pass one
    profile: str = "driving-car"
    timeout_s: float = 10.0           # bound on a single directions call
    user_agent: str = "RouteTracer/0.1.0"

    # Home preference store — empty redis_url means JSON file fallback
    redis_url: str = ""
    home_key: str = "origin_coordinates"
    home_file: str = "~/.route_tracer/prefs.json"

    # Mock provider cruising speed for the fake duration
    mock_speed_kmh: float = 40.0

    log_level: str = "INFO"


settings = Settings()
