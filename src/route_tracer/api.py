"""FastAPI backend for the route-tracer workflow."""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from route_tracer.contracts.route_contract import MapMarker
from route_tracer.core.home import HomeStore, build_home_store
from route_tracer.core.models import RouteResult
from route_tracer.core.presentation import describe_failure, format_distance, format_duration, to_map_overlay
from route_tracer.core.service import RouteRequestService
from route_tracer.errors import (
    EmptyRoute,
    InvalidCoordinate,
    MalformedResponse,
    NetworkError,
    RemoteError,
    RouteError,
)
from route_tracer.providers.registry import build_provider

log = logging.getLogger(__name__)

app = FastAPI(title="Route Tracer", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Module-level singletons (the HTTP session is reused across requests)
# ---------------------------------------------------------------------------
_service_cache: Dict[str, RouteRequestService] = {}


def get_service(provider: str = Query("ors", description="ors | mock")) -> RouteRequestService:
    if provider not in _service_cache:
        try:
            _service_cache[provider] = RouteRequestService(build_provider(provider))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    return _service_cache[provider]


def get_home_store() -> HomeStore:
    return build_home_store()


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

_STATUS_BY_ERROR = [
    (InvalidCoordinate, 422),
    (EmptyRoute, 404),
    (RemoteError, 502),
    (MalformedResponse, 502),
    (NetworkError, 504),
]


def _http_error(exc: RouteError) -> HTTPException:
    status = 500
    for err_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, err_type):
            status = code
            break
    detail = {"error": exc.kind, "message": describe_failure(exc)}
    if isinstance(exc, InvalidCoordinate):
        detail["field"] = exc.field
    if isinstance(exc, RemoteError):
        detail["upstream_status"] = exc.status_code
    return HTTPException(status_code=status, detail=detail)


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------

class MarkerOut(BaseModel):
    title: str
    lat: float
    lon: float


class RouteOut(BaseModel):
    points: List[List[float]]   # [lon, lat] as returned by the directions service
    lat_lon: List[List[float]]  # [lat, lon] ready for map widgets
    distance_m: float
    duration_s: float
    distance_text: str
    duration_text: str
    origin: Optional[MarkerOut] = None
    destination: Optional[MarkerOut] = None


class HomeIn(BaseModel):
    coordinate: str


class HomeOut(BaseModel):
    home: Optional[str] = None


def _marker_out(marker: Optional[MapMarker]) -> Optional[MarkerOut]:
    if marker is None:
        return None
    return MarkerOut(title=marker.title, lat=marker.lat, lon=marker.lon)


def _route_out(result: RouteResult) -> RouteOut:
    overlay = to_map_overlay(result, result.points[0], result.points[-1])
    return RouteOut(
        points=[[p.lon, p.lat] for p in result.points],
        lat_lon=[list(ll) for ll in overlay.polyline],
        distance_m=overlay.distance_m,
        duration_s=overlay.duration_s,
        distance_text=format_distance(overlay.distance_m),
        duration_text=format_duration(overlay.duration_s),
        origin=_marker_out(overlay.origin),
        destination=_marker_out(overlay.destination),
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
def health():
    redis_ok = False
    try:
        from route_tracer.cache.redis_client import get_redis
        r = get_redis()
        if r is not None:
            r.ping()
            redis_ok = True
    except Exception:
        pass

    return {"status": "ok", "redis": redis_ok}


@app.get("/route", response_model=RouteOut)
async def route(
    origin: str = Query(..., description="'<lon>,<lat>'"),
    destination: str = Query(..., description="'<lon>,<lat>'"),
    x_api_key: Optional[str] = Header(default=None),
    service: RouteRequestService = Depends(get_service),
):
    try:
        result = await service.get_route_async(origin, destination, x_api_key)
    except RouteError as e:
        log.info("Route request failed: %s", e.kind)
        raise _http_error(e)
    return _route_out(result)


@app.post("/route/from-home", response_model=RouteOut)
async def route_from_home(
    destination: str = Query(..., description="'<lon>,<lat>'"),
    x_api_key: Optional[str] = Header(default=None),
    service: RouteRequestService = Depends(get_service),
    store: HomeStore = Depends(get_home_store),
):
    try:
        result = await asyncio.to_thread(service.trace_from_home, destination, store, x_api_key)
    except RouteError as e:
        log.info("Route from home failed: %s", e.kind)
        raise _http_error(e)
    return _route_out(result)


@app.get("/home", response_model=HomeOut)
def get_home(store: HomeStore = Depends(get_home_store)):
    return HomeOut(home=store.get_home())


@app.put("/home", response_model=HomeOut)
def put_home(body: HomeIn, store: HomeStore = Depends(get_home_store)):
    try:
        value = store.set_home(body.coordinate)
    except InvalidCoordinate as e:
        raise _http_error(e)
    return HomeOut(home=value)
