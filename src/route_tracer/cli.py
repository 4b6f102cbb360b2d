from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from route_tracer.config import settings
from route_tracer.core.home import build_home_store, ensure_home
from route_tracer.core.location import StaticLocationProvider, destination_from_location
from route_tracer.core.models import RouteResult, parse_coordinate
from route_tracer.core.presentation import describe_failure, format_distance, format_duration
from route_tracer.core.service import RouteRequestService
from route_tracer.errors import RouteError
from route_tracer.providers.registry import build_provider

MAX_ROWS = 20

# Flags whose value is "<lon>,<lat>" and may start with "-"
COORDINATE_FLAGS = ("--origin", "--destination", "--here", "--set-home")


def _glue_coordinate_values(argv: List[str]) -> List[str]:
    """
    Rewrite ``--origin -101.1,20.1`` as ``--origin=-101.1,20.1``.

    argparse only treats plain negative numbers as values; a negative
    longitude followed by a comma looks like an option to it.
    """
    out: List[str] = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        if tok in COORDINATE_FLAGS and i + 1 < len(argv) and argv[i + 1].startswith("-") and "," in argv[i + 1]:
            out.append(f"{tok}={argv[i + 1]}")
            i += 2
            continue
        out.append(tok)
        i += 1
    return out


def _save_json(path: Path, obj) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")


def _points_table(result: RouteResult, title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Lon")
    table.add_column("Lat")

    pts = result.points
    # Long polylines: show the head and tail only
    if len(pts) > MAX_ROWS:
        half = MAX_ROWS // 2
        shown = list(enumerate(pts))[:half] + [(None, None)] + list(enumerate(pts))[-half:]
    else:
        shown = list(enumerate(pts))

    for i, p in shown:
        if p is None:
            table.add_row("…", "…", "…")
            continue
        table.add_row(str(i), f"{p.lon:.6f}", f"{p.lat:.6f}")
    return table


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Trace a driving route between two lon,lat points")
    ap.add_argument("--origin", help="'<lon>,<lat>'; defaults to the saved home")
    ap.add_argument("--destination", help="'<lon>,<lat>'")
    ap.add_argument("--here", help="Current location '<lon>,<lat>' (stands in for the device fix)")
    ap.add_argument("--destination-here", action="store_true", help="Use --here as the destination")
    ap.add_argument("--set-home", help="Save '<lon>,<lat>' as the home coordinate")
    ap.add_argument("--api-key", default=None, help="openrouteservice key (default: ROUTE_TRACER_ORS_API_KEY)")
    ap.add_argument("--provider", default="ors", choices=["ors", "mock"])
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args(_glue_coordinate_values(list(sys.argv[1:] if argv is None else argv)))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [route-tracer] %(levelname)s %(message)s",
    )

    console = Console()

    try:
        store = build_home_store()
        here = parse_coordinate(args.here, field="here") if args.here else None
        location = StaticLocationProvider(here)

        if args.set_home:
            home = store.set_home(args.set_home)
            console.print(f"Home coordinate saved: {home}")
            if not (args.destination or args.destination_here):
                return
        else:
            # First run: adopt the current location as home
            home = ensure_home(store, location)

        destination = args.destination
        if args.destination_here:
            destination = destination_from_location(location)

        origin = args.origin or home
        service = RouteRequestService(build_provider(args.provider))
        result = service.get_route(origin, destination, args.api_key)
    except RouteError as e:
        console.print(f"[red]{escape(describe_failure(e))}[/red]")
        raise SystemExit(1)

    console.print(_points_table(result, f"Route {origin} -> {destination}"))
    console.print(
        f"Distance: {format_distance(result.distance_m)}  "
        f"Duration: {format_duration(result.duration_s)}  "
        f"Points: {len(result.points)}"
    )

    if args.debug:
        out = Path("traces") / "last_route.json"
        _save_json(out, result.model_dump())
        console.print(f"Saved: {out.resolve()}")


if __name__ == "__main__":
    main()
