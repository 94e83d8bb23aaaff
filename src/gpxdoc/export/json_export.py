"""JSON summaries of GPX documents, routes, tracks, and waypoints.

Output is compact JSON with a fixed key order. Lengths are rounded to
the nearest 10 meters and written with one decimal; coordinates are
written with six decimals. Unnamed entities are reported as "None".
"""

from __future__ import annotations

import json
import math
from typing import Iterable, Optional

from gpxdoc.core.geodesy import (
    DEFAULT_LOOP_TOLERANCE,
    is_loop_route,
    is_loop_track,
    round10,
    route_length,
    track_length,
)
from gpxdoc.core.models import GPXDocument, Route, Track, Waypoint

UNNAMED = "None"


def _string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _fixed(value: Optional[float], places: int) -> str:
    if value is None or not math.isfinite(value):
        return "null"
    return f"{value:.{places}f}"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _object(fields: Iterable[tuple[str, str]]) -> str:
    """Join pre-rendered JSON values into an object, keeping field order."""
    return "{" + ",".join(f"{_string(key)}:{value}" for key, value in fields) + "}"


def _array(items: Iterable[str]) -> str:
    return "[" + ",".join(items) + "]"


def document_to_json(doc: GPXDocument) -> str:
    return _object(
        [
            ("version", _fixed(doc.version, 1)),
            ("creator", _string(doc.creator)),
            ("numWaypoints", str(doc.num_waypoints)),
            ("numRoutes", str(doc.num_routes)),
            ("numTracks", str(doc.num_tracks)),
        ]
    )


def route_to_json(route: Route, loop_tolerance: float = DEFAULT_LOOP_TOLERANCE) -> str:
    return _object(
        [
            ("name", _string(route.name or UNNAMED)),
            ("numPoints", str(route.num_waypoints)),
            ("len", _fixed(round10(route_length(route)), 1)),
            ("loop", _bool(is_loop_route(route, loop_tolerance))),
        ]
    )


def track_to_json(track: Track, loop_tolerance: float = DEFAULT_LOOP_TOLERANCE) -> str:
    return _object(
        [
            ("name", _string(track.name or UNNAMED)),
            ("len", _fixed(round10(track_length(track)), 1)),
            ("loop", _bool(is_loop_track(track, loop_tolerance))),
        ]
    )


def waypoint_to_json(wpt: Waypoint) -> str:
    return _object(
        [
            ("name", _string(wpt.name or UNNAMED)),
            ("latitude", _fixed(wpt.latitude, 6)),
            ("longitude", _fixed(wpt.longitude, 6)),
        ]
    )


def route_list_to_json(
    routes: Optional[Iterable[Route]], loop_tolerance: float = DEFAULT_LOOP_TOLERANCE
) -> str:
    return _array(route_to_json(route, loop_tolerance) for route in routes or ())


def track_list_to_json(
    tracks: Optional[Iterable[Track]], loop_tolerance: float = DEFAULT_LOOP_TOLERANCE
) -> str:
    return _array(track_to_json(track, loop_tolerance) for track in tracks or ())


def waypoint_list_to_json(waypoints: Optional[Iterable[Waypoint]]) -> str:
    return _array(waypoint_to_json(wpt) for wpt in waypoints or ())


def routes_with_points_to_json(
    doc: GPXDocument, loop_tolerance: float = DEFAULT_LOOP_TOLERANCE
) -> str:
    """Route summaries plus each route's points keyed wpts1, wpts2, ...

    Example:
        {"routes":[{"name":"A",...}],"points":{"wpts1":[{"name":"p",...}]}}
    """
    points = _object(
        (f"wpts{index}", waypoint_list_to_json(route.waypoints))
        for index, route in enumerate(doc.routes, start=1)
    )
    return _object(
        [
            ("routes", route_list_to_json(doc.routes, loop_tolerance)),
            ("points", points),
        ]
    )
