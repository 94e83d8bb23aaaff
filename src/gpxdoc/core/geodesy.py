"""Geodesic analytics over the GPX document model.

Distances are great-circle distances on a spherical Earth computed with
the haversine formula. Inputs are decimal degrees; outputs are meters.

Lengths skip waypoints whose latitude or longitude is unset. Loop and
endpoint checks use the first and last waypoint as they are; when either
has no position the check fails.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from gpxdoc.core.models import GPXDocument, Route, Track, Waypoint

EARTH_MEAN_RADIUS = 6371e3

MIN_LOOP_WAYPOINTS = 4

# Loop tolerance in meters for the loop flag of JSON summaries.
DEFAULT_LOOP_TOLERANCE = 10.0


def distance(src_lat: float, src_lon: float, dest_lat: float, dest_lon: float) -> float:
    """Great-circle distance in meters between two points."""
    src_lat_rad = math.radians(src_lat)
    dest_lat_rad = math.radians(dest_lat)
    delta_lat = math.radians(dest_lat - src_lat)
    delta_lon = math.radians(dest_lon - src_lon)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(src_lat_rad) * math.cos(dest_lat_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_MEAN_RADIUS * c


def waypoint_distance(first: Waypoint, second: Waypoint) -> float:
    return distance(first.latitude, first.longitude, second.latitude, second.longitude)


def round10(length: float) -> float:
    """Round a length to the nearest 10 meters, halves rounding up."""
    return float(int((length + 5) / 10) * 10)


def _positioned(waypoints: Iterable[Waypoint]) -> list[Waypoint]:
    return [wpt for wpt in waypoints if wpt.has_position]


def path_length(waypoints: Iterable[Waypoint]) -> float:
    """Sum of the distances between consecutive waypoints."""
    points = _positioned(waypoints)
    return sum(waypoint_distance(a, b) for a, b in zip(points, points[1:]))


def route_length(route: Route) -> float:
    return path_length(route.waypoints)


def track_length(track: Track) -> float:
    """Length of a track walked as one polyline across all of its segments."""
    return path_length(track.iter_waypoints())


def _is_loop(waypoints: Iterable[Waypoint], tolerance: float) -> bool:
    if tolerance < 0:
        return False
    points = list(waypoints)
    if len(points) < MIN_LOOP_WAYPOINTS:
        return False
    ends = _endpoints(points)
    return ends is not None and waypoint_distance(*ends) <= tolerance


def is_loop_route(route: Route, tolerance: float) -> bool:
    """True when the route has 4+ points and its ends are within tolerance meters."""
    return _is_loop(route.waypoints, tolerance)


def is_loop_track(track: Track, tolerance: float) -> bool:
    """True when the track has 4+ points in total and its ends are within tolerance."""
    return _is_loop(track.iter_waypoints(), tolerance)


def count_routes_near(doc: GPXDocument, length: float, tolerance: float) -> int:
    """Number of routes whose length is within tolerance of the given length."""
    if length < 0 or tolerance < 0:
        return 0
    return sum(1 for route in doc.routes if abs(route_length(route) - length) <= tolerance)


def count_tracks_near(doc: GPXDocument, length: float, tolerance: float) -> int:
    """Number of tracks whose length is within tolerance of the given length."""
    if length < 0 or tolerance < 0:
        return 0
    return sum(1 for track in doc.tracks if abs(track_length(track) - length) <= tolerance)


def _endpoints(waypoints: Iterable[Waypoint]) -> Optional[tuple[Waypoint, Waypoint]]:
    """First and last waypoint, or None when either is missing or has no position."""
    points = list(waypoints)
    if not points:
        return None
    first, last = points[0], points[-1]
    if not (first.has_position and last.has_position):
        return None
    return first, last


def _connects(
    waypoints: Iterable[Waypoint],
    src_lat: float,
    src_lon: float,
    dest_lat: float,
    dest_lon: float,
    tolerance: float,
) -> bool:
    ends = _endpoints(waypoints)
    if ends is None:
        return False
    first, last = ends
    return (
        distance(src_lat, src_lon, first.latitude, first.longitude) <= tolerance
        and distance(dest_lat, dest_lon, last.latitude, last.longitude) <= tolerance
    )


def routes_between(
    doc: GPXDocument,
    src_lat: float,
    src_lon: float,
    dest_lat: float,
    dest_lon: float,
    tolerance: float,
) -> list[Route]:
    """Routes that start near the source point and end near the destination.

    The returned list refers to the document's own Route objects. An
    empty list means no route qualified.
    """
    return [
        route
        for route in doc.routes
        if _connects(route.waypoints, src_lat, src_lon, dest_lat, dest_lon, tolerance)
    ]


def tracks_between(
    doc: GPXDocument,
    src_lat: float,
    src_lon: float,
    dest_lat: float,
    dest_lon: float,
    tolerance: float,
) -> list[Track]:
    """Tracks that start near the source point and end near the destination."""
    return [
        track
        for track in doc.tracks
        if _connects(track.iter_waypoints(), src_lat, src_lon, dest_lat, dest_lon, tolerance)
    ]
