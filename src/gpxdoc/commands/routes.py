"""
gpxdoc.commands.routes - List routes and tracks as JSON.

Handles the routes, tracks, and between commands.
"""

from __future__ import annotations

import argparse

from gpxdoc.core.geodesy import routes_between, tracks_between
from gpxdoc.core.loader import read_document
from gpxdoc.export.json_export import (
    route_list_to_json,
    routes_with_points_to_json,
    track_list_to_json,
)


def _loop_tolerance(config: dict) -> float:
    return float(config.get("analytics", {}).get("loop_tolerance", 10.0))


def run_routes(args: argparse.Namespace, config: dict) -> int:
    doc = read_document(args.file)
    if args.points:
        print(routes_with_points_to_json(doc, _loop_tolerance(config)))
    else:
        print(route_list_to_json(doc.routes, _loop_tolerance(config)))
    return 0


def run_tracks(args: argparse.Namespace, config: dict) -> int:
    doc = read_document(args.file)
    print(track_list_to_json(doc.tracks, _loop_tolerance(config)))
    return 0


def run_between(args: argparse.Namespace, config: dict) -> int:
    """Print routes (or tracks) connecting the two points.

    Returns 1 when nothing connects them.
    """
    doc = read_document(args.file)
    tolerance = args.tolerance
    if tolerance is None:
        tolerance = float(config.get("analytics", {}).get("between_tolerance", 10.0))

    points = (args.src_lat, args.src_lon, args.dest_lat, args.dest_lon, tolerance)
    if args.tracks:
        matches = tracks_between(doc, *points)
        print(track_list_to_json(matches, _loop_tolerance(config)))
    else:
        matches = routes_between(doc, *points)
        print(route_list_to_json(matches, _loop_tolerance(config)))
    return 0 if matches else 1
