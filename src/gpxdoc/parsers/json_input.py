"""Build model fragments from small JSON objects.

Accepted shapes:
    document: {"version": 1.1, "creator": "app"}
    waypoint: {"lat": 43.5, "lon": -80.2}
    route:    {"name": "Loop"}
"""

from __future__ import annotations

import json
import math
from typing import Any, Optional

from gpxdoc.core.builder import parse_number
from gpxdoc.core.models import DEFAULT_NAMESPACE, GPXDocument, Route, Waypoint
from gpxdoc.errors import InvalidInputError


def _load_object(text: str, required: tuple[str, ...]) -> dict[str, Any]:
    if not text:
        raise InvalidInputError("JSON input is empty")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Malformed JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidInputError("JSON input must be an object")
    missing = [key for key in required if key not in data]
    if missing:
        raise InvalidInputError(
            f"JSON object is missing {', '.join(missing)}", details={"missing": missing}
        )
    return data


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            value = float(value)
        except OverflowError:
            return None
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        return parse_number(value)
    return None


def document_from_json(text: str, namespace_uri: str = DEFAULT_NAMESPACE) -> GPXDocument:
    """Create an empty document from a version/creator object."""
    data = _load_object(text, ("version", "creator"))
    return GPXDocument(
        namespace_uri=namespace_uri,
        version=_number(data["version"]),
        creator=str(data["creator"]),
    )


def waypoint_from_json(text: str) -> Waypoint:
    """Create an unnamed waypoint from a lat/lon object."""
    data = _load_object(text, ("lat", "lon"))
    return Waypoint(latitude=_number(data["lat"]), longitude=_number(data["lon"]))


def route_from_json(text: str) -> Route:
    """Create an empty route from a name object."""
    data = _load_object(text, ("name",))
    return Route(name=str(data["name"] or ""))
