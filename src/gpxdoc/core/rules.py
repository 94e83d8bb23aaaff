"""
gpxdoc.core.rules - Validation rules for GPX documents.

Provides boolean validity predicates for every model entity, and a
RuleEngine that reports each violated rule as a RuleViolation with a
path to the offending entity. Validation never modifies the model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from gpxdoc.core.models import (
    ExtensionField,
    GPXDocument,
    Route,
    Track,
    TrackSegment,
    Waypoint,
)

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class Severity(Enum):
    """Severity level for rule violations."""

    ERROR = "error"
    WARNING = "warning"


@dataclass
class RuleViolation:
    """
    A rule violation found during validation.

    Attributes:
        rule_name: Name of the violated rule (e.g., "waypoint.latitude")
        path: Location of the entity (e.g., "routes[0].waypoints[3]")
        message: Human-readable description of the violation
        severity: Severity level
    """

    rule_name: str
    path: str
    message: str
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        return f"{self.severity.value.upper()} [{self.rule_name}] {self.path}: {self.message}"


class RuleEngine:
    """
    Checks a document model against the GPX structural and range rules.

    Each check_* method yields violations for one entity and everything
    it owns, with paths relative to the given prefix.
    """

    def validate(self, doc: GPXDocument) -> list[RuleViolation]:
        """Return every violation in the document, in document order."""
        return list(self.check_document(doc))

    def check_document(self, doc: GPXDocument) -> Iterator[RuleViolation]:
        if not doc.namespace_uri:
            yield RuleViolation("document.namespace", "gpx", "Namespace is empty")
        if doc.version is None:
            yield RuleViolation("document.version", "gpx", "Version is not set")
        if not doc.creator:
            yield RuleViolation("document.creator", "gpx", "Creator is empty")
        for name in ("waypoints", "routes", "tracks"):
            if getattr(doc, name) is None:
                yield RuleViolation("document.structure", "gpx", f"Missing {name} collection")
                return

        for i, wpt in enumerate(doc.waypoints):
            yield from self.check_waypoint(wpt, f"waypoints[{i}]")
        for i, route in enumerate(doc.routes):
            yield from self.check_route(route, f"routes[{i}]")
        for i, track in enumerate(doc.tracks):
            yield from self.check_track(track, f"tracks[{i}]")

    def check_extension(self, ext: ExtensionField, path: str) -> Iterator[RuleViolation]:
        if not ext.name:
            yield RuleViolation("extension.name", path, "Extension name is empty")
        if not ext.value:
            yield RuleViolation("extension.value", path, f"Extension {ext.name!r} has no value")

    def check_waypoint(self, wpt: Waypoint, path: str) -> Iterator[RuleViolation]:
        if wpt.name is None:
            yield RuleViolation("waypoint.name", path, "Name is missing")
        if not _in_range(wpt.latitude, MIN_LATITUDE, MAX_LATITUDE):
            yield RuleViolation(
                "waypoint.latitude", path, f"Latitude {_show(wpt.latitude)} is not in [-90, 90]"
            )
        if not _in_range(wpt.longitude, MIN_LONGITUDE, MAX_LONGITUDE):
            yield RuleViolation(
                "waypoint.longitude",
                path,
                f"Longitude {_show(wpt.longitude)} is not in [-180, 180]",
            )
        yield from self._check_extensions(wpt.extensions, path)

    def check_segment(self, segment: TrackSegment, path: str) -> Iterator[RuleViolation]:
        if segment.waypoints is None:
            yield RuleViolation("segment.structure", path, "Missing waypoints collection")
            return
        for i, wpt in enumerate(segment.waypoints):
            yield from self.check_waypoint(wpt, f"{path}.waypoints[{i}]")

    def check_route(self, route: Route, path: str) -> Iterator[RuleViolation]:
        if route.name is None:
            yield RuleViolation("route.name", path, "Name is missing")
        if route.waypoints is None or route.extensions is None:
            yield RuleViolation("route.structure", path, "Missing route collections")
            return
        yield from self._check_extensions(route.extensions, path)
        for i, wpt in enumerate(route.waypoints):
            yield from self.check_waypoint(wpt, f"{path}.waypoints[{i}]")

    def check_track(self, track: Track, path: str) -> Iterator[RuleViolation]:
        if track.name is None:
            yield RuleViolation("track.name", path, "Name is missing")
        if track.segments is None or track.extensions is None:
            yield RuleViolation("track.structure", path, "Missing track collections")
            return
        for i, segment in enumerate(track.segments):
            yield from self.check_segment(segment, f"{path}.segments[{i}]")
        yield from self._check_extensions(track.extensions, path)

    def _check_extensions(
        self, extensions: Optional[list[ExtensionField]], path: str
    ) -> Iterator[RuleViolation]:
        if extensions is None:
            yield RuleViolation("extension.structure", path, "Missing extensions collection")
            return
        for i, ext in enumerate(extensions):
            yield from self.check_extension(ext, f"{path}.extensions[{i}]")


def _in_range(value, low: float, high: float) -> bool:
    return value is not None and low <= value <= high


def _show(value) -> str:
    return "unset" if value is None else f"{value:g}"


def _clean(violations: Iterator[RuleViolation]) -> bool:
    return next(violations, None) is None


def is_valid_extension(ext: ExtensionField) -> bool:
    return _clean(RuleEngine().check_extension(ext, "extension"))


def is_valid_waypoint(wpt: Waypoint) -> bool:
    return _clean(RuleEngine().check_waypoint(wpt, "waypoint"))


def is_valid_segment(segment: TrackSegment) -> bool:
    return _clean(RuleEngine().check_segment(segment, "segment"))


def is_valid_route(route: Route) -> bool:
    return _clean(RuleEngine().check_route(route, "route"))


def is_valid_track(track: Track) -> bool:
    return _clean(RuleEngine().check_track(track, "track"))


def is_valid_document(doc: GPXDocument) -> bool:
    """True when the document and everything it owns pass every rule."""
    return _clean(RuleEngine().check_document(doc))
