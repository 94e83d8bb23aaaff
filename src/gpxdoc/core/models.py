"""
gpxdoc.core.models - Document model for GPX data.

Provides dataclasses for the GPX document aggregate: the document root,
its free waypoints, routes, tracks, track segments, and the free-form
extension fields attached to waypoints, routes, and tracks.

Every one-to-many relation is an ordered list. Lists are appended at
the back while building and are only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

DEFAULT_NAMESPACE = "http://www.topografix.com/GPX/1/1"


def _format_number(value: Optional[float], fmt: str) -> str:
    if value is None:
        return "unset"
    return format(value, fmt)


@dataclass
class ExtensionField:
    """
    A name/value pair for a child element not modeled explicitly.

    Attributes:
        name: Tag name of the unrecognized element (e.g., "ele", "desc")
        value: Text content of the element
    """

    name: str
    value: str

    def describe(self) -> str:
        return f"\tgpxData name: {self.name} gpxData value: {self.value}\n\n"


@dataclass
class Waypoint:
    """
    A single geographic point.

    Used for free waypoints, route points, and track points alike; only
    the owning collection differs.

    Attributes:
        name: Point name ("" when unnamed)
        latitude: Decimal degrees, None when unset
        longitude: Decimal degrees, None when unset
        extensions: Unrecognized child elements, in document order
    """

    name: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    extensions: list[ExtensionField] = field(default_factory=list)

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def describe(self) -> str:
        text = (
            f"\tWaypoint:\n\tname: {self.name}\n"
            f"\tlat: {_format_number(self.latitude, 'f')} "
            f"lon: {_format_number(self.longitude, 'f')}\n\n"
        )
        return text + "".join(ext.describe() for ext in self.extensions)

    def __str__(self) -> str:
        return f"Waypoint {self.name or '(unnamed)'} ({self.latitude}, {self.longitude})"


@dataclass
class TrackSegment:
    """A contiguous run of track points."""

    waypoints: list[Waypoint] = field(default_factory=list)

    def describe(self) -> str:
        return "\ttrackSegment:\n\n" + "".join(wpt.describe() for wpt in self.waypoints)


@dataclass
class Route:
    """
    An ordered, named sequence of route points.

    Attributes:
        name: Route name ("" when unnamed)
        waypoints: Route points in traversal order
        extensions: Unrecognized child elements, in document order
    """

    name: str = ""
    waypoints: list[Waypoint] = field(default_factory=list)
    extensions: list[ExtensionField] = field(default_factory=list)

    @property
    def num_waypoints(self) -> int:
        return len(self.waypoints)

    def add_waypoint(self, waypoint: Waypoint) -> None:
        """Append a route point at the end of the route."""
        self.waypoints.append(waypoint)

    def describe(self) -> str:
        text = f"\tRoute:\n\tname: {self.name}\n\n"
        text += "".join(wpt.describe() for wpt in self.waypoints)
        return text + "".join(ext.describe() for ext in self.extensions)

    def __str__(self) -> str:
        return f"Route {self.name or '(unnamed)'} ({self.num_waypoints} points)"


@dataclass
class Track:
    """
    A named sequence of track segments.

    Attributes:
        name: Track name ("" when unnamed)
        segments: Track segments in the order they were appended
        extensions: Unrecognized child elements, in document order
    """

    name: str = ""
    segments: list[TrackSegment] = field(default_factory=list)
    extensions: list[ExtensionField] = field(default_factory=list)

    def iter_waypoints(self) -> Iterator[Waypoint]:
        """Yield every track point, segment by segment."""
        for segment in self.segments:
            yield from segment.waypoints

    @property
    def num_waypoints(self) -> int:
        return sum(len(segment.waypoints) for segment in self.segments)

    def describe(self) -> str:
        text = f"\tTrack:\n\tname: {self.name}\n\n"
        text += "".join(seg.describe() for seg in self.segments)
        return text + "".join(ext.describe() for ext in self.extensions)

    def __str__(self) -> str:
        return f"Track {self.name or '(unnamed)'} ({len(self.segments)} segments)"


@dataclass
class GPXDocument:
    """
    Root of a GPX document.

    Attributes:
        namespace_uri: Schema namespace of the root element
        version: GPX version number, None when unset
        creator: Name of the producing application
        waypoints: Free waypoints
        routes: Routes
        tracks: Tracks
    """

    namespace_uri: str = ""
    version: Optional[float] = None
    creator: str = ""
    waypoints: list[Waypoint] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)
    tracks: list[Track] = field(default_factory=list)

    @property
    def num_waypoints(self) -> int:
        return len(self.waypoints)

    @property
    def num_routes(self) -> int:
        return len(self.routes)

    @property
    def num_tracks(self) -> int:
        return len(self.tracks)

    @property
    def num_segments(self) -> int:
        """Total number of segments across all tracks."""
        return sum(len(track.segments) for track in self.tracks)

    @property
    def num_data_fields(self) -> int:
        """
        Count named entities and extension fields anywhere in the document.

        Every non-empty waypoint, route, or track name counts as one data
        field, as does every ExtensionField.
        """
        count = 0
        for wpt in self.iter_all_waypoints():
            count += (1 if wpt.name else 0) + len(wpt.extensions)
        for owner in (*self.routes, *self.tracks):
            count += (1 if owner.name else 0) + len(owner.extensions)
        return count

    def iter_all_waypoints(self) -> Iterator[Waypoint]:
        """Yield free waypoints, then route points, then track points."""
        yield from self.waypoints
        for route in self.routes:
            yield from route.waypoints
        for track in self.tracks:
            yield from track.iter_waypoints()

    def get_waypoint(self, name: str) -> Optional[Waypoint]:
        """Return the first waypoint with the given name, or None."""
        for wpt in self.iter_all_waypoints():
            if wpt.name == name:
                return wpt
        return None

    def get_route(self, name: str) -> Optional[Route]:
        """Return the first route with the given name, or None."""
        return next((route for route in self.routes if route.name == name), None)

    def get_track(self, name: str) -> Optional[Track]:
        """Return the first track with the given name, or None."""
        return next((track for track in self.tracks if track.name == name), None)

    def add_route(self, route: Route) -> None:
        """Append a route to the document."""
        self.routes.append(route)

    def describe(self) -> str:
        text = (
            f"\ndoc:\nnamespace: {self.namespace_uri}\n"
            f"version: {_format_number(self.version, '.1f')}\n"
            f"creator: {self.creator}\n"
        )
        text += "".join(wpt.describe() for wpt in self.waypoints)
        text += "".join(route.describe() for route in self.routes)
        return text + "".join(track.describe() for track in self.tracks)

    def __str__(self) -> str:
        return (
            f"GPX {_format_number(self.version, '.1f')} by {self.creator or '(unknown)'}: "
            f"{self.num_waypoints} waypoints, {self.num_routes} routes, {self.num_tracks} tracks"
        )
