"""Model builder for constructing GPX documents.

This module provides the ModelBuilder class, which walks a parsed GPX
element tree in document order and reconstructs the typed document
model from it.

The walk is a recursive pre-order traversal: each element is dispatched
on its local tag name, then its children are visited, then its next
sibling. Point and segment elements that appear without an enclosing
container are attached to a synthesized, unnamed container so that
flattened or partial input still produces a usable document.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from gpxdoc.core.models import ExtensionField, GPXDocument, Route, Track, TrackSegment, Waypoint
from gpxdoc.errors import BuildError
from gpxdoc.parsers.gpx_xml import (
    element_children,
    is_element,
    local_name,
    namespace_of,
    text_content,
)

if TYPE_CHECKING:
    from lxml import etree

logger = logging.getLogger(__name__)

TAG_GPX = "gpx"
TAG_WPT = "wpt"
TAG_RTE = "rte"
TAG_RTEPT = "rtept"
TAG_TRK = "trk"
TAG_TRKSEG = "trkseg"
TAG_TRKPT = "trkpt"
TAG_NAME = "name"

POINT_TAGS = frozenset({TAG_WPT, TAG_RTEPT, TAG_TRKPT})


@dataclass
class BuildResult:
    """Result of a build.

    Exactly one of ``document`` and ``error`` is set.
    """

    document: Optional[GPXDocument] = None
    error: Optional[BuildError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.document is not None


@dataclass
class BuildContext:
    """The containers currently open while walking the tree.

    Each handle is the entity most recently appended to its parent
    collection. Opening a track closes the previous track's segment.

    Attributes:
        document: The document under construction (None until the root is seen).
        track: Most recently appended track.
        segment: Most recently appended segment of ``track``.
        route: Most recently appended route.
    """

    document: Optional[GPXDocument] = None
    track: Optional[Track] = None
    segment: Optional[TrackSegment] = None
    route: Optional[Route] = None

    def open_track(self, track: Track) -> None:
        self.document.tracks.append(track)
        self.track = track
        self.segment = track.segments[-1] if track.segments else None

    def open_segment(self, segment: TrackSegment) -> None:
        self.ensure_track().segments.append(segment)
        self.segment = segment

    def open_route(self, route: Route) -> None:
        self.document.routes.append(route)
        self.route = route

    def ensure_track(self) -> Track:
        if self.track is None:
            logger.debug("Synthesizing unnamed track for orphaned track content")
            self.open_track(Track())
        return self.track

    def ensure_segment(self) -> TrackSegment:
        self.ensure_track()
        if self.segment is None:
            logger.debug("Synthesizing track segment for orphaned track point")
            self.open_segment(TrackSegment())
        return self.segment

    def ensure_route(self) -> Route:
        if self.route is None:
            logger.debug("Synthesizing unnamed route for orphaned route point")
            self.open_route(Route())
        return self.route


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse a numeric attribute; None when absent, blank, or not a finite number."""
    if text is None or not text.strip():
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    # NaN and infinities (including overflowing literals) count as unset.
    return value if math.isfinite(value) else None


class ModelBuilder:
    """Builds a GPXDocument from a parsed GPX element tree.

    Each visit step returns ``None`` on success or the BuildError that
    stopped it. A step that receives an error from a nested step returns
    it unchanged, so the first failure ends the whole walk and no
    partially built document escapes.

    Example:
        root = parse_file("ride.gpx")
        result = ModelBuilder().build(root)
        if result.ok:
            print(result.document.num_tracks)
    """

    def build(self, root: Optional[etree._Element]) -> BuildResult:
        """Build a document from the root element of a GPX tree.

        Args:
            root: Root element; must be a ``gpx`` element.

        Returns:
            BuildResult holding either the document or the error.
        """
        if root is None or not is_element(root) or local_name(root) != TAG_GPX:
            error = BuildError("Root element is not <gpx>")
        else:
            context = BuildContext()
            error = self._visit_siblings([root], context)
            if error is None:
                return BuildResult(document=context.document)

        logger.warning("GPX build failed: %s", error.message)
        return BuildResult(error=error)

    def _visit_siblings(
        self, nodes: Iterable[etree._Element], context: BuildContext
    ) -> Optional[BuildError]:
        for node in nodes:
            if not is_element(node):
                continue
            error = self._dispatch(node, context)
            if error is None:
                error = self._visit_siblings(element_children(node), context)
            if error is not None:
                return error
        return None

    def _dispatch(self, node: etree._Element, context: BuildContext) -> Optional[BuildError]:
        tag = local_name(node)

        if tag == TAG_GPX:
            return self._build_document(node, context)
        if tag == TAG_TRK:
            return self._build_track(node, context)
        if tag == TAG_TRKSEG:
            context.open_segment(TrackSegment())
            return None
        if tag == TAG_RTE:
            return self._build_route(node, context)
        if tag in POINT_TAGS:
            return self._build_point(node, tag, context)

        # Unknown wrappers are descended into but otherwise ignored.
        return None

    def _build_document(self, node: etree._Element, context: BuildContext) -> Optional[BuildError]:
        if context.document is not None:
            return BuildError(
                "Nested <gpx> element",
                details={"line": node.sourceline},
            )
        context.document = GPXDocument(
            namespace_uri=namespace_of(node),
            version=parse_number(node.get("version")),
            creator=node.get("creator", ""),
        )
        return None

    def _build_track(self, node: etree._Element, context: BuildContext) -> Optional[BuildError]:
        track = Track(name=self._child_name(node))
        error = self._collect_extensions(node, track.extensions, exclude={TAG_NAME, TAG_TRKSEG})
        if error is not None:
            return error
        context.open_track(track)
        return None

    def _build_route(self, node: etree._Element, context: BuildContext) -> Optional[BuildError]:
        route = Route(name=self._child_name(node))
        error = self._collect_extensions(node, route.extensions, exclude={TAG_NAME, TAG_RTEPT})
        if error is not None:
            return error
        context.open_route(route)
        return None

    def _build_point(
        self, node: etree._Element, tag: str, context: BuildContext
    ) -> Optional[BuildError]:
        waypoint = Waypoint(
            name=self._child_name(node),
            latitude=parse_number(node.get("lat")),
            longitude=parse_number(node.get("lon")),
        )
        error = self._collect_extensions(node, waypoint.extensions, exclude={TAG_NAME})
        if error is not None:
            return error

        if tag == TAG_WPT:
            context.document.waypoints.append(waypoint)
        elif tag == TAG_TRKPT:
            context.ensure_segment().waypoints.append(waypoint)
        else:
            context.ensure_route().add_waypoint(waypoint)
        return None

    def _child_name(self, node: etree._Element) -> str:
        for child in element_children(node):
            if local_name(child) == TAG_NAME:
                return text_content(child)
        return ""

    def _collect_extensions(
        self,
        node: etree._Element,
        into: list[ExtensionField],
        exclude: set[str],
    ) -> Optional[BuildError]:
        for child in element_children(node):
            name = local_name(child)
            if name in exclude:
                continue
            value = text_content(child)
            if not value:
                return BuildError(
                    f"Empty <{name}> element cannot be stored as extension data",
                    details={"element": name, "line": child.sourceline},
                )
            into.append(ExtensionField(name=name, value=value))
        return None


def build_document(root: Optional[etree._Element]) -> GPXDocument:
    """Build a document, raising on failure.

    Raises:
        BuildError: If any entity could not be constructed.
    """
    result = ModelBuilder().build(root)
    if result.error is not None:
        raise result.error
    return result.document
