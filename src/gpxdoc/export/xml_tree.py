"""Convert a GPX document model into an lxml element tree.

Entities are written in model order: free waypoints, then routes, then
tracks. Every element is placed in the document's namespace.
"""

from __future__ import annotations

from typing import Optional

from lxml import etree

from gpxdoc.core.models import ExtensionField, GPXDocument, Route, Track, TrackSegment, Waypoint
from gpxdoc.errors import ConversionError


class XMLTreeWriter:
    """Builds an element tree for one document namespace."""

    def __init__(self, namespace_uri: str = "") -> None:
        self.namespace_uri = namespace_uri

    def tag(self, name: str) -> str:
        if self.namespace_uri:
            return f"{{{self.namespace_uri}}}{name}"
        return name

    def child(
        self, parent: etree._Element, name: str, text: Optional[str] = None
    ) -> etree._Element:
        node = etree.SubElement(parent, self.tag(name))
        if text is not None:
            node.text = text
        return node

    def root(self, doc: GPXDocument) -> etree._Element:
        nsmap = {None: self.namespace_uri} if self.namespace_uri else None
        node = etree.Element(self.tag("gpx"), nsmap=nsmap)
        if doc.version is not None:
            node.set("version", f"{doc.version:.1f}")
        node.set("creator", doc.creator)
        return node

    def extensions(self, parent: etree._Element, extensions: list[ExtensionField]) -> None:
        for ext in extensions:
            self.child(parent, ext.name, ext.value)

    def waypoint(self, parent: etree._Element, wpt: Waypoint, tag: str) -> etree._Element:
        node = self.child(parent, tag)
        if wpt.latitude is not None:
            node.set("lat", f"{wpt.latitude:f}")
        if wpt.longitude is not None:
            node.set("lon", f"{wpt.longitude:f}")
        if wpt.name:
            self.child(node, "name", wpt.name)
        self.extensions(node, wpt.extensions)
        return node

    def route(self, parent: etree._Element, route: Route) -> etree._Element:
        node = self.child(parent, "rte")
        if route.name:
            self.child(node, "name", route.name)
        self.extensions(node, route.extensions)
        for wpt in route.waypoints:
            self.waypoint(node, wpt, "rtept")
        return node

    def segment(self, parent: etree._Element, segment: TrackSegment) -> etree._Element:
        node = self.child(parent, "trkseg")
        for wpt in segment.waypoints:
            self.waypoint(node, wpt, "trkpt")
        return node

    def track(self, parent: etree._Element, track: Track) -> etree._Element:
        node = self.child(parent, "trk")
        if track.name:
            self.child(node, "name", track.name)
        self.extensions(node, track.extensions)
        for segment in track.segments:
            self.segment(node, segment)
        return node


def document_to_xml(doc: GPXDocument) -> etree._Element:
    """Convert a document to an element tree and return its root.

    Raises:
        ConversionError: If a name or value cannot be represented in XML
            (e.g., an extension name that is not a valid tag).
    """
    writer = XMLTreeWriter(doc.namespace_uri)
    try:
        root = writer.root(doc)
        for wpt in doc.waypoints:
            writer.waypoint(root, wpt, "wpt")
        for route in doc.routes:
            writer.route(root, route)
        for track in doc.tracks:
            writer.track(root, track)
    except ValueError as e:
        raise ConversionError(f"Cannot convert document to XML: {e}") from e
    return root


def document_to_bytes(
    doc: GPXDocument, encoding: str = "UTF-8", pretty_print: bool = True
) -> bytes:
    """Serialize a document to GPX text with an XML declaration."""
    root = document_to_xml(doc)
    return etree.tostring(
        root,
        xml_declaration=True,
        encoding=encoding,
        pretty_print=pretty_print,
    )
