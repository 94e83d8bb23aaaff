"""Tests for converting documents to XML trees."""

import pytest

NS = "http://www.topografix.com/GPX/1/1"


def _q(name):
    return f"{{{NS}}}{name}"


class TestDocumentToXML:
    """Tests for document_to_xml."""

    def test_root_attributes(self):
        from gpxdoc.core.models import GPXDocument
        from gpxdoc.export.xml_tree import document_to_xml

        root = document_to_xml(GPXDocument(namespace_uri=NS, version=1.1, creator="me"))

        assert root.tag == _q("gpx")
        assert root.get("version") == "1.1"
        assert root.get("creator") == "me"
        assert root.nsmap == {None: NS}

    def test_unset_version_is_omitted(self):
        from gpxdoc.core.models import GPXDocument
        from gpxdoc.export.xml_tree import document_to_xml

        root = document_to_xml(GPXDocument(namespace_uri=NS, creator="me"))

        assert root.get("version") is None

    def test_no_namespace(self):
        from gpxdoc.core.models import GPXDocument, Waypoint
        from gpxdoc.export.xml_tree import document_to_xml

        root = document_to_xml(GPXDocument(version=1.0, waypoints=[Waypoint(latitude=1.0, longitude=2.0)]))

        assert root.tag == "gpx"
        assert root[0].tag == "wpt"

    def test_waypoint_element(self):
        from gpxdoc.core.models import ExtensionField, GPXDocument, Waypoint
        from gpxdoc.export.xml_tree import document_to_xml

        wpt = Waypoint("Home", 43.5, -80.25, [ExtensionField("ele", "330")])
        root = document_to_xml(GPXDocument(namespace_uri=NS, version=1.1, waypoints=[wpt]))

        node = root.find(_q("wpt"))
        assert node.get("lat") == "43.500000"
        assert node.get("lon") == "-80.250000"
        assert [child.tag for child in node] == [_q("name"), _q("ele")]
        assert node.findtext(_q("ele")) == "330"

    def test_unnamed_waypoint_has_no_name_element(self):
        from gpxdoc.core.models import GPXDocument, Waypoint
        from gpxdoc.export.xml_tree import document_to_xml

        root = document_to_xml(GPXDocument(namespace_uri=NS, waypoints=[Waypoint()]))

        node = root.find(_q("wpt"))
        assert len(node) == 0
        assert node.get("lat") is None

    def test_entity_order(self, routes_doc):
        from gpxdoc.export.xml_tree import document_to_xml

        root = document_to_xml(routes_doc)

        assert [child.tag for child in root] == [
            _q("wpt"),
            _q("wpt"),
            _q("rte"),
            _q("rte"),
            _q("trk"),
        ]
        track = root.find(_q("trk"))
        assert [child.tag for child in track] == [
            _q("name"),
            _q("desc"),
            _q("trkseg"),
            _q("trkseg"),
        ]

    def test_invalid_extension_name_raises(self):
        from gpxdoc.core.models import ExtensionField, GPXDocument, Route
        from gpxdoc.errors import ConversionError
        from gpxdoc.export.xml_tree import document_to_xml

        doc = GPXDocument(
            namespace_uri=NS,
            routes=[Route(extensions=[ExtensionField("not a tag", "x")])],
        )

        with pytest.raises(ConversionError):
            document_to_xml(doc)


class TestRoundTrip:
    """Building from a converted tree reproduces the document."""

    def test_fixture_round_trip(self, routes_doc):
        from gpxdoc.core.builder import build_document
        from gpxdoc.export.xml_tree import document_to_xml

        assert build_document(document_to_xml(routes_doc)) == routes_doc

    def test_non_finite_coordinates_round_trip(self, build, gpx_text):
        from gpxdoc.core.builder import build_document
        from gpxdoc.export.xml_tree import document_to_xml

        doc = build(gpx_text('<wpt lat="NaN" lon="inf"><name>odd</name></wpt>')).document
        root = document_to_xml(doc)

        assert root.find(_q("wpt")).get("lat") is None
        assert build_document(root) == doc

    def test_flat_round_trip(self, fixtures_dir):
        """Synthesized containers are written out explicitly and read back equal."""
        from gpxdoc.core.builder import build_document
        from gpxdoc.core.loader import read_document
        from gpxdoc.export.xml_tree import document_to_xml

        doc = read_document(fixtures_dir / "flat.gpx")

        assert build_document(document_to_xml(doc)) == doc

    def test_bytes_round_trip(self, routes_doc):
        from gpxdoc.core.builder import build_document
        from gpxdoc.export.xml_tree import document_to_bytes
        from gpxdoc.parsers.gpx_xml import parse_string

        text = document_to_bytes(routes_doc)

        assert text.startswith(b"<?xml version='1.0' encoding='UTF-8'?>")
        assert build_document(parse_string(text)) == routes_doc
