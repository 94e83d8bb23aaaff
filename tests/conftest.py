"""Shared pytest fixtures for gpxdoc tests."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

GPX_NS = "http://www.topografix.com/GPX/1/1"


def _wrap(body: str, version: str = "1.1", creator: str = "gpxdoc-tests") -> str:
    """Wrap body elements in a namespaced <gpx> root."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<gpx xmlns="{GPX_NS}" version="{version}" creator="{creator}">'
        f"{body}</gpx>"
    )


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def schema_path() -> Path:
    return FIXTURES / "gpx_subset.xsd"


@pytest.fixture
def routes_gpx() -> Path:
    return FIXTURES / "routes.gpx"


@pytest.fixture
def routes_doc(routes_gpx):
    """Document built from fixtures/routes.gpx."""
    from gpxdoc.core.loader import read_document

    return read_document(routes_gpx)


@pytest.fixture
def build():
    """Build a document from GPX text."""
    from gpxdoc.core.builder import ModelBuilder
    from gpxdoc.parsers.gpx_xml import parse_string

    def _build(text: str):
        return ModelBuilder().build(parse_string(text))

    return _build


@pytest.fixture
def make_route():
    """Create a route from (lat, lon) pairs."""
    from gpxdoc.core.models import Route, Waypoint

    def _make(points, name=""):
        return Route(name=name, waypoints=[Waypoint(latitude=lat, longitude=lon) for lat, lon in points])

    return _make


@pytest.fixture
def make_track():
    """Create a track from lists of (lat, lon) pairs, one list per segment."""
    from gpxdoc.core.models import Track, TrackSegment, Waypoint

    def _make(segments, name=""):
        return Track(
            name=name,
            segments=[
                TrackSegment(waypoints=[Waypoint(latitude=lat, longitude=lon) for lat, lon in seg])
                for seg in segments
            ],
        )

    return _make


@pytest.fixture
def gpx_text():
    """Wrap body elements in a namespaced <gpx> root."""
    return _wrap
