"""
Tests for gpxdoc.core.models module.
"""

import pytest


class TestWaypoint:
    """Tests for Waypoint dataclass."""

    def test_waypoint_defaults(self):
        """A bare waypoint is unnamed, unpositioned, and has no extensions."""
        from gpxdoc.core.models import Waypoint

        wpt = Waypoint()

        assert wpt.name == ""
        assert wpt.latitude is None
        assert wpt.longitude is None
        assert wpt.extensions == []
        assert not wpt.has_position

    def test_waypoint_has_position_needs_both_coordinates(self):
        from gpxdoc.core.models import Waypoint

        assert Waypoint(latitude=1.0, longitude=2.0).has_position
        assert not Waypoint(latitude=1.0).has_position
        assert not Waypoint(longitude=2.0).has_position

    def test_zero_coordinates_are_a_position(self):
        """0.0 is a real coordinate, not an unset value."""
        from gpxdoc.core.models import Waypoint

        assert Waypoint(latitude=0.0, longitude=0.0).has_position

    def test_waypoint_describe(self):
        from gpxdoc.core.models import ExtensionField, Waypoint

        wpt = Waypoint(
            name="Start",
            latitude=43.5,
            longitude=-80.25,
            extensions=[ExtensionField("ele", "334.5")],
        )

        text = wpt.describe()

        assert "name: Start" in text
        assert "lat: 43.500000 lon: -80.250000" in text
        assert "gpxData name: ele gpxData value: 334.5" in text

    def test_describe_unset_coordinates(self):
        from gpxdoc.core.models import Waypoint

        assert "lat: unset lon: unset" in Waypoint().describe()


class TestRoute:
    """Tests for Route dataclass."""

    def test_add_waypoint_appends_in_order(self):
        from gpxdoc.core.models import Route, Waypoint

        route = Route(name="Loop")
        route.add_waypoint(Waypoint(name="a"))
        route.add_waypoint(Waypoint(name="b"))

        assert route.num_waypoints == 2
        assert [w.name for w in route.waypoints] == ["a", "b"]

    def test_route_str(self):
        from gpxdoc.core.models import Route, Waypoint

        assert str(Route(name="Loop", waypoints=[Waypoint()])) == "Route Loop (1 points)"
        assert str(Route()) == "Route (unnamed) (0 points)"


class TestTrack:
    """Tests for Track dataclass."""

    def test_iter_waypoints_crosses_segments(self):
        """Track points are yielded segment by segment, in order."""
        from gpxdoc.core.models import Track, TrackSegment, Waypoint

        track = Track(
            segments=[
                TrackSegment([Waypoint(name="1"), Waypoint(name="2")]),
                TrackSegment([]),
                TrackSegment([Waypoint(name="3")]),
            ]
        )

        assert [w.name for w in track.iter_waypoints()] == ["1", "2", "3"]
        assert track.num_waypoints == 3

    def test_track_describe_includes_segments(self):
        from gpxdoc.core.models import Track, TrackSegment, Waypoint

        track = Track(name="Ride", segments=[TrackSegment([Waypoint(name="p")])])
        text = track.describe()

        assert "name: Ride" in text
        assert "trackSegment:" in text
        assert "name: p" in text


class TestGPXDocument:
    """Tests for GPXDocument counters and lookups."""

    @pytest.fixture
    def doc(self):
        from gpxdoc.core.models import (
            ExtensionField,
            GPXDocument,
            Route,
            Track,
            TrackSegment,
            Waypoint,
        )

        return GPXDocument(
            namespace_uri="http://www.topografix.com/GPX/1/1",
            version=1.1,
            creator="test",
            waypoints=[
                Waypoint(name="Home", extensions=[ExtensionField("ele", "10")]),
                Waypoint(),
            ],
            routes=[
                Route(name="Errand", waypoints=[Waypoint(name="Shop")]),
                Route(extensions=[ExtensionField("desc", "unnamed route")]),
            ],
            tracks=[
                Track(
                    name="Walk",
                    segments=[
                        TrackSegment([Waypoint(name="Park")]),
                        TrackSegment([Waypoint()]),
                    ],
                ),
            ],
        )

    def test_counts(self, doc):
        assert doc.num_waypoints == 2
        assert doc.num_routes == 2
        assert doc.num_tracks == 1
        assert doc.num_segments == 2

    def test_num_data_fields(self, doc):
        """Names and extensions are counted across every entity."""
        # Home + ele, Errand, Shop, desc, Walk, Park
        assert doc.num_data_fields == 7

    def test_empty_document(self):
        from gpxdoc.core.models import GPXDocument

        doc = GPXDocument()

        assert doc.version is None
        assert doc.num_waypoints == doc.num_routes == doc.num_tracks == 0
        assert doc.num_segments == 0
        assert doc.num_data_fields == 0

    def test_get_waypoint_searches_all_collections(self, doc):
        assert doc.get_waypoint("Home") is doc.waypoints[0]
        assert doc.get_waypoint("Shop") is doc.routes[0].waypoints[0]
        assert doc.get_waypoint("Park") is doc.tracks[0].segments[0].waypoints[0]
        assert doc.get_waypoint("Nowhere") is None

    def test_get_route_and_track(self, doc):
        assert doc.get_route("Errand") is doc.routes[0]
        assert doc.get_route("Walk") is None
        assert doc.get_track("Walk") is doc.tracks[0]
        assert doc.get_track("Errand") is None

    def test_add_route(self, doc):
        from gpxdoc.core.models import Route

        route = Route(name="New")
        doc.add_route(route)

        assert doc.num_routes == 3
        assert doc.routes[-1] is route

    def test_describe_header(self, doc):
        text = doc.describe()

        assert "namespace: http://www.topografix.com/GPX/1/1" in text
        assert "version: 1.1" in text
        assert "creator: test" in text

    def test_str_summary(self, doc):
        assert str(doc) == "GPX 1.1 by test: 2 waypoints, 2 routes, 1 tracks"

    def test_default_collections_are_independent(self):
        from gpxdoc.core.models import GPXDocument, Waypoint

        first = GPXDocument()
        second = GPXDocument()
        first.waypoints.append(Waypoint())

        assert second.waypoints == []
