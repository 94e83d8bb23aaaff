"""Tests for the GPX XML layer."""

import pytest


class TestParsing:
    def test_parse_string(self):
        from gpxdoc.parsers.gpx_xml import local_name, parse_string

        root = parse_string('<gpx xmlns="http://www.topografix.com/GPX/1/1"/>')

        assert local_name(root) == "gpx"

    @pytest.mark.parametrize("content", ["", b"", "<gpx>", "not xml"])
    def test_bad_content_raises(self, content):
        from gpxdoc.errors import InvalidInputError
        from gpxdoc.parsers.gpx_xml import parse_string

        with pytest.raises(InvalidInputError):
            parse_string(content)

    def test_missing_file_raises(self, tmp_path):
        from gpxdoc.errors import InvalidInputError
        from gpxdoc.parsers.gpx_xml import parse_file

        with pytest.raises(InvalidInputError):
            parse_file(tmp_path / "missing.gpx")

    def test_empty_path_raises(self):
        from gpxdoc.errors import InvalidInputError
        from gpxdoc.parsers.gpx_xml import parse_file

        with pytest.raises(InvalidInputError):
            parse_file("")

    def test_malformed_file_raises(self, tmp_path):
        from gpxdoc.errors import InvalidInputError
        from gpxdoc.parsers.gpx_xml import parse_file

        path = tmp_path / "broken.gpx"
        path.write_text("<gpx><wpt></gpx>")

        with pytest.raises(InvalidInputError) as exc_info:
            parse_file(path)
        assert exc_info.value.code == "INVALID_INPUT"


class TestNodeHelpers:
    """Tests for the node accessors used by the builder."""

    def test_namespace_and_local_name(self):
        from gpxdoc.parsers.gpx_xml import local_name, namespace_of, parse_string

        root = parse_string('<g:gpx xmlns:g="urn:test"><plain/></g:gpx>')

        assert local_name(root) == "gpx"
        assert namespace_of(root) == "urn:test"
        assert namespace_of(root[0]) == ""

    def test_element_children_skip_comments(self):
        from gpxdoc.parsers.gpx_xml import element_children, is_element, parse_string

        root = parse_string("<gpx><!-- c --><a/><?pi x?><b/></gpx>")

        assert not is_element(root[0])
        assert [child.tag for child in element_children(root)] == ["a", "b"]

    def test_text_content_includes_descendants(self):
        from gpxdoc.parsers.gpx_xml import parse_string, text_content

        root = parse_string("<desc>a<b>b</b>c</desc>")

        assert text_content(root) == "abc"
        assert text_content(parse_string("<empty/>")) == ""


class TestSchemaCheck:
    """Tests for XSD validation."""

    def test_valid_file(self, routes_gpx, schema_path):
        from gpxdoc.parsers.gpx_xml import SchemaCheck, check_schema, parse_file

        assert check_schema(parse_file(routes_gpx), schema_path) is SchemaCheck.VALID

    def test_invalid_tree(self, schema_path):
        from gpxdoc.parsers.gpx_xml import SchemaCheck, check_schema, parse_string

        root = parse_string('<gpx xmlns="http://www.topografix.com/GPX/1/1" version="1.1"/>')

        assert check_schema(root, schema_path) is SchemaCheck.INVALID

    def test_out_of_range_latitude_is_invalid(self, fixtures_dir, schema_path):
        from gpxdoc.parsers.gpx_xml import SchemaCheck, check_schema, parse_file

        root = parse_file(fixtures_dir / "out_of_range.gpx")

        assert check_schema(root, schema_path) is SchemaCheck.INVALID

    def test_unloadable_schema(self, routes_gpx, tmp_path):
        from gpxdoc.parsers.gpx_xml import SchemaCheck, check_schema, parse_file

        bogus = tmp_path / "bogus.xsd"
        bogus.write_text("<notaschema/>")
        root = parse_file(routes_gpx)

        assert check_schema(root, bogus) is SchemaCheck.VALIDATOR_ERROR
        assert check_schema(root, tmp_path / "missing.xsd") is SchemaCheck.VALIDATOR_ERROR
