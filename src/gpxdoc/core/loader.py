"""
GPX file workflows.

Centralized functions for reading GPX files into document models,
checking documents against a GPX schema, and writing them back out.
Used by the CLI commands and by library callers that work with files
rather than already-parsed trees.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from gpxdoc.core.builder import build_document, parse_number
from gpxdoc.core.geodesy import DEFAULT_LOOP_TOLERANCE
from gpxdoc.core.models import DEFAULT_NAMESPACE, GPXDocument
from gpxdoc.core.rules import is_valid_document
from gpxdoc.errors import (
    BuildError,
    ConversionError,
    GPXDocError,
    InvalidInputError,
    SchemaValidationError,
)
from gpxdoc.export.json_export import document_to_json, routes_with_points_to_json
from gpxdoc.export.xml_tree import document_to_bytes, document_to_xml
from gpxdoc.parsers.gpx_xml import SchemaCheck, check_schema, parse_file

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _require_path(value: Optional[PathLike], what: str) -> Path:
    if value is None or not str(value):
        raise InvalidInputError(f"{what} is empty")
    return Path(value)


def read_document(path: PathLike) -> GPXDocument:
    """Parse a GPX file and build its document model.

    Raises:
        InvalidInputError: If the file is missing, unreadable, or not XML.
        BuildError: If the tree cannot be turned into a document.
    """
    root = parse_file(_require_path(path, "GPX file name"))
    return build_document(root)


def read_valid_document(path: PathLike, schema: PathLike) -> GPXDocument:
    """Parse a GPX file, check it against the schema, then build it.

    Raises:
        SchemaValidationError: If the file does not pass the schema check.
    """
    gpx_path = _require_path(path, "GPX file name")
    schema_path = _require_path(schema, "Schema file name")
    root = parse_file(gpx_path)
    outcome = check_schema(root, schema_path)
    if outcome is not SchemaCheck.VALID:
        raise SchemaValidationError(
            f"{gpx_path} failed schema validation",
            details={"outcome": outcome.value, "schema": str(schema_path)},
        )
    return build_document(root)


def validate_document(doc: Optional[GPXDocument], schema: Optional[PathLike]) -> bool:
    """Check a document against the schema and the semantic rules.

    The document is converted to an XML tree for the schema check; the
    model itself is not modified.
    """
    if doc is None or not schema:
        return False
    try:
        root = document_to_xml(doc)
    except ConversionError as e:
        logger.warning("%s", e.message)
        return False
    if check_schema(root, schema) is not SchemaCheck.VALID:
        return False
    return is_valid_document(doc)


def write_document(
    doc: Optional[GPXDocument],
    path: Optional[PathLike],
    encoding: str = "UTF-8",
    pretty_print: bool = True,
) -> bool:
    """Write a document to a GPX file.

    Returns:
        True if the file was written, False on conversion or I/O failure.
    """
    if doc is None or not path:
        return False
    try:
        Path(path).write_bytes(document_to_bytes(doc, encoding=encoding, pretty_print=pretty_print))
    except ConversionError as e:
        logger.warning("Not writing %s: %s", path, e.message)
        return False
    except (OSError, LookupError) as e:
        logger.warning("Cannot write %s: %s", path, e)
        return False
    logger.info("Wrote %s", path)
    return True


def create_document_file(
    path: PathLike,
    creator: str,
    version: str,
    schema: PathLike,
    namespace_uri: str = DEFAULT_NAMESPACE,
    encoding: str = "UTF-8",
    pretty_print: bool = True,
) -> bool:
    """Create an empty GPX file from a creator and version.

    The new document must pass validation before it is written.
    """
    if not path or not creator or not version or not schema:
        return False
    doc = GPXDocument(namespace_uri=namespace_uri, version=parse_number(version), creator=creator)
    if not validate_document(doc, schema):
        logger.warning("Not writing %s: document is not valid", path)
        return False
    return write_document(doc, path, encoding=encoding, pretty_print=pretty_print)


def summary_json(path: PathLike) -> Optional[str]:
    """JSON summary of a GPX file, or None if it cannot be read."""
    try:
        return document_to_json(read_document(path))
    except (InvalidInputError, BuildError) as e:
        logger.warning("%s", e.message)
        return None


def routes_with_points_json(
    path: PathLike, loop_tolerance: float = DEFAULT_LOOP_TOLERANCE
) -> Optional[str]:
    """Route summaries and route points of a GPX file, or None on failure."""
    try:
        return routes_with_points_to_json(read_document(path), loop_tolerance)
    except (InvalidInputError, BuildError) as e:
        logger.warning("%s", e.message)
        return None


def is_valid_gpx_file(path: PathLike, schema: PathLike) -> bool:
    """True when the file builds and the resulting document validates."""
    try:
        doc = read_document(path)
    except GPXDocError as e:
        logger.info("%s", e.message)
        return False
    return validate_document(doc, schema)
