"""GPX XML layer.

Wraps lxml to turn GPX text into an element tree, to expose the few
node accessors the model builder needs, and to check a tree against
an XML Schema (XSD) file.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from lxml import etree

from gpxdoc.errors import InvalidInputError

logger = logging.getLogger(__name__)


class SchemaCheck(Enum):
    """Outcome of validating an XML tree against a schema."""

    VALID = "valid"
    INVALID = "invalid"
    VALIDATOR_ERROR = "validator_error"


def parse_string(content: str | bytes) -> etree._Element:
    """Parse GPX text and return the root element.

    Args:
        content: XML document text.

    Returns:
        Root element of the parsed tree.

    Raises:
        InvalidInputError: If the content is empty or not well-formed XML.
    """
    if not content:
        raise InvalidInputError("GPX content is empty")
    if isinstance(content, str):
        content = content.encode("utf-8")
    try:
        return etree.fromstring(content)
    except etree.XMLSyntaxError as e:
        raise InvalidInputError(f"Malformed GPX XML: {e}") from e


def parse_file(path: Path | str) -> etree._Element:
    """Parse a GPX file and return the root element.

    Raises:
        InvalidInputError: If the path is empty, unreadable, or not XML.
    """
    if not path:
        raise InvalidInputError("GPX file name is empty")
    path = Path(path)
    try:
        tree = etree.parse(str(path))
    except OSError as e:
        raise InvalidInputError(f"Cannot read {path}: {e}") from e
    except etree.XMLSyntaxError as e:
        raise InvalidInputError(f"Malformed GPX XML in {path}: {e}") from e
    return tree.getroot()


def is_element(node: etree._Element) -> bool:
    """True for element nodes; False for comments and processing instructions."""
    return isinstance(node.tag, str)


def local_name(node: etree._Element) -> str:
    """Tag name without its namespace."""
    return etree.QName(node).localname


def namespace_of(node: etree._Element) -> str:
    """Namespace URI of an element, or "" when it has none."""
    return etree.QName(node).namespace or ""


def element_children(node: etree._Element) -> list[etree._Element]:
    """Ordered element children of a node."""
    return [child for child in node if is_element(child)]


def text_content(node: etree._Element) -> str:
    """Concatenated text of the node and all of its descendants."""
    return str(node.xpath("string()"))


def check_schema(root: etree._Element, schema_path: Path | str) -> SchemaCheck:
    """Validate an element tree against an XSD file.

    Args:
        root: Root element of the tree to check.
        schema_path: Path to the XSD schema.

    Returns:
        VALID, INVALID, or VALIDATOR_ERROR when the schema itself
        cannot be loaded.
    """
    try:
        schema = etree.XMLSchema(etree.parse(str(schema_path)))
    except (OSError, etree.XMLSyntaxError, etree.XMLSchemaParseError) as e:
        logger.warning("Cannot load schema %s: %s", schema_path, e)
        return SchemaCheck.VALIDATOR_ERROR

    if schema.validate(etree.ElementTree(root)):
        return SchemaCheck.VALID

    for entry in schema.error_log:
        logger.info("Schema violation at line %s: %s", entry.line, entry.message)
    return SchemaCheck.INVALID
