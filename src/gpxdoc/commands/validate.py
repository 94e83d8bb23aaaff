"""
gpxdoc.commands.validate - Validate a GPX file.

Runs the semantic rules over the built document and, when a schema is
configured or given, the XSD check as well.
"""

from __future__ import annotations

import argparse
import sys

from gpxdoc.core.loader import read_document, validate_document
from gpxdoc.core.rules import RuleEngine


def run(args: argparse.Namespace, config: dict) -> int:
    """
    Run the validate command.

    Returns:
        Exit code (0 when valid, 1 when any rule or the schema check fails)
    """
    doc = read_document(args.file)
    violations = RuleEngine().validate(doc)

    schema = args.schema or config.get("gpx", {}).get("schema", "")
    schema_ok = True
    if schema:
        schema_ok = validate_document(doc, schema)
        if not schema_ok and not violations:
            print(f"{args.file}: failed schema validation ({schema})", file=sys.stderr)

    if not args.quiet:
        for violation in violations[:20]:
            print(violation)
        if len(violations) > 20:
            print(f"... and {len(violations) - 20} more")

    if violations or not schema_ok:
        return 1

    if not args.quiet:
        print(f"{args.file}: valid")
    return 0
