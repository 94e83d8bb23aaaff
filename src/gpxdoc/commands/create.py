"""
gpxdoc.commands.create - Create an empty GPX file.
"""

from __future__ import annotations

import argparse
import sys

from gpxdoc.core.loader import create_document_file
from gpxdoc.core.models import DEFAULT_NAMESPACE


def run(args: argparse.Namespace, config: dict) -> int:
    """Create a new, empty document; it must validate against the schema."""
    schema = args.schema or config.get("gpx", {}).get("schema", "")
    if not schema:
        print("Error: a schema is required (--schema or gpx.schema)", file=sys.stderr)
        return 1

    namespace = config.get("gpx", {}).get("namespace") or DEFAULT_NAMESPACE
    output = config.get("output", {})
    created = create_document_file(
        args.file,
        args.creator,
        args.gpx_version,
        schema,
        namespace,
        encoding=output.get("encoding", "UTF-8"),
        pretty_print=bool(output.get("pretty_print", True)),
    )
    if not created:
        print(f"Error: could not create {args.file}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"Created {args.file}")
    return 0
