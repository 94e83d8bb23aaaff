"""
gpxdoc.commands.summary - Print a document summary.
"""

from __future__ import annotations

import argparse

from gpxdoc.core.loader import read_document
from gpxdoc.export.json_export import document_to_json


def run(args: argparse.Namespace, config: dict) -> int:
    """Run the summary command.

    Prints the JSON summary by default, or the full multi-line
    description with --describe.
    """
    doc = read_document(args.file)

    if args.describe:
        print(doc.describe())
    else:
        print(document_to_json(doc))

    if args.verbose:
        print(f"segments: {doc.num_segments}")
        print(f"data fields: {doc.num_data_fields}")
    return 0
