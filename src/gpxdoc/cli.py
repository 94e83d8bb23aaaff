"""
gpxdoc.cli - Command-line interface.

Main entry point for the gpxdoc CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from gpxdoc import __version__
from gpxdoc.commands import create, routes, summary, validate
from gpxdoc.config import find_config_file, load_config
from gpxdoc.errors import GPXDocError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gpxdoc",
        description="Inspect, validate, and measure GPX files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gpxdoc summary ride.gpx                   # Counts, version, creator as JSON
  gpxdoc validate ride.gpx --schema gpx.xsd # Rules plus XSD check
  gpxdoc routes ride.gpx --points           # Routes with their points
  gpxdoc tracks ride.gpx                    # Track lengths and loop flags
  gpxdoc between ride.gpx 43.5 -80.2 43.6 -80.1 --tolerance 50

Configuration is read from the nearest .gpxdoc.toml; any setting can be
overridden with GPXDOC_<SECTION>_<KEY> environment variables.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"gpxdoc {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    summary_parser = subparsers.add_parser("summary", help="Print a JSON summary of a GPX file")
    summary_parser.add_argument("file", type=Path, help="GPX file")
    summary_parser.add_argument(
        "--describe",
        action="store_true",
        help="Print every entity instead of the JSON summary",
    )

    validate_parser = subparsers.add_parser("validate", help="Validate a GPX file")
    validate_parser.add_argument("file", type=Path, help="GPX file")
    validate_parser.add_argument("--schema", type=Path, help="GPX XSD file", metavar="XSD")

    routes_parser = subparsers.add_parser("routes", help="List routes as JSON")
    routes_parser.add_argument("file", type=Path, help="GPX file")
    routes_parser.add_argument(
        "--points",
        action="store_true",
        help="Include each route's points",
    )

    tracks_parser = subparsers.add_parser("tracks", help="List tracks as JSON")
    tracks_parser.add_argument("file", type=Path, help="GPX file")

    between_parser = subparsers.add_parser(
        "between", help="Find routes or tracks connecting two points"
    )
    between_parser.add_argument("file", type=Path, help="GPX file")
    between_parser.add_argument("src_lat", type=float)
    between_parser.add_argument("src_lon", type=float)
    between_parser.add_argument("dest_lat", type=float)
    between_parser.add_argument("dest_lon", type=float)
    between_parser.add_argument(
        "--tolerance",
        type=float,
        help="Maximum endpoint distance in meters",
        metavar="M",
    )
    between_parser.add_argument(
        "--tracks",
        action="store_true",
        help="Search tracks instead of routes",
    )

    create_parser_ = subparsers.add_parser("create", help="Create an empty GPX file")
    create_parser_.add_argument("file", type=Path, help="GPX file to write")
    create_parser_.add_argument("--creator", required=True)
    create_parser_.add_argument("--gpx-version", default="1.1", metavar="VERSION")
    create_parser_.add_argument("--schema", type=Path, help="GPX XSD file", metavar="XSD")

    return parser


def _configure_logging(args: argparse.Namespace, config: dict) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, str(config["logging"]["level"]).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config_path = args.config or find_config_file(Path.cwd())
        config = load_config(config_path)
        _configure_logging(args, config)

        if args.command == "summary":
            return summary.run(args, config)
        elif args.command == "validate":
            return validate.run(args, config)
        elif args.command == "routes":
            return routes.run_routes(args, config)
        elif args.command == "tracks":
            return routes.run_tracks(args, config)
        elif args.command == "between":
            return routes.run_between(args, config)
        elif args.command == "create":
            return create.run(args, config)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except GPXDocError as e:
        if args.verbose:
            raise
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
