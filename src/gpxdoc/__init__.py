"""
gpxdoc - Typed document model, validation, and geodesy for GPX files

gpxdoc rebuilds GPX (GPS exchange format) XML into a navigable model of
waypoints, routes, tracks, and track segments, validates it against the
GPX rules, measures it on a spherical Earth, and converts it back to XML
or to compact JSON summaries.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gpxdoc")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from gpxdoc.core.builder import BuildResult, ModelBuilder, build_document
from gpxdoc.core.models import (
    ExtensionField,
    GPXDocument,
    Route,
    Track,
    TrackSegment,
    Waypoint,
)
from gpxdoc.core.rules import RuleEngine, RuleViolation, Severity
from gpxdoc.errors import (
    BuildError,
    ConversionError,
    GPXDocError,
    InvalidInputError,
    SchemaValidationError,
)

__all__ = [
    "__version__",
    "BuildResult",
    "ModelBuilder",
    "build_document",
    "ExtensionField",
    "GPXDocument",
    "Route",
    "Track",
    "TrackSegment",
    "Waypoint",
    "RuleEngine",
    "RuleViolation",
    "Severity",
    "BuildError",
    "ConversionError",
    "GPXDocError",
    "InvalidInputError",
    "SchemaValidationError",
]
