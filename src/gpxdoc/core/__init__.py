"""
gpxdoc.core - Document model, builder, validation rules, and geodesy.
"""

from gpxdoc.core.builder import BuildResult, ModelBuilder, build_document
from gpxdoc.core.models import (
    ExtensionField,
    GPXDocument,
    Route,
    Track,
    TrackSegment,
    Waypoint,
)
from gpxdoc.core.rules import RuleEngine, RuleViolation, Severity, is_valid_document

__all__ = [
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
    "is_valid_document",
]
