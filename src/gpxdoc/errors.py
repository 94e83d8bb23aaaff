"""Domain-specific errors for gpxdoc."""

from __future__ import annotations

from typing import Any


class GPXDocError(Exception):
    """Base exception for all gpxdoc failures."""

    code: str = "GPXDOC_ERROR"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error_code": self.code, "error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidInputError(GPXDocError):
    """A required argument was missing, empty, or unreadable."""

    code = "INVALID_INPUT"


class BuildError(GPXDocError):
    """An entity could not be constructed while building the document model."""

    code = "BUILD_FAILURE"


class SchemaValidationError(GPXDocError):
    """An XML tree did not pass schema validation."""

    code = "SCHEMA_INVALID"


class ConversionError(GPXDocError):
    """The document model could not be converted to an external representation."""

    code = "CONVERSION_FAILURE"
