"""
gpxdoc.commands - CLI command implementations
"""

__all__ = [
    "create",
    "routes",
    "summary",
    "validate",
]
