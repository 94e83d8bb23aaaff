"""
gpxdoc.config.defaults - Default configuration values.
"""

from gpxdoc.core.models import DEFAULT_NAMESPACE

CONFIG_FILE_NAME = ".gpxdoc.toml"

ENV_PREFIX = "GPXDOC_"

DEFAULT_CONFIG = {
    "gpx": {
        "namespace": DEFAULT_NAMESPACE,
        # Path to a GPX XSD; empty disables schema checks.
        "schema": "",
    },
    "output": {
        "encoding": "UTF-8",
        "pretty_print": True,
    },
    "analytics": {
        "loop_tolerance": 10.0,
        "between_tolerance": 10.0,
    },
    "logging": {
        "level": "WARNING",
    },
}
