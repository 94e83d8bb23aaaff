"""
gpxdoc.parsers - Readers for GPX XML and JSON input.
"""
