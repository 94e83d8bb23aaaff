"""
gpxdoc.export - Writers for XML trees and JSON summaries.
"""
