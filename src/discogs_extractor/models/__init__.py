"""
Data models for the Discogs Metadata Extractor.
"""

from .releases import Artist, Label, Format, Track, Image, ReleaseMetadata
from .search_results import SearchResult

__all__ = [
    'Artist',
    'Label',
    'Format',
    'Track',
    'Image',
    'ReleaseMetadata',
    'SearchResult'
]
