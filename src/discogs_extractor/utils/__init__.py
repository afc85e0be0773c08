"""
Utility modules for the Discogs Metadata Extractor.
"""

from .string_utils import sanitize_title, join_non_empty

__all__ = [
    'sanitize_title',
    'join_non_empty'
]
