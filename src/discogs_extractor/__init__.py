"""
Discogs Metadata Extractor - turn Discogs releases into Markdown notes.
"""

__version__ = "1.0.0"
