"""
User interface components for the Discogs Metadata Extractor.
"""

from .cli import ExtractorCLI
from .display import DisplayManager
from .document import NoteFileSurface, ConsoleSurface, MarkdownNote

__all__ = [
    'ExtractorCLI',
    'DisplayManager',
    'NoteFileSurface',
    'ConsoleSurface',
    'MarkdownNote'
]
