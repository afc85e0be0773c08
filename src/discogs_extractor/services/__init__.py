"""
Core services for the Discogs Metadata Extractor.
"""

from .identifier_resolver import resolve_release_id, is_discogs_url
from .artwork_fetcher import ArtworkFetcher
from .template_renderer import TemplateRenderer
from .extraction_pipeline import ExtractionPipeline, PipelineResult, PipelineState

__all__ = [
    'resolve_release_id',
    'is_discogs_url',
    'ArtworkFetcher',
    'TemplateRenderer',
    'ExtractionPipeline',
    'PipelineResult',
    'PipelineState'
]
