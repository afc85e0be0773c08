"""
Extraction pipeline that turns a Discogs link into a rendered note.

A run moves through the states of ``PipelineState`` strictly in order and
stops at the first failure. Failures become a single notification and
leave the document untouched; nothing is retried or cached between runs.
Runs are not synchronized with each other: two runs targeting the same
document both write it, and the later write wins.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..clients.discogs import DiscogsClient
from ..core.config import ERROR_MESSAGES, SUCCESS_MESSAGES
from ..core.exceptions import ExtractorError, NoActiveDocument, DocumentWriteError
from ..core.interfaces import DocumentSurface, Notifier
from ..core.logger import get_logger
from ..core.settings import Settings
from ..models.search_results import SearchResult
from .artwork_fetcher import ArtworkFetcher
from .identifier_resolver import resolve_release_id, is_discogs_url
from .template_renderer import TemplateRenderer

logger = get_logger("services.extraction_pipeline")


class PipelineState(Enum):
    IDLE = "idle"
    RESOLVING_ID = "resolving_id"
    FETCHING_METADATA = "fetching_metadata"
    FETCHING_ARTWORK = "fetching_artwork"
    RENDERING = "rendering"
    DELIVERED = "delivered"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Outcome of one pipeline run."""
    state: PipelineState = PipelineState.IDLE
    history: List[PipelineState] = field(default_factory=lambda: [PipelineState.IDLE])
    rendered: Optional[str] = None
    error: Optional[ExtractorError] = None
    release_id: Optional[str] = None
    artwork_path: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.state is PipelineState.DELIVERED

    @property
    def failed_in(self) -> Optional[PipelineState]:
        """State that was active when the run failed."""
        if self.state is not PipelineState.FAILED:
            return None
        return self.history[-2]

    def advance(self, state: PipelineState) -> None:
        logger.debug(f"Pipeline {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)


class ExtractionPipeline:
    """Sequences URL resolution, lookup, artwork download and rendering."""

    def __init__(
        self,
        client: DiscogsClient,
        artwork_fetcher: ArtworkFetcher,
        renderer: TemplateRenderer,
        document_surface: DocumentSurface,
        notifier: Notifier
    ):
        self.client = client
        self.artwork_fetcher = artwork_fetcher
        self.renderer = renderer
        self.document_surface = document_surface
        self.notifier = notifier

    def run(self, url: str, settings: Settings) -> PipelineResult:
        """
        Extract metadata for the release at url into the active document.

        The document content is replaced entirely, never appended to.

        Args:
            url: Discogs release URL or search result URI
            settings: Settings for this run

        Returns:
            PipelineResult describing the run
        """
        result = PipelineResult()
        try:
            result.advance(PipelineState.RESOLVING_ID)
            result.release_id = resolve_release_id(url)

            result.advance(PipelineState.FETCHING_METADATA)
            metadata = self.client.fetch_release(result.release_id, settings.credentials)

            document = self.document_surface.get_active_document()
            if document is None:
                raise NoActiveDocument(ERROR_MESSAGES["NO_ACTIVE_DOCUMENT"])

            result.advance(PipelineState.FETCHING_ARTWORK)
            image_url = metadata.cover_image_url
            if image_url:
                result.artwork_path = self.artwork_fetcher.download_artwork(
                    image_url, metadata.title, settings.artwork_folder
                )
            else:
                logger.warning(f"Release {result.release_id} has no images; rendering without artwork")
                result.artwork_path = ""

            result.advance(PipelineState.RENDERING)
            result.rendered = self.renderer.render(
                settings.metadata_template, metadata, result.artwork_path
            )

            try:
                document.replace_content(result.rendered)
            except OSError as e:
                raise DocumentWriteError(f"Could not write the note: {e}") from e

            result.advance(PipelineState.DELIVERED)
        except ExtractorError as e:
            result.error = e
            result.advance(PipelineState.FAILED)
            logger.error(f"Error extracting metadata: {e}")
            self.notifier.notify(f"Error: {e}", success=False)
            return result

        self.notifier.notify(SUCCESS_MESSAGES["EXTRACTION_COMPLETE"])
        return result

    def run_from_clipboard(self, clipboard_text: Optional[str], settings: Settings) -> Optional[PipelineResult]:
        """Run on clipboard contents if they hold a Discogs URL."""
        text = (clipboard_text or "").strip()
        if not is_discogs_url(text):
            self.notifier.notify(ERROR_MESSAGES["NO_URL_IN_CLIPBOARD"], success=False)
            return None
        return self.run(text, settings)

    def run_from_input(self, url: Optional[str], settings: Settings) -> Optional[PipelineResult]:
        """Run on a URL typed by the user."""
        text = (url or "").strip()
        if not is_discogs_url(text):
            self.notifier.notify(ERROR_MESSAGES["INVALID_URL"], success=False)
            return None
        return self.run(text, settings)

    def search(self, query: Optional[str], settings: Settings) -> Optional[List[SearchResult]]:
        """
        Search Discogs for releases.

        Returns:
            Results (possibly empty), or None if the query was empty or the
            search failed; the user has been notified in that case.
        """
        text = (query or "").strip()
        if not text:
            self.notifier.notify(ERROR_MESSAGES["EMPTY_QUERY"], success=False)
            return None

        try:
            return self.client.search(text, settings.credentials)
        except ExtractorError as e:
            logger.error(f"Search failed: {e}")
            self.notifier.notify(f"{ERROR_MESSAGES['SEARCH_FAILED']}: {e}", success=False)
            return None

    def select(self, result: SearchResult, settings: Settings) -> PipelineResult:
        """Run the pipeline for a chosen search result."""
        return self.run(result.uri, settings)
