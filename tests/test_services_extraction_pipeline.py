"""
Tests for the extraction pipeline.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

import requests

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from discogs_extractor.clients.discogs import DiscogsClient
from discogs_extractor.core.exceptions import (
    AssetDownloadFailed,
    InvalidUrlFormat,
    NoActiveDocument,
    DocumentWriteError,
    RemoteLookupFailed,
    Unauthorized,
)
from discogs_extractor.core.interfaces import DocumentSurface, EditableDocument
from discogs_extractor.core.settings import Settings
from discogs_extractor.models.search_results import SearchResult
from discogs_extractor.services.artwork_fetcher import ArtworkFetcher
from discogs_extractor.services.extraction_pipeline import (
    ExtractionPipeline, PipelineResult, PipelineState
)
from discogs_extractor.services.template_renderer import TemplateRenderer

URL = "https://www.discogs.com/release/12345-Pink-Floyd-Animals"


@pytest.fixture
def pipeline(temp_dir, mock_session, memory_surface, mock_notifier):
    """Pipeline wired to a mocked HTTP session and in-memory document."""
    return ExtractionPipeline(
        client=DiscogsClient(session=mock_session),
        artwork_fetcher=ArtworkFetcher(temp_dir, session=mock_session),
        renderer=TemplateRenderer(),
        document_surface=memory_surface,
        notifier=mock_notifier,
    )


class TestPipelineResult:
    """Tests for PipelineResult."""

    def test_initial_state(self):
        """Test a fresh result."""
        result = PipelineResult()
        assert result.state is PipelineState.IDLE
        assert result.history == [PipelineState.IDLE]
        assert result.succeeded is False
        assert result.failed_in is None

    def test_failed_in(self):
        """Test that failed_in reports the state before FAILED."""
        result = PipelineResult()
        result.advance(PipelineState.RESOLVING_ID)
        result.advance(PipelineState.FAILED)
        assert result.failed_in is PipelineState.RESOLVING_ID


class TestRun:
    """Tests for ExtractionPipeline.run."""

    def test_end_to_end(self, pipeline, temp_dir, mock_session, mock_response,
                        animals_payload, memory_surface, mock_notifier):
        """Test a full extraction into the active document."""
        mock_session.get.side_effect = [
            mock_response(json_data=animals_payload),
            mock_response(chunks=[b"jpeg-bytes"]),
        ]

        result = pipeline.run(URL, Settings())

        assert result.succeeded
        assert result.history == [
            PipelineState.IDLE,
            PipelineState.RESOLVING_ID,
            PipelineState.FETCHING_METADATA,
            PipelineState.FETCHING_ARTWORK,
            PipelineState.RENDERING,
            PipelineState.DELIVERED,
        ]
        assert result.release_id == "12345"
        assert result.artwork_path == "music/artwork/animals_cover.jpg"
        assert (temp_dir / "music" / "artwork" / "animals_cover.jpg").read_bytes() == b"jpeg-bytes"

        document = memory_surface.document
        assert document.writes == 1
        assert document.content == result.rendered
        assert document.content.startswith(
            "---\nartist: Pink Floyd\ntitle: Animals\nrelease_date: 1977-01-21\n"
        )
        assert "![[music/artwork/animals_cover.jpg|500x500]]" in document.content
        assert "- A1: Pigs on the Wing 1" in document.content
        assert mock_notifier.messages == [("Discogs metadata extracted successfully!", True)]

        release_call, image_call = mock_session.get.call_args_list
        assert release_call[0][0] == "https://api.discogs.com/releases/12345"
        assert image_call[0][0] == "http://x/img.jpg"

    def test_custom_template_and_folder(self, pipeline, mock_session, mock_response,
                                        animals_payload, memory_surface):
        """Test that the run uses the settings it is given."""
        mock_session.get.side_effect = [
            mock_response(json_data=animals_payload),
            mock_response(chunks=[b"x"]),
        ]
        settings = Settings(artwork_folder="covers", metadata_template="{{title}} {{artwork_path}}")

        pipeline.run(URL, settings)

        assert memory_surface.document.content == "Animals ![[covers/animals_cover.jpg|500x500]]"

    def test_invalid_url_fails_before_network(self, pipeline, mock_session,
                                              memory_surface, mock_notifier):
        """Test that a URL without a release ID stops at resolution."""
        result = pipeline.run("https://www.discogs.com/master/1", Settings())

        assert result.state is PipelineState.FAILED
        assert result.failed_in is PipelineState.RESOLVING_ID
        assert isinstance(result.error, InvalidUrlFormat)
        mock_session.get.assert_not_called()
        assert memory_surface.document.content == "existing note"
        assert mock_notifier.messages == [("Error: Invalid Discogs URL format", False)]

    def test_lookup_failure(self, pipeline, mock_session, mock_response,
                            memory_surface, mock_notifier):
        """Test that a failed lookup leaves the document untouched."""
        mock_session.get.return_value = mock_response(status_code=404)

        result = pipeline.run(URL, Settings())

        assert result.failed_in is PipelineState.FETCHING_METADATA
        assert isinstance(result.error, RemoteLookupFailed)
        assert memory_surface.document.writes == 0
        assert len(mock_notifier.messages) == 1
        assert mock_notifier.messages[0][1] is False

    def test_unauthorized(self, pipeline, mock_session, mock_response):
        """Test rejected credentials."""
        mock_session.get.return_value = mock_response(status_code=401)

        result = pipeline.run(URL, Settings(api_key="bad", api_secret="bad"))

        assert isinstance(result.error, Unauthorized)

    def test_artwork_failure_leaves_document_untouched(self, pipeline, mock_session, mock_response,
                                                       animals_payload, memory_surface, mock_notifier):
        """Test that a failed image download aborts before rendering."""
        mock_session.get.side_effect = [
            mock_response(json_data=animals_payload),
            requests.exceptions.ConnectionError("reset"),
        ]

        result = pipeline.run(URL, Settings())

        assert result.state is PipelineState.FAILED
        assert result.failed_in is PipelineState.FETCHING_ARTWORK
        assert isinstance(result.error, AssetDownloadFailed)
        assert result.rendered is None
        assert memory_surface.document.content == "existing note"
        assert memory_surface.document.writes == 0
        assert [success for _, success in mock_notifier.messages] == [False]

    def test_no_images_renders_without_artwork(self, pipeline, mock_session, mock_response,
                                               animals_payload, memory_surface):
        """Test that a release without images still renders."""
        animals_payload["images"] = []
        mock_session.get.return_value = mock_response(json_data=animals_payload)
        settings = Settings(metadata_template="[{{artwork_path}}] {{title}}")

        result = pipeline.run(URL, settings)

        assert result.succeeded
        assert result.artwork_path == ""
        assert memory_surface.document.content == "[] Animals"
        assert mock_session.get.call_count == 1

    def test_no_active_document(self, temp_dir, mock_session, mock_response,
                                animals_payload, mock_notifier):
        """Test that a missing document fails the run."""
        surface = Mock(spec=DocumentSurface)
        surface.get_active_document.return_value = None
        mock_session.get.return_value = mock_response(json_data=animals_payload)
        pipeline = ExtractionPipeline(
            DiscogsClient(session=mock_session),
            ArtworkFetcher(temp_dir, session=mock_session),
            TemplateRenderer(),
            surface,
            mock_notifier,
        )

        result = pipeline.run(URL, Settings())

        assert isinstance(result.error, NoActiveDocument)
        assert result.failed_in is PipelineState.FETCHING_METADATA
        assert mock_notifier.messages == [("Error: No active editor found.", False)]
        assert mock_session.get.call_count == 1

    def test_document_write_error(self, temp_dir, mock_session, mock_response,
                                  animals_payload, mock_notifier):
        """Test that a failed write becomes DocumentWriteError."""
        document = Mock(spec=EditableDocument)
        document.replace_content.side_effect = PermissionError("read-only")
        surface = Mock(spec=DocumentSurface)
        surface.get_active_document.return_value = document
        mock_session.get.side_effect = [
            mock_response(json_data=animals_payload),
            mock_response(chunks=[b"x"]),
        ]
        pipeline = ExtractionPipeline(
            DiscogsClient(session=mock_session),
            ArtworkFetcher(temp_dir, session=mock_session),
            TemplateRenderer(),
            surface,
            mock_notifier,
        )

        result = pipeline.run(URL, Settings())

        assert isinstance(result.error, DocumentWriteError)
        assert result.failed_in is PipelineState.RENDERING
        assert mock_notifier.messages[-1][1] is False

    def test_reruns_replace_rather_than_append(self, pipeline, mock_session, mock_response,
                                               animals_payload, memory_surface):
        """Test that running twice leaves one copy of the note."""
        mock_session.get.side_effect = [
            mock_response(json_data=animals_payload),
            mock_response(chunks=[b"x"]),
            mock_response(json_data=animals_payload),
            mock_response(chunks=[b"x"]),
        ]

        first = pipeline.run(URL, Settings())
        second = pipeline.run(URL, Settings())

        assert first.rendered == second.rendered
        assert memory_surface.document.content == second.rendered
        assert memory_surface.document.writes == 2


class TestEntryPoints:
    """Tests for clipboard, input, search and selection entry points."""

    def test_clipboard_without_discogs_url(self, pipeline, mock_session, mock_notifier):
        """Test clipboard text that is not a Discogs URL."""
        assert pipeline.run_from_clipboard("just some text", Settings()) is None
        assert pipeline.run_from_clipboard(None, Settings()) is None
        assert mock_notifier.messages == [
            ("No Discogs URL found in clipboard", False),
            ("No Discogs URL found in clipboard", False),
        ]
        mock_session.get.assert_not_called()

    def test_clipboard_with_discogs_url(self, pipeline, mock_session, mock_response, animals_payload):
        """Test clipboard text holding a Discogs URL, with surrounding whitespace."""
        mock_session.get.side_effect = [
            mock_response(json_data=animals_payload),
            mock_response(chunks=[b"x"]),
        ]

        result = pipeline.run_from_clipboard(f"  {URL}\n", Settings())

        assert result.succeeded

    def test_input_without_discogs_url(self, pipeline, mock_notifier):
        """Test typed input that is not a Discogs URL."""
        assert pipeline.run_from_input("https://example.com/release/1", Settings()) is None
        assert mock_notifier.messages == [("Please enter a valid Discogs URL.", False)]

    def test_input_discogs_url_without_release(self, pipeline, mock_notifier):
        """Test a Discogs URL that is not a release page."""
        result = pipeline.run_from_input("https://www.discogs.com/artist/1", Settings())

        assert result.failed_in is PipelineState.RESOLVING_ID
        assert mock_notifier.messages == [("Error: Invalid Discogs URL format", False)]

    def test_search_empty_query(self, pipeline, mock_session, mock_notifier):
        """Test that an empty query is rejected locally."""
        assert pipeline.search("   ", Settings()) is None
        assert mock_notifier.messages == [("Please enter a search term.", False)]
        mock_session.get.assert_not_called()

    def test_search_success(self, pipeline, mock_session, mock_response, settings):
        """Test a successful search."""
        mock_session.get.return_value = mock_response(json_data={"results": [
            {"id": 1, "type": "release", "title": "Pink Floyd - Animals", "uri": "/release/1"},
        ]})

        results = pipeline.search(" Animals ", settings)

        assert [r.uri for r in results] == ["/release/1"]
        assert mock_session.get.call_args[1]["params"]["q"] == "Animals"

    def test_search_failure(self, pipeline, mock_session, mock_response, mock_notifier, settings):
        """Test that a failed search notifies and returns None."""
        mock_session.get.return_value = mock_response(status_code=500)

        assert pipeline.search("Animals", settings) is None
        message, success = mock_notifier.messages[0]
        assert message.startswith("Error fetching results: ")
        assert success is False

    def test_select_runs_on_result_uri(self, pipeline, mock_session, mock_response, animals_payload):
        """Test that selecting a result runs the pipeline on its URI."""
        mock_session.get.side_effect = [
            mock_response(json_data=animals_payload),
            mock_response(chunks=[b"x"]),
        ]
        choice = SearchResult(title="Pink Floyd - Animals", uri="/release/12345-Pink-Floyd-Animals")

        result = pipeline.select(choice, Settings())

        assert result.succeeded
        assert result.release_id == "12345"
