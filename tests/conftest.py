"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock, MagicMock
from typing import Generator

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def animals_payload():
    """Discogs release payload for Pink Floyd - Animals."""
    return {
        "id": 12345,
        "artists": [{"name": "Pink Floyd"}],
        "title": "Animals",
        "released": "1977-01-21",
        "labels": [{"name": "Harvest", "catno": "SHVL 815"}],
        "genres": ["Rock"],
        "country": "UK",
        "formats": [{"name": "Vinyl"}],
        "images": [{"uri": "http://x/img.jpg"}],
        "tracklist": [{"position": "A1", "title": "Pigs on the Wing 1"}],
        "uri": "https://provider/release/12345",
    }


@pytest.fixture
def animals_metadata(animals_payload):
    """ReleaseMetadata for Pink Floyd - Animals."""
    from discogs_extractor.clients.schemas import parse_release
    return parse_release(animals_payload)


@pytest.fixture
def minimal_metadata():
    """Release with only the required fields."""
    from discogs_extractor.models.releases import ReleaseMetadata, Artist
    return ReleaseMetadata(artists=(Artist(name="Unknown Band"),), title="Demo")


@pytest.fixture
def settings():
    """Default settings with credentials."""
    from discogs_extractor.core.settings import Settings
    return Settings(api_key="key", api_secret="secret")


@pytest.fixture
def mock_response():
    """Factory for mocked requests responses."""
    def _make(status_code=200, json_data=None, json_error=None, chunks=None):
        response = MagicMock()
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        response.iter_content.return_value = iter(chunks or [])
        response.raise_for_status = Mock()
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        return response
    return _make


@pytest.fixture
def mock_session():
    """Mock requests session."""
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def mock_notifier():
    """Mock notifier recording messages."""
    from discogs_extractor.core.interfaces import Notifier

    class RecordingNotifier(Notifier):
        def __init__(self):
            self.messages = []

        def notify(self, message, success=True):
            self.messages.append((message, success))

    return RecordingNotifier()


@pytest.fixture
def memory_surface():
    """Document surface backed by an in-memory document."""
    from discogs_extractor.core.interfaces import DocumentSurface, EditableDocument

    class MemoryDocument(EditableDocument):
        def __init__(self):
            self.content = "existing note"
            self.writes = 0

        def replace_content(self, text):
            self.content = text
            self.writes += 1

    class MemorySurface(DocumentSurface):
        def __init__(self):
            self.document = MemoryDocument()

        def get_active_document(self):
            return self.document

    return MemorySurface()
