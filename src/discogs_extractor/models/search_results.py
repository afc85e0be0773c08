"""
Search result models.
"""

from dataclasses import dataclass
from typing import Optional

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class SearchResult:
    """Discogs release search result."""
    title: str
    uri: str
    artist: str = "Unknown Artist"
    year: str = NOT_AVAILABLE
    format: str = NOT_AVAILABLE
    release_id: Optional[str] = None
    thumb: Optional[str] = None

    def get_display_name(self) -> str:
        """Get display name for the result."""
        return self.title or "Unknown"

    def get_subtitle(self) -> str:
        """Get the one-line summary shown under the title."""
        return f"Artist: {self.artist} | Year: {self.year} | Format: {self.format}"
