"""
Pydantic models for Discogs API responses.

Raw JSON is validated here and converted into the immutable models in
``models``; nothing untyped leaves this module.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ValidationError, field_validator

from ..core.exceptions import MalformedResponse
from ..models.releases import Artist, Label, Format, Track, Image, ReleaseMetadata
from ..models.search_results import SearchResult, NOT_AVAILABLE


def _none_to_list(value: Any) -> Any:
    return [] if value is None else value


class ArtistPayload(BaseModel):
    name: str


class LabelPayload(BaseModel):
    name: str = ""
    catno: str = ""


class FormatPayload(BaseModel):
    name: str = ""


class ImagePayload(BaseModel):
    uri: str = ""


class TrackPayload(BaseModel):
    position: str = ""
    title: str = ""
    duration: Optional[str] = None


class ReleasePayload(BaseModel):
    """Body of ``GET /releases/{id}``. Only the fields we render are declared."""

    id: Optional[int] = None
    artists: List[ArtistPayload]
    title: str
    released: Optional[str] = None
    released_formatted: Optional[str] = None
    labels: List[LabelPayload] = []
    genres: List[str] = []
    country: Optional[str] = None
    formats: List[FormatPayload] = []
    images: List[ImagePayload] = []
    tracklist: List[TrackPayload] = []
    uri: str = ""

    @field_validator("labels", "genres", "formats", "images", "tracklist", mode="before")
    @classmethod
    def _missing_lists(cls, value: Any) -> Any:
        return _none_to_list(value)

    def to_metadata(self) -> ReleaseMetadata:
        return ReleaseMetadata(
            artists=tuple(Artist(name=a.name) for a in self.artists),
            title=self.title,
            released=self.released or None,
            released_formatted=self.released_formatted or None,
            labels=tuple(Label(name=l.name, catalog_number=l.catno) for l in self.labels),
            genres=tuple(self.genres),
            country=self.country or None,
            formats=tuple(Format(name=f.name) for f in self.formats),
            canonical_url=self.uri,
            tracklist=tuple(
                Track(position=t.position, title=t.title, duration=t.duration or None)
                for t in self.tracklist
            ),
            images=tuple(Image(uri=i.uri) for i in self.images),
            release_id=str(self.id) if self.id is not None else None,
        )


class SearchResultPayload(BaseModel):
    """One entry of the ``results`` array of ``GET /database/search``."""

    id: Optional[int] = None
    type: Optional[str] = None
    title: str = ""
    uri: str = ""
    artist: Union[List[str], str, None] = None
    year: Union[int, str, None] = None
    format: Union[List[str], str, None] = None
    thumb: Optional[str] = None

    @property
    def is_release(self) -> bool:
        return self.type is None or self.type == "release"

    def _artist_text(self) -> str:
        if isinstance(self.artist, list) and self.artist:
            return ", ".join(self.artist)
        if isinstance(self.artist, str) and self.artist:
            return self.artist
        # Search titles are formatted "Artist - Title"
        if " - " in self.title:
            return self.title.split(" - ", 1)[0].strip()
        return "Unknown Artist"

    def _format_text(self) -> str:
        if isinstance(self.format, list):
            return ", ".join(self.format) or NOT_AVAILABLE
        return self.format or NOT_AVAILABLE

    def to_result(self) -> SearchResult:
        release_id = str(self.id) if self.id is not None else None
        uri = self.uri
        if not uri and release_id:
            uri = f"https://www.discogs.com/release/{release_id}"
        return SearchResult(
            title=self.title,
            uri=uri,
            artist=self._artist_text(),
            year=str(self.year) if self.year else NOT_AVAILABLE,
            format=self._format_text(),
            release_id=release_id,
            thumb=self.thumb or None,
        )


class SearchResponsePayload(BaseModel):
    results: List[SearchResultPayload] = []

    @field_validator("results", mode="before")
    @classmethod
    def _missing_results(cls, value: Any) -> Any:
        return _none_to_list(value)


def parse_release(data: Dict[str, Any]) -> ReleaseMetadata:
    """
    Validate a release response body.

    Raises:
        MalformedResponse: If required fields are missing or have the wrong shape
    """
    try:
        return ReleasePayload.model_validate(data).to_metadata()
    except ValidationError as e:
        raise MalformedResponse(f"Unexpected release data from Discogs: {e.error_count()} invalid field(s)") from e


def parse_search_results(data: Dict[str, Any]) -> List[SearchResult]:
    """
    Validate a search response body and keep release entries only.

    Raises:
        MalformedResponse: If the results do not have the expected shape
    """
    try:
        payload = SearchResponsePayload.model_validate(data)
    except ValidationError as e:
        raise MalformedResponse(f"Unexpected search data from Discogs: {e.error_count()} invalid field(s)") from e
    return [entry.to_result() for entry in payload.results if entry.is_release]
