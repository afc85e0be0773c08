"""
Release models.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Artist:
    """Artist credited on a release."""
    name: str


@dataclass(frozen=True)
class Label:
    """Label entry with its catalog number."""
    name: str = ""
    catalog_number: str = ""


@dataclass(frozen=True)
class Format:
    """Physical or digital format, e.g. "Vinyl" or "CD"."""
    name: str = ""


@dataclass(frozen=True)
class Track:
    """Tracklist entry from a release."""
    position: str
    title: str
    duration: Optional[str] = None


@dataclass(frozen=True)
class Image:
    """Image attached to a release."""
    uri: str


@dataclass(frozen=True)
class ReleaseMetadata:
    """Release information as returned by a Discogs lookup."""
    artists: Tuple[Artist, ...]
    title: str
    released: Optional[str] = None
    released_formatted: Optional[str] = None
    labels: Tuple[Label, ...] = ()
    genres: Tuple[str, ...] = ()
    country: Optional[str] = None
    formats: Tuple[Format, ...] = ()
    canonical_url: str = ""
    tracklist: Tuple[Track, ...] = ()
    images: Tuple[Image, ...] = ()
    release_id: Optional[str] = None

    @property
    def artist_names(self) -> Tuple[str, ...]:
        return tuple(artist.name for artist in self.artists)

    @property
    def primary_label(self) -> Optional[Label]:
        return self.labels[0] if self.labels else None

    @property
    def cover_image_url(self) -> Optional[str]:
        """URI of the first image, used as artwork."""
        for image in self.images[:1]:
            if image.uri:
                return image.uri
        return None

    @property
    def has_tracklist(self) -> bool:
        return len(self.tracklist) > 0
