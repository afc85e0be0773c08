"""
Template rendering for release notes.

Templates contain ``{{placeholder}}`` tokens. The recognized names are
listed in ``PLACEHOLDERS``; any other token is left as written.
"""

import re
from collections import Counter
from typing import Dict

from ..core.config import ARTWORK_CONFIG, TEMPLATE_DEFAULTS
from ..core.logger import get_logger
from ..models.releases import ReleaseMetadata
from ..utils.string_utils import join_non_empty

logger = get_logger("services.template_renderer")

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")

PLACEHOLDERS = (
    "artist",
    "title",
    "release_date",
    "label",
    "genres",
    "catalog_number",
    "discogs_url",
    "artwork_path",
    "tracklist",
    "country",
    "format",
)


def format_release_date(metadata: ReleaseMetadata) -> str:
    """Precise date, then Discogs' formatted date, then the unknown sentinel."""
    if metadata.released and metadata.released != TEMPLATE_DEFAULTS["ZERO_DATE"]:
        return metadata.released
    if metadata.released_formatted:
        return metadata.released_formatted
    return TEMPLATE_DEFAULTS["UNKNOWN_RELEASE_DATE"]


def format_tracklist(metadata: ReleaseMetadata) -> str:
    if not metadata.has_tracklist:
        return TEMPLATE_DEFAULTS["NO_TRACKLIST"]

    lines = []
    for track in metadata.tracklist:
        duration = f" ({track.duration})" if track.duration else ""
        lines.append(f"- {track.position}: {track.title}{duration}")
    return "\n".join(lines)


def format_artwork(artwork_path: str) -> str:
    """Embed for the stored cover; empty when the release had no artwork."""
    if not artwork_path:
        return ""
    return f"![[{artwork_path}|{ARTWORK_CONFIG['EMBED_SIZE']}]]"


class TemplateRenderer:
    """Maps release metadata onto a note template."""

    def build_values(self, metadata: ReleaseMetadata, artwork_path: str) -> Dict[str, str]:
        """
        Compute the text for every recognized placeholder.

        Every value has a fallback, so missing optional metadata never
        produces "None" in the note.
        """
        label = metadata.primary_label

        return {
            "artist": " & ".join(metadata.artist_names),
            "title": metadata.title,
            "release_date": format_release_date(metadata),
            "label": label.name if label else "",
            "genres": ", ".join(metadata.genres),
            "catalog_number": label.catalog_number if label else "",
            "discogs_url": metadata.canonical_url,
            "artwork_path": format_artwork(artwork_path),
            "tracklist": format_tracklist(metadata),
            "country": metadata.country or TEMPLATE_DEFAULTS["UNKNOWN_COUNTRY"],
            "format": join_non_empty((f.name for f in metadata.formats), ", ")
                      or TEMPLATE_DEFAULTS["UNKNOWN_FORMAT"],
        }

    def render(self, template: str, metadata: ReleaseMetadata, artwork_path: str) -> str:
        """
        Render a template for a release.

        All occurrences of a recognized placeholder are replaced in one
        pass; substituted text is not scanned again.

        Args:
            template: Template text with {{placeholders}}
            metadata: Release to render
            artwork_path: Stored cover path relative to the vault, or ""

        Returns:
            Rendered note text
        """
        values = self.build_values(metadata, artwork_path)

        repeated = [
            name for name, count in Counter(PLACEHOLDER_PATTERN.findall(template)).items()
            if count > 1 and name in values
        ]
        if repeated:
            logger.debug(f"Placeholders used more than once, replacing every occurrence: {', '.join(repeated)}")

        def substitute(match: "re.Match") -> str:
            return values.get(match.group(1), match.group(0))

        return PLACEHOLDER_PATTERN.sub(substitute, template)
