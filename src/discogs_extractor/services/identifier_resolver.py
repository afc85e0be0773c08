"""
Release identifier extraction from Discogs URLs.
"""

import re
from typing import Any

from ..core.config import DISCOGS_CONFIG
from ..core.exceptions import InvalidUrlFormat

RELEASE_ID_PATTERN = re.compile(r"release/(\d+)")


def resolve_release_id(url: Any) -> str:
    """
    Extract the numeric release ID from a URL.

    Works for web URLs ("https://www.discogs.com/release/123-Artist-Title")
    and for the relative URIs returned by search ("/release/123-...").

    Raises:
        InvalidUrlFormat: If no "release/<digits>" segment is present
    """
    if not isinstance(url, str):
        raise InvalidUrlFormat()

    match = RELEASE_ID_PATTERN.search(url)
    if not match:
        raise InvalidUrlFormat()
    return match.group(1)


def is_discogs_url(text: Any) -> bool:
    """Check whether text contains a Discogs web address."""
    return isinstance(text, str) and DISCOGS_CONFIG["URL_MARKER"] in text
