"""
String utility functions for file naming and display.
"""

import re
from typing import Iterable, Optional

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def sanitize_title(title: Optional[str]) -> str:
    """
    Turn a release title into a filename stem.

    Every character outside [A-Za-z0-9] becomes "_" and the result is
    lowercased. Different titles can map to the same stem.

    Args:
        title: Release title

    Returns:
        Sanitized stem, e.g. "Abbey Road!" -> "abbey_road_"
    """
    if not title:
        return ""
    return _NON_ALPHANUMERIC.sub("_", title).lower()


def join_non_empty(values: Iterable[Optional[str]], separator: str) -> str:
    """Join the truthy values with separator."""
    return separator.join(value for value in values if value)
