"""
Configuration for the Discogs Metadata Extractor.
Contains all constants, defaults and global parameters.
"""

import os
from pathlib import Path

# Project Information
PROJECT_NAME = "Discogs Metadata Extractor"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Extract Discogs release metadata and artwork into Markdown notes"
PROG_NAME = "discogs-extractor"

# File Paths
CONFIG_DIR = Path(
    os.environ.get(
        "DISCOGS_EXTRACTOR_CONFIG_DIR",
        Path.home() / ".config" / "discogs-extractor",
    )
)
SETTINGS_FILE = CONFIG_DIR / "settings.json"

# Discogs Configuration
DISCOGS_CONFIG = {
    "BASE_URL": "https://api.discogs.com",
    "USER_AGENT": "DiscogsMetadataExtractor/1.0",
    "TIMEOUT": 30,
    "URL_MARKER": "discogs.com/",
}

# Artwork Configuration
ARTWORK_CONFIG = {
    "FILENAME_SUFFIX": "_cover.jpg",
    "EMBED_SIZE": "500x500",
    "CHUNK_SIZE": 8192,
}

# Fallback values used when a release lacks a field
TEMPLATE_DEFAULTS = {
    "UNKNOWN_RELEASE_DATE": "Unknown release date",
    "UNKNOWN_COUNTRY": "Unknown country",
    "UNKNOWN_FORMAT": "Unknown format",
    "NO_TRACKLIST": "No tracklist available",
    "ZERO_DATE": "0000-00-00",
}

DEFAULT_TEMPLATE = (
    "---\n"
    "artist: {{artist}}\n"
    "title: {{title}}\n"
    "release_date: {{release_date}}\n"
    "label: {{label}}\n"
    "genres: {{genres}}\n"
    "catalog_number: {{catalog_number}}\n"
    "discogs_url: {{discogs_url}}\n"
    "country: {{country}}\n"
    "format: {{format}}\n"
    "---\n\n"
    "{{artwork_path}}\n"
    "## Tracklist\n"
    "{{tracklist}}\n"
)

DEFAULT_SETTINGS = {
    "artwork_folder": "music/artwork",
    "metadata_template": DEFAULT_TEMPLATE,
    "api_key": "",
    "api_secret": "",
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.environ.get("DISCOGS_EXTRACTOR_LOG_LEVEL", "WARNING").upper(),
}

# Error Messages
ERROR_MESSAGES = {
    "NO_URL_IN_CLIPBOARD": "No Discogs URL found in clipboard",
    "INVALID_URL": "Please enter a valid Discogs URL.",
    "INVALID_URL_FORMAT": "Invalid Discogs URL format",
    "NO_ACTIVE_DOCUMENT": "No active editor found.",
    "EMPTY_QUERY": "Please enter a search term.",
    "SEARCH_FAILED": "Error fetching results",
    "NO_RESULTS": "No results found.",
    "NETWORK_ERROR": "Network error occurred.",
}

# Success Messages
SUCCESS_MESSAGES = {
    "EXTRACTION_COMPLETE": "Discogs metadata extracted successfully!",
    "SETTINGS_RESTORED": "Settings restored to defaults.",
    "SETTINGS_SAVED": "Settings saved.",
}
