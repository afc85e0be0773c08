"""
Custom exceptions for the Discogs Metadata Extractor.
"""

from typing import Optional


class ExtractorError(Exception):
    """Base exception for the extractor."""
    pass


class ConfigurationError(ExtractorError):
    """Exception raised when configuration or settings are invalid."""
    pass


class InvalidUrlFormat(ExtractorError):
    """Exception raised when no numeric release identifier is found in a URL."""

    def __init__(self, message: str = "Invalid Discogs URL format"):
        super().__init__(message)


class RemoteLookupFailed(ExtractorError):
    """Exception raised when the Discogs API answers with a non-200 status."""

    def __init__(self, status: int, message: Optional[str] = None):
        self.status = status
        super().__init__(message or f"API request failed with status {status}")


class Unauthorized(RemoteLookupFailed):
    """Exception raised when Discogs rejects the configured credentials."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            401,
            message or "Discogs rejected the API credentials (status 401)",
        )


class NetworkError(ExtractorError, ConnectionError):
    """Exception raised when network operations fail."""
    pass


class MalformedResponse(ExtractorError):
    """Exception raised when a response body does not match the expected schema."""
    pass


class AssetDownloadFailed(ExtractorError):
    """Exception raised when artwork cannot be downloaded."""
    pass


class AssetDirectoryError(ExtractorError):
    """Exception raised when the artwork folder cannot be created."""
    pass


class NoActiveDocument(ExtractorError):
    """Exception raised when there is no document to write into."""

    def __init__(self, message: str = "No active editor found."):
        super().__init__(message)


class DocumentWriteError(ExtractorError):
    """Exception raised when the rendered text cannot be written."""
    pass


class ClipboardError(ExtractorError):
    """Exception raised when the system clipboard cannot be read."""
    pass
