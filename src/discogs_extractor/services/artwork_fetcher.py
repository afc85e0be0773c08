"""
Artwork fetching service that stores release covers inside the vault.
"""

import os
from pathlib import Path, PurePosixPath
from typing import Optional

import requests

from ..core.config import ARTWORK_CONFIG, DISCOGS_CONFIG
from ..core.exceptions import AssetDirectoryError, AssetDownloadFailed
from ..core.logger import get_logger
from ..utils.string_utils import sanitize_title

logger = get_logger("services.artwork_fetcher")


def artwork_filename(title: str) -> str:
    """Filename used for a release's cover, e.g. "abbey_road__cover.jpg"."""
    return f"{sanitize_title(title)}{ARTWORK_CONFIG['FILENAME_SUFFIX']}"


class ArtworkFetcher:
    """Downloads cover images into a folder below the vault root."""

    def __init__(self, vault_root: Path, session: Optional[requests.Session] = None):
        self.vault_root = Path(vault_root)
        self.timeout = DISCOGS_CONFIG["TIMEOUT"]
        self.chunk_size = ARTWORK_CONFIG["CHUNK_SIZE"]
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': DISCOGS_CONFIG["USER_AGENT"]})

    def ensure_folder(self, artwork_folder: str) -> Path:
        """
        Create the artwork folder (and parents) if it does not exist.

        Raises:
            AssetDirectoryError: If the folder cannot be created
        """
        folder_path = self.vault_root / artwork_folder
        try:
            folder_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise AssetDirectoryError(f"Cannot create artwork folder {folder_path}: {e}") from e
        return folder_path

    def download_artwork(self, image_url: str, title: str, artwork_folder: str) -> str:
        """
        Download an image and store it as "<sanitized title>_cover.jpg".

        The image is streamed to a temporary file next to the target and
        moved into place once complete, so a failed download never leaves
        a partial file behind. An existing cover with the same name is
        overwritten.

        Args:
            image_url: URL of the image
            title: Release title used to name the file
            artwork_folder: Folder relative to the vault root

        Returns:
            Path of the stored image relative to the vault root, "/" separated

        Raises:
            AssetDirectoryError: If the folder cannot be created
            AssetDownloadFailed: On transport, HTTP or write errors
        """
        folder_path = self.ensure_folder(artwork_folder)
        file_name = artwork_filename(title)
        file_path = folder_path / file_name
        part_path = folder_path / f".{file_name}.part"

        logger.debug(f"Downloading artwork {image_url} to {file_path}")
        try:
            with self.session.get(image_url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(part_path, "wb") as handle:
                    for chunk in response.iter_content(chunk_size=self.chunk_size):
                        if chunk:
                            handle.write(chunk)
            os.replace(part_path, file_path)
        except (requests.exceptions.RequestException, OSError) as e:
            self._remove_partial(part_path)
            raise AssetDownloadFailed(f"Failed to download artwork: {e}") from e

        relative_path = str(PurePosixPath(artwork_folder) / file_name)
        logger.info(f"Saved artwork to {relative_path}")
        return relative_path

    @staticmethod
    def _remove_partial(part_path: Path) -> None:
        try:
            part_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove partial artwork file {part_path}: {e}")
