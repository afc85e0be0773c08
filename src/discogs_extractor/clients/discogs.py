"""
Discogs Client Module
A client for looking up and searching releases in the Discogs database.
"""

import requests
from typing import Dict, List, Optional, Any

from ..models.releases import ReleaseMetadata
from ..models.search_results import SearchResult
from ..core.config import DISCOGS_CONFIG
from ..core.exceptions import (
    MalformedResponse,
    NetworkError,
    RemoteLookupFailed,
    Unauthorized,
)
from ..core.logger import get_logger
from ..core.settings import Credentials
from .schemas import parse_release, parse_search_results

logger = get_logger("clients.discogs")


class DiscogsClient:
    """Discogs release lookup and search client.

    Every call makes exactly one request: there is no retry and no cache.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.base_url = DISCOGS_CONFIG["BASE_URL"]
        self.user_agent = DISCOGS_CONFIG["USER_AGENT"]
        self.timeout = DISCOGS_CONFIG["TIMEOUT"]

        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'application/json'
        })

    def _make_request(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a single GET request and decode the JSON body.

        Args:
            url: Request URL
            params: Query parameters (escaped by requests)

        Returns:
            Decoded JSON object

        Raises:
            NetworkError: On DNS, connection or timeout failures
            Unauthorized: On HTTP 401
            RemoteLookupFailed: On any other non-200 status
            MalformedResponse: If the body is not a JSON object
        """
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise NetworkError(f"Could not reach Discogs: {e}") from e

        logger.debug(f"Received response from Discogs API ({response.status_code})")

        if response.status_code == 401:
            raise Unauthorized()
        if response.status_code != 200:
            raise RemoteLookupFailed(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponse("Discogs returned a body that is not valid JSON") from e

        if not isinstance(data, dict):
            raise MalformedResponse("Discogs returned JSON that is not an object")

        return data

    @staticmethod
    def _credential_params(credentials: Optional[Credentials]) -> Dict[str, str]:
        if credentials and credentials.is_complete:
            return {'key': credentials.api_key, 'secret': credentials.api_secret}
        return {}

    def fetch_release(self, release_id: str, credentials: Optional[Credentials] = None) -> ReleaseMetadata:
        """
        Get release metadata by Discogs release ID.

        Credentials are sent only when both key and secret are set;
        otherwise the request is anonymous.

        Args:
            release_id: Discogs release ID
            credentials: Optional consumer key/secret

        Returns:
            Validated ReleaseMetadata
        """
        url = f"{self.base_url}/releases/{release_id}"
        logger.info(f"Fetching release details for Discogs ID: {release_id}")

        data = self._make_request(url, self._credential_params(credentials))
        metadata = parse_release(data)

        logger.debug(f"Fetched metadata for '{metadata.title}' ({len(metadata.tracklist)} tracks)")
        return metadata

    def search(self, query: str, credentials: Credentials) -> List[SearchResult]:
        """
        Search Discogs for releases.

        Args:
            query: Free-text query
            credentials: Consumer key/secret, sent as query parameters

        Returns:
            Release search results in the order Discogs returns them
        """
        url = f"{self.base_url}/database/search"
        params = {
            'q': query,
            'type': 'release',
            'key': credentials.api_key,
            'secret': credentials.api_secret,
        }

        logger.info(f"Searching Discogs releases with query: {query}")
        data = self._make_request(url, params)
        results = parse_search_results(data)

        logger.debug(f"Discogs search returned {len(results)} release(s)")
        return results
