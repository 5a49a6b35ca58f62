"""PokéAPI access for single Pokemon records."""

import logging
from typing import Optional

import requests

from constants import API_POKEMON_URL, REQUEST_TIMEOUT, USER_AGENT
from models import Pokemon

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised for any failed fetch: HTTP error status, transport error or bad payload."""


class PokeApiClient:
    """
    Thin client for ``GET /pokemon/{id}``.
    Keeps one persistent HTTP session; no caching, no retries.
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 base_url: str = API_POKEMON_URL, timeout: Optional[float] = REQUEST_TIMEOUT):
        self._session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"User-Agent": USER_AGENT})
        return self._session

    def pokemon_url(self, pokemon_id: int) -> str:
        return f"{self.base_url}/{pokemon_id}"

    def fetch_pokemon(self, pokemon_id: int) -> Pokemon:
        """Fetch and parse one Pokemon by national dex number."""
        url = self.pokemon_url(pokemon_id)
        logger.debug("Fetching %s", url)
        try:
            resp = self.get_session().get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(str(e)) from e

        if resp.status_code >= 400:
            raise FetchError(f"Failed to fetch: {resp.status_code}")

        try:
            return Pokemon.from_api(resp.json())
        except ValueError as e:
            # json decode errors are ValueError subclasses too
            raise FetchError(str(e)) from e

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
