"""
HTTP client for the remote gitmoji catalogue.

A single GET of a well known URL; no authentication and no paging. Any
transport problem or non-200 answer is raised as :class:`FetchError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from gitmoji_helper.config.paths import GITMOJI_URL
from gitmoji_helper.errors import FetchError


logger = logging.getLogger(__name__)
# Attach a null handler to avoid errors when the root logger is missing a
# stream. Messages will still propagate to the root logger if configured.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


@dataclass
class CatalogueClient:
    """Fetch the raw catalogue document.

    Parameters
    ----------
    url : str, optional
        Location of the ``gitmojis.json`` document.
    request_timeout : float, optional
        Timeout in seconds for the request. Defaults to 30 seconds.
    """

    url: str = GITMOJI_URL
    request_timeout: float = 30.0

    def fetch(self) -> bytes:
        """Return the document body.

        Raises
        ------
        FetchError
            If the request fails or the server does not answer with 200.
        """
        logger.debug("Fetching gitmoji catalogue from %s", self.url)
        try:
            response = requests.get(self.url, timeout=self.request_timeout)
        except requests.RequestException as exc:
            logger.error("Failed to fetch catalogue: %s", exc)
            raise FetchError(f"Could not reach {self.url}: {exc}") from exc
        if response.status_code != 200:
            logger.error("Catalogue server returned status %s", response.status_code)
            raise FetchError(f"{self.url} returned status {response.status_code}")
        logger.debug("Fetched %d bytes", len(response.content))
        return response.content
