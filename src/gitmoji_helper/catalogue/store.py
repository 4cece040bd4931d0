"""
Local cache of the gitmoji catalogue.

The catalogue is fetched once and kept in ``~/.gitmoji/gitmojis.json``.
Later runs read the cached copy; a refresh fetches again and replaces the
file wholesale. A new document is only written after it has been parsed
successfully, so a failed refresh leaves the previous cache as it was.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from gitmoji_helper.catalogue.client import CatalogueClient
from gitmoji_helper.catalogue.model import CatalogueEntry, parse_catalogue
from gitmoji_helper.errors import ParseError
from gitmoji_helper.storage import atomic_write_text, read_text


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


def filter_entries(entries: Iterable[CatalogueEntry], query: str) -> List[CatalogueEntry]:
    """Return the entries whose name or description contains ``query``.

    Matching ignores case and keeps the catalogue order. An empty query
    matches every entry.
    """
    needle = query.lower()
    return [
        entry
        for entry in entries
        if needle in entry.name.lower() or needle in entry.description.lower()
    ]


class CatalogueStore:
    """Owner of the cached catalogue file.

    Parameters
    ----------
    cache_file : Path
        Where the catalogue document is cached.
    client : CatalogueClient, optional
        Used to download the document when the cache is missing or a
        refresh is requested.
    """

    def __init__(self, cache_file: Path, client: Optional[CatalogueClient] = None) -> None:
        self.cache_file = cache_file
        self.client = client or CatalogueClient()

    def exists(self) -> bool:
        return self.cache_file.exists()

    def ensure_loaded(self, force_refresh: bool = False) -> List[CatalogueEntry]:
        """Return the catalogue, downloading it first if needed.

        Parameters
        ----------
        force_refresh : bool, optional
            Download and replace the cache even when it already exists.

        Raises
        ------
        FetchError
            If the download fails.
        ParseError, CatalogueError
            If the downloaded or cached document is malformed.
        StorageError
            If the cache cannot be read or written.
        """
        if force_refresh or not self.exists():
            return self._refresh()

        logger.debug("Using cached catalogue at %s", self.cache_file)
        return parse_catalogue(read_text(self.cache_file))

    def search(self, query: str) -> List[CatalogueEntry]:
        """Filter the cached catalogue, see :func:`filter_entries`."""
        return filter_entries(self.ensure_loaded(False), query)

    def _refresh(self) -> List[CatalogueEntry]:
        raw = self.client.fetch()
        try:
            document = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"Catalogue is not valid UTF-8: {exc}") from exc

        # Validate before touching the existing cache.
        entries = parse_catalogue(document)
        atomic_write_text(self.cache_file, document)
        logger.debug("Cached %d gitmojis at %s", len(entries), self.cache_file)
        return entries
