"""
The gitmoji catalogue: its entries, remote source and local cache.

See :mod:`gitmoji_helper.catalogue.store` for the cache semantics.
"""

from .client import CatalogueClient  # noqa: F401
from .model import CatalogueEntry, parse_catalogue  # noqa: F401
from .store import CatalogueStore, filter_entries  # noqa: F401
