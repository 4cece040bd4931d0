"""
Per-user file locations.

All state lives below ``~/.gitmoji/``: the cached catalogue in
``gitmojis.json`` and the settings in ``config.json``. The locations are
resolved once by :meth:`AppPaths.default` when the CLI starts and are
then handed to the stores, which makes it trivial to point the stores at
a temporary directory in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


GITMOJI_URL = "https://raw.githubusercontent.com/carloscuesta/gitmoji/master/src/data/gitmojis.json"

CACHE_FILE_NAME = "gitmojis.json"
CONFIG_FILE_NAME = "config.json"


def _get_base_directory() -> Path:
    """Return the directory that holds the cache and settings files."""
    return Path.home() / ".gitmoji"


@dataclass(frozen=True)
class AppPaths:
    """Resolved locations of the files owned by the tool.

    Attributes
    ----------
    base_dir : Path
        Directory containing everything below.
    cache_file : Path
        Cached copy of the remote catalogue document.
    config_file : Path
        Persisted :class:`~gitmoji_helper.config.loader.Configuration`.
    """

    base_dir: Path
    cache_file: Path
    config_file: Path

    @classmethod
    def from_base(cls, base_dir: Path) -> "AppPaths":
        return cls(
            base_dir=base_dir,
            cache_file=base_dir / CACHE_FILE_NAME,
            config_file=base_dir / CONFIG_FILE_NAME,
        )

    @classmethod
    def default(cls) -> "AppPaths":
        return cls.from_base(_get_base_directory())
