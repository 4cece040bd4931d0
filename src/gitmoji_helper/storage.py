"""
File helpers shared by the catalogue cache and the settings store.

Both stores replace their file as a whole. Writing goes to a temporary
file in the destination directory which is then moved over the target,
so a reader never observes a half written document.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from gitmoji_helper.errors import ParseError, StorageError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 text.

    Raises
    ------
    StorageError
        If the file cannot be read.
    ParseError
        If the content is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        logger.error("%s is not valid UTF-8: %s", path, exc)
        raise ParseError(f"{path.name} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        logger.error("Failed to read %s: %s", path, exc)
        raise StorageError(f"Could not read {path}: {exc}") from exc


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content``, creating parent directories on demand.

    Raises
    ------
    StorageError
        If the directory cannot be created or the file cannot be written.
    """
    tmp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_path, path)
    except OSError as exc:
        logger.error("Failed to write %s: %s", path, exc)
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise StorageError(f"Could not write {path}: {exc}") from exc
    logger.debug("Wrote %d characters to %s", len(content), path)
