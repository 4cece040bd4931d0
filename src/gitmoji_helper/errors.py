"""
Error taxonomy for gitmoji_helper.

Every component raises a subclass of :class:`GitmojiError` so that the
CLI can report a failure without knowing which component produced it,
while callers that care can still tell a network failure apart from a
corrupt cache or a rejected input.
"""

from __future__ import annotations


class GitmojiError(Exception):
    """Base class for all errors raised by gitmoji_helper."""

    pass


class FetchError(GitmojiError):
    """Raised when the remote catalogue is unreachable or answers with an error."""

    pass


class ParseError(GitmojiError):
    """Raised when a document does not have the expected structure."""

    pass


class StorageError(GitmojiError):
    """Raised when reading or writing a local file fails."""

    pass


class ValidationError(GitmojiError):
    """Raised when user supplied text is empty or contains illegal characters."""

    pass


class ProcessError(GitmojiError):
    """Raised when the version control executable cannot be started."""

    pass


class CatalogueError(GitmojiError):
    """Raised for catalogue problems not covered elsewhere (missing list, no entries)."""

    pass


class PromptError(GitmojiError):
    """Raised when the user aborts an interactive prompt."""

    pass
