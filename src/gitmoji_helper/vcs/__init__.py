"""
Version control integration.

Contains the :class:`GitClient` used to stage and commit changes.
"""

from .git_client import ExitOutcome, GitClient  # noqa: F401
