"""
Commit composition: validation, title assembly and the interactive flow.

See :mod:`gitmoji_helper.commit.composer`.
"""

from .composer import (  # noqa: F401
    CommitComposer,
    CommitDraft,
    assemble_title,
    validate_optional,
    validate_required,
)
