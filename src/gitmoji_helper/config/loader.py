"""
Settings store for gitmoji_helper.

The settings are a JSON object stored in ``~/.gitmoji/config.json``::

    {
        "autoStage": false,
        "emojiFormat": "code",
        "scopePrompt": false,
        "signedCommit": false,
        "issuePrompt": false
    }

Every key is optional. A missing file, or a missing key, falls back to the
defaults so that a first run works without any setup. A file that exists
but cannot be read or does not match the structure above raises an error
instead of being silently replaced.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from gitmoji_helper.errors import ParseError
from gitmoji_helper.prompts.adapter import PromptAdapter
from gitmoji_helper.storage import atomic_write_text, read_text


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings. The CLI configures
# the root logger when it wants to see these messages.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


class EmojiFormat(Enum):
    """How the chosen gitmoji is written at the start of a commit title."""

    CODE = "code"
    GLYPH = "glyph"


_FORMAT_LABELS = {
    EmojiFormat.CODE: ":smile:",
    EmojiFormat.GLYPH: "😄",
}


def render_emoji_format(fmt: EmojiFormat) -> str:
    """Return the label shown for ``fmt`` in the settings dialog."""
    return _FORMAT_LABELS[fmt]


@dataclass(frozen=True)
class Configuration:
    """User settings controlling the optional commit steps.

    Attributes
    ----------
    auto_stage : bool
        Run ``git add .`` before committing.
    emoji_format : EmojiFormat
        Use the ``:code:`` or the unicode glyph in the title.
    scope_prompt : bool
        Ask for a scope segment.
    signed_commit : bool
        Pass ``-S`` to ``git commit``.
    issue_prompt : bool
        Ask for a referenced issue.
    """

    auto_stage: bool = False
    emoji_format: EmojiFormat = EmojiFormat.CODE
    scope_prompt: bool = False
    signed_commit: bool = False
    issue_prompt: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "autoStage": self.auto_stage,
            "emojiFormat": self.emoji_format.value,
            "scopePrompt": self.scope_prompt,
            "signedCommit": self.signed_commit,
            "issuePrompt": self.issue_prompt,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Configuration":
        """Build a configuration from its JSON form.

        Raises
        ------
        ParseError
            If a known key has a value of the wrong type.
        """
        values: Dict[str, Any] = {}
        for key, field_name in _BOOL_FIELDS.items():
            if key in data:
                if not isinstance(data[key], bool):
                    raise ParseError(f"'{key}' must be a boolean")
                values[field_name] = data[key]
        if "emojiFormat" in data:
            raw = data["emojiFormat"]
            try:
                values["emoji_format"] = EmojiFormat(raw)
            except ValueError as exc:
                raise ParseError(
                    f"'emojiFormat' must be one of: "
                    f"{', '.join(fmt.value for fmt in EmojiFormat)}"
                ) from exc
        return cls(**values)


_BOOL_FIELDS = {
    "autoStage": "auto_stage",
    "scopePrompt": "scope_prompt",
    "signedCommit": "signed_commit",
    "issuePrompt": "issue_prompt",
}


class ConfigurationStore:
    """Load, edit and save the :class:`Configuration` kept in ``config_file``."""

    def __init__(self, config_file: Path) -> None:
        self.config_file = config_file

    def load(self) -> Configuration:
        """Load the settings, returning the defaults when nothing was saved yet.

        Raises
        ------
        StorageError
            If the file exists but cannot be read.
        ParseError
            If the file is not a JSON object of the expected shape.
        """
        if not self.config_file.exists():
            logger.debug("No settings at %s, using defaults", self.config_file)
            return Configuration()

        content = read_text(self.config_file)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            logger.error("Failed to parse settings file: %s", exc)
            raise ParseError(f"Invalid JSON in {self.config_file.name}: {exc}") from exc
        if not isinstance(data, dict):
            raise ParseError(f"{self.config_file.name} must contain a JSON object")

        config = Configuration.from_dict(data)
        logger.debug("Loaded settings from %s: %s", self.config_file, config)
        return config

    def save(self, config: Configuration) -> None:
        """Persist the whole record, replacing any previous file."""
        atomic_write_text(self.config_file, json.dumps(config.to_dict(), indent=2) + "\n")
        logger.debug("Saved settings to %s", self.config_file)

    def edit(self, current: Configuration, prompts: PromptAdapter) -> Configuration:
        """Ask for every setting, using the current values as defaults.

        The questions are asked in a fixed order. ``current`` is left
        untouched; the edited settings are returned as a new record, and
        nothing is returned at all if any question fails.
        """
        auto_stage = prompts.confirm('Enable automatic "git add .":', default=current.auto_stage)

        formats = list(EmojiFormat)
        labels = [render_emoji_format(fmt) for fmt in formats]
        chosen = prompts.select(
            "Select how emojis should be used in commits:",
            labels,
            default=formats.index(current.emoji_format),
        )
        emoji_format = formats[labels.index(chosen)]

        scope_prompt = prompts.confirm("Enable scope prompt:", default=current.scope_prompt)
        signed_commit = prompts.confirm("Enable signed commits:", default=current.signed_commit)
        issue_prompt = prompts.confirm("Enable referring issue prompt:", default=current.issue_prompt)

        return replace(
            current,
            auto_stage=auto_stage,
            emoji_format=emoji_format,
            scope_prompt=scope_prompt,
            signed_commit=signed_commit,
            issue_prompt=issue_prompt,
        )

    # ------------------------------------------------------------------
    # Convenience accessors. Each one reloads the file so that a change
    # made by another process is visible on the next call.
    # ------------------------------------------------------------------
    def is_auto_stage(self) -> bool:
        return self.load().auto_stage

    def emoji_format(self) -> EmojiFormat:
        return self.load().emoji_format

    def is_scope_prompt_enabled(self) -> bool:
        return self.load().scope_prompt

    def is_signed_commit_enabled(self) -> bool:
        return self.load().signed_commit

    def is_issue_prompt_enabled(self) -> bool:
        return self.load().issue_prompt
