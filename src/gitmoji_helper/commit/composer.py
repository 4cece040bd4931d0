"""
Interactive composition of a gitmoji commit.

:class:`CommitComposer` walks through a fixed sequence of steps:

1. choose a gitmoji from the cached catalogue
2. enter a scope (only when the scope prompt is enabled)
3. enter the commit title
4. enter the commit message body (may be empty)
5. enter a referenced issue (only when the issue prompt is enabled)
6. assemble the title, e.g. ``":sparkles: core: add search (42)"``
7. optionally stage everything, then commit

Any failure along the way aborts the remaining steps. Side effects that
already happened are not undone; in particular a successful ``git add .``
stays in place when the commit itself fails.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from gitmoji_helper.catalogue.model import CatalogueEntry
from gitmoji_helper.catalogue.store import CatalogueStore
from gitmoji_helper.config.loader import Configuration, ConfigurationStore, EmojiFormat
from gitmoji_helper.errors import CatalogueError, ValidationError
from gitmoji_helper.prompts.adapter import PromptAdapter
from gitmoji_helper.vcs.git_client import ExitOutcome, GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# Characters that would break quoting of the commit arguments.
ILLEGAL_CHARACTERS = frozenset("`")


def validate_optional(value: str) -> str:
    """Accept any text free of illegal characters, including the empty string."""
    bad = sorted(set(value) & ILLEGAL_CHARACTERS)
    if bad:
        raise ValidationError(f"Must not contain {' '.join(bad)}")
    return value


def validate_required(value: str) -> str:
    """Accept non-empty text free of illegal characters."""
    if not value:
        raise ValidationError("Must not be empty")
    return validate_optional(value)


def assemble_title(
    marker: str,
    title: str,
    scope: Optional[str] = None,
    issue: Optional[str] = None,
) -> str:
    """Build the commit subject line.

    >>> assemble_title("✨", "add search", scope="core", issue="42")
    '✨ core: add search (42)'
    >>> assemble_title(":sparkles:", "add search")
    ':sparkles: add search'
    """
    parts = [marker, " "]
    if scope is not None:
        parts.append(f"{scope}: ")
    parts.append(title)
    if issue is not None:
        parts.append(f" ({issue})")
    return "".join(parts)


@dataclass
class CommitDraft:
    """Fields collected for one commit."""

    entry: CatalogueEntry
    title: str
    body: str
    scope: Optional[str] = None
    issue: Optional[str] = None

    def marker(self, fmt: EmojiFormat) -> str:
        return self.entry.code if fmt is EmojiFormat.CODE else self.entry.emoji

    def render_title(self, fmt: EmojiFormat) -> str:
        return assemble_title(self.marker(fmt), self.title, scope=self.scope, issue=self.issue)


class CommitComposer:
    """Collect a commit draft from the user and hand it to git.

    Parameters
    ----------
    catalogue : CatalogueStore
        Source of the gitmojis to choose from.
    settings : ConfigurationStore
        Decides which optional steps run and how the title is formatted.
    prompts : PromptAdapter
        Asks the user the questions.
    git : GitClient
        Stages and commits.
    """

    def __init__(
        self,
        catalogue: CatalogueStore,
        settings: ConfigurationStore,
        prompts: PromptAdapter,
        git: GitClient,
    ) -> None:
        self.catalogue = catalogue
        self.settings = settings
        self.prompts = prompts
        self.git = git

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def select_entry(self) -> CatalogueEntry:
        entries = self.catalogue.ensure_loaded(False)
        if not entries:
            raise CatalogueError("The gitmoji catalogue is empty")

        counts = Counter(entry.label for entry in entries)
        by_label: Dict[str, str] = {}
        for entry in entries:
            label = entry.label
            if counts[label] > 1:
                logger.debug("Label %r is shared, adding name %r", label, entry.name)
                label = f"{label} ({entry.name})"
            by_label[label] = entry.name
        by_name = {entry.name: entry for entry in entries}
        labels: List[str] = list(by_label)

        chosen = self.prompts.select("Choose a gitmoji:", labels)
        if chosen not in by_label:
            raise CatalogueError(f"Unknown gitmoji selection: {chosen!r}")
        return by_name[by_label[chosen]]

    def _ask(self, message: str, required: bool = True) -> str:
        validator = validate_required if required else validate_optional
        # Check again in case the adapter did not apply the validator.
        return validator(self.prompts.text(message, validator))

    def collect(self, config: Configuration) -> CommitDraft:
        """Run the interactive steps and return the completed draft."""
        entry = self.select_entry()
        scope = self._ask("Enter the scope of current changes:") if config.scope_prompt else None
        title = self._ask("Enter the commit title:")
        body = self._ask("Enter the commit message:", required=False)
        issue = self._ask("Enter the referring issue:") if config.issue_prompt else None
        return CommitDraft(entry=entry, title=title, body=body, scope=scope, issue=issue)

    def submit(self, draft: CommitDraft, config: Configuration) -> ExitOutcome:
        """Stage (if enabled) and commit the draft. The commit is not retried."""
        title = draft.render_title(config.emoji_format)

        staged = None
        if config.auto_stage:
            staged = self.git.stage_all()
            if not staged.success:
                logger.warning("git add failed, committing anyway: %s", staged.stderr.strip())

        logger.debug("Committing with title %r (signed=%s)", title, config.signed_commit)
        outcome = self.git.commit(title, draft.body, sign=config.signed_commit)
        if staged is not None and not staged.success and not outcome.success:
            outcome = replace(outcome, stderr=staged.stderr + outcome.stderr)
        return outcome

    def run(self) -> ExitOutcome:
        """Compose and submit one commit."""
        config = self.settings.load()
        draft = self.collect(config)
        return self.submit(draft, config)
