"""
Command line interface for the gitmoji_helper tool.

This module defines the ``main`` function used as the entry point of the
``gitmoji`` command. Each flag maps to one operation on the catalogue
cache, the settings store or the commit composer. When several flags are
given they run in a fixed order: list, update, search, commit, config.
Every failed operation prints a short notice to stderr and makes the
command exit with a non-zero status.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, List, Optional

import click

from gitmoji_helper import __version__
from gitmoji_helper.catalogue.client import CatalogueClient
from gitmoji_helper.catalogue.model import CatalogueEntry
from gitmoji_helper.catalogue.store import CatalogueStore
from gitmoji_helper.commit.composer import CommitComposer
from gitmoji_helper.config.loader import ConfigurationStore
from gitmoji_helper.config.paths import GITMOJI_URL, AppPaths
from gitmoji_helper.errors import GitmojiError
from gitmoji_helper.prompts.adapter import ClickPromptAdapter, PromptAdapter
from gitmoji_helper.vcs.git_client import GitClient

# Create a module-level logger. Attach a null handler and disable
# propagation to avoid logging errors when the root logger's stream is
# closed (such as during unit tests). When logging is configured by
# the CLI, root handlers will be added and messages will propagate.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1


# ---------------------------------------------------------------------------
# Progress and status display utilities
# ---------------------------------------------------------------------------

class ProgressIndicator:
    """Simple progress indicator for user feedback."""

    def __init__(self, message: str, show_spinner: bool = True):
        self.message = message
        self.show_spinner = show_spinner
        self.spinner_chars = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        if self.show_spinner:
            click.echo(f"{self.spinner_chars[0]} {self.message}...", nl=False)
        else:
            click.echo(f"→ {self.message}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            # End the spinner line; the caller reports the error.
            if self.show_spinner:
                click.echo("")
            return False
        elapsed = time.time() - self.start_time
        if self.show_spinner:
            click.echo(f"\r✓ {self.message} (took {elapsed:.1f}s)")
        else:
            click.echo(f"  ✓ Done ({elapsed:.1f}s)")
        return False


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=False)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def format_entry(entry: CatalogueEntry) -> str:
    return f"{entry.emoji} - {click.style(entry.code, fg='blue')} - {entry.description}"


def print_entries(entries: List[CatalogueEntry]) -> None:
    for entry in entries:
        click.echo(format_entry(entry))


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def get_app_paths() -> AppPaths:
    """Resolve the per-user file locations."""
    return AppPaths.default()


def make_prompt_adapter() -> PromptAdapter:
    return ClickPromptAdapter()


class FetchingCatalogueClient(CatalogueClient):
    """Catalogue client that shows a spinner while downloading."""

    def fetch(self) -> bytes:
        with ProgressIndicator("Fetching the emoji list"):
            return super().fetch()


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def list_emojis(store: CatalogueStore, refetch: bool) -> None:
    print_entries(store.ensure_loaded(force_refresh=refetch))


def search_emojis(store: CatalogueStore, query: str) -> None:
    print_entries(store.search(query))


def commit(composer: CommitComposer) -> bool:
    outcome = composer.run()
    if outcome.success:
        click.echo(outcome.stdout)
        return True
    click.echo(outcome.stderr, err=True)
    return False


def configure(settings: ConfigurationStore, prompts: PromptAdapter) -> None:
    current = settings.load()
    updated = settings.edit(current, prompts)
    settings.save(updated)
    print_success(f"Configuration saved to {settings.config_file}")


def _attempt(failure_notice: str, action: Callable[[], Optional[bool]]) -> bool:
    """Run ``action`` and report failures without a traceback.

    Returns ``True`` if the action succeeded.
    """
    try:
        return action() is not False
    except GitmojiError as exc:
        logger.debug("%s failed", failure_notice, exc_info=True)
        print_error(failure_notice)
        print_error(str(exc), indent=1)
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        print_error(failure_notice)
        print_error(f"Unexpected error: {exc}", indent=1)
    return False


def _enable_package_logging() -> None:
    """Let the module loggers reach the root handlers installed by ``basicConfig``."""
    for name, candidate in logging.root.manager.loggerDict.items():
        if name.startswith("gitmoji_helper") and isinstance(candidate, logging.Logger):
            candidate.propagate = True


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-l", "--list", "list_", is_flag=True, help="List all available gitmojis.")
@click.option("-u", "--update", is_flag=True, help="Refresh the cached list of gitmojis.")
@click.option("-s", "--search", metavar="QUERY", help="Search gitmojis by name or description.")
@click.option("-c", "--commit", "commit_", is_flag=True, help="Interactively commit using the prompts.")
@click.option("-g", "--config", "config_", is_flag=True, help="Set up gitmoji preferences.")
@click.option("--url", default=GITMOJI_URL, show_default=True, help="Where to fetch the gitmoji list from.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="gitmoji")
@click.pass_context
def main(
    ctx: click.Context,
    list_: bool,
    update: bool,
    search: Optional[str],
    commit_: bool,
    config_: bool,
    url: str,
    verbose: bool,
) -> None:
    """😜 Compose commit messages with gitmojis."""
    # Configure logging. Use force=True to ensure handlers are reconfigured
    # on subsequent invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    if verbose:
        _enable_package_logging()

    if not (list_ or update or search is not None or commit_ or config_):
        click.echo(ctx.get_help())
        ctx.exit(EXIT_SUCCESS)

    paths = get_app_paths()
    logger.debug("Using cache %s and settings %s", paths.cache_file, paths.config_file)
    store = CatalogueStore(paths.cache_file, FetchingCatalogueClient(url=url))
    settings = ConfigurationStore(paths.config_file)

    ok = True
    if list_:
        ok &= _attempt("Could not list gitmojis.", lambda: list_emojis(store, refetch=False))
    if update:
        ok &= _attempt("Could not update gitmojis.", lambda: list_emojis(store, refetch=True))
    if search is not None:
        ok &= _attempt("Could not search gitmojis.", lambda: search_emojis(store, search))
    if commit_:
        prompts = make_prompt_adapter()
        composer = CommitComposer(store, settings, prompts, GitClient(Path.cwd()))
        ok &= _attempt("Could not commit.", lambda: commit(composer))
    if config_:
        ok &= _attempt("Could not configure.", lambda: configure(settings, make_prompt_adapter()))

    ctx.exit(EXIT_SUCCESS if ok else EXIT_GENERIC_ERROR)
