"""
Interactive questions asked of the user.

The commit composer and the settings dialog only need three kinds of
question: pick one of several labels, type a line of text, or answer
yes/no. :class:`PromptAdapter` describes that contract so the callers do
not depend on a particular terminal library; :class:`ClickPromptAdapter`
implements it on top of ``click.prompt`` and ``click.confirm``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

import click

from gitmoji_helper.errors import PromptError, ValidationError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


Validator = Callable[[str], str]


class PromptAdapter(ABC):
    """Ask the user a question and return a validated answer, or fail."""

    @abstractmethod
    def select(self, message: str, items: Sequence[str], default: Optional[int] = None) -> str:
        """Return the label chosen from ``items``."""

    @abstractmethod
    def text(self, message: str, validator: Validator) -> str:
        """Return a line of text accepted by ``validator``.

        ``validator`` returns the value it accepts and raises
        :class:`ValidationError` otherwise.
        """

    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        """Return the answer to a yes/no question."""


class ClickPromptAdapter(PromptAdapter):
    """Terminal implementation of :class:`PromptAdapter` using click.

    Parameters
    ----------
    page_size : int, optional
        Number of choices shown at once by :meth:`select`. Longer lists
        can be narrowed down by typing part of a label instead of a number.
    """

    def __init__(self, page_size: int = 20) -> None:
        self.page_size = page_size

    def select(self, message: str, items: Sequence[str], default: Optional[int] = None) -> str:
        if not items:
            raise PromptError("Nothing to choose from")

        visible: List[str] = list(items)
        while True:
            click.echo(f"\n{click.style('?', fg='green', bold=True)} {click.style(message, bold=True)}")
            for idx, label in enumerate(visible[: self.page_size], start=1):
                click.echo(f"  {idx:>3}) {label}")
            if len(visible) > self.page_size:
                click.echo(f"  ... {len(visible) - self.page_size} more, type text to filter")

            prompt_default = None
            if default is not None and visible == list(items):
                prompt_default = str(default + 1)
            answer = self._prompt("  Number or filter", default=prompt_default).strip()

            if answer.isdigit():
                choice = int(answer)
                if 1 <= choice <= min(len(visible), self.page_size):
                    return visible[choice - 1]
                click.echo(click.style(f"  ✗ {choice} is not in the list", fg="red"))
                continue

            needle = answer.lower()
            matches = [label for label in items if needle in label.lower()]
            if not matches:
                click.echo(click.style(f"  ✗ Nothing matches '{answer}'", fg="red"))
                visible = list(items)
                continue
            if len(matches) == 1:
                return matches[0]
            visible = matches

    def text(self, message: str, validator: Validator) -> str:
        while True:
            value = self._prompt(
                f"{click.style('?', fg='green', bold=True)} {click.style(message, bold=True)}",
                default="",
            )
            try:
                return validator(value)
            except ValidationError as exc:
                click.echo(click.style(f"  ✗ {exc}", fg="red"))

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return click.confirm(
                f"{click.style('?', fg='green', bold=True)} {click.style(message, bold=True)}",
                default=default,
            )
        except click.exceptions.Abort as exc:
            logger.debug("Confirmation aborted: %s", message)
            raise PromptError("Aborted by user") from exc

    @staticmethod
    def _prompt(text: str, default: Optional[str] = None) -> str:
        try:
            return click.prompt(text, default=default, show_default=bool(default), type=str)
        except click.exceptions.Abort as exc:
            logger.debug("Prompt aborted: %s", text)
            raise PromptError("Aborted by user") from exc
