"""
Git client implementation for gitmoji_helper.

Only two commands are needed: staging everything and committing with a
title and a body. Both report the outcome of the process instead of
raising on a non-zero exit, so that the CLI can show git's own output to
the user. Failing to start git at all raises :class:`ProcessError`.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from gitmoji_helper.errors import ProcessError


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


@dataclass(frozen=True)
class ExitOutcome:
    """Result of running a git command."""

    success: bool
    stdout: str = ""
    stderr: str = ""


class GitClient:
    """Run git commands in ``work_dir`` (the current directory by default)."""

    def __init__(self, work_dir: Optional[Path] = None, executable: str = "git") -> None:
        self.work_dir = work_dir
        self.executable = executable

    def _run(self, args: List[str]) -> ExitOutcome:
        """Run a git command and capture its output.

        Raises
        ------
        ProcessError
            If the git executable cannot be started.
        """
        full_cmd = [self.executable] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.work_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",  # Replace invalid characters instead of failing
            )
        except OSError as exc:
            logger.error("Could not start %s: %s", self.executable, exc)
            raise ProcessError(f"Could not run {self.executable}: {exc}") from exc

        if result.returncode != 0:
            logger.debug(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
        return ExitOutcome(
            success=result.returncode == 0,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    def stage_all(self) -> ExitOutcome:
        """Stage every change below the working directory (``git add .``)."""
        return self._run(["add", "."])

    def commit(self, title: str, body: str, sign: bool = False) -> ExitOutcome:
        """Create a commit with ``title`` as subject and ``body`` as second paragraph.

        Parameters
        ----------
        sign : bool, optional
            Request a GPG signed commit (``-S``).
        """
        args = ["commit"]
        if sign:
            args.append("-S")
        args += ["-m", title, "-m", body]
        return self._run(args)
