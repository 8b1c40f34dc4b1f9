"""Publishing token list changes with git.

Runs checkout, add, commit and push in sequence; the first failing
command aborts the rest. Already completed steps are not rolled back.
"""

import logging
import re
import subprocess
from pathlib import Path
from typing import Sequence

from ..core.exceptions import PublishError
from .base import BasePublisher

logger = logging.getLogger(__name__)


BRANCH_UNSAFE_PATTERN = re.compile(r"[^A-Za-z0-9._-]+")


def branch_name_for(symbol: str) -> str:
    """Branch for adding a token; characters git rejects in ref names become dashes."""
    component = BRANCH_UNSAFE_PATTERN.sub("-", symbol).strip(".-") or "token"
    component = component.replace("..", "-")
    return f"feat/add-{component}-token"


def commit_message_for(symbol: str) -> str:
    """Commit message for adding a token."""
    return f"feat: add {symbol} token"


class GitPublisher(BasePublisher):
    """Creates a branch with the change and pushes it upstream."""

    def __init__(self, repo_root: Path, remote: str = "origin", git: str = "git"):
        self.repo_root = Path(repo_root)
        self.remote = remote
        self.git = git

    def _run(self, *args: str) -> str:
        command = [self.git, *args]
        logger.debug(f"Running {' '.join(command)} in {self.repo_root}")
        try:
            completed = subprocess.run(
                command,
                cwd=self.repo_root,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            raise PublishError(command, e.returncode, e.stderr or "")
        except FileNotFoundError:
            raise PublishError(command, 127, f"{self.git}: command not found")
        return completed.stdout

    def commands_for(
        self,
        branch: str,
        files: Sequence[Path],
        message: str,
    ) -> list[list[str]]:
        """The git argument lists publish() runs, in order."""
        return [
            ["checkout", "-b", branch],
            ["add", *(str(f) for f in files)],
            ["commit", "-m", message],
            ["push", "-u", self.remote, "HEAD"],
        ]

    def publish(self, branch: str, files: Sequence[Path], message: str) -> None:
        if not files:
            raise ValueError("Nothing to publish")

        for args in self.commands_for(branch, files, message):
            self._run(*args)

        logger.info(f"Pushed {branch} to {self.remote}")
