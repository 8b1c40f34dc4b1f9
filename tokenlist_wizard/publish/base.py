"""Base class for change publishers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence


class BasePublisher(ABC):
    """Publishes a set of changed files as a named change."""

    @abstractmethod
    def publish(self, branch: str, files: Sequence[Path], message: str) -> None:
        """
        Publish changed files.

        Args:
            branch: Name of the branch the change goes on
            files: Files to include in the change
            message: Commit message

        Raises:
            PublishError: If any step fails
        """
        pass
