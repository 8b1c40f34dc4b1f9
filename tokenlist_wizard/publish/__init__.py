"""Publishing of token list changes."""

from .base import BasePublisher
from .git_publisher import GitPublisher, branch_name_for, commit_message_for

__all__ = ["BasePublisher", "GitPublisher", "branch_name_for", "commit_message_for"]
