"""Core service for label bookkeeping.

Follows Service Layer pattern (Fowler, PoEAA) - wraps the IssueTracker label
operations with the idempotency rules the workflows rely on: creating a label
that exists and removing a label that is absent both count as success.
"""

import logging
from typing import List

from noresponse.domain.exceptions import GitHubNotFoundError, LabelAlreadyExistsError
from noresponse.infrastructure.github.issue_tracker import IssueTracker

logger = logging.getLogger(__name__)


class LabelService:
    """Core service for idempotent label operations on one repository."""

    def __init__(self, tracker: IssueTracker):
        """Initialize LabelService

        Args:
            tracker: Issue tracker for the repository
        """
        self.tracker = tracker

    def ensure_label_exists(self, name: str, color: str) -> bool:
        """Create a repository label unless it already exists

        Args:
            name: Label name
            color: Six hex digit color used if the label is created

        Returns:
            True if the label was created by this call, False if it already existed

        Raises:
            GitHubAPIError: If the lookup or creation fails for other reasons
        """
        if self.tracker.get_label(name) is not None:
            return False

        try:
            self.tracker.create_label(name, color)
        except LabelAlreadyExistsError:
            # Created concurrently by another run
            logger.debug("Label '%s' already exists", name)
            return False

        print(f"Created label '{name}' in {self.tracker.repo}")
        return True

    def get_labels(self, number: int) -> List[str]:
        return self.tracker.list_labels(number)

    def add_label(self, number: int, name: str) -> None:
        self.tracker.add_label(number, name)

    def remove_label(self, number: int, name: str) -> bool:
        """Remove a label from an issue, ignoring labels that are not present

        Args:
            number: Issue number
            name: Label name

        Returns:
            True if the label was removed, False if it was not on the issue

        Raises:
            GitHubAPIError: If the removal fails for other reasons
        """
        try:
            self.tracker.remove_label(number, name)
        except GitHubNotFoundError:
            logger.debug("Label '%s' not present on #%s", name, number)
            return False
        return True
