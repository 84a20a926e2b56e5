"""Abstract interface for issue tracker operations

This module defines the IssueTracker interface No Response talks to. The
services only depend on this contract, so they can run against the gh CLI in
a workflow and against an in-memory tracker in tests.

Implementations:
- GhIssueTracker: GitHub REST API through the gh CLI
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from noresponse.domain.github_models import GitHubIssue, GitHubLabel, GitHubLabelEvent, RepoRef


def build_search_query(repo: RepoRef, label: str) -> str:
    """Search query for open issues carrying a label

    Example:
        >>> build_search_query(RepoRef("octocat", "hello"), "more-information-needed")
        'repo:octocat/hello is:issue is:open label:"more-information-needed"'
    """
    return f'repo:{repo.full_name} is:issue is:open label:"{label}"'


class IssueTracker(ABC):
    """Issue, label and comment operations for a single repository

    Label removal of a label that is not on the issue raises
    GitHubNotFoundError and label creation of an existing label raises
    LabelAlreadyExistsError; callers decide whether those are errors.
    """

    def __init__(self, repo: RepoRef):
        self.repo = repo

    @abstractmethod
    def search_issues(
        self, query: str, sort: str = "updated", order: str = "asc", per_page: int = 30
    ) -> List[GitHubIssue]:
        """Search issues, returning a single page of results

        Raises:
            GitHubAPIError: If the search fails
        """
        pass

    @abstractmethod
    def list_label_events(self, number: int) -> List[GitHubLabelEvent]:
        """List all events of an issue in chronological order

        Raises:
            GitHubAPIError: If the API call fails
        """
        pass

    @abstractmethod
    def list_labels(self, number: int) -> List[str]:
        """List the names of the labels currently on an issue

        Raises:
            GitHubAPIError: If the API call fails
        """
        pass

    @abstractmethod
    def get_label(self, name: str) -> Optional[GitHubLabel]:
        """Get a repository label, or None if it does not exist

        Raises:
            GitHubAPIError: If the API call fails for reasons other than not found
        """
        pass

    @abstractmethod
    def create_label(self, name: str, color: str) -> None:
        """Create a repository label

        Raises:
            LabelAlreadyExistsError: If the label already exists
            GitHubAPIError: If the API call fails
        """
        pass

    @abstractmethod
    def add_label(self, number: int, name: str) -> None:
        """Add a label to an issue (no-op if already present)

        Raises:
            GitHubAPIError: If the API call fails
        """
        pass

    @abstractmethod
    def remove_label(self, number: int, name: str) -> None:
        """Remove a label from an issue

        Raises:
            GitHubNotFoundError: If the label is not on the issue
            GitHubAPIError: If the API call fails
        """
        pass

    @abstractmethod
    def add_comment(self, number: int, body: str) -> None:
        """Post a comment on an issue

        Raises:
            GitHubAPIError: If the API call fails
        """
        pass

    @abstractmethod
    def update_issue_state(self, number: int, state: str, state_reason: Optional[str] = None) -> None:
        """Open or close an issue

        Args:
            number: Issue number
            state: "open" or "closed"
            state_reason: Optional reason recorded with the state change

        Raises:
            GitHubAPIError: If the API call fails
        """
        pass

    @abstractmethod
    def get_issue(self, number: int) -> GitHubIssue:
        """Get an issue with its author, state and closer

        Raises:
            GitHubNotFoundError: If the issue does not exist
            GitHubAPIError: If the API call fails
        """
        pass
