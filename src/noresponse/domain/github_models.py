"""GitHub domain models for No Response

Issues, labels and issue events as the REST API returns them, reduced to the
fields the sweep and the event handlers read. Each model has a from_dict
constructor so decisions never see raw API dictionaries.

Following the principle: "Parse once into well-formed models"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from noresponse.domain.constants import LABELED_EVENT
from noresponse.domain.exceptions import ConfigurationError


def parse_github_datetime(value: str) -> datetime:
    """Parse an ISO 8601 timestamp as returned by the GitHub REST API

    Args:
        value: Timestamp string (e.g., "2024-01-01T12:00:00Z")

    Returns:
        Timezone-aware datetime
    """
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class IssueState(Enum):
    """State of a GitHub issue."""

    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def from_string(cls, state: str) -> IssueState:
        """Parse issue state from string (case-insensitive).

        Args:
            state: State string from GitHub API (e.g., "OPEN", "closed")

        Returns:
            IssueState enum value

        Raises:
            ValueError: If state string is not a valid issue state
        """
        normalized = state.lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Invalid issue state: {state}")


@dataclass(frozen=True)
class RepoRef:
    """Repository reference in owner/name form"""

    owner: str
    name: str

    @classmethod
    def from_string(cls, full_name: str) -> RepoRef:
        """Parse "owner/name" into a RepoRef

        Args:
            full_name: Repository in format "owner/name"

        Returns:
            RepoRef instance

        Raises:
            ConfigurationError: If the string is not in owner/name form

        Example:
            >>> RepoRef.from_string("octocat/hello-world").name
            'hello-world'
        """
        parts = (full_name or "").strip().split("/")
        if len(parts) != 2 or not all(parts):
            raise ConfigurationError(
                f"Invalid repository '{full_name}': expected format 'owner/name'"
            )
        return cls(owner=parts[0], name=parts[1])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def issue_slug(self, number: int) -> str:
        """Human readable issue reference, e.g. "owner/repo#12" """
        return f"{self.full_name}#{number}"

    def __str__(self) -> str:
        return self.full_name


@dataclass
class GitHubLabel:
    """Domain model for a repository label"""

    name: str
    color: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> GitHubLabel:
        return cls(name=data["name"], color=data.get("color"))


@dataclass
class GitHubLabelEvent:
    """Domain model for an issue event from the issue events API

    Only "labeled" events carry a label; other events (closed, reopened,
    assigned, ...) are parsed with label_name set to None.
    """

    created_at: datetime
    event: str
    label_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> GitHubLabelEvent:
        """Parse from GitHub API response

        Args:
            data: Dictionary from GET /repos/{owner}/{repo}/issues/{number}/events

        Returns:
            GitHubLabelEvent instance

        Example:
            >>> event = GitHubLabelEvent.from_dict({
            ...     "event": "labeled",
            ...     "created_at": "2024-01-01T12:00:00Z",
            ...     "label": {"name": "more-information-needed"}
            ... })
            >>> event.label_name
            'more-information-needed'
        """
        created_at = data["created_at"]
        if isinstance(created_at, str):
            created_at = parse_github_datetime(created_at)

        label = data.get("label") or {}

        return cls(
            created_at=created_at,
            event=data["event"],
            label_name=label.get("name"),
        )

    def is_labeled_with(self, label: str) -> bool:
        """Check if this event applied the given label"""
        return self.event == LABELED_EVENT and self.label_name == label


@dataclass
class GitHubIssue:
    """Domain model for a GitHub issue

    Search results omit closed_by, so it is None for issues returned by
    the search API even when they are closed.
    """

    number: int
    author: Optional[str]
    state: IssueState = IssueState.OPEN
    closed_by: Optional[str] = None
    labels: List[str] = field(default_factory=list)
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> GitHubIssue:
        """Parse from GitHub API response

        Handles both GET /repos/{owner}/{repo}/issues/{number} and items of
        GET /search/issues.

        Args:
            data: Issue dictionary from the GitHub REST API

        Returns:
            GitHubIssue instance with all fields parsed
        """
        user = data.get("user") or {}
        closed_by = data.get("closed_by") or {}

        labels = []
        for label_data in data.get("labels", []):
            if isinstance(label_data, dict):
                labels.append(label_data["name"])
            else:
                labels.append(str(label_data))

        updated_at = data.get("updated_at")
        if updated_at and isinstance(updated_at, str):
            updated_at = parse_github_datetime(updated_at)

        return cls(
            number=data["number"],
            author=user.get("login"),
            state=IssueState.from_string(data.get("state", "open")),
            closed_by=closed_by.get("login"),
            labels=labels,
            updated_at=updated_at,
        )

    def is_closed(self) -> bool:
        return self.state == IssueState.CLOSED
