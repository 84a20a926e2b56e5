"""GitHub event context for the comment and close workflows.

This module parses the webhook payloads No Response reacts to: issue_comment
events (which may unmark an issue) and issues events (where a self-close
strips the workflow labels). Only the handful of fields the workflows consult
are extracted.

Following the principle: "Parse once into well-formed models"
"""

import json
import os
from dataclasses import dataclass
from typing import Optional

from noresponse.domain.exceptions import ConfigurationError
from noresponse.domain.github_models import RepoRef

ISSUE_COMMENT_EVENT = "issue_comment"
ISSUES_EVENT = "issues"


@dataclass
class IssueEventContext:
    """Parsed GitHub issue event with extracted fields for No Response.

    Attributes:
        event_name: The GitHub event type (issue_comment, issues)
        action: The event action (created, closed, ...)
        repo: Repository the event belongs to
        issue_number: Issue the event refers to
        issue_author: Login of the issue's original author
        comment_author: Login of the commenter (issue_comment events)
        sender: Login of the user who triggered the event

    Examples:
        >>> context = IssueEventContext.from_json("issues", '{"action": "closed", ...}')
        >>> context.is_closed_by_author()
        True
    """

    event_name: str
    action: Optional[str]
    repo: RepoRef
    issue_number: int
    issue_author: Optional[str] = None
    comment_author: Optional[str] = None
    sender: Optional[str] = None

    @classmethod
    def from_json(cls, event_name: str, event_json: str) -> "IssueEventContext":
        """Parse GitHub event JSON into structured context.

        Args:
            event_name: The GitHub event name (e.g., "issue_comment", "issues")
            event_json: The JSON payload GitHub writes to GITHUB_EVENT_PATH

        Returns:
            IssueEventContext with all relevant fields extracted

        Raises:
            ConfigurationError: If the payload is not JSON or has no issue

        Examples:
            >>> context = IssueEventContext.from_json(
            ...     "issue_comment",
            ...     '{"action": "created", "repository": {"owner": {"login": "o"}, "name": "r"},'
            ...     ' "issue": {"number": 7, "user": {"login": "alice"}},'
            ...     ' "comment": {"user": {"login": "alice"}, "body": "Here you go"}}'
            ... )
            >>> context.issue_number
            7
        """
        try:
            event = json.loads(event_json) if event_json else {}
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid event payload JSON: {str(e)}")

        return cls.from_dict(event_name, event)

    @classmethod
    def from_dict(cls, event_name: str, event: dict) -> "IssueEventContext":
        """Build context from an already-decoded payload

        Raises:
            ConfigurationError: If the payload has no repository or issue
        """
        repository = event.get("repository") or {}
        owner = (repository.get("owner") or {}).get("login")
        name = repository.get("name")
        if not owner or not name:
            raise ConfigurationError("Event payload is missing the repository")

        issue = event.get("issue") or {}
        if issue.get("number") is None:
            raise ConfigurationError("Event payload is missing the issue")

        comment = event.get("comment") or {}

        return cls(
            event_name=event_name,
            action=event.get("action"),
            repo=RepoRef(owner=owner, name=name),
            issue_number=int(issue["number"]),
            issue_author=(issue.get("user") or {}).get("login"),
            comment_author=(comment.get("user") or {}).get("login"),
            sender=(event.get("sender") or {}).get("login"),
        )

    @classmethod
    def from_file(cls, event_name: str, event_path: Optional[str]) -> "IssueEventContext":
        """Read and parse the event payload file

        Args:
            event_name: The GitHub event name
            event_path: Path from GITHUB_EVENT_PATH

        Returns:
            Parsed IssueEventContext

        Raises:
            ConfigurationError: If the path is unset, missing or invalid
        """
        if not event_path:
            raise ConfigurationError("GITHUB_EVENT_PATH is not defined")
        if not os.path.exists(event_path):
            raise ConfigurationError(f"Event payload not found: {event_path}")

        with open(event_path, "r") as f:
            content = f.read()

        return cls.from_json(event_name, content)

    @property
    def issue_slug(self) -> str:
        return self.repo.issue_slug(self.issue_number)

    def is_closed_event(self) -> bool:
        return self.action == "closed"

    def is_closed_by_author(self) -> bool:
        """Check if the issue author closed their own issue"""
        return (
            self.is_closed_event()
            and self.issue_author is not None
            and self.sender == self.issue_author
        )
