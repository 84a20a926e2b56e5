"""IssueTracker backed by the GitHub REST API through the gh CLI"""

from typing import Dict, List, Optional
from urllib.parse import quote

from noresponse.domain.constants import EVENTS_PAGE_SIZE
from noresponse.domain.exceptions import GitHubNotFoundError
from noresponse.domain.github_models import GitHubIssue, GitHubLabel, GitHubLabelEvent, RepoRef
from noresponse.infrastructure.github.issue_tracker import IssueTracker
from noresponse.infrastructure.github.operations import gh_api_call, gh_api_paginate


class GhIssueTracker(IssueTracker):
    """GitHub issue tracker using `gh api`

    The token, when given, is handed to gh through GH_TOKEN for every call;
    without one gh falls back to its own authentication.

    Example:
        >>> tracker = GhIssueTracker(RepoRef("octocat", "hello"), token="ghp_...")
        >>> tracker.list_labels(12)
        ['bug', 'more-information-needed']
    """

    def __init__(self, repo: RepoRef, token: Optional[str] = None):
        super().__init__(repo)
        self.token = token

    @property
    def _env(self) -> Optional[Dict[str, str]]:
        return {"GH_TOKEN": self.token} if self.token else None

    def _repo_path(self, suffix: str = "") -> str:
        return f"repos/{self.repo.owner}/{self.repo.name}{suffix}"

    def _issue_path(self, number: int, suffix: str = "") -> str:
        return self._repo_path(f"/issues/{number}{suffix}")

    def search_issues(
        self, query: str, sort: str = "updated", order: str = "asc", per_page: int = 30
    ) -> List[GitHubIssue]:
        response = gh_api_call(
            "search/issues",
            method="GET",
            fields={"q": query, "sort": sort, "order": order, "per_page": per_page},
            env=self._env,
        )
        return [GitHubIssue.from_dict(item) for item in response.get("items", [])]

    def list_label_events(self, number: int) -> List[GitHubLabelEvent]:
        events = gh_api_paginate(
            self._issue_path(number, f"/events?per_page={EVENTS_PAGE_SIZE}"), env=self._env
        )
        return [GitHubLabelEvent.from_dict(event) for event in events]

    def list_labels(self, number: int) -> List[str]:
        labels = gh_api_paginate(
            self._issue_path(number, f"/labels?per_page={EVENTS_PAGE_SIZE}"), env=self._env
        )
        return [label["name"] for label in labels]

    def get_label(self, name: str) -> Optional[GitHubLabel]:
        try:
            response = gh_api_call(self._repo_path(f"/labels/{quote(name, safe='')}"), env=self._env)
        except GitHubNotFoundError:
            return None
        return GitHubLabel.from_dict(response)

    def create_label(self, name: str, color: str) -> None:
        gh_api_call(
            self._repo_path("/labels"),
            method="POST",
            fields={"name": name, "color": color},
            env=self._env,
        )

    def add_label(self, number: int, name: str) -> None:
        gh_api_call(
            self._issue_path(number, "/labels"),
            method="POST",
            fields={"labels": [name]},
            env=self._env,
        )

    def remove_label(self, number: int, name: str) -> None:
        gh_api_call(
            self._issue_path(number, f"/labels/{quote(name, safe='')}"),
            method="DELETE",
            env=self._env,
        )

    def add_comment(self, number: int, body: str) -> None:
        gh_api_call(
            self._issue_path(number, "/comments"),
            method="POST",
            fields={"body": body},
            env=self._env,
        )

    def update_issue_state(self, number: int, state: str, state_reason: Optional[str] = None) -> None:
        fields = {"state": state}
        if state_reason:
            fields["state_reason"] = state_reason
        gh_api_call(self._issue_path(number), method="PATCH", fields=fields, env=self._env)

    def get_issue(self, number: int) -> GitHubIssue:
        return GitHubIssue.from_dict(gh_api_call(self._issue_path(number), env=self._env))
