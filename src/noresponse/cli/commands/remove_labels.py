"""
Remove workflow labels when an author closes their own issue.

Triggered by issues events.
"""

from typing import Optional

from noresponse.domain.config import NoResponseConfig
from noresponse.domain.exceptions import ConfigurationError, GitHubAPIError
from noresponse.domain.github_event import IssueEventContext
from noresponse.infrastructure.github.actions import GitHubActionsHelper
from noresponse.infrastructure.github.gh_issue_tracker import GhIssueTracker
from noresponse.services.composite.no_response_service import NoResponseService


def cmd_remove_labels(
    gh: GitHubActionsHelper,
    config: NoResponseConfig,
    event_name: str,
    event_path: Optional[str],
) -> int:
    """
    Strip the response-required and follow-up labels from a self-closed issue.

    All parameters passed explicitly, no environment variable access.

    Args:
        gh: GitHub Actions helper for outputs and errors
        config: Validated configuration
        event_name: GitHub event name (issues)
        event_path: Path to the event payload (GITHUB_EVENT_PATH)

    Outputs:
        removed_labels: Comma-separated label names removed

    Returns:
        0 on success, 1 on error
    """
    try:
        event = IssueEventContext.from_file(event_name, event_path)
    except ConfigurationError as e:
        gh.set_error(str(e))
        return 1

    service = NoResponseService(config, GhIssueTracker(event.repo, config.token))

    try:
        result = service.remove_labels_on_close(event)
    except GitHubAPIError as e:
        gh.set_error(f"Failed to remove labels from {event.issue_slug}: {str(e)}")
        return 1

    gh.write_outputs({"removed_labels": ",".join(result.removed_labels)})
    for label in result.removed_labels:
        gh.write_step_summary(f"- {event.issue_slug}: removed label '{label}'")

    return 0
