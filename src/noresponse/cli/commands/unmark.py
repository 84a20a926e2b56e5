"""
Clear the response-required label when the issue author comments.

Triggered by issue_comment events.
"""

from typing import Optional

from noresponse.domain.config import NoResponseConfig
from noresponse.domain.exceptions import ConfigurationError, GitHubAPIError
from noresponse.domain.github_event import IssueEventContext
from noresponse.infrastructure.github.actions import GitHubActionsHelper
from noresponse.infrastructure.github.gh_issue_tracker import GhIssueTracker
from noresponse.services.composite.no_response_service import NoResponseService


def cmd_unmark(
    gh: GitHubActionsHelper,
    config: NoResponseConfig,
    event_name: str,
    event_path: Optional[str],
) -> int:
    """
    Unmark the issue named in the event payload.

    All parameters passed explicitly, no environment variable access.

    Args:
        gh: GitHub Actions helper for outputs and errors
        config: Validated configuration
        event_name: GitHub event name (issue_comment)
        event_path: Path to the event payload (GITHUB_EVENT_PATH)

    Outputs:
        unmarked: "true" if the label was removed
        reopened: "true" if the issue was reopened

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
        result = service.unmark(event)
    except GitHubAPIError as e:
        gh.set_error(f"Failed to unmark {event.issue_slug}: {str(e)}")
        return 1

    gh.write_outputs({
        "unmarked": str(result.unmarked).lower(),
        "reopened": str(result.reopened).lower(),
    })

    if result.unmarked:
        gh.write_step_summary(f"- {event.issue_slug}: ✅ Unmarked")
        if result.follow_up_label_added:
            gh.write_step_summary(f"  - Added label '{config.optional_follow_up_label}'")
        if result.reopened:
            gh.write_step_summary("  - Reopened")

    return 0
