"""
Close issues that never received a response from their author.

Runs on a schedule. Each run processes one page of labeled issues.
"""

from noresponse.domain.config import NoResponseConfig
from noresponse.domain.constants import SEARCH_PAGE_SIZE
from noresponse.domain.exceptions import GitHubAPIError
from noresponse.infrastructure.github.actions import GitHubActionsHelper
from noresponse.infrastructure.github.gh_issue_tracker import GhIssueTracker
from noresponse.services.composite.no_response_service import NoResponseService


def cmd_sweep(gh: GitHubActionsHelper, config: NoResponseConfig) -> int:
    """
    Sweep the repository and close issues past their response deadline.

    All parameters passed explicitly, no environment variable access.

    Args:
        gh: GitHub Actions helper for outputs and errors
        config: Validated configuration

    Outputs:
        closed_issues: Comma-separated numbers of issues closed
        failed_issues: Comma-separated numbers of issues that could not be processed

    Returns:
        0 on success, 1 if the sweep or any issue failed
    """
    service = NoResponseService(config, GhIssueTracker(config.repo, config.token))

    try:
        with gh.group(f"Sweeping {config.repo}"):
            result = service.sweep()
    except GitHubAPIError as e:
        gh.set_error(f"Sweep failed: {str(e)}")
        return 1

    gh.set_debug(f"Checked issues: {result.checked}")

    gh.write_outputs({
        "closed_issues": ",".join(str(n) for n in result.closed),
        "failed_issues": ",".join(str(n) for n in result.failed),
    })
    gh.write_step_summary(result.format_summary(config.repo.full_name))

    for number, error in result.failed.items():
        gh.set_error(error, title=config.repo.issue_slug(number))

    if len(result.checked) == SEARCH_PAGE_SIZE:
        gh.set_notice(
            f"Checked a full page of {SEARCH_PAGE_SIZE} issues; remaining issues are handled by the next run"
        )

    print(f"✅ Checked {len(result.checked)} issues, closed {len(result.closed)}")
    return 1 if result.has_failures else 0
