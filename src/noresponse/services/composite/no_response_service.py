"""Composite service orchestrating the No Response workflows.

Runs the three entry workflows against an IssueTracker:

- sweep: close issues whose response-required label has gone unanswered
- unmark: clear the label when the issue author comments
- remove_labels_on_close: drop the workflow labels when the author closes their issue

Decisions come from noresponse.domain.decisions; this service only fetches
their inputs and applies their outcome.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import List, Optional

from noresponse.domain.config import NoResponseConfig
from noresponse.domain.constants import CLOSE_STATE_REASON, SEARCH_PAGE_SIZE
from noresponse.domain.decisions import (
    is_closeable,
    is_unmarkable,
    labels_to_strip_on_close,
    should_reopen,
)
from noresponse.domain.exceptions import GitHubAPIError
from noresponse.domain.github_event import IssueEventContext
from noresponse.domain.github_models import GitHubIssue
from noresponse.domain.models import LabelCleanupResult, SweepResult, UnmarkResult
from noresponse.infrastructure.github.issue_tracker import IssueTracker, build_search_query
from noresponse.services.core.label_service import LabelService

logger = logging.getLogger(__name__)


class NoResponseService:
    """Composite service for the response-required label lifecycle.

    Example:
        >>> service = NoResponseService(config, GhIssueTracker(config.repo, config.token))
        >>> result = service.sweep()
        >>> result.closed
        [12, 15]
    """

    def __init__(self, config: NoResponseConfig, tracker: IssueTracker):
        """Initialize NoResponseService

        Args:
            config: Settings for this invocation
            tracker: Issue tracker for the repository being processed
        """
        self.config = config
        self.tracker = tracker
        self.label_service = LabelService(tracker)

    # Public API methods

    def sweep(self, now: Optional[datetime] = None) -> SweepResult:
        """Close every closeable issue on the first page of candidates

        Candidates are the open issues carrying the response-required label,
        least recently updated first, one page per run. Issues beyond the page
        are picked up by later runs.

        Args:
            now: Current time (defaults to the current UTC time; naive values are taken as UTC)

        Returns:
            SweepResult with checked, closed and failed issue numbers

        Raises:
            GitHubAPIError: If ensuring the label exists or the search fails.
                Failures on individual issues are recorded in the result instead.
        """
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        logger.debug("Starting sweep of %s", self.config.repo)

        self.label_service.ensure_label_exists(
            self.config.response_required_label,
            self.config.response_required_color,
        )

        candidates = self.find_candidates()
        result = SweepResult(checked=[issue.number for issue in candidates])

        for issue in self.filter_closeable(candidates, now, result):
            try:
                self.close(issue.number)
            except GitHubAPIError as e:
                print(f"Failed to close {self.tracker.repo.issue_slug(issue.number)}: {e}")
                result.failed[issue.number] = str(e)
            else:
                result.closed.append(issue.number)

        return result

    def find_candidates(self) -> List[GitHubIssue]:
        """Search open issues carrying the response-required label

        Returns:
            Up to SEARCH_PAGE_SIZE issues, least recently updated first
        """
        query = build_search_query(self.config.repo, self.config.response_required_label)
        issues = self.tracker.search_issues(query, sort="updated", order="asc", per_page=SEARCH_PAGE_SIZE)
        logger.debug("Issues to check for closing: %s", [issue.number for issue in issues])
        return issues

    def filter_closeable(
        self, candidates: List[GitHubIssue], now: datetime, result: SweepResult
    ) -> List[GitHubIssue]:
        """Keep the candidates whose label has waited past the deadline

        Label histories are fetched concurrently, one worker per candidate up to
        SEARCH_PAGE_SIZE. A failed fetch is recorded in result.failed and drops that issue.

        Args:
            candidates: Issues returned by the search
            now: Current time
            result: Sweep result collecting per-issue failures

        Returns:
            Closeable issues in candidate order
        """
        if not candidates:
            return []

        with ThreadPoolExecutor(max_workers=min(len(candidates), SEARCH_PAGE_SIZE)) as executor:
            futures = [
                (issue, executor.submit(self.tracker.list_label_events, issue.number))
                for issue in candidates
            ]

        closeable = []
        for issue, future in futures:
            try:
                events = future.result()
            except GitHubAPIError as e:
                print(f"Failed to read events for {self.tracker.repo.issue_slug(issue.number)}: {e}")
                result.failed[issue.number] = str(e)
                continue

            logger.debug("Checking #%s", issue.number)
            if is_closeable(events, self.config.response_required_label, now, self.config.days_until_close):
                closeable.append(issue)

        logger.debug("Closeable: %s", [issue.number for issue in closeable])
        return closeable

    def close(self, number: int) -> None:
        """Close an issue for inactivity, posting the close comment first if configured

        Raises:
            GitHubAPIError: If commenting or closing fails
        """
        print(f"{self.tracker.repo.issue_slug(number)} is being closed")

        if self.config.close_comment:
            self.tracker.add_comment(number, self.config.close_comment)

        self.tracker.update_issue_state(number, "closed", state_reason=CLOSE_STATE_REASON)

    def unmark(self, event: IssueEventContext) -> UnmarkResult:
        """Clear the response-required label after the author comments

        Steps run in order and stop at the first error; steps already done
        are not rolled back.

        Args:
            event: Parsed issue_comment event

        Returns:
            UnmarkResult describing what changed

        Raises:
            GitHubAPIError: If any remote call fails
        """
        logger.debug("Starting unmark for %s", event.issue_slug)
        result = UnmarkResult()
        label = self.config.response_required_label
        number = event.issue_number

        if event.action and event.action != "created":
            logger.debug("Ignoring issue_comment action '%s'", event.action)
            return result

        issue = self.tracker.get_issue(number)
        current_labels = self.label_service.get_labels(number)

        if not is_unmarkable(issue.author, event.comment_author, current_labels, label):
            logger.debug("%s is not unmarkable", event.issue_slug)
            return result

        print(f"{event.issue_slug} is being unmarked")

        self.label_service.remove_label(number, label)
        result.unmarked = True

        follow_up = self.config.optional_follow_up_label
        if follow_up:
            self.label_service.ensure_label_exists(follow_up, self.config.optional_follow_up_label_color)
            self.label_service.add_label(number, follow_up)
            result.follow_up_label_added = True

        if should_reopen(issue):
            print(f"{event.issue_slug} is being reopened")
            self.tracker.update_issue_state(number, "open")
            result.reopened = True

        return result

    def remove_labels_on_close(self, event: IssueEventContext) -> LabelCleanupResult:
        """Strip the workflow labels when the author closes their own issue

        Args:
            event: Parsed issues event

        Returns:
            LabelCleanupResult listing the labels removed

        Raises:
            GitHubAPIError: If listing or removing labels fails
        """
        logger.debug("Starting remove_labels_on_close for %s", event.issue_slug)
        result = LabelCleanupResult()

        if not event.is_closed_by_author():
            return result

        current_labels = self.label_service.get_labels(event.issue_number)
        to_strip = labels_to_strip_on_close(
            event.issue_author,
            event.sender,
            current_labels,
            self.config.response_required_label,
            self.config.optional_follow_up_label,
        )

        for label in to_strip:
            if self.label_service.remove_label(event.issue_number, label):
                print(f"Removed label '{label}' from {event.issue_slug}")
                result.removed_labels.append(label)

        return result
