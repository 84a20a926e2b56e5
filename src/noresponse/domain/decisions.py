"""Decision rules for the response-required label lifecycle.

Pure functions over issue, label and event data. They decide whether an
issue is closeable, whether a comment unmarks it, whether an unmarked issue
is reopened and which labels a self-closed issue sheds. No GitHub calls
happen here; NoResponseService fetches the inputs and applies the outcome.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Sequence

from noresponse.domain.github_models import GitHubIssue, GitHubLabelEvent

logger = logging.getLogger(__name__)


def find_last_labeled_event(
    events: Sequence[GitHubLabelEvent], label: str
) -> Optional[GitHubLabelEvent]:
    """Find the most recent application of a label

    Args:
        events: Issue events in chronological order
        label: Label name to look for

    Returns:
        The newest "labeled" event for the label, or None if it was never applied
    """
    for event in reversed(events):
        if event.is_labeled_with(label):
            return event
    return None


def labeled_earlier_than(now: datetime, days: int) -> datetime:
    """Cutoff a label application must predate for the issue to be closed"""
    return now - timedelta(days=days)


def is_closeable(
    events: Sequence[GitHubLabelEvent],
    label: str,
    now: datetime,
    days_until_close: int,
) -> bool:
    """Decide whether an issue has waited long enough for a response

    Only the most recent application of the label counts, so relabeling an
    issue restarts the wait. An issue whose history has no matching labeled
    event is never closed. The comparison is strict: a label applied exactly
    days_until_close days ago is not yet closeable.

    Args:
        events: Issue events in chronological order
        label: The response-required label
        now: Current time
        days_until_close: Days to wait after labeling

    Returns:
        True if the issue should be closed

    Example:
        >>> events = [GitHubLabelEvent(datetime(2024, 1, 1), "labeled", "more-information-needed")]
        >>> is_closeable(events, "more-information-needed", datetime(2024, 1, 16), 14)
        True
    """
    event = find_last_labeled_event(events, label)
    if event is None:
        logger.debug("No '%s' labeled event in history", label)
        return False

    deadline = labeled_earlier_than(now, days_until_close)
    logger.debug("Labeled at %s, deadline %s", event.created_at.isoformat(), deadline.isoformat())
    return event.created_at < deadline


def is_unmarkable(
    issue_author: Optional[str],
    comment_author: Optional[str],
    current_labels: Iterable[str],
    label: str,
) -> bool:
    """Decide whether a comment answers the request for information

    Only a reply from the issue's original author clears the label.
    """
    if issue_author is None or comment_author is None:
        return False
    return label in set(current_labels) and comment_author == issue_author


def should_reopen(issue: GitHubIssue) -> bool:
    """Decide whether an unmarked issue gets reopened

    Issues the author closed themselves stay closed. An issue closed by
    anyone else, including the sweep, is reopened once the author responds.
    """
    return issue.is_closed() and issue.closed_by != issue.author


def labels_to_strip_on_close(
    issue_author: Optional[str],
    closer: Optional[str],
    current_labels: Iterable[str],
    response_required_label: str,
    optional_follow_up_label: Optional[str] = None,
) -> List[str]:
    """Labels to remove when an issue is closed

    A reporter closing their own issue no longer needs either marker. Closes
    by anyone else leave the labels alone.

    Args:
        issue_author: Login of the issue's original author
        closer: Login of the user who closed the issue
        current_labels: Labels currently on the issue
        response_required_label: The response-required label
        optional_follow_up_label: The follow-up label, if configured

    Returns:
        Labels to remove, in removal order (empty if nothing to do)
    """
    if issue_author is None or closer != issue_author:
        return []

    present = set(current_labels)
    candidates = [response_required_label]
    if optional_follow_up_label:
        candidates.append(optional_follow_up_label)

    return [label for label in candidates if label in present]
