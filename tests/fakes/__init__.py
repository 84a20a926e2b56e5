"""In-memory fakes for No Response tests"""

from tests.fakes.issue_tracker import FakeIssue, InMemoryIssueTracker

__all__ = [
    "FakeIssue",
    "InMemoryIssueTracker",
]
