"""Test data builders for No Response tests

This module provides builder pattern helpers for creating GitHub API
responses and webhook payloads. Builders simplify test setup and improve
readability by providing fluent interfaces with sensible defaults.

Example usage:
    payload = EventPayloadBuilder()
        .with_issue(7, author="alice")
        .with_comment_by("alice")
        .build()
"""

from tests.builders.event_payload_builder import EventPayloadBuilder
from tests.builders.issue_data_builder import IssueDataBuilder

__all__ = [
    "EventPayloadBuilder",
    "IssueDataBuilder",
]
