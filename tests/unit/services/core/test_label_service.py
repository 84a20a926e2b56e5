"""Tests for LabelService idempotent label operations"""

from unittest.mock import Mock

import pytest

from noresponse.domain.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    LabelAlreadyExistsError,
)
from noresponse.domain.github_models import GitHubLabel, RepoRef
from noresponse.services.core.label_service import LabelService
from tests.fakes import FakeIssue


class TestEnsureLabelExists:
    """Test suite for ensure_label_exists"""

    def test_creates_missing_label(self, tracker):
        """Should create the label when the repository lacks it"""
        # Arrange
        service = LabelService(tracker)

        # Act
        created = service.ensure_label_exists("more-information-needed", "ffffff")

        # Assert
        assert created is True
        assert tracker.repo_labels["more-information-needed"].color == "ffffff"

    def test_existing_label_is_left_alone(self, tracker):
        """Should not call create when the label exists"""
        # Arrange
        tracker.repo_labels["more-information-needed"] = GitHubLabel("more-information-needed", "d93f0b")
        service = LabelService(tracker)

        # Act
        created = service.ensure_label_exists("more-information-needed", "ffffff")

        # Assert
        assert created is False
        assert tracker.mutations() == []
        assert tracker.repo_labels["more-information-needed"].color == "d93f0b"

    def test_concurrent_creation_is_success(self):
        """Should swallow already-exists when the label appears between lookup and create"""
        # Arrange
        tracker = Mock(repo=RepoRef("owner", "repo"))
        tracker.get_label.return_value = None
        tracker.create_label.side_effect = LabelAlreadyExistsError("already_exists (HTTP 422)", 422)
        service = LabelService(tracker)

        # Act
        created = service.ensure_label_exists("more-information-needed", "ffffff")

        # Assert
        assert created is False

    def test_other_errors_propagate(self):
        """Should propagate failures other than already-exists"""
        # Arrange
        tracker = Mock(repo=RepoRef("owner", "repo"))
        tracker.get_label.return_value = None
        tracker.create_label.side_effect = GitHubAPIError("Forbidden (HTTP 403)", 403)
        service = LabelService(tracker)

        # Act & Assert
        with pytest.raises(GitHubAPIError, match="Forbidden"):
            service.ensure_label_exists("more-information-needed", "ffffff")


class TestRemoveLabel:
    """Test suite for remove_label"""

    def test_removes_present_label(self, tracker):
        # Arrange
        tracker.add_issue(FakeIssue(number=1, labels=["bug", "follow-up"]))
        service = LabelService(tracker)

        # Act
        removed = service.remove_label(1, "follow-up")

        # Assert
        assert removed is True
        assert tracker.issues[1].labels == ["bug"]

    def test_absent_label_is_success(self, tracker):
        """Should treat removing an absent label as done"""
        # Arrange
        tracker.add_issue(FakeIssue(number=1, labels=["bug"]))
        service = LabelService(tracker)

        # Act
        removed = service.remove_label(1, "follow-up")

        # Assert
        assert removed is False
        assert tracker.issues[1].labels == ["bug"]

    def test_other_errors_propagate(self):
        # Arrange
        tracker = Mock(repo=RepoRef("owner", "repo"))
        tracker.remove_label.side_effect = GitHubAPIError("rate limited (HTTP 403)", 403)
        service = LabelService(tracker)

        # Act & Assert
        with pytest.raises(GitHubAPIError):
            service.remove_label(1, "follow-up")

    def test_not_found_returns_false(self):
        # Arrange
        tracker = Mock(repo=RepoRef("owner", "repo"))
        tracker.remove_label.side_effect = GitHubNotFoundError("Label does not exist (HTTP 404)", 404)

        # Act & Assert
        assert LabelService(tracker).remove_label(1, "x") is False


class TestLabelPassThrough:
    def test_get_and_add_labels(self, tracker):
        # Arrange
        tracker.add_issue(FakeIssue(number=2, labels=["bug"]))
        service = LabelService(tracker)

        # Act
        service.add_label(2, "follow-up")

        # Assert
        assert service.get_labels(2) == ["bug", "follow-up"]
