"""Common pytest fixtures for No Response tests

This module provides shared fixtures used across the test suite.
Fixtures are organized by category: configuration, GitHub, and time.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from noresponse.domain.config import NoResponseConfig
from noresponse.domain.github_models import RepoRef
from tests.fakes import InMemoryIssueTracker

RESPONSE_LABEL = "more-information-needed"
FOLLOW_UP_LABEL = "follow-up"


# ==============================================================================
# Configuration Fixtures
# ==============================================================================


@pytest.fixture
def config():
    """Fixture providing a default configuration for owner/repo

    Returns:
        NoResponseConfig with a 14 day window and the default close comment
    """
    return NoResponseConfig(repo=RepoRef("owner", "repo"), token="test-token")


@pytest.fixture
def config_with_follow_up():
    """Fixture providing a configuration with the optional follow-up label

    Returns:
        NoResponseConfig with optional_follow_up_label set
    """
    return NoResponseConfig(
        repo=RepoRef("owner", "repo"),
        token="test-token",
        optional_follow_up_label=FOLLOW_UP_LABEL,
        optional_follow_up_label_color="00ff00",
    )


@pytest.fixture
def sample_config_file(tmp_path):
    """Fixture providing a sample no-response.yml file

    Returns:
        Path to the configuration file
    """
    config_content = """daysUntilClose: 7
responseRequiredLabel: needs-info
responseRequiredColor: "#D93F0B"
optionalFollowUpLabel: follow-up
"""
    config_file = tmp_path / "no-response.yml"
    config_file.write_text(config_content)
    return config_file


# ==============================================================================
# GitHub Fixtures
# ==============================================================================


@pytest.fixture
def tracker():
    """Fixture providing an empty in-memory issue tracker for owner/repo"""
    return InMemoryIssueTracker()


@pytest.fixture
def mock_github_actions_helper():
    """Fixture providing a mocked GitHubActionsHelper

    Returns:
        MagicMock with GitHub Actions helper methods
    """
    from noresponse.infrastructure.github.actions import GitHubActionsHelper

    mock = MagicMock(spec=GitHubActionsHelper)
    mock.write_outputs = MagicMock()
    mock.write_step_summary = MagicMock()
    mock.set_error = MagicMock()
    mock.set_debug = MagicMock()

    return mock


@pytest.fixture
def github_env_vars(tmp_path):
    """Fixture providing GitHub Actions environment variables

    Sets up temporary files for GITHUB_OUTPUT and GITHUB_STEP_SUMMARY
    and returns a dict of environment variables to use with patch.dict.

    Returns:
        Dict of environment variables suitable for os.environ patching
    """
    output_file = tmp_path / "github_output.txt"
    summary_file = tmp_path / "github_summary.txt"

    output_file.touch()
    summary_file.touch()

    return {
        "GITHUB_OUTPUT": str(output_file),
        "GITHUB_STEP_SUMMARY": str(summary_file),
        "GITHUB_REPOSITORY": "owner/repo",
        "GITHUB_TOKEN": "env-token",
        "GITHUB_WORKSPACE": str(tmp_path),
    }


# ==============================================================================
# Time Fixtures
# ==============================================================================


@pytest.fixture
def t0():
    """Fixture providing the reference time labels are applied at"""
    return datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
