"""Unit tests for configuration loading and validation"""

import pytest

from noresponse.domain.config import (
    NoResponseConfig,
    load_config,
    load_config_from_string,
    read_action_inputs,
)
from noresponse.domain.constants import DEFAULT_CLOSE_COMMENT
from noresponse.domain.exceptions import ConfigurationError
from noresponse.domain.github_models import RepoRef


class TestLoadConfig:
    """Test suite for YAML configuration loading"""

    def test_load_valid_config_file(self, sample_config_file):
        """Should load and parse valid YAML configuration"""
        # Act
        config = load_config(str(sample_config_file))

        # Assert
        assert config["daysUntilClose"] == 7
        assert config["responseRequiredLabel"] == "needs-info"
        assert config["optionalFollowUpLabel"] == "follow-up"

    def test_load_config_raises_error_when_file_not_found(self, tmp_path):
        """Should raise ConfigurationError when config file doesn't exist"""
        # Arrange
        missing_file = tmp_path / "missing.yml"

        # Act & Assert
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(str(missing_file))

    def test_load_config_raises_error_for_invalid_yaml(self):
        """Should raise ConfigurationError for malformed YAML"""
        # Act & Assert
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config_from_string("daysUntilClose: [missing bracket", "bad.yml")

    def test_empty_document_is_empty_config(self):
        """Should treat an empty file as no configuration"""
        assert load_config_from_string("") == {}

    def test_rejects_non_mapping(self):
        """Should reject a YAML list at the top level"""
        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_config_from_string("- a\n- b\n")

    def test_rejects_unknown_keys(self):
        """Should name keys that are not action inputs"""
        with pytest.raises(ConfigurationError, match="daysUntilStale"):
            load_config_from_string("daysUntilStale: 3\n")


class TestReadActionInputs:
    """Test suite for INPUT_* environment parsing"""

    def test_reads_uppercased_input_names(self):
        """Should map INPUT_DAYSUNTILCLOSE to daysUntilClose"""
        # Arrange
        environ = {
            "INPUT_DAYSUNTILCLOSE": "30",
            "INPUT_RESPONSEREQUIREDLABEL": "waiting-for-author",
            "UNRELATED": "value",
        }

        # Act
        inputs = read_action_inputs(environ)

        # Assert
        assert inputs == {"daysUntilClose": "30", "responseRequiredLabel": "waiting-for-author"}

    def test_empty_inputs_are_unset(self):
        """Should drop inputs that are empty or whitespace"""
        assert read_action_inputs({"INPUT_CLOSECOMMENT": "  ", "INPUT_TOKEN": ""}) == {}


class TestNoResponseConfigFromDict:
    """Test suite for NoResponseConfig.from_dict"""

    def test_defaults(self):
        """Should apply defaults for every missing key"""
        # Act
        config = NoResponseConfig.from_dict({}, "owner/repo")

        # Assert
        assert config.repo == RepoRef("owner", "repo")
        assert config.token is None
        assert config.response_required_label == "more-information-needed"
        assert config.response_required_color == "ffffff"
        assert config.days_until_close == 14
        assert config.close_comment == DEFAULT_CLOSE_COMMENT
        assert config.optional_follow_up_label is None
        assert config.optional_follow_up_label_color == "ffffff"

    def test_parses_all_fields(self):
        """Should parse and normalize every supported key"""
        # Act
        config = NoResponseConfig.from_dict(
            {
                "token": "abc",
                "daysUntilClose": "3",
                "responseRequiredLabel": "needs-info",
                "responseRequiredColor": "#D93F0B",
                "closeComment": "Closing, no reply.",
                "optionalFollowUpLabel": "follow-up",
                "optionalFollowUpLabelColor": "00FF00",
            },
            "octocat/hello",
        )

        # Assert
        assert config.token == "abc"
        assert config.days_until_close == 3
        assert config.response_required_label == "needs-info"
        assert config.response_required_color == "d93f0b"
        assert config.close_comment == "Closing, no reply."
        assert config.optional_follow_up_label == "follow-up"
        assert config.optional_follow_up_label_color == "00ff00"

    @pytest.mark.parametrize("value", ["false", "FALSE", False])
    def test_close_comment_can_be_disabled(self, value):
        """Should disable the close comment with 'false'"""
        config = NoResponseConfig.from_dict({"closeComment": value}, "owner/repo")
        assert config.close_comment is None

    @pytest.mark.parametrize("value", ["abc", "-1", "1.5", True])
    def test_rejects_invalid_days(self, value):
        """Should reject days that are not a non-negative integer"""
        with pytest.raises(ConfigurationError, match="daysUntilClose"):
            NoResponseConfig.from_dict({"daysUntilClose": value}, "owner/repo")

    def test_rejects_invalid_color(self):
        """Should reject colors that are not six hex digits"""
        with pytest.raises(ConfigurationError, match="responseRequiredColor"):
            NoResponseConfig.from_dict({"responseRequiredColor": "red"}, "owner/repo")

    def test_rejects_empty_label(self):
        """Should require a response-required label"""
        with pytest.raises(ConfigurationError, match="responseRequiredLabel"):
            NoResponseConfig.from_dict({"responseRequiredLabel": " "}, "owner/repo")

    def test_rejects_malformed_repository(self):
        """Should require owner/name"""
        with pytest.raises(ConfigurationError, match="owner/name"):
            NoResponseConfig.from_dict({}, "just-a-name")

    def test_config_is_immutable(self):
        """Should not allow fields to change after construction"""
        config = NoResponseConfig.from_dict({}, "owner/repo")
        with pytest.raises(AttributeError):
            config.days_until_close = 1


class TestNoResponseConfigFromEnvironment:
    """Test suite for NoResponseConfig.from_environment"""

    def test_inputs_override_file(self, sample_config_file):
        """Should let action inputs win over the YAML file"""
        # Arrange
        environ = {
            "GITHUB_REPOSITORY": "owner/repo",
            "INPUT_DAYSUNTILCLOSE": "21",
        }

        # Act
        config = NoResponseConfig.from_environment(environ, config_path=str(sample_config_file))

        # Assert
        assert config.days_until_close == 21
        assert config.response_required_label == "needs-info"
        assert config.response_required_color == "d93f0b"
        assert config.optional_follow_up_label == "follow-up"

    def test_token_falls_back_to_github_token(self):
        """Should use GITHUB_TOKEN when no token input is set"""
        config = NoResponseConfig.from_environment(
            {"GITHUB_REPOSITORY": "owner/repo", "GITHUB_TOKEN": "env-token"}
        )
        assert config.token == "env-token"

    def test_token_input_wins(self):
        """Should prefer INPUT_TOKEN over GITHUB_TOKEN"""
        config = NoResponseConfig.from_environment(
            {"GITHUB_REPOSITORY": "owner/repo", "GITHUB_TOKEN": "env-token", "INPUT_TOKEN": "input-token"}
        )
        assert config.token == "input-token"

    def test_repo_override(self):
        """Should prefer an explicit repository over GITHUB_REPOSITORY"""
        config = NoResponseConfig.from_environment(
            {"GITHUB_REPOSITORY": "owner/repo"}, repo="other/project"
        )
        assert config.repo == RepoRef("other", "project")

    def test_requires_repository(self):
        """Should raise ConfigurationError without a repository"""
        with pytest.raises(ConfigurationError, match="GITHUB_REPOSITORY"):
            NoResponseConfig.from_environment({})
