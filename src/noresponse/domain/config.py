"""Configuration loading and validation

Configuration comes from an optional YAML file and from GitHub Action inputs
(INPUT_* environment variables), with inputs taking precedence. Keys use the
action input names (daysUntilClose, responseRequiredLabel, ...).
"""

import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from noresponse.domain.constants import (
    CLOSE_COMMENT_DISABLED,
    DEFAULT_CLOSE_COMMENT,
    DEFAULT_DAYS_UNTIL_CLOSE,
    DEFAULT_LABEL_COLOR,
    DEFAULT_RESPONSE_REQUIRED_LABEL,
)
from noresponse.domain.exceptions import ConfigurationError
from noresponse.domain.github_models import RepoRef

# Action input names, in the order they appear in action.yml
INPUT_NAMES = (
    "token",
    "daysUntilClose",
    "responseRequiredLabel",
    "responseRequiredColor",
    "closeComment",
    "optionalFollowUpLabel",
    "optionalFollowUpLabelColor",
)

_COLOR_PATTERN = re.compile(r"^[0-9a-fA-F]{6}$")


def load_config(file_path: str) -> Dict[str, Any]:
    """Load YAML configuration file and return parsed content

    Args:
        file_path: Path to YAML configuration file (.yml or .yaml)

    Returns:
        Parsed configuration as dictionary

    Raises:
        ConfigurationError: If file doesn't exist or is invalid YAML
    """
    if not os.path.exists(file_path):
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    with open(file_path, "r") as f:
        content = f.read()
    return load_config_from_string(content, file_path)


def load_config_from_string(content: str, source_name: str = "config") -> Dict[str, Any]:
    """Load YAML configuration from string content

    Args:
        content: YAML content as string
        source_name: Name of the source (for error messages)

    Returns:
        Parsed configuration as dictionary (empty for an empty document)

    Raises:
        ConfigurationError: If content is invalid YAML or not a mapping
    """
    try:
        config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {source_name}: {str(e)}")

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Invalid configuration in {source_name}: expected a mapping")

    unknown = sorted(set(config) - set(INPUT_NAMES))
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys in {source_name}: {', '.join(unknown)}"
        )

    return config


def read_action_inputs(environ: Mapping[str, str]) -> Dict[str, str]:
    """Collect GitHub Action inputs from the environment

    GitHub exposes an input named "daysUntilClose" as INPUT_DAYSUNTILCLOSE.
    Empty inputs are treated as unset.

    Args:
        environ: Environment mapping (usually os.environ)

    Returns:
        Dictionary of input name to non-empty value
    """
    inputs = {}
    for name in INPUT_NAMES:
        value = environ.get(f"INPUT_{name.upper()}", "").strip()
        if value:
            inputs[name] = value
    return inputs


def _normalize_color(value: Any, key: str) -> str:
    color = str(value).strip().lstrip("#")
    if not _COLOR_PATTERN.match(color):
        raise ConfigurationError(f"Invalid {key} '{value}': expected six hex digits")
    return color.lower()


def _parse_days(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid daysUntilClose '{value}': expected an integer")
    try:
        days = int(str(value).strip())
    except ValueError:
        raise ConfigurationError(f"Invalid daysUntilClose '{value}': expected an integer")
    if days < 0:
        raise ConfigurationError(f"Invalid daysUntilClose '{value}': must not be negative")
    return days


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class NoResponseConfig:
    """Settings for one No Response invocation

    Attributes:
        repo: Repository the sweep operates on
        token: GitHub token passed to gh (None to use gh's own authentication)
        response_required_label: Label marking issues awaiting the author
        response_required_color: Color used when creating that label
        days_until_close: Days to wait after labeling before closing
        close_comment: Comment posted when closing (None to close silently)
        optional_follow_up_label: Label applied after the author responds
        optional_follow_up_label_color: Color used when creating the follow-up label
    """

    repo: RepoRef
    token: Optional[str] = None
    response_required_label: str = DEFAULT_RESPONSE_REQUIRED_LABEL
    response_required_color: str = DEFAULT_LABEL_COLOR
    days_until_close: int = DEFAULT_DAYS_UNTIL_CLOSE
    close_comment: Optional[str] = DEFAULT_CLOSE_COMMENT
    optional_follow_up_label: Optional[str] = None
    optional_follow_up_label_color: str = DEFAULT_LABEL_COLOR

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], repo: str) -> "NoResponseConfig":
        """Build and validate configuration from input-named keys

        Args:
            data: Mapping keyed by action input names
            repo: Repository in format "owner/name"

        Returns:
            Validated NoResponseConfig

        Raises:
            ConfigurationError: If any value is invalid

        Example:
            >>> config = NoResponseConfig.from_dict({"daysUntilClose": "7"}, "owner/repo")
            >>> config.days_until_close
            7
        """
        label = _optional_str(data.get("responseRequiredLabel", DEFAULT_RESPONSE_REQUIRED_LABEL))
        if not label:
            raise ConfigurationError("responseRequiredLabel must not be empty")

        close_comment = data.get("closeComment", DEFAULT_CLOSE_COMMENT)
        if close_comment is False or str(close_comment).strip().lower() == CLOSE_COMMENT_DISABLED:
            close_comment = None
        else:
            close_comment = _optional_str(close_comment)

        return cls(
            repo=RepoRef.from_string(repo),
            token=_optional_str(data.get("token")),
            response_required_label=label,
            response_required_color=_normalize_color(
                data.get("responseRequiredColor", DEFAULT_LABEL_COLOR), "responseRequiredColor"
            ),
            days_until_close=_parse_days(data.get("daysUntilClose", DEFAULT_DAYS_UNTIL_CLOSE)),
            close_comment=close_comment,
            optional_follow_up_label=_optional_str(data.get("optionalFollowUpLabel")),
            optional_follow_up_label_color=_normalize_color(
                data.get("optionalFollowUpLabelColor", DEFAULT_LABEL_COLOR),
                "optionalFollowUpLabelColor",
            ),
        )

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str],
        config_path: Optional[str] = None,
        repo: Optional[str] = None,
    ) -> "NoResponseConfig":
        """Build configuration for a workflow run

        Precedence: action inputs, then the YAML file, then defaults. The
        token falls back to GITHUB_TOKEN and the repository to
        GITHUB_REPOSITORY.

        Args:
            environ: Environment mapping (usually os.environ)
            config_path: Optional path to a YAML configuration file
            repo: Repository override in format "owner/name"

        Returns:
            Validated NoResponseConfig

        Raises:
            ConfigurationError: If the repository is missing or any value is invalid
        """
        data: Dict[str, Any] = {}
        if config_path:
            data.update(load_config(config_path))
        data.update(read_action_inputs(environ))

        if not data.get("token") and environ.get("GITHUB_TOKEN"):
            data["token"] = environ["GITHUB_TOKEN"]

        repository = repo or environ.get("GITHUB_REPOSITORY", "")
        if not repository:
            raise ConfigurationError("GITHUB_REPOSITORY environment variable is required")

        return cls.from_dict(data, repository)
