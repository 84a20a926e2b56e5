"""GitHub CLI and API operations"""

import json
import logging
import os
import re
import subprocess
from typing import Any, Dict, List, Mapping, Optional

from noresponse.domain.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    LabelAlreadyExistsError,
)

logger = logging.getLogger(__name__)

_HTTP_STATUS_PATTERN = re.compile(r"\(HTTP (\d{3})\)")


def run_command(
    cmd: List[str],
    check: bool = True,
    capture_output: bool = True,
    env: Optional[Mapping[str, str]] = None,
) -> subprocess.CompletedProcess:
    """Run a shell command and return the result

    Args:
        cmd: Command and arguments as list
        check: Whether to raise exception on non-zero exit
        capture_output: Whether to capture stdout/stderr
        env: Extra environment variables layered over the current environment

    Returns:
        CompletedProcess instance

    Raises:
        subprocess.CalledProcessError: If command fails and check=True
    """
    full_env = None
    if env:
        full_env = dict(os.environ)
        full_env.update(env)

    return subprocess.run(
        cmd,
        check=check,
        capture_output=capture_output,
        text=True,
        env=full_env,
    )


def parse_http_status(output: str) -> Optional[int]:
    """Extract the HTTP status gh reports on failure, e.g. "gh: Not Found (HTTP 404)"

    Args:
        output: Combined gh stderr/stdout

    Returns:
        Status code, or None if gh did not report one
    """
    match = _HTTP_STATUS_PATTERN.search(output or "")
    return int(match.group(1)) if match else None


def run_gh_command(args: List[str], env: Optional[Mapping[str, str]] = None) -> str:
    """Run a GitHub CLI command and return stdout

    Args:
        args: gh command arguments (without 'gh' prefix)
        env: Extra environment variables (e.g., GH_TOKEN)

    Returns:
        Command stdout as string

    Raises:
        GitHubNotFoundError: If gh reports HTTP 404
        LabelAlreadyExistsError: If gh reports HTTP 422 for an existing resource
        GitHubAPIError: If gh command fails for any other reason
    """
    logger.debug("gh %s", " ".join(args))
    try:
        result = run_command(["gh"] + args, env=env)
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        # gh api prints the error response body on stdout and the status on stderr
        details = "\n".join(part for part in (e.stderr, e.stdout) if part)
        message = f"GitHub CLI command failed: {' '.join(args)}\n{details}"
        status_code = parse_http_status(details)

        if status_code == 404:
            raise GitHubNotFoundError(message, status_code=status_code)
        if status_code == 422 and "already_exists" in details.replace(" ", "_").lower():
            raise LabelAlreadyExistsError(message, status_code=status_code)
        raise GitHubAPIError(message, status_code=status_code)


def gh_api_call(
    endpoint: str,
    method: str = "GET",
    fields: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Any:
    """Call GitHub REST API using gh CLI

    String field values are sent with -f (raw), lists as repeated key[]
    fields, everything else with -F so gh converts numbers and booleans to
    JSON types.

    Args:
        endpoint: API endpoint path (e.g., "repos/owner/repo/issues/1")
        method: HTTP method (GET, POST, etc.)
        fields: Request parameters; query string for GET, JSON body otherwise
        env: Extra environment variables (e.g., GH_TOKEN)

    Returns:
        Parsed JSON response (empty dict for an empty body)

    Raises:
        GitHubAPIError: If API call fails or returns invalid JSON
    """
    args = ["api", endpoint, "--method", method]
    for key, value in (fields or {}).items():
        if isinstance(value, (list, tuple)):
            for item in value:
                args.extend(["-f", f"{key}[]={item}"])
        elif isinstance(value, str):
            args.extend(["-f", f"{key}={value}"])
        else:
            args.extend(["-F", f"{key}={json.dumps(value)}"])

    output = run_gh_command(args, env=env)
    try:
        return json.loads(output) if output else {}
    except json.JSONDecodeError as e:
        raise GitHubAPIError(f"Invalid JSON from API: {str(e)}")


def gh_api_paginate(
    endpoint: str,
    env: Optional[Mapping[str, str]] = None,
) -> List[Dict[str, Any]]:
    """Fetch every page of a list endpoint

    Uses --jq '.[]' so gh emits one compact JSON object per line regardless
    of how many pages it followed.

    Args:
        endpoint: List endpoint path, including any per_page query
        env: Extra environment variables (e.g., GH_TOKEN)

    Returns:
        All items across pages, in API order

    Raises:
        GitHubAPIError: If API call fails or returns invalid JSON
    """
    output = run_gh_command(["api", endpoint, "--paginate", "--jq", ".[]"], env=env)

    items = []
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            items.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise GitHubAPIError(f"Invalid JSON from API: {str(e)}")
    return items
