#!/usr/bin/env python3
"""
No Response - GitHub Actions Helper Script

Entry point for the No Response automation tool.
Run with: python3 -m noresponse <command>
"""

import logging
import os
import sys

from noresponse.cli.commands.remove_labels import cmd_remove_labels
from noresponse.cli.commands.sweep import cmd_sweep
from noresponse.cli.commands.unmark import cmd_unmark
from noresponse.cli.parser import create_parser
from noresponse.domain.config import NoResponseConfig
from noresponse.domain.exceptions import ConfigurationError
from noresponse.domain.github_event import ISSUE_COMMENT_EVENT, ISSUES_EVENT, IssueEventContext
from noresponse.infrastructure.github.actions import GitHubActionsHelper

EVENT_COMMANDS = ("unmark", "remove-labels")


def resolve_command(event_name: str) -> str:
    """Map a GitHub event name to the command handling it

    Example:
        >>> resolve_command("issue_comment")
        'unmark'
    """
    if event_name == ISSUE_COMMENT_EVENT:
        return "unmark"
    if event_name == ISSUES_EVENT:
        return "remove-labels"
    return "sweep"


def configure_logging() -> None:
    # RUNNER_DEBUG is set to 1 when a workflow is re-run with debug logging
    level = logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main():
    """Main entry point for the script"""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    configure_logging()

    # Initialize GitHub Actions helper
    gh = GitHubActionsHelper()

    event_name = os.environ.get("GITHUB_EVENT_NAME", "")
    event_path = os.environ.get("GITHUB_EVENT_PATH")
    command = args.command
    if command == "run":
        command = resolve_command(event_name)

    repo = getattr(args, "repo", None)
    try:
        if command in EVENT_COMMANDS and not repo and not os.environ.get("GITHUB_REPOSITORY"):
            # Event commands address the repository named in the payload
            repo = IssueEventContext.from_file(event_name, event_path).repo.full_name

        config = NoResponseConfig.from_environment(
            os.environ,
            config_path=args.config_path or os.environ.get("CONFIG_PATH") or None,
            repo=repo,
        )
    except ConfigurationError as e:
        gh.set_error(f"Configuration error: {str(e)}")
        return 1

    # Route to appropriate command handler
    if command == "sweep":
        return cmd_sweep(gh, config)
    elif command == "unmark":
        return cmd_unmark(
            gh,
            config,
            event_name=event_name or ISSUE_COMMENT_EVENT,
            event_path=event_path,
        )
    elif command == "remove-labels":
        return cmd_remove_labels(
            gh,
            config,
            event_name=event_name or ISSUES_EVENT,
            event_path=event_path,
        )
    else:
        gh.set_error(f"Unknown command: {command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
