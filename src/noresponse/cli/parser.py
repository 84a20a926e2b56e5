"""
CLI Argument Parser

This module handles command-line argument parsing for No Response.
"""

import argparse


def _add_config_path(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config-path",
        help="Path to YAML configuration file (action inputs take precedence)"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for No Response CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="No Response - close issues awaiting an author response"
    )
    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    parser_sweep = subparsers.add_parser(
        "sweep",
        help="Close issues whose response-required label has expired"
    )
    parser_sweep.add_argument(
        "--repo",
        help="GitHub repository (owner/name, default: $GITHUB_REPOSITORY)"
    )
    _add_config_path(parser_sweep)

    parser_unmark = subparsers.add_parser(
        "unmark",
        help="Remove the response-required label after the author comments"
    )
    _add_config_path(parser_unmark)

    parser_remove_labels = subparsers.add_parser(
        "remove-labels",
        help="Remove workflow labels when the author closes their issue"
    )
    _add_config_path(parser_remove_labels)

    parser_run = subparsers.add_parser(
        "run",
        help="Pick sweep, unmark or remove-labels from $GITHUB_EVENT_NAME"
    )
    _add_config_path(parser_run)

    return parser
