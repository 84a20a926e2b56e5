"""GitHub Actions workflow commands and step files

Outputs go to $GITHUB_OUTPUT and markdown to $GITHUB_STEP_SUMMARY. Annotations
and log groups are printed to stdout as ::command:: lines. Outside a runner
the files are unset and everything is printed instead.
"""

import os
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator, Optional


def escape_data(value: str) -> str:
    """Escape a workflow command message so it stays on one line"""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsHelper:
    """Handle GitHub Actions environment interactions"""

    def __init__(self, output_file: Optional[str] = None, summary_file: Optional[str] = None):
        self.github_output_file = output_file or os.environ.get("GITHUB_OUTPUT")
        self.github_step_summary_file = summary_file or os.environ.get("GITHUB_STEP_SUMMARY")

    def write_output(self, name: str, value: str) -> None:
        """Write to $GITHUB_OUTPUT for subsequent steps

        Args:
            name: Output variable name
            value: Output variable value
        """
        if not self.github_output_file:
            print(f"{name}={value}")
            return

        with open(self.github_output_file, "a") as f:
            if "\n" not in value:
                f.write(f"{name}={value}\n")
                return
            # https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/workflow-commands-for-github-actions#multiline-strings
            delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def write_outputs(self, outputs: Dict[str, str]) -> None:
        for name, value in outputs.items():
            self.write_output(name, value)

    def write_step_summary(self, text: str) -> None:
        """Append markdown to $GITHUB_STEP_SUMMARY

        Args:
            text: Markdown text to append to summary
        """
        if not self.github_step_summary_file:
            print(f"SUMMARY: {text}")
            return

        with open(self.github_step_summary_file, "a") as f:
            f.write(f"{text}\n")

    def set_error(self, message: str, title: Optional[str] = None) -> None:
        self._annotate("error", message, title)

    def set_notice(self, message: str, title: Optional[str] = None) -> None:
        self._annotate("notice", message, title)

    def set_debug(self, message: str) -> None:
        """Emit a debug line, shown only when step debug logging is enabled"""
        print(f"::debug::{escape_data(message)}")

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """Fold everything printed inside the block under a collapsible title

        Example:
            >>> with gh.group("Sweeping owner/repo"):
            ...     service.sweep()
        """
        print(f"::group::{escape_data(title)}")
        try:
            yield
        finally:
            print("::endgroup::")

    def _annotate(self, command: str, message: str, title: Optional[str]) -> None:
        properties = f" title={escape_property(title)}" if title else ""
        print(f"::{command}{properties}::{escape_data(message)}")
