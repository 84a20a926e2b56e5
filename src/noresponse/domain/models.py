"""Result models returned by the No Response workflows"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class SweepResult:
    """Outcome of one sweep

    Attributes:
        checked: Issue numbers returned by the search, in search order
        closed: Issue numbers closed during this sweep
        failed: Issue number to error message for issues that could not be processed
    """

    checked: List[int] = field(default_factory=list)
    closed: List[int] = field(default_factory=list)
    failed: Dict[int, str] = field(default_factory=dict)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)

    def format_summary(self, repo: str) -> str:
        """Format the sweep as markdown for the workflow step summary"""
        lines = ["## No Response sweep", ""]
        lines.append(f"- Issues checked: {len(self.checked)}")
        lines.append(f"- Issues closed: {len(self.closed)}")
        for number in self.closed:
            lines.append(f"  - {repo}#{number}")
        if self.failed:
            lines.append(f"- Issues failed: {len(self.failed)}")
            for number, error in self.failed.items():
                lines.append(f"  - {repo}#{number}: {error}")
        return "\n".join(lines)


@dataclass
class UnmarkResult:
    """Outcome of handling an issue comment"""

    unmarked: bool = False
    follow_up_label_added: bool = False
    reopened: bool = False


@dataclass
class LabelCleanupResult:
    """Outcome of handling an issue close"""

    removed_labels: List[str] = field(default_factory=list)
