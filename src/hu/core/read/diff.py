"""
Git diff view for a single file.

Shells out to ``git diff`` the same way the rest of hu talks to git, and
provides helpers to parse hunk headers and classify lines for colouring.
"""

from __future__ import annotations

import logging
import re
import subprocess
from enum import Enum
from pathlib import Path

from hu.core.read.models import DiffHunk

logger = logging.getLogger(__name__)

NO_CHANGES = "No changes"

_HUNK_HEADER = re.compile(r"@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


class GitDiffError(Exception):
    """Raised when ``git diff`` cannot be run or exits with an error."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class DiffLineStyle(str, Enum):
    """How a diff line should be highlighted."""

    ADDED = "added"
    REMOVED = "removed"
    HUNK = "hunk"
    HEADER = "header"
    PLAIN = "plain"


def git_diff(path: str | Path, commit: str = "HEAD") -> str:
    """Get the git diff of a file against a commit.

    Args:
        path: File to diff
        commit: Commit-ish to diff against (default: HEAD)

    Returns:
        Unified diff text, or ``"No changes"`` when the diff is empty

    Raises:
        FileNotFoundError: If the file does not exist
        GitDiffError: If git is missing or exits with a non-zero status
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    cmd = ["git", "diff", commit, "--", str(file_path)]
    logger.debug("Running %s", " ".join(cmd))

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=file_path.parent if file_path.is_absolute() else None,
        )
    except FileNotFoundError as e:
        raise GitDiffError("git is not installed or not in PATH") from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitDiffError(f"git diff failed: {stderr}", stderr=stderr)

    if not result.stdout:
        return NO_CHANGES

    return result.stdout


def parse_diff_hunks(diff: str) -> list[DiffHunk]:
    """Parse ``@@ -a,b +c,d @@`` hunk headers.

    Counts omitted from a header default to 1.
    """
    hunks: list[DiffHunk] = []
    for match in _HUNK_HEADER.finditer(diff):
        old_start, old_count, new_start, new_count = match.groups()
        hunks.append(
            DiffHunk(
                old_start=int(old_start),
                old_count=int(old_count) if old_count is not None else 1,
                new_start=int(new_start),
                new_count=int(new_count) if new_count is not None else 1,
            )
        )
    return hunks


def diff_line_style(line: str) -> DiffLineStyle:
    """Classify one diff line for highlighting."""
    if line.startswith("+") and not line.startswith("+++"):
        return DiffLineStyle.ADDED
    if line.startswith("-") and not line.startswith("---"):
        return DiffLineStyle.REMOVED
    if line.startswith("@@"):
        return DiffLineStyle.HUNK
    if line.startswith("diff") or line.startswith("index"):
        return DiffLineStyle.HEADER
    return DiffLineStyle.PLAIN
