"""
Error reporting and exit codes for the hu CLI.

Errors go to stderr so that command output stays pipeable.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for hu commands."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Unexpected failure (I/O error, git failure)."""

    USER_ERROR = 2
    """Bad input the user can fix (missing file, invalid pattern)."""

    SIGINT = 130
    """Terminated by SIGINT (Ctrl+C) - Unix standard."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Invalid pattern '[unclosed'",
        ...     reason="unterminated character set at position 0",
        ...     solution="hu utils grep '\\[unclosed'",
        ... )
    """
    err_console.print(f"[red]Error:[/red] {escape(problem)}", highlight=False)

    if reason:
        err_console.print(f"[dim]{escape(reason)}[/dim]", highlight=False)

    if solution:
        err_console.print(f"[cyan]→ Try:[/cyan] {escape(solution)}", highlight=False)


def print_file_not_found_error(path: str) -> None:
    """Print error when an explicitly named file or directory is missing."""
    print_error(
        f"File not found: {path}",
        solution="check the path, relative paths are resolved against the current directory",
    )


def print_not_text_error(path: str) -> None:
    """Print error when a named file is not valid UTF-8 text."""
    print_error(
        f"Cannot read {path}",
        reason="The file is not valid UTF-8 text",
    )
