"""
Hu CLI - Read command.

Print a file, or a condensed view of it: nested outline, public interface,
a numbered window around one line, or its git diff.
"""

import json
import logging

import typer
from rich.console import Console
from rich.text import Text

from hu.cli.errors import (
    ExitCode,
    print_error,
    print_file_not_found_error,
    print_not_text_error,
)
from hu.core.config import load_config
from hu.core.read import DiffOutput, GitDiffError, format_output, read_file, split_lines
from hu.core.read.diff import DiffLineStyle, diff_line_style

console = Console()
logger = logging.getLogger(__name__)

_DIFF_STYLES: dict[DiffLineStyle, str] = {
    DiffLineStyle.ADDED: "green",
    DiffLineStyle.REMOVED: "red",
    DiffLineStyle.HUNK: "cyan",
    DiffLineStyle.HEADER: "dim",
    DiffLineStyle.PLAIN: "",
}


def print_diff(diff: str) -> None:
    """Print a unified diff with added/removed/hunk lines highlighted."""
    for line in split_lines(diff):
        style = _DIFF_STYLES[diff_line_style(line)]
        console.print(Text(line, style=style), soft_wrap=True, highlight=False)


def main(
    path: str = typer.Argument(..., help="File to read"),
    outline: bool = typer.Option(
        False,
        "--outline",
        "-o",
        help="Show functions, types and headings with nesting",
    ),
    interface: bool = typer.Option(
        False,
        "--interface",
        "-i",
        help="Show only the public interface",
    ),
    around: int | None = typer.Option(
        None,
        "--around",
        "-a",
        help="Show lines around this line number",
    ),
    context: int | None = typer.Option(
        None,
        "--context",
        "-n",
        min=0,
        help="Lines of context for --around (default from config: 10)",
    ),
    diff: bool = typer.Option(
        False,
        "--diff",
        "-d",
        help="Show git diff of the file",
    ),
    commit: str = typer.Option(
        "HEAD",
        "--commit",
        help="Commit to diff against",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output as JSON",
    ),
) -> None:
    """
    Read a file with optional condensed views.

    When several views are given, --around wins over --diff, which wins
    over --interface, which wins over --outline.

    Examples:
        hu read src/main.rs                  # Whole file
        hu read src/main.rs --outline        # Functions and types, nested
        hu read lib/api.py --interface       # Public names only
        hu read app.js --around 120 -n 5     # Lines 115-125
        hu read README.md --diff             # Uncommitted changes
    """
    if context is None:
        context = load_config().read.context

    try:
        output = read_file(
            path,
            outline=outline,
            interface=interface,
            around=around,
            context=context,
            diff=diff,
            commit=commit,
        )
    except FileNotFoundError:
        print_file_not_found_error(path)
        raise typer.Exit(ExitCode.USER_ERROR)
    except UnicodeDecodeError:
        print_not_text_error(path)
        raise typer.Exit(ExitCode.USER_ERROR)
    except GitDiffError as e:
        print_error(
            f"Could not diff {path}",
            reason=e.stderr or str(e),
            solution="run inside a git repository and check the --commit ref",
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except OSError as e:
        logger.debug("Failed to read %s", path, exc_info=True)
        print_error(f"Cannot read {path}", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if json_output:
        print(json.dumps(output.model_dump(mode="json"), indent=2))
        return

    if isinstance(output, DiffOutput):
        print_diff(output.diff)
        return

    print(format_output(output))
