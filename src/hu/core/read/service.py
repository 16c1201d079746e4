"""
Read command service.

Resolves the target file, reads it and dispatches to the requested view.
Returns data only; rendering lives in ``hu.core.read.display`` and the CLI.
"""

import logging
from pathlib import Path

from hu.core.read.around import extract_lines_around
from hu.core.read.diff import git_diff
from hu.core.read.interface import extract_interface
from hu.core.read.models import (
    AroundOutput,
    DiffOutput,
    FullOutput,
    InterfaceOutput,
    OutlineOutput,
    ReadOutput,
)
from hu.core.read.outline import extract_outline

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = 10


def resolve_path(path: str | Path) -> Path:
    """Resolve a path against the current directory.

    Args:
        path: Absolute or relative file path

    Returns:
        Absolute path

    Raises:
        FileNotFoundError: If a relative path does not exist
    """
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate

    resolved = Path.cwd() / candidate
    if not resolved.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return resolved


def read_file(
    path: str | Path,
    *,
    outline: bool = False,
    interface: bool = False,
    around: int | None = None,
    context: int = DEFAULT_CONTEXT,
    diff: bool = False,
    commit: str = "HEAD",
) -> ReadOutput:
    """Read a file and produce the requested view.

    When several views are requested the first of around, diff, interface,
    outline wins; with none the full content is returned.

    Args:
        path: File to read
        outline: Produce a nested declaration outline
        interface: Produce the public interface only
        around: 1-indexed line to center a window on
        context: Lines of context for ``around``
        diff: Produce ``git diff`` output
        commit: Commit to diff against

    Returns:
        One of the ReadOutput models

    Raises:
        FileNotFoundError: If the file does not exist
        UnicodeDecodeError: If the file is not valid UTF-8
        OSError: If the file cannot be read
        GitDiffError: If ``diff`` is requested and git fails
    """
    file_path = resolve_path(path)
    content = file_path.read_text(encoding="utf-8")
    logger.debug("Read %d characters from %s", len(content), file_path)

    if around is not None:
        lines, total_lines = extract_lines_around(content, around, context)
        return AroundOutput(lines=lines, center=around, total_lines=total_lines)

    if diff:
        return DiffOutput(diff=git_diff(file_path, commit))

    if interface:
        return InterfaceOutput(items=extract_interface(content, file_path))

    if outline:
        return OutlineOutput(outline=extract_outline(content, file_path))

    return FullOutput(content=content)
