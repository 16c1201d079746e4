"""
Hu read module.

Language-aware views of a single file: full content, nested outline,
public interface, a numbered window around a line, or a git diff.

Main entry points:
    - extract_outline(): Declarations and headings with nesting levels
    - extract_interface(): Externally visible declarations only
    - extract_lines_around(): Clamped window of numbered lines
    - read_file(): Resolve, read and dispatch to one of the views

Example:
    >>> from hu.core.read import extract_outline
    >>> outline = extract_outline("impl Config {\\n    pub fn new() -> Self {\\n", "x.rs")
    >>> [(item.line, item.kind.value, item.level) for item in outline.items]
    [(1, 'impl', 0), (2, 'function', 1)]
"""

from hu.core.read.around import extract_lines_around, format_lines_around
from hu.core.read.diff import GitDiffError, git_diff, parse_diff_hunks
from hu.core.read.display import format_interface, format_outline, format_output
from hu.core.read.interface import extract_interface
from hu.core.read.languages import Language, split_lines
from hu.core.read.models import (
    AroundOutput,
    DiffHunk,
    DiffOutput,
    FileOutline,
    FullOutput,
    InterfaceOutput,
    ItemKind,
    OutlineItem,
    OutlineOutput,
    ReadOutput,
)
from hu.core.read.outline import extract_outline
from hu.core.read.service import read_file, resolve_path

__all__ = [
    # Extraction
    "extract_outline",
    "extract_interface",
    "extract_lines_around",
    "format_lines_around",
    # Diff
    "git_diff",
    "parse_diff_hunks",
    "GitDiffError",
    # Service
    "read_file",
    "resolve_path",
    # Rendering
    "format_output",
    "format_outline",
    "format_interface",
    # Models
    "Language",
    "split_lines",
    "ItemKind",
    "OutlineItem",
    "FileOutline",
    "DiffHunk",
    "ReadOutput",
    "FullOutput",
    "OutlineOutput",
    "InterfaceOutput",
    "AroundOutput",
    "DiffOutput",
]
