"""
Markdown docs index.

Scans markdown files for ATX headings and records, per file, the line span
of every section. The index is built in memory for each search and can
optionally be written to and read back from a JSON file.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

from hu.core.read.languages import MARKDOWN_HEADING, split_lines
from hu.core.search.exceptions import SearchRootNotFoundError
from hu.core.search.grep import is_ignored_dir

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = (".md", ".markdown")


class Section(BaseModel):
    """A heading and the lines it covers (1-indexed, inclusive)."""

    heading: str
    level: int = Field(..., ge=1, le=6)
    start_line: int = Field(..., ge=1)
    end_line: int = Field(..., ge=1)


class FileIndex(BaseModel):
    """Sections of one markdown file, in source order."""

    path: str
    line_count: int = Field(default=0, ge=0)
    sections: list[Section] = Field(default_factory=list)


class DocsIndex(BaseModel):
    """Sections of every markdown file under a base path."""

    base_path: str
    files: dict[str, FileIndex] = Field(default_factory=dict)

    def add_file(self, file_index: FileIndex) -> None:
        self.files[file_index.path] = file_index

    def section_count(self) -> int:
        return sum(len(f.sections) for f in self.files.values())


def index_markdown(content: str, rel_path: str) -> FileIndex:
    """Index the headings of one markdown document.

    A section runs from its heading to the line before the next heading of
    the same or a shallower level, or to the last line of the file.

    Args:
        content: Markdown text
        rel_path: Key the file is stored under in the index

    Returns:
        FileIndex with one Section per heading
    """
    lines = split_lines(content)
    headings: list[tuple[int, int, str]] = []
    for line_num, line in enumerate(lines, start=1):
        match = MARKDOWN_HEADING.match(line)
        if match:
            headings.append((line_num, len(match.group("hashes")), match.group("text").strip()))

    line_count = len(lines)
    file_index = FileIndex(path=rel_path, line_count=line_count)

    for i, (start, level, heading) in enumerate(headings):
        end = line_count
        for next_start, next_level, _ in headings[i + 1 :]:
            if next_level <= level:
                end = next_start - 1
                break
        file_index.sections.append(
            Section(heading=heading, level=level, start_line=start, end_line=end)
        )

    return file_index


def _markdown_files(root: Path) -> list[Path]:
    """Markdown files under root, skipping ignored and hidden directories."""
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, topdown=True):
        dirnames[:] = sorted(
            d for d in dirnames if not is_ignored_dir(d) and not d.startswith(".")
        )
        for fname in sorted(filenames):
            if fname.startswith(".") or not fname.lower().endswith(MARKDOWN_EXTENSIONS):
                continue
            found.append(Path(dirpath) / fname)
    return found


def build_index(root: str | Path) -> DocsIndex:
    """Build a docs index for every markdown file under ``root``.

    Files that cannot be read as UTF-8 are skipped.

    Args:
        root: Directory to scan

    Returns:
        DocsIndex keyed by POSIX paths relative to ``root``

    Raises:
        SearchRootNotFoundError: If ``root`` is not a directory
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise SearchRootNotFoundError(root_path)

    index = DocsIndex(base_path=str(root_path))
    for path in _markdown_files(root_path):
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping unreadable markdown file %s: %s", path, e)
            continue
        rel_path = path.relative_to(root_path).as_posix()
        index.add_file(index_markdown(content, rel_path))

    logger.debug(
        "Indexed %d sections in %d files under %s",
        index.section_count(),
        len(index.files),
        root_path,
    )
    return index


def save_index(index: DocsIndex, path: str | Path) -> None:
    """Write an index to a JSON file, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(index.model_dump_json(indent=2) + "\n", encoding="utf-8")


def load_index(path: str | Path) -> DocsIndex:
    """Read an index written by save_index().

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid index
    """
    source = Path(path)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid docs index {source}: {e}") from e
    return DocsIndex.model_validate(data)
