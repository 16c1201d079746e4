"""
Markdown section and line-range extraction.
"""

from pathlib import Path

from hu.core.read.languages import MARKDOWN_HEADING, split_lines
from hu.core.search.exceptions import SectionNotFoundError


def extract_section(content: str, heading: str) -> str | None:
    """Extract a markdown section by heading.

    The first heading whose text equals or contains ``heading``
    (case-insensitive) starts the section. It runs up to, not including,
    the next heading of the same or a shallower level.

    Args:
        content: Markdown text
        heading: Heading to look for

    Returns:
        Section text starting with its heading line, or None if no heading
        matches

    Example:
        >>> extract_section("# A\\ntext\\n# B\\n", "a")
        '# A\\ntext'
    """
    query = heading.lower()
    lines = split_lines(content)
    start: int | None = None
    start_level = 0
    end = len(lines)

    for i, line in enumerate(lines):
        match = MARKDOWN_HEADING.match(line)
        if not match:
            continue

        level = len(match.group("hashes"))
        if start is not None:
            if level <= start_level:
                end = i
                break
        elif query in match.group("text").lower():
            start = i
            start_level = level

    if start is None:
        return None

    return "\n".join(lines[start:end])


def extract_section_from_file(path: str | Path, heading: str) -> str:
    """Extract a section from a markdown file.

    Raises:
        FileNotFoundError: If the file does not exist
        SectionNotFoundError: If no heading matches
    """
    file_path = Path(path)
    content = file_path.read_text(encoding="utf-8")

    section = extract_section(content, heading)
    if section is None:
        raise SectionNotFoundError(file_path, heading)
    return section


def extract_lines(content: str, start: int, end: int) -> str:
    """Extract lines ``start`` (inclusive) to ``end`` (exclusive), 1-indexed.

    Out-of-range bounds are clamped; an empty or inverted range gives "".
    """
    lines = split_lines(content)
    start_idx = min(max(start - 1, 0), len(lines))
    end_idx = min(max(end - 1, 0), len(lines))

    if start_idx >= end_idx:
        return ""

    return "\n".join(lines[start_idx:end_idx])


def extract_lines_from_file(path: str | Path, start: int, end: int) -> str:
    """Read a file and extract a line range from it (see extract_lines())."""
    return extract_lines(Path(path).read_text(encoding="utf-8"), start, end)
