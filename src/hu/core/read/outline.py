"""
File outline extraction.

Walks every line of a file once and emits an ordered list of declarations
(functions, types, modules) or markdown headings with their line numbers
and nesting level.
"""

from pathlib import PurePath

from hu.core.read.languages import (
    MARKDOWN_HEADING,
    OUTLINE_RULES,
    Language,
    first_match,
    indent_of,
    name_of,
    split_lines,
)
from hu.core.read.models import FileOutline, ItemKind, OutlineItem


def extract_outline(content: str, path: str | PurePath) -> FileOutline:
    """Extract an outline from file content based on its extension.

    Unsupported extensions yield an empty outline rather than an error.

    Args:
        content: Whole file text
        path: File name or path (only the extension is used)

    Returns:
        FileOutline with items in source-line order

    Example:
        >>> outline = extract_outline("pub fn test() {}", "x.rs")
        >>> outline.items[0].text
        'pub fn test()'
    """
    outline = FileOutline()
    language = Language.from_path(path)

    if language is None:
        return outline

    if language is Language.MARKDOWN:
        for item in _markdown_headings(content):
            outline.push(item)
        return outline

    rules = OUTLINE_RULES[language]
    width = language.indent_width

    for line_num, line in enumerate(split_lines(content), start=1):
        found = first_match(rules, line)
        if found is None:
            continue

        rule, match = found
        indent = indent_of(match)
        if rule.keep is not None and not rule.keep(indent, name_of(match)):
            continue

        outline.push(
            OutlineItem(
                line=line_num,
                text=rule.clean(match.group(0)),
                level=indent // width if width else 0,
                kind=rule.kind,
            )
        )

    return outline


def _markdown_headings(content: str) -> list[OutlineItem]:
    """ATX headings; level is the number of hashes minus one."""
    items: list[OutlineItem] = []
    for line_num, line in enumerate(split_lines(content), start=1):
        match = MARKDOWN_HEADING.match(line)
        if not match:
            continue
        hashes = len(match.group("hashes"))
        items.append(
            OutlineItem(
                line=line_num,
                text=match.group("text"),
                level=hashes - 1,
                kind=ItemKind.heading(hashes),
            )
        )
    return items
