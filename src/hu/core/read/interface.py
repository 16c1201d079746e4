"""
Public interface extraction.

A second, independent line scan that keeps only externally visible
declarations, following each language's visibility convention:

- Rust: items carrying the ``pub`` modifier
- Python: module-level names without a single leading underscore
- JavaScript/TypeScript: ``export`` declarations
- Ruby: methods declared while the implicit section is public
- Go: capitalized (exported) identifiers
"""

from enum import Enum
from pathlib import PurePath

from hu.core.read.languages import (
    INTERFACE_RULES,
    RUBY_PRIVATE,
    RUBY_PUBLIC,
    RUBY_SCOPE_OPENERS,
    Language,
    first_match,
    indent_of,
    name_of,
    split_lines,
)
from hu.core.read.models import ItemKind, OutlineItem

# Items of these languages are always listed at level 0
_FLAT_LANGUAGES = frozenset({Language.PYTHON, Language.JAVASCRIPT, Language.GO})


class Visibility(str, Enum):
    """Ruby's implicit method visibility inside a class or module body."""

    PUBLIC = "public"
    PRIVATE = "private"


def extract_interface(content: str, path: str | PurePath) -> list[OutlineItem]:
    """Extract the public interface of a file.

    Args:
        content: Whole file text
        path: File name or path (only the extension is used)

    Returns:
        Visible declarations in source-line order; empty for unsupported
        extensions (markdown included)
    """
    language = Language.from_path(path)
    if language is None or language not in INTERFACE_RULES:
        return []

    rules = INTERFACE_RULES[language]
    width = 0 if language in _FLAT_LANGUAGES else language.indent_width
    is_ruby = language is Language.RUBY
    visibility = Visibility.PUBLIC
    items: list[OutlineItem] = []

    for line_num, line in enumerate(split_lines(content), start=1):
        if is_ruby:
            if RUBY_PRIVATE.match(line):
                visibility = Visibility.PRIVATE
                continue
            if RUBY_PUBLIC.match(line):
                visibility = Visibility.PUBLIC
                continue
            # A new class/module body starts public again
            if any(opener.match(line) for opener in RUBY_SCOPE_OPENERS):
                visibility = Visibility.PUBLIC

        found = first_match(rules, line)
        if found is None:
            continue

        rule, match = found
        indent = indent_of(match)

        if is_ruby and rule.kind is ItemKind.FUNCTION and visibility is Visibility.PRIVATE:
            continue
        if rule.keep is not None and not rule.keep(indent, name_of(match)):
            continue

        items.append(
            OutlineItem(
                line=line_num,
                text=rule.clean(match.group(0)),
                level=indent // width if width else 0,
                kind=rule.kind,
            )
        )

    return items
