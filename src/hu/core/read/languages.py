"""
Per-language declaration rules.

Every extractor (outline, interface, signature) is driven by the tables in
this module instead of hand-written per-language branches. A table is an
ordered list of rules; the first rule whose pattern matches a line wins,
which makes the order a contract (function > struct > enum > trait > impl >
module > const > type for Rust, for example).

Patterns use two named groups where relevant:
    - ``indent``: leading whitespace, divided by the language indent width
      to get the nesting level
    - ``name``: the declared identifier, used by visibility predicates
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Callable

from hu.core.read.models import ItemKind

# (indent columns, declared name) -> keep?
RulePredicate = Callable[[int, str], bool]


class Language(str, Enum):
    """Languages understood by the extractors."""

    RUST = "rust"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    RUBY = "ruby"
    GO = "go"
    MARKDOWN = "markdown"

    @classmethod
    def from_path(cls, path: str | PurePath) -> Language | None:
        """Detect the language from a file name or path.

        Only the extension is inspected; the file is never opened.

        Args:
            path: File name or path

        Returns:
            Language for a known extension, None otherwise
        """
        suffix = PurePath(path).suffix
        if not suffix:
            return None
        return _EXTENSIONS.get(suffix[1:])

    @property
    def indent_width(self) -> int:
        """Columns per nesting level (0 means always top level)."""
        return _INDENT_WIDTHS[self]


_EXTENSIONS: dict[str, Language] = {
    "rs": Language.RUST,
    "py": Language.PYTHON,
    "js": Language.JAVASCRIPT,
    "ts": Language.JAVASCRIPT,
    "jsx": Language.JAVASCRIPT,
    "tsx": Language.JAVASCRIPT,
    "mjs": Language.JAVASCRIPT,
    "rb": Language.RUBY,
    "go": Language.GO,
    "md": Language.MARKDOWN,
    "markdown": Language.MARKDOWN,
}

_INDENT_WIDTHS: dict[Language, int] = {
    Language.RUST: 4,
    Language.PYTHON: 4,
    Language.JAVASCRIPT: 2,
    Language.RUBY: 2,
    Language.GO: 0,
    Language.MARKDOWN: 0,
}


@dataclass(frozen=True)
class Rule:
    """One declaration pattern.

    Attributes:
        kind: Item kind emitted when the rule matches
        pattern: Compiled pattern, applied with ``match`` (anchored at start)
        strip: Trailing token removed from the matched text before trimming
        keep: Optional predicate; when it rejects a match the line emits
            nothing (later rules are not tried)
    """

    kind: ItemKind
    pattern: re.Pattern[str]
    strip: str = ""
    keep: RulePredicate | None = None

    def clean(self, text: str) -> str:
        """Strip the trailing token (repeatedly) and surrounding whitespace."""
        if self.strip:
            while text.endswith(self.strip):
                text = text[: -len(self.strip)]
        return text.strip()


def _rule(
    kind: ItemKind,
    pattern: str,
    strip: str = "",
    keep: RulePredicate | None = None,
) -> Rule:
    return Rule(kind=kind, pattern=re.compile(pattern), strip=strip, keep=keep)


# ---------------------------------------------------------------------------
# Shared pattern fragments
# ---------------------------------------------------------------------------

_IND = r"^(?P<indent>\s*)"
_GENERICS = r"(<[^>]+>)?"
_PARAMS = r"\([^)]*\)"

_RUST_FN = (
    r"(?P<pub>pub\s+)?(async\s+)?fn\s+(?P<name>\w+)\s*" + _GENERICS + r"\s*" + _PARAMS
    + r"(\s*->\s*[^{]+)?"
)
_RUST_PUB_FN = (
    r"pub\s+(async\s+)?fn\s+(?P<name>\w+)\s*" + _GENERICS + r"\s*" + _PARAMS
    + r"(\s*->\s*[^{]+)?"
)
_PY_DEF = r"(async\s+)?def\s+(?P<name>\w+)\s*" + _PARAMS + r"(\s*->\s*[^:]+)?"
_PY_CLASS = r"class\s+(?P<name>\w+)(\([^)]*\))?"
_JS_FUNCTION = r"(export\s+)?(async\s+)?function\s+(?P<name>\w+)\s*" + _GENERICS + r"\s*" + _PARAMS
_JS_ARROW = r"(export\s+)?(const|let|var)\s+(?P<name>\w+)\s*=\s*(async\s+)?" + _PARAMS + r"\s*=>"
_JS_CLASS = r"(export\s+)?class\s+(?P<name>\w+)(\s+extends\s+\w+)?"
_RB_DEF = r"def\s+(?P<name>\w+[?!=]?)(\([^)]*\))?"
_RB_CLASS = r"class\s+(?P<name>\w+)(\s*<\s*\w+)?"
_RB_MODULE = r"module\s+(?P<name>\w+)"
_GO_FUNC = r"^func\s+(\([^)]+\)\s+)?(?P<name>\w+)\s*" + _PARAMS + r"(\s*\([^)]*\)|\s*\w+)?"
_GO_EXPORTED_FUNC = (
    r"^func\s+(\([^)]+\)\s+)?(?P<name>[A-Z]\w*)\s*" + _PARAMS + r"(\s*\([^)]*\)|\s*\w+)?"
)

MARKDOWN_HEADING = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<text>.+)$")

# Words that look like ``name(...) {`` but open a block, not a method
_JS_BLOCK_KEYWORDS = frozenset(
    {"if", "for", "while", "switch", "catch", "with", "return", "function"}
)


def _js_method(indent: int, name: str) -> bool:
    return indent > 0 and name not in _JS_BLOCK_KEYWORDS


# ---------------------------------------------------------------------------
# Outline rules
# ---------------------------------------------------------------------------

OUTLINE_RULES: dict[Language, list[Rule]] = {
    Language.RUST: [
        _rule(ItemKind.FUNCTION, _IND + _RUST_FN, strip="{"),
        _rule(ItemKind.STRUCT, _IND + r"(pub\s+)?struct\s+(?P<name>\w+)" + _GENERICS),
        _rule(ItemKind.ENUM, _IND + r"(pub\s+)?enum\s+(?P<name>\w+)" + _GENERICS),
        _rule(ItemKind.TRAIT, _IND + r"(pub\s+)?trait\s+(?P<name>\w+)" + _GENERICS),
        _rule(
            ItemKind.IMPL,
            _IND + r"impl\s*" + _GENERICS + r"\s*(?P<name>\w+)" + _GENERICS + r"(\s+for\s+\w+)?",
        ),
        _rule(ItemKind.MODULE, _IND + r"(pub\s+)?mod\s+(?P<name>\w+)"),
        _rule(ItemKind.CONST, _IND + r"(pub\s+)?const\s+(?P<name>\w+)"),
        _rule(ItemKind.TYPE, _IND + r"(pub\s+)?type\s+(?P<name>\w+)"),
    ],
    Language.PYTHON: [
        _rule(ItemKind.FUNCTION, _IND + _PY_DEF, strip=":"),
        _rule(ItemKind.CLASS, _IND + _PY_CLASS, strip=":"),
    ],
    Language.JAVASCRIPT: [
        _rule(ItemKind.FUNCTION, _IND + _JS_FUNCTION),
        _rule(ItemKind.FUNCTION, _IND + _JS_ARROW, strip="=>"),
        _rule(ItemKind.CLASS, _IND + _JS_CLASS),
        _rule(
            ItemKind.FUNCTION,
            _IND + r"(async\s+)?(?P<name>\w+)\s*" + _PARAMS + r"\s*\{",
            strip="{",
            keep=_js_method,
        ),
    ],
    Language.RUBY: [
        _rule(ItemKind.FUNCTION, _IND + _RB_DEF),
        _rule(ItemKind.CLASS, _IND + _RB_CLASS),
        _rule(ItemKind.MODULE, _IND + _RB_MODULE),
    ],
    Language.GO: [
        _rule(ItemKind.FUNCTION, _GO_FUNC),
        _rule(ItemKind.STRUCT, r"^type\s+(?P<name>\w+)\s+struct"),
        _rule(ItemKind.TRAIT, r"^type\s+(?P<name>\w+)\s+interface"),
    ],
}


# ---------------------------------------------------------------------------
# Interface rules
# ---------------------------------------------------------------------------


def _python_public(indent: int, name: str) -> bool:
    """Module-level names without a single leading underscore (dunders pass)."""
    if indent > 0:
        return False
    return not (name.startswith("_") and not name.startswith("__"))


def _top_level(indent: int, name: str) -> bool:
    return indent == 0


def _ruby_method_depth(indent: int, name: str) -> bool:
    return indent <= 2


INTERFACE_RULES: dict[Language, list[Rule]] = {
    Language.RUST: [
        _rule(ItemKind.FUNCTION, _IND + _RUST_PUB_FN, strip="{"),
        _rule(ItemKind.STRUCT, _IND + r"pub\s+struct\s+(?P<name>\w+)" + _GENERICS),
        _rule(ItemKind.ENUM, _IND + r"pub\s+enum\s+(?P<name>\w+)" + _GENERICS),
        _rule(ItemKind.TRAIT, _IND + r"pub\s+trait\s+(?P<name>\w+)" + _GENERICS),
        _rule(ItemKind.CONST, _IND + r"pub\s+const\s+(?P<name>\w+)"),
        _rule(ItemKind.TYPE, _IND + r"pub\s+type\s+(?P<name>\w+)"),
        _rule(ItemKind.MODULE, _IND + r"pub\s+mod\s+(?P<name>\w+)"),
    ],
    Language.PYTHON: [
        _rule(ItemKind.FUNCTION, _IND + _PY_DEF, strip=":", keep=_python_public),
        _rule(ItemKind.CLASS, _IND + _PY_CLASS, strip=":", keep=_python_public),
    ],
    Language.JAVASCRIPT: [
        _rule(
            ItemKind.FUNCTION,
            _IND + r"export\s+(async\s+)?function\s+(?P<name>\w+)\s*" + _GENERICS + r"\s*"
            + _PARAMS,
        ),
        _rule(
            ItemKind.FUNCTION,
            _IND + r"export\s+(const|let|var)\s+(?P<name>\w+)\s*=\s*(async\s+)?" + _PARAMS
            + r"\s*=>",
            strip="=>",
        ),
        _rule(ItemKind.CLASS, _IND + r"export\s+class\s+(?P<name>\w+)(\s+extends\s+\w+)?"),
        _rule(ItemKind.OTHER, _IND + r"export\s+default\s+(class|function)?\s*(?P<name>\w+)?"),
    ],
    Language.RUBY: [
        _rule(ItemKind.FUNCTION, _IND + _RB_DEF, keep=_ruby_method_depth),
        _rule(ItemKind.CLASS, _IND + _RB_CLASS, keep=_top_level),
        _rule(ItemKind.MODULE, _IND + _RB_MODULE, keep=_top_level),
    ],
    Language.GO: [
        _rule(ItemKind.FUNCTION, _GO_EXPORTED_FUNC),
        _rule(ItemKind.STRUCT, r"^type\s+(?P<name>[A-Z]\w*)\s+struct"),
        _rule(ItemKind.TRAIT, r"^type\s+(?P<name>[A-Z]\w*)\s+interface"),
    ],
}

# Bare visibility keywords that switch Ruby's implicit section state
RUBY_PRIVATE = re.compile(r"^\s*private\s*$")
RUBY_PUBLIC = re.compile(r"^\s*public\s*$")
RUBY_SCOPE_OPENERS = (
    re.compile(_IND + _RB_CLASS),
    re.compile(_IND + _RB_MODULE),
)


# ---------------------------------------------------------------------------
# Signature rules (applied to a trimmed line)
# ---------------------------------------------------------------------------

SIGNATURE_RULES: dict[Language, list[Rule]] = {
    Language.RUST: [
        _rule(ItemKind.FUNCTION, "^" + _RUST_FN, strip="{"),
        _rule(ItemKind.OTHER, r"^(pub\s+)?(struct|enum|impl|trait)\s+(?P<name>\w+)" + _GENERICS),
    ],
    Language.PYTHON: [
        _rule(ItemKind.FUNCTION, "^" + _PY_DEF + ":", strip=":"),
        _rule(ItemKind.CLASS, "^" + _PY_CLASS + ":", strip=":"),
    ],
    Language.JAVASCRIPT: [
        _rule(ItemKind.FUNCTION, "^" + _JS_FUNCTION),
        _rule(ItemKind.FUNCTION, "^" + _JS_ARROW, strip="=>"),
        _rule(ItemKind.CLASS, "^" + _JS_CLASS),
    ],
    Language.RUBY: [
        _rule(ItemKind.FUNCTION, "^" + _RB_DEF),
        _rule(ItemKind.CLASS, "^" + _RB_CLASS),
    ],
    Language.GO: [
        _rule(ItemKind.FUNCTION, _GO_FUNC),
        _rule(ItemKind.OTHER, r"^type\s+(?P<name>\w+)\s+(struct|interface)"),
    ],
}


def split_lines(content: str) -> list[str]:
    """Split text into lines on ``\\n`` only.

    A ``\\r`` before a ``\\n`` is dropped and a final newline does not start
    an extra empty line. Form feeds, vertical tabs and Unicode separators
    stay inside their line (``str.splitlines()`` would break on them), so
    line numbers agree with ``grep -n`` and editors.

    Example:
        >>> split_lines("a\\r\\nb\\x0cc\\n")
        ['a', 'b\\x0cc']
    """
    lines = content.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def first_match(rules: list[Rule], line: str) -> tuple[Rule, re.Match[str]] | None:
    """Return the first rule matching ``line`` together with its match."""
    for rule in rules:
        match = rule.pattern.match(line)
        if match:
            return rule, match
    return None


def indent_of(match: re.Match[str]) -> int:
    """Leading whitespace column count captured by the ``indent`` group."""
    if "indent" not in match.re.groupindex:
        return 0
    return len(match.group("indent") or "")


def name_of(match: re.Match[str]) -> str:
    if "name" not in match.re.groupindex:
        return ""
    return match.group("name") or ""
