"""
Tests for language detection and rule tables.
"""

import re

import pytest

from hu.core.read.languages import (
    OUTLINE_RULES,
    Language,
    Rule,
    first_match,
    indent_of,
    name_of,
    split_lines,
)
from hu.core.read.models import ItemKind


class TestLanguageFromPath:
    """Test extension-based language detection."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("main.rs", Language.RUST),
            ("src/app.py", Language.PYTHON),
            ("index.js", Language.JAVASCRIPT),
            ("component.tsx", Language.JAVASCRIPT),
            ("module.mjs", Language.JAVASCRIPT),
            ("model.rb", Language.RUBY),
            ("server.go", Language.GO),
            ("README.md", Language.MARKDOWN),
            ("guide.markdown", Language.MARKDOWN),
        ],
    )
    def test_known_extensions(self, path: str, expected: Language) -> None:
        assert Language.from_path(path) is expected

    @pytest.mark.parametrize("path", ["Cargo.toml", "Makefile", "notes.txt", ".bashrc"])
    def test_unknown_extensions(self, path: str) -> None:
        assert Language.from_path(path) is None

    def test_indent_widths(self) -> None:
        assert Language.RUST.indent_width == 4
        assert Language.PYTHON.indent_width == 4
        assert Language.JAVASCRIPT.indent_width == 2
        assert Language.RUBY.indent_width == 2
        assert Language.GO.indent_width == 0


class TestRules:
    """Test rule matching helpers."""

    def test_clean_strips_trailing_token_and_whitespace(self) -> None:
        rule = Rule(kind=ItemKind.FUNCTION, pattern=re.compile(".*"), strip="{")
        assert rule.clean("  fn main() {") == "fn main()"
        assert rule.clean("fn main() {{") == "fn main()"

    def test_first_match_respects_priority(self) -> None:
        """Rust function rule comes before the struct rule."""
        found = first_match(OUTLINE_RULES[Language.RUST], "pub fn build() -> Config {")
        assert found is not None
        rule, match = found
        assert rule.kind is ItemKind.FUNCTION
        assert name_of(match) == "build"

    def test_first_match_none(self) -> None:
        assert first_match(OUTLINE_RULES[Language.RUST], "let x = 1;") is None

    def test_indent_of_counts_columns(self) -> None:
        found = first_match(OUTLINE_RULES[Language.PYTHON], "        def deep(self):")
        assert found is not None
        assert indent_of(found[1]) == 8

    def test_go_rules_have_no_indent_group(self) -> None:
        found = first_match(OUTLINE_RULES[Language.GO], "func main() {")
        assert found is not None
        assert indent_of(found[1]) == 0


class TestSplitLines:
    """Test newline-only line splitting."""

    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a"]),
            ("a\n\n", ["a", ""]),
            ("\n", [""]),
            ("a\r\nb\r\n", ["a", "b"]),
            ("a\x0cb\n", ["a\x0cb"]),
            ("a\x0bb\x1cc\x85d\n", ["a\x0bb\x1cc\x85d"]),
            ("a\u2028b\u2029c", ["a\u2028b\u2029c"]),
            ("a\rb\n", ["a\rb"]),
            ("tail\r", ["tail\r"]),
        ],
    )
    def test_split(self, content: str, expected: list[str]) -> None:
        assert split_lines(content) == expected
