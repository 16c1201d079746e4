"""
Tests for the multi-file grep engine.

Covers glob matching, binary/ignored/hidden filtering, match counting,
case-insensitivity, error handling, and unique/ranked/limit
post-processing.
"""

from pathlib import Path

import pytest

from hu.core.search import (
    GrepMatch,
    GrepOptions,
    InvalidPatternError,
    SearchRootNotFoundError,
    dedupe_matches,
    glob_matches,
    is_binary_extension,
    is_ignored_dir,
    rank_matches,
    search_files,
)


@pytest.fixture
def src(tmp_path: Path) -> Path:
    """Provide an empty directory to search."""
    root = tmp_path / "src"
    root.mkdir()
    return root


def _match(content: str, count: int = 1, file: str = "a.txt", line: int = 1) -> GrepMatch:
    return GrepMatch(file=file, line_num=line, content=content, match_count=count)


# ==============================================================================
# Filters
# ==============================================================================


class TestGlobMatches:
    """Test simple glob matching on file names."""

    @pytest.mark.parametrize(
        ("name", "pattern", "expected"),
        [
            ("foo.rs", "*.rs", True),
            ("foo.py", "*.rs", False),
            ("foo.rs", "**/*.rs", True),
            ("archive.tar.gz", "*.gz", True),
            ("Cargo.toml", "Cargo.toml", True),
            ("cargo.toml", "Cargo.toml", False),
            ("test_main.py", "test_*.py", True),
            ("main_test.py", "test_*.py", False),
            ("a1.txt", "a?.txt", True),
            ("a12.txt", "a?.txt", False),
            ("a+b.txt", "a+*.txt", True),
        ],
    )
    def test_glob(self, name: str, pattern: str, expected: bool) -> None:
        assert glob_matches(name, pattern) is expected


class TestFilters:
    """Test binary extension and ignored directory lists."""

    @pytest.mark.parametrize("ext", ["png", "JPG", "zip", "so", "pyc", "woff2", "sqlite"])
    def test_binary_extensions(self, ext: str) -> None:
        assert is_binary_extension(ext)

    @pytest.mark.parametrize("ext", ["rs", "py", "md", ""])
    def test_text_extensions(self, ext: str) -> None:
        assert not is_binary_extension(ext)

    @pytest.mark.parametrize("name", ["node_modules", "target", ".git", "__pycache__", ".venv"])
    def test_ignored_dirs(self, name: str) -> None:
        assert is_ignored_dir(name)

    def test_regular_dir_not_ignored(self) -> None:
        assert not is_ignored_dir("src")


# ==============================================================================
# Search
# ==============================================================================


class TestSearchFiles:
    """Test search_files() collection."""

    def test_glob_filter(self, src: Path) -> None:
        (src / "foo.rs").write_text("fn test() {}\n")
        (src / "bar.py").write_text("def test(): pass\n")

        matches = search_files("test", src, GrepOptions(glob="*.rs"))

        assert len(matches) == 1
        assert matches[0].file.endswith("foo.rs")

    def test_match_fields(self, src: Path) -> None:
        (src / "notes.txt").write_text("alpha\n  beta needle\ngamma\n")

        [match] = search_files("needle", src)

        assert match.file == str(src / "notes.txt")
        assert match.line_num == 2
        assert match.content == "  beta needle"
        assert match.match_count == 1

    def test_counts_occurrences_per_line(self, src: Path) -> None:
        (src / "a.txt").write_text("test test test\n")
        [match] = search_files("test", src)
        assert match.match_count == 3

    def test_ignore_case(self, src: Path) -> None:
        (src / "a.txt").write_text("Needle\n")
        assert search_files("needle", src) == []
        assert len(search_files("needle", src, GrepOptions(ignore_case=True))) == 1

    def test_recurses_into_subdirectories(self, src: Path) -> None:
        (src / "pkg" / "sub").mkdir(parents=True)
        (src / "pkg" / "sub" / "deep.txt").write_text("needle\n")
        [match] = search_files("needle", src)
        assert match.file == str(src / "pkg" / "sub" / "deep.txt")

    def test_files_in_sorted_order(self, src: Path) -> None:
        (src / "b.txt").write_text("needle\n")
        (src / "a.txt").write_text("needle\n")
        files = [Path(m.file).name for m in search_files("needle", src)]
        assert files == ["a.txt", "b.txt"]

    def test_skips_ignored_directories(self, src: Path) -> None:
        for name in ("node_modules", "build", "target"):
            (src / name).mkdir()
            (src / name / "x.txt").write_text("needle\n")
        assert search_files("needle", src) == []

    def test_hidden_entries_need_flag(self, src: Path) -> None:
        (src / ".secret").mkdir()
        (src / ".secret" / "x.txt").write_text("needle\n")
        (src / ".env").write_text("needle\n")

        assert search_files("needle", src) == []
        assert len(search_files("needle", src, GrepOptions(hidden=True))) == 2

    def test_ignored_dirs_skipped_even_with_hidden(self, src: Path) -> None:
        (src / ".git").mkdir()
        (src / ".git" / "config").write_text("needle\n")
        assert search_files("needle", src, GrepOptions(hidden=True)) == []

    def test_skips_binary_extensions(self, src: Path) -> None:
        (src / "image.png").write_text("needle\n")
        assert search_files("needle", src) == []

    def test_skips_non_utf8_files(self, src: Path) -> None:
        (src / "blob.txt").write_bytes(b"\xff\xfe needle \x80")
        (src / "ok.txt").write_text("needle\n")
        [match] = search_files("needle", src)
        assert match.file.endswith("ok.txt")

    def test_single_file_root(self, src: Path) -> None:
        path = src / "one.rs"
        path.write_text("fn a() {}\nfn b() {}\n")
        matches = search_files("fn", path)
        assert [m.line_num for m in matches] == [1, 2]

    def test_invalid_pattern_raised_before_io(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidPatternError) as exc_info:
            search_files("[unclosed", tmp_path / "does-not-exist")
        assert exc_info.value.pattern == "[unclosed"

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(SearchRootNotFoundError):
            search_files("x", tmp_path / "does-not-exist")


# ==============================================================================
# Post-processing
# ==============================================================================


class TestDedupe:
    """Test dedupe_matches()."""

    def test_merges_whitespace_variants(self) -> None:
        matches = [
            _match("    let x = needle;", 1, file="a.rs", line=3),
            _match("let x =  needle;", 2, file="b.rs", line=9),
        ]
        [merged] = dedupe_matches(matches)
        assert merged.match_count == 3
        assert (merged.file, merged.line_num) == ("a.rs", 3)

    def test_keeps_first_seen_order(self) -> None:
        matches = [_match("b"), _match("a"), _match("b")]
        assert [m.content for m in dedupe_matches(matches)] == ["b", "a"]

    def test_preserves_total_count(self) -> None:
        matches = [_match("x y", 2), _match(" x  y ", 3), _match("z", 1)]
        deduped = dedupe_matches(matches)
        assert sum(m.match_count for m in deduped) == 6


class TestRank:
    """Test rank_matches()."""

    def test_sorts_by_count_descending(self) -> None:
        ranked = rank_matches([_match("a", 1), _match("b", 3), _match("c", 2)])
        assert [m.match_count for m in ranked] == [3, 2, 1]

    def test_ties_prefer_shorter_lines(self) -> None:
        ranked = rank_matches([_match("a long line", 2), _match("short", 2)])
        assert [m.content for m in ranked] == ["short", "a long line"]

    def test_adjacent_pairs_non_increasing(self) -> None:
        ranked = rank_matches([_match(str(i), i % 4 + 1) for i in range(10)])
        assert all(a.match_count >= b.match_count for a, b in zip(ranked, ranked[1:]))

    def test_ties_compare_utf8_length(self) -> None:
        # 4 characters but 8 bytes, against 5 ASCII bytes
        ranked = rank_matches([_match("\u00e9" * 4, 1), _match("abcde", 1)])
        assert [m.content for m in ranked] == ["abcde", "\u00e9" * 4]


class TestPostProcessingOrder:
    """Test that unique runs before ranked, which runs before limit."""

    def test_unique_then_ranked_then_limit(self, src: Path) -> None:
        (src / "a.txt").write_text("x x\n")
        (src / "b.txt").write_text("x x\n")
        (src / "c.txt").write_text("x x x\n")

        options = GrepOptions(unique=True, ranked=True, limit=1)
        [top] = search_files("x", src, options)

        # a.txt and b.txt merge to 4 matches, beating c.txt's 3
        assert top.file.endswith("a.txt")
        assert top.match_count == 4

    def test_limit_without_ranking(self, src: Path) -> None:
        (src / "a.txt").write_text("x\nx\nx\n")
        matches = search_files("x", src, GrepOptions(limit=2))
        assert [m.line_num for m in matches] == [1, 2]

    def test_limit_zero(self, src: Path) -> None:
        (src / "a.txt").write_text("x\n")
        assert search_files("x", src, GrepOptions(limit=0)) == []


class TestLineNumbering:
    """Line numbers count newline-separated lines only."""

    def test_form_feed_does_not_shift_lines(self, src: Path) -> None:
        (src / "a.py").write_text("x = 1\x0c y = 2\ntest\n")
        [match] = search_files("test", src)
        assert match.line_num == 2

    def test_crlf_stripped_from_content(self, src: Path) -> None:
        (src / "a.txt").write_bytes(b"one\r\ntwo needle\r\n")
        [match] = search_files("needle", src)
        assert (match.line_num, match.content) == (2, "two needle")
