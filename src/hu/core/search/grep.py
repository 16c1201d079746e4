"""
Multi-file grep.

Walks a directory tree, skipping ignored and hidden directories and files
with binary extensions, and collects every line matching a regex. Results
can then be deduplicated by content, ranked by match density and limited.

Post-processing order is fixed: unique, then ranked, then limit.
"""

import logging
import os
import re
from pathlib import Path

from hu.core.read.languages import split_lines
from hu.core.search.exceptions import InvalidPatternError, SearchRootNotFoundError
from hu.core.search.models import GrepMatch, GrepOptions

logger = logging.getLogger(__name__)

IGNORED_DIRS = frozenset(
    {
        "node_modules",
        "target",
        ".git",
        ".svn",
        ".hg",
        "__pycache__",
        ".mypy_cache",
        ".pytest_cache",
        "venv",
        ".venv",
        "dist",
        "build",
        ".next",
        ".nuxt",
    }
)

BINARY_EXTENSIONS = frozenset(
    {
        # Images
        "png", "jpg", "jpeg", "gif", "ico", "webp", "bmp", "svg", "pdf",
        # Archives
        "zip", "tar", "gz", "bz2", "xz", "7z", "rar",
        # Executables and object code
        "exe", "dll", "so", "dylib", "a", "o", "obj", "wasm", "class", "jar", "pyc", "pyo",
        # Audio and video
        "mp3", "mp4", "avi", "mkv", "mov", "wav", "flac",
        # Fonts
        "ttf", "otf", "woff", "woff2", "eot",
        # Databases
        "sqlite", "db",
    }
)  # fmt: skip


def is_ignored_dir(name: str) -> bool:
    """Check whether a directory name is never descended into."""
    return name in IGNORED_DIRS


def is_binary_extension(ext: str) -> bool:
    """Check an extension (without the dot) against the binary blocklist."""
    return ext.lower() in BINARY_EXTENSIONS


def glob_matches(name: str, pattern: str) -> bool:
    """Match a file name against a simple glob.

    Supported forms, tried in order:
        - ``*.ext``: extension shortcut
        - any pattern with ``*`` or ``?``: wildcard match on the whole name
        - anything else: exact, case-sensitive name

    A leading ``**/`` is ignored since only the file name is matched.

    Example:
        >>> glob_matches("main.rs", "**/*.rs")
        True
        >>> glob_matches("test_main.py", "test_*.py")
        True
    """
    while pattern.startswith("**/"):
        pattern = pattern[3:]

    if pattern.startswith("*."):
        return name.endswith(pattern[1:])

    if "*" in pattern or "?" in pattern:
        regex = re.escape(pattern).replace(r"\*", ".*").replace(r"\?", ".")
        return re.fullmatch(regex, name) is not None

    return name == pattern


def should_search_file(path: Path, glob: str | None) -> bool:
    """Check a file against the binary blocklist and the optional glob."""
    if is_binary_extension(path.suffix[1:]):
        return False
    if glob is None:
        return True
    return glob_matches(path.name, glob)


def compile_pattern(pattern: str, ignore_case: bool = False) -> re.Pattern[str]:
    """Compile a grep pattern.

    Raises:
        InvalidPatternError: If the pattern is not a valid regex
    """
    flags = re.IGNORECASE if ignore_case else 0
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def search_file(path: str, regex: re.Pattern[str]) -> list[GrepMatch]:
    """Search one file, returning a match per line with at least one hit.

    Files that cannot be read or are not valid UTF-8 yield no matches.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping unreadable file %s: %s", path, e)
        return []

    matches: list[GrepMatch] = []
    for line_num, line in enumerate(split_lines(content), start=1):
        count = sum(1 for _ in regex.finditer(line))
        if count > 0:
            matches.append(
                GrepMatch(file=path, line_num=line_num, content=line, match_count=count)
            )
    return matches


def collect_matches(
    root: str | Path, regex: re.Pattern[str], glob: str | None = None, hidden: bool = False
) -> list[GrepMatch]:
    """Walk ``root`` and collect matches from every eligible file.

    Directories are visited depth-first in sorted order. A file given as
    the root is searched directly (subject to the binary and glob filters).

    Raises:
        SearchRootNotFoundError: If ``root`` does not exist
    """
    root_path = Path(root)
    if not root_path.exists():
        raise SearchRootNotFoundError(root_path)

    if root_path.is_file():
        if should_search_file(root_path, glob):
            return search_file(str(root_path), regex)
        return []

    def _on_error(error: OSError) -> None:
        logger.debug("Skipping unreadable directory %s: %s", error.filename, error)

    matches: list[GrepMatch] = []
    for dirpath, dirnames, filenames in os.walk(root_path, topdown=True, onerror=_on_error):
        # Prune in place so os.walk never descends into them
        dirnames[:] = sorted(
            d
            for d in dirnames
            if not is_ignored_dir(d) and (hidden or not d.startswith("."))
        )

        for fname in sorted(filenames):
            if not hidden and fname.startswith("."):
                continue
            file_path = os.path.join(dirpath, fname)
            if should_search_file(Path(fname), glob):
                matches.extend(search_file(file_path, regex))

    return matches


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


def dedupe_matches(matches: list[GrepMatch]) -> list[GrepMatch]:
    """Collapse matches whose whitespace-normalized content is identical.

    The first match encountered survives (keeping its file and line) and
    accumulates the match counts of its duplicates. Output order is the
    order in which each distinct content was first seen.
    """
    seen: dict[str, GrepMatch] = {}
    for match in matches:
        key = normalize_whitespace(match.content)
        existing = seen.get(key)
        if existing is None:
            seen[key] = match
        else:
            seen[key] = existing.model_copy(
                update={"match_count": existing.match_count + match.match_count}
            )
    return list(seen.values())


def rank_matches(matches: list[GrepMatch]) -> list[GrepMatch]:
    """Sort by match count (descending), then content length (ascending).

    Length is measured in UTF-8 bytes. The sort is stable, so fully tied
    matches keep their order.
    """
    return sorted(matches, key=lambda m: (-m.match_count, len(m.content.encode("utf-8"))))


def search_files(
    pattern: str, root: str | Path = ".", options: GrepOptions | None = None
) -> list[GrepMatch]:
    """Search files under ``root`` for lines matching ``pattern``.

    Args:
        pattern: Regular expression
        root: Directory (or single file) to search
        options: Filtering and post-processing options

    Returns:
        Matching lines after unique/ranked/limit post-processing

    Raises:
        InvalidPatternError: If the pattern does not compile (before any I/O)
        SearchRootNotFoundError: If ``root`` does not exist

    Example:
        >>> matches = search_files("fn main", "src", GrepOptions(glob="*.rs"))
        >>> [f"{m.file}:{m.line_num}" for m in matches]
        ['src/main.rs:3']
    """
    if options is None:
        options = GrepOptions()

    regex = compile_pattern(pattern, options.ignore_case)
    matches = collect_matches(root, regex, options.glob, options.hidden)
    logger.debug("Pattern %r matched %d lines under %s", pattern, len(matches), root)

    if options.unique:
        matches = dedupe_matches(matches)

    if options.ranked:
        matches = rank_matches(matches)

    if options.limit is not None:
        matches = matches[: options.limit]

    return matches
