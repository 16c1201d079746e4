"""
Hu search module.

Multi-file grep with dedup/ranking, single-line signature extraction, and
a heading index over markdown docs.

Main entry points:
    - search_files(): Regex search across a directory tree
    - extract_signature(): Declaration on one line of code, if any
    - build_index() / search_index(): Ranked docs heading search
    - extract_section(): Pull one section out of a markdown file
"""

from hu.core.search.display import format_match, format_matches, format_results
from hu.core.search.docs_index import (
    DocsIndex,
    FileIndex,
    Section,
    build_index,
    index_markdown,
    load_index,
    save_index,
)
from hu.core.search.docs_search import match_score, search_index
from hu.core.search.docs_section import (
    extract_lines,
    extract_lines_from_file,
    extract_section,
    extract_section_from_file,
)
from hu.core.search.exceptions import (
    InvalidPatternError,
    SearchError,
    SearchRootNotFoundError,
    SectionNotFoundError,
)
from hu.core.search.grep import (
    dedupe_matches,
    glob_matches,
    is_binary_extension,
    is_ignored_dir,
    rank_matches,
    search_files,
)
from hu.core.search.models import GrepFormat, GrepMatch, GrepOptions, SearchResult
from hu.core.search.signature import extract_signature

__all__ = [
    # Grep
    "search_files",
    "dedupe_matches",
    "rank_matches",
    "glob_matches",
    "is_binary_extension",
    "is_ignored_dir",
    "GrepOptions",
    "GrepMatch",
    "GrepFormat",
    # Signature
    "extract_signature",
    # Docs
    "DocsIndex",
    "FileIndex",
    "Section",
    "SearchResult",
    "build_index",
    "index_markdown",
    "save_index",
    "load_index",
    "search_index",
    "match_score",
    "extract_section",
    "extract_section_from_file",
    "extract_lines",
    "extract_lines_from_file",
    # Display
    "format_match",
    "format_matches",
    "format_results",
    # Exceptions
    "SearchError",
    "InvalidPatternError",
    "SearchRootNotFoundError",
    "SectionNotFoundError",
]
