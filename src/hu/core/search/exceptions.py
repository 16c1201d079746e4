"""
Exceptions for the search engine.

Exception Hierarchy:
    SearchError (base)
    ├── InvalidPatternError (grep pattern does not compile)
    ├── SearchRootNotFoundError (grep/index root is missing)
    └── SectionNotFoundError (no heading matches a docs-section query)

Unreadable or non-UTF-8 files met during a recursive walk are not errors;
they are skipped. Only problems with what the user explicitly asked for
are raised.

Example:
    >>> from hu.core.search import search_files, GrepOptions
    >>> try:
    ...     search_files("[unclosed", ".", GrepOptions())
    ... except InvalidPatternError as e:
    ...     print(e.pattern)
    [unclosed
"""

from pathlib import Path


class SearchError(Exception):
    """
    Base exception for search errors.

    Attributes:
        message: Human-readable error message
        context: Additional context about the failure
    """

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message


class InvalidPatternError(SearchError):
    """
    Raised when a grep pattern is not a valid regular expression.

    Raised before any file is opened.

    Attributes:
        pattern: The pattern as given by the user
        reason: Error reported by the regex compiler
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern '{pattern}': {reason}", pattern=pattern)
        self.pattern = pattern
        self.reason = reason


class SearchRootNotFoundError(SearchError):
    """Raised when the directory or file to search does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path not found: {path}", path=str(path))
        self.path = path


class SectionNotFoundError(SearchError):
    """
    Raised when no heading in a markdown file matches the query.

    Attributes:
        path: File that was searched
        heading: The heading query
    """

    def __init__(self, path: Path, heading: str) -> None:
        super().__init__(f"Section '{heading}' not found in {path}", path=str(path))
        self.path = path
        self.heading = heading
