"""
Text rendering of grep matches and docs search results.
"""

from hu.core.search.models import GrepFormat, GrepMatch, SearchResult
from hu.core.search.signature import extract_signature


def format_match(match: GrepMatch, mode: GrepFormat = GrepFormat.DEFAULT) -> str:
    """Format a single grep match.

    Args:
        match: The match to format
        mode: ``REFS`` prints ``file:line`` only; ``SIGNATURE`` replaces the
            line with the declaration it contains, when there is one

    Returns:
        One output line
    """
    if mode is GrepFormat.REFS:
        return f"{match.file}:{match.line_num}"

    text = match.content.strip()
    if mode is GrepFormat.SIGNATURE:
        text = extract_signature(match.content, match.file) or text

    return f"{match.file}:{match.line_num}: {text}"


def format_matches(matches: list[GrepMatch], mode: GrepFormat = GrepFormat.DEFAULT) -> str:
    return "\n".join(format_match(m, mode) for m in matches)


def format_results(results: list[SearchResult], limit: int | None = None) -> str:
    """Format docs search results, one heading per line."""
    if not results:
        return "No matching sections found"

    if limit is not None:
        results = results[:limit]

    return "\n".join(
        f"{'#' * r.level} {r.heading} ({r.file}:L{r.start_line}-{r.end_line})" for r in results
    )
