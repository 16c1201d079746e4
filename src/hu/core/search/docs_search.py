"""
Ranked heading search over a docs index.
"""

from hu.core.search.docs_index import DocsIndex
from hu.core.search.models import SearchResult

EXACT_SCORE = 1000
CONTAINS_SCORE = 500


def match_score(heading: str, query_lower: str, query_words: list[str]) -> int | None:
    """Score a heading against a query.

    First rule that applies wins:
        - exact case-insensitive match: 1000
        - heading contains the whole query: 500
        - word overlap: ``matched * 100 // len(query_words)``, where a query
          word matches if it contains, or is contained in, a heading word

    Args:
        heading: Heading text as written
        query_lower: Lowercased query
        query_words: Whitespace-split words of the lowercased query

    Returns:
        Score, or None when no query word matches
    """
    heading_lower = heading.lower()

    if heading_lower == query_lower:
        return EXACT_SCORE

    if query_lower in heading_lower:
        return CONTAINS_SCORE

    heading_words = heading_lower.split()
    matched = sum(
        1 for qw in query_words if any(hw in qw or qw in hw for hw in heading_words)
    )
    if matched == 0:
        return None

    return matched * 100 // max(len(query_words), 1)


def search_index(index: DocsIndex, query: str) -> list[SearchResult]:
    """Find sections whose heading matches a query.

    Results are sorted by descending score; equal scores keep the order in
    which files were added and sections appear. A blank query matches
    nothing.

    Example:
        >>> results = search_index(index, "Installation")
        >>> results[0].heading, results[0].score
        ('Installation', 1000)
    """
    query_lower = query.lower().strip()
    query_words = query_lower.split()
    if not query_words:
        return []

    results: list[SearchResult] = []
    for path, file_index in index.files.items():
        for section in file_index.sections:
            score = match_score(section.heading, query_lower, query_words)
            if score is None:
                continue
            results.append(
                SearchResult(
                    file=path,
                    heading=section.heading,
                    level=section.level,
                    start_line=section.start_line,
                    end_line=section.end_line,
                    score=score,
                )
            )

    results.sort(key=lambda r: r.score, reverse=True)
    return results
