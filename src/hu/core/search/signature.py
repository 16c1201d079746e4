"""
Single-line signature extraction.

Used by ``grep --signature`` to show the declaration a match sits on
instead of the raw line.
"""

from pathlib import PurePath

from hu.core.read.languages import SIGNATURE_RULES, Language, first_match


def extract_signature(line: str, path: str | PurePath) -> str | None:
    """Extract a function or type signature from one line of code.

    The line is trimmed first, so indentation does not matter. Markdown and
    unknown extensions never produce a signature.

    Args:
        line: Raw source line
        path: File name or path (only the extension is used)

    Returns:
        Cleaned signature, or None if the line declares nothing

    Example:
        >>> extract_signature("    def load(self, path):", "config.py")
        'def load(self, path)'
    """
    language = Language.from_path(path)
    if language is None or language not in SIGNATURE_RULES:
        return None

    found = first_match(SIGNATURE_RULES[language], line.strip())
    if found is None:
        return None

    rule, match = found
    return rule.clean(match.group(0))
