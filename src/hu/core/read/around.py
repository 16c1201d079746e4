"""
Line-window extraction around a center line.
"""

from hu.core.read.languages import split_lines


def extract_lines_around(
    content: str, center: int, context: int
) -> tuple[list[tuple[int, str]], int]:
    """Extract a window of lines around a 1-indexed center line.

    The window ``[center - context, center + context]`` is clamped to the
    file, so asking for the first or last line never reaches outside it.

    Args:
        content: Whole file text
        center: 1-indexed center line (0 yields an empty window)
        context: Lines of context on each side

    Returns:
        Tuple of (numbered lines, total line count in the file)
    """
    lines = split_lines(content)
    total_lines = len(lines)

    if total_lines == 0 or center <= 0:
        return [], total_lines

    context = max(context, 0)
    center_idx = center - 1
    start = max(center_idx - context, 0)
    end = min(center_idx + context + 1, total_lines)

    window = [(start + offset + 1, line) for offset, line in enumerate(lines[start:end])]
    return window, total_lines


def format_lines_around(lines: list[tuple[int, str]], center: int, total_lines: int) -> str:
    """Format numbered lines, right-aligning numbers and marking the center.

    Args:
        lines: Numbered lines from extract_lines_around()
        center: Line to prefix with ``>``
        total_lines: Total line count (sets the number column width)

    Returns:
        Formatted block, or ``"No content"`` for an empty window
    """
    if not lines:
        return "No content"

    width = len(str(total_lines))
    output = []
    for num, line in lines:
        marker = ">" if num == center else " "
        output.append(f"{marker}{num:>{width}}: {line}")

    return "\n".join(output)
