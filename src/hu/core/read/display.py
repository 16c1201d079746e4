"""
Plain-text rendering of read results.

The CLI prints these strings; diff colouring is applied there with rich.
"""

from hu.core.read.around import format_lines_around
from hu.core.read.models import (
    AroundOutput,
    DiffOutput,
    FileOutline,
    FullOutput,
    InterfaceOutput,
    OutlineItem,
    OutlineOutput,
    ReadOutput,
)


def format_output(output: ReadOutput) -> str:
    """Format any read result for display."""
    if isinstance(output, FullOutput):
        return output.content
    if isinstance(output, OutlineOutput):
        return format_outline(output.outline)
    if isinstance(output, InterfaceOutput):
        return format_interface(output.items)
    if isinstance(output, AroundOutput):
        return format_lines_around(output.lines, output.center, output.total_lines)
    if isinstance(output, DiffOutput):
        return output.diff
    raise TypeError(f"Unsupported read output: {type(output).__name__}")


def format_outline(outline: FileOutline) -> str:
    if outline.is_empty():
        return "No outline items found"

    return "\n".join(
        f"{'  ' * item.level}{item.kind.icon} {item.text}:{item.line}" for item in outline.items
    )


def format_interface(items: list[OutlineItem]) -> str:
    if not items:
        return "No public interface items found"

    return "\n".join(
        f"{'  ' * item.level}{item.kind.icon} {item.text} :L{item.line}" for item in items
    )
