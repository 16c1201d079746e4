"""
Data models for the read command.

Defines the outline item model shared by the outline, interface and
signature views, plus the result models returned by the read service.
All models are plain pydantic models so the CLI can render them either
as text or as JSON.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(str, Enum):
    """Kind of declaration found in a source or markdown file."""

    FUNCTION = "function"
    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    IMPL = "impl"
    CLASS = "class"
    MODULE = "module"
    CONST = "const"
    TYPE = "type"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    OTHER = "other"

    @classmethod
    def heading(cls, level: int) -> "ItemKind":
        """Get the heading kind for a markdown heading level (1-6).

        Args:
            level: Number of leading ``#`` characters

        Returns:
            The matching ``H1``..``H6`` member

        Raises:
            ValueError: If level is outside 1-6
        """
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {level}")
        return cls(f"h{level}")

    @property
    def is_heading(self) -> bool:
        return self.value.startswith("h") and self.value[1:].isdigit()

    @property
    def heading_level(self) -> int | None:
        """Heading level for heading kinds, None otherwise."""
        if not self.is_heading:
            return None
        return int(self.value[1:])

    @property
    def icon(self) -> str:
        """Short marker printed before an item in outline views."""
        level = self.heading_level
        if level is not None:
            return "#" * min(level, 4)
        return _ICONS[self]


_ICONS: dict[ItemKind, str] = {
    ItemKind.FUNCTION: "fn",
    ItemKind.STRUCT: "struct",
    ItemKind.ENUM: "enum",
    ItemKind.TRAIT: "trait",
    ItemKind.IMPL: "impl",
    ItemKind.CLASS: "class",
    ItemKind.MODULE: "mod",
    ItemKind.CONST: "const",
    ItemKind.TYPE: "type",
    ItemKind.OTHER: "",
}


class OutlineItem(BaseModel):
    """An item in a file outline (function, struct, class, heading, etc.)."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="Line number where the item starts (1-indexed)")
    text: str = Field(..., description="Cleaned signature or heading text")
    level: int = Field(default=0, ge=0, description="Nesting depth (0 = top level)")
    kind: ItemKind = Field(..., description="Kind of declaration")


class FileOutline(BaseModel):
    """Ordered collection of outline items for one file.

    Items are appended in source-line order by the extractors.
    """

    items: list[OutlineItem] = Field(default_factory=list)

    def push(self, item: OutlineItem) -> None:
        self.items.append(item)

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)


class DiffHunk(BaseModel):
    """A changed section parsed from a unified diff hunk header."""

    model_config = ConfigDict(frozen=True)

    old_start: int
    old_count: int = 1
    new_start: int
    new_count: int = 1


# ---------------------------------------------------------------------------
# Read results
# ---------------------------------------------------------------------------


class FullOutput(BaseModel):
    """Whole file content."""

    mode: Literal["full"] = "full"
    content: str


class OutlineOutput(BaseModel):
    """Nested outline of every declaration in the file."""

    mode: Literal["outline"] = "outline"
    outline: FileOutline


class InterfaceOutput(BaseModel):
    """Externally visible declarations only."""

    mode: Literal["interface"] = "interface"
    items: list[OutlineItem] = Field(default_factory=list)


class AroundOutput(BaseModel):
    """A window of numbered lines around a center line."""

    mode: Literal["around"] = "around"
    lines: list[tuple[int, str]] = Field(default_factory=list)
    center: int
    total_lines: int = Field(..., ge=0)


class DiffOutput(BaseModel):
    """Raw ``git diff`` output for the file."""

    mode: Literal["diff"] = "diff"
    diff: str


ReadOutput = FullOutput | OutlineOutput | InterfaceOutput | AroundOutput | DiffOutput
