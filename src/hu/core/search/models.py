"""
Data models for grep and docs search.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GrepFormat(str, Enum):
    """How grep matches are printed."""

    DEFAULT = "default"
    REFS = "refs"
    SIGNATURE = "signature"


class GrepOptions(BaseModel):
    """Options for a multi-file grep."""

    model_config = ConfigDict(frozen=True)

    ignore_case: bool = Field(default=False, description="Case-insensitive matching")
    glob: str | None = Field(default=None, description="Only search file names matching this glob")
    hidden: bool = Field(default=False, description="Descend into dotfiles and dot-directories")
    unique: bool = Field(default=False, description="Collapse matches with the same content")
    ranked: bool = Field(default=False, description="Sort by match count, then line length")
    limit: int | None = Field(default=None, ge=0, description="Maximum number of matches")


class GrepMatch(BaseModel):
    """A line that matched the pattern at least once."""

    model_config = ConfigDict(frozen=True)

    file: str = Field(..., description="Path of the file, joined onto the search root")
    line_num: int = Field(..., ge=1, description="1-indexed line number")
    content: str = Field(..., description="The raw line")
    match_count: int = Field(..., ge=1, description="Non-overlapping matches on the line")


class SearchResult(BaseModel):
    """A docs section heading that matched a query."""

    model_config = ConfigDict(frozen=True)

    file: str
    heading: str
    level: int = Field(..., ge=1, le=6)
    start_line: int
    end_line: int
    score: int = Field(..., ge=0)
