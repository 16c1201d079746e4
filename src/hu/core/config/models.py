"""
Configuration data models for hu.

These models define the structure of .hu.json and ~/.config/hu/config.json
files, with validation and type safety via Pydantic.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReadConfig(BaseModel):
    """Defaults for ``hu read``."""
    context: int = Field(
        default=10,
        ge=0,
        description="Lines of context shown on each side with --around"
    )


class GrepConfig(BaseModel):
    """
    Defaults for ``hu utils grep``.

    Command-line flags always win over these values.
    """
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of matches to print (None = unlimited)"
    )
    hidden: bool = Field(
        default=False,
        description="Search dotfiles and dot-directories by default"
    )


class DocsConfig(BaseModel):
    """Defaults for ``hu utils docs-search``."""
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum number of sections to print (None = unlimited)"
    )


class HuConfig(BaseModel):
    """
    Top-level hu configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = HuConfig(grep=GrepConfig(limit=20))
        >>> config.grep.limit
        20
        >>> config.read.context
        10
    """
    read: ReadConfig = Field(
        default_factory=ReadConfig,
        description="Read command defaults"
    )
    grep: GrepConfig = Field(
        default_factory=GrepConfig,
        description="Grep defaults"
    )
    docs: DocsConfig = Field(
        default_factory=DocsConfig,
        description="Docs search defaults"
    )

    model_config = ConfigDict(
        extra="allow",  # Unknown sections are kept for forward compatibility
    )
