"""
Hu - developer workflow CLI

Language-aware file outlines, multi-file grep and markdown docs search.
"""

__version__ = "0.4.0"

# Re-export core models for convenience
from hu.core.config.models import HuConfig
from hu.core.read.models import FileOutline, ItemKind, OutlineItem

__all__ = ["FileOutline", "HuConfig", "ItemKind", "OutlineItem", "__version__"]
