"""
Tests for read data models.

Covers ItemKind heading helpers and icons, OutlineItem validation,
FileOutline accumulation and JSON serialisation of read results.
"""

import pytest
from pydantic import ValidationError

from hu.core.read.models import (
    AroundOutput,
    FileOutline,
    FullOutput,
    ItemKind,
    OutlineItem,
)


class TestItemKind:
    """Test ItemKind helpers."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_round_trips_level(self, level: int) -> None:
        kind = ItemKind.heading(level)
        assert kind.is_heading
        assert kind.heading_level == level

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_rejects_out_of_range(self, level: int) -> None:
        with pytest.raises(ValueError):
            ItemKind.heading(level)

    def test_non_heading_has_no_level(self) -> None:
        assert not ItemKind.FUNCTION.is_heading
        assert ItemKind.FUNCTION.heading_level is None

    def test_declaration_icons(self) -> None:
        assert ItemKind.FUNCTION.icon == "fn"
        assert ItemKind.MODULE.icon == "mod"
        assert ItemKind.OTHER.icon == ""

    def test_heading_icons_cap_at_four_hashes(self) -> None:
        """h4, h5 and h6 share the same marker."""
        assert ItemKind.H1.icon == "#"
        assert ItemKind.H3.icon == "###"
        assert ItemKind.H4.icon == "####"
        assert ItemKind.H6.icon == "####"


class TestOutlineItem:
    """Test OutlineItem validation."""

    def test_level_defaults_to_zero(self) -> None:
        item = OutlineItem(line=1, text="fn main()", kind=ItemKind.FUNCTION)
        assert item.level == 0

    def test_line_is_one_indexed(self) -> None:
        with pytest.raises(ValidationError):
            OutlineItem(line=0, text="fn main()", kind=ItemKind.FUNCTION)

    def test_items_are_immutable(self) -> None:
        item = OutlineItem(line=1, text="fn main()", kind=ItemKind.FUNCTION)
        with pytest.raises(ValidationError):
            item.line = 2  # type: ignore[misc]


class TestFileOutline:
    """Test FileOutline accumulation."""

    def test_new_outline_is_empty(self) -> None:
        outline = FileOutline()
        assert outline.is_empty()
        assert len(outline) == 0

    def test_push_keeps_order(self) -> None:
        outline = FileOutline()
        outline.push(OutlineItem(line=1, text="a", kind=ItemKind.FUNCTION))
        outline.push(OutlineItem(line=5, text="b", kind=ItemKind.STRUCT))

        assert not outline.is_empty()
        assert len(outline) == 2
        assert [item.text for item in outline.items] == ["a", "b"]


class TestReadOutputs:
    """Test JSON shape of read results."""

    def test_full_output_mode_tag(self) -> None:
        data = FullOutput(content="hello").model_dump(mode="json")
        assert data == {"mode": "full", "content": "hello"}

    def test_around_output_serialises_lines_as_pairs(self) -> None:
        output = AroundOutput(lines=[(2, "b"), (3, "c")], center=3, total_lines=4)
        data = output.model_dump(mode="json")
        assert data["lines"] == [[2, "b"], [3, "c"]]
        assert data["mode"] == "around"
