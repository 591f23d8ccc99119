#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_utils.py
"""Tests for heading rank and element test helpers."""

import pytest

from autolink_headings.ast import Comment, Root, Text, convert_element, h, heading_rank, is_element
from autolink_headings.exceptions import ValidationError


@pytest.mark.unit
class TestHeadingRank:
    """Test heading_rank."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, level):
        assert heading_rank(h(f"h{level}")) == level

    @pytest.mark.parametrize("tag_name", ["h0", "h7", "header", "hr", "p", "H2"])
    def test_non_headings(self, tag_name):
        assert heading_rank(h(tag_name)) is None

    def test_non_element_nodes(self):
        assert heading_rank(Text(value="h1")) is None
        assert heading_rank(Root()) is None


@pytest.mark.unit
class TestConvertElement:
    """Test convert_element."""

    def test_none_matches_any_element(self):
        check = convert_element(None)
        assert check(h("p"), 0, None)
        assert not check(Text(value="x"), 0, None)

    def test_tag_name(self):
        check = convert_element("h2")
        assert check(h("h2"), 0, None)
        assert not check(h("h3"), 0, None)

    def test_sequence_matches_any(self):
        check = convert_element(["h2", {"id": "x"}])
        assert check(h("h2"), 0, None)
        assert check(h("h5", {"id": "x"}), 0, None)
        assert not check(h("h5", {"id": "y"}), 0, None)

    def test_empty_sequence_matches_nothing(self):
        assert not convert_element([])(h("h2"), 0, None)

    def test_property_mapping(self):
        check = convert_element({"className": ["anchor"], "id": "a"})
        assert check(h("h2", {"id": "a", "className": ["anchor"], "title": "t"}), 0, None)
        assert not check(h("h2", {"id": "a"}), 0, None)
        assert not check(Comment(value="x"), 0, None)

    def test_callable_receives_position(self):
        calls = []
        parent = Root()

        def record(node, index, parent):
            calls.append((index, parent))
            return True

        assert convert_element(record)(h("h2"), 4, parent)
        assert calls == [(4, parent)]

    def test_callable_never_sees_non_elements(self):
        calls = []
        check = convert_element(lambda node, index, parent: calls.append(node) or True)
        assert not check(Text(value="x"), 0, None)
        assert calls == []

    def test_callable_result_coerced(self):
        assert convert_element(lambda node, index, parent: "yes")(h("h1"), 0, None) is True

    def test_position_optional(self):
        assert convert_element("p")(h("p"))

    @pytest.mark.parametrize("test", [3, 2.5, object()])
    def test_invalid(self, test):
        with pytest.raises(ValidationError):
            convert_element(test)

    def test_invalid_inside_sequence(self):
        with pytest.raises(ValidationError):
            convert_element(["h2", 7])


@pytest.mark.unit
def test_is_element():
    assert is_element(h("p"))
    assert not is_element(Text())
    assert not is_element({"type": "element"})
