"""Tests for depth, width, level slicing and structural comparison."""

import pytest

from dazzleforest import (
    InvalidArgumentError,
    clone,
    compare,
    get_depth,
    get_width,
    level_slice,
    make_node,
)
from dazzleforest.testing import chain_forest, filesystem_forest, menu_forest


class TestDepthAndWidth:

    def test_single_child(self):
        forest = [make_node("a", [make_node("b")])]
        assert get_depth(forest) == 1
        assert get_width(forest) == 1

    def test_menu_forest(self):
        forest = menu_forest()
        assert get_depth(forest) == 2
        assert get_width(forest) == 3

    def test_widest_level_below_roots(self):
        forest = filesystem_forest()
        assert get_width(forest) == 3

    def test_childless_and_empty(self):
        assert get_depth([make_node("a"), make_node("b")]) == 0
        assert get_width([make_node("a"), make_node("b")]) == 2
        assert get_depth([]) == 0
        assert get_width([]) == 0

    def test_chain(self):
        forest = chain_forest(6)
        assert get_depth(forest) == 5
        assert get_width(forest) == 1

    def test_empty_sub_list_counts_as_childless(self):
        assert get_depth([{"name": "a", "sub": []}]) == 0

    def test_requires_forest(self):
        with pytest.raises(InvalidArgumentError):
            get_depth({"name": "a"})
        with pytest.raises(InvalidArgumentError):
            get_width(None)


class TestLevelSlice:

    def test_slice_with_end(self):
        forest = menu_forest()
        result = level_slice(forest, 1, 2)

        assert [n["name"] for n in result] == ["pob", "rob2", "cheese pizza"]
        assert result[0]["sub"][0]["name"] == "go"
        assert result[0]["sub"][0]["sub"] is None

    def test_cutoff_severs_children(self):
        forest = menu_forest()
        result = level_slice(forest, 1, 1)

        assert [n["name"] for n in result] == ["pob", "rob2", "cheese pizza"]
        assert all(n["sub"] is None for n in result)

    def test_input_is_not_modified(self):
        forest = menu_forest()
        before = clone(forest)

        level_slice(forest, 0, 0)

        assert forest == before

    def test_result_is_independent(self):
        forest = menu_forest()
        result = level_slice(forest, 1)
        result[0]["name"] = "changed"
        assert forest[1]["sub"][0]["name"] == "pob"

    def test_default_end_keeps_everything(self):
        forest = menu_forest()
        assert level_slice(forest, 0) == forest

    def test_start_below_deepest_level(self):
        assert level_slice(menu_forest(), 5) == []

    @pytest.mark.parametrize("start", [-1, "1", None, True])
    def test_invalid_start(self, start):
        with pytest.raises(InvalidArgumentError):
            level_slice(menu_forest(), start)

    def test_invalid_end(self):
        with pytest.raises(InvalidArgumentError):
            level_slice(menu_forest(), 0, "2")
        with pytest.raises(InvalidArgumentError):
            level_slice(menu_forest(), 2, 1)

    def test_fractional_levels_rejected(self):
        with pytest.raises(InvalidArgumentError, match="start must be a non-negative integer"):
            level_slice(menu_forest(), 0.5)
        with pytest.raises(InvalidArgumentError, match="end must be an integer"):
            level_slice(menu_forest(), 0, 1.5)


class TestCompare:

    def test_equal_shapes(self):
        forest = menu_forest()
        assert compare(forest, clone(forest))

    def test_extra_fields_ignored(self):
        assert compare([make_node("a", id=1)], [make_node("a", id=2)])

    def test_different_names(self):
        assert not compare([make_node("a")], [make_node("b")])

    def test_different_lengths(self):
        assert not compare([make_node("a")], [make_node("a"), make_node("b")])

    def test_difference_in_later_sibling_subtree(self):
        left = [make_node("a", [make_node("x")]), make_node("b", [make_node("y")])]
        right = [make_node("a", [make_node("x")]), make_node("b", [make_node("z")])]
        assert not compare(left, right)

    def test_children_versus_none(self):
        assert not compare([make_node("a")], [make_node("a", [make_node("b")])])

    def test_requires_forests(self):
        with pytest.raises(InvalidArgumentError):
            compare([], "x")
