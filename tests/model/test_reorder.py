"""Tests for the reorder primitive."""

import pytest

from dragboard.errors import InvariantError
from dragboard.model.reorder import (
    AFTER,
    BEFORE,
    HORIZONTAL,
    edge_from_hitbox,
    reorder,
    reorder_destination_index,
    reorder_with_edge,
)

LETTERS = ["a", "b", "c", "d"]


def test_reorder_moves_one_element():
    assert reorder(["a", "b", "c"], 0, 2) == ["b", "c", "a"]
    assert reorder(["a", "b", "c"], 2, 0) == ["c", "a", "b"]


def test_reorder_does_not_mutate_input():
    items = ["a", "b", "c"]
    reorder(items, 0, 2)
    assert items == ["a", "b", "c"]


def test_forward_before_lands_in_front_of_target():
    assert reorder_with_edge(LETTERS, 0, 2, BEFORE) == ["b", "a", "c", "d"]


def test_forward_after_lands_behind_target():
    assert reorder_with_edge(LETTERS, 0, 2, AFTER) == ["b", "c", "a", "d"]


def test_backward_before_lands_in_front_of_target():
    assert reorder_with_edge(LETTERS, 3, 1, BEFORE) == ["a", "d", "b", "c"]


def test_backward_after_lands_behind_target():
    assert reorder_with_edge(LETTERS, 3, 1, AFTER) == ["a", "b", "d", "c"]


def test_no_edge_moves_exactly_to_target_index():
    assert reorder_with_edge(LETTERS, 0, 2) == ["b", "c", "a", "d"]
    assert reorder_with_edge(LETTERS, 3, 0) == ["d", "a", "b", "c"]


def test_append_with_target_past_the_end():
    assert reorder_with_edge(LETTERS, 0, 4) == ["b", "c", "d", "a"]


@pytest.mark.parametrize("edge", [None, BEFORE, AFTER])
def test_same_index_is_identity(edge):
    for i in range(len(LETTERS)):
        assert reorder_with_edge(LETTERS, i, i, edge) == LETTERS


def test_result_is_always_a_permutation():
    for start in range(len(LETTERS)):
        for target in range(len(LETTERS)):
            for edge in (None, BEFORE, AFTER):
                result = reorder_with_edge(LETTERS, start, target, edge)
                assert sorted(result) == LETTERS
                assert len(result) == len(LETTERS)


def test_axis_does_not_change_result():
    assert reorder_with_edge(LETTERS, 0, 2, AFTER, HORIZONTAL) == reorder_with_edge(LETTERS, 0, 2, AFTER)


def test_start_out_of_range_raises():
    with pytest.raises(InvariantError):
        reorder_with_edge(LETTERS, 4, 0)
    with pytest.raises(InvariantError):
        reorder_with_edge(LETTERS, -1, 0)


def test_target_out_of_range_raises():
    with pytest.raises(InvariantError):
        reorder_with_edge(LETTERS, 0, 5)


def test_destination_index():
    assert reorder_destination_index(0, 2, BEFORE) == 1
    assert reorder_destination_index(0, 2, AFTER) == 2
    assert reorder_destination_index(3, 1, BEFORE) == 1
    assert reorder_destination_index(3, 1, AFTER) == 2
    assert reorder_destination_index(2, 2, AFTER) == 2
    assert reorder_destination_index(1, 3) == 3


def test_edge_from_hitbox():
    assert edge_from_hitbox("top") == BEFORE
    assert edge_from_hitbox("left") == BEFORE
    assert edge_from_hitbox("bottom") == AFTER
    assert edge_from_hitbox("right") == AFTER
    assert edge_from_hitbox("before") == BEFORE
    assert edge_from_hitbox(None) is None


def test_edge_from_hitbox_unknown():
    with pytest.raises(InvariantError):
        edge_from_hitbox("diagonal")
