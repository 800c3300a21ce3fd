"""Tests for the deterministic sample boards."""

from dragboard.model.board import all_item_ids
from dragboard.sample import NAMES, ROLES, basic_board, people, person_at, sample_board


def test_person_at_is_stable():
    person = person_at(1)
    assert person.item_id == "id:1"
    assert person.title == "Aliza"
    assert person.meta == {"role": "Senior Engineer"}
    assert person_at(1) == person


def test_names_and_roles_cycle():
    assert person_at(len(NAMES)).title == NAMES[0]
    assert person_at(len(ROLES)).meta["role"] == ROLES[0]


def test_people():
    assert [p.item_id for p in people(3, start=5)] == ["id:5", "id:6", "id:7"]


def test_basic_board():
    board = basic_board()
    assert board.ordered_column_ids == ("confluence", "jira", "trello")
    assert board.columns["jira"].title == "Jira"
    assert board.columns["confluence"].items[0].item_id == "id:1"
    assert board.columns["jira"].items[0].item_id == "id:11"
    assert len(all_item_ids(board)) == 30


def test_sample_board_shape():
    board = sample_board(column_count=4, items_per_column=2)
    assert board.ordered_column_ids == ("column-0", "column-1", "column-2", "column-3")
    assert board.columns["column-2"].title == "Column 2"
    assert len(set(all_item_ids(board))) == 8


def test_sample_board_empty_columns():
    board = sample_board(column_count=2, items_per_column=0)
    assert all_item_ids(board) == []
