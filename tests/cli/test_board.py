"""Tests for 'dragboard show' and 'dragboard sample'."""

import json
from argparse import Namespace

import pytest
import yaml

from dragboard.cli.board import board_sample, board_show


def test_show(board_file, capsys):
    args = Namespace(board=str(board_file), json=False)
    assert board_show(args) == 0

    out = capsys.readouterr().out
    assert "Todo (3)" in out
    assert "Doing (2)" in out
    assert "p5" in out


def test_show_json(board_file, capsys):
    args = Namespace(board=str(board_file), json=True)
    assert board_show(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert [col["id"] for col in data["columns"]] == ["A", "B"]
    assert data["columns"][1]["items"] == [{"id": "p4"}, {"id": "p5"}]


def test_show_missing_file(tmp_path, capsys):
    args = Namespace(board=str(tmp_path / "missing.yaml"), json=False)
    with pytest.raises(SystemExit) as exc:
        board_show(args)
    assert exc.value.code == 1
    assert "error:" in capsys.readouterr().err


def test_show_bad_board_json_error(tmp_path, capsys):
    path = tmp_path / "board.yaml"
    path.write_text("columns: [{id: a, items: [x]}, {id: b, items: [x]}]\n")
    args = Namespace(board=str(path), json=True)
    with pytest.raises(SystemExit):
        board_show(args)
    assert "x" in json.loads(capsys.readouterr().err)["error"]


def test_sample_default(capsys):
    args = Namespace(columns=None, items=None, json=False)
    assert board_sample(args) == 0

    data = yaml.safe_load(capsys.readouterr().out)
    assert [col["id"] for col in data["columns"]] == ["confluence", "jira", "trello"]
    assert data["columns"][0]["items"][0] == {"id": "id:1", "title": "Aliza", "meta": {"role": "Senior Engineer"}}


def test_sample_sized_json(capsys):
    args = Namespace(columns=2, items=None, json=True)
    assert board_sample(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert [col["id"] for col in data["columns"]] == ["column-0", "column-1"]
    assert len(data["columns"][1]["items"]) == 10
