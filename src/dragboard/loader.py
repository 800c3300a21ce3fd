"""Read boards and replay scripts from YAML (or JSON) files."""

from pathlib import Path
from typing import Any

import yaml

from dragboard.errors import InvariantError
from dragboard.model.board import Board, Column, Item, build_board, get_columns


class BoardFileError(ValueError):
    """A board or script file could not be read or has the wrong shape."""


def _item_from_data(data: Any) -> Item:
    if isinstance(data, (str, int)):
        return Item(item_id=str(data))
    if not isinstance(data, dict) or "id" not in data:
        raise BoardFileError(f"Item must be an id or a mapping with 'id', got {data!r}")
    return Item(
        item_id=str(data["id"]),
        title=str(data.get("title", "")),
        meta=dict(data.get("meta") or {}),
    )


def _column_from_data(data: Any) -> Column:
    if not isinstance(data, dict) or "id" not in data:
        raise BoardFileError(f"Column must be a mapping with 'id', got {data!r}")
    items = data.get("items") or []
    if not isinstance(items, list):
        raise BoardFileError(f"Items of column {data['id']!r} must be a list")
    return Column(
        column_id=str(data["id"]),
        title=str(data.get("title", "")),
        items=tuple(_item_from_data(item) for item in items),
    )


def board_from_dict(data: Any) -> Board:
    """Build a Board from {"columns": [{"id", "title", "items"}, ...]}."""
    if not isinstance(data, dict) or not isinstance(data.get("columns"), list):
        raise BoardFileError("Board must be a mapping with a 'columns' list")
    columns = [_column_from_data(col) for col in data["columns"]]
    try:
        return build_board(columns)
    except InvariantError as e:
        raise BoardFileError(str(e)) from e


def board_to_dict(board: Board) -> dict:
    """Inverse of board_from_dict. Empty titles and meta are left out."""
    columns = []
    for column in get_columns(board):
        items = []
        for item in column.items:
            entry: dict[str, Any] = {"id": item.item_id}
            if item.title:
                entry["title"] = item.title
            if item.meta:
                entry["meta"] = dict(item.meta)
            items.append(entry)
        columns.append({"id": column.column_id, "title": column.title, "items": items})
    return {"columns": columns}


def dump_board(board: Board) -> str:
    """Serialize a board as YAML."""
    return yaml.dump(board_to_dict(board), default_flow_style=False, sort_keys=False)


def _read_yaml(path: str | Path) -> Any:
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise BoardFileError(f"Cannot read {path}: {e.strerror or e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise BoardFileError(f"Invalid YAML in {path}: {e}") from e


def load_board_file(path: str | Path) -> Board:
    """Load a board from a YAML or JSON file."""
    return board_from_dict(_read_yaml(path))


def load_script(path: str | Path) -> list[dict]:
    """Load a replay script: a list of single-key step mappings."""
    steps = _read_yaml(path) or []
    if not isinstance(steps, list):
        raise BoardFileError(f"Script {path} must be a list of steps")
    for step in steps:
        if not isinstance(step, dict) or len(step) != 1:
            raise BoardFileError(f"Each step must be a single-key mapping, got {step!r}")
    return steps
