"""Shared helpers for CLI command handlers."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from dragboard.loader import BoardFileError, load_board_file
from dragboard.model.board import Board, get_columns
from dragboard.model.outcome import highlight_targets, outcome_to_dict


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def load_board_or_die(path: str, json_mode: bool) -> Board:
    """Load board from a file. Exit 1 with message if it cannot be read."""
    try:
        return load_board_file(Path(path))
    except BoardFileError as e:
        error(str(e), json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def describe_outcome(board: Board) -> str:
    """One line summary of board.last_operation."""
    data = outcome_to_dict(board.last_operation)
    if data is None:
        return "no changes"
    kind = data.pop("type")
    return kind + " " + " ".join(f"{k}={v}" for k, v in data.items())


def print_board(board: Board, selection: tuple[str, ...] = ()) -> None:
    """Render columns side by side; selected cards reversed, moved cards bold."""
    moved = {h.target_id for h in highlight_targets(board)}
    table = Table(show_lines=False)
    columns = get_columns(board)
    for column in columns:
        title = column.title or column.column_id
        style = "bold" if column.column_id in moved else ""
        table.add_column(Text(f"{title} ({len(column.items)})", style=style))

    depth = max((len(column.items) for column in columns), default=0)
    for row in range(depth):
        cells = []
        for column in columns:
            if row >= len(column.items):
                cells.append(Text(""))
                continue
            item = column.items[row]
            label = f"{item.item_id} {item.title}".strip()
            styles = []
            if item.item_id in selection:
                styles.append("reverse")
            if item.item_id in moved:
                styles.append("bold")
            cells.append(Text(label, style=" ".join(styles)))
        table.add_row(*cells)

    Console(highlight=False).print(table)
