"""Handlers for 'dragboard show' and 'dragboard sample'."""

import sys

from dragboard.cli._common import load_board_or_die, output_json, print_board
from dragboard.loader import board_to_dict, dump_board
from dragboard.sample import basic_board, sample_board


def board_show(args) -> int:
    """Show a board file as columns."""
    board = load_board_or_die(args.board, args.json)

    if args.json:
        output_json(board_to_dict(board))
    else:
        print_board(board)

    return 0


def board_sample(args) -> int:
    """Print a deterministic sample board as YAML (or JSON)."""
    if args.columns is None and args.items is None:
        board = basic_board()
    else:
        board = sample_board(
            column_count=args.columns if args.columns is not None else 3,
            items_per_column=args.items if args.items is not None else 10,
        )

    if args.json:
        output_json(board_to_dict(board))
    else:
        sys.stdout.write(dump_board(board))

    return 0
