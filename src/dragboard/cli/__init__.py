"""CLI argument parser for dragboard."""

import argparse

from dragboard.cli.board import board_sample, board_show
from dragboard.cli.replay import replay


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log each step to stderr")

    parser = argparse.ArgumentParser(
        prog="dragboard",
        description="Multi-select drag-and-drop board engine",
        parents=[common],
    )

    commands = parser.add_subparsers(dest="command")

    # --- show ---
    show_p = commands.add_parser("show", help="Show a board file", parents=[common])
    show_p.add_argument("board", help="Board YAML or JSON file")
    show_p.set_defaults(func=board_show)

    # --- sample ---
    sample_p = commands.add_parser("sample", help="Print a sample board", parents=[common])
    sample_p.add_argument("--columns", type=int, help="Number of columns (default: 3)")
    sample_p.add_argument("--items", type=int, help="Items per column (default: 10)")
    sample_p.set_defaults(func=board_sample)

    # --- replay ---
    replay_p = commands.add_parser("replay", help="Apply a script of gestures to a board", parents=[common])
    replay_p.add_argument("board", help="Board YAML or JSON file")
    replay_p.add_argument("script", help="Script YAML file: a list of steps")
    replay_p.set_defaults(func=replay)

    return parser
