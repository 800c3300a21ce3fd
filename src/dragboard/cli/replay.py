"""Handler for 'dragboard replay': apply a scripted series of gestures."""

import logging

from dragboard.cli._common import (
    describe_outcome,
    error,
    load_board_or_die,
    output_json,
    print_board,
)
from dragboard.engine import BoardEngine
from dragboard.errors import InvariantError
from dragboard.gesture import CardSource, CardTarget, ColumnSource, ColumnTarget, DropEvent, Session
from dragboard.loader import BoardFileError, board_to_dict, load_script
from dragboard.model.outcome import highlight_targets, outcome_to_dict
from dragboard.model.reorder import edge_from_hitbox

logger = logging.getLogger(__name__)


def _source(data: dict, session: Session):
    if "card" in data:
        return CardSource(str(data["card"]), session)
    if "column" in data:
        return ColumnSource(str(data["column"]), session)
    raise BoardFileError(f"Drag source needs 'card' or 'column', got {data!r}")


def _target(data: dict, session: Session):
    edge = edge_from_hitbox(data.get("edge"))
    if "card" in data:
        return CardTarget(str(data["card"]), session, edge)
    if "column" in data:
        return ColumnTarget(str(data["column"]), session, edge)
    raise BoardFileError(f"Drop target needs 'card' or 'column', got {data!r}")


def run_step(engine: BoardEngine, step: dict) -> None:
    """Apply one script step to engine."""
    ((name, value),) = step.items()
    session = engine.session
    try:
        match name:
            case "select":
                if isinstance(value, dict):
                    engine.select(str(value["id"]), value.get("mode", "single"))
                else:
                    engine.select(str(value))
            case "drop":
                source = _source(value["source"], session)
                targets = tuple(_target(t, session) for t in value.get("targets") or [])
                engine.drag_start(source)
                engine.drop(DropEvent(source, targets))
            case "reorder-column":
                engine.reorder_column(value["start"], value["finish"], edge_from_hitbox(value.get("edge")))
            case "reorder-card":
                engine.reorder_card(
                    str(value["column"]),
                    value["start"],
                    value["finish"],
                    edge_from_hitbox(value.get("edge")),
                )
            case "move-card":
                engine.move_card(str(value["from"]), str(value["to"]), value["index"], value.get("to_index"))
            case "multi-drag":
                engine.multi_drag_reorder(
                    [str(i) for i in value["ids"]],
                    str(value["dragged"]),
                    str(value["column"]),
                    value["index"],
                )
            case "card-action":
                engine.apply_card_action(str(value["card"]), value["action"])
            case "column-action":
                engine.apply_column_action(str(value["column"]), value["action"])
            case _:
                raise BoardFileError(f"Unknown step {name!r}")
    except (KeyError, TypeError) as e:
        raise BoardFileError(f"Malformed {name!r} step {value!r}") from e
    logger.info("%s: %s", name, describe_outcome(engine.board))


def replay(args) -> int:
    """Load a board, apply every step of a script, then show the result."""
    board = load_board_or_die(args.board, args.json)
    engine = BoardEngine(board)

    try:
        steps = load_script(args.script)
        for number, step in enumerate(steps, start=1):
            try:
                run_step(engine, step)
            except (BoardFileError, InvariantError) as e:
                raise type(e)(f"step {number}: {e}") from e
    except (BoardFileError, InvariantError) as e:
        error(str(e), args.json)

    if args.json:
        output_json(
            {
                "board": board_to_dict(engine.board),
                "lastOperation": outcome_to_dict(engine.last_operation),
                "selection": list(engine.selection),
                "highlights": [
                    {"kind": h.kind, "id": h.target_id, "restoreFocus": h.restore_focus}
                    for h in highlight_targets(engine.board)
                ],
            }
        )
    else:
        print_board(engine.board, engine.selection)
        print(f"last: {describe_outcome(engine.board)}")
        if engine.selection:
            print(f"selected: {', '.join(engine.selection)}")

    return 0
