"""Deterministic sample boards.

No randomness: the same call always produces the same board.
"""

from dragboard.model.board import Board, Column, Item, build_board

NAMES = [
    "Alexander", "Aliza", "Alvin", "Angie", "Arjun", "Blair", "Claudia", "Colin",
    "Ed", "Effie", "Eliot", "Fabian", "Gael", "Gerard", "Hasan", "Helena", "Ivan",
    "Katina", "Lara", "Leo", "Lydia", "Maribel", "Milo", "Myra", "Narul", "Norah",
    "Oliver", "Rahul", "Renato", "Steve", "Tanya", "Tori", "Vania",
]  # fmt: skip

ROLES = [
    "Engineer",
    "Senior Engineer",
    "Principal Engineer",
    "Engineering Manager",
    "Designer",
    "Senior Designer",
    "Lead Designer",
    "Design Manager",
    "Content Designer",
    "Product Manager",
    "Program Manager",
]


def person_at(position: int) -> Item:
    """The sample person for a position; names and roles cycle."""
    return Item(
        item_id=f"id:{position}",
        title=NAMES[position % len(NAMES)],
        meta={"role": ROLES[position % len(ROLES)]},
    )


def people(amount: int, start: int = 1) -> tuple[Item, ...]:
    return tuple(person_at(position) for position in range(start, start + amount))


def sample_board(column_count: int = 3, items_per_column: int = 10) -> Board:
    """Columns "column-0".. each holding items_per_column people."""
    columns = [
        Column(
            column_id=f"column-{i}",
            title=f"Column {i}",
            items=people(items_per_column, start=1 + i * items_per_column),
        )
        for i in range(column_count)
    ]
    return build_board(columns)


def basic_board() -> Board:
    """Three ten-person columns named after products."""
    names = [("confluence", "Confluence"), ("jira", "Jira"), ("trello", "Trello")]
    return build_board(
        Column(column_id=column_id, title=title, items=people(10, start=1 + i * 10))
        for i, (column_id, title) in enumerate(names)
    )
