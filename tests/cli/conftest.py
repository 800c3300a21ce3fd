"""Shared fixtures for CLI tests."""

import pytest

BOARD_YAML = """\
columns:
  - id: A
    title: Todo
    items: [p1, p2, p3]
  - id: B
    title: Doing
    items: [p4, p5]
"""


@pytest.fixture
def board_file(tmp_path):
    """A two-column board: Todo [p1, p2, p3] and Doing [p4, p5]."""
    path = tmp_path / "board.yaml"
    path.write_text(BOARD_YAML)
    return path


@pytest.fixture
def write_script(tmp_path):
    """Write a replay script and return its path."""

    def write(text):
        path = tmp_path / "script.yaml"
        path.write_text(text)
        return path

    return write
