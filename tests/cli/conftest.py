"""Shared fixtures for CLI tests."""

from argparse import Namespace

import pytest

from pastelboard.model.board import Board, Card, Column
from pastelboard.model.writer import save_board
from pastelboard.storage import FileStorage


@pytest.fixture
def store(tmp_path):
    """A store directory holding a board with three cards."""
    board = Board(
        {
            Column.TODO: [
                Card("aaaa1111-0000", "banana", "hsl(10deg 75% 80%)"),
                Card("aaaa2222-0000", "Apple", "hsl(20deg 75% 80%)"),
            ],
            Column.DOING: [Card("bbbb1111-0000", "Write docs", "hsl(30deg 75% 80%)")],
        }
    )
    path = tmp_path / "store"
    save_board(board, FileStorage(path))
    return path


@pytest.fixture
def make_args(store, tmp_path):
    """Build a Namespace like the parser would, pointed at the test store."""

    def _make(**kwargs):
        defaults = {"store": str(store), "key": None, "config": str(tmp_path / "none.yaml"), "json": False}
        return Namespace(**{**defaults, **kwargs})

    return _make
