"""Shared fixtures."""

import itertools

import pytest

from pastelboard.model.board import Board, Card, Column


@pytest.fixture
def colors():
    """Deterministic color factory: hsl(0deg ...), hsl(1deg ...), ..."""
    counter = itertools.count()
    return lambda: f"hsl({next(counter)}deg 75% 80%)"


@pytest.fixture
def make_board(colors):
    """Build a board from {column: [title, ...]}, ids are "<column>-<n>"."""

    def _make(**columns):
        cards = {}
        for name, titles in columns.items():
            column = Column(name)
            cards[column] = [
                Card(id=f"{name}-{i}", title=title, color=f"hsl({i * 10}deg 75% 80%)")
                for i, title in enumerate(titles, start=1)
            ]
        return Board(cards, new_color=colors)

    return _make
