"""A board session: load once, dispatch commands, save after each."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from pastelboard.commands import Command, apply_command
from pastelboard.constants import STORAGE_KEY
from pastelboard.model.board import Board, Card, ColorFactory, Column
from pastelboard.model.loader import load_board
from pastelboard.model.writer import save_board
from pastelboard.palette import random_color
from pastelboard.storage import Storage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the board handed to renderers."""

    columns: dict[Column, tuple[Card, ...]]
    counts: dict[Column, int]

    @classmethod
    def of(cls, board: Board) -> Snapshot:
        return cls(columns=dict(board), counts=board.counts())

    def __getitem__(self, column: Column | str) -> tuple[Card, ...]:
        return self.columns[Column(column)]


Listener = Callable[[Command, Snapshot], None]


class Session:
    """Owns the board for the lifetime of one run.

    Commands run one at a time: mutate, save if anything changed, then
    notify listeners with a fresh snapshot.
    """

    def __init__(self, board: Board, storage: Storage, key: str = STORAGE_KEY) -> None:
        self.board = board
        self.storage = storage
        self.key = key
        self.last_save_ok = True
        self._listeners: list[Listener] = []

    @classmethod
    def open(
        cls,
        storage: Storage,
        key: str = STORAGE_KEY,
        new_color: ColorFactory = random_color,
    ) -> Session:
        """Load the stored board, or start an empty one."""
        board = load_board(storage, key, new_color) or Board(new_color=new_color)
        return cls(board, storage, key)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener after every dispatch. Returns an unsubscribe callable."""
        self._listeners.append(listener)
        return lambda: listener in self._listeners and self._listeners.remove(listener)

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self.board)

    def dispatch(self, command: Command) -> Card | bool:
        """Apply a command, persist the result and notify listeners."""
        before = self.board.version
        result = apply_command(command, self.board)
        if self.board.version != before:
            self.save()
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(command, snapshot)
        return result

    def save(self) -> bool:
        self.last_save_ok = save_board(self.board, self.storage, self.key)
        return self.last_save_ok

    def close(self) -> None:
        """Final best-effort save."""
        self.save()
        self._listeners.clear()

    def __enter__(self) -> Session:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
