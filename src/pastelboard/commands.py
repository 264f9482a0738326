"""Commands that the UI and CLI send to the board."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch

from pastelboard.model.board import Board, Card, Column
from pastelboard.model.card import add_card, move_card, recolor_card, remove_card, rename_card
from pastelboard.model.column import recolor_column, sort_column


@dataclass(frozen=True)
class AddCard:
    column: Column
    title: str | None = None


@dataclass(frozen=True)
class ColorizeColumn:
    column: Column


@dataclass(frozen=True)
class SortColumn:
    column: Column


@dataclass(frozen=True)
class MoveCard:
    column: Column
    card_id: str
    direction: int  # -1 for left, +1 for right


@dataclass(frozen=True)
class RemoveCard:
    column: Column
    card_id: str


@dataclass(frozen=True)
class RecolorCard:
    column: Column
    card_id: str


@dataclass(frozen=True)
class RenameCard:
    column: Column
    card_id: str
    raw_title: str


Command = AddCard | ColorizeColumn | SortColumn | MoveCard | RemoveCard | RecolorCard | RenameCard


@singledispatch
def apply_command(command, board: Board) -> Card | bool:
    """Run a command against the board.

    Returns the new Card for AddCard, otherwise whether the board changed.
    """
    raise TypeError(f"unknown command: {command!r}")


@apply_command.register
def _(command: AddCard, board: Board) -> Card:
    return add_card(board, command.column, command.title)


@apply_command.register
def _(command: ColorizeColumn, board: Board) -> bool:
    return recolor_column(board, command.column)


@apply_command.register
def _(command: SortColumn, board: Board) -> bool:
    return sort_column(board, command.column)


@apply_command.register
def _(command: MoveCard, board: Board) -> bool:
    return move_card(board, command.column, command.card_id, command.direction)


@apply_command.register
def _(command: RemoveCard, board: Board) -> bool:
    return remove_card(board, command.column, command.card_id)


@apply_command.register
def _(command: RecolorCard, board: Board) -> bool:
    return recolor_card(board, command.column, command.card_id)


@apply_command.register
def _(command: RenameCard, board: Board) -> bool:
    return rename_card(board, command.column, command.card_id, command.raw_title)
