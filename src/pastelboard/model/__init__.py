"""Board model and its storage codec."""

from pastelboard.model.board import Board, Card, Column
from pastelboard.model.card import (
    add_card,
    find_card,
    move_card,
    normalize_title,
    recolor_card,
    remove_card,
    rename_card,
)
from pastelboard.model.column import recolor_column, sort_column
from pastelboard.model.loader import decode, load_board
from pastelboard.model.writer import encode, save_board

__all__ = [
    "Board",
    "Card",
    "Column",
    "add_card",
    "decode",
    "encode",
    "find_card",
    "load_board",
    "move_card",
    "normalize_title",
    "recolor_card",
    "recolor_column",
    "remove_card",
    "rename_card",
    "save_board",
    "sort_column",
]
