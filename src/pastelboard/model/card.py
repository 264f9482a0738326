"""Card mutation operations.

Every operation is a no-op, returning False, when the card is not in
the given column. A click can race with a removal, so not-found is
expected rather than an error.
"""

import re
from dataclasses import replace

from pastelboard.constants import DEFAULT_CARD_TITLE
from pastelboard.ids import new_id
from pastelboard.model.board import Board, Card, Column

_WHITESPACE = re.compile(r"\s+")


def normalize_title(raw: str) -> str:
    """Collapse whitespace runs to one space and trim.

    "  Fix\n\tthe   bug " → "Fix the bug"
    """
    return _WHITESPACE.sub(" ", raw).strip()


def add_card(board: Board, column: Column, title: str | None = None) -> Card:
    """Create a card and append it to the end of column.

    The title is normalized; a blank one falls back to the default.
    """
    column = Column(column)
    title = normalize_title(title) if title is not None else ""
    card = Card(id=new_id(), title=title or DEFAULT_CARD_TITLE, color=board.new_color())
    board._assign(column, (*board[column], card))
    return card


def find_card(board: Board, column: Column, card_id: str) -> Card | None:
    """Get a card from a column by ID."""
    idx = board.index_of(Column(column), card_id)
    return None if idx is None else board[column][idx]


def move_card(board: Board, column: Column, card_id: str, direction: int) -> bool:
    """Move a card one column left (-1) or right (+1).

    The card is appended to the end of the target column. Moving past
    the first or last column does nothing.
    """
    column = Column(column)
    target = column.neighbour(direction)
    if target is None:
        return False
    idx = board.index_of(column, card_id)
    if idx is None:
        return False

    source = list(board[column])
    card = source.pop(idx)
    board._assign(column, source)
    board._assign(target, (*board[target], card))
    return True


def remove_card(board: Board, column: Column, card_id: str) -> bool:
    """Delete a card from column."""
    column = Column(column)
    if board.index_of(column, card_id) is None:
        return False
    board._assign(column, (c for c in board[column] if c.id != card_id))
    return True


def _replace_card(board: Board, column: Column, card_id: str, **changes) -> bool:
    column = Column(column)
    idx = board.index_of(column, card_id)
    if idx is None:
        return False
    cards = list(board[column])
    cards[idx] = replace(cards[idx], **changes)
    board._assign(column, cards)
    return True


def recolor_card(board: Board, column: Column, card_id: str) -> bool:
    """Give a card a new random color."""
    return _replace_card(board, column, card_id, color=board.new_color())


def rename_card(board: Board, column: Column, card_id: str, raw_title: str) -> bool:
    """Set a card's title, normalized."""
    return _replace_card(board, column, card_id, title=normalize_title(raw_title))
