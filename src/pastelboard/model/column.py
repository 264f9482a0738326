"""Column-wide operations."""

import unicodedata
from dataclasses import replace

from pastelboard.model.board import Board, Column

# Letters NFKD does not split into base letter + accent.
_FOLD = str.maketrans(
    {
        "ł": "l", "Ł": "L", "ø": "o", "Ø": "O", "đ": "d", "Đ": "D", "ð": "d", "Ð": "D",
        "ħ": "h", "Ħ": "H", "ŧ": "t", "Ŧ": "T", "ı": "i", "þ": "th", "Þ": "Th",
        "æ": "ae", "Æ": "AE", "œ": "oe", "Œ": "OE",
    }
)


def title_sort_key(title: str) -> str:
    """Sort key that ignores case and diacritics.

    "Éclair" and "eclair" produce the same key, so they keep their
    relative order under a stable sort. "łódź" sorts as "lodz".
    """
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.translate(_FOLD).casefold()


def sort_column(board: Board, column: Column) -> bool:
    """Sort a column's cards by title, ascending. Stable for equal titles."""
    column = Column(column)
    board._assign(column, sorted(board[column], key=lambda c: title_sort_key(c.title)))
    return True


def recolor_column(board: Board, column: Column) -> bool:
    """Give every card in a column its own new random color."""
    column = Column(column)
    board._assign(column, [replace(card, color=board.new_color()) for card in board[column]])
    return True
