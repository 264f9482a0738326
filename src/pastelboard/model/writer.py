"""Encode a board and save it to storage."""

import json
import logging

from pastelboard.constants import STORAGE_KEY
from pastelboard.model.board import Board, Column
from pastelboard.storage import Storage, StorageError

logger = logging.getLogger(__name__)


def board_to_dict(board: Board) -> dict[str, list[dict[str, str]]]:
    """Plain dict of columns in board order, cards as id/title/color."""
    return {column.value: [card.to_dict() for card in board[column]] for column in Column}


def encode(board: Board) -> str:
    """Serialize a board to JSON text.

    Key order is fixed, so equal boards always encode identically.
    """
    return json.dumps(board_to_dict(board), ensure_ascii=False)


def save_board(board: Board, storage: Storage, key: str = STORAGE_KEY) -> bool:
    """Write the board to storage.

    Storage failures are logged and reported as False. The in-memory
    board is left untouched either way.
    """
    text = encode(board)
    try:
        storage.set(key, text)
    except (StorageError, OSError) as e:
        logger.warning("could not save board: %s", e)
        return False
    logger.debug("saved board %r under %s", board, key)
    return True
