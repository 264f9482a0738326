"""Decode stored board state, repairing whatever is malformed."""

import json
import logging
from typing import Any

from pastelboard.constants import PLACEHOLDER_TITLE, STORAGE_KEY
from pastelboard.ids import new_id
from pastelboard.model.board import Board, Card, ColorFactory, Column
from pastelboard.palette import random_color
from pastelboard.storage import Storage, StorageError

logger = logging.getLogger(__name__)


def _coerce_str(value: Any) -> str:
    """Stringify a JSON scalar the way the stored format expects.

    true/false stay lowercase, 3.0 becomes "3", nested values are
    kept as compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def _field(raw: dict, name: str, default) -> str:
    """Coerce a card field to str, calling default() when absent or null."""
    value = raw.get(name)
    return default() if value is None else _coerce_str(value)


def _repair_card(raw: Any, seen: set[str], new_color: ColorFactory) -> Card:
    """Build a Card from one stored entry, field by field."""
    if not isinstance(raw, dict):
        raw = {}
    card_id = _field(raw, "id", new_id)
    if card_id in seen:
        logger.warning("duplicate card id %s, assigning a new one", card_id)
        card_id = new_id()
    seen.add(card_id)
    return Card(
        id=card_id,
        title=_field(raw, "title", lambda: PLACEHOLDER_TITLE),
        color=_field(raw, "color", new_color),
    )


def board_from_data(data: Any, new_color: ColorFactory = random_color) -> Board:
    """Build a valid Board from parsed JSON of any shape.

    Non-mapping input gives an empty board. Missing or non-list columns
    become empty. Unknown keys are ignored.
    """
    if not isinstance(data, dict):
        logger.warning("stored board is not a mapping, starting empty")
        return Board(new_color=new_color)

    seen: set[str] = set()
    columns = {}
    for column in Column:
        entries = data.get(column.value)
        if not isinstance(entries, list):
            if entries is not None:
                logger.warning("column %s is not a list, emptying it", column.value)
            entries = []
        columns[column] = [_repair_card(raw, seen, new_color) for raw in entries]
    return Board(columns, new_color=new_color)


def _parse_int(digits: str) -> int | str:
    # Past the int digit limit the digits are kept as text.
    try:
        return int(digits)
    except ValueError:
        return digits


def decode(text: str | None, new_color: ColorFactory = random_color) -> Board:
    """Parse stored text into a Board. Never raises."""
    if not text:
        return Board(new_color=new_color)
    try:
        data = json.loads(text, parse_int=_parse_int)
    except (ValueError, RecursionError) as e:
        logger.warning("stored board is not valid JSON, starting empty: %s", e)
        return Board(new_color=new_color)
    return board_from_data(data, new_color)


def load_board(
    storage: Storage,
    key: str = STORAGE_KEY,
    new_color: ColorFactory = random_color,
) -> Board | None:
    """Read and decode the stored board.

    Returns None when nothing is stored or the read fails; the caller
    starts from an empty board.
    """
    try:
        text = storage.get(key)
    except (StorageError, OSError) as e:
        logger.warning("could not read board, starting empty: %s", e)
        return None
    if text is None:
        return None
    board = decode(text, new_color)
    logger.debug("loaded board %r from %s", board, key)
    return board
