"""Shared helpers for CLI command handlers."""

import json
import sys
from functools import partial

from pastelboard.config import ConfigError, read_config
from pastelboard.ids import short_id
from pastelboard.model.board import Board, Card, Column
from pastelboard.palette import random_color
from pastelboard.session import Session
from pastelboard.storage import FileStorage


def open_session(args) -> Session:
    """Open the board named by args/config. Exit 1 if config is unusable."""
    try:
        config = read_config(getattr(args, "config", None))
    except ConfigError as e:
        error(str(e), args.json)
    store = args.store or config["store"]
    key = args.key or config["key"]
    new_color = partial(random_color, saturation=config["saturation"], lightness=config["lightness"])
    return Session.open(FileStorage(store), key, new_color)


def find_column(name: str, json_mode: bool) -> Column:
    """Lookup column by name. Exit 1 listing available columns if not found."""
    column = Column.parse(name)
    if column is not None:
        return column
    available = ", ".join(c.value for c in Column)
    error(f"Column '{name}' not found. Available: {available}", json_mode)


def find_card(board: Board, column: Column, card_id: str, json_mode: bool) -> Card:
    """Lookup card by ID or unique ID prefix within a column. Exit 1 if not found."""
    matches = [c for c in board[column] if c.id == card_id]
    if not matches:
        matches = [c for c in board[column] if c.id.startswith(card_id)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        error(f"Card '{card_id}' not found in {column.value}.", json_mode)
    error(f"Card ID '{card_id}' is ambiguous in {column.value}.", json_mode)


def card_data(card: Card, column: Column) -> dict:
    return {**card.to_dict(), "column": column.value}


def format_card_line(card: Card, indent: str = "  ") -> str:
    return f"{indent}{short_id(card.id)}  {card.title}"


def check_saved(session: Session, json_mode: bool) -> None:
    """Exit 1 if the last save failed."""
    if not session.last_save_ok:
        error("Could not save board; see log for details.", json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def build_column_summaries(board: Board) -> list[dict]:
    """Build column summary dicts from board."""
    return [
        {"id": column.value, "name": column.label, "cards": count}
        for column, count in board.counts().items()
    ]


def format_column_line(c: dict, indent: str = "") -> str:
    """Format a column summary dict as a text line."""
    cards = "card" if c["cards"] == 1 else "cards"
    return f"{indent}{c['id']:<6} {c['name']:<8} {c['cards']} {cards}"
