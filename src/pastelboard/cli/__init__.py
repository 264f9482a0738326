"""CLI argument parser and dispatch for pastelboard."""

import argparse

from pastelboard.cli.board import board_get, board_summary
from pastelboard.cli.card import card_add, card_list, card_move, card_recolor, card_remove, card_rename
from pastelboard.cli.column import column_colorize, column_list, column_sort


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--store", help="Directory holding the board (default: from config)")
    common.add_argument("--key", help="Storage key (default: kanbanStateV1)")
    common.add_argument("--config", help="Path to config.yaml")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    parser = argparse.ArgumentParser(
        prog="pastelboard",
        description="Three-column pastel kanban board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show card counts per column", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    board_get_p = board_verbs.add_parser("get", help="Dump stored board JSON", parents=[common])
    board_get_p.set_defaults(func=board_get)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("--column", dest="column", help="Filter by column (todo, doing, done)")
    card_list_p.set_defaults(func=card_list)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("column", help="Target column (todo, doing, done)")
    card_add_p.add_argument("title", nargs="?", help="Card title (default: New card)")
    card_add_p.set_defaults(func=card_add)

    card_move_p = card_verbs.add_parser("move", help="Move a card to the next column", parents=[common])
    card_move_p.add_argument("id", help="Card ID or unique prefix")
    card_move_p.add_argument("--column", dest="column", required=True, help="Column holding the card")
    direction = card_move_p.add_mutually_exclusive_group(required=True)
    direction.add_argument("--left", action="store_true", help="Move towards todo")
    direction.add_argument("--right", action="store_true", help="Move towards done")
    card_move_p.set_defaults(func=card_move)

    card_remove_p = card_verbs.add_parser("remove", help="Delete a card", parents=[common])
    card_remove_p.add_argument("id", help="Card ID or unique prefix")
    card_remove_p.add_argument("--column", dest="column", required=True, help="Column holding the card")
    card_remove_p.set_defaults(func=card_remove)

    card_recolor_p = card_verbs.add_parser("recolor", help="Pick a new random color", parents=[common])
    card_recolor_p.add_argument("id", help="Card ID or unique prefix")
    card_recolor_p.add_argument("--column", dest="column", required=True, help="Column holding the card")
    card_recolor_p.set_defaults(func=card_recolor)

    card_rename_p = card_verbs.add_parser("rename", help="Change a card's title", parents=[common])
    card_rename_p.add_argument("id", help="Card ID or unique prefix")
    card_rename_p.add_argument("title", help="New title")
    card_rename_p.add_argument("--column", dest="column", required=True, help="Column holding the card")
    card_rename_p.set_defaults(func=card_rename)

    # card with no verb = list
    card_p.set_defaults(func=card_list, column=None)

    # --- column ---
    col_p = nouns.add_parser("column", help="Column operations", parents=[common])
    col_verbs = col_p.add_subparsers(dest="verb")

    col_list_p = col_verbs.add_parser("list", help="List columns", parents=[common])
    col_list_p.set_defaults(func=column_list)

    col_colorize_p = col_verbs.add_parser("colorize", help="Recolor every card in a column", parents=[common])
    col_colorize_p.add_argument("name", help="Column (todo, doing, done)")
    col_colorize_p.set_defaults(func=column_colorize)

    col_sort_p = col_verbs.add_parser("sort", help="Sort a column by title", parents=[common])
    col_sort_p.add_argument("name", help="Column (todo, doing, done)")
    col_sort_p.set_defaults(func=column_sort)

    # column with no verb = list
    col_p.set_defaults(func=column_list)

    return parser


def build_tui_parser() -> argparse.ArgumentParser:
    """Build the parser for running the TUI (no noun given)."""
    parser = argparse.ArgumentParser(prog="pastelboard", description="Open the board in the terminal UI")
    parser.add_argument("store", nargs="?", help="Directory holding the board (default: from config)")
    parser.add_argument("--store", dest="store_flag", help="Same as the positional store")
    parser.add_argument("--key", help="Storage key (default: kanbanStateV1)")
    parser.add_argument("--config", help="Path to config.yaml")
    return parser
