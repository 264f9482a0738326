"""Handlers for 'pastelboard board' commands."""

import sys

from pastelboard.cli._common import build_column_summaries, format_column_line, open_session, output_json
from pastelboard.model.writer import board_to_dict, encode


def board_summary(args) -> int:
    """Show column names and card counts."""
    session = open_session(args)
    columns = build_column_summaries(session.board)

    if args.json:
        output_json({"columns": columns, "total": len(session.board)})
    else:
        for c in columns:
            print(format_column_line(c))

    return 0


def board_get(args) -> int:
    """Dump the stored encoding of the board."""
    session = open_session(args)

    if args.json:
        output_json(board_to_dict(session.board))
    else:
        sys.stdout.write(encode(session.board) + "\n")

    return 0
