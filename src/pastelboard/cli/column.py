"""Handlers for 'pastelboard column' commands."""

from pastelboard.cli._common import (
    build_column_summaries,
    check_saved,
    find_column,
    format_card_line,
    format_column_line,
    open_session,
    output_json,
    output_result,
)
from pastelboard.commands import ColorizeColumn, SortColumn


def column_list(args) -> int:
    """List columns with card counts."""
    session = open_session(args)
    columns = build_column_summaries(session.board)

    if args.json:
        output_json(columns)
    else:
        for c in columns:
            print(format_column_line(c))

    return 0


def column_colorize(args) -> int:
    """Give every card in a column a new random color."""
    column = find_column(args.name, args.json)
    session = open_session(args)

    session.dispatch(ColorizeColumn(column))
    check_saved(session, args.json)

    cards = session.board[column]
    output_result(
        {"id": column.value, "cards": [c.to_dict() for c in cards]},
        f"Recolored {len(cards)} card{'' if len(cards) == 1 else 's'} in {column.label}",
        args.json,
    )
    return 0


def column_sort(args) -> int:
    """Sort a column's cards by title."""
    column = find_column(args.name, args.json)
    session = open_session(args)

    session.dispatch(SortColumn(column))
    check_saved(session, args.json)

    cards = session.board[column]
    if args.json:
        output_json({"id": column.value, "cards": [c.to_dict() for c in cards]})
    else:
        print(f"Sorted {column.label}")
        for card in cards:
            print(format_card_line(card))
    return 0
