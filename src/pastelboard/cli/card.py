"""Handlers for 'pastelboard card' commands."""

from pastelboard.cli._common import (
    card_data,
    check_saved,
    find_card,
    find_column,
    format_card_line,
    open_session,
    output_json,
    output_result,
)
from pastelboard.commands import AddCard, MoveCard, RecolorCard, RemoveCard, RenameCard
from pastelboard.ids import short_id
from pastelboard.model.board import Column
from pastelboard.model.card import find_card as find_card_in_column


def card_list(args) -> int:
    """List cards grouped by column."""
    column_filter = find_column(args.column, args.json) if args.column else None
    session = open_session(args)
    columns = [c for c in Column if column_filter in (None, c)]

    if args.json:
        output_json([card_data(card, column) for column in columns for card in session.board[column]])
    else:
        for column in columns:
            print(f"{column.value}  {column.label}")
            for card in session.board[column]:
                print(format_card_line(card))

    return 0


def card_add(args) -> int:
    """Create a new card at the end of a column."""
    column = find_column(args.column, args.json)
    session = open_session(args)

    card = session.dispatch(AddCard(column, args.title))
    check_saved(session, args.json)

    output_result(
        card_data(card, column),
        f"Created card {short_id(card.id)} in {column.label}",
        args.json,
    )
    return 0


def card_move(args) -> int:
    """Move a card one column left or right."""
    column = find_column(args.column, args.json)
    session = open_session(args)
    card = find_card(session.board, column, args.id, args.json)

    direction = -1 if args.left else 1
    moved = session.dispatch(MoveCard(column, card.id, direction))
    check_saved(session, args.json)

    target = session.board.find_card_column(card.id)
    if moved:
        text = f"Moved card {short_id(card.id)} to {target.label}"
    else:
        text = f"Card {short_id(card.id)} is already in the {'first' if direction < 0 else 'last'} column"
    output_result({**card_data(card, target), "moved": moved}, text, args.json)
    return 0


def card_remove(args) -> int:
    """Delete a card."""
    column = find_column(args.column, args.json)
    session = open_session(args)
    card = find_card(session.board, column, args.id, args.json)

    session.dispatch(RemoveCard(column, card.id))
    check_saved(session, args.json)

    output_result({"id": card.id, "removed": True}, f"Removed card {short_id(card.id)}", args.json)
    return 0


def card_recolor(args) -> int:
    """Give a card a new random color."""
    column = find_column(args.column, args.json)
    session = open_session(args)
    card = find_card(session.board, column, args.id, args.json)

    session.dispatch(RecolorCard(column, card.id))
    check_saved(session, args.json)

    updated = find_card_in_column(session.board, column, card.id)
    output_result(
        card_data(updated, column),
        f"Recolored card {short_id(card.id)}: {updated.color}",
        args.json,
    )
    return 0


def card_rename(args) -> int:
    """Set a card's title."""
    column = find_column(args.column, args.json)
    session = open_session(args)
    card = find_card(session.board, column, args.id, args.json)

    session.dispatch(RenameCard(column, card.id, args.title))
    check_saved(session, args.json)

    updated = find_card_in_column(session.board, column, card.id)
    output_result(
        card_data(updated, column),
        f"Renamed card {short_id(card.id)}: {updated.title}",
        args.json,
    )
    return 0
