"""Tests for column-wide operations."""

from pastelboard.model.board import Column
from pastelboard.model.column import recolor_column, sort_column, title_sort_key


def _titles(board, column):
    return [c.title for c in board[column]]


def test_sort_case_insensitive(make_board):
    board = make_board(todo=["banana", "Apple", "cherry"])
    sort_column(board, Column.TODO)
    assert _titles(board, Column.TODO) == ["Apple", "banana", "cherry"]


def test_sort_stable_for_equal_titles(make_board):
    board = make_board(todo=["b", "a", "B", "A", "a"])
    sort_column(board, Column.TODO)
    assert [c.id for c in board[Column.TODO]] == ["todo-2", "todo-4", "todo-5", "todo-1", "todo-3"]


def test_sort_ignores_diacritics(make_board):
    board = make_board(todo=["eclair", "Éclair", "dog", "fig"])
    sort_column(board, Column.TODO)
    assert _titles(board, Column.TODO) == ["dog", "eclair", "Éclair", "fig"]


def test_sort_folds_letters_without_accent_marks(make_board):
    board = make_board(todo=["zebra", "łódź", "lato", "mama"], done=["øl", "oak", "pear"])
    sort_column(board, Column.TODO)
    sort_column(board, Column.DONE)
    assert _titles(board, Column.TODO) == ["lato", "łódź", "mama", "zebra"]
    assert _titles(board, Column.DONE) == ["oak", "øl", "pear"]


def test_sort_only_touches_column(make_board):
    board = make_board(todo=["b", "a"], done=["z", "y"])
    sort_column(board, Column.TODO)
    assert _titles(board, Column.DONE) == ["z", "y"]


def test_sort_empty_column(make_board):
    board = make_board()
    sort_column(board, Column.DOING)
    assert board[Column.DOING] == ()


def test_title_sort_key():
    assert title_sort_key("Česká") == title_sort_key("ceska")
    assert title_sort_key("łódź") == "lodz"
    assert title_sort_key("Æble") == title_sort_key("aeble")
    assert title_sort_key("ABC") == "abc"


def test_recolor_column(make_board):
    board = make_board(doing=["a", "b", "c"], done=["d"])
    before = board[Column.DOING]
    recolor_column(board, Column.DOING)
    after = board[Column.DOING]
    assert [c.id for c in after] == [c.id for c in before]
    assert [c.title for c in after] == [c.title for c in before]
    assert [c.color for c in after] == [f"hsl({i}deg 75% 80%)" for i in range(3)]
    assert board[Column.DONE][0].color == "hsl(10deg 75% 80%)"
