"""Tests for the Board container and Column ordering."""

from pastelboard.model.board import Board, Card, Column


def test_empty_board_has_all_columns():
    board = Board()
    assert [c for c, _ in board] == [Column.TODO, Column.DOING, Column.DONE]
    assert all(cards == () for _, cards in board)
    assert len(board) == 0


def test_column_neighbours():
    assert Column.TODO.neighbour(1) is Column.DOING
    assert Column.DOING.neighbour(-1) is Column.TODO
    assert Column.DOING.neighbour(1) is Column.DONE
    assert Column.TODO.neighbour(-1) is None
    assert Column.DONE.neighbour(1) is None


def test_column_parse():
    assert Column.parse("todo") is Column.TODO
    assert Column.parse(" Doing ") is Column.DOING
    assert Column.parse("backlog") is None


def test_column_labels():
    assert [c.label for c in Column] == ["To do", "Doing", "Done"]


def test_getitem_accepts_string(make_board):
    board = make_board(todo=["a"])
    assert board["todo"] == board[Column.TODO]
    assert board["todo"][0].title == "a"


def test_find_card_column(make_board):
    board = make_board(todo=["a"], done=["b"])
    assert board.find_card_column("todo-1") is Column.TODO
    assert board.find_card_column("done-1") is Column.DONE
    assert board.find_card_column("missing") is None


def test_index_of(make_board):
    board = make_board(todo=["a", "b"])
    assert board.index_of(Column.TODO, "todo-2") == 1
    assert board.index_of(Column.DOING, "todo-2") is None


def test_counts_and_ids(make_board):
    board = make_board(todo=["a", "b"], done=["c"])
    assert board.counts() == {Column.TODO: 2, Column.DOING: 0, Column.DONE: 1}
    assert board.ids() == ["todo-1", "todo-2", "done-1"]


def test_equality_ignores_color_factory():
    card = Card("1", "a", "red")
    assert Board({Column.TODO: [card]}) == Board({Column.TODO: [card]}, new_color=lambda: "blue")
    assert Board({Column.TODO: [card]}) != Board({Column.DOING: [card]})


def test_card_to_dict_field_order():
    assert list(Card("1", "a", "red").to_dict()) == ["id", "title", "color"]
