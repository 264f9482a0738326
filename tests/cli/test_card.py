"""Tests for 'pastelboard card' commands."""

import json

import pytest

from pastelboard.cli.card import card_add, card_list, card_move, card_recolor, card_remove, card_rename
from pastelboard.model.board import Column
from pastelboard.model.loader import load_board
from pastelboard.storage import FileStorage


def _board(store):
    return load_board(FileStorage(store))


def test_card_list(make_args, capsys):
    assert card_list(make_args(column=None)) == 0
    out = capsys.readouterr().out
    assert "todo  To do" in out
    assert "aaaa1111  banana" in out
    assert "bbbb1111  Write docs" in out


def test_card_list_filter_column(make_args, capsys):
    assert card_list(make_args(column="doing")) == 0
    out = capsys.readouterr().out
    assert "Write docs" in out
    assert "banana" not in out


def test_card_list_json(make_args, capsys):
    assert card_list(make_args(column=None, json=True)) == 0
    data = json.loads(capsys.readouterr().out)
    assert [c["title"] for c in data] == ["banana", "Apple", "Write docs"]
    assert data[2]["column"] == "doing"


def test_card_list_bad_column(make_args, capsys):
    with pytest.raises(SystemExit) as exc:
        card_list(make_args(column="backlog"))
    assert exc.value.code == 1
    assert "Available: todo, doing, done" in capsys.readouterr().err


def test_card_add(make_args, store, capsys):
    assert card_add(make_args(column="done", title="Ship it", json=True)) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Ship it"
    assert data["column"] == "done"
    board = _board(store)
    assert [c.id for c in board[Column.DONE]] == [data["id"]]


def test_card_add_default_title(make_args, store):
    assert card_add(make_args(column="todo", title=None)) == 0
    assert _board(store)[Column.TODO][-1].title == "New card"


def test_card_move_right_by_prefix(make_args, store, capsys):
    assert card_move(make_args(id="aaaa1111", column="todo", left=False, right=True)) == 0
    assert "Moved card aaaa1111 to Doing" in capsys.readouterr().out
    board = _board(store)
    assert [c.id for c in board[Column.DOING]] == ["bbbb1111-0000", "aaaa1111-0000"]


def test_card_move_past_edge(make_args, store, capsys):
    assert card_move(make_args(id="aaaa1111", column="todo", left=True, right=False, json=True)) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["moved"] is False
    assert data["column"] == "todo"
    assert len(_board(store)[Column.TODO]) == 2


def test_card_ambiguous_prefix(make_args, capsys):
    with pytest.raises(SystemExit):
        card_remove(make_args(id="aaaa", column="todo"))
    assert "ambiguous" in capsys.readouterr().err


def test_card_not_found_json(make_args, capsys):
    with pytest.raises(SystemExit):
        card_remove(make_args(id="bbbb1111", column="todo", json=True))
    assert "not found" in json.loads(capsys.readouterr().err)["error"]


def test_card_remove(make_args, store):
    assert card_remove(make_args(id="aaaa2222-0000", column="todo")) == 0
    assert [c.title for c in _board(store)[Column.TODO]] == ["banana"]


def test_card_recolor(make_args, store, capsys):
    assert card_recolor(make_args(id="bbbb1111", column="doing", json=True)) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["color"].startswith("hsl(")
    assert data["color"].endswith("deg 75% 80%)")
    assert _board(store)[Column.DOING][0].color == data["color"]


def test_card_rename(make_args, store, capsys):
    assert card_rename(make_args(id="bbbb1111", column="doing", title="  Write \n more  docs ")) == 0
    assert "Write more docs" in capsys.readouterr().out
    assert _board(store)[Column.DOING][0].title == "Write more docs"


def test_card_add_save_failure(make_args, store, capsys):
    (store / "kanbanStateV1.json").unlink()
    store.rmdir()
    store.write_text("")  # a file where the directory should be
    with pytest.raises(SystemExit):
        card_add(make_args(column="todo", title="x"))
    assert "Could not save" in capsys.readouterr().err
