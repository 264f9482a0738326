"""Column widget for pastelboard UI."""

from typing import Iterable

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Rule

from pastelboard.commands import AddCard, ColorizeColumn, SortColumn
from pastelboard.model.board import Card, Column
from pastelboard.ui.card import CardWidget
from pastelboard.ui.constants import ICON_ADD, ICON_PALETTE, ICON_SORT
from pastelboard.ui.events import CommandRequested
from pastelboard.ui.static import IconButton, PlainStatic


class ColumnWidget(Vertical):
    """A single column: header with count and tools, then its cards."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: 100%;
        min-width: 30;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget #column-header {
        width: 100%;
        height: 1;
    }
    ColumnWidget #column-title {
        width: 1fr;
        text-style: bold;
    }
    ColumnWidget #column-count {
        width: auto;
        padding: 0 1;
        background: $primary-darken-2;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    ColumnWidget #cards {
        height: 1fr;
    }
    """

    def __init__(self, column: Column, cards: Iterable[Card] = ()) -> None:
        super().__init__(id=f"column-{column.value}")
        self.column = column
        self._initial = tuple(cards)

    def compose(self) -> ComposeResult:
        with Horizontal(id="column-header"):
            yield PlainStatic(self.column.label, id="column-title")
            yield PlainStatic(str(len(self._initial)), id="column-count")
            yield IconButton(ICON_ADD, "add", "Add card")
            yield IconButton(ICON_PALETTE, "colorize", "Recolor every card")
            yield IconButton(ICON_SORT, "sort", "Sort by title")
        yield Rule()
        with VerticalScroll(id="cards"):
            for card in self._initial:
                yield CardWidget(card, self.column)

    def show_count(self, count: int) -> None:
        self.query_one("#column-count", PlainStatic).update(str(count))

    def show(self, cards: tuple[Card, ...]) -> None:
        """Replace the displayed cards."""
        self.show_count(len(cards))
        container = self.query_one("#cards", VerticalScroll)
        container.remove_children()
        container.mount_all(CardWidget(card, self.column) for card in cards)

    def card_widgets(self) -> list[CardWidget]:
        return list(self.query(CardWidget))

    def on_icon_button_pressed(self, event: IconButton.Pressed) -> None:
        event.stop()
        match event.verb:
            case "add":
                command = AddCard(self.column)
            case "colorize":
                command = ColorizeColumn(self.column)
            case "sort":
                command = SortColumn(self.column)
            case _:
                return
        self.post_message(CommandRequested(command))
