"""Card widget for pastelboard UI."""

from textual.app import ComposeResult
from textual.color import Color, ColorParseError
from textual.containers import Horizontal, Vertical
from textual.widgets import Input

from pastelboard.commands import MoveCard, RecolorCard, RemoveCard, RenameCard
from pastelboard.ids import short_id
from pastelboard.model.board import Card, Column
from pastelboard.model.card import normalize_title
from pastelboard.palette import hsl_to_hex
from pastelboard.ui.constants import ICON_DELETE, ICON_MOVE_LEFT, ICON_MOVE_RIGHT, ICON_PALETTE
from pastelboard.ui.events import CommandRequested
from pastelboard.ui.static import IconButton, PlainStatic


def card_background(color: str) -> Color | None:
    """Terminal color for a stored card color, or None if unparseable."""
    try:
        return Color.parse(hsl_to_hex(color) or color)
    except ColorParseError:
        return None


class CardWidget(Vertical):
    """A single card: editable title, tool buttons and an ID badge."""

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
        color: #202020;
    }
    CardWidget #card-top {
        width: 100%;
        height: 1;
    }
    CardWidget #card-title {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: transparent;
        color: #202020;
    }
    CardWidget #card-meta {
        width: 100%;
        height: 1;
        color: #505050;
    }
    """

    def __init__(self, card: Card, column: Column) -> None:
        super().__init__()
        self.card_id = card.id
        self.card_title = card.title
        self.card_color = card.color
        self.column = column

    def compose(self) -> ComposeResult:
        with Horizontal(id="card-top"):
            yield Input(self.card_title, placeholder="Title", id="card-title")
            yield IconButton(ICON_MOVE_LEFT, "left", "Move to the left column")
            yield IconButton(ICON_MOVE_RIGHT, "right", "Move to the right column")
            yield IconButton(ICON_PALETTE, "recolor", "Random card color")
            yield IconButton(ICON_DELETE, "remove", "Delete card")
        yield PlainStatic(f"ID: {short_id(self.card_id)} · {self.column.label}", id="card-meta")

    def on_mount(self) -> None:
        background = card_background(self.card_color)
        if background is not None:
            self.styles.background = background

    def on_icon_button_pressed(self, event: IconButton.Pressed) -> None:
        event.stop()
        match event.verb:
            case "left":
                command = MoveCard(self.column, self.card_id, -1)
            case "right":
                command = MoveCard(self.column, self.card_id, 1)
            case "recolor":
                command = RecolorCard(self.column, self.card_id)
            case "remove":
                command = RemoveCard(self.column, self.card_id)
            case _:
                return
        self.post_message(CommandRequested(command))

    def _rename(self, raw_title: str) -> None:
        title = normalize_title(raw_title)
        if title == self.card_title:
            return
        self.card_title = title
        self.post_message(CommandRequested(RenameCard(self.column, self.card_id, raw_title)))

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self._rename(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._rename(event.value)
        event.input.value = self.card_title
