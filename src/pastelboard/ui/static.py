"""Static widget variants."""

from textual.events import Click
from textual.message import Message
from textual.widgets import Static


class PlainStatic(Static):
    """Static that doesn't allow text selection."""

    ALLOW_SELECT = False


class IconButton(Static):
    """Single-glyph button that posts Pressed with its verb."""

    DEFAULT_CSS = """
    IconButton {
        width: auto;
        height: 1;
        padding: 0 1;
    }
    IconButton:hover {
        background: $primary-darken-2;
    }
    """

    class Pressed(Message):
        """Posted when the button is clicked."""

        def __init__(self, button: "IconButton") -> None:
            super().__init__()
            self.button = button

        @property
        def verb(self) -> str:
            return self.button.verb

    def __init__(self, icon: str, verb: str, tooltip: str | None = None, **kwargs) -> None:
        super().__init__(icon, **kwargs)
        self.verb = verb
        if tooltip:
            self.tooltip = tooltip

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Pressed(self))
