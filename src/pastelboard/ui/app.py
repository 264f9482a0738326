"""Main Textual application for pastelboard."""

from textual.app import App

from pastelboard.session import Session
from pastelboard.ui.board import BoardScreen


class PastelApp(App):
    """Three-column kanban board TUI."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "pastelboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, session: Session):
        super().__init__()
        self.session = session

    def on_mount(self) -> None:
        self.push_screen(BoardScreen(self.session))

    async def action_quit(self) -> None:
        """Save and quit."""
        self.session.close()
        self.exit()
