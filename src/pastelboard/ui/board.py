"""Board screen showing the three columns."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer

from pastelboard.commands import Command, RenameCard
from pastelboard.model.board import Column
from pastelboard.session import Session, Snapshot
from pastelboard.ui.column import ColumnWidget
from pastelboard.ui.events import CommandRequested


class BoardScreen(Screen):
    """Main board screen. Re-renders from a snapshot after every command."""

    BINDINGS = [("ctrl+s", "save", "Save")]

    def __init__(self, session: Session):
        super().__init__()
        self.session = session
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        snapshot = self.session.snapshot()
        with Horizontal(id="columns"):
            for column in Column:
                yield ColumnWidget(column, snapshot[column])
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.session.subscribe(self._on_board_changed)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def column_widget(self, column: Column) -> ColumnWidget:
        return self.query_one(f"#column-{column.value}", ColumnWidget)

    def _on_board_changed(self, command: Command, snapshot: Snapshot) -> None:
        """Title edits only refresh counts; the edited Input keeps focus."""
        for column in Column:
            widget = self.column_widget(column)
            if isinstance(command, RenameCard):
                widget.show_count(snapshot.counts[column])
            else:
                widget.show(snapshot[column])
        if not self.session.last_save_ok:
            self.notify("Could not save board", severity="warning")

    def on_command_requested(self, event: CommandRequested) -> None:
        event.stop()
        self.session.dispatch(event.command)

    def action_save(self) -> None:
        if self.session.save():
            self.notify("Saved")
        else:
            self.notify("Could not save board", severity="warning")
