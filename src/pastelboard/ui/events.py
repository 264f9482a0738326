"""Messages posted by board widgets."""

from __future__ import annotations

from textual.message import Message

from pastelboard.commands import Command


class CommandRequested(Message):
    """A widget asks the board screen to run a command."""

    def __init__(self, command: Command) -> None:
        super().__init__()
        self.command = command
