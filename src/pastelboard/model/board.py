"""Board state: three fixed columns of ordered cards."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Mapping

from pastelboard.palette import random_color

ColorFactory = Callable[[], str]

LABELS = {"todo": "To do", "doing": "Doing", "done": "Done"}


class Column(str, Enum):
    """The three board stages, in display order."""

    TODO = "todo"
    DOING = "doing"
    DONE = "done"

    @property
    def label(self) -> str:
        return LABELS[self.value]

    @property
    def index(self) -> int:
        return list(Column).index(self)

    def neighbour(self, direction: int) -> Column | None:
        """Adjacent column in the given direction, or None past either edge."""
        order = list(Column)
        target = self.index + direction
        if target < 0 or target >= len(order):
            return None
        return order[target]

    @classmethod
    def parse(cls, name: str) -> Column | None:
        """Look up a column by value, case-insensitively."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Card:
    """A single work item. Replaced, never mutated, when it changes."""

    id: str
    title: str
    color: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class Board:
    """Ordered cards per column.

    All three columns always exist. Column contents are only ever
    replaced wholesale through ``_assign``, so a mutation is either
    fully visible or not at all.
    """

    def __init__(
        self,
        columns: Mapping[Column, Iterable[Card]] | None = None,
        new_color: ColorFactory = random_color,
    ) -> None:
        self._columns: dict[Column, tuple[Card, ...]] = {c: () for c in Column}
        self._version = 0
        self.new_color = new_color
        for column, cards in (columns or {}).items():
            self._columns[Column(column)] = tuple(cards)

    def __getitem__(self, column: Column | str) -> tuple[Card, ...]:
        return self._columns[Column(column)]

    def __iter__(self) -> Iterator[tuple[Column, tuple[Card, ...]]]:
        return iter(self._columns.items())

    def __len__(self) -> int:
        return sum(len(cards) for cards in self._columns.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._columns == other._columns

    def _assign(self, column: Column, cards: Iterable[Card]) -> None:
        """Replace a column's cards in one step."""
        self._columns[column] = tuple(cards)
        self._version += 1

    @property
    def version(self) -> int:
        """Incremented on every change."""
        return self._version

    def index_of(self, column: Column, card_id: str) -> int | None:
        """Position of a card within a column, or None."""
        for i, card in enumerate(self._columns[column]):
            if card.id == card_id:
                return i
        return None

    def find_card_column(self, card_id: str) -> Column | None:
        """Find the column holding a card."""
        for column, cards in self._columns.items():
            if any(card.id == card_id for card in cards):
                return column
        return None

    def ids(self) -> list[str]:
        """All card IDs, in column then display order."""
        return [card.id for cards in self._columns.values() for card in cards]

    def counts(self) -> dict[Column, int]:
        return {column: len(cards) for column, cards in self._columns.items()}

    def __repr__(self) -> str:
        counts = ", ".join(f"{c.value}={n}" for c, n in self.counts().items())
        return f"<Board [{counts}]>"
