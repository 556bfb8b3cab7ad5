"""Data models shared by the grid builder, word indexer and navigation engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .constants import Bounds, CellKind, Orientation


Position = Tuple[int, int]
Answers = Dict[str, str]


def cell_key(row: int, col: int) -> str:
    """Return the ``"row,col"`` key used by answer maps and highlight sets."""
    return f"{row},{col}"


@dataclass(frozen=True)
class Cell:
    """Represents a grid cell with its indexing metadata."""

    row: int
    col: int
    kind: CellKind = CellKind.BLACK
    solution_letter: Optional[str] = None
    clue_number: Optional[int] = None
    across_word_id: Optional[int] = None
    down_word_id: Optional[int] = None

    @property
    def position(self) -> Position:
        return self.row, self.col

    def is_letter(self) -> bool:
        return self.kind == CellKind.LETTER

    def word_id(self, orientation: Orientation) -> Optional[int]:
        if orientation == Orientation.ACROSS:
            return self.across_word_id
        return self.down_word_id

    def has_word(self, orientation: Orientation) -> bool:
        return self.word_id(orientation) is not None


@dataclass(frozen=True)
class Word:
    """An indexed run of letter cells with its clue."""

    id: int
    orientation: Orientation
    clue_number: int
    clue: str
    cells: Tuple[Position, ...]

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def start(self) -> Position:
        return self.cells[0]

    @property
    def end(self) -> Position:
        return self.cells[-1]

    def index_of(self, position: Position) -> Optional[int]:
        try:
            return self.cells.index(position)
        except ValueError:
            return None


@dataclass(frozen=True)
class Grid:
    """A ``rows x cols`` matrix of cells."""

    rows: int
    cols: int
    cells: Tuple[Tuple[Cell, ...], ...] = ()

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.rows, cols=self.cols)

    def cell(self, row: int, col: int) -> Optional[Cell]:
        if not self.bounds.contains(row, col):
            return None
        return self.cells[row][col]

    def is_letter(self, row: int, col: int) -> bool:
        cell = self.cell(row, col)
        return cell is not None and cell.is_letter()

    def iter_cells(self):
        """Yield every cell in row-major order."""
        for row in self.cells:
            yield from row


@dataclass(frozen=True)
class PuzzleData:
    """Immutable result of building and indexing a layout."""

    grid: Grid
    across_words: Tuple[Word, ...] = ()
    down_words: Tuple[Word, ...] = ()
    title: str = ""

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def cols(self) -> int:
        return self.grid.cols

    def words(self, orientation: Orientation) -> Tuple[Word, ...]:
        if orientation == Orientation.ACROSS:
            return self.across_words
        return self.down_words

    def word(self, orientation: Orientation, word_id: int) -> Optional[Word]:
        words = self.words(orientation)
        if 0 <= word_id < len(words):
            return words[word_id]
        return None

    def all_words(self) -> Tuple[Word, ...]:
        return self.across_words + self.down_words


@dataclass(frozen=True)
class Selection:
    """The focused cell plus the orientation being navigated."""

    row: int
    col: int
    orientation: Orientation = Orientation.ACROSS

    @property
    def position(self) -> Position:
        return self.row, self.col

    @property
    def key(self) -> str:
        return cell_key(self.row, self.col)

    def moved_to(self, position: Position, orientation: Optional[Orientation] = None) -> "Selection":
        row, col = position
        return Selection(row=row, col=col, orientation=orientation or self.orientation)

    def with_orientation(self, orientation: Orientation) -> "Selection":
        return Selection(row=self.row, col=self.col, orientation=orientation)
