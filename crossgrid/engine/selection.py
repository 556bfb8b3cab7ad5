"""Selection state machine: how taps, arrows and tabs move the cursor."""

from __future__ import annotations

from typing import Optional

from ..core.constants import ArrowDirection, Orientation
from ..core.models import Cell, Position, PuzzleData, Selection, Word
from ..utils.logger import get_logger
from .lookup import cell_at, word_containing
from .navigation import adjacent_letter_cell, next_word, word_orientation_for


LOGGER = get_logger(__name__)


def supported_orientation(cell: Cell, preferred: Orientation) -> Optional[Orientation]:
    """Return ``preferred`` if the cell has a word that way, else the other one if it has."""
    if cell.has_word(preferred):
        return preferred
    if cell.has_word(preferred.other):
        return preferred.other
    return None


class SelectionStateMachine:
    """Holds the current selection for one session and applies user actions.

    Every action returns the resulting selection. Actions that cannot apply
    (a black cell tapped, an arrow pressed at the edge) leave it unchanged.
    """

    def __init__(self, puzzle: PuzzleData, selection: Optional[Selection] = None) -> None:
        self.puzzle = puzzle
        self.selection = selection

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def select(self, position: Position, orientation: Orientation) -> Optional[Selection]:
        """Move straight to ``position``; used by the input controller."""
        cell = cell_at(self.puzzle, *position)
        if cell is None or not cell.is_letter():
            return self.selection
        self.selection = Selection(row=position[0], col=position[1], orientation=orientation)
        return self.selection

    def tap(self, row: int, col: int, default: Orientation = Orientation.ACROSS) -> Optional[Selection]:
        cell = cell_at(self.puzzle, row, col)
        if cell is None or not cell.is_letter():
            LOGGER.debug("Ignoring tap on non-letter cell (%s,%s)", row, col)
            return self.selection

        current = self.selection
        orientation = current.orientation if current else default
        if current is not None and current.position == (row, col):
            if cell.has_word(Orientation.ACROSS) and cell.has_word(Orientation.DOWN):
                orientation = orientation.other
            # A cell with a single orientation keeps the current one.
        else:
            supported = supported_orientation(cell, Orientation.ACROSS)
            if not cell.has_word(orientation) and supported is not None:
                orientation = supported

        self.selection = Selection(row=row, col=col, orientation=orientation)
        LOGGER.debug("Tap -> %s", self.selection)
        return self.selection

    def press_arrow(self, arrow: ArrowDirection) -> Optional[Selection]:
        current = self.selection
        if current is None:
            return None

        implied = word_orientation_for(arrow)
        if implied != current.orientation:
            cell = cell_at(self.puzzle, current.row, current.col)
            if cell is not None and cell.has_word(implied):
                self.selection = current.with_orientation(implied)
                LOGGER.debug("Arrow %s switches orientation to %s", arrow.value, implied.value)
                return self.selection

        destination = adjacent_letter_cell(self.puzzle, current.position, arrow)
        if destination is None:
            return current
        target = cell_at(self.puzzle, *destination)
        orientation = implied
        if target is not None:
            orientation = supported_orientation(target, implied) or implied
        self.selection = current.moved_to(destination, orientation)
        LOGGER.debug("Arrow %s -> %s", arrow.value, self.selection)
        return self.selection

    def press_tab(self, reverse: bool = False) -> Optional[Selection]:
        current = self.selection
        if current is None:
            return None
        found = next_word(self.puzzle, current.position, current.orientation, reverse)
        if found is None:
            return current
        position, orientation = found
        self.selection = current.moved_to(position, orientation)
        LOGGER.debug("Tab%s -> %s", " (reverse)" if reverse else "", self.selection)
        return self.selection

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def active_word(self) -> Optional[Word]:
        """Word in the current orientation, falling back to the other one."""
        current = self.selection
        if current is None:
            return None
        return word_containing(
            self.puzzle, current.row, current.col, current.orientation
        ) or word_containing(self.puzzle, current.row, current.col, current.orientation.other)

    def crossing_word(self) -> Optional[Word]:
        """Word in the opposite orientation, unless it already is the active word."""
        current = self.selection
        if current is None:
            return None
        if word_containing(self.puzzle, current.row, current.col, current.orientation) is None:
            return None
        return word_containing(self.puzzle, current.row, current.col, current.orientation.other)
