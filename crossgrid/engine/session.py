"""One user's interactive session over a puzzle.

The session owns the mutable state (answers and selection) and translates raw
UI events into state machine and input controller calls. Rendering layers read
``view()`` and ``display_letter()`` after each event.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from ..core.constants import ArrowDirection, Orientation
from ..core.models import PuzzleData, Selection, cell_key
from ..utils.logger import get_logger
from .input_controller import InputController
from .lookup import cell_at
from .navigation import first_cell
from .selection import SelectionStateMachine, supported_orientation


LOGGER = get_logger(__name__)

ARROW_KEYS: Dict[str, ArrowDirection] = {
    "ArrowUp": ArrowDirection.UP,
    "ArrowDown": ArrowDirection.DOWN,
    "ArrowLeft": ArrowDirection.LEFT,
    "ArrowRight": ArrowDirection.RIGHT,
}
DELETE_KEYS = frozenset({"Backspace", "Delete"})


@dataclass(frozen=True)
class SessionConfig:
    initial_orientation: Orientation = Orientation.ACROSS
    select_first_cell: bool = True


@dataclass(frozen=True)
class SessionView:
    """Snapshot of what the presentation layer needs to draw."""

    selection: Optional[Selection]
    active_word_id: Optional[int]
    active_orientation: Optional[Orientation]
    crossing_word_id: Optional[int]
    highlighted: FrozenSet[str]


class PuzzleSession:
    def __init__(self, puzzle: PuzzleData, config: Optional[SessionConfig] = None) -> None:
        self.puzzle = puzzle
        self.config = config or SessionConfig()
        self.answers: Dict[str, str] = {}
        start = first_cell(puzzle) if self.config.select_first_cell else None
        initial = None
        if start is not None:
            preferred = self.config.initial_orientation
            orientation = supported_orientation(cell_at(puzzle, *start), preferred) or preferred
            initial = Selection(row=start[0], col=start[1], orientation=orientation)
        self.selection = SelectionStateMachine(puzzle, initial)
        self.input = InputController(puzzle, self.selection, self.answers)

    @property
    def current(self) -> Optional[Selection]:
        return self.selection.selection

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def tap(self, row: int, col: int) -> Optional[Selection]:
        return self.selection.tap(row, col, default=self.config.initial_orientation)

    def press_key(self, key: str, shift: bool = False) -> bool:
        """Dispatch a key by its DOM-style name. Returns ``False`` for ignored keys."""
        if key in ARROW_KEYS:
            self.selection.press_arrow(ARROW_KEYS[key])
            return True
        if key == "Tab":
            self.selection.press_tab(reverse=shift)
            return True
        if key in DELETE_KEYS:
            return self.input.delete()
        if len(key) == 1 and key.isalpha():
            return self.input.enter_letter(key)
        LOGGER.debug("Ignoring key %r", key)
        return False

    def text_input(self, value: str) -> bool:
        return self.input.text_input(value)

    # ------------------------------------------------------------------
    # Rendering queries
    # ------------------------------------------------------------------
    def display_letter(self, row: int, col: int) -> str:
        return self.answers.get(cell_key(row, col), "")

    def active_word_cell_keys(self) -> FrozenSet[str]:
        word = self.selection.active_word()
        if word is None:
            return frozenset()
        return frozenset(cell_key(r, c) for r, c in word.cells)

    def view(self) -> SessionView:
        active = self.selection.active_word()
        crossing = self.selection.crossing_word()
        return SessionView(
            selection=self.current,
            active_word_id=active.id if active else None,
            active_orientation=active.orientation if active else None,
            crossing_word_id=crossing.id if crossing else None,
            highlighted=self.active_word_cell_keys(),
        )

    def filled_count(self) -> int:
        return len(self.answers)

    def letter_cell_count(self) -> int:
        return sum(1 for cell in self.puzzle.grid.iter_cells() if cell.is_letter())

    def is_complete(self) -> bool:
        """True once every cell that belongs to a word has an answer."""
        for word in self.puzzle.all_words():
            for row, col in word.cells:
                if cell_key(row, col) not in self.answers:
                    return False
        return True

    def is_correct(self, row: int, col: int) -> Optional[bool]:
        """Compare an answer with the solution letter; ``None`` when either is missing."""
        cell = cell_at(self.puzzle, row, col)
        answer = self.answers.get(cell_key(row, col))
        if cell is None or cell.solution_letter is None or answer is None:
            return None
        return answer == cell.solution_letter
