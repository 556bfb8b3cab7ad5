"""Apply typed letters and deletions to the answer map and advance the cursor."""

from __future__ import annotations

from typing import Dict, Optional

from ..core.models import Answers, PuzzleData, Selection, cell_key
from ..utils.logger import get_logger
from .lookup import cell_at
from .navigation import adjacent_word, first_unfilled_cell_in_adjacent_word, step_within_word
from .selection import SelectionStateMachine


LOGGER = get_logger(__name__)


class InputController:
    """Edits a session's answers and asks the navigation engine where to go next."""

    def __init__(
        self,
        puzzle: PuzzleData,
        selection: SelectionStateMachine,
        answers: Optional[Answers] = None,
    ) -> None:
        self.puzzle = puzzle
        self.selection = selection
        self.answers: Dict[str, str] = answers if answers is not None else {}

    def _selected_letter_cell(self) -> Optional[Selection]:
        current = self.selection.selection
        if current is None:
            return None
        cell = cell_at(self.puzzle, current.row, current.col)
        if cell is None or not cell.is_letter():
            return None
        return current

    def enter_letter(self, letter: str) -> bool:
        """Record ``letter`` at the selected cell and auto-advance.

        Returns ``False`` when nothing was recorded.
        """
        current = self._selected_letter_cell()
        if current is None or len(letter) != 1 or not letter.isalpha() or len(letter.upper()) != 1:
            return False

        self.answers[current.key] = letter.upper()

        following = step_within_word(self.puzzle, current.position, current.orientation)
        if following is None:
            following = first_unfilled_cell_in_adjacent_word(
                self.puzzle, current.position, current.orientation, self.answers
            )
        if following is not None:
            self.selection.select(following, current.orientation)
        LOGGER.debug("Entered %s at %s -> %s", letter.upper(), current.key, self.selection.selection)
        return True

    def delete(self) -> bool:
        """Clear the selected cell and step back, crossing into the previous word if needed."""
        current = self._selected_letter_cell()
        if current is None:
            return False

        self.answers.pop(current.key, None)

        previous = step_within_word(self.puzzle, current.position, current.orientation, reverse=True)
        if previous is not None:
            self.selection.select(previous, current.orientation)
        else:
            word = adjacent_word(self.puzzle, current.position, current.orientation, reverse=True)
            if word is not None:
                self.selection.select(word.end, current.orientation)
        LOGGER.debug("Cleared %s -> %s", current.key, self.selection.selection)
        return True

    def text_input(self, value: str) -> bool:
        """Handle a change of the hidden text input used by on-screen keyboards."""
        if not value:
            return self.delete()
        for char in reversed(value):
            if char.isalpha():
                return self.enter_letter(char)
        return False

    def answer_at(self, row: int, col: int) -> Optional[str]:
        return self.answers.get(cell_key(row, col))
