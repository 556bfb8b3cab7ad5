"""Read-only lookups over an indexed puzzle."""

from __future__ import annotations

from typing import Optional, Set

from ..core.constants import Orientation
from ..core.models import Cell, PuzzleData, Word, cell_key


def cell_at(puzzle: PuzzleData, row: int, col: int) -> Optional[Cell]:
    return puzzle.grid.cell(row, col)


def word_containing(puzzle: PuzzleData, row: int, col: int, orientation: Orientation) -> Optional[Word]:
    """Return the word running through ``(row, col)`` in ``orientation``, if any."""
    cell = cell_at(puzzle, row, col)
    if cell is None or not cell.is_letter():
        return None
    word_id = cell.word_id(orientation)
    if word_id is None:
        return None
    return puzzle.word(orientation, word_id)


def active_word_cell_keys(puzzle: PuzzleData, row: int, col: int, orientation: Orientation) -> Set[str]:
    """Keys of the cells to highlight for the word through ``(row, col)``."""
    word = word_containing(puzzle, row, col, orientation)
    if word is None:
        return set()
    return {cell_key(r, c) for r, c in word.cells}
