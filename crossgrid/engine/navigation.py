"""Keyboard and word-aware navigation over an indexed puzzle.

Every function here is a pure query. ``None`` means there is nowhere to go:
the position is off-grid, has no word in the requested orientation, or the
traversal reached a boundary. Callers treat it as "leave the selection as it
is".
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple

from ..core.constants import ARROW_STEPS, ArrowDirection, Orientation
from ..core.models import Position, PuzzleData, Word, cell_key
from .lookup import word_containing


def word_orientation_for(arrow: ArrowDirection) -> Orientation:
    """Left/right arrows navigate across words, up/down arrows down words."""
    if arrow in (ArrowDirection.LEFT, ArrowDirection.RIGHT):
        return Orientation.ACROSS
    return Orientation.DOWN


def adjacent_letter_cell(puzzle: PuzzleData, position: Position, arrow: ArrowDirection) -> Optional[Position]:
    """Step once in ``arrow`` direction, skipping over black cells.

    Stops with ``None`` at the grid edge; there is no wraparound.
    """
    dr, dc = ARROW_STEPS[arrow]
    grid = puzzle.grid
    row, col = position
    while True:
        row += dr
        col += dc
        cell = grid.cell(row, col)
        if cell is None:
            return None
        if cell.is_letter():
            return row, col


def step_within_word(
    puzzle: PuzzleData,
    position: Position,
    orientation: Orientation,
    reverse: bool = False,
) -> Optional[Position]:
    """Return the next (or previous) cell of the word containing ``position``."""
    word = word_containing(puzzle, position[0], position[1], orientation)
    if word is None:
        return None
    index = word.index_of(position)
    if index is None:
        return None
    target = index - 1 if reverse else index + 1
    if target < 0 or target >= word.length:
        return None
    return word.cells[target]


def _words_by_number(puzzle: PuzzleData, orientation: Orientation) -> Sequence[Word]:
    return sorted(puzzle.words(orientation), key=lambda word: word.clue_number)


def _index_in(words: Sequence[Word], word: Optional[Word]) -> Optional[int]:
    if word is None:
        return None
    for index, candidate in enumerate(words):
        if candidate.id == word.id:
            return index
    return None


def adjacent_word(
    puzzle: PuzzleData,
    position: Position,
    orientation: Orientation,
    reverse: bool = False,
) -> Optional[Word]:
    """Return the word after (or before) the one containing ``position``.

    Words are ordered by clue number. Running off the end of one orientation
    continues with the first (or, in reverse, last) word of the other, so
    repeated calls cycle through every word of the puzzle. A position with no
    word in ``orientation`` counts as sitting just before the first word, or
    just after the last word in reverse.
    """
    words = _words_by_number(puzzle, orientation)
    current = word_containing(puzzle, position[0], position[1], orientation)
    index = _index_in(words, current)
    if index is None:
        index = len(words) if reverse else -1

    target = index - 1 if reverse else index + 1
    if 0 <= target < len(words):
        return words[target]

    others = _words_by_number(puzzle, orientation.other)
    if others:
        return others[-1] if reverse else others[0]
    if words:
        # Single-orientation puzzle: wrap within the same list.
        return words[-1] if reverse else words[0]
    return None


def next_word(
    puzzle: PuzzleData,
    position: Position,
    orientation: Orientation,
    reverse: bool = False,
) -> Optional[Tuple[Position, Orientation]]:
    """Return the first cell and orientation of the adjacent word."""
    word = adjacent_word(puzzle, position, orientation, reverse)
    if word is None:
        return None
    return word.start, word.orientation


def first_unfilled_cell_in_adjacent_word(
    puzzle: PuzzleData,
    position: Position,
    orientation: Orientation,
    answers: Mapping[str, str],
    reverse: bool = False,
) -> Optional[Position]:
    """Find the first unanswered cell in the following (or preceding) words.

    The search stays within ``orientation`` and wraps around its word list,
    visiting the current word last. Returns ``None`` only when every cell of
    every word in that orientation has an answer.
    """
    words = _words_by_number(puzzle, orientation)
    if not words:
        return None
    current = word_containing(puzzle, position[0], position[1], orientation)
    index = _index_in(words, current)
    if index is None:
        index = len(words) if reverse else -1

    step = -1 if reverse else 1
    for offset in range(1, len(words) + 1):
        word = words[(index + step * offset) % len(words)]
        for row, col in word.cells:
            if cell_key(row, col) not in answers:
                return row, col
    return None


def first_cell(puzzle: PuzzleData) -> Optional[Position]:
    """Where a fresh session puts the cursor."""
    across = _words_by_number(puzzle, Orientation.ACROSS)
    if across:
        return across[0].start
    for cell in puzzle.grid.iter_cells():
        if cell.is_letter():
            return cell.position
    return None
