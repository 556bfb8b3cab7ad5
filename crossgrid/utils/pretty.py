"""Plain-text rendering of puzzles and sessions for the CLI."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Mapping, Optional

from ..core.constants import Orientation
from ..core.models import Cell, cell_key
from ..io.puzzle_file import clue_list

if TYPE_CHECKING:
    from ..core.models import PuzzleData, Selection
    from ..engine.session import PuzzleSession


BLACK_SYMBOL = "#"
EMPTY_SYMBOL = "."


def cell_symbol(cell: Cell, answers: Optional[Mapping[str, str]] = None, reveal: bool = False) -> str:
    if not cell.is_letter():
        return BLACK_SYMBOL
    if answers:
        answer = answers.get(cell_key(cell.row, cell.col))
        if answer:
            return answer
    if reveal and cell.solution_letter:
        return cell.solution_letter
    return EMPTY_SYMBOL


def format_grid(
    puzzle: PuzzleData,
    answers: Optional[Mapping[str, str]] = None,
    selection: Optional[Selection] = None,
    highlighted: frozenset = frozenset(),
    reveal: bool = False,
) -> str:
    """Render the grid; the selected cell is bracketed, its word marked with ``*``."""
    width = puzzle.cols
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r in range(puzzle.rows):
        rendered: List[str] = []
        for c in range(width):
            cell = puzzle.grid.cells[r][c]
            symbol = cell_symbol(cell, answers, reveal)
            if selection is not None and selection.position == (r, c):
                rendered.append(f"[{symbol}]")
            elif cell_key(r, c) in highlighted:
                rendered.append(f"*{symbol} ")
            else:
                rendered.append(f" {symbol} ")
        lines.append(f"{r:>2} |" + "".join(rendered))
    return "\n".join(lines)


def format_clues(puzzle: PuzzleData, active: Optional[tuple] = None) -> str:
    """List clues per orientation; ``active`` is ``(orientation, word_id)`` to mark."""
    lines: List[str] = []
    for orientation in Orientation:
        if lines:
            lines.append("")
        lines.append(orientation.label)
        for word, (number, text) in zip(puzzle.words(orientation), clue_list(puzzle, orientation)):
            marker = ">" if active == (orientation, word.id) else " "
            lines.append(f" {marker}{number:>3}. {text} ({word.length})")
    return "\n".join(lines)


def pretty_print_puzzle(puzzle: PuzzleData, *, reveal: bool = False, stream=None) -> None:
    stream = stream or sys.stdout
    if puzzle.title:
        print(puzzle.title, file=stream)
    print(format_grid(puzzle, reveal=reveal), file=stream)
    print(file=stream)
    print(format_clues(puzzle), file=stream)


def pretty_print_session(session: PuzzleSession, *, stream=None) -> None:
    """Print the grid with answers, selection and the active clue."""

    stream = stream or sys.stdout
    view = session.view()
    print(
        format_grid(
            session.puzzle,
            answers=session.answers,
            selection=view.selection,
            highlighted=view.highlighted,
        ),
        file=stream,
    )
    if view.selection is not None and view.active_orientation is not None:
        word = session.puzzle.word(view.active_orientation, view.active_word_id)
        if word is not None:
            print(f"{word.clue_number} {word.orientation.label}: {word.clue}", file=stream)
    print(
        f"Filled {session.filled_count()}/{session.letter_cell_count()}",
        file=stream,
    )
