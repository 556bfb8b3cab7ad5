"""Index across/down words over a built grid and assign clue numbers."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import ORIENTATION_STEPS, Orientation
from ..core.models import Cell, Grid, Position, PuzzleData, Word
from ..utils.logger import get_logger
from .grid_builder import LayoutConfig, black_out, build_grid


LOGGER = get_logger(__name__)

Run = Tuple[Position, ...]
ClueTexts = Mapping[Orientation, Mapping[int, str]]


def build_puzzle(
    layout: Sequence[str],
    clues: Optional[ClueTexts] = None,
    blocked: Iterable[Position] = (),
    config: Optional[LayoutConfig] = None,
    title: str = "",
) -> PuzzleData:
    """Build, index and number a puzzle in one pass.

    ``blocked`` lists cells blacked out after the initial indexing. Words they
    break are dropped rather than re-split, and numbering runs over what is
    left.
    """
    grid = build_grid(layout, config)
    across_runs = scan_runs(grid, Orientation.ACROSS)
    down_runs = scan_runs(grid, Orientation.DOWN)

    blocked = list(blocked)
    if blocked:
        grid = black_out(grid, blocked)
    across_runs = prune_runs(grid, across_runs, Orientation.ACROSS)
    down_runs = prune_runs(grid, down_runs, Orientation.DOWN)

    puzzle = index_words(grid, across_runs, down_runs, clues=clues, title=title)
    LOGGER.info(
        "Indexed %sx%s puzzle: %s across, %s down",
        puzzle.rows,
        puzzle.cols,
        len(puzzle.across_words),
        len(puzzle.down_words),
    )
    return puzzle


def starts_word(grid: Grid, row: int, col: int, orientation: Orientation) -> bool:
    """Previous cell is black/edge AND next cell is a letter."""
    if not grid.is_letter(row, col):
        return False
    dr, dc = ORIENTATION_STEPS[orientation]
    return not grid.is_letter(row - dr, col - dc) and grid.is_letter(row + dr, col + dc)


def scan_runs(grid: Grid, orientation: Orientation) -> List[Run]:
    """Collect every maximal letter run of length >= 2.

    Across runs come out row-major, down runs column-major.
    """
    runs: List[Run] = []
    if orientation == Orientation.ACROSS:
        coords = ((r, c) for r in range(grid.rows) for c in range(grid.cols))
    else:
        coords = ((r, c) for c in range(grid.cols) for r in range(grid.rows))
    for row, col in coords:
        if starts_word(grid, row, col, orientation):
            runs.append(_collect_run(grid, row, col, orientation))
    return runs


def _collect_run(grid: Grid, row: int, col: int, orientation: Orientation) -> Run:
    dr, dc = ORIENTATION_STEPS[orientation]
    cells: List[Position] = []
    r, c = row, col
    while grid.is_letter(r, c):
        cells.append((r, c))
        r += dr
        c += dc
    return tuple(cells)


def is_valid_run(grid: Grid, run: Run, orientation: Orientation) -> bool:
    """A run is valid while it is still a contiguous letter run of length >= 2."""
    if len(run) < 2:
        return False
    dr, dc = ORIENTATION_STEPS[orientation]
    for (r1, c1), (r2, c2) in zip(run, run[1:]):
        if (r2 - r1, c2 - c1) != (dr, dc):
            return False
    return all(grid.is_letter(r, c) for r, c in run)


def prune_runs(grid: Grid, runs: Sequence[Run], orientation: Orientation) -> List[Run]:
    kept = [run for run in runs if is_valid_run(grid, run, orientation)]
    dropped = len(runs) - len(kept)
    if dropped:
        LOGGER.debug("Dropped %s %s fragments after grid edits", dropped, orientation.value.lower())
    return kept


def assign_clue_numbers(grid: Grid, runs: Iterable[Run]) -> Dict[Position, int]:
    """Scan L->R, T->B and number every cell that starts a retained word."""
    starts = {run[0] for run in runs}
    numbers: Dict[Position, int] = {}
    counter = 1
    for r in range(grid.rows):
        for c in range(grid.cols):
            if (r, c) in starts:
                numbers[(r, c)] = counter
                counter += 1
    return numbers


def default_clue(orientation: Orientation, clue_number: int) -> str:
    return f"{orientation.label} {clue_number}"


def index_words(
    grid: Grid,
    across_runs: Sequence[Run],
    down_runs: Sequence[Run],
    clues: Optional[ClueTexts] = None,
    title: str = "",
) -> PuzzleData:
    """Number the runs, turn them into Words and back-link every cell."""
    numbers = assign_clue_numbers(grid, list(across_runs) + list(down_runs))
    clues = clues or {}

    words_by_orientation: Dict[Orientation, Tuple[Word, ...]] = {}
    word_ids: Dict[Orientation, Dict[Position, int]] = {}
    for orientation, runs in ((Orientation.ACROSS, across_runs), (Orientation.DOWN, down_runs)):
        texts = clues.get(orientation, {})
        ordered = sorted(runs, key=lambda run: numbers[run[0]])
        words: List[Word] = []
        ids: Dict[Position, int] = {}
        for word_id, run in enumerate(ordered):
            number = numbers[run[0]]
            words.append(
                Word(
                    id=word_id,
                    orientation=orientation,
                    clue_number=number,
                    clue=texts.get(number) or default_clue(orientation, number),
                    cells=run,
                )
            )
            for position in run:
                ids[position] = word_id
        words_by_orientation[orientation] = tuple(words)
        word_ids[orientation] = ids

    cells = tuple(
        tuple(_link_cell(cell, numbers, word_ids) for cell in row) for row in grid.cells
    )
    return PuzzleData(
        grid=replace(grid, cells=cells),
        across_words=words_by_orientation[Orientation.ACROSS],
        down_words=words_by_orientation[Orientation.DOWN],
        title=title,
    )


def _link_cell(
    cell: Cell,
    numbers: Mapping[Position, int],
    word_ids: Mapping[Orientation, Mapping[Position, int]],
) -> Cell:
    if not cell.is_letter():
        return cell
    position = cell.position
    return replace(
        cell,
        clue_number=numbers.get(position),
        across_word_id=word_ids[Orientation.ACROSS].get(position),
        down_word_id=word_ids[Orientation.DOWN].get(position),
    )
