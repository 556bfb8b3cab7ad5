"""Turn a static text layout into a grid of typed cells."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import BLACK_MARKER, OPEN_MARKER, CellKind
from ..core.models import Cell, Grid, Position
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    """Characters with a special meaning inside layout rows."""

    black_marker: str = BLACK_MARKER
    open_marker: str = OPEN_MARKER


def build_grid(layout: Sequence[str], config: Optional[LayoutConfig] = None) -> Grid:
    """Create a Grid from layout rows.

    The grid is as wide as the longest row. Short rows, rows that are not
    strings, the black marker and any character that is neither a letter nor
    the open marker all produce black cells, so a malformed layout degrades
    instead of failing.
    """
    config = config or LayoutConfig()
    lines = [line if isinstance(line, str) else "" for line in layout]
    rows = len(lines)
    cols = max((len(line) for line in lines), default=0)

    cells: List[Tuple[Cell, ...]] = []
    for r, line in enumerate(lines):
        cells.append(tuple(_make_cell(r, c, _char_at(line, c), config) for c in range(cols)))

    LOGGER.debug("Built %sx%s grid from layout", rows, cols)
    return Grid(rows=rows, cols=cols, cells=tuple(cells))


def black_out(grid: Grid, positions: Iterable[Position]) -> Grid:
    """Return a copy of ``grid`` with the given positions turned black.

    Out-of-range positions are ignored.
    """
    targets = {(r, c) for r, c in positions if grid.bounds.contains(r, c)}
    if not targets:
        return grid
    cells = tuple(
        tuple(
            Cell(row=cell.row, col=cell.col) if (cell.row, cell.col) in targets else cell
            for cell in row
        )
        for row in grid.cells
    )
    LOGGER.debug("Blacked out %s cells", len(targets))
    return replace(grid, cells=cells)


def _char_at(line: str, col: int) -> Optional[str]:
    if col < 0 or col >= len(line):
        return None
    return line[col]


def _make_cell(row: int, col: int, char: Optional[str], config: LayoutConfig) -> Cell:
    if char is None or char == config.black_marker:
        return Cell(row=row, col=col)
    if char == config.open_marker:
        return Cell(row=row, col=col, kind=CellKind.LETTER)
    if char.isalpha() and len(char.upper()) == 1:
        return Cell(row=row, col=col, kind=CellKind.LETTER, solution_letter=char.upper())
    return Cell(row=row, col=col)
