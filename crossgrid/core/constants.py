"""Shared constants and enumerations for the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


BLACK_MARKER = "."
OPEN_MARKER = "_"


class CellKind(str, Enum):
    """All supported cell kinds in the grid."""

    LETTER = "LETTER"
    BLACK = "BLACK"


class Orientation(str, Enum):
    """Axis along which a word reads."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def other(self) -> "Orientation":
        return Orientation.DOWN if self is Orientation.ACROSS else Orientation.ACROSS

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ArrowDirection(str, Enum):
    """Raw cursor directions produced by arrow keys."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


ARROW_STEPS: Dict[ArrowDirection, Tuple[int, int]] = {
    ArrowDirection.UP: (-1, 0),
    ArrowDirection.DOWN: (1, 0),
    ArrowDirection.LEFT: (0, -1),
    ArrowDirection.RIGHT: (0, 1),
}

ORIENTATION_STEPS: Dict[Orientation, Tuple[int, int]] = {
    Orientation.ACROSS: (0, 1),
    Orientation.DOWN: (1, 0),
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
