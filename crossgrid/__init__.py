"""Crossword grid model and navigation engine.

This package exposes the public API surface via:

- ``crossgrid.engine.word_indexer.build_puzzle``: layout -> indexed ``PuzzleData``.
- ``crossgrid.engine.navigation``: pure cursor and word traversal queries.
- ``crossgrid.engine.session.PuzzleSession``: answers + selection for one user.
"""

from .core.constants import ArrowDirection, CellKind, Orientation
from .core.models import Cell, Grid, PuzzleData, Selection, Word, cell_key
from .engine.lookup import active_word_cell_keys, cell_at, word_containing
from .engine.session import PuzzleSession, SessionConfig
from .engine.word_indexer import build_puzzle

__all__ = [
    "ArrowDirection",
    "CellKind",
    "Orientation",
    "Cell",
    "Grid",
    "PuzzleData",
    "Selection",
    "Word",
    "cell_key",
    "active_word_cell_keys",
    "cell_at",
    "word_containing",
    "PuzzleSession",
    "SessionConfig",
    "build_puzzle",
]

__version__ = "0.1.0"
