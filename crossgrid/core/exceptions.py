"""Custom exception hierarchy for the crossword engine.

The engine itself reports degenerate situations by returning ``None``; these
exceptions only cover loading puzzle definitions from disk.
"""


class CrosswordError(Exception):
    """Base exception for crossword failures."""


class PuzzleDefinitionError(CrosswordError):
    """Raised when a puzzle definition file cannot be read or parsed."""
