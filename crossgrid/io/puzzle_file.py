"""Puzzle definition files and frontend-ready JSON export.

A definition file is a JSON document::

    {
      "title": "Demo",
      "layout": ["CAT.D", "O.O.O", "WET.G"],
      "clues": {"across": {"1": "Pet"}, "down": {"3": "Barker"}},
      "blocked": [[1, 2]]
    }

Only ``layout`` is required. ``blocked`` lists cells blacked out after
indexing; words they break are dropped.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from ..core.constants import Orientation
from ..core.exceptions import PuzzleDefinitionError
from ..core.models import Position, PuzzleData, Word
from ..engine.grid_builder import LayoutConfig
from ..engine.word_indexer import build_puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class PuzzleDefinition:
    """Everything needed to build a puzzle."""

    layout: List[str]
    title: str = ""
    clues: Dict[Orientation, Dict[int, str]] = field(default_factory=dict)
    blocked: List[Position] = field(default_factory=list)
    layout_config: LayoutConfig = field(default_factory=LayoutConfig)

    def build(self) -> PuzzleData:
        return build_puzzle(
            self.layout,
            clues=self.clues,
            blocked=self.blocked,
            config=self.layout_config,
            title=self.title,
        )


def load_puzzle_definition(path: Path | str) -> PuzzleDefinition:
    """Read and validate a puzzle definition file."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PuzzleDefinitionError(f"Cannot read puzzle file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PuzzleDefinitionError(f"Invalid JSON in {path}: {exc}") from exc
    definition = parse_puzzle_definition(payload)
    LOGGER.info("Loaded puzzle definition %s (%s rows)", path, len(definition.layout))
    return definition


def parse_puzzle_definition(payload: Any) -> PuzzleDefinition:
    if not isinstance(payload, dict):
        raise PuzzleDefinitionError("Puzzle definition must be a JSON object")

    layout = payload.get("layout")
    if not isinstance(layout, list) or not all(isinstance(line, str) for line in layout):
        raise PuzzleDefinitionError("'layout' must be a list of strings")

    title = payload.get("title") or ""
    if not isinstance(title, str):
        raise PuzzleDefinitionError("'title' must be a string")

    markers = payload.get("markers")
    if markers is None:
        markers = {}
    if not isinstance(markers, dict):
        raise PuzzleDefinitionError("'markers' must be an object")
    layout_config = LayoutConfig(
        black_marker=str(markers.get("black", LayoutConfig.black_marker)),
        open_marker=str(markers.get("open", LayoutConfig.open_marker)),
    )

    return PuzzleDefinition(
        layout=list(layout),
        title=title,
        clues=_parse_clues(payload.get("clues")),
        blocked=_parse_blocked(payload.get("blocked")),
        layout_config=layout_config,
    )


def _parse_clues(raw: Any) -> Dict[Orientation, Dict[int, str]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise PuzzleDefinitionError("'clues' must be an object keyed by 'across'/'down'")
    clues: Dict[Orientation, Dict[int, str]] = {}
    for orientation in Orientation:
        entries = raw.get(orientation.value.lower())
        if entries is None:
            entries = {}
        if not isinstance(entries, dict):
            raise PuzzleDefinitionError(f"'clues.{orientation.value.lower()}' must be an object")
        parsed: Dict[int, str] = {}
        for number, text in entries.items():
            try:
                parsed[int(number)] = str(text)
            except ValueError:
                LOGGER.warning("Skipping %s clue with non-numeric key %r", orientation.label, number)
        clues[orientation] = parsed
    return clues


def _parse_blocked(raw: Any) -> List[Position]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise PuzzleDefinitionError("'blocked' must be a list of [row, col] pairs")
    blocked: List[Position] = []
    for entry in raw:
        if (
            isinstance(entry, (list, tuple))
            and len(entry) == 2
            and all(isinstance(value, int) and not isinstance(value, bool) for value in entry)
        ):
            blocked.append((entry[0], entry[1]))
        else:
            LOGGER.warning("Skipping malformed blocked cell %r", entry)
    return blocked


# ----------------------------------------------------------------------
# Export
# ----------------------------------------------------------------------
def _serialize_word(word: Word) -> Dict[str, Any]:
    return {
        "id": word.id,
        "orientation": word.orientation.value,
        "clue_number": word.clue_number,
        "clue": word.clue,
        "cells": [[r, c] for r, c in word.cells],
    }


def puzzle_to_jsonable(puzzle: PuzzleData, reveal: bool = False) -> Dict[str, Any]:
    """Serialize an indexed puzzle for a rendering layer.

    Solution letters are omitted unless ``reveal`` is set.
    """
    cells: List[List[Dict[str, Any]]] = []
    for row in puzzle.grid.cells:
        serialized_row: List[Dict[str, Any]] = []
        for cell in row:
            serialized_row.append(
                {
                    "row": cell.row,
                    "col": cell.col,
                    "kind": cell.kind.value,
                    "letter": cell.solution_letter if reveal else None,
                    "clue_number": cell.clue_number,
                    "across_word_id": cell.across_word_id,
                    "down_word_id": cell.down_word_id,
                }
            )
        cells.append(serialized_row)
    return {
        "title": puzzle.title,
        "rows": puzzle.rows,
        "cols": puzzle.cols,
        "cells": cells,
        "across_words": [_serialize_word(word) for word in puzzle.across_words],
        "down_words": [_serialize_word(word) for word in puzzle.down_words],
    }


def clue_list(puzzle: PuzzleData, orientation: Orientation) -> List[Tuple[int, str]]:
    return [(word.clue_number, word.clue) for word in puzzle.words(orientation)]

