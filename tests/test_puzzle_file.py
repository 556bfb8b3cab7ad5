import json
import tempfile
import unittest
from pathlib import Path

from crossgrid.core.constants import Orientation
from crossgrid.core.exceptions import CrosswordError, PuzzleDefinitionError
from crossgrid.data.default_puzzle import GRID_LAYOUT, default_definition, default_puzzle
from crossgrid.engine.word_indexer import build_puzzle
from crossgrid.io.puzzle_file import (
    load_puzzle_definition,
    parse_puzzle_definition,
    puzzle_to_jsonable,
)


LAYOUT = ["CAT.D", "O.O.O", "WET.G"]


class PuzzleDefinitionTests(unittest.TestCase):
    def test_load_and_build(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "demo.json"
            path.write_text(
                json.dumps(
                    {
                        "title": "Demo",
                        "layout": LAYOUT,
                        "clues": {"across": {"1": "Pet"}, "down": {"3": "Barker"}},
                        "blocked": [[1, 2]],
                    }
                ),
                encoding="utf-8",
            )
            definition = load_puzzle_definition(path)

        self.assertEqual(definition.title, "Demo")
        self.assertEqual(definition.blocked, [(1, 2)])
        self.assertEqual(definition.clues[Orientation.ACROSS], {1: "Pet"})

        puzzle = definition.build()
        self.assertEqual(puzzle.title, "Demo")
        self.assertEqual(puzzle.across_words[0].clue, "Pet")
        # TOT is broken by the blocked cell, so DOG is renumbered to 2.
        self.assertEqual([w.clue_number for w in puzzle.down_words], [1, 2])
        self.assertEqual(puzzle.down_words[1].clue, "Down 2")

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(PuzzleDefinitionError):
                load_puzzle_definition(Path(tmpdir) / "missing.json")

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(CrosswordError):
                load_puzzle_definition(path)

    def test_structural_errors(self) -> None:
        for payload in (
            [],
            {},
            {"layout": "CAT"},
            {"layout": ["CAT", 3]},
            {"layout": ["CAT"], "title": 5},
            {"layout": ["CAT"], "clues": []},
            {"layout": ["CAT"], "clues": {"across": ["x"]}},
            {"layout": ["CAT"], "blocked": {"0": 1}},
            {"layout": ["CAT"], "markers": "#"},
        ):
            with self.subTest(payload=payload):
                with self.assertRaises(PuzzleDefinitionError):
                    parse_puzzle_definition(payload)

    def test_malformed_entries_are_skipped(self) -> None:
        definition = parse_puzzle_definition(
            {
                "layout": LAYOUT,
                "clues": {"across": {"one": "x", "4": "Damp"}},
                "blocked": [[0], ["a", 1], [True, 0], [2, 4]],
            }
        )
        self.assertEqual(definition.clues[Orientation.ACROSS], {4: "Damp"})
        self.assertEqual(definition.blocked, [(2, 4)])

    def test_custom_markers(self) -> None:
        definition = parse_puzzle_definition({"layout": ["AB#C?"], "markers": {"black": "#", "open": "?"}})
        puzzle = definition.build()
        self.assertEqual(len(puzzle.across_words), 2)
        self.assertIsNone(puzzle.grid.cell(0, 4).solution_letter)


class DefaultPuzzleTests(unittest.TestCase):
    def test_default_definition(self) -> None:
        definition = default_definition()
        self.assertEqual(definition.layout, list(GRID_LAYOUT))
        puzzle = default_puzzle()
        self.assertEqual(puzzle.title, definition.title)
        first = puzzle.across_words[0]
        self.assertEqual(first.start, (1, 0))
        self.assertEqual(first.clue_number, 7)
        self.assertEqual(first.clue, "Across 7")


class JsonExportTests(unittest.TestCase):
    def test_export_hides_letters_by_default(self) -> None:
        payload = puzzle_to_jsonable(build_puzzle(LAYOUT))
        self.assertEqual((payload["rows"], payload["cols"]), (3, 5))
        self.assertIsNone(payload["cells"][0][0]["letter"])
        self.assertEqual(payload["cells"][0][0]["clue_number"], 1)
        self.assertEqual(payload["cells"][0][3]["kind"], "BLACK")
        self.assertEqual(payload["across_words"][1]["cells"], [[2, 0], [2, 1], [2, 2]])
        self.assertEqual(payload["down_words"][2]["orientation"], "DOWN")
        json.dumps(payload)

    def test_export_reveal(self) -> None:
        payload = puzzle_to_jsonable(build_puzzle(LAYOUT), reveal=True)
        self.assertEqual(payload["cells"][2][4]["letter"], "G")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
