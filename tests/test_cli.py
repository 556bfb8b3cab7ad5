import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from crossgrid.core.constants import Orientation
from crossgrid.core.models import Selection
from crossgrid.engine.session import PuzzleSession
from crossgrid.engine.word_indexer import build_puzzle
from crossgrid.io.commands import apply_command
from crossgrid.utils.pretty import format_clues, format_grid, pretty_print_session

import main


LAYOUT = ["CAT.D", "O.O.O", "WET.G"]


class CommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = PuzzleSession(build_puzzle(LAYOUT))

    def test_typing_and_navigation_commands(self) -> None:
        self.assertTrue(apply_command(self.session, "ca"))
        self.assertEqual(self.session.current, Selection(0, 2, Orientation.ACROSS))
        self.assertTrue(apply_command(self.session, "-"))
        self.assertEqual(self.session.current, Selection(0, 1, Orientation.ACROSS))
        self.assertTrue(apply_command(self.session, "tab"))
        self.assertEqual(self.session.current, Selection(2, 0, Orientation.ACROSS))
        self.assertTrue(apply_command(self.session, "shift-tab"))
        self.assertEqual(self.session.current, Selection(0, 0, Orientation.ACROSS))
        self.assertTrue(apply_command(self.session, "down"))
        self.assertEqual(self.session.current, Selection(0, 0, Orientation.DOWN))
        self.assertTrue(apply_command(self.session, " 1, 4 "))
        self.assertEqual(self.session.current, Selection(1, 4, Orientation.DOWN))
        self.assertEqual(self.session.answers, {"0,0": "C", "0,1": "A"})

    def test_equals_prefix_types_command_words(self) -> None:
        session = PuzzleSession(build_puzzle(["DOWN", "....", "TAB."]))
        self.assertTrue(apply_command(session, "=down"))
        self.assertEqual(session.answers, {"0,0": "D", "0,1": "O", "0,2": "W", "0,3": "N"})
        self.assertTrue(apply_command(session, "=Tab"))
        self.assertEqual(session.display_letter(2, 2), "B")
        self.assertFalse(apply_command(session, "=1"))

    def test_unknown_command(self) -> None:
        self.assertFalse(apply_command(self.session, "#!"))
        self.assertTrue(apply_command(self.session, "?"))
        self.assertTrue(apply_command(self.session, ""))


class PrettyTests(unittest.TestCase):
    def test_format_grid_marks_selection_and_word(self) -> None:
        session = PuzzleSession(build_puzzle(LAYOUT))
        session.press_key("C")
        view = session.view()
        rendered = format_grid(
            session.puzzle, session.answers, view.selection, view.highlighted
        )
        lines = rendered.splitlines()
        self.assertEqual(len(lines), 2 + 3)
        self.assertIn("*C ", lines[2])
        self.assertIn("[.]", lines[2])
        self.assertIn(" # ", lines[2])

    def test_format_grid_reveal(self) -> None:
        rendered = format_grid(build_puzzle(LAYOUT), reveal=True)
        self.assertIn(" G ", rendered.splitlines()[-1])

    def test_format_clues(self) -> None:
        text = format_clues(build_puzzle(LAYOUT), active=(Orientation.DOWN, 1))
        self.assertIn("Across", text)
        self.assertIn("   4. Across 4 (3)", text)
        self.assertIn(" >  2. Down 2 (3)", text)

    def test_pretty_print_session(self) -> None:
        stream = io.StringIO()
        pretty_print_session(PuzzleSession(build_puzzle(LAYOUT)), stream=stream)
        output = stream.getvalue()
        self.assertIn("1 Across: Across 1", output)
        self.assertIn("Filled 0/11", output)


class MainTests(unittest.TestCase):
    def test_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "demo.json"
            path.write_text(json.dumps({"title": "Demo", "layout": LAYOUT}), encoding="utf-8")
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                code = main.main(["--puzzle", str(path), "--json"])
        self.assertEqual(code, 0)
        payload = json.loads(buffer.getvalue())
        self.assertEqual(payload["title"], "Demo")
        self.assertEqual(len(payload["down_words"]), 3)

    def test_missing_puzzle_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            code = main.main(["--puzzle", str(Path(tmpdir) / "nope.json"), "--log-level", "CRITICAL"])
        self.assertEqual(code, 1)

    def test_unwritable_output_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "missing-dir" / "out.json"
            code = main.main(["--output", str(target), "--log-level", "CRITICAL"])
            self.assertFalse(target.exists())
        self.assertEqual(code, 1)

    def test_output_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "out.json"
            code = main.main(["--output", str(target), "--log-level", "CRITICAL"])
            payload = json.loads(target.read_text(encoding="utf-8"))
        self.assertEqual(code, 0)
        self.assertEqual((payload["rows"], payload["cols"]), (22, 17))

    def test_play_loop(self) -> None:
        session = PuzzleSession(build_puzzle(LAYOUT))
        stream = io.StringIO()
        main.play(session, ["cat", "???", "quit", "wet"], stream)
        self.assertEqual(session.answers, {"0,0": "C", "0,1": "A", "0,2": "T"})
        self.assertIn("Unknown command: ???", stream.getvalue())

    def test_default_puzzle_printout(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main.main([])
        self.assertEqual(code, 0)
        self.assertIn("Crossword", buffer.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
