"""Text commands for driving a session from a terminal.

Each line is one command:

- a word such as ``cat`` types its letters one at a time;
- a leading ``=`` types the rest literally, so ``=down`` enters D, O, W, N
  instead of pressing the down arrow;
- ``-`` or ``backspace`` deletes;
- ``up`` / ``down`` / ``left`` / ``right`` are arrow keys;
- ``tab`` and ``shift-tab`` jump between words;
- ``3,4`` taps the cell at row 3, column 4;
- ``?`` enters nothing and only redraws.
"""

from __future__ import annotations

import re
from typing import Dict

from ..engine.session import PuzzleSession
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

QUIT_COMMANDS = frozenset({":q", "quit", "exit"})

_KEY_ALIASES: Dict[str, str] = {
    "up": "ArrowUp",
    "down": "ArrowDown",
    "left": "ArrowLeft",
    "right": "ArrowRight",
    "-": "Backspace",
    "backspace": "Backspace",
    "del": "Delete",
}
_TAP_PATTERN = re.compile(r"^\s*(\d+)\s*,\s*(\d+)\s*$")


def apply_command(session: PuzzleSession, command: str) -> bool:
    """Apply one command line to ``session``. Returns ``False`` if it was not understood."""
    text = command.strip()
    lowered = text.lower()
    if not text or lowered == "?":
        return True

    if text.startswith("="):
        return _type_letters(session, text[1:])

    tap = _TAP_PATTERN.match(text)
    if tap:
        session.tap(int(tap.group(1)), int(tap.group(2)))
        return True
    if lowered == "tab":
        return session.press_key("Tab")
    if lowered in ("shift-tab", "stab"):
        return session.press_key("Tab", shift=True)
    if lowered in _KEY_ALIASES:
        return session.press_key(_KEY_ALIASES[lowered])
    if _type_letters(session, text):
        return True

    LOGGER.warning("Unknown command %r", command)
    return False


def _type_letters(session: PuzzleSession, letters: str) -> bool:
    if not letters.isalpha():
        return False
    for letter in letters:
        session.press_key(letter)
    return True
