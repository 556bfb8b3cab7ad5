"""The crossword bundled with the promotional page.

Clues are placeholders until the final copy lands; every word gets the
``"Across 4"`` / ``"Down 2"`` style default from the indexer.
"""

from __future__ import annotations

from typing import Tuple

from ..core.models import PuzzleData
from ..io.puzzle_file import PuzzleDefinition


TITLE = "Crossword"

# '.' marks black cells. 17 columns x 22 rows.
GRID_LAYOUT: Tuple[str, ...] = (
    "O...B..H.F...A.D.",
    "SYSTEMSTHINKER.A.",
    "L...K..M.X...G.S.",
    "O.C.ITALIA.SOUTH.",
    "N.U.N....T.C.E...",
    "O.R.DELIVEROO.JA.",
    "RUSK.......R...B.",
    "W.O..H....OPINION",
    "AFRICA.B...I...U.",
    "Y....DELTA.OWNIT.",
    "..A..E.A.N...E.M.",
    "..PRODUCTDESIGNER",
    "..P..A.K.R...R...",
    "..S.G..CROSSWORDS",
    "....R..A.I...N...",
    "...UIKIT.D.SKIING",
    ".F..D...L........",
    "VIPPS..NORWEGIAN.",
    ".G.A.C..N.H..D..B",
    ".M.S.O..D.I..E..A",
    ".AUTOLAYOUT.KAYAK",
    "...A.D..N.E..L..E",
)


def default_definition() -> PuzzleDefinition:
    return PuzzleDefinition(layout=list(GRID_LAYOUT), title=TITLE)


def default_puzzle() -> PuzzleData:
    """Build the bundled puzzle. Callers build it once and pass it around."""
    return default_definition().build()
