"""CLI entrypoint: print a crossword or play it in the terminal."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from crossgrid.core.exceptions import CrosswordError
from crossgrid.data.default_puzzle import default_definition
from crossgrid.engine.session import PuzzleSession
from crossgrid.io.commands import QUIT_COMMANDS, apply_command
from crossgrid.io.puzzle_file import load_puzzle_definition, puzzle_to_jsonable
from crossgrid.utils.logger import configure_logging, get_logger
from crossgrid.utils.pretty import pretty_print_puzzle, pretty_print_session


LOGGER = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show or play a crossword puzzle",
    )
    parser.add_argument(
        "--puzzle",
        type=Path,
        metavar="FILE",
        help="JSON puzzle definition (defaults to the bundled puzzle)",
    )
    parser.add_argument("--reveal", action="store_true", help="Show solution letters")
    parser.add_argument("--json", action="store_true", help="Print the indexed puzzle as JSON")
    parser.add_argument("--output", type=Path, help="Write the JSON output to this path")
    parser.add_argument(
        "--play",
        action="store_true",
        help="Read navigation commands from stdin and redraw after each one",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def play(session: PuzzleSession, commands: Iterable[str], stream: TextIO) -> None:
    pretty_print_session(session, stream=stream)
    for line in commands:
        if line.strip().lower() in QUIT_COMMANDS:
            break
        if not apply_command(session, line):
            print(f"Unknown command: {line.strip()}", file=stream)
            continue
        pretty_print_session(session, stream=stream)
        if session.is_complete():
            print("All cells filled.", file=stream)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        definition = load_puzzle_definition(args.puzzle) if args.puzzle else default_definition()
    except CrosswordError as exc:
        LOGGER.error("%s", exc)
        return 1
    puzzle = definition.build()

    if args.json or args.output:
        output_text = json.dumps(puzzle_to_jsonable(puzzle, reveal=args.reveal), ensure_ascii=False, indent=2)
        if args.output:
            try:
                args.output.write_text(output_text, encoding="utf-8")
            except OSError as exc:
                LOGGER.error("Could not write %s: %s", args.output, exc)
                return 1
            LOGGER.info("Wrote puzzle JSON to %s", args.output)
        else:
            print(output_text)
        return 0

    if args.play:
        play(PuzzleSession(puzzle), sys.stdin, sys.stdout)
        return 0

    pretty_print_puzzle(puzzle, reveal=args.reveal)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
