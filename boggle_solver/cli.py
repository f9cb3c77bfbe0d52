"""
Command-line Boggle solver.

Usage:
    boggle-solve <letters> [--width W --height H] [--dictionary PATH | --words WORD ...]

Examples:
    boggle-solve yoxrbaved
    boggle-solve dzxeai --width 3 --height 2 --words daze zeda daxi
    boggle-solve catsrepobonedigs --dictionary /usr/share/dict/words --timing

Letters fill the board row by row. When only the letters are given, the board
is assumed to be square. Found words are printed alphabetically, one per line.
"""
import argparse
import logging
import math
import sys

from boggle_solver.errors import BoggleError
from boggle_solver.metrics import StageTimer
from boggle_solver.settings import settings
from boggle_solver.solver import Boggle, load_words

logger = logging.getLogger("boggle")


def _board_dims(parser: argparse.ArgumentParser, args) -> tuple[int, int]:
    if args.width is not None and args.height is not None:
        return args.width, args.height
    if args.width is not None or args.height is not None:
        parser.error("--width and --height must be given together")
    side = math.isqrt(len(args.letters))
    if side == 0 or side * side != len(args.letters):
        parser.error(f"{len(args.letters)} letters do not make a square board; pass --width and --height")
    return side, side


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find every legal word on a Boggle board")
    parser.add_argument("letters", help="Board letters, row by row, without separators")
    parser.add_argument("--width", type=int, default=None, help="Number of columns")
    parser.add_argument("--height", type=int, default=None, help="Number of rows")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help=f"Word list, one word per line (default: {settings.DICTIONARY_PATH})")
    source.add_argument("--words", nargs="+", default=None,
                        help="Use these words as the dictionary instead of a file")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Ignore dictionary words shorter than this (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--timing", action="store_true", help="Print the solve time in milliseconds")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    width, height = _board_dims(parser, args)

    timer = StageTimer()
    boggle = Boggle()
    with timer.stage("load"):
        if args.words is not None:
            words = args.words
        else:
            try:
                words = load_words(args.dictionary, args.min_length)
            except (OSError, UnicodeDecodeError) as e:
                parser.error(f"cannot read dictionary {args.dictionary}: {e}")
        boggle.set_legal_words(words)
    logger.info("Loaded %d words in %.1fms", len(boggle.trie), timer.timings["load"])

    with timer.stage("solve"):
        try:
            found = boggle.solve_board(width, height, args.letters)
        except BoggleError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
    logger.info("Solved %dx%d board in %.1fms: %d words", width, height, timer.timings["solve"], len(found))

    if args.timing:
        print(timer.report())
    for word in sorted(found):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
