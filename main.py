"""CLI entrypoint for the word grid generator."""

from __future__ import annotations

import argparse
import logging
import sys

from wordgrid.core.constants import ALPHABET_LEN, DEFAULT_DICTIONARY
from wordgrid.core.exceptions import WordGridError
from wordgrid.engine.generator import GeneratorConfig, WordGridGenerator
from wordgrid.engine.solver import solve_word_grids
from wordgrid.utils.logger import configure_logging, get_logger
from wordgrid.utils.pretty import write_grids


LOGGER = get_logger("wordgrid.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Word grid generator",
        epilog=f"WIDTH x HEIGHT must be <= {ALPHABET_LEN}",
    )
    parser.add_argument("width", metavar="WIDTH", type=int, help="Grid width (letters per row)")
    parser.add_argument("height", metavar="HEIGHT", type=int, help="Grid height (letters per column)")
    parser.add_argument(
        "-d",
        "--dictionary",
        default=str(DEFAULT_DICTIONARY),
        help=f"Dictionary file, one word per line (defaults to {DEFAULT_DICTIONARY})",
    )
    parser.add_argument(
        "-n",
        "--no-apostrophe",
        action="store_true",
        help="Don't generate words with apostrophes",
    )
    parser.add_argument(
        "-s",
        "--small-words",
        action="store_true",
        help="Don't restrict small (<= 2 letters) words to the built-in list",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Re-check every grid against the dictionary before printing it",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="Also enumerate with the CP-SAT solver and fail if the results differ",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(logging, args.log_level))

    config = GeneratorConfig(
        width=args.width,
        height=args.height,
        dictionary_path=args.dictionary,
        strip_apostrophes=not args.no_apostrophe,
        restrict_short_words=not args.small_words,
        validate_grids=args.validate,
    )

    try:
        generator = WordGridGenerator(config)
        if args.cross_check:
            grids = list(generator.generate())
            expected = solve_word_grids(generator.index)
            if grids != expected:
                LOGGER.error(
                    "Cross-check failed: search found %d grid(s), CP-SAT found %d",
                    len(grids),
                    len(expected),
                )
                return 1
            write_grids(grids, sys.stdout)
        else:
            write_grids(generator.generate(), sys.stdout)
    except WordGridError as exc:
        LOGGER.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
