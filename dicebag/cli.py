"""Command-line entry point: ``dicebag [-a NAME] DICE...``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from dicebag.aggregate import AGGREGATE_NAMES, UnknownAggregateError
from dicebag.config import LOG_LEVELS, settings
from dicebag.evaluator import evaluate_run, exit_status
from dicebag.random_source import RandomSource, get_random_source
from dicebag.rendering import render_error, render_result

logger = logging.getLogger(__name__)

EXIT_UNKNOWN_AGGREGATE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicebag",
        description="Roll tabletop dice written in [count]d<sides> notation.",
    )
    parser.add_argument(
        "-a",
        "--aggregate",
        metavar="NAME",
        help=(
            "Optional aggregate function to apply to the collected rolls of a die. "
            f"One of {', '.join(repr(n) for n in AGGREGATE_NAMES)}"
        ),
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("dice", nargs="*", help='Dice to roll, e.g. "d6", "5d10"')
    return parser


def main(argv: Sequence[str] | None = None, rng: RandomSource | None = None) -> int:
    """Run the CLI and return the process exit status.

    Args:
        argv: Arguments excluding the program name. Defaults to sys.argv.
        rng: Random source override. Defaults to the configured provider.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if not args.dice:
        print("Provide some dice to roll", file=sys.stderr)

    try:
        results = evaluate_run(
            args.dice,
            args.aggregate,
            rng if rng is not None else get_random_source(),
            accept_uppercase=settings.accept_uppercase,
            strip_whitespace=settings.strip_whitespace,
        )
    except UnknownAggregateError as exc:
        print(
            f"error: unknown aggregate function {exc.name!r} "
            f"(expected one of: {', '.join(AGGREGATE_NAMES)})",
            file=sys.stderr,
        )
        return EXIT_UNKNOWN_AGGREGATE

    for result in results:
        if result.ok:
            print(render_result(result))
        else:
            print(render_error(result), file=sys.stderr)
    return exit_status(results)


if __name__ == "__main__":
    sys.exit(main())
