"""
Command-line interface.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from .config import GenerationConfig, InvalidConfig, DEFAULT_LENGTH
from .generator import generate_password
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords from selected character classes.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--length", type=int, default=DEFAULT_LENGTH, help="Password length")
    parser.add_argument(
        "--count", type=positive_int, default=1, help="Number of passwords to generate"
    )

    # Character class toggles
    parser.add_argument(
        "--no-upper", dest="uppercase", action="store_false", help="Exclude uppercase letters"
    )
    parser.add_argument(
        "--no-lower", dest="lowercase", action="store_false", help="Exclude lowercase letters"
    )
    parser.add_argument(
        "--no-numbers", dest="numbers", action="store_false", help="Exclude digits"
    )
    parser.add_argument(
        "--no-symbols", dest="symbols", action="store_false", help="Exclude symbols"
    )
    parser.add_argument(
        "--symbols",
        dest="symbol_alphabet",
        metavar="CHARS",
        default=None,
        help="Use CHARS as the symbol alphabet instead of the default set",
    )

    parser.add_argument(
        "--avoid-similar",
        action="store_true",
        help="Exclude visually similar characters such as 0/O/o and 1/l/I",
    )
    parser.add_argument(
        "--strict-coverage",
        action="store_true",
        help="Never let one class's forced character overwrite another's",
    )

    parser.add_argument("--json", action="store_true", help="Output as JSON array")
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        default=None,
        help="Also write log records to PATH",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `python -m passgen.cli`, `passgen` and `run_passgen.py`.
    """
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file_path=args.log_file)

    config = GenerationConfig.from_flags(
        length=args.length,
        uppercase=args.uppercase,
        lowercase=args.lowercase,
        numbers=args.numbers,
        symbols=args.symbols,
        avoid_similar=args.avoid_similar,
        strict_coverage=args.strict_coverage,
        symbol_alphabet=args.symbol_alphabet,
    )

    try:
        passwords = [generate_password(config) for _ in range(args.count)]
    except InvalidConfig as exc:
        logger.error(str(exc))
        print(f"passgen: error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(passwords))
    else:
        for password in passwords:
            print(password)
    return 0


if __name__ == "__main__":
    sys.exit(main())
