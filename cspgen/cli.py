"""
Command-line interface.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import (
    CharClass,
    GenerationConfig,
    DEFAULT_CONFIG,
    MAX_LENGTH,
    MIN_LENGTH,
    PRESETS,
    get_preset,
    validate_config,
)
from .errors import PasswordGeneratorError
from .generator import GenerationMeta, generate_password_with_meta
from .logging_config import LoggingConfig
from .strength import StrengthReport, character_stats, score_password

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cspgen",
        description="Generate random passwords with guaranteed character-class coverage.",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="start from a named preset (explicit options override it)",
    )
    parser.add_argument(
        "-l", "--length",
        type=int,
        help=f"password length ({MIN_LENGTH}-{MAX_LENGTH}, default {DEFAULT_CONFIG.length})",
    )
    for flag, name in (
        ("upper", "uppercase letters"),
        ("lower", "lowercase letters"),
        ("digits", "digits"),
        ("symbols", "symbols"),
    ):
        parser.add_argument(
            f"--{flag}",
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f"include {name}",
        )
    parser.add_argument(
        "--exclude-similar",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="leave out look-alike characters (0 O 1 l I)",
    )
    parser.add_argument(
        "--exclude-ambiguous",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="leave out brackets, slashes, quotes and similar punctuation",
    )
    parser.add_argument(
        "-n", "--count",
        type=int,
        default=1,
        help="how many passwords to generate (default 1)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="show character statistics and entropy estimate",
    )
    parser.add_argument(
        "--score",
        metavar="PASSWORD",
        help="score an existing password instead of generating one",
    )
    parser.add_argument(
        "--log-level",
        help="logging level (default: $LOG_LEVEL or WARNING)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GenerationConfig:
    """
    Merge preset and explicit options into a validated config.
    """
    base = get_preset(args.preset) if args.preset else DEFAULT_CONFIG

    def pick(value, default):
        return default if value is None else value

    cfg = GenerationConfig.from_flags(
        length=pick(args.length, base.length),
        uppercase=pick(args.upper, base.has(CharClass.UPPERCASE)),
        lowercase=pick(args.lower, base.has(CharClass.LOWERCASE)),
        digits=pick(args.digits, base.has(CharClass.DIGITS)),
        symbols=pick(args.symbols, base.has(CharClass.SYMBOLS)),
        exclude_similar=pick(args.exclude_similar, base.exclude_similar),
        exclude_ambiguous=pick(args.exclude_ambiguous, base.exclude_ambiguous),
    )
    return validate_config(cfg)


def format_report(report: StrengthReport) -> str:
    return f"Strength: {report.label} ({report.score}/100)"


def format_stats(meta: GenerationMeta) -> str:
    stats = character_stats(meta.password)
    return (
        f"Length {stats.length} | upper {stats.uppercase} | lower {stats.lowercase} | "
        f"digits {stats.digits} | symbols {stats.symbols} | "
        f"~{meta.entropy_bits:.1f} bits"
    )


def run(args: argparse.Namespace) -> int:
    if args.score is not None:
        report = score_password(args.score)
        print(format_report(report))
        if report.patterns:
            print(f"Weak patterns: {', '.join(report.patterns)}")
        return EXIT_OK

    try:
        cfg = config_from_args(args)
        if args.count < 1:
            raise PasswordGeneratorError("Count must be at least 1.")

        print("\n[Secure Password Generator]")
        for _ in range(args.count):
            meta = generate_password_with_meta(cfg)
            report = score_password(meta.password)
            print(f"Generated password: {meta.password}")
            print(f"  {format_report(report)}")
            if args.stats:
                print(f"  {format_stats(meta)}")
        print()
    except PasswordGeneratorError as exc:
        logger.debug("Generation refused: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `python -m cspgen.cli`, `run_cspgen.py` and the
    `cspgen` console script.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        LoggingConfig.setup_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
