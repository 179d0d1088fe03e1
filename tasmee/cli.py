"""Command line interface for Tasmee.

    python -m tasmee match "بِسْمِ اللَّهِ الرَّحْمَٰنِ" "بسم الله"
    python -m tasmee match --json --strategy sequence REFERENCE HYPOTHESIS
    python -m tasmee normalize "قَالَ"
"""

import argparse
import json
import sys

from tasmee import __version__
from tasmee._logging import configure_logging
from tasmee.config import get_settings
from tasmee.core import match_text, normalize_arabic, project_highlights
from tasmee.core.match import STRATEGIES
from tasmee.exceptions import TasmeeError
from tasmee.models import MatchResult


def emit(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False))
    sys.stdout.flush()


def print_result(result: MatchResult) -> None:
    print(f"Accuracy: {result.accuracy}%")
    print(f"Jaccard:  {result.jaccard:.2f}")
    print(f"Words:    {result.matched_count}/{len(result.diff)}")
    for word in project_highlights(result):
        mark = "✓" if word.ok else "✗"
        print(f"  {mark} {word.word}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasmee",
        description="Check a recited transcript against Quran text.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    match = sub.add_parser("match", help="Score a transcript against a reference verse")
    match.add_argument("reference", help="Reference verse text")
    match.add_argument("hypothesis", help="Recited transcript")
    match.add_argument("--strategy", choices=sorted(STRATEGIES), default=None)
    match.add_argument("--max-edits", type=int, default=None, help="Edits tolerated per word")
    match.add_argument("--json", action="store_true", help="Print the result as JSON")

    norm = sub.add_parser("normalize", help="Print the normalized form of a text")
    norm.add_argument("text")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "match" and args.max_edits is not None and args.max_edits < 0:
        parser.error("--max-edits must be zero or more")

    try:
        configure_logging("DEBUG" if args.verbose else get_settings().log_level)

        if args.command == "normalize":
            print(normalize_arabic(args.text))
            return 0

        result = match_text(
            args.reference,
            args.hypothesis,
            strategy=args.strategy,
            max_edits=args.max_edits,
        )
    except TasmeeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        emit(result.model_dump())
    else:
        print_result(result)
    return 0
