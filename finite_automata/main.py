"""
Command-line driver for finite_automata.

Loads a spec file, feeds the given symbols one at a time and prints the
current state after each step.

Usage:
    python -m finite_automata dfa.json 0 0 1
    python -m finite_automata nfa.yaml --kind nfa --word abba --json
"""

import argparse
import json
import sys
from typing import List, Optional

from .config import Settings
from .errors import SpecLoadError, SpecValidationError, UnknownSymbolError
from .factory import AUTOMATON_KINDS, build_automaton
from .loader import load_spec
from .logging_config import get_logger, setup_logging

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2

ERROR_MARKER = "<error>"

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="finite-automata",
        description="Simulate a DFA or NFA described by a JSON/YAML spec file",
    )
    parser.add_argument("spec", help="Path to the spec file (.json, .yaml, .yml)")
    parser.add_argument("symbols", nargs="*", help="Input symbols, fed in order")
    parser.add_argument("--kind", "-k", choices=sorted(AUTOMATON_KINDS), default="dfa", help="Automaton variant")
    parser.add_argument("--word", "-w", type=str, default=None, help="Feed the characters of this string instead of SYMBOLS")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per step")
    parser.add_argument("--log-level", type=str, default=None, help="Overrides AUTOMATA_LOG_LEVEL")
    return parser


def _print_step(automaton, symbol: Optional[str], as_json: bool) -> None:
    snap = automaton.snapshot()
    if as_json:
        print(json.dumps({"symbol": symbol, **snap}))
        return
    prefix = "start" if symbol is None else f"{symbol!r:>6}"
    current = ERROR_MARKER if snap["current"] is None else snap["current"]
    print(f"{prefix} -> {current}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    settings = Settings.from_env()
    setup_logging(
        log_dir=settings.log_dir,
        log_level=args.log_level or settings.log_level,
    )

    if args.word is not None and args.symbols:
        parser.error("pass either SYMBOLS or --word, not both")
    symbols = list(args.word) if args.word is not None else args.symbols

    try:
        spec = load_spec(args.spec)
        automaton = build_automaton(spec, args.kind)
    except SpecLoadError as exc:
        log.error("spec_load_failed", path=args.spec, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except SpecValidationError as exc:
        log.error("spec_invalid", path=args.spec, error_type=type(exc).__name__, field=exc.field)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    _print_step(automaton, None, args.json)
    try:
        for symbol in symbols:
            automaton.transition(symbol)
            _print_step(automaton, symbol, args.json)
    except UnknownSymbolError as exc:
        log.error("unknown_symbol", symbol=exc.symbol)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    accepted = automaton.is_accepting_state()
    log.info("simulation_finished", kind=automaton.kind, symbols=len(symbols), accepted=accepted)
    if not args.json:
        print("ACCEPTED" if accepted else "REJECTED")
    return EXIT_ACCEPTED if accepted else EXIT_REJECTED


if __name__ == "__main__":
    sys.exit(main())
