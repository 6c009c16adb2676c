"""Command-line entry point: try to prove a → a from the Hilbert axioms."""

from __future__ import annotations

import argparse
import sys
import time

from .axioms import build_axioms
from .decision import DecisionNode
from .formula import FormulaTable
from .inference import prove_with_tree
from .knowledge import KnowledgeSet


class _BacktrackLimit(Exception):
    pass


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hilbertprove", description="Search for a Hilbert-style proof of a → a."
    )
    parser.add_argument(
        "--delay",
        type=_non_negative_float,
        default=1.0,
        help="seconds to wait before each backtrack (default: 1)",
    )
    parser.add_argument(
        "--max-backtracks",
        type=_non_negative_int,
        default=None,
        help="give up after this many backtracks (default: no limit)",
    )
    return parser


def main(argv=None) -> int:
    """Run the proof search and print its trace."""
    args = _parser().parse_args(argv)
    out = sys.stdout.write

    table = FormulaTable()
    axioms = build_axioms(table)
    ks = KnowledgeSet()
    out(ks.format(axioms))
    out("_" * 110 + "\n")
    out(ks.format(axioms))

    a = table.var("a")
    head = DecisionNode(table.impl(a, a), ks)
    seen_goals = KnowledgeSet()

    backtracks = 0

    def pause() -> None:
        nonlocal backtracks
        backtracks += 1
        if args.max_backtracks is not None and backtracks > args.max_backtracks:
            raise _BacktrackLimit
        if args.delay:
            time.sleep(args.delay)

    try:
        result = prove_with_tree(head, seen_goals, axioms, table, echo=out, pause=pause)
    except _BacktrackLimit:
        out(f"Search stopped after {args.max_backtracks} backtracks\n")
        result = False

    out(f"Result of proof: {int(result)}")
    out(ks.format(axioms))
    return 0


if __name__ == "__main__":
    sys.exit(main())