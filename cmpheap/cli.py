"""
cmpheap Command-Line Interface (CLI)

Small line-oriented tools built on `Heap`:
- sort: print every input line in order
- top:  print the K first lines in order, keeping only K lines in memory
- bench: time the heap operations and write a CSV report

Usage examples:
    python -m cmpheap.cli sort --path names.txt
    seq 100 | python -m cmpheap.cli top --k 5 --numeric --reverse
    python -m cmpheap.cli bench --path heap_bench.csv --base 100 --rounds 8
"""

import argparse
import logging
import sys

from . import benchmark
from .datastructures import Heap, ascending, descending

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Input helpers
# -------------------------------------------------------------------
def parse_number(text):
    """Parse `text` as an int when possible, otherwise as a float."""
    try:
        return int(text)
    except ValueError:
        return float(text)


def iter_items(parser, args):
    """Yield non-blank input lines from --path (or stdin), one at a time."""
    fh = sys.stdin
    if args.path:
        try:
            fh = open(args.path, encoding="utf-8")
        except OSError as e:
            parser.error(f"cannot read {args.path}: {e.strerror}")

    try:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            if args.numeric:
                try:
                    line = parse_number(line)
                except ValueError as e:
                    parser.error(f"non-numeric input: {e}")
            yield line
    finally:
        if fh is not sys.stdin:
            fh.close()


def order_of(args):
    return descending if args.reverse else ascending


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_sort(parser, args):
    """Print all items in order."""
    heap = Heap.from_iterable(iter_items(parser, args), order_of(args))
    for item in heap.consume():
        print(item)


def cmd_top(parser, args):
    """Print the first K items in order using a bounded heap."""
    if args.k < 1:
        parser.error("--k must be at least 1")
    compare = order_of(args)

    # Root holds the worst of the K best seen so far.
    worst_first = Heap(lambda a, b: compare(b, a))
    for item in iter_items(parser, args):
        if len(worst_first) < args.k:
            worst_first.push(item)
        else:
            worst_first.pushpop(item)

    worst_first.reorder(compare)
    for item in worst_first.consume():
        print(item)


def cmd_bench(parser, args):
    """Run the operation benchmarks and save them as CSV."""
    try:
        with open(args.path, "w", newline="", encoding="utf-8") as fh:
            benchmark.run_benchmarks(fh, base_input=args.base, rounds=args.rounds)
    except OSError as e:
        parser.error(f"cannot write {args.path}: {e.strerror}")
    print(f"Benchmark completed. Results saved to {args.path}")


# -------------------------------------------------------------------
# Argument parser setup
# -------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(prog="cmpheap", description="Heap-based sorting tools")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_input_args(s):
        s.add_argument("--path", help="Input file (default: stdin)")
        s.add_argument("--reverse", action="store_true", help="Largest first")
        s.add_argument("--numeric", action="store_true", help="Compare lines as numbers")

    s = sub.add_parser("sort", help="Print input lines in order")
    add_input_args(s)
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("top", help="Print the first K input lines in order")
    add_input_args(s)
    s.add_argument("--k", type=int, required=True)
    s.set_defaults(func=cmd_top)

    s = sub.add_parser("bench", help="Benchmark heap operations into a CSV file")
    s.add_argument("--path", default="heap_performance.csv")
    s.add_argument("--base", type=int, default=100)
    s.add_argument("--rounds", type=int, default=12)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m cmpheap.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    logger.debug("running %s", args.cmd)
    args.func(parser, args)


if __name__ == "__main__":
    main()
