"""
Command-line interface for evenset.

This module provides a simple CLI to divide numbers into two batches with sums
as equal as possible, and to display version information about evenset itself
and the available solver backends.

Usage:
    evenset <COMMAND>

Commands:
    version   Show the evenset library version and the versions of installed solver backends.
    divide    Divide the given numbers, or randomly generated ones, and print both batches.
"""

import argparse
import logging
import sys

import numpy as np

from evenset import __version__
import evenset as es
from evenset.exceptions import EvenSetException


def command_version(args):
    print(f"evenset version: {__version__}")
    es.SolverLookup().print_version()

def print_batch(items, batch, label):
    """Prints `label a + b + ... = sum` and returns the sum"""
    total = sum(items[idx] for idx in batch)
    values = " +".join(f" {items[idx]}" for idx in batch)
    print(f"{label}{values} = {total}")
    return total

def command_divide(args):
    if args.items:
        inputs = [args.items]
    else:
        rng = np.random.default_rng(args.seed)
        inputs = (rng.integers(args.low, args.high, size=args.random).tolist() for _ in range(args.runs))

    for items in inputs:
        division = es.EvenSetDivision(items)
        division.calc(solver=args.solver)

        sum1 = print_batch(division.items, division.selected_batch(), "Batch #1 :")
        sum2 = print_batch(division.items, division.complement_batch(), "Batch #2 :")
        print(f"Diff: {abs(sum1 - sum2)}\n")

def main(argv=None):
    parser = argparse.ArgumentParser(description="evenset command line interface")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # evenset version
    version_parser = subparsers.add_parser("version", help="Show version information on evenset and its solver backends")
    version_parser.set_defaults(func=command_version)

    # evenset divide
    divide_parser = subparsers.add_parser("divide", help="Divide numbers into two batches with sums as equal as possible")
    divide_parser.add_argument("items", type=int, nargs="*", help="the numbers to divide")
    divide_parser.add_argument("--random", type=int, metavar="N", help="divide N random numbers instead")
    divide_parser.add_argument("--low", type=int, default=100, help="smallest random number (default: 100)")
    divide_parser.add_argument("--high", type=int, default=300, help="random numbers are below this (default: 300)")
    divide_parser.add_argument("--runs", type=int, default=1, help="number of random inputs to divide (default: 1)")
    divide_parser.add_argument("--seed", type=int, default=None, help="seed of the random generator")
    divide_parser.add_argument("--solver", default=None, choices=[name for name, _ in es.SolverLookup.base_solvers()],
                               help="solver to use, see `evenset version` (default: dp)")
    divide_parser.add_argument("-v", "--verbose", action="store_true", help="log solver details")
    divide_parser.set_defaults(func=command_divide)

    args = parser.parse_args(argv)

    if args.command == "divide":
        if bool(args.items) == (args.random is not None):
            divide_parser.error("give either the numbers to divide or --random N")
        if args.random is not None and args.random < 0:
            divide_parser.error("--random N needs N >= 0")
        if args.random is not None and not (0 <= args.low < args.high):
            divide_parser.error("random numbers need 0 <= --low < --high")
        if args.random is not None and args.high > np.iinfo(np.int64).max:
            divide_parser.error(f"--high can be at most {np.iinfo(np.int64).max}")
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format='%(levelname)s: %(message)s'
        )

    try:
        args.func(args)
    except EvenSetException as e:
        print(f"evenset: error: {e}", file=sys.stderr)
        sys.exit(1)
