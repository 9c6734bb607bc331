"""Command line entry point for a few of the drills."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .arrays import kth_max_min
from .numbers import is_palindrome, primes_up_to
from .patterns import diamond


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algodrills", description="Run small array, number and pattern drills."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    kth = commands.add_parser("kth", help="show the k-th largest and smallest value")
    kth.add_argument("k", type=int)
    kth.add_argument("values", type=int, nargs="+")

    primes = commands.add_parser("primes", help="list primes from 0 to N")
    primes.add_argument("limit", type=int)

    palindrome = commands.add_parser("palindrome", help="check a number for symmetry")
    palindrome.add_argument("number", type=int)

    shape = commands.add_parser("diamond", help="draw a diamond of stars")
    shape.add_argument("size", type=int)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen drill, printing its result."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "kth":
        try:
            largest, smallest = kth_max_min(args.values, args.k)
        except ValueError as error:
            parser.error(str(error))
        print(f"{args.k} th Max : {largest}")
        print(f"{args.k} th Min : {smallest}")
    elif args.command == "primes":
        print(" ".join(str(prime) for prime in primes_up_to(args.limit)))
    elif args.command == "palindrome":
        print("Yes" if is_palindrome(args.number) else "No")
    elif args.command == "diamond":
        for row in diamond(args.size):
            print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())