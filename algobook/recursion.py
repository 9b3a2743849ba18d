"""Counting sequences and combination sums, with a small command line."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence


def _require_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def repeat_name(name: str, n: int) -> list[str]:
    """The name repeated n times."""
    _require_count(n)
    return [name] * n


def count_up(n: int) -> list[int]:
    """The numbers 1 to n in rising order, emitted before descending further."""
    _require_count(n)
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """The numbers n down to 1, emitted before descending further."""
    _require_count(n)
    return list(range(n, 0, -1))


def count_up_backtrack(n: int) -> list[int]:
    """The numbers 1 to n, each emitted on the way back from n - 1."""
    _require_count(n)
    values: list[int] = []
    pending = list(range(n, 0, -1))
    while pending:
        values.append(pending.pop())
    return values


def count_down_backtrack(n: int) -> list[int]:
    """The numbers n down to 1, each emitted on the way back from the next one up."""
    _require_count(n)
    pending = list(range(1, n + 1))
    values: list[int] = []
    while pending:
        values.append(pending.pop())
    return values


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Every multiset of candidates, each usable any number of times, summing to target.

    Combinations list candidates in their given order; a combination taking the
    earlier candidate more often comes first. Raises ValueError for a candidate
    that is not positive.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    chosen: list[int] = []

    def pick(index: int, remaining: int) -> None:
        if index == len(candidates):
            if remaining == 0:
                found.append(list(chosen))
            return
        value = candidates[index]
        if value <= remaining:
            chosen.append(value)
            pick(index, remaining - value)
            chosen.pop()
        pick(index + 1, remaining)

    pick(0, target)
    return found


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Every distinct combination of candidates, each used at most once, summing to target.

    Combinations are sorted lists, returned in lexicographic order.
    """
    pool = sorted(candidates)
    found: list[list[int]] = []
    chosen: list[int] = []

    def pick(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        for index in range(start, len(pool)):
            value = pool[index]
            if index > start and value == pool[index - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            pick(index + 1, remaining - value)
            chosen.pop()

    pick(0, target)
    return found


def _count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {text}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algobook", description="Print simple counted sequences."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    name = commands.add_parser("name", help="print a name n times")
    name.add_argument("name")
    name.add_argument("n", type=_count)
    for command, text in (
        ("up", "print 1 to n"),
        ("down", "print n to 1"),
        ("up-backtrack", "print 1 to n, emitted while backtracking"),
        ("down-backtrack", "print n to 1, emitted while backtracking"),
    ):
        commands.add_parser(command, help=text).add_argument("n", type=_count)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; prints one value per line and returns the exit status."""
    args = _parser().parse_args(argv)
    if args.command == "name":
        lines: list[object] = list(repeat_name(args.name, args.n))
    else:
        producers = {
            "up": count_up,
            "down": count_down,
            "up-backtrack": count_up_backtrack,
            "down-backtrack": count_down_backtrack,
        }
        lines = list(producers[args.command](args.n))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())