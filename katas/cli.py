"""Commands that count up or down and that greet someone."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def count_up(stop: int) -> list[int]:
    """The numbers from 1 up to ``stop``."""
    return list(range(1, stop + 1))


def count_down(start: int) -> list[int]:
    """The numbers from ``start`` down to 0."""
    return list(range(start, -1, -1))


def count_main(argv: Sequence[str] | None = None) -> int:
    """Count up or down, as the sub-command asks."""
    parser = argparse.ArgumentParser(prog="count", description="Count up or down")
    commands = parser.add_subparsers(dest="command")

    up = commands.add_parser("up", aliases=["u"], help="Count Up")
    up.add_argument("-s", "--stop", type=int, default=10, help="Value to count up to")
    up.set_defaults(command="up")

    down = commands.add_parser("down", aliases=["d"], help="Count Down")
    down.add_argument(
        "-s", "--start", type=int, default=10, help="Start counting down from"
    )
    down.set_defaults(command="down")

    args = parser.parse_args(argv)
    if args.command == "up":
        if args.stop <= 0:
            print("Stop cannot be negative.")
        numbers = count_up(args.stop)
    elif args.command == "down":
        if args.start < 0:
            print("Start cannot be negative.")
        numbers = count_down(args.start)
    else:
        parser.print_help()
        return 0
    for number in numbers:
        print(number)
    return 0


def hello_main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting."""
    parser = argparse.ArgumentParser(prog="hello_cli", description="Print hello world")
    parser.add_argument("-n", "--name", default="World", help="Who to say hello to.")
    args = parser.parse_args(argv)
    print(f"Hello {args.name}!")
    return 0