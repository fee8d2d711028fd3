"""Conway's Game of Life on a wrapping grid."""

from __future__ import annotations

import argparse
import random
import sys
import time

WIDTH = 80
HEIGHT = 15


class Universe:
    """A two-dimensional field of cells whose edges wrap around."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self._cells = [[False] * width for _ in range(height)]

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set the state of one cell."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside the universe")
        self._cells[y][x] = alive

    def seed(self, rng: random.Random | None = None) -> None:
        """Bring random cells to life, a quarter of the area's worth of tries."""
        rng = rng or random.Random()
        for _ in range(self.width * self.height // 4):
            self.set(rng.randrange(self.width), rng.randrange(self.height), True)

    def alive(self, x: int, y: int) -> bool:
        """Whether a cell is alive; coordinates wrap around the edges."""
        return self._cells[y % self.height][x % self.width]

    def neighbors(self, x: int, y: int) -> int:
        """Count the live cells adjacent to a cell."""
        return sum(
            self.alive(x + dx, y + dy)
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
            if (dx, dy) != (0, 0)
        )

    def next_state(self, x: int, y: int) -> bool:
        """The state of a cell in the next generation."""
        n = self.neighbors(x, y)
        return n == 3 or (n == 2 and self.alive(x, y))

    def __str__(self) -> str:
        return "".join(
            "".join("*" if cell else " " for cell in row) + "\n" for row in self._cells
        )


def step(current: Universe, following: Universe) -> None:
    """Write the next generation of ``current`` into ``following``."""
    if (current.width, current.height) != (following.width, following.height):
        raise ValueError("universes must have the same size")
    for y in range(current.height):
        for x in range(current.width):
            following.set(x, y, current.next_state(x, y))


def main(argv: list[str] | None = None) -> int:
    """Seed a universe and animate it on standard output."""
    parser = argparse.ArgumentParser(description="Conway's Game of Life")
    parser.add_argument("--generations", type=int, default=500)
    parser.add_argument("--delay", type=float, default=1 / 30)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    current, following = Universe(), Universe()
    current.seed(random.Random(args.seed))
    for _ in range(args.generations):
        step(current, following)
        sys.stdout.write("\x0c" + str(current))
        sys.stdout.flush()
        time.sleep(args.delay)
        current, following = following, current
    return 0