"""Tiny grid puzzle: walk the marker to the goal around a few walls."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

Point = Tuple[int, int]

MOVES = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

DEFAULT_WALLS = frozenset(
    {(2, 0), (2, 1), (2, 2), (5, 2), (5, 3), (5, 4), (5, 5), (7, 0), (7, 1), (7, 2)}
)


@dataclass
class GridPuzzle:
    width: int = 10
    height: int = 6
    player: Point = (0, 0)
    goal: Point = (9, 5)
    walls: FrozenSet[Point] = field(default=DEFAULT_WALLS)
    moves: int = 0

    @property
    def solved(self) -> bool:
        return self.player == self.goal

    def move(self, direction: str) -> bool:
        """Step once; returns False when blocked, off-grid or already solved."""
        if self.solved or direction not in MOVES:
            return False
        dx, dy = MOVES[direction]
        x, y = self.player[0] + dx, self.player[1] + dy
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        if (x, y) in self.walls:
            return False
        self.player = (x, y)
        self.moves += 1
        return True

    def rows(self) -> list[str]:
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                if (x, y) == self.player:
                    row.append("@")
                elif (x, y) == self.goal:
                    row.append("*")
                elif (x, y) in self.walls:
                    row.append("#")
                else:
                    row.append(".")
            lines.append(" ".join(row))
        return lines
