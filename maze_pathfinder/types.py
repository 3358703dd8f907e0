

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True, order=True)
class MazeState:
    col: int
    row: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.col, self.row)

    def move(self, dcol: int, drow: int) -> "MazeState":
        return MazeState(self.col + dcol, self.row + drow)

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"


# Maze characters
WALL = "X"
OPEN = "."
INITIAL = "I"
GOAL = "G"

MAZE_CHARS = frozenset({WALL, OPEN, INITIAL, GOAL})

# Action labels with (dcol, drow) deltas, in enumeration order
UP = "U"
DOWN = "D"
LEFT = "L"
RIGHT = "R"

MOVES: Dict[str, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

ACTIONS = tuple(MOVES)
