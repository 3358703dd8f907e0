from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Hashable, List, Protocol, Sequence

from .types import MazeState, MOVES, MAZE_CHARS, WALL, INITIAL, GOAL

logger = logging.getLogger(__name__)

State = Hashable


class Problem(Protocol):
    """What the search needs from a problem: a start, a goal test, and one-step transitions."""

    initial_state: State

    def is_goal(self, state: State) -> bool: ...

    def transitions(self, state: State) -> Dict[str, State]: ...


class MazeProblem:
    """Grid maze of ``X`` walls, ``.`` open cells, one ``I`` start and one or more ``G`` goals.

    States are ``MazeState(col, row)``. Cells outside the (possibly ragged)
    rows count as walls.
    """

    def __init__(self, maze: Sequence[str]):
        rows = [str(line) for line in maze]
        if not rows or not any(rows):
            raise ValueError("Empty maze content")

        initial: MazeState | None = None
        goals: List[MazeState] = []
        for row, line in enumerate(rows):
            for col, ch in enumerate(line):
                if ch not in MAZE_CHARS:
                    raise ValueError(f"Unrecognized maze character {ch!r} at ({col}, {row})")
                if ch == INITIAL:
                    if initial is not None:
                        raise ValueError("Maze must define exactly one initial state 'I'")
                    initial = MazeState(col, row)
                elif ch == GOAL:
                    goals.append(MazeState(col, row))

        if initial is None:
            raise ValueError("Maze must define an initial state 'I'")
        if not goals:
            raise ValueError("Maze must define at least one goal 'G'")

        self.rows: tuple[str, ...] = tuple(rows)
        self.initial_state: MazeState = initial
        self.goals: FrozenSet[MazeState] = frozenset(goals)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max(len(line) for line in self.rows)

    def in_bounds(self, state: MazeState) -> bool:
        return 0 <= state.row < len(self.rows) and 0 <= state.col < len(self.rows[state.row])

    def is_wall(self, state: MazeState) -> bool:
        if not self.in_bounds(state):
            return True
        return self.rows[state.row][state.col] == WALL

    def is_goal(self, state: MazeState) -> bool:
        return state in self.goals

    def transitions(self, state: MazeState) -> Dict[str, MazeState]:
        result: Dict[str, MazeState] = {}
        for label, (dcol, drow) in MOVES.items():
            nxt = state.move(dcol, drow)
            if not self.is_wall(nxt):
                result[label] = nxt
        return result

    def __repr__(self) -> str:
        return f"MazeProblem(width={self.width}, height={self.height}, initial={self.initial_state}, goals={len(self.goals)})"


def parse_maze(text: str) -> MazeProblem:
    rows = [line.strip() for line in text.splitlines() if line.strip() != ""]
    if not rows:
        raise ValueError("Empty maze content")
    return MazeProblem(rows)


def load_maze_from_file(path: str | Path) -> MazeProblem:
    text = Path(path).read_text(encoding="utf-8")
    problem = parse_maze(text)
    logger.debug("Loaded %r from %s", problem, path)
    return problem
