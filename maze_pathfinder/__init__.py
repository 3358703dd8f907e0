"""Maze pathfinder package.

Exposes public APIs for parsing mazes, solving them breadth-first, and
verifying solutions.
"""

from .types import (
    MazeState,
    ACTIONS,
    MOVES,
)
from .problem import Problem, MazeProblem, parse_maze, load_maze_from_file
from .solver import NoSolution, SearchNode, solve
from .verify import ReplayResult, SolutionCheck, replay, check_solution

__all__ = [
    "MazeState",
    "ACTIONS",
    "MOVES",
    "Problem",
    "MazeProblem",
    "parse_maze",
    "load_maze_from_file",
    "NoSolution",
    "SearchNode",
    "solve",
    "ReplayResult",
    "SolutionCheck",
    "replay",
    "check_solution",
]
