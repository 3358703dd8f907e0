

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .problem import load_maze_from_file
from .solver import NoSolution, solve
from .verify import check_solution

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "MAZE_PATHFINDER_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def env_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    if level not in LOG_LEVELS:
        print(f"Ignoring ${LOG_LEVEL_ENV}={level!r}; expected one of {', '.join(LOG_LEVELS)}", file=sys.stderr)
        return "INFO"
    return level


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find a shortest path through an ASCII maze.")
    parser.add_argument("maze", type=str, help="Path to maze file (X wall, . open, I start, G goal)")
    parser.add_argument("--verify", action="store_true", help="Replay the solution and report its cost")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=env_log_level(),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or INFO)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    maze_path = Path(args.maze)
    try:
        problem = load_maze_from_file(maze_path)
    except (OSError, ValueError) as e:
        print(f"Invalid maze {maze_path}: {e}", file=sys.stderr)
        return 2

    try:
        plan = solve(problem)
    except NoSolution as e:
        logger.debug("Search failed: %s", e)
        print("No solution found.")
        return 1

    print(f"Solution in {len(plan)} moves:")
    print(" ".join(plan))
    if args.verify:
        check = check_solution(problem, plan)
        print(f"Verified: is_solution={check.is_solution} cost={check.cost}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
