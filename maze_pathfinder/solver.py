

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Hashable, List, Optional, Set

from .problem import Problem

logger = logging.getLogger(__name__)


class NoSolution(Exception):
    """Raised when the frontier runs dry before any goal state is reached."""

    def __init__(self, initial_state: Hashable, expanded: int):
        super().__init__(f"no path from {initial_state} to a goal ({expanded} states expanded)")
        self.initial_state = initial_state
        self.expanded = expanded


# Compared and hashed by identity; repr omits the parent chain
@dataclass(frozen=True, eq=False)
class SearchNode:
    state: Hashable
    action: str = ""
    parent: Optional["SearchNode"] = field(default=None, repr=False)

    @property
    def is_root(self) -> bool:
        return self.parent is None


def reconstruct_actions(node: SearchNode) -> List[str]:
    actions: List[str] = []
    current: Optional[SearchNode] = node
    while current is not None and not current.is_root:
        actions.append(current.action)
        current = current.parent
    actions.reverse()
    return actions


def solve(problem: Problem) -> List[str]:
    """Breadth-first tree search from ``problem.initial_state``.

    Returns the action labels of a minimum-length path to a goal state, or an
    empty list when the initial state already is one. Each state is expanded
    at most once. Raises ``NoSolution`` if no goal is reachable.
    """
    frontier: Deque[SearchNode] = deque([SearchNode(problem.initial_state)])
    visited: Set[Hashable] = set()
    generated = 1
    peak = 1

    while frontier:
        node = frontier.popleft()

        if problem.is_goal(node.state):
            actions = reconstruct_actions(node)
            logger.debug(
                "Solved in %d actions: expanded=%d generated=%d frontier_peak=%d",
                len(actions), len(visited), generated, peak,
            )
            return actions

        # Already expanded via a path no longer than this one
        if node.state in visited:
            continue

        for label, nxt in problem.transitions(node.state).items():
            frontier.append(SearchNode(nxt, label, node))
            generated += 1
        visited.add(node.state)
        peak = max(peak, len(frontier))

    logger.info("No solution from %s after expanding %d states", problem.initial_state, len(visited))
    raise NoSolution(problem.initial_state, len(visited))
