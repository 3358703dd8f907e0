"""
Independent replay of an action plan against a problem.

The solver never checks its own output; callers use ``check_solution`` to
confirm that a plan is legal, ends on a goal, and to read off its cost.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, List, Optional

from .problem import Problem


@dataclass
class ReplayResult:
    ok: bool
    states: List[Hashable] = field(default_factory=list)
    reason: Optional[str] = None
    failed_at: Optional[int] = None

    @property
    def final_state(self) -> Hashable:
        return self.states[-1]


@dataclass(frozen=True)
class SolutionCheck:
    is_solution: bool
    cost: int
    failed_at: Optional[int] = None


def replay(problem: Problem, actions: Iterable[str]) -> ReplayResult:
    state = problem.initial_state
    states: List[Hashable] = [state]
    for i, action in enumerate(actions):
        nxt = problem.transitions(state).get(action)
        if nxt is None:
            return ReplayResult(False, states, reason="illegal_action", failed_at=i)
        state = nxt
        states.append(state)
    return ReplayResult(True, states)


def check_solution(problem: Problem, actions: Iterable[str]) -> SolutionCheck:
    # Unit cost per action; -1 marks a plan that is not a solution
    plan = list(actions)
    res = replay(problem, plan)
    if res.ok and problem.is_goal(res.final_state):
        return SolutionCheck(True, len(plan))
    return SolutionCheck(False, -1, failed_at=res.failed_at)
