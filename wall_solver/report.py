from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

from .solver.types import SearchState

NO_SOLUTION_MESSAGE = "No solution found"


def format_step(prev: SearchState, cur: SearchState) -> str:
    return f"{prev.node} ==({cur.color})=> {cur.node}"


def format_solution(path: Optional[Sequence[SearchState]]) -> List[str]:
    """One line per edge taken; the start state's own color is never shown."""
    if not path:
        return [NO_SOLUTION_MESSAGE]
    return [format_step(prev, cur) for prev, cur in zip(path, path[1:])]


def print_solution(path: Optional[Sequence[SearchState]], out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    for line in format_solution(path):
        print(line, file=out)
