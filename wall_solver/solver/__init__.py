from __future__ import annotations

from typing import Union

from ..graph import Graph, NodeId
from ..puzzle import Puzzle
from .nx_solver import solve_with_networkx
from .types import SearchState, SolveResult, SolverName
from .ucs_solver import find_path, solve_with_ucs, successors

SOLVER_CHOICES: tuple[SolverName, ...] = ("ucs", "networkx")


def solve_puzzle(
    puzzle: Union[Puzzle, Graph],
    start: NodeId,
    end: NodeId,
    *,
    solver: SolverName = "ucs",
) -> SolveResult:
    graph = puzzle.graph if isinstance(puzzle, Puzzle) else puzzle
    if solver == "ucs":
        return solve_with_ucs(graph, start, end)
    if solver == "networkx":
        return solve_with_networkx(graph, start, end)
    raise ValueError(f"Unknown solver {solver!r}. Choose one of: {', '.join(SOLVER_CHOICES)}")


__all__ = [
    "SearchState",
    "SolveResult",
    "SolverName",
    "SOLVER_CHOICES",
    "find_path",
    "solve_puzzle",
    "solve_with_networkx",
    "solve_with_ucs",
    "successors",
]
