from .colors import Color, can_follow
from .graph import Edge, Graph, NodeId
from .parser import PuzzleParseError, parse_graph
from .puzzle import Puzzle
from .report import NO_SOLUTION_MESSAGE, format_solution, print_solution
from .solver import SOLVER_CHOICES, SearchState, SolveResult, find_path, solve_puzzle

__all__ = [
    "Color",
    "Edge",
    "Graph",
    "NO_SOLUTION_MESSAGE",
    "NodeId",
    "Puzzle",
    "PuzzleParseError",
    "SOLVER_CHOICES",
    "SearchState",
    "SolveResult",
    "can_follow",
    "find_path",
    "format_solution",
    "parse_graph",
    "print_solution",
    "solve_puzzle",
]
