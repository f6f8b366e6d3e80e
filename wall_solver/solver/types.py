from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional

from ..colors import Color
from ..graph import NodeId

SolverName = Literal["ucs", "networkx"]


@dataclass(frozen=True)
class SearchState:
    node: NodeId
    color: Color  # color of the edge used to arrive here


@dataclass
class SolveResult:
    path: Optional[List[SearchState]]  # None => no path
    explored: int
    solver: str

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def cost(self) -> Optional[int]:
        return None if self.path is None else len(self.path) - 1
