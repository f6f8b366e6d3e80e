from __future__ import annotations

import heapq
import itertools
import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..colors import Color, can_follow
from ..graph import Graph, NodeId
from .types import SearchState, SolveResult

logger = logging.getLogger(__name__)


def successors(graph: Graph, state: SearchState) -> Iterator[SearchState]:
    """Legal moves out of `state`, in edge definition order."""
    for edge in graph.edges_from(state.node):
        if can_follow(state.color, edge.color):
            yield SearchState(edge.node, edge.color)


def find_path(graph: Graph, start: NodeId, end: NodeId) -> Optional[List[SearchState]]:
    return solve_with_ucs(graph, start, end).path


def solve_with_ucs(graph: Graph, start: NodeId, end: NodeId) -> SolveResult:
    """Uniform-cost search over (node, last color) states.

    Every edge costs 1. The heap is ordered by (cost, insertion order), so among
    equally short paths the one found first in edge definition order wins.
    """

    initial = SearchState(start, Color.NONE)
    counter = itertools.count()
    frontier: List[Tuple[int, int, SearchState]] = [(0, next(counter), initial)]
    parents: Dict[SearchState, Optional[SearchState]] = {initial: None}
    best: Dict[SearchState, int] = {initial: 0}
    closed: Set[SearchState] = set()

    while frontier:
        cost, _, state = heapq.heappop(frontier)
        if state in closed:
            continue
        closed.add(state)

        if state.node == end:
            path = _rebuild(parents, state)
            logger.debug("ucs: %s -> %s found, cost=%d, explored=%d", start, end, cost, len(closed))
            return SolveResult(path=path, explored=len(closed), solver="ucs")

        for nxt in successors(graph, state):
            new_cost = cost + 1
            if nxt in closed or new_cost >= best.get(nxt, new_cost + 1):
                continue
            best[nxt] = new_cost
            parents[nxt] = state
            heapq.heappush(frontier, (new_cost, next(counter), nxt))

    logger.debug("ucs: %s -> %s has no path, explored=%d", start, end, len(closed))
    return SolveResult(path=None, explored=len(closed), solver="ucs")


def _rebuild(parents: Dict[SearchState, Optional[SearchState]], goal: SearchState) -> List[SearchState]:
    path: List[SearchState] = []
    cur: Optional[SearchState] = goal
    while cur is not None:
        path.append(cur)
        cur = parents[cur]
    path.reverse()
    return path
