from __future__ import annotations

import logging
from collections import deque
from typing import Deque

from ..colors import Color
from ..graph import Graph, NodeId
from .types import SearchState, SolveResult
from .ucs_solver import successors

logger = logging.getLogger(__name__)


def solve_with_networkx(graph: Graph, start: NodeId, end: NodeId) -> SolveResult:
    """Build the whole reachable (node, last color) state graph, then ask networkx.

    Slower than the ucs backend since it never stops early, but it shares no
    search code with it, which makes it a useful cross-check.
    """

    import networkx as nx

    initial = SearchState(start, Color.NONE)
    states = nx.DiGraph()
    states.add_node(initial)
    queue: Deque[SearchState] = deque([initial])
    while queue:
        state = queue.popleft()
        for nxt in successors(graph, state):
            if nxt not in states:
                states.add_node(nxt)
                queue.append(nxt)
            states.add_edge(state, nxt)

    paths = nx.single_source_shortest_path(states, initial)
    goals = [s for s in states.nodes if s.node == end and s in paths]
    logger.debug("networkx: %d states, %d goal states reachable", states.number_of_nodes(), len(goals))
    if not goals:
        return SolveResult(path=None, explored=states.number_of_nodes(), solver="networkx")

    goal = min(goals, key=lambda s: len(paths[s]))
    return SolveResult(path=list(paths[goal]), explored=states.number_of_nodes(), solver="networkx")
