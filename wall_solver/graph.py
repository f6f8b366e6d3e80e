from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple

from .colors import Color

NodeId = str


@dataclass(frozen=True)
class Edge:
    color: Color
    node: NodeId

    def __str__(self) -> str:
        return f"{self.color}:{self.node}"


class Graph:
    """A directed graph with colored edges, stored as node -> outgoing edges.

    Nodes are plain strings. A node that is only ever an edge destination has
    no entry here and simply has no successors. Edge order is preserved as
    defined, which keeps search order (and therefore tie-breaking) stable.
    """

    def __init__(self) -> None:
        self._adj: Dict[NodeId, List[Edge]] = {}

    def set_edges(self, node: NodeId, edges: Iterable[Edge]) -> None:
        """Define `node`'s outgoing edges, replacing any earlier definition."""
        self._adj[node] = list(edges)

    def edges_from(self, node: NodeId) -> Tuple[Edge, ...]:
        return tuple(self._adj.get(node, ()))

    @property
    def nodes(self) -> List[NodeId]:
        """Every node that is defined or referenced, in first-seen order."""
        seen: Dict[NodeId, None] = {}
        for node, edges in self._adj.items():
            seen.setdefault(node, None)
            for edge in edges:
                seen.setdefault(edge.node, None)
        return list(seen)

    def defined_nodes(self) -> List[NodeId]:
        return list(self._adj)

    def edges(self) -> Iterator[Tuple[NodeId, Edge]]:
        """Yield (source, edge) pairs in definition order."""
        for u, edges in self._adj.items():
            for edge in edges:
                yield (u, edge)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self.nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adj == other._adj

    def __repr__(self) -> str:
        return f"Graph({self._adj!r})"

    def to_dict(self) -> Dict[NodeId, List[Edge]]:
        return {node: list(edges) for node, edges in self._adj.items()}

    def to_text(self) -> str:
        """Serialize back into the line format accepted by `parse_graph`."""
        lines = []
        for node, edges in self._adj.items():
            lines.append(" ".join([node, *(str(e) for e in edges)]))
        return "\n".join(lines)

    def to_networkx(self):
        """Convert to a networkx.MultiDiGraph (edge attribute `color`) for ad-hoc experimentation."""
        import networkx as nx

        g = nx.MultiDiGraph()
        for node in self.nodes:
            g.add_node(node, defined=node in self._adj)
        for u, edge in self.edges():
            g.add_edge(u, edge.node, color=str(edge.color))
        return g
