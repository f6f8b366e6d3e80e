from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List

from .colors import Color
from .graph import Edge, Graph, NodeId
from .parser import parse_graph

if TYPE_CHECKING:
    from .solver.types import SolveResult, SolverName

logger = logging.getLogger(__name__)


@dataclass
class Puzzle:
    """A wall puzzle: a colored directed graph plus free-form metadata.

    Start and end nodes are not part of the puzzle; they are supplied per solve.
    """

    graph: Graph
    meta: Dict[str, Any] = field(default_factory=dict)

    def solve(self, start: NodeId, end: NodeId, *, solver: "SolverName" = "ucs") -> "SolveResult":
        from .solver import solve_puzzle

        return solve_puzzle(self, start, end, solver=solver)

    @staticmethod
    def from_file(path: str | Path) -> "Puzzle":
        path = Path(path)
        logger.debug("Loading puzzle from %s", path)
        if path.suffix.lower() == ".json":
            return Puzzle.from_json(path.read_text(encoding="utf-8"))
        return Puzzle.from_text(path.read_text(encoding="utf-8"), source_name=str(path))

    @staticmethod
    def from_text(text: str, *, source_name: str = "<text>") -> "Puzzle":
        # The grammar itself rejects surrounding blank structure, so loaders trim it.
        cleaned = text.replace("\r\n", "\n").strip()
        graph = parse_graph(cleaned)
        logger.debug("Parsed %s: %d nodes defined", source_name, len(graph.defined_nodes()))
        return Puzzle(graph=graph, meta={"source": source_name})

    @staticmethod
    def from_json(text: str) -> "Puzzle":
        """Load `{"nodes": {"a": [{"color": "red", "to": "b"}, ...]}, "meta": {...}}`."""
        obj = json.loads(text)
        if not isinstance(obj, dict) or not isinstance(obj.get("nodes"), dict):
            raise ValueError("JSON puzzle must be an object with a 'nodes' mapping")

        g = Graph()
        for node_id, raw_edges in obj["nodes"].items():
            node = _node_name(node_id, what="Node name")
            if not isinstance(raw_edges, list) or not raw_edges:
                raise ValueError(f"Node {node!r} must have a non-empty list of edges")
            edges: List[Edge] = []
            for raw in raw_edges:
                if not isinstance(raw, dict) or "to" not in raw:
                    raise ValueError(f"Edge of node {node!r} must be an object with 'color' and 'to'")
                color = Color.from_name(str(raw.get("color", "")))
                edges.append(Edge(color, _node_name(raw["to"], what=f"Destination of {node!r}")))
            g.set_edges(node, edges)

        meta = obj.get("meta", {})
        if not isinstance(meta, dict):
            raise ValueError("'meta' must be an object")
        return Puzzle(graph=g, meta=dict(meta))

    def to_json(self) -> str:
        nodes = {
            node: [{"color": str(e.color), "to": e.node} for e in edges]
            for node, edges in self.graph.to_dict().items()
        }
        return json.dumps({"nodes": nodes, "meta": self.meta}, indent=2)


def _node_name(value: Any, *, what: str) -> NodeId:
    name = str(value)
    if not name.isascii() or not name.isalpha():
        raise ValueError(f"{what} must be one or more ASCII letters, got {value!r}")
    return name
