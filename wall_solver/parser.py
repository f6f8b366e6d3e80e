from __future__ import annotations

import re
from typing import List, Tuple

from .colors import Color
from .graph import Edge, Graph, NodeId

# Grammar:
#   document  := node_line ("\n" node_line)* | ""
#   node_line := NAME WS edge (WS edge)* [WS]
#   edge      := NAME ":" NAME
# NAME is one or more ASCII letters, WS one or more spaces/tabs.
_NAME = re.compile(r"[A-Za-z]+")
_WS = re.compile(r"[ \t]+")

_EXPECTED = {
    "node_name": "a node name",
    "separator": "whitespace before the edge list",
    "edge_color": "an edge color",
    "colon": "':' between color and destination",
    "edge_target": "a destination node name",
    "line_end": "a newline or end of input",
}


class PuzzleParseError(ValueError):
    """Raised when puzzle text does not match the grammar.

    `rule` names the production that failed, `remaining` is the input left
    unparsed at that point, `line`/`column` are 1-based.
    """

    def __init__(self, rule: str, text: str, pos: int) -> None:
        self.rule = rule
        self.remaining = text[pos:]
        self.line = text.count("\n", 0, pos) + 1
        self.column = pos - (text.rfind("\n", 0, pos) + 1) + 1
        found = self.remaining.split("\n", 1)[0][:20]
        if found:
            found_msg = f"found {found!r}"
        elif self.remaining:
            found_msg = "found a newline"
        else:
            found_msg = "found end of input"
        super().__init__(
            f"line {self.line}, column {self.column}: expected {_EXPECTED[rule]} ({rule}), {found_msg}"
        )


def parse_graph(text: str) -> Graph:
    """Parse puzzle text into a Graph. The whole input must match; no partial graphs."""
    graph = Graph()
    if text == "":
        return graph

    pos = 0
    while True:
        pos, node, edges = _parse_node_line(text, pos)
        # Redefining a node replaces the earlier line.
        graph.set_edges(node, edges)
        if pos == len(text):
            return graph
        if text[pos] != "\n":
            raise PuzzleParseError("line_end", text, pos)
        pos += 1


def _parse_node_line(text: str, pos: int) -> Tuple[int, NodeId, List[Edge]]:
    pos, node = _expect(_NAME, text, pos, "node_name")
    pos, _ = _expect(_WS, text, pos, "separator")

    edges: List[Edge] = []
    while True:
        pos, edge = _parse_edge(text, pos)
        edges.append(edge)
        ws = _WS.match(text, pos)
        if ws is None:
            break
        pos = ws.end()
        if pos == len(text) or text[pos] == "\n":
            break
    return pos, node, edges


def _parse_edge(text: str, pos: int) -> Tuple[int, Edge]:
    pos, color = _expect(_NAME, text, pos, "edge_color")
    if not text.startswith(":", pos):
        raise PuzzleParseError("colon", text, pos)
    pos, target = _expect(_NAME, text, pos + 1, "edge_target")
    return pos, Edge(Color.from_name(color), target)


def _expect(pattern: "re.Pattern[str]", text: str, pos: int, rule: str) -> Tuple[int, str]:
    m = pattern.match(text, pos)
    if m is None:
        raise PuzzleParseError(rule, text, pos)
    return m.end(), m.group()
