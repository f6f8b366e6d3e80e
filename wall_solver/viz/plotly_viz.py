from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ..colors import Color
from ..graph import NodeId
from ..puzzle import Puzzle
from ..solver.types import SearchState

_EDGE_COLORS = {
    Color.RED: "#d62728",
    Color.BLUE: "#1f77b4",
    Color.NONE: "#7f7f7f",
}
_PATH_COLOR = "rgba(44,160,44,0.55)"


def layout_positions(puzzle: Puzzle, *, seed: int = 7) -> Dict[NodeId, Tuple[float, float]]:
    import networkx as nx

    g = puzzle.graph.to_networkx()
    if g.number_of_nodes() == 0:
        return {}
    pos = nx.spring_layout(g, seed=seed)
    return {n: (float(p[0]), float(p[1])) for n, p in pos.items()}


def build_plotly_figure(
    puzzle: Puzzle,
    *,
    path: Optional[Sequence[SearchState]] = None,
    title: str = "Wall Solver",
    seed: int = 7,
):
    import plotly.graph_objects as go

    pos = layout_positions(puzzle, seed=seed)

    # One trace per edge color so the legend doubles as a key.
    traces = []
    for color, hex_color in _EDGE_COLORS.items():
        ex: List[Optional[float]] = []
        ey: List[Optional[float]] = []
        for u, edge in puzzle.graph.edges():
            if edge.color is not color:
                continue
            pu, pv = pos[u], pos[edge.node]
            ex += [pu[0], pv[0], None]
            ey += [pu[1], pv[1], None]
        if not ex:
            continue
        traces.append(
            go.Scatter(
                x=ex,
                y=ey,
                mode="lines",
                line=dict(width=2, color=hex_color),
                hoverinfo="none",
                name=str(color),
            )
        )

    if path:
        traces.append(
            go.Scatter(
                x=[pos.get(s.node, (0.0, 0.0))[0] for s in path],
                y=[pos.get(s.node, (0.0, 0.0))[1] for s in path],
                mode="lines",
                line=dict(width=10, color=_PATH_COLOR),
                hoverinfo="none",
                name="solution",
            )
        )

    endpoints = {path[0].node, path[-1].node} if path else set()
    nx_, ny_, ntext, nsize = [], [], [], []
    for node_id, (x, y) in pos.items():
        nx_.append(x)
        ny_.append(y)
        out_edges = puzzle.graph.edges_from(node_id)
        ntext.append("<br>".join([f"id={node_id}", *(str(e) for e in out_edges)]))
        nsize.append(16 if node_id in endpoints else 10)

    traces.append(
        go.Scatter(
            x=nx_,
            y=ny_,
            mode="markers+text",
            marker=dict(size=nsize, color="#333333", line=dict(width=0)),
            text=list(pos),
            textposition="top center",
            hovertext=ntext,
            hoverinfo="text",
            name="nodes",
        )
    )

    fig = go.Figure(data=traces)
    fig.update_layout(
        title=title,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, scaleanchor="x", scaleratio=1),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def write_plotly_html(
    puzzle: Puzzle,
    *,
    out_path: str | Path,
    path: Optional[Sequence[SearchState]] = None,
    title: str = "Wall Solver",
) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig = build_plotly_figure(puzzle, path=path, title=title)
    fig.write_html(str(out_path), include_plotlyjs="cdn", full_html=True)
    return out_path
