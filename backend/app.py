from __future__ import annotations

import logging
import os
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List

# Allow running `python backend/app.py` from repo root.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from wall_solver.parser import PuzzleParseError
from wall_solver.puzzle import Puzzle
from wall_solver.report import format_solution
from wall_solver.solver import solve_puzzle

logger = logging.getLogger(__name__)

PUZZLE_SUFFIXES = {".txt", ".wall", ".json"}


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _puzzles_dir() -> Path:
    return _repo_root() / "puzzles"


def _parse_puzzle(text: str, *, name: str) -> Puzzle:
    if name.lower().endswith(".json"):
        return Puzzle.from_json(text)
    return Puzzle.from_text(text, source_name=name)


def _bad_request(e: Exception) -> HTTPException:
    if isinstance(e, PuzzleParseError):
        detail: Any = {"message": str(e), "rule": e.rule, "line": e.line, "column": e.column}
    else:
        detail = str(e)
    return HTTPException(status_code=400, detail=detail)


def _graph_payload(puzzle: Puzzle) -> Dict[str, Any]:
    defined = set(puzzle.graph.defined_nodes())
    nodes = [{"id": n, "defined": n in defined} for n in puzzle.graph.nodes]
    edges = [{"from": u, "to": e.node, "color": str(e.color)} for u, e in puzzle.graph.edges()]
    return {"nodes": nodes, "edges": edges}


def _list_puzzle_files() -> List[Path]:
    base = _puzzles_dir()
    if not base.exists():
        return []
    return sorted(p for p in base.iterdir() if p.is_file() and p.suffix.lower() in PUZZLE_SUFFIXES)


class ParseRequest(BaseModel):
    name: str = Field(default="puzzle.txt")
    text: str


class SolveRequest(ParseRequest):
    start: str
    end: str
    solver: str = Field(default="ucs")


app = FastAPI(title="Wall Solver API", version="0.1.0")

cors_raw = os.environ.get("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
cors_list = [c.strip() for c in cors_raw.split(",") if c.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_list or ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/puzzles")
def list_puzzles() -> Dict[str, Any]:
    entries = []
    for path in _list_puzzle_files():
        entry: Dict[str, Any] = {"name": path.name}
        try:
            puzzle = Puzzle.from_file(path)
            entry["nodes"] = len(puzzle.graph)
            entry["edges"] = sum(1 for _ in puzzle.graph.edges())
        except (OSError, ValueError) as e:
            logger.warning("Skipping unreadable puzzle %s: %s", path.name, e)
            entry["error"] = str(e)
        entries.append(entry)
    return {"puzzles": entries}


@app.post("/parse")
def parse_puzzle(req: ParseRequest) -> Dict[str, Any]:
    try:
        puzzle = _parse_puzzle(req.text, name=req.name)
    except ValueError as e:
        raise _bad_request(e) from e

    colors = Counter(str(e.color) for _, e in puzzle.graph.edges())
    return {
        "counts": {
            "nodes": len(puzzle.graph),
            "defined_nodes": len(puzzle.graph.defined_nodes()),
            "edges": sum(colors.values()),
        },
        "colors": dict(colors),
        "meta": puzzle.meta,
    }


@app.post("/solve")
def solve(req: SolveRequest) -> Dict[str, Any]:
    try:
        puzzle = _parse_puzzle(req.text, name=req.name)
        res = solve_puzzle(puzzle, req.start, req.end, solver=req.solver)  # type: ignore[arg-type]
    except ValueError as e:
        raise _bad_request(e) from e

    return {
        "found": res.found,
        "cost": res.cost,
        "explored": res.explored,
        "solver": res.solver,
        "path": [{"node": s.node, "color": str(s.color)} for s in res.path or []],
        "lines": format_solution(res.path),
        "graph": _graph_payload(puzzle),
    }


@app.post("/graph")
def build_graph(req: ParseRequest) -> Dict[str, Any]:
    try:
        puzzle = _parse_puzzle(req.text, name=req.name)
    except ValueError as e:
        raise _bad_request(e) from e
    return {"graph": _graph_payload(puzzle)}
