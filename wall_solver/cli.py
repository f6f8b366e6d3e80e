from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .parser import PuzzleParseError
from .puzzle import Puzzle
from .report import print_solution
from .solver import SOLVER_CHOICES, solve_puzzle
from .viz import write_plotly_html

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wall-solver",
        description="Shortest path through a colored graph without taking two same-colored edges in a row",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_solve = sub.add_parser("solve", help="Solve a puzzle and print the path")
    p_solve.add_argument("puzzle", type=str, help="Path to a puzzle text file or .json puzzle")
    p_solve.add_argument("start", type=str, help="Start node")
    p_solve.add_argument("end", type=str, help="End node")
    p_solve.add_argument("--solver", choices=SOLVER_CHOICES, default="ucs", help="Solver backend")
    p_solve.add_argument("--out", type=str, default=None, help="Also render the solution to this HTML file")
    p_solve.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    p_viz = sub.add_parser("visualize", help="Render the puzzle graph to an HTML file")
    p_viz.add_argument("puzzle", type=str, help="Path to a puzzle text file or .json puzzle")
    p_viz.add_argument("--out", type=str, default="out/graph.html", help="Output HTML path")
    p_viz.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging(args.verbose)

    puzzle_path = Path(args.puzzle)
    try:
        puzzle = Puzzle.from_file(puzzle_path)
    except PuzzleParseError as e:
        print(f"{puzzle_path}: parse error at {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"{puzzle_path}: {e}", file=sys.stderr)
        return 2

    if args.cmd == "visualize":
        out = write_plotly_html(puzzle, out_path=args.out, title=f"Graph: {puzzle_path.name}")
        print(f"Wrote graph visualization: {out}")
        return 0

    if args.cmd == "solve":
        res = solve_puzzle(puzzle, args.start, args.end, solver=args.solver)
        logger.info(
            "Solved %s with %s: found=%s cost=%s explored=%d",
            puzzle_path.name,
            res.solver,
            res.found,
            res.cost,
            res.explored,
        )
        print_solution(res.path)
        if args.out:
            out = write_plotly_html(
                puzzle,
                out_path=args.out,
                path=res.path,
                title=f"Solution: {puzzle_path.name} ({args.start} -> {args.end})",
            )
            print(f"Wrote solution visualization: {out}")
        return 0

    raise AssertionError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
