from __future__ import annotations

from pathlib import Path

import pytest

from wall_solver.puzzle import Puzzle

PUZZLES_DIR = Path(__file__).resolve().parents[1] / "puzzles"


@pytest.fixture
def wall_puzzle() -> Puzzle:
    return Puzzle.from_file(PUZZLES_DIR / "wall-puzzle.txt")
