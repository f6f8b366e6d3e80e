from pathlib import Path

from wall_solver.cli import main

PUZZLES_DIR = Path(__file__).resolve().parents[1] / "puzzles"


def test_solve_prints_steps(capsys):
    assert main(["solve", str(PUZZLES_DIR / "simple.txt"), "a", "b"]) == 0
    assert capsys.readouterr().out == "a ==(red)=> b\n"


def test_solve_with_networkx_backend(capsys):
    assert main(["solve", str(PUZZLES_DIR / "wall-puzzle.txt"), "s", "t", "--solver", "networkx"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 8
    assert lines[-1] == "e ==(blue)=> t"


def test_solve_without_solution(tmp_path, capsys):
    path = tmp_path / "p.txt"
    path.write_text("a red:b blue:a\nc red:a blue:b\n", encoding="utf-8")
    assert main(["solve", str(path), "a", "c"]) == 0
    assert capsys.readouterr().out == "No solution found\n"


def test_parse_error_exits_2(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("a red:b\n\nc", encoding="utf-8")
    assert main(["solve", str(path), "a", "c"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 2, column 1" in captured.err
    assert "node_name" in captured.err


def test_missing_file_exits_2(tmp_path, capsys):
    assert main(["solve", str(tmp_path / "nope.txt"), "a", "b"]) == 2
    assert "nope.txt" in capsys.readouterr().err


def test_solve_writes_visualization(tmp_path, capsys):
    out = tmp_path / "out" / "solution.html"
    assert main(["solve", str(PUZZLES_DIR / "wall-puzzle.txt"), "s", "t", "--out", str(out)]) == 0
    assert out.exists()
    assert "Wrote solution visualization" in capsys.readouterr().out


def test_visualize(tmp_path, capsys):
    out = tmp_path / "graph.html"
    assert main(["visualize", str(PUZZLES_DIR / "wall-puzzle.txt"), "--out", str(out)]) == 0
    assert "plotly" in out.read_text(encoding="utf-8").lower()


def test_malformed_json_meta_exits_2(tmp_path, capsys):
    path = tmp_path / "p.json"
    path.write_text('{"nodes": {"a": [{"color": "red", "to": "b"}]}, "meta": 5}', encoding="utf-8")
    assert main(["solve", str(path), "a", "b"]) == 2
    assert "'meta' must be an object" in capsys.readouterr().err
