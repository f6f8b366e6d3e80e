import io

from wall_solver.colors import Color
from wall_solver.report import NO_SOLUTION_MESSAGE, format_solution, print_solution
from wall_solver.solver import SearchState as S


def test_format_solution(wall_puzzle):
    path = wall_puzzle.solve("s", "t").path
    assert format_solution(path) == [
        "s ==(red)=> a",
        "a ==(blue)=> b",
        "b ==(red)=> c",
        "c ==(blue)=> c",
        "c ==(red)=> b",
        "b ==(blue)=> a",
        "a ==(red)=> e",
        "e ==(blue)=> t",
    ]


def test_no_solution():
    assert format_solution(None) == [NO_SOLUTION_MESSAGE]
    assert format_solution([]) == ["No solution found"]


def test_zero_length_path_has_no_steps():
    assert format_solution([S("a", Color.NONE)]) == []


def test_neutral_edges_render_as_none():
    assert format_solution([S("a", Color.NONE), S("b", Color.NONE)]) == ["a ==(none)=> b"]


def test_print_solution():
    out = io.StringIO()
    print_solution([S("a", Color.NONE), S("b", Color.RED)], out=out)
    assert out.getvalue() == "a ==(red)=> b\n"


def test_print_no_solution_to_stdout(capsys):
    print_solution(None)
    assert capsys.readouterr().out == "No solution found\n"
