import pytest
from fastapi.testclient import TestClient

import backend.app as backend_app
from backend.app import app

SIMPLE = "a red:b \nb blue:a"


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_solve(client):
    resp = client.post("/solve", json={"text": SIMPLE, "start": "a", "end": "b"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["found"] is True
    assert body["cost"] == 1
    assert body["solver"] == "ucs"
    assert body["path"] == [{"node": "a", "color": "none"}, {"node": "b", "color": "red"}]
    assert body["lines"] == ["a ==(red)=> b"]
    assert {"from": "b", "to": "a", "color": "blue"} in body["graph"]["edges"]


def test_solve_without_path(client):
    resp = client.post(
        "/solve",
        json={"text": "a red:b blue:a\nc red:a blue:b", "start": "a", "end": "c", "solver": "networkx"},
    )
    body = resp.json()
    assert body["found"] is False
    assert body["cost"] is None
    assert body["path"] == []
    assert body["lines"] == ["No solution found"]


def test_solve_parse_error(client):
    resp = client.post("/solve", json={"text": "a red", "start": "a", "end": "b"})
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["rule"] == "colon"
    assert (detail["line"], detail["column"]) == (1, 6)


def test_solve_unknown_solver(client):
    resp = client.post("/solve", json={"text": SIMPLE, "start": "a", "end": "b", "solver": "z3"})
    assert resp.status_code == 400
    assert "Unknown solver" in resp.json()["detail"]


def test_parse_counts(client):
    resp = client.post("/parse", json={"text": "a red:b blue:a\nc red:a blue:b"})
    body = resp.json()
    assert body["counts"] == {"nodes": 3, "defined_nodes": 2, "edges": 4}
    assert body["colors"] == {"red": 2, "blue": 2}


def test_graph_from_json(client):
    text = '{"nodes": {"a": [{"color": "red", "to": "b"}]}}'
    resp = client.post("/graph", json={"name": "p.json", "text": text})
    assert resp.json()["graph"] == {
        "nodes": [{"id": "a", "defined": True}, {"id": "b", "defined": False}],
        "edges": [{"from": "a", "to": "b", "color": "red"}],
    }


def test_list_puzzles(client):
    names = {p["name"]: p for p in client.get("/puzzles").json()["puzzles"]}
    assert names["wall-puzzle.txt"]["nodes"] == 6
    assert names["simple.txt"]["edges"] == 2


def test_graph_rejects_non_object_meta(client):
    text = '{"nodes": {"a": [{"color": "red", "to": "b"}]}, "meta": 5}'
    resp = client.post("/graph", json={"name": "p.json", "text": text})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "'meta' must be an object"


def test_list_puzzles_reports_unreadable_files(client, monkeypatch):
    def _unreadable(path):
        raise PermissionError(f"cannot read {path}")

    monkeypatch.setattr(backend_app.Puzzle, "from_file", staticmethod(_unreadable))
    entries = client.get("/puzzles").json()["puzzles"]
    assert entries
    assert all("cannot read" in e["error"] for e in entries)
