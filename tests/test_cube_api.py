import pytest

from cube_api import create_app
from cube_config import FACES_INIT_STATE
from cube_input import build_net_text
from cube_solver import CubeSolver
from cube_trace import apply_all

SOLVED = FACES_INIT_STATE


@pytest.fixture
def client():
    def search(facelets):
        return "U' R'"

    app = create_app(CubeSolver(search=search))
    app.testing = True
    return app.test_client()


def _post_text(client, path, text):
    return client.post(path, data=text, content_type="text/plain")


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True}


def test_state_from_scramble(client):
    r = _post_text(client, "/api/state", "R U")
    assert r.status_code == 200
    body = r.get_json()
    assert body["facelets"] == apply_all(SOLVED, ["R", "U"])
    assert body["net"] == build_net_text(body["facelets"])


def test_state_rejects_short_string(client):
    r = _post_text(client, "/api/state", SOLVED[:53])
    assert r.status_code == 400
    assert r.get_json()["kind"] == "MalformedLength"


def test_state_requires_post(client):
    r = client.get("/api/state")
    assert r.status_code == 405
    assert r.get_json() == {"error": "Use POST"}


def test_solve(client):
    r = _post_text(client, "/api/solve", "R U")
    assert r.status_code == 200
    body = r.get_json()
    assert body["solution"] == "U' R'"
    assert body["moves"] == ["U'", "R'"]
    assert body["trace"][-1] == SOLVED


def test_solve_impossible_cube(client):
    s = SOLVED[:10] + "F" + SOLVED[11:19] + "R" + SOLVED[20:]
    r = _post_text(client, "/api/solve", s)
    assert r.status_code == 400
    assert r.get_json()["kind"] == "InvariantViolation"


def test_solve_search_error():
    app = create_app(CubeSolver(search=lambda f: "Error 7: No solution exists"))
    r = app.test_client().post("/api/solve", data="R", content_type="text/plain")
    assert r.status_code == 400
    assert r.get_json() == {"error": "Error 7: No solution exists", "kind": "SearchError"}


def test_verify(client):
    r = _post_text(client, "/api/verify", "F2 B")
    assert r.status_code == 200
    body = r.get_json()
    assert body["ok"] is True
    assert body["message"] == "Cube OK"


def test_verify_reports_parity_error(client):
    s = SOLVED[:10] + "F" + SOLVED[11:19] + "R" + SOLVED[20:]
    body = _post_text(client, "/api/verify", s).get_json()
    assert body["ok"] is False
    assert body["message"].startswith("Parity error")


def test_trace_with_move_list(client):
    r = client.post("/api/trace", json={"facelets": SOLVED, "moves": ["U", "R"]})
    assert r.status_code == 200
    states = r.get_json()["trace"]
    assert len(states) == 3
    assert states[0] == SOLVED
    assert states[2] == apply_all(SOLVED, ["U", "R"])


def test_trace_with_move_text(client):
    r = client.post("/api/trace", json={"facelets": SOLVED, "moves": "U R"})
    assert len(r.get_json()["trace"]) == 3


def test_trace_with_bad_move(client):
    r = client.post("/api/trace", json={"facelets": SOLVED, "moves": ["Q"]})
    assert r.status_code == 400
    assert r.get_json()["kind"] == "InvalidMove"


def test_unknown_route_is_404(client):
    r = client.get("/nope")
    assert r.status_code == 404


def test_unexpected_error_is_500():
    def broken(facelets):
        raise RuntimeError("boom")

    app = create_app(CubeSolver(search=broken))
    r = app.test_client().post("/api/solve", data="R", content_type="text/plain")
    assert r.status_code == 500
    assert r.get_json() == {"error": "Internal error"}


def test_trace_rejects_non_object_body(client):
    r = client.post("/api/trace", json=["R"])
    assert r.status_code == 400
    assert r.get_json()["kind"] == "InvalidInput"


def test_trace_rejects_non_string_move(client):
    r = client.post("/api/trace", json={"facelets": SOLVED, "moves": [1]})
    assert r.status_code == 400
    assert r.get_json()["kind"] == "InvalidMove"


def test_trace_rejects_moves_of_wrong_type(client):
    r = client.post("/api/trace", json={"facelets": SOLVED, "moves": {"R": 1}})
    assert r.status_code == 400
    assert r.get_json()["kind"] == "InvalidMove"


def test_trace_rejects_non_string_facelets(client):
    r = client.post("/api/trace", json={"facelets": 54, "moves": ["U"]})
    assert r.status_code == 400
    assert r.get_json()["kind"] == "InvalidInput"


def test_trace_without_body_starts_from_solved(client):
    r = client.post("/api/trace", data="not json", content_type="text/plain")
    assert r.status_code == 200
    assert r.get_json() == {"trace": [SOLVED]}


def test_solve_rejects_swapped_centers(client):
    s = SOLVED[:4] + "R" + SOLVED[5:13] + "U" + SOLVED[14:]
    r = _post_text(client, "/api/solve", s)
    assert r.status_code == 400
    assert r.get_json()["kind"] == "AmbiguousOrMissingCenter"
