import pytest
from fastapi.testclient import TestClient

from inkpad.main import app
from inkpad.utils.helpers import base64_png_to_numpy


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_default_options(client):
    body = client.get("/api/options/defaults").json()
    assert body["options"]["min_width"] == 0.5
    assert body["options"]["resolved_dot_size"] == 1.5


def test_render_replays_point_groups(client):
    response = client.post("/api/render", json={
        "point_groups": [
            [{"x": 5, "y": 5, "time": 0}],
            [{"x": 10, "y": 30, "time": 0}, {"x": 30, "y": 32, "time": 20},
             {"x": 50, "y": 30, "time": 40}, {"x": 70, "y": 34, "time": 60}],
        ],
        "width": 80,
        "height": 40,
    })
    assert response.status_code == 200
    body = response.json()
    assert body["num_groups"] == 2
    assert body["num_points"] == 5
    assert body["num_dots"] > 1
    assert body["inked_pixels"] > 0

    image = base64_png_to_numpy(body["image"])
    assert image.shape == (40, 80, 4)


def test_render_rejects_invalid_options(client):
    response = client.post("/api/render", json={
        "point_groups": [[{"x": 5, "y": 5, "time": 0}]],
        "options": {"min_width": -1},
    })
    assert response.status_code == 400


def test_render_rejects_malformed_points(client):
    response = client.post("/api/render", json={"point_groups": [[{"x": 5}]]})
    assert response.status_code == 422


def test_websocket_session(client):
    with client.websocket_connect("/ws") as ws:
        assert ws.receive_json()["type"] == "connected"
        assert ws.receive_json()["type"] == "render_update"

        ws.send_json({"type": "set_origin", "left": 10, "top": 10})
        assert ws.receive_json()["type"] == "origin_updated"

        ws.send_json({"type": "stroke_start", "x": 15, "y": 15, "time": 0})
        assert ws.receive_json()["type"] == "render_update"

        ws.send_json({"type": "stroke_end"})
        assert ws.receive_json()["type"] == "render_update"
        stats = ws.receive_json()
        assert stats["type"] == "stats"
        assert stats["num_groups"] == 1

        ws.send_json({"type": "get_data"})
        data = ws.receive_json()
        assert data["point_groups"] == [[{"x": 5.0, "y": 5.0, "time": 0}]]

        ws.send_json({"type": "stroke_update"})
        assert ws.receive_json()["type"] == "error"

        ws.send_json({"type": "bogus"})
        assert ws.receive_json()["type"] == "error"

        ws.send_json({"type": "clear"})
        assert ws.receive_json()["type"] == "render_update"
        assert ws.receive_json()["type"] == "cleared"


def test_render_off_surface_point_draws_nothing(client):
    response = client.post("/api/render", json={
        "point_groups": [[{"x": 1e12, "y": 5, "time": 0}]],
        "width": 40,
        "height": 20,
    })
    assert response.status_code == 200
    body = response.json()
    assert body["num_dots"] == 1
    assert body["inked_pixels"] == 0


def test_websocket_session_survives_bad_frames(client):
    with client.websocket_connect("/ws") as ws:
        assert ws.receive_json()["type"] == "connected"
        assert ws.receive_json()["type"] == "render_update"

        ws.send_json([1, 2])
        assert ws.receive_json()["type"] == "error"

        ws.send_json({"type": "stroke_start", "x": 1e12, "y": 5, "time": 0})
        assert ws.receive_json()["type"] == "render_update"
        ws.send_json({"type": "stroke_end"})
        assert ws.receive_json()["type"] == "render_update"
        assert ws.receive_json()["type"] == "stats"

        ws.send_json({"type": "get_data"})
        assert ws.receive_json()["type"] == "data"
