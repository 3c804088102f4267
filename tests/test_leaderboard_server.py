"""Tests for the bundled FastAPI leaderboard server."""

from fastapi.testclient import TestClient
import pytest

from quiz_battle.core.services.local_leaderboard import LocalLeaderboardStore
from quiz_battle.server.leaderboard_server import create_leaderboard_app, local_api_url


@pytest.fixture
def store(tmp_path):
    return LocalLeaderboardStore(tmp_path / "leaderboard.json")


@pytest.fixture
def client(store):
    return TestClient(create_leaderboard_app(store))


def test_get_empty_leaderboard(client):
    response = client.get("/api/leaderboard")
    assert response.status_code == 200
    assert response.json() == []


def test_post_returns_ranked_board(client):
    client.post("/api/leaderboard", json={"name": "Linus", "score": 1})
    response = client.post("/api/leaderboard", json={"name": "Ada", "score": 3})

    assert response.status_code == 200
    assert response.json() == [{"name": "Ada", "score": 3}, {"name": "Linus", "score": 1}]
    assert client.get("/api/leaderboard").json() == response.json()


def test_board_is_capped_at_ten(client):
    for score in range(12):
        client.post("/api/leaderboard", json={"name": f"p{score}", "score": score})
    board = client.get("/api/leaderboard").json()
    assert len(board) == 10
    assert board[0] == {"name": "p11", "score": 11}


@pytest.mark.parametrize(
    "payload",
    [{"name": "   ", "score": 1}, {"name": "Ada", "score": -1}, {"name": "Ada"}, {"score": 3}],
)
def test_invalid_submissions_rejected(client, payload):
    response = client.post("/api/leaderboard", json=payload)
    assert response.status_code == 422


def test_store_failure_maps_to_500(client, store):
    store.file_path.write_text("garbage", encoding="utf-8")
    assert client.get("/api/leaderboard").status_code == 500
    assert client.post("/api/leaderboard", json={"name": "Ada", "score": 1}).status_code == 500


def test_local_api_url_uses_loopback_for_wildcard_host():
    assert local_api_url("0.0.0.0", 9000) == "http://127.0.0.1:9000/api"
    assert local_api_url("192.168.1.5", 8000) == "http://192.168.1.5:8000/api"
