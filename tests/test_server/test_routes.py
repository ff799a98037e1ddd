"""
Tests for the HTTP API and WebSocket endpoint.
"""

import pytest
from fastapi.testclient import TestClient

from tablepoker.server.app import create_app


@pytest.fixture
def client(tmp_path):
    with TestClient(create_app(chips_file=tmp_path / "chips.json")) as client:
        yield client


class TestHttpRoutes:
    """Tests for the HTTP routes."""

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_lobby_state(self, client):
        data = client.get("/game/state").json()
        public = data["public_info"]
        assert public["playing"] is False
        assert public["phase"] == "handOver"
        assert len(public["players"]) == 1
        assert public["players"][0]["name"] == "You"
        assert data["private_info"]["seat"] == 0

    def test_start_game(self, client):
        resp = client.post("/game/start", json={
            "players": [{"profile": "tight"}, {"name": "Ada", "profile": "aggressive"}],
            "buy_in": 500,
            "big_blind": 10,
            "small_blind": 5,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        public = data["public_info"]
        assert public["playing"] is True
        assert [p["name"] for p in public["players"]] == ["You", "Bot 1", "Ada"]
        assert all(p["chips"] == 500 for p in public["players"])

    def test_start_game_defaults(self, client):
        resp = client.post("/game/start", json={})
        assert resp.status_code == 200
        assert len(resp.json()["public_info"]["players"]) == 2

    @pytest.mark.parametrize("body", [
        {"big_blind": 10, "small_blind": 10},
        {"big_blind": 15, "small_blind": 10},
        {"buy_in": 100, "big_blind": 10, "small_blind": 5},
        {"buy_in": -5},
        {"players": []},
        {"players": [{}] * 6},
        {"players": [{"profile": "reckless"}]},
        {"small_blind": 0.5, "big_blind": 1, "buy_in": 20},
        {"buy_in": 1000.5},
    ])
    def test_invalid_config(self, client, body):
        assert client.post("/game/start", json=body).status_code == 422

    def test_action_without_hand(self, client):
        resp = client.post("/game/action", json={"action_type": "call"})
        assert resp.status_code == 409

    def test_action_not_your_turn(self, client):
        """The bot acts first in the opening heads-up hand."""
        client.post("/game/start", json={})
        resp = client.post("/game/action", json={"action_type": "call"})
        assert resp.status_code == 409

    def test_invalid_action(self, client):
        resp = client.post("/game/action", json={"action_type": "raise"})
        assert resp.status_code == 422
        resp = client.post("/game/action", json={"action_type": "bet", "amount": -1})
        assert resp.status_code == 422

    def test_next_hand_needs_game(self, client):
        assert client.post("/game/next-hand").status_code == 409

    def test_start_while_playing(self, client):
        """A running game must be ended before another is configured."""
        client.post("/game/start", json={"players": [{}, {}, {}]})
        resp = client.post("/game/start", json={"players": [{}, {}, {}, {}, {}]})
        assert resp.status_code == 409

        players = client.get("/game/state").json()["public_info"]["players"]
        assert len(players) == 4
        assert len({p["id"] for p in players}) == 4

    def test_start_after_end(self, client):
        client.post("/game/start", json={"players": [{}, {}, {}]})
        client.post("/game/end")
        resp = client.post("/game/start", json={})
        assert resp.status_code == 200
        assert len(resp.json()["public_info"]["players"]) == 2

    def test_end_game(self, client):
        client.post("/game/start", json={})
        data = client.post("/game/end").json()
        assert data["public_info"]["playing"] is False
        assert len(data["public_info"]["players"]) == 1


class TestWebSocket:
    """Tests for the WebSocket endpoint."""

    def test_initial_state(self, client):
        with client.websocket_connect("/ws") as ws:
            message = ws.receive_json()
            assert message["type"] == "state"
            assert message["public_info"]["playing"] is False

    def test_get_state(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"type": "get_state"})
            assert ws.receive_json()["type"] == "state"

    def test_unknown_message(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"type": "dance"})
            assert ws.receive_json()["type"] == "error"

    def test_action_out_of_turn(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"type": "action", "action": "call"})
            response = ws.receive_json()
            assert response == {"type": "error", "message": "Not your turn"}

    def test_invalid_action(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            ws.send_json({"type": "action", "action": "raise"})
            assert ws.receive_json()["type"] == "error"

    def test_state_pushed_after_start(self, client):
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            client.post("/game/start", json={})
            message = ws.receive_json()
            assert message["type"] == "state"
            assert message["public_info"]["playing"] is True
