"""Tests for the HTTP front end."""

import pytest
from fastapi.testclient import TestClient

from api import main


@pytest.fixture
def client() -> TestClient:
    main._reset_game()
    return TestClient(main.app)


class TestGameEndpoint:
    def test_initial_game(self, client: TestClient) -> None:
        response = client.get("/game")
        assert response.status_code == 200

        data = response.json()
        assert data["current_player"] == "yellow"
        assert data["result"] == "in_progress"
        assert data["move_count"] == 0
        assert data["can_undo"] is False
        assert len(data["board"]) == 9
        assert data["board"][0] == {"cell": 1, "piece": None, "rank": 0, "label": "1"}
        assert data["reserves"]["red"] == {"small": 2, "medium": 2, "large": 2}

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}


class TestMoveEndpoint:
    def test_move_by_token(self, client: TestClient) -> None:
        data = client.post("/move", json={"token": "a5"}).json()

        assert data["board"][4]["piece"] == {"color": "yellow", "size": 3}
        assert data["board"][4]["label"] == "YY"
        assert data["reserves"]["yellow"]["large"] == 1
        assert data["current_player"] == "red"
        assert data["moves"] == ["a5"]
        assert data["can_undo"] is True

    def test_move_by_size_and_cell(self, client: TestClient) -> None:
        data = client.post("/move", json={"size": 1, "cell": 9}).json()

        assert data["board"][8]["piece"] == {"color": "yellow", "size": 1}
        assert data["moves"] == ["c9"]

    def test_gobble(self, client: TestClient) -> None:
        client.post("/move", json={"token": "c3"})
        data = client.post("/move", json={"token": "b3"}).json()

        assert data["board"][2]["piece"] == {"color": "red", "size": 2}
        assert data["board"][2]["rank"] == 2

    @pytest.mark.parametrize(
        "payload, kind",
        [
            ({"token": "x1"}, "INVALID_FORMAT"),
            ({"size": 4, "cell": 1}, "INVALID_FORMAT"),
            ({"size": 1, "cell": 12}, "INVALID_FORMAT"),
            ({"token": "u"}, "INVALID_FORMAT"),
        ],
    )
    def test_rejected_format(self, client: TestClient, payload: dict, kind: str) -> None:
        response = client.post("/move", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"].startswith(kind)

    def test_missing_fields(self, client: TestClient) -> None:
        assert client.post("/move", json={"size": 1}).status_code == 400

    def test_size_too_small(self, client: TestClient) -> None:
        client.post("/move", json={"token": "a5"})
        response = client.post("/move", json={"token": "a5"})

        assert response.status_code == 400
        assert response.json()["detail"].startswith("SIZE_TOO_SMALL")
        assert client.get("/game").json()["current_player"] == "red"

    def test_out_of_pieces(self, client: TestClient) -> None:
        for token in ["a1", "c4", "a2", "c6"]:
            client.post("/move", json={"token": token})

        response = client.post("/move", json={"token": "a3"})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("OUT_OF_PIECES")

    def test_win_then_game_over(self, client: TestClient) -> None:
        for token in ["a1", "a2", "a5", "b4"]:
            client.post("/move", json={"token": token})

        data = client.post("/move", json={"token": "b9"}).json()
        assert data["result"] == "yellow_wins"

        response = client.post("/move", json={"token": "c3"})
        assert response.status_code == 400
        assert client.get("/moves").json() == []


class TestLegalMoves:
    def test_initial_moves(self, client: TestClient) -> None:
        moves = client.get("/moves").json()
        assert len(moves) == 27
        assert {"size": 3, "cell": 1, "token": "a1"} in moves

    def test_covered_cell(self, client: TestClient) -> None:
        client.post("/move", json={"token": "b1"})
        moves = client.get("/moves").json()

        assert [m["token"] for m in moves if m["cell"] == 1] == ["a1"]


class TestUndoAndReset:
    def test_nothing_to_undo(self, client: TestClient) -> None:
        response = client.post("/undo")

        assert response.status_code == 400
        assert response.json()["detail"].startswith("NOTHING_TO_UNDO")

    def test_undo(self, client: TestClient) -> None:
        client.post("/move", json={"token": "c1"})
        client.post("/move", json={"token": "b2"})

        data = client.post("/undo").json()
        assert data["current_player"] == "red"
        assert data["moves"] == ["c1"]
        assert data["board"][1]["piece"] is None
        assert data["reserves"]["red"]["medium"] == 2

    def test_reset(self, client: TestClient) -> None:
        client.post("/move", json={"token": "c1"})

        data = client.post("/reset").json()
        assert data["move_count"] == 0
        assert data["moves"] == []
        assert data["current_player"] == "yellow"
