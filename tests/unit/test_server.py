from __future__ import annotations

import pytest

from icpcboard.engine.contest import Contest
from icpcboard.server import create_app
from icpcboard.utils.config_manager import ConfigManager


SETUP = """\
ADDTEAM red
ADDTEAM blue
START DURATION 300 PROBLEM 2
SUBMIT A BY red WITH Accepted AT 10
SUBMIT A BY blue WITH Wrong_Answer AT 12
FLUSH
"""


@pytest.fixture
def contest() -> Contest:
    return Contest()


@pytest.fixture
def client(contest, tmp_path):
    config = ConfigManager(str(tmp_path / "missing.json"))
    app = create_app(contest=contest, config=config)
    app.config["TESTING"] = True
    return app.test_client()


def test_commands_endpoint_runs_protocol(client) -> None:
    response = client.post("/api/commands", json={"commands": SETUP})
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["status"] == "success"
    assert payload["data"]["output"] == [
        "[Info]Add successfully.",
        "[Info]Add successfully.",
        "[Info]Competition starts.",
        "[Info]Flush scoreboard.",
    ]


def test_commands_endpoint_requires_text(client) -> None:
    response = client.post("/api/commands", json={"commands": 42})
    assert response.status_code == 400
    assert response.get_json()["status"] == "error"


def test_malformed_stream_is_a_bad_request(client) -> None:
    response = client.post("/api/commands", json={"commands": "START DURATION soon PROBLEM 2"})
    assert response.status_code == 400
    assert "Malformed" in response.get_json()["message"]


def test_board_endpoint(client) -> None:
    client.post("/api/commands", json={"commands": SETUP})
    data = client.get("/api/board").get_json()["data"]
    assert data["frozen"] is False
    assert [row["name"] for row in data["rows"]] == ["red", "blue"]
    assert data["rows"][0] == {"name": "red", "rank": 1, "solved": 1, "penalty": 10, "cells": ["+", "."]}
    assert data["rows"][1]["cells"] == ["-1", "."]


def test_ranking_endpoint(client) -> None:
    client.post("/api/commands", json={"commands": SETUP})
    response = client.get("/api/teams/blue/ranking")
    assert response.get_json()["data"] == {"team": "blue", "rank": 2, "frozen": False}


def test_unknown_team_is_not_found(client) -> None:
    response = client.get("/api/teams/ghost/ranking")
    assert response.status_code == 404
    assert response.get_json() == {
        "status": "error",
        "message": "Query ranking failed: cannot find the team.",
    }


def test_submission_endpoint_filters(client) -> None:
    client.post("/api/commands", json={"commands": SETUP})
    data = client.get("/api/teams/blue/submissions", query_string={"problem": "A"}).get_json()["data"]
    assert data["submission"] == {"problem": "A", "status": "Wrong_Answer", "time": 12}

    data = client.get("/api/teams/blue/submissions", query_string={"status": "Accepted"}).get_json()["data"]
    assert data["submission"] is None


def test_freeze_and_scroll_endpoints(client, contest) -> None:
    client.post("/api/commands", json={"commands": SETUP})

    assert client.post("/api/scroll").status_code == 409
    assert client.post("/api/freeze").get_json()["data"] == {"frozen": True}

    second = client.post("/api/freeze")
    assert second.status_code == 409
    assert second.get_json()["message"] == "Freeze failed: scoreboard has been frozen."

    contest.submit("B", "blue", "Accepted", 200)
    contest.submit("A", "blue", "Accepted", 210)
    data = client.post("/api/scroll").get_json()["data"]

    assert data["changes"] == [{"team": "blue", "displaced": "red", "solved": 2, "penalty": 430}]
    assert data["before"]["rows"][1]["cells"] == ["-1/1", "0/1"]
    assert contest.frozen is False


def test_flush_endpoint_publishes(client, contest) -> None:
    client.post("/api/commands", json={"commands": "ADDTEAM b ADDTEAM a START DURATION 5 PROBLEM 1"})
    assert client.get("/api/teams/a/ranking").get_json()["data"]["rank"] == 1

    contest.submit("A", "b", "Accepted", 3)
    data = client.post("/api/flush").get_json()["data"]
    assert [row["name"] for row in data["rows"]] == ["b", "a"]
    assert client.get("/api/teams/a/ranking").get_json()["data"]["rank"] == 2
