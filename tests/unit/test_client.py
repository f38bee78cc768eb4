from __future__ import annotations

from typing import Any, Dict, Optional

import pytest
import requests

from icpcboard import client as client_module
from icpcboard.client import ScoreboardClient, ScoreboardClientError
from icpcboard.engine.contest import Contest
from icpcboard.server import create_app
from icpcboard.utils.config_manager import ConfigManager

API_BASE = "http://scoreboard.test"


class _FakeResponse:
    def __init__(self, status_code: int, payload: Optional[Dict[str, Any]]):
        self.status_code = status_code
        self._payload = payload

    def json(self) -> Dict[str, Any]:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


@pytest.fixture
def remote(monkeypatch, tmp_path) -> ScoreboardClient:
    """Route the client's HTTP calls into a Flask test client."""

    app = create_app(contest=Contest(), config=ConfigManager(str(tmp_path / "missing.json")))
    flask_client = app.test_client()

    def fake_request(method, url, timeout=None, json=None, params=None, headers=None):
        assert url.startswith(API_BASE)
        response = flask_client.open(
            url[len(API_BASE):],
            method=method,
            json=json,
            query_string=params,
        )
        return _FakeResponse(response.status_code, response.get_json())

    monkeypatch.setattr(client_module.requests, "request", fake_request)
    return ScoreboardClient(API_BASE + "/")


def test_send_commands_returns_output_lines(remote) -> None:
    lines = remote.send_commands("ADDTEAM a\nADDTEAM a\nEND\n")
    assert lines == [
        "[Info]Add successfully.",
        "[Error]Add failed: duplicated team name.",
        "[Info]Competition ends.",
    ]


def test_board_ranking_and_submission_queries(remote) -> None:
    remote.send_commands(
        "ADDTEAM x ADDTEAM y START DURATION 100 PROBLEM 1 "
        "SUBMIT A BY y WITH Accepted AT 9 FLUSH"
    )

    board = remote.get_board()
    assert [row["name"] for row in board["rows"]] == ["y", "x"]
    assert remote.query_ranking("x") == {"team": "x", "rank": 2, "frozen": False}
    assert remote.query_submission("y") == {"problem": "A", "status": "Accepted", "time": 9}
    assert remote.query_submission("x") is None


def test_error_envelope_raises(remote) -> None:
    with pytest.raises(ScoreboardClientError, match="cannot find the team"):
        remote.query_ranking("ghost")


def test_connection_failure_raises(monkeypatch) -> None:
    def refuse(*args, **kwargs):
        raise requests.exceptions.ConnectionError("connection refused")

    monkeypatch.setattr(client_module.requests, "request", refuse)
    with pytest.raises(ScoreboardClientError, match="connection refused"):
        ScoreboardClient(API_BASE).get_board()


def test_non_json_response_raises(monkeypatch) -> None:
    monkeypatch.setattr(
        client_module.requests,
        "request",
        lambda *args, **kwargs: _FakeResponse(502, None),
    )
    with pytest.raises(ScoreboardClientError, match="HTTP 502"):
        ScoreboardClient(API_BASE).get_board()
