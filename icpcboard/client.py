"""Client for the icpcboard HTTP API."""

from typing import Any, Dict, List, Optional

import requests

from .utils.logger_config import get_logger

logger = get_logger("client")


class ScoreboardClientError(Exception):
    """Raised when the server is unreachable or answers with an error envelope"""


class ScoreboardClient:
    def __init__(self, api_base: str, timeout: float = 30):
        """
        Initialize the client

        Args:
            api_base: Base URL of the scoreboard server, e.g. http://127.0.0.1:5000
            timeout: Per-request timeout in seconds
        """
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    def _unwrap(self, response: requests.Response) -> Any:
        try:
            result = response.json()
        except ValueError as e:
            raise ScoreboardClientError(f"Invalid response (HTTP {response.status_code}): {e}") from e
        if result.get("status") != "success":
            raise ScoreboardClientError(result.get("message", f"HTTP {response.status_code}"))
        return result.get("data")

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.api_base}{path}"
        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"API request failed: {e}")
            raise ScoreboardClientError(str(e)) from e
        return self._unwrap(response)

    def send_commands(self, text: str) -> List[str]:
        data = self._request(
            "POST",
            "/api/commands",
            json={"commands": text},
            headers={"Content-Type": "application/json"},
        )
        return data["output"]

    def get_board(self) -> Dict:
        return self._request("GET", "/api/board")

    def query_ranking(self, team: str) -> Dict:
        return self._request("GET", f"/api/teams/{team}/ranking")

    def query_submission(self, team: str, problem: str = "ALL", status: str = "ALL") -> Optional[Dict]:
        data = self._request(
            "GET",
            f"/api/teams/{team}/submissions",
            params={"problem": problem, "status": status},
        )
        return data["submission"]
