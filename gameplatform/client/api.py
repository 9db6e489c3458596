"""
HTTP client for the session endpoints.
"""
import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class PlayerAPIError(Exception):
    """The server answered a session request with an error status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class PlayerAPI:
    """
    Thin wrapper over an httpx client for the three session endpoints.

    Transport failures surface as httpx.HTTPError; error statuses as
    PlayerAPIError carrying the server's error string.
    """

    def __init__(self, client: httpx.Client):
        """
        Args:
            client: httpx client whose base_url points at the server
        """
        self.client = client

    @classmethod
    def connect(cls, base_url: str, timeout: float = 10.0) -> 'PlayerAPI':
        """Create an API bound to a server URL."""
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def create_player(self) -> str:
        """Request a new identifier. Returns the identifier."""
        data = self._request("POST", "/api/player")
        if "playerUUID" not in data:
            raise PlayerAPIError(200, "Response has no playerUUID")
        return data["playerUUID"]

    def update_player_name(self, player_uuid: str, player_name: str):
        """Set the name for an identifier."""
        self._request("PUT", f"/api/player/{player_uuid}", json={"playerName": player_name})

    def clear_session(self):
        """Clear the server-side cookies."""
        self._request("DELETE", "/api/session")

    def close(self):
        self.client.close()

    def _request(self, method: str, url: str, json: Optional[dict] = None) -> dict:
        response = self.client.request(method, url, json=json)
        try:
            data = response.json()
        except ValueError:
            raise PlayerAPIError(response.status_code, "Invalid JSON response")

        if not isinstance(data, dict):
            raise PlayerAPIError(response.status_code, "Unexpected response body")

        if response.is_error:
            raise PlayerAPIError(response.status_code, data.get("error") or response.reason_phrase)

        return data
