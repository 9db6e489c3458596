"""
Session service for the web interface.

Mints player identifiers, validates names and writes the session cookies.
There is no server-side session table: the cookies presented by the client
are the only record of a session, and identifiers are trusted bearer tokens.
"""
import logging
import uuid
from typing import Optional
from urllib.parse import quote

from starlette.responses import Response

from gameplatform.utils.constants import (
    PLAYER_UUID_COOKIE, PLAYER_NAME_COOKIE, COOKIE_MAX_AGE, UUID_V4_PATTERN,
    INVALID_UUID_ERROR, NAME_REQUIRED_ERROR
)

logger = logging.getLogger(__name__)

SESSION_COOKIES = (PLAYER_UUID_COOKIE, PLAYER_NAME_COOKIE)


class SessionValidationError(ValueError):
    """Raised when a request carries a malformed identifier or name."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def is_valid_player_uuid(player_uuid: Optional[str]) -> bool:
    """Check that a string has the textual shape of a UUID v4."""
    return bool(player_uuid) and UUID_V4_PATTERN.fullmatch(player_uuid) is not None


def is_valid_player_name(player_name: Optional[str]) -> bool:
    """Check that a name is present and not only whitespace."""
    return isinstance(player_name, str) and len(player_name.strip()) > 0


class SessionService:
    """
    Issues and clears player sessions.

    Every call is independent; the service holds configuration only.
    """

    def __init__(self, cookie_secure: bool = False, max_age: int = COOKIE_MAX_AGE):
        """
        Initialize the session service.

        Args:
            cookie_secure: Whether cookies carry the Secure flag
            max_age: Cookie lifetime in seconds
        """
        self.cookie_secure = cookie_secure
        self.max_age = max_age

    def create_player(self, response: Response) -> str:
        """
        Mint a new player identifier and set it as a cookie.

        Args:
            response: Response that receives the Set-Cookie header

        Returns:
            The new identifier
        """
        player_uuid = str(uuid.uuid4())
        self._set_cookie(response, PLAYER_UUID_COOKIE, player_uuid)
        logger.info("Created player %s", player_uuid)
        return player_uuid

    def update_player_name(self, response: Response, player_uuid: str,
                           player_name: Optional[str]):
        """
        Validate the identifier and name, then set the name cookie.

        The identifier is only checked for shape; it is not looked up.

        Raises:
            SessionValidationError: If the identifier or name is invalid
        """
        if not is_valid_player_uuid(player_uuid):
            logger.warning("Rejected name update for malformed identifier %r", player_uuid)
            raise SessionValidationError(INVALID_UUID_ERROR)

        if not is_valid_player_name(player_name):
            logger.warning("Rejected empty name for player %s", player_uuid)
            raise SessionValidationError(NAME_REQUIRED_ERROR)

        self._set_cookie(response, PLAYER_NAME_COOKIE, player_name)
        logger.info("Player %s is now named %r", player_uuid, player_name)

    def clear_session(self, response: Response):
        """Expire both session cookies. Safe to call with no session."""
        for name in SESSION_COOKIES:
            response.delete_cookie(
                name,
                path="/",
                secure=self.cookie_secure,
                httponly=True,
                samesite="strict"
            )
        logger.info("Cleared session cookies")

    def _set_cookie(self, response: Response, name: str, value: str):
        # Values are percent-encoded like encodeURIComponent; readers unquote them
        response.set_cookie(
            name,
            quote(value, safe=""),
            max_age=self.max_age,
            path="/",
            secure=self.cookie_secure,
            httponly=True,
            samesite="strict"
        )
