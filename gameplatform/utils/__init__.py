"""
Utilities module for the game platform.
"""
from gameplatform.utils.constants import (
    PLAYER_UUID_COOKIE, PLAYER_NAME_COOKIE, COOKIE_MAX_AGE, COOKIE_DAYS,
    UUID_V4_PATTERN, INVALID_UUID_ERROR, NAME_REQUIRED_ERROR,
    EMPTY_NAME_MESSAGE
)
from gameplatform.utils.logging_setup import configure_logging

__all__ = [
    'PLAYER_UUID_COOKIE', 'PLAYER_NAME_COOKIE', 'COOKIE_MAX_AGE', 'COOKIE_DAYS',
    'UUID_V4_PATTERN', 'INVALID_UUID_ERROR', 'NAME_REQUIRED_ERROR',
    'EMPTY_NAME_MESSAGE',
    'configure_logging'
]
