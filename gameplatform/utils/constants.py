"""
Constants for the game platform.
"""
import re

# Cookie names
PLAYER_UUID_COOKIE = "playerUUID"
PLAYER_NAME_COOKIE = "playerName"

# Session lifetime
COOKIE_DAYS = 1
COOKIE_MAX_AGE = COOKIE_DAYS * 24 * 60 * 60  # seconds

# UUID v4 textual shape: version nibble 4, variant nibble 8-b
UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE
)

# Server-side validation errors
INVALID_UUID_ERROR = "Invalid UUID format"
NAME_REQUIRED_ERROR = "Player name is required"
INVALID_BODY_ERROR = "Invalid request body"

# Client-side validation message
EMPTY_NAME_MESSAGE = "Please enter a name"

# Page text
PAGE_TITLE = "Game Platform"
START_LABEL = "Let's play a game"
NAME_TITLE = "Choose Your Name"
NAME_PLACEHOLDER = "Enter your name"
CONTINUE_LABEL = "Continue"
RESTART_LABEL = "Restart Game"
