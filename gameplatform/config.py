"""
Configuration for the game platform server and console client.

Values come from environment variables, optionally loaded from a .env file.
"""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()

# Repository root (one level above the package)
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables.

    Keep all server and client configuration centralized here.
    """

    def __init__(self):
        self.host: str = os.getenv("GAME_PLATFORM_HOST", "127.0.0.1")
        self.port: int = int(os.getenv("GAME_PLATFORM_PORT", os.getenv("PORT", "3000")))
        self.web_dir: str = os.getenv("GAME_PLATFORM_WEB_DIR", os.path.join(ROOT_DIR, "web"))
        # Set to true in production behind HTTPS
        self.cookie_secure: bool = _env_bool("GAME_PLATFORM_COOKIE_SECURE", False)
        self.log_level: str = os.getenv("GAME_PLATFORM_LOG_LEVEL", "INFO")
        self.server_url: str = os.getenv("GAME_PLATFORM_URL", f"http://127.0.0.1:{self.port}")
        self.timeout: float = float(os.getenv("GAME_PLATFORM_TIMEOUT", "10"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
