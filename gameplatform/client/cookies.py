"""
Local cookie store for the client.

Mirrors what the browser keeps in document.cookie: name/value pairs with an
expiry time. Optionally persisted to a JSON file so a console session
survives restarts.
"""
import json
import logging
import os
import time
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class CookieStore:
    """Name/value store with per-entry expiry."""

    def __init__(self, path: Optional[str] = None, clock: Callable[[], float] = time.time):
        """
        Initialize the store.

        Args:
            path: Optional JSON file to load from and save to
            clock: Returns the current time in seconds
        """
        self.path = path
        self.clock = clock
        # name -> (value, expires_at)
        self._entries: Dict[str, tuple] = {}

        if path and os.path.exists(path):
            self._load()

    def get(self, name: str) -> Optional[str]:
        """Return the value, or None if absent or expired."""
        entry = self._entries.get(name)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at is not None and expires_at <= self.clock():
            del self._entries[name]
            return None
        return value

    def set(self, name: str, value: str, days: Optional[float] = None):
        """
        Store a value.

        Args:
            name: Cookie name
            value: Cookie value
            days: Lifetime in days; None keeps it until cleared
        """
        expires_at = self.clock() + days * SECONDS_PER_DAY if days is not None else None
        self._entries[name] = (value, expires_at)
        self._save()

    def clear(self, name: str):
        """Remove a value if present."""
        self._entries.pop(name, None)
        self._save()

    def _load(self):
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
            entries = {
                name: (entry["value"], entry.get("expires_at"))
                for name, entry in data.items()
            }
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable cookie file %s: %s", self.path, e)
            return

        self._entries = entries
        logger.debug("Loaded %d cookies from %s", len(self._entries), self.path)

    def _save(self):
        if not self.path:
            return
        data = {
            name: {"value": value, "expires_at": expires_at}
            for name, (value, expires_at) in self._entries.items()
        }
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=2)
