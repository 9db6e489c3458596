"""
Client-side view controller for the game platform.

Holds the session as a small immutable state, renders one of three views
from it, and dispatches user actions to the session endpoints.
"""
from gameplatform.client.state import (
    ClientState, Anonymous, NamedPending, Active, view_for,
    StartGame, SubmitName, RestartGame
)
from gameplatform.client.cookies import CookieStore
from gameplatform.client.api import PlayerAPI, PlayerAPIError
from gameplatform.client.views import render, render_text
from gameplatform.client.controller import Dispatcher, load_state

__all__ = [
    'ClientState', 'Anonymous', 'NamedPending', 'Active', 'view_for',
    'StartGame', 'SubmitName', 'RestartGame',
    'CookieStore',
    'PlayerAPI', 'PlayerAPIError',
    'render', 'render_text',
    'Dispatcher', 'load_state'
]
