"""
Action dispatcher for the client.

Takes the current state and a user action, performs the matching request
against the session endpoints, and returns the next state. Failed requests
are logged and leave the state unchanged; nothing is retried.
"""
import logging

import httpx

from gameplatform.client.api import PlayerAPI, PlayerAPIError
from gameplatform.client.cookies import CookieStore
from gameplatform.client.state import (
    ClientState, Action, StartGame, SubmitName, RestartGame,
    Anonymous, NamedPending, Active, view_for
)
from gameplatform.utils.constants import (
    PLAYER_UUID_COOKIE, PLAYER_NAME_COOKIE, COOKIE_DAYS, EMPTY_NAME_MESSAGE
)

logger = logging.getLogger(__name__)


def load_state(store: CookieStore) -> ClientState:
    """Read the session from the local cookie store."""
    return ClientState(
        player_uuid=store.get(PLAYER_UUID_COOKIE),
        player_name=store.get(PLAYER_NAME_COOKIE)
    )


class Dispatcher:
    """
    Applies user actions to the client state.

    Each action is valid from exactly one view; from any other view it is
    ignored.
    """

    def __init__(self, api: PlayerAPI, store: CookieStore):
        """
        Args:
            api: Client for the session endpoints
            store: Local cookie store that mirrors the session
        """
        self.api = api
        self.store = store
        self._handlers = {
            StartGame: (Anonymous, self._start_game),
            SubmitName: (NamedPending, self._submit_name),
            RestartGame: (Active, self._restart_game),
        }

    def dispatch(self, state: ClientState, action: Action) -> ClientState:
        """
        Apply an action.

        Args:
            state: Current state
            action: User action

        Returns:
            The next state (the same state when the request failed)
        """
        view_type, handler = self._handlers[type(action)]
        if not isinstance(view_for(state), view_type):
            logger.debug("Ignoring %s outside the %s view", type(action).__name__, view_type.__name__)
            return state

        try:
            return handler(state, action)
        except PlayerAPIError as e:
            logger.error("%s failed: %s", type(action).__name__, e.message)
        except httpx.HTTPError as e:
            logger.error("%s failed: %s", type(action).__name__, e)
        return state

    def _start_game(self, state: ClientState, action: StartGame) -> ClientState:
        player_uuid = self.api.create_player()
        self.store.set(PLAYER_UUID_COOKIE, player_uuid, COOKIE_DAYS)
        return state.with_player(player_uuid)

    def _submit_name(self, state: ClientState, action: SubmitName) -> ClientState:
        player_name = action.raw_name.strip()
        if not player_name:
            return state.with_error(EMPTY_NAME_MESSAGE)

        self.api.update_player_name(state.player_uuid, player_name)
        self.store.set(PLAYER_NAME_COOKIE, player_name, COOKIE_DAYS)
        return state.with_name(player_name)

    def _restart_game(self, state: ClientState, action: RestartGame) -> ClientState:
        self.api.clear_session()
        self.store.clear(PLAYER_UUID_COOKIE)
        self.store.clear(PLAYER_NAME_COOKIE)
        return state.cleared()
