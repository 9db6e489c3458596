"""
Session state and view selection for the client.

The session is two optional values, the identifier and the name. Which of
the three views is shown follows from those alone.
"""
from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class ClientState:
    """Client-held session plus the inline validation message, if any."""
    player_uuid: Optional[str] = None
    player_name: Optional[str] = None
    error_message: Optional[str] = None

    def with_player(self, player_uuid: str) -> 'ClientState':
        return replace(self, player_uuid=player_uuid, error_message=None)

    def with_name(self, player_name: str) -> 'ClientState':
        return replace(self, player_name=player_name, error_message=None)

    def with_error(self, message: str) -> 'ClientState':
        return replace(self, error_message=message)

    def cleared(self) -> 'ClientState':
        return ClientState()


# View variants

@dataclass(frozen=True)
class Anonymous:
    """No identifier yet: offer the start button."""


@dataclass(frozen=True)
class NamedPending:
    """Identifier issued, name not chosen: show the name form."""
    player_uuid: str
    error_message: Optional[str] = None


@dataclass(frozen=True)
class Active:
    """Identifier and name present: welcome the player."""
    player_uuid: str
    player_name: str


View = Union[Anonymous, NamedPending, Active]


def view_for(state: ClientState) -> View:
    """
    Select the view for a session state.

    Args:
        state: Current client state

    Returns:
        The view variant to render
    """
    if not state.player_uuid:
        return Anonymous()
    if not state.player_name:
        return NamedPending(state.player_uuid, state.error_message)
    return Active(state.player_uuid, state.player_name)


# User actions

@dataclass(frozen=True)
class StartGame:
    """The start button was pressed."""


@dataclass(frozen=True)
class SubmitName:
    """The name form was submitted with the raw input text."""
    raw_name: str


@dataclass(frozen=True)
class RestartGame:
    """The restart button was pressed."""


Action = Union[StartGame, SubmitName, RestartGame]
