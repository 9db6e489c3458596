"""
Renderers for the three client views.

Rendering is pure: the same state always yields the same markup. Each view
variant has its own render function, chosen by the variant's type.
"""
from html import escape
from typing import Callable, Dict

from gameplatform.client.state import ClientState, Anonymous, NamedPending, Active, View, view_for
from gameplatform.utils.constants import (
    PAGE_TITLE, START_LABEL, NAME_TITLE, NAME_PLACEHOLDER, CONTINUE_LABEL,
    RESTART_LABEL
)


# =============================================================================
# HTML
# =============================================================================

def render_anonymous(view: Anonymous) -> str:
    return (
        '<div class="container">\n'
        f'    <h1>{PAGE_TITLE}</h1>\n'
        f'    <button id="startButton" class="btn">{START_LABEL}</button>\n'
        '</div>'
    )


def render_named_pending(view: NamedPending) -> str:
    error = escape(view.error_message) if view.error_message else ""
    return (
        '<div class="container">\n'
        f'    <h1>{NAME_TITLE}</h1>\n'
        f'    <input type="text" id="playerName" class="input-field" placeholder="{NAME_PLACEHOLDER}" />\n'
        f'    <button id="submitName" class="btn">{CONTINUE_LABEL}</button>\n'
        f'    <div id="errorMessage" class="error">{error}</div>\n'
        '</div>'
    )


def render_active(view: Active) -> str:
    return (
        '<div class="container">\n'
        f'    <h1>{PAGE_TITLE}</h1>\n'
        f'    <div class="welcome-message">Welcome, {escape(view.player_name)}!</div>\n'
        f'    <button id="restartButton" class="btn">{RESTART_LABEL}</button>\n'
        '</div>'
    )


_HTML_RENDERERS: Dict[type, Callable] = {
    Anonymous: render_anonymous,
    NamedPending: render_named_pending,
    Active: render_active,
}


def render_view(view: View) -> str:
    """Render a view variant to HTML."""
    return _HTML_RENDERERS[type(view)](view)


def render(state: ClientState) -> str:
    """
    Render the view for a client state to HTML.

    Args:
        state: Current client state

    Returns:
        Markup for the page root
    """
    return render_view(view_for(state))


# =============================================================================
# Console
# =============================================================================

def _text_anonymous(view: Anonymous) -> str:
    return f"=== {PAGE_TITLE} ===\n[start] {START_LABEL}"


def _text_named_pending(view: NamedPending) -> str:
    lines = [f"=== {NAME_TITLE} ===", f"[name <your name>] {CONTINUE_LABEL}"]
    if view.error_message:
        lines.append(f"! {view.error_message}")
    return "\n".join(lines)


def _text_active(view: Active) -> str:
    return f"=== {PAGE_TITLE} ===\nWelcome, {view.player_name}!\n[restart] {RESTART_LABEL}"


_TEXT_RENDERERS: Dict[type, Callable] = {
    Anonymous: _text_anonymous,
    NamedPending: _text_named_pending,
    Active: _text_active,
}


def render_text(state: ClientState) -> str:
    """Render the view for a client state as console text."""
    view = view_for(state)
    return _TEXT_RENDERERS[type(view)](view)
