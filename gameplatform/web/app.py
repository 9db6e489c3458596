"""
FastAPI application for the game platform.
"""
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from typing import Optional
import logging
import os

from gameplatform.config import Settings, get_settings
from gameplatform.web.models import (
    CreatePlayerResponse, UpdateNameRequest, SuccessResponse, ErrorResponse,
    HealthResponse
)
from gameplatform.web.session import SessionService, SessionValidationError
from gameplatform.utils.constants import INVALID_BODY_ERROR

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the web application.

    Args:
        settings: Optional settings; defaults to the environment settings

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Game Platform",
        description="Player session endpoints for the game platform",
        version="1.0.0"
    )
    app.state.settings = settings
    app.state.sessions = SessionService(cookie_secure=settings.cookie_secure)

    # =========================================================================
    # Error Handlers
    # =========================================================================

    @app.exception_handler(SessionValidationError)
    async def session_validation_handler(request: Request, exc: SessionValidationError):
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": INVALID_BODY_ERROR})

    # =========================================================================
    # Session API Endpoints
    # =========================================================================

    @app.post("/api/player", response_model=CreatePlayerResponse)
    async def create_player(response: Response):
        """Create a new player session."""
        player_uuid = app.state.sessions.create_player(response)
        return CreatePlayerResponse(player_uuid=player_uuid)

    @app.put(
        "/api/player/{player_uuid}",
        response_model=SuccessResponse,
        responses={400: {"model": ErrorResponse}}
    )
    async def update_player_name(
        player_uuid: str,
        response: Response,
        body: Optional[UpdateNameRequest] = None
    ):
        """Set the player name for an identifier."""
        player_name = body.player_name if body else None
        app.state.sessions.update_player_name(response, player_uuid, player_name)
        return SuccessResponse()

    @app.delete("/api/session", response_model=SuccessResponse)
    async def clear_session(response: Response):
        """Clear the player session."""
        app.state.sessions.clear_session(response)
        return SuccessResponse()

    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        """Liveness check."""
        return HealthResponse()

    # =========================================================================
    # Static Files (Frontend)
    # =========================================================================

    web_dir = settings.web_dir

    # Mounted before the catch-all so assets are not answered with the page
    if os.path.isdir(web_dir):
        app.mount("/static", StaticFiles(directory=web_dir), name="static")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_index(full_path: str):
        """Serve the entry page for every other path."""
        index_path = os.path.join(web_dir, "index.html")
        if os.path.exists(index_path):
            return FileResponse(index_path)
        return {"message": "Game Platform API. Frontend not found. Use /docs for API documentation."}

    return app


app = create_app()
