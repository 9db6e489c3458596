"""
Pydantic models for the game platform web API.

Defines request/response schemas for the session endpoints. JSON keys keep
the camelCase names the browser client sends and reads.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class CreatePlayerResponse(BaseModel):
    """Response after minting a player identifier."""
    model_config = ConfigDict(populate_by_name=True)

    player_uuid: str = Field(alias="playerUUID")


class UpdateNameRequest(BaseModel):
    """Request to set the player name."""
    model_config = ConfigDict(populate_by_name=True)

    player_name: Optional[str] = Field(default=None, alias="playerName")


class SuccessResponse(BaseModel):
    """Acknowledgment for mutating requests."""
    success: bool = True


class ErrorResponse(BaseModel):
    """Error response."""
    error: str


class HealthResponse(BaseModel):
    """Liveness check."""
    status: str = "ok"
