"""Pydantic schemas for match operations."""

from pydantic import BaseModel, Field

from app.schemas.game_engine import MoveOutcome


class CreateMatchRequest(BaseModel):
    """Request body for creating a match."""

    opponent: str = Field(..., description="Player id (UUID) of the opponent")


class CreateMatchResponse(BaseModel):
    match_id: str


class MakeMoveRequest(BaseModel):
    """Request body for placing a mark."""

    x: int = Field(..., description="Column, 0-indexed")
    y: int = Field(..., description="Row, 0-indexed")


class MakeMoveResponse(BaseModel):
    outcome: MoveOutcome


class PlaceFleetRequest(BaseModel):
    """Request body for placing a fleet on the caller's private board."""

    ships: list[str] = Field(
        ...,
        min_length=1,
        description="Ships in 'x,y;x,y;...' form, e.g. '0,0;0,1;0,2'",
    )


class ActiveMatchResponse(BaseModel):
    match_id: str | None = None


class CurrentTurnResponse(BaseModel):
    player_id: str | None = Field(None, description="Player whose turn it is")


class CurrentUserResponse(BaseModel):
    player_id: str
