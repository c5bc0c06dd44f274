"""Match event types - emitted during state transitions for the host to publish.

Events describe what happened during a match operation, enabling:
- Notifications to both participants
- Action replay / audit logging
- Reconnection state catch-up
"""

from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.game_engine import Cell


class MatchEvent(BaseModel):
    """Base class for all match events."""

    event_type: str
    match_id: str
    seq: int = 0  # Sequence number assigned during processing


class MatchCreated(MatchEvent):
    """A new match was set up between two players."""

    event_type: Literal["match_created"] = "match_created"
    player_a: UUID = Field(..., description="First player, moves first")
    player_b: UUID
    size: int


class MoveMade(MatchEvent):
    """A player placed their mark."""

    event_type: Literal["move_made"] = "move_made"
    player_id: UUID
    x: int
    y: int
    mark: Cell


class GameWon(MatchEvent):
    """A player completed a line."""

    event_type: Literal["game_won"] = "game_won"
    winner_id: UUID
    mark: Cell


class GameTied(MatchEvent):
    """The board filled up without a completed line."""

    event_type: Literal["game_tied"] = "game_tied"


class MatchEnded(MatchEvent):
    """The match reached a terminal state."""

    event_type: Literal["match_ended"] = "match_ended"


# Union of all event types for type checking
AnyMatchEvent = Annotated[
    MatchCreated | MoveMade | GameWon | GameTied | MatchEnded,
    Field(discriminator="event_type"),
]
