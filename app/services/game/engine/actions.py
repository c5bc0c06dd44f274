"""Match action types - explicit user inputs separated from match state."""

from typing import Literal

from pydantic import BaseModel, Field


class MoveAction(BaseModel):
    """Player places their mark on a cell.

    Coordinates are not range-checked here: bounds depend on the match's board
    size and are enforced by the engine.
    """

    action_type: Literal["move"] = "move"
    x: int = Field(..., description="Column, 0-indexed")
    y: int = Field(..., description="Row, 0-indexed")
