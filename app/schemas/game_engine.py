from enum import Enum, IntEnum

from pydantic import BaseModel, Field


# Cell states, encoded as a single byte on the wire
class Cell(IntEnum):
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2

    @classmethod
    def from_byte(cls, value: int) -> "Cell":
        """Lenient decode: anything that is not a player mark reads as EMPTY."""
        if value == cls.PLAYER_ONE:
            return cls.PLAYER_ONE
        if value == cls.PLAYER_TWO:
            return cls.PLAYER_TWO
        return cls.EMPTY


# Match lifecycle
class MatchStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


# Classification returned to the caller after a successful move
class MoveOutcome(str, Enum):
    WIN = "win"
    TIE = "tie"
    CONTINUE = "continue"


class BoardView(BaseModel):
    """Flat view of a board for API responses.

    Cell values: 0 empty, 1 first player, 2 second player.
    """

    size: int
    board: list[int] = Field(..., description="Row-major cell bytes, index = y * size + x")
