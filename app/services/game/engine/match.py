"""Match state - two players, one board, whose turn it is and who won."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from app.schemas.game_engine import BoardView, Cell, MatchStatus

from .board import Board


class Match(BaseModel):
    """Core match state - contains only actual state, no inputs.

    `turn` is always one of the two players. Once `winner` is set or the board
    is full the match is terminal and the engine rejects further moves.
    Matches are plain values: nothing here assumes a single active match.
    """

    id: str
    player_a: UUID
    player_b: UUID
    turn: UUID
    board: Board
    size: int
    winner: UUID | None = None
    event_seq: int = 0  # Next sequence number for events (monotonically increasing)

    @model_validator(mode="after")
    def check_consistency(self) -> "Match":
        if self.turn not in (self.player_a, self.player_b):
            raise ValueError("turn must belong to one of the two players")
        if self.winner is not None and self.winner not in (self.player_a, self.player_b):
            raise ValueError("winner must be one of the two players")
        if len(self.board.cells) != self.size * self.size:
            raise ValueError(
                f"board has {len(self.board.cells)} cells, expected {self.size * self.size}"
            )
        return self

    @property
    def status(self) -> MatchStatus:
        if self.winner is not None:
            return MatchStatus.WON
        if self.board.is_full(self.size):
            return MatchStatus.TIED
        return MatchStatus.IN_PROGRESS

    def is_finished(self) -> bool:
        return self.winner is not None or self.board.is_full(self.size)

    def is_participant(self, player_id: UUID) -> bool:
        return player_id == self.player_a or player_id == self.player_b

    def mark_for(self, player_id: UUID) -> Cell:
        """First player marks PLAYER_ONE, second marks PLAYER_TWO."""
        return Cell.PLAYER_ONE if player_id == self.player_a else Cell.PLAYER_TWO

    def current_mark(self) -> Cell:
        return self.mark_for(self.turn)

    def other_player(self, player_id: UUID) -> UUID:
        return self.player_b if player_id == self.player_a else self.player_a

    def to_board_view(self) -> BoardView:
        return self.board.to_view(self.size)
