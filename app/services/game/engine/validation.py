"""Validation layer for match moves and the result types shared by the engine.

Separates validation from processing logic:
- validate_move() checks if a move is legal given the current match
- ValidationResult and ProcessResult replace exceptions for control flow
"""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from app.schemas.game_engine import Cell, MoveOutcome

from .actions import MoveAction
from .board import Board
from .errors import ErrorKind, GameError
from .events import AnyMatchEvent
from .match import Match

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Result of processing a match operation.

    Provides explicit success/failure with an error kind the host can map to
    its own transport codes.
    """

    match: Match | None = None
    events: list[AnyMatchEvent] = field(default_factory=list)
    outcome: MoveOutcome | None = None
    success: bool = True
    error_code: ErrorKind | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        match: Match,
        events: list[AnyMatchEvent] | None = None,
        outcome: MoveOutcome | None = None,
    ) -> "ProcessResult":
        """Create a successful result with the new match and events."""
        return cls(
            match=match,
            events=events or [],
            outcome=outcome,
            success=True,
        )

    @classmethod
    def failure(cls, code: ErrorKind, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            match=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of a single validation check or a whole pipeline."""

    is_valid: bool = True
    error_code: ErrorKind | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: ErrorKind, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )

    @classmethod
    def from_exception(cls, exc: GameError) -> "ValidationResult":
        return cls.error(exc.code, exc.message)


def validate_move(
    match: Match,
    action: MoveAction,
    player_id: UUID,
) -> ValidationResult:
    """Validate a move before it is applied.

    Checks, in order:
    - Match is not already won or tied
    - Player is one of the two participants
    - It's the player's turn
    - Target cell is on the board
    - Target cell is empty

    Args:
        match: Current match state.
        action: The move to validate.
        player_id: The player attempting the move.

    Returns:
        ValidationResult indicating success or failure with error details.
    """
    logger.debug(
        "Validating move: match=%s, player=%s, x=%d, y=%d",
        match.id,
        str(player_id)[:8],
        action.x,
        action.y,
    )

    if match.is_finished():
        logger.warning("Validation failed: FINISHED, match=%s", match.id)
        return ValidationResult.error(ErrorKind.FINISHED, "match already finished")

    if not match.is_participant(player_id):
        logger.warning(
            "Validation failed: FORBIDDEN (not a player), player=%s",
            str(player_id)[:8],
        )
        return ValidationResult.error(ErrorKind.FORBIDDEN, "not a player")

    if player_id != match.turn:
        logger.warning(
            "Validation failed: FORBIDDEN (not your turn), current=%s, attempted=%s",
            str(match.turn)[:8],
            str(player_id)[:8],
        )
        return ValidationResult.error(ErrorKind.FORBIDDEN, "not your turn")

    if not Board.in_bounds(match.size, action.x, action.y):
        logger.warning(
            "Validation failed: INVALID (out of bounds), x=%d, y=%d, size=%d",
            action.x,
            action.y,
            match.size,
        )
        return ValidationResult.error(ErrorKind.INVALID, "coordinates out of bounds")

    if match.board.get(match.size, action.x, action.y) != Cell.EMPTY:
        logger.warning(
            "Validation failed: INVALID (occupied), x=%d, y=%d",
            action.x,
            action.y,
        )
        return ValidationResult.error(ErrorKind.INVALID, "cell already occupied")

    logger.debug("Move validated successfully")
    return ValidationResult.ok()
