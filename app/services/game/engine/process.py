"""Main entry point for move processing.

This module provides the primary interface for playing a match:
- apply_move(): Validates and applies a move, then classifies the result
- Returns ProcessResult with the new match, events and outcome
"""

import logging
from uuid import UUID

from app.schemas.game_engine import MoveOutcome

from .actions import MoveAction
from .events import AnyMatchEvent, GameTied, GameWon, MatchEnded, MoveMade
from .match import Match
from .validation import ProcessResult, validate_move

logger = logging.getLogger(__name__)


def apply_move(
    match: Match,
    action: MoveAction,
    player_id: UUID,
) -> ProcessResult:
    """Apply a move and return the result.

    The input match is never modified. On success the result carries a new
    match in which exactly one of these happened:
    1. The mover completed a line and won
    2. The board filled up and the match is tied
    3. The turn passed to the other player

    Args:
        match: Current match state.
        action: The move to apply.
        player_id: The player making the move.

    Returns:
        ProcessResult containing:
        - success: Whether the move was applied
        - match: The new match state (if successful)
        - outcome: win, tie or continue (if successful)
        - events: Events that occurred (with seq numbers)
        - error_code/error_message: Error details (if failed)

    Example:
        >>> result = apply_move(match, MoveAction(x=1, y=1), player_id)
        >>> if result.success:
        ...     match = result.match
        ...     for event in result.events:
        ...         publish(event)
        ... else:
        ...     send_error(result.error_code, result.error_message)
    """
    logger.info(
        "Processing move: match=%s, player=%s, x=%d, y=%d",
        match.id,
        str(player_id)[:8],
        action.x,
        action.y,
    )

    validation = validate_move(match, action, player_id)
    if not validation.is_valid:
        logger.warning(
            "Move validation failed: code=%s, message=%s, player=%s",
            validation.error_code,
            validation.error_message,
            str(player_id)[:8],
        )
        return ProcessResult.failure(validation.error_code, validation.error_message)

    board = match.board.model_copy(deep=True)
    mark = match.mark_for(player_id)
    board.set(match.size, action.x, action.y, mark)

    events: list[AnyMatchEvent] = [
        MoveMade(match_id=match.id, player_id=player_id, x=action.x, y=action.y, mark=mark)
    ]

    winning_mark = board.check_winner(match.size)
    if winning_mark is not None:
        logger.info(
            "Match %s won by player=%s (%s)", match.id, str(player_id)[:8], winning_mark.name
        )
        new_match = match.model_copy(update={"board": board, "winner": player_id})
        events.append(GameWon(match_id=match.id, winner_id=player_id, mark=winning_mark))
        events.append(MatchEnded(match_id=match.id))
        outcome = MoveOutcome.WIN
    elif board.is_full(match.size):
        logger.info("Match %s tied", match.id)
        new_match = match.model_copy(update={"board": board})
        events.append(GameTied(match_id=match.id))
        events.append(MatchEnded(match_id=match.id))
        outcome = MoveOutcome.TIE
    else:
        next_player = match.other_player(player_id)
        logger.debug("Turn passes to player=%s", str(next_player)[:8])
        new_match = match.model_copy(update={"board": board, "turn": next_player})
        outcome = MoveOutcome.CONTINUE

    result = _assign_event_sequences(ProcessResult.ok(new_match, events, outcome))
    logger.info(
        "Move processed successfully: match=%s, outcome=%s, events_generated=%d",
        match.id,
        outcome.value,
        len(result.events),
    )
    logger.debug("Generated events: %s", [type(e).__name__ for e in result.events])
    return result


def _assign_event_sequences(result: ProcessResult) -> ProcessResult:
    """Assign monotonically increasing sequence numbers to events.

    Updates each event's seq field and increments the match's event_seq counter.
    """
    if result.match is None or not result.events:
        return result

    current_seq = result.match.event_seq
    for event in result.events:
        event.seq = current_seq
        current_seq += 1

    new_match = result.match.model_copy(update={"event_seq": current_seq})

    return ProcessResult.ok(new_match, result.events, result.outcome)


def check_win_condition(match: Match) -> UUID | None:
    """Return the player owning a completed line, or None."""
    mark = match.board.check_winner(match.size)
    if mark is None:
        return None
    if mark == match.mark_for(match.player_a):
        return match.player_a
    return match.player_b
