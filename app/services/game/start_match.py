import logging
from uuid import UUID

from app.services.game.engine import (
    Board,
    ErrorKind,
    GameError,
    Match,
    MatchCreated,
    ProcessResult,
)

logger = logging.getLogger(__name__)


def validate_match_players(player_a: UUID, player_b: UUID) -> None:
    """Validate the two participants before initializing a match."""
    if player_a == player_b:
        raise GameError(ErrorKind.INVALID, "players must differ")


def initialize_match(
    match_id: str,
    player_a: UUID,
    player_b: UUID,
    size: int,
) -> ProcessResult:
    """
    Validate the participants and return a fresh match.

    The first player moves first. The result carries a MatchCreated event
    with seq 0.

    Args:
        match_id: Identifier assigned by the host.
        player_a: First player (marks PLAYER_ONE, moves first).
        player_b: Second player (marks PLAYER_TWO).
        size: Board edge length.

    Returns:
        ProcessResult with the new match, or an INVALID failure.
    """
    if size < 1:
        return ProcessResult.failure(ErrorKind.INVALID, "board size must be at least 1")
    try:
        validate_match_players(player_a, player_b)
    except GameError as e:
        logger.warning("Match %s not created: %s", match_id, e.message)
        return ProcessResult.failure(e.code, e.message)

    match = Match(
        id=match_id,
        player_a=player_a,
        player_b=player_b,
        turn=player_a,
        board=Board.new_empty(size),
        size=size,
        winner=None,
        event_seq=1,
    )
    event = MatchCreated(
        match_id=match_id,
        player_a=player_a,
        player_b=player_b,
        size=size,
        seq=0,
    )

    logger.info(
        "Match initialized: id=%s, player_a=%s, player_b=%s, size=%d",
        match_id,
        str(player_a)[:8],
        str(player_b)[:8],
        size,
    )
    return ProcessResult.ok(match, [event])
