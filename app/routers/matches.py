"""REST endpoints for match management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies.auth import CurrentPlayer
from app.schemas.game_engine import BoardView
from app.schemas.match import (
    ActiveMatchResponse,
    CreateMatchRequest,
    CreateMatchResponse,
    CurrentTurnResponse,
    CurrentUserResponse,
    MakeMoveRequest,
    MakeMoveResponse,
    PlaceFleetRequest,
)
from app.services.game.engine import AnyMatchEvent, ErrorKind
from app.services.match import MatchService, get_match_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["matches"])

MatchServiceDep = Annotated[MatchService, Depends(get_match_service)]

ERROR_STATUS_MAP = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.FINISHED: status.HTTP_409_CONFLICT,
}


def _raise_for_error(error_code: ErrorKind | None, error_message: str | None) -> None:
    http_status = ERROR_STATUS_MAP.get(error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise HTTPException(
        status_code=http_status,
        detail={
            "kind": error_code.value if error_code else "INTERNAL_ERROR",
            "message": error_message or "",
        },
    )


@router.post("/matches", response_model=CreateMatchResponse, status_code=status.HTTP_201_CREATED)
async def create_match(
    current_player: CurrentPlayer,
    request: CreateMatchRequest,
    service: MatchServiceDep,
):
    """Create a match against an opponent. The caller moves first.

    Raises:
        HTTPException 400: If another match is active, the opponent id is
            malformed, or the caller names themselves as opponent.
    """
    logger.info("POST /matches - player: %s, opponent: %s", current_player, request.opponent)

    result = await service.create_match(current_player, request.opponent)
    if not result.success:
        _raise_for_error(result.error_code, result.error_message)

    return CreateMatchResponse(match_id=result.match_id)


@router.get("/matches", response_model=list[str])
async def list_matches(service: MatchServiceDep):
    return await service.list_matches()


@router.get("/matches/active", response_model=ActiveMatchResponse)
async def get_active_match(service: MatchServiceDep):
    return ActiveMatchResponse(match_id=await service.get_active_match_id())


@router.get("/matches/turn", response_model=CurrentTurnResponse)
async def get_current_turn(service: MatchServiceDep):
    return CurrentTurnResponse(player_id=await service.get_current_turn())


@router.post("/matches/{match_id}/moves", response_model=MakeMoveResponse)
async def make_move(
    match_id: str,
    current_player: CurrentPlayer,
    request: MakeMoveRequest,
    service: MatchServiceDep,
):
    """Place the caller's mark at (x, y).

    Raises:
        HTTPException 400: Out of bounds, occupied cell, or no active match.
        HTTPException 403: Caller is not a participant or it is not their turn.
        HTTPException 404: match_id is not the active match.
        HTTPException 409: The match is already won or tied.
    """
    logger.info(
        "POST /matches/%s/moves - player: %s, x: %d, y: %d",
        match_id,
        current_player,
        request.x,
        request.y,
    )

    result = await service.make_move(current_player, match_id, request.x, request.y)
    if not result.success:
        _raise_for_error(result.error_code, result.error_message)

    return MakeMoveResponse(outcome=result.outcome)


@router.get("/matches/{match_id}/board", response_model=BoardView)
async def get_board(match_id: str, service: MatchServiceDep):
    result = await service.get_board(match_id)
    if not result.success:
        _raise_for_error(result.error_code, result.error_message)
    return result.board


@router.get("/matches/{match_id}/events", response_model=list[AnyMatchEvent])
async def get_events(match_id: str, service: MatchServiceDep, since: int = 0):
    """Published events of the active match with seq >= since, in order."""
    result = await service.get_events(match_id, since)
    if not result.success:
        _raise_for_error(result.error_code, result.error_message)
    return result.events


@router.put("/matches/{match_id}/fleet", status_code=status.HTTP_204_NO_CONTENT)
async def place_fleet(
    match_id: str,
    current_player: CurrentPlayer,
    request: PlaceFleetRequest,
    service: MatchServiceDep,
):
    """Place the caller's whole fleet on their private board."""
    logger.info(
        "PUT /matches/%s/fleet - player: %s, ships: %d",
        match_id,
        current_player,
        len(request.ships),
    )

    result = await service.place_fleet(current_player, match_id, request.ships)
    if not result.success:
        _raise_for_error(result.error_code, result.error_message)


@router.get("/matches/{match_id}/fleet", response_model=BoardView)
async def get_private_board(
    match_id: str,
    current_player: CurrentPlayer,
    service: MatchServiceDep,
):
    result = await service.get_private_board(current_player, match_id)
    if not result.success:
        _raise_for_error(result.error_code, result.error_message)
    return result.board


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(current_player: CurrentPlayer, service: MatchServiceDep):
    return CurrentUserResponse(player_id=service.get_current_user(current_player))
