"""Caller identity.

Players are identified by UUID. The host trusts the X-Player-Id header as
given; verifying it cryptographically is left to the deployment.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from app.services.game.engine import ErrorKind, GameError

logger = logging.getLogger(__name__)


def parse_player_id(value: str) -> UUID:
    """Parse an externally supplied identity string.

    Raises:
        GameError: INVALID if the value is not a UUID.
    """
    try:
        return UUID(value.strip())
    except (ValueError, AttributeError):
        raise GameError(ErrorKind.INVALID, "bad player id") from None


async def get_current_player(
    x_player_id: Annotated[str | None, Header()] = None,
) -> UUID:
    if x_player_id is None:
        logger.warning("Identification failed: missing X-Player-Id header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Player-Id header",
        )
    try:
        player_id = parse_player_id(x_player_id)
    except GameError as e:
        logger.warning("Identification failed: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid X-Player-Id header",
        )
    logger.debug("Caller identified: %s", player_id)
    return player_id


CurrentPlayer = Annotated[UUID, Depends(get_current_player)]
