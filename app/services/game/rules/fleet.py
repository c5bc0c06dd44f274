"""Helpers for turning raw ship input into validation input."""

from app.services.game.engine.board import Coordinate
from app.services.game.engine.errors import ErrorKind, GameError

from .strategies import MAX_SHIP_LENGTH, MIN_SHIP_LENGTH, REQUIRED_FLEET


def parse_ship(text: str) -> list[Coordinate]:
    """Parse a ship written as 'x,y;x,y;...' (e.g. '0,0;0,1;0,2').

    Raises:
        GameError: INVALID if the text is empty or a cell is malformed.
    """
    cells = [part for part in text.split(";") if part.strip()]
    if not cells:
        raise GameError(ErrorKind.INVALID, "empty ship")
    return [Coordinate.parse(cell) for cell in cells]


def count_fleet(ships: list[list[Coordinate]]) -> list[int]:
    """Count ships per length bucket (index 0 is length 2).

    Ships with a length outside the allowed range are not counted.
    """
    counts = [0] * len(REQUIRED_FLEET)
    for ship in ships:
        if MIN_SHIP_LENGTH <= len(ship) <= MAX_SHIP_LENGTH:
            counts[len(ship) - MIN_SHIP_LENGTH] += 1
    return counts
