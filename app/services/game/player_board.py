"""A player's private board: their own ship placements, hidden from the opponent."""

import logging
from typing import Self

from pydantic import BaseModel

from app.schemas.game_engine import BoardView, Cell
from app.services.game.engine import (
    Board,
    Coordinate,
    ErrorKind,
    ValidationResult,
)
from app.services.game.rules import (
    count_fleet,
    validate_fleet_composition,
    validate_ship_placement,
)

logger = logging.getLogger(__name__)


class PlayerBoard(BaseModel):
    """Private per-player board.

    `ships` counts the ship cells still standing. Once `placed` is set the
    placement phase is over and the board no longer accepts marks.
    """

    size: int
    board: Board
    ships: int = 0
    placed: bool = False

    @classmethod
    def new(cls, size: int) -> Self:
        return cls(size=size, board=Board.new_empty(size))

    def make_move(self, x: int, y: int, mark: Cell) -> ValidationResult:
        """Write a single mark during placement."""
        if self.placed:
            return ValidationResult.error(ErrorKind.FINISHED, "placement already finished")
        if not Board.in_bounds(self.size, x, y):
            return ValidationResult.error(ErrorKind.INVALID, "coordinate out of bounds")
        if self.board.get(self.size, x, y) != Cell.EMPTY:
            return ValidationResult.error(ErrorKind.INVALID, "cell already occupied")

        self.board.set(self.size, x, y, mark)
        return ValidationResult.ok()

    def place_ships(self, ships: list[list[Coordinate]], mark: Cell) -> ValidationResult:
        """Validate and place a whole fleet, then close the placement phase.

        Each ship is checked against the board built so far, then the fleet
        as a whole. Nothing is written unless every check passes.
        """
        if self.placed:
            return ValidationResult.error(ErrorKind.FINISHED, "placement already finished")

        staged = self.board.model_copy(deep=True)
        for index, ship in enumerate(ships):
            result = validate_ship_placement(staged, ship, self.size)
            if not result.is_valid:
                logger.warning(
                    "Ship %d rejected: %s - %s", index, result.error_code, result.error_message
                )
                return result
            for coord in ship:
                staged.set(self.size, coord.x, coord.y, mark)

        result = validate_fleet_composition(count_fleet(ships), ships)
        if not result.is_valid:
            return result

        self.board = staged
        self.ships = sum(len(ship) for ship in ships)
        self.placed = True
        logger.info("Fleet placed: ships=%d, cells=%d", len(ships), self.ships)
        return ValidationResult.ok()

    def is_placed(self) -> bool:
        return self.placed

    def set_finished(self) -> None:
        self.placed = True

    def to_view(self) -> BoardView:
        return self.board.to_view(self.size)
