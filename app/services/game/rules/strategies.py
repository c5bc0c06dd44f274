"""Placement and fleet validation strategies.

Each strategy is one independent rule. A strategy reads only the fields of
ValidationInput it needs and fails with an INVALID result naming the field
when one of them is missing, so new rules can be added without changing the
input shape.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from app.schemas.game_engine import Cell
from app.services.game.engine.board import DEFAULT_BOARD_SIZE, Board, Coordinate
from app.services.game.engine.errors import ErrorKind
from app.services.game.engine.validation import ValidationResult

logger = logging.getLogger(__name__)

MIN_SHIP_LENGTH = 2
MAX_SHIP_LENGTH = 5

# Ships required per length bucket: index 0 is length 2, index 3 is length 5
REQUIRED_FLEET = [1, 2, 1, 1]


@dataclass
class ValidationInput:
    """Optional-field bag consumed by strategies."""

    board: Board | None = None
    coordinates: list[Coordinate] | None = None
    size: int | None = None
    ship_length: int | None = None
    fleet_composition: list[int] | None = None
    ships: list[list[Coordinate]] | None = None

    @property
    def board_size(self) -> int:
        return self.size if self.size is not None else DEFAULT_BOARD_SIZE


class ValidationStrategy:
    name: ClassVar[str] = "base"

    def validate(self, data: ValidationInput) -> ValidationResult:
        raise NotImplementedError

    def missing(self, field_name: str) -> ValidationResult:
        label = self.name.replace("_", " ")
        return ValidationResult.error(
            ErrorKind.INVALID, f"{field_name} required for {label} validation"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BoundsStrategy(ValidationStrategy):
    name = "bounds"

    def validate(self, data: ValidationInput) -> ValidationResult:
        if data.coordinates is None:
            return self.missing("coordinates")
        size = data.board_size
        for coord in data.coordinates:
            if not coord.is_valid(size):
                return ValidationResult.error(ErrorKind.INVALID, "coordinate out of bounds")
        return ValidationResult.ok()


class UniquenessStrategy(ValidationStrategy):
    name = "uniqueness"

    def validate(self, data: ValidationInput) -> ValidationResult:
        if data.coordinates is None:
            return self.missing("coordinates")
        seen: set[Coordinate] = set()
        for coord in data.coordinates:
            if coord in seen:
                return ValidationResult.error(ErrorKind.INVALID, "duplicate coordinate")
            seen.add(coord)
        return ValidationResult.ok()


class OverlapStrategy(ValidationStrategy):
    """Coordinates must land on empty cells of an existing board."""

    name = "overlap"

    def validate(self, data: ValidationInput) -> ValidationResult:
        if data.board is None:
            return self.missing("board")
        if data.coordinates is None:
            return self.missing("coordinates")
        size = data.board_size
        for coord in data.coordinates:
            if data.board.get(size, coord.x, coord.y) != Cell.EMPTY:
                return ValidationResult.error(ErrorKind.INVALID, "cell already occupied")
        return ValidationResult.ok()


class AdjacencyStrategy(ValidationStrategy):
    """Extension point for games with adjacency rules on a single placement.

    Grid marking has none, so this only checks its prerequisites.
    """

    name = "adjacency"

    def validate(self, data: ValidationInput) -> ValidationResult:
        if data.board is None:
            return self.missing("board")
        if data.coordinates is None:
            return self.missing("coordinates")
        return ValidationResult.ok()


class StraightLineStrategy(ValidationStrategy):
    name = "straight_line"

    def validate(self, data: ValidationInput) -> ValidationResult:
        coordinates = data.coordinates
        if coordinates is None:
            return self.missing("coordinates")
        if len(coordinates) <= 1:
            return ValidationResult.ok()

        same_x = all(coord.x == coordinates[0].x for coord in coordinates)
        same_y = all(coord.y == coordinates[0].y for coord in coordinates)
        if same_x == same_y:
            return ValidationResult.error(
                ErrorKind.INVALID, "ship must be straight (horizontal or vertical)"
            )
        return ValidationResult.ok()


class ContiguityStrategy(ValidationStrategy):
    name = "contiguity"

    def validate(self, data: ValidationInput) -> ValidationResult:
        coordinates = data.coordinates
        if coordinates is None:
            return self.missing("coordinates")
        if len(coordinates) <= 1:
            return ValidationResult.ok()

        vertical = all(coord.x == coordinates[0].x for coord in coordinates)
        if vertical:
            ordered = sorted(coordinates, key=lambda coord: coord.y)
            step = (0, 1)
        else:
            ordered = sorted(coordinates, key=lambda coord: coord.x)
            step = (1, 0)

        for a, b in zip(ordered, ordered[1:]):
            if (b.x - a.x, b.y - a.y) != step:
                return ValidationResult.error(ErrorKind.INVALID, "ship must be contiguous")
        return ValidationResult.ok()


class ShipLengthStrategy(ValidationStrategy):
    name = "ship_length"

    def validate(self, data: ValidationInput) -> ValidationResult:
        if data.ship_length is not None:
            length = data.ship_length
        elif data.coordinates is not None:
            length = len(data.coordinates)
        else:
            return self.missing("ship length")

        if not MIN_SHIP_LENGTH <= length <= MAX_SHIP_LENGTH:
            return ValidationResult.error(
                ErrorKind.INVALID,
                f"ship length must be between {MIN_SHIP_LENGTH} and {MAX_SHIP_LENGTH}",
            )
        return ValidationResult.ok()


class FleetCompositionStrategy(ValidationStrategy):
    name = "fleet_composition"

    def validate(self, data: ValidationInput) -> ValidationResult:
        composition = data.fleet_composition
        if composition is None:
            return self.missing("fleet composition")
        if len(composition) != len(REQUIRED_FLEET):
            return ValidationResult.error(
                ErrorKind.INVALID,
                f"fleet composition must have {len(REQUIRED_FLEET)} length buckets",
            )

        # Largest ships first
        for bucket in reversed(range(len(REQUIRED_FLEET))):
            required = REQUIRED_FLEET[bucket]
            if composition[bucket] != required:
                length = bucket + MIN_SHIP_LENGTH
                plural = "ship" if required == 1 else "ships"
                return ValidationResult.error(
                    ErrorKind.INVALID,
                    f"need exactly {required} {plural} of length {length}",
                )
        return ValidationResult.ok()


class ShipOverlapStrategy(ValidationStrategy):
    name = "ship_overlap"

    def validate(self, data: ValidationInput) -> ValidationResult:
        if data.ships is None:
            return self.missing("ships")
        ships = data.ships
        for i, first in enumerate(ships):
            for second in ships[i + 1 :]:
                if set(first) & set(second):
                    return ValidationResult.error(ErrorKind.INVALID, "ships overlap")
        return ValidationResult.ok()


class ShipAdjacencyStrategy(ValidationStrategy):
    """No cell of one ship may touch a cell of another, diagonals included.

    Shared cells are left to ShipOverlapStrategy.
    """

    name = "ship_adjacency"

    def validate(self, data: ValidationInput) -> ValidationResult:
        if data.ships is None:
            return self.missing("ships")
        ships = data.ships
        for i, first in enumerate(ships):
            for second in ships[i + 1 :]:
                for a in first:
                    for b in second:
                        dx = abs(a.x - b.x)
                        dy = abs(a.y - b.y)
                        if dx <= 1 and dy <= 1 and (dx, dy) != (0, 0):
                            logger.debug("Adjacent ship cells: %s, %s", a, b)
                            return ValidationResult.error(
                                ErrorKind.INVALID, "ships are adjacent"
                            )
        return ValidationResult.ok()
