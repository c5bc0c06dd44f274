"""Ordered validation pipelines and the named presets built from them."""

import logging
from typing import Self

from app.services.game.engine.board import Board, Coordinate
from app.services.game.engine.validation import ValidationResult

from .strategies import (
    AdjacencyStrategy,
    BoundsStrategy,
    ContiguityStrategy,
    FleetCompositionStrategy,
    OverlapStrategy,
    ShipAdjacencyStrategy,
    ShipLengthStrategy,
    ShipOverlapStrategy,
    StraightLineStrategy,
    UniquenessStrategy,
    ValidationInput,
    ValidationStrategy,
)

logger = logging.getLogger(__name__)


class ValidationContext:
    """Runs strategies in insertion order and stops at the first failure.

    Cheap structural checks belong before board-dependent ones so malformed
    input fails with the most specific error.
    """

    def __init__(self, strategies: list[ValidationStrategy] | None = None):
        self._strategies: list[ValidationStrategy] = list(strategies or [])

    def add_strategy(self, strategy: ValidationStrategy) -> Self:
        self._strategies.append(strategy)
        return self

    def validate(self, data: ValidationInput) -> ValidationResult:
        for strategy in self._strategies:
            result = strategy.validate(data)
            if not result.is_valid:
                logger.warning(
                    "Validation failed: strategy=%s, code=%s, message=%s",
                    strategy.name,
                    result.error_code,
                    result.error_message,
                )
                return result
            logger.debug("Strategy passed: %s", strategy.name)
        return ValidationResult.ok()

    def strategy_count(self) -> int:
        return len(self._strategies)

    def strategy_names(self) -> list[str]:
        return [strategy.name for strategy in self._strategies]

    # --- Presets ---

    @classmethod
    def ship_placement(cls) -> Self:
        """Rules for placing one ship (or any multi-cell mark) on a board."""
        return cls(
            [
                BoundsStrategy(),
                UniquenessStrategy(),
                OverlapStrategy(),
                AdjacencyStrategy(),
                StraightLineStrategy(),
                ContiguityStrategy(),
                ShipLengthStrategy(),
            ]
        )

    @classmethod
    def fleet_composition(cls) -> Self:
        """Rules for a player's full fleet."""
        return cls(
            [
                FleetCompositionStrategy(),
                ShipOverlapStrategy(),
                ShipAdjacencyStrategy(),
            ]
        )

    @classmethod
    def coordinates_only(cls) -> Self:
        return cls([BoundsStrategy(), UniquenessStrategy()])


def validate_ship_placement(
    board: Board,
    coordinates: list[Coordinate],
    size: int,
) -> ValidationResult:
    data = ValidationInput(board=board, coordinates=list(coordinates), size=size)
    return ValidationContext.ship_placement().validate(data)


def validate_fleet_composition(
    ship_counts: list[int],
    ships: list[list[Coordinate]],
) -> ValidationResult:
    data = ValidationInput(fleet_composition=list(ship_counts), ships=ships)
    return ValidationContext.fleet_composition().validate(data)


def validate_coordinates(coordinates: list[Coordinate], size: int) -> ValidationResult:
    data = ValidationInput(coordinates=list(coordinates), size=size)
    return ValidationContext.coordinates_only().validate(data)
