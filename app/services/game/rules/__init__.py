"""Composable placement rules.

Usage:
    from app.services.game.rules import ValidationContext, ValidationInput

    result = ValidationContext.ship_placement().validate(
        ValidationInput(board=board, coordinates=ship, size=10)
    )
"""

from .context import (
    ValidationContext,
    validate_coordinates,
    validate_fleet_composition,
    validate_ship_placement,
)
from .fleet import count_fleet, parse_ship
from .strategies import (
    MAX_SHIP_LENGTH,
    MIN_SHIP_LENGTH,
    REQUIRED_FLEET,
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

__all__ = [
    # Pipeline
    "ValidationContext",
    "ValidationInput",
    "ValidationStrategy",
    # Entry points
    "validate_ship_placement",
    "validate_fleet_composition",
    "validate_coordinates",
    # Strategies
    "BoundsStrategy",
    "UniquenessStrategy",
    "OverlapStrategy",
    "AdjacencyStrategy",
    "StraightLineStrategy",
    "ContiguityStrategy",
    "ShipLengthStrategy",
    "FleetCompositionStrategy",
    "ShipOverlapStrategy",
    "ShipAdjacencyStrategy",
    # Fleet helpers
    "MIN_SHIP_LENGTH",
    "MAX_SHIP_LENGTH",
    "REQUIRED_FLEET",
    "count_fleet",
    "parse_ship",
]
