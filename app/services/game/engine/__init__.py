"""Match engine module - pure functional game logic.

This module provides the core match engine with:
- Board geometry and win/tie detection
- Action types for explicit user inputs
- Event types for host notifications
- ProcessResult pattern for error handling

Usage:
    from app.services.game.engine import (
        apply_move,
        MoveAction,
        ProcessResult,
    )

    result = apply_move(match, MoveAction(x=1, y=1), player_id)

    if result.success:
        match = result.match
        events = result.events  # Publish these
    else:
        print(f"Error: {result.error_code} - {result.error_message}")
"""

# Actions - explicit user inputs
from .actions import MoveAction

# Geometry
from .board import DEFAULT_BOARD_SIZE, Board, Coordinate

# Errors
from .errors import ErrorKind, GameError

# Events - for host notifications
from .events import (
    AnyMatchEvent,
    GameTied,
    GameWon,
    MatchCreated,
    MatchEnded,
    MatchEvent,
    MoveMade,
)

# Match state
from .match import Match

# Main processing
from .process import apply_move, check_win_condition

# Result types
from .validation import ProcessResult, ValidationResult, validate_move

__all__ = [
    # Actions
    "MoveAction",
    # Geometry
    "DEFAULT_BOARD_SIZE",
    "Board",
    "Coordinate",
    # Errors
    "ErrorKind",
    "GameError",
    # Events
    "MatchEvent",
    "AnyMatchEvent",
    "MatchCreated",
    "MoveMade",
    "GameWon",
    "GameTied",
    "MatchEnded",
    # State
    "Match",
    # Processing
    "apply_move",
    "check_win_condition",
    # Validation
    "ProcessResult",
    "ValidationResult",
    "validate_move",
]
