"""Game service module.

Provides:
- Match initialization (start_match.py)
- Match engine processing (engine/)
- Placement rules (rules/)
- Private player boards (player_board.py)
"""

# Re-export from engine for convenience
from .engine import (
    Match,
    MoveAction,
    ProcessResult,
    apply_move,
)
from .player_board import PlayerBoard
from .start_match import initialize_match, validate_match_players

__all__ = [
    # Initialization
    "initialize_match",
    "validate_match_players",
    # Engine
    "Match",
    "MoveAction",
    "ProcessResult",
    "apply_move",
    # Private boards
    "PlayerBoard",
]
