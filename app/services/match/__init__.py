from .service import (
    BoardResult,
    CreateMatchResult,
    EventsResult,
    MakeMoveResult,
    MatchService,
    PlaceFleetResult,
    get_match_service,
)

__all__ = [
    "BoardResult",
    "CreateMatchResult",
    "EventsResult",
    "MakeMoveResult",
    "MatchService",
    "PlaceFleetResult",
    "get_match_service",
]
