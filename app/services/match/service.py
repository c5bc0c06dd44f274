"""Match service: the host side of the engine.

Owns the single active match, assigns match ids, stores private player
boards and publishes the engine's events.
"""

import logging
import time
from dataclasses import dataclass, field
from uuid import UUID

from pydantic import TypeAdapter
from upstash_redis.asyncio import Redis

from app.config import Settings, get_settings
from app.dependencies.auth import parse_player_id
from app.dependencies.redis import get_redis_client, match_key
from app.schemas.game_engine import BoardView
from app.services.game import PlayerBoard, initialize_match, validate_match_players
from app.services.game.engine import (
    AnyMatchEvent,
    ErrorKind,
    GameError,
    Match,
    MoveAction,
    apply_move,
)
from app.services.game.rules import parse_ship

logger = logging.getLogger(__name__)

_event_adapter: TypeAdapter[AnyMatchEvent] = TypeAdapter(AnyMatchEvent)


@dataclass
class CreateMatchResult:
    """Result of create_match operation."""

    success: bool
    match_id: str | None = None
    error_code: ErrorKind | None = None
    error_message: str | None = None


@dataclass
class MakeMoveResult:
    """Result of make_move operation. outcome is 'win', 'tie' or 'continue'."""

    success: bool
    outcome: str | None = None
    error_code: ErrorKind | None = None
    error_message: str | None = None


@dataclass
class BoardResult:
    """Result of a board lookup."""

    success: bool
    board: BoardView | None = None
    error_code: ErrorKind | None = None
    error_message: str | None = None


@dataclass
class EventsResult:
    """Result of an event log read."""

    success: bool
    events: list[AnyMatchEvent] = field(default_factory=list)
    error_code: ErrorKind | None = None
    error_message: str | None = None


@dataclass
class PlaceFleetResult:
    """Result of place_fleet operation."""

    success: bool
    error_code: ErrorKind | None = None
    error_message: str | None = None


class MatchService:
    """Service for running matches.

    At most one unfinished match exists at a time. State lives in Redis:
        - match:active (JSON) - the current or most recent match
        - match:id_nonce (Integer) - counter used for match ids
        - match:{match_id}:boards (Hash) - player id -> private board JSON
        - match:{match_id}:events (List) - published event JSON, in seq order
    """

    ACTIVE_MATCH_KEY = match_key("active")
    ID_NONCE_KEY = match_key("id_nonce")

    def __init__(self, redis_client: Redis | None = None, settings: Settings | None = None):
        self._redis = redis_client or get_redis_client()
        self._settings = settings or get_settings()

    def _redis_boards_key(self, match_id: str) -> str:
        return match_key(match_id, "boards")

    def _redis_events_key(self, match_id: str) -> str:
        return match_key(match_id, "events")

    # --- Storage helpers ---

    async def _load_active_match(self) -> Match | None:
        raw = await self._redis.get(self.ACTIVE_MATCH_KEY)
        if raw is None:
            return None
        return Match.model_validate_json(raw)

    async def _save_active_match(self, match: Match) -> None:
        await self._redis.set(self.ACTIVE_MATCH_KEY, match.model_dump_json())

    async def _next_id(self) -> str:
        nonce = await self._redis.incr(self.ID_NONCE_KEY)
        return f"match-{time.time_ns() // 1_000_000}-{nonce}"

    async def _get_match(self, match_id: str) -> Match:
        match = await self._load_active_match()
        if match is None:
            raise GameError(ErrorKind.INVALID, "no active match")
        if match.id != match_id:
            raise GameError(ErrorKind.NOT_FOUND, match_id)
        return match

    async def _load_player_board(self, match_id: str, player_id: UUID) -> PlayerBoard | None:
        raw = await self._redis.hget(self._redis_boards_key(match_id), str(player_id))
        if raw is None:
            return None
        return PlayerBoard.model_validate_json(raw)

    async def _save_player_board(
        self, match_id: str, player_id: UUID, board: PlayerBoard
    ) -> None:
        await self._redis.hset(
            self._redis_boards_key(match_id), str(player_id), board.model_dump_json()
        )

    async def _publish(self, match_id: str, events: list[AnyMatchEvent]) -> None:
        """Publish events. Delivery failures are logged, never raised."""
        if not events:
            return
        for event in events:
            logger.info(
                "Event: match=%s, seq=%d, type=%s", match_id, event.seq, event.event_type
            )
        try:
            await self._redis.rpush(
                self._redis_events_key(match_id),
                *[event.model_dump_json() for event in events],
            )
        except Exception as e:
            logger.error("Failed to publish %d events for match %s: %s", len(events), match_id, e)

    # --- Public API ---

    async def create_match(self, caller: UUID, opponent: str) -> CreateMatchResult:
        """Create a new match between the caller and an opponent.

        Args:
            caller: The player creating the match. Moves first.
            opponent: The opponent's player id as a string.

        Returns:
            CreateMatchResult with the new match id, or INVALID if another
            match is still running, the opponent id is malformed or the
            players are the same.
        """
        active = await self._load_active_match()
        if active is not None and not active.is_finished():
            logger.warning("create_match rejected: match %s still active", active.id)
            return CreateMatchResult(
                success=False,
                error_code=ErrorKind.INVALID,
                error_message="another match is active",
            )

        try:
            opponent_id = parse_player_id(opponent)
            validate_match_players(caller, opponent_id)
        except GameError as e:
            logger.warning("create_match rejected for caller %s: %s", str(caller)[:8], e.message)
            return CreateMatchResult(success=False, error_code=e.code, error_message=e.message)

        match_id = await self._next_id()
        result = initialize_match(match_id, caller, opponent_id, self._settings.BOARD_SIZE)
        if not result.success:
            return CreateMatchResult(
                success=False,
                error_code=result.error_code,
                error_message=result.error_message,
            )

        await self._save_active_match(result.match)
        await self._publish(match_id, result.events)
        logger.info(
            "Match created: id=%s, caller=%s, opponent=%s",
            match_id,
            str(caller)[:8],
            str(opponent_id)[:8],
        )
        return CreateMatchResult(success=True, match_id=match_id)

    async def make_move(self, caller: UUID, match_id: str, x: int, y: int) -> MakeMoveResult:
        """Apply the caller's move to the active match.

        Returns:
            MakeMoveResult with outcome 'win', 'tie' or 'continue', or the
            engine's error unchanged.
        """
        try:
            match = await self._get_match(match_id)
        except GameError as e:
            logger.warning("make_move rejected: %s - %s", e.code, e.message)
            return MakeMoveResult(success=False, error_code=e.code, error_message=e.message)

        result = apply_move(match, MoveAction(x=x, y=y), caller)
        if not result.success:
            return MakeMoveResult(
                success=False,
                error_code=result.error_code,
                error_message=result.error_message,
            )

        await self._save_active_match(result.match)
        await self._publish(match_id, result.events)
        return MakeMoveResult(success=True, outcome=result.outcome.value)

    async def get_board(self, match_id: str) -> BoardResult:
        try:
            match = await self._get_match(match_id)
        except GameError as e:
            return BoardResult(success=False, error_code=e.code, error_message=e.message)
        return BoardResult(success=True, board=match.to_board_view())

    async def list_matches(self) -> list[str]:
        match = await self._load_active_match()
        return [match.id] if match is not None else []

    async def get_active_match_id(self) -> str | None:
        match = await self._load_active_match()
        return match.id if match is not None else None

    async def get_current_turn(self) -> str | None:
        match = await self._load_active_match()
        return str(match.turn) if match is not None else None

    async def get_events(self, match_id: str, since: int = 0) -> EventsResult:
        """Read the published events of the active match with seq >= since.

        Lets a client that missed notifications catch up from its last seq.
        """
        try:
            await self._get_match(match_id)
        except GameError as e:
            return EventsResult(success=False, error_code=e.code, error_message=e.message)
        if since < 0:
            return EventsResult(
                success=False, error_code=ErrorKind.INVALID, error_message="since must be >= 0"
            )

        raw_events = await self._redis.lrange(self._redis_events_key(match_id), 0, -1)
        events = [_event_adapter.validate_json(raw) for raw in raw_events]
        return EventsResult(success=True, events=[event for event in events if event.seq >= since])

    def get_current_user(self, caller: UUID) -> str:
        return str(caller)

    async def place_fleet(self, caller: UUID, match_id: str, ships: list[str]) -> PlaceFleetResult:
        """Validate and store the caller's fleet on their private board.

        Args:
            caller: The participant placing ships.
            match_id: The active match.
            ships: Ships in 'x,y;x,y;...' form.

        Returns:
            PlaceFleetResult; FORBIDDEN for non-participants, FINISHED if the
            caller already placed a fleet, INVALID for any rule violation.
        """
        try:
            match = await self._get_match(match_id)
            if not match.is_participant(caller):
                raise GameError(ErrorKind.FORBIDDEN, "not a player")
            parsed = [parse_ship(ship) for ship in ships]
        except GameError as e:
            logger.warning(
                "place_fleet rejected for caller %s: %s - %s", str(caller)[:8], e.code, e.message
            )
            return PlaceFleetResult(success=False, error_code=e.code, error_message=e.message)

        board = await self._load_player_board(match_id, caller)
        if board is None:
            board = PlayerBoard.new(self._settings.FLEET_BOARD_SIZE)

        validation = board.place_ships(parsed, match.mark_for(caller))
        if not validation.is_valid:
            return PlaceFleetResult(
                success=False,
                error_code=validation.error_code,
                error_message=validation.error_message,
            )

        await self._save_player_board(match_id, caller, board)
        logger.info("Fleet stored: match=%s, player=%s", match_id, str(caller)[:8])
        return PlaceFleetResult(success=True)

    async def get_private_board(self, caller: UUID, match_id: str) -> BoardResult:
        """Return the caller's own private board."""
        try:
            match = await self._get_match(match_id)
            if not match.is_participant(caller):
                raise GameError(ErrorKind.FORBIDDEN, "not a player")
        except GameError as e:
            return BoardResult(success=False, error_code=e.code, error_message=e.message)

        board = await self._load_player_board(match_id, caller)
        if board is None:
            board = PlayerBoard.new(self._settings.FLEET_BOARD_SIZE)
        return BoardResult(success=True, board=board.to_view())


# Singleton instance
_match_service: MatchService | None = None


def get_match_service() -> MatchService:
    """Get the singleton MatchService instance."""
    global _match_service
    if _match_service is None:
        _match_service = MatchService()
    return _match_service
