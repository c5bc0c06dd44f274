"""Shared fixtures for match engine, rules and service tests."""

import os
from uuid import UUID

import pytest

# Settings require Redis credentials; tests never reach a real Redis.
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://redis.test.local")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test-token")

from app.config import Settings  # noqa: E402
from app.schemas.game_engine import Cell  # noqa: E402
from app.services.game.engine import Board, Coordinate, Match  # noqa: E402

# Fixed UUIDs for deterministic testing
PLAYER_1_ID = UUID("00000000-0000-0000-0000-000000000001")
PLAYER_2_ID = UUID("00000000-0000-0000-0000-000000000002")
OUTSIDER_ID = UUID("00000000-0000-0000-0000-000000000003")

MATCH_ID = "match-1700000000000-1"

_MARKS = {".": Cell.EMPTY, "X": Cell.PLAYER_ONE, "O": Cell.PLAYER_TWO}


def board_from_rows(rows: list[str]) -> Board:
    """Build a board from rows like ['XO.', '...', '..X'] (top row first)."""
    size = len(rows)
    board = Board.new_empty(size)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            board.set(size, x, y, _MARKS[char])
    return board


def create_match(
    rows: list[str] | None = None,
    turn: UUID = PLAYER_1_ID,
    winner: UUID | None = None,
    size: int = 3,
) -> Match:
    """Helper to create a match between PLAYER_1 and PLAYER_2."""
    board = board_from_rows(rows) if rows is not None else Board.new_empty(size)
    return Match(
        id=MATCH_ID,
        player_a=PLAYER_1_ID,
        player_b=PLAYER_2_ID,
        turn=turn,
        board=board,
        size=len(rows) if rows is not None else size,
        winner=winner,
    )


def ship(*cells: tuple[int, int]) -> list[Coordinate]:
    return [Coordinate(x, y) for x, y in cells]


def standard_fleet() -> list[list[Coordinate]]:
    """A legal fleet on a 10x10 board: one 5, one 4, two 3s and one 2, all apart."""
    return [
        ship((0, 0), (1, 0), (2, 0), (3, 0), (4, 0)),
        ship((0, 2), (1, 2), (2, 2), (3, 2)),
        ship((0, 4), (1, 4), (2, 4)),
        ship((0, 6), (1, 6), (2, 6)),
        ship((0, 8), (1, 8)),
    ]


STANDARD_FLEET_TEXT = [
    "0,0;1,0;2,0;3,0;4,0",
    "0,2;1,2;2,2;3,2",
    "0,4;1,4;2,4",
    "0,6;1,6;2,6",
    "0,8;1,8",
]


class FakeRedis:
    """In-memory stand-in for the async Upstash client (the calls the service makes)."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.hashes: dict[str, dict[str, str]] = {}
        self.lists: dict[str, list[str]] = {}
        self.fail_rpush = False

    async def get(self, key: str) -> str | None:
        return self.values.get(key)

    async def set(self, key: str, value: str) -> bool:
        self.values[key] = value
        return True

    async def incr(self, key: str) -> int:
        value = int(self.values.get(key, "0")) + 1
        self.values[key] = str(value)
        return value

    async def hget(self, key: str, field: str) -> str | None:
        return self.hashes.get(key, {}).get(field)

    async def hset(self, key: str, field: str, value: str) -> int:
        self.hashes.setdefault(key, {})[field] = value
        return 1

    async def rpush(self, key: str, *elements: str) -> int:
        if self.fail_rpush:
            raise ConnectionError("redis unavailable")
        self.lists.setdefault(key, []).extend(elements)
        return len(self.lists[key])

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        items = self.lists.get(key, [])
        return items[start:] if stop == -1 else items[start : stop + 1]

    async def close(self) -> None:
        pass


@pytest.fixture
def empty_match() -> Match:
    """Fresh 3x3 match, PLAYER_1 to move."""
    return create_match()


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        UPSTASH_REDIS_REST_URL="https://redis.test.local",
        UPSTASH_REDIS_REST_TOKEN="test-token",
        BOARD_SIZE=3,
        FLEET_BOARD_SIZE=10,
    )
