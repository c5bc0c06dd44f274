"""Board geometry: coordinates, the flat cell board and win/tie detection.

All board operations take the board size explicitly so the same code serves
any N x N grid. Cells are stored row-major (index = y * size + x).
"""

import logging
from dataclasses import dataclass
from typing import Self

from pydantic import BaseModel

from app.schemas.game_engine import BoardView, Cell

from .errors import ErrorKind, GameError

logger = logging.getLogger(__name__)

# Standard tic-tac-toe grid
DEFAULT_BOARD_SIZE = 3


@dataclass(frozen=True, order=True)
class Coordinate:
    """A cell position.

    Direct construction only rejects negative values; it knows nothing about
    board size. Use Coordinate.new (or BoundsStrategy for whole ships) when the
    position must lie on a particular board.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise GameError(ErrorKind.INVALID, "coordinate out of bounds")

    @classmethod
    def new(cls, x: int, y: int, size: int = DEFAULT_BOARD_SIZE) -> Self:
        """Build a coordinate that is known to lie on a size x size board."""
        if not Board.in_bounds(size, x, y):
            raise GameError(ErrorKind.INVALID, "coordinate out of bounds")
        return cls(x, y)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse the 'x,y' text form."""
        parts = text.strip().split(",")
        if len(parts) != 2:
            raise GameError(ErrorKind.INVALID, f"bad coordinate: {text!r}")
        try:
            x, y = (int(part) for part in parts)
        except ValueError:
            raise GameError(ErrorKind.INVALID, f"bad coordinate: {text!r}") from None
        return cls(x, y)

    def is_valid(self, size: int = DEFAULT_BOARD_SIZE) -> bool:
        return Board.in_bounds(size, self.x, self.y)


class Board(BaseModel):
    """Row-major cells. Only EMPTY, PLAYER_ONE and PLAYER_TWO are accepted."""

    cells: list[Cell]

    @classmethod
    def new_empty(cls, size: int) -> Self:
        return cls(cells=[Cell.EMPTY] * (size * size))

    @classmethod
    def from_bytes(cls, data: bytes) -> Self:
        """Decode the wire form. Unknown byte values decode as EMPTY."""
        return cls(cells=[Cell.from_byte(value) for value in data])

    def to_bytes(self) -> bytes:
        return bytes(int(cell) for cell in self.cells)

    @staticmethod
    def index(size: int, x: int, y: int) -> int:
        # Callers bounds-check x and y first
        return y * size + x

    @staticmethod
    def in_bounds(size: int, x: int, y: int) -> bool:
        return 0 <= x < size and 0 <= y < size

    def get(self, size: int, x: int, y: int) -> Cell:
        return self.cells[self.index(size, x, y)]

    def set(self, size: int, x: int, y: int, cell: Cell) -> None:
        self.cells[self.index(size, x, y)] = Cell(cell)

    def _uniform_line(self, size: int, points: list[tuple[int, int]]) -> Cell | None:
        """Return the mark filling every point of a line, or None."""
        first = self.get(size, *points[0])
        if first == Cell.EMPTY:
            return None
        if all(self.get(size, x, y) == first for x, y in points[1:]):
            return first
        return None

    def check_winner(self, size: int) -> Cell | None:
        """Find a completed line.

        Lines are checked rows first, then columns, then the main diagonal
        and finally the anti-diagonal. The first uniform, non-empty line
        decides the result.
        """
        if size < 1:
            return None

        lines: list[list[tuple[int, int]]] = []
        lines.extend([(x, y) for x in range(size)] for y in range(size))
        lines.extend([(x, y) for y in range(size)] for x in range(size))
        lines.append([(i, i) for i in range(size)])
        lines.append([(size - 1 - i, i) for i in range(size)])

        for line in lines:
            mark = self._uniform_line(size, line)
            if mark is not None:
                logger.debug("Completed line found: mark=%s, line=%s", mark.name, line)
                return mark
        return None

    def is_full(self, size: int) -> bool:
        return all(
            self.get(size, x, y) != Cell.EMPTY for y in range(size) for x in range(size)
        )

    def to_view(self, size: int) -> BoardView:
        return BoardView(size=size, board=[int(cell) for cell in self.cells])
