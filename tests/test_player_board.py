"""Tests for private player boards.

Critical scenarios tested:
- Single marks during placement
- Whole-fleet placement is all-or-nothing
- Placement closes after a fleet is stored
"""

from app.schemas.game_engine import Cell
from app.services.game import PlayerBoard
from app.services.game.engine import ErrorKind

from .conftest import ship, standard_fleet


class TestMakeMove:
    def test_writes_mark(self):
        board = PlayerBoard.new(10)
        assert board.make_move(3, 4, Cell.PLAYER_ONE).is_valid
        assert board.board.get(10, 3, 4) == Cell.PLAYER_ONE

    def test_out_of_bounds(self):
        result = PlayerBoard.new(10).make_move(10, 0, Cell.PLAYER_ONE)
        assert result.error_code == ErrorKind.INVALID

    def test_occupied(self):
        board = PlayerBoard.new(10)
        board.make_move(0, 0, Cell.PLAYER_ONE)
        result = board.make_move(0, 0, Cell.PLAYER_ONE)
        assert result.error_message == "cell already occupied"

    def test_rejected_after_placement(self):
        board = PlayerBoard.new(10)
        board.set_finished()
        result = board.make_move(0, 0, Cell.PLAYER_ONE)
        assert result.error_code == ErrorKind.FINISHED


class TestPlaceShips:
    def test_standard_fleet(self):
        board = PlayerBoard.new(10)
        result = board.place_ships(standard_fleet(), Cell.PLAYER_TWO)

        assert result.is_valid
        assert board.is_placed()
        assert board.ships == 17
        assert board.board.get(10, 4, 0) == Cell.PLAYER_TWO
        assert board.board.get(10, 5, 0) == Cell.EMPTY
        assert sum(1 for cell in board.board.cells if cell != Cell.EMPTY) == 17

    def test_bad_ship_leaves_board_untouched(self):
        board = PlayerBoard.new(10)
        fleet = standard_fleet()
        fleet[3] = ship((0, 6), (1, 7), (2, 8))

        result = board.place_ships(fleet, Cell.PLAYER_ONE)

        assert not result.is_valid
        assert result.error_code == ErrorKind.INVALID
        assert not board.is_placed()
        assert all(cell == Cell.EMPTY for cell in board.board.cells)

    def test_ship_overlapping_earlier_ship(self):
        board = PlayerBoard.new(10)
        fleet = standard_fleet()
        fleet[4] = ship((4, 0), (4, 1))

        result = board.place_ships(fleet, Cell.PLAYER_ONE)

        assert result.error_message == "cell already occupied"

    def test_incomplete_fleet(self):
        board = PlayerBoard.new(10)
        result = board.place_ships(standard_fleet()[:4], Cell.PLAYER_ONE)

        assert result.error_message == "need exactly 1 ship of length 2"
        assert not board.is_placed()

    def test_second_fleet_rejected(self):
        board = PlayerBoard.new(10)
        board.place_ships(standard_fleet(), Cell.PLAYER_ONE)

        result = board.place_ships(standard_fleet(), Cell.PLAYER_ONE)

        assert result.error_code == ErrorKind.FINISHED

    def test_view(self):
        board = PlayerBoard.new(10)
        board.place_ships(standard_fleet(), Cell.PLAYER_ONE)

        view = board.to_view()
        assert view.size == 10
        assert view.board[:6] == [1, 1, 1, 1, 1, 0]
