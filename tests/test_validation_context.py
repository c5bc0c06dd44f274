"""Tests for validation pipelines and presets.

Critical scenarios tested:
- Strategies run in insertion order and stop at the first failure
- Preset composition and order
- Entry points for ship placement, fleet composition and coordinates
"""

from app.schemas.game_engine import Cell
from app.services.game.engine import Board, ErrorKind, ValidationResult
from app.services.game.rules import (
    BoundsStrategy,
    UniquenessStrategy,
    ValidationContext,
    ValidationInput,
    ValidationStrategy,
    count_fleet,
    validate_coordinates,
    validate_fleet_composition,
    validate_ship_placement,
)

from .conftest import ship, standard_fleet


class RecordingStrategy(ValidationStrategy):
    """Appends its label to a shared log, then passes or fails."""

    name = "recording"

    def __init__(self, label: str, log: list[str], fail: bool = False):
        self.label = label
        self.log = log
        self.fail = fail

    def validate(self, data: ValidationInput) -> ValidationResult:
        self.log.append(self.label)
        if self.fail:
            return ValidationResult.error(ErrorKind.INVALID, f"{self.label} failed")
        return ValidationResult.ok()


class TestValidationContext:
    """Test pipeline mechanics."""

    def test_empty_context_passes(self):
        assert ValidationContext().validate(ValidationInput()).is_valid

    def test_runs_in_insertion_order(self):
        log: list[str] = []
        context = ValidationContext()
        context.add_strategy(RecordingStrategy("a", log))
        context.add_strategy(RecordingStrategy("b", log))
        context.add_strategy(RecordingStrategy("c", log))

        assert context.validate(ValidationInput()).is_valid
        assert log == ["a", "b", "c"]

    def test_stops_at_first_failure(self):
        log: list[str] = []
        context = ValidationContext(
            [
                RecordingStrategy("a", log),
                RecordingStrategy("b", log, fail=True),
                RecordingStrategy("c", log, fail=True),
            ]
        )

        result = context.validate(ValidationInput())

        assert not result.is_valid
        assert result.error_message == "b failed"
        assert log == ["a", "b"]

    def test_add_strategy_chains(self):
        context = ValidationContext().add_strategy(BoundsStrategy()).add_strategy(UniquenessStrategy())

        assert context.strategy_count() == 2
        assert context.strategy_names() == ["bounds", "uniqueness"]

    def test_constructor_list_is_copied(self):
        strategies = [BoundsStrategy()]
        context = ValidationContext(strategies)
        context.add_strategy(UniquenessStrategy())

        assert len(strategies) == 1


class TestPresets:
    """Test preset composition."""

    def test_ship_placement_order(self):
        assert ValidationContext.ship_placement().strategy_names() == [
            "bounds",
            "uniqueness",
            "overlap",
            "adjacency",
            "straight_line",
            "contiguity",
            "ship_length",
        ]

    def test_fleet_composition_order(self):
        assert ValidationContext.fleet_composition().strategy_names() == [
            "fleet_composition",
            "ship_overlap",
            "ship_adjacency",
        ]

    def test_coordinates_only(self):
        context = ValidationContext.coordinates_only()
        assert context.strategy_count() == 2
        assert context.strategy_names() == ["bounds", "uniqueness"]

    def test_presets_are_independent(self):
        first = ValidationContext.coordinates_only()
        first.add_strategy(BoundsStrategy())

        assert ValidationContext.coordinates_only().strategy_count() == 2


class TestShipPlacement:
    """Test validate_ship_placement."""

    def test_legal_vertical_ship(self):
        result = validate_ship_placement(Board.new_empty(10), ship((0, 0), (0, 1), (0, 2)), 10)
        assert result.is_valid

    def test_bounds_checked_before_anything_else(self):
        # Also diagonal and too short, but bounds fails first
        result = validate_ship_placement(Board.new_empty(3), ship((5, 5)), 3)
        assert result.error_message == "coordinate out of bounds"

    def test_diagonal_ship(self):
        result = validate_ship_placement(Board.new_empty(10), ship((0, 0), (1, 1)), 10)
        assert result.error_message == "ship must be straight (horizontal or vertical)"

    def test_ship_with_gap(self):
        result = validate_ship_placement(Board.new_empty(10), ship((0, 0), (0, 2)), 10)
        assert result.error_message == "ship must be contiguous"

    def test_single_cell_fails_on_length(self):
        result = validate_ship_placement(Board.new_empty(10), ship((4, 4)), 10)
        assert result.error_message == "ship length must be between 2 and 5"

    def test_overlap_with_existing_mark(self):
        board = Board.new_empty(10)
        board.set(10, 0, 1, Cell.PLAYER_ONE)
        result = validate_ship_placement(board, ship((0, 0), (0, 1)), 10)
        assert result.error_message == "cell already occupied"

    def test_duplicate_cells(self):
        result = validate_ship_placement(Board.new_empty(10), ship((0, 0), (0, 0)), 10)
        assert result.error_message == "duplicate coordinate"


class TestFleetComposition:
    """Test validate_fleet_composition."""

    def test_standard_fleet(self):
        fleet = standard_fleet()
        assert validate_fleet_composition(count_fleet(fleet), fleet).is_valid

    def test_extra_small_ship(self):
        fleet = standard_fleet() + [ship((8, 8), (9, 8))]
        result = validate_fleet_composition(count_fleet(fleet), fleet)
        assert result.error_message == "need exactly 1 ship of length 2"

    def test_counts_checked_before_geometry(self):
        fleet = [ship((0, 0), (1, 0)), ship((0, 1), (1, 1))]
        result = validate_fleet_composition([1, 2, 1, 1], fleet)
        assert result.error_message == "ships are adjacent"

    def test_overlapping_fleet(self):
        fleet = standard_fleet()
        fleet[4] = ship((4, 0), (4, 1))
        result = validate_fleet_composition([1, 2, 1, 1], fleet)
        assert result.error_message == "ships overlap"


class TestCoordinates:
    """Test validate_coordinates."""

    def test_valid(self):
        assert validate_coordinates(ship((0, 0), (2, 2)), 3).is_valid

    def test_out_of_bounds(self):
        assert not validate_coordinates(ship((0, 3)), 3).is_valid

    def test_duplicate(self):
        result = validate_coordinates(ship((1, 1), (1, 1)), 3)
        assert result.error_message == "duplicate coordinate"
