"""
Test suite for jump validation.

Tests all validation cases:
- Single jumps (FROM_OUT_OF_BOUNDS, TO_OUT_OF_BOUNDS, SELF_JUMP, LADDER_NOT_ASCENDING, SNAKE_NOT_DESCENDING)
- Jump sets (DUPLICATE_START, CHAINED_JUMP)
- Placement (blocked, occupied and too-close tiles)
- Balance ratio and tolerance
"""

import pytest
from laddergen.verifiers import (
    Jump,
    validate_jump,
    validate_jump_set,
    is_tile_blocked,
    are_jumps_too_close,
    can_place_jump_at,
    calculate_balance_ratio,
    is_balanced,
    UNBALANCED_RATIO,
)


def ladder(start, end):
    return Jump(from_tile=start, to_tile=end, is_ladder=True)


def snake(start, end):
    return Jump(from_tile=start, to_tile=end, is_ladder=False)


class TestJumpModel:
    """Test cases for the Jump model."""

    def test_length(self):
        """Length is the absolute tile distance."""
        assert ladder(4, 14).length == 10
        assert snake(98, 78).length == 20

    def test_serialized_keys(self):
        """Jumps serialize as from/to/isLadder triples."""
        assert ladder(4, 14).model_dump(by_alias=True) == {"from": 4, "to": 14, "isLadder": True}

    def test_construct_from_aliases(self):
        """Jumps can be built from their serialized form."""
        jump = Jump(**{"from": 17, "to": 7, "isLadder": False})
        assert jump == snake(17, 7)


class TestValidateJump:
    """Test cases for single jump validation."""

    def test_valid_ladder(self):
        """A ladder going up inside the board is valid."""
        assert validate_jump(ladder(4, 14), 100) is None

    def test_valid_snake(self):
        """A snake going down inside the board is valid."""
        assert validate_jump(snake(98, 78), 100) is None

    @pytest.mark.parametrize("start", [0, -3, 101])
    def test_from_out_of_bounds(self, start):
        """Start tiles outside 1..board_size fail."""
        error = validate_jump(snake(start, 1) if start > 1 else ladder(start, 10), 100)
        assert error.code == "FROM_OUT_OF_BOUNDS"

    @pytest.mark.parametrize("end", [0, 101])
    def test_to_out_of_bounds(self, end):
        """End tiles outside 1..board_size fail."""
        error = validate_jump(Jump(from_tile=50, to_tile=end, is_ladder=end > 50), 100)
        assert error.code == "TO_OUT_OF_BOUNDS"

    def test_self_jump(self):
        """A jump to its own tile fails."""
        assert validate_jump(ladder(30, 30), 100).code == "SELF_JUMP"
        assert validate_jump(snake(30, 30), 100).code == "SELF_JUMP"

    def test_ladder_going_down(self):
        """A ladder must advance."""
        assert validate_jump(ladder(30, 10), 100).code == "LADDER_NOT_ASCENDING"

    def test_snake_going_up(self):
        """A snake must retreat."""
        assert validate_jump(snake(10, 30), 100).code == "SNAKE_NOT_DESCENDING"

    def test_board_edges_allowed(self):
        """Tiles 1 and board_size are in bounds."""
        assert validate_jump(ladder(1, 100), 100) is None
        assert validate_jump(snake(100, 1), 100) is None


class TestValidateJumpSet:
    """Test cases for jump set validation."""

    def test_empty_set(self):
        """An empty set is valid."""
        result = validate_jump_set([], 100)
        assert result.valid is True
        assert result.errors == []

    def test_valid_set(self):
        """Independent ladders and snakes form a valid set."""
        result = validate_jump_set([ladder(4, 14), ladder(9, 31), snake(98, 78)], 100)
        assert result.valid is True
        assert result.jump_count == 3

    def test_duplicate_start(self):
        """Two jumps from the same tile fail."""
        result = validate_jump_set([ladder(10, 20), snake(10, 5)], 100)
        assert result.valid is False
        assert any(e.code == "DUPLICATE_START" for e in result.errors)

    def test_chained_jump(self):
        """A jump landing on another jump's start fails."""
        result = validate_jump_set([ladder(10, 20), snake(20, 5)], 100)
        assert result.valid is False
        assert any(e.code == "CHAINED_JUMP" for e in result.errors)

    def test_shared_destination_allowed(self):
        """Two jumps may share a destination tile."""
        result = validate_jump_set([ladder(10, 20), snake(30, 20)], 100)
        assert result.valid is True

    def test_invalid_member(self):
        """A single invalid jump invalidates the set."""
        result = validate_jump_set([ladder(10, 20), snake(50, 150)], 100)
        assert result.valid is False
        assert any(e.code == "TO_OUT_OF_BOUNDS" for e in result.errors)

    def test_revalidation_is_stable(self):
        """Re-validating an accepted set never fails."""
        jumps = [ladder(4, 14), snake(98, 78)]
        assert validate_jump_set(jumps, 100).valid
        assert validate_jump_set(jumps, 100).valid

    def test_message_is_first_error(self):
        """The result message reports the first error."""
        result = validate_jump_set([ladder(10, 20), snake(20, 5)], 100)
        assert result.message == result.errors[0].message

    def test_self_jump_is_not_chained(self):
        """A jump to its own tile is reported once, not as a chain onto itself."""
        result = validate_jump_set([ladder(30, 30)], 100)
        assert [e.code for e in result.errors] == ["SELF_JUMP"]


class TestPlacement:
    """Test cases for placement checks."""

    def test_tile_blocked(self):
        """Membership in the blocked list."""
        assert is_tile_blocked(1, [1, 100]) is True
        assert is_tile_blocked(50, [1, 100]) is False

    def test_no_blocked_tiles(self):
        """Empty or missing blocked lists block nothing."""
        assert is_tile_blocked(1, []) is False
        assert is_tile_blocked(1, None) is False

    def test_too_close(self):
        """Distance strictly below the minimum is too close."""
        assert are_jumps_too_close(10, 12, 3) is True
        assert are_jumps_too_close(10, 13, 3) is False
        assert are_jumps_too_close(10, 10, 0) is False

    def test_can_place_on_empty_board(self):
        """Any unblocked tile is free on an empty board."""
        assert can_place_jump_at(50, [], [1, 100], 3) is True

    def test_cannot_place_on_blocked(self):
        """Blocked tiles are rejected."""
        assert can_place_jump_at(1, [], [1, 100], 0) is False

    def test_cannot_place_on_existing_start(self):
        """Tiles already used as a start are rejected."""
        assert can_place_jump_at(10, [ladder(10, 30)], [], 0) is False

    def test_cannot_place_on_existing_end(self):
        """Tiles already used as a destination are rejected."""
        assert can_place_jump_at(30, [ladder(10, 30)], [], 0) is False

    def test_cannot_place_near_existing_start(self):
        """Tiles within the minimum distance of a start are rejected."""
        existing = [ladder(10, 30)]
        assert can_place_jump_at(12, existing, [], 3) is False
        assert can_place_jump_at(13, existing, [], 3) is True


class TestBalance:
    """Test cases for the balance ratio."""

    def test_empty_is_neutral(self):
        """No jumps at all is perfectly balanced."""
        assert calculate_balance_ratio([]) == 1.0

    def test_ladders_only(self):
        """Only ladders returns the sentinel instead of dividing by zero."""
        assert calculate_balance_ratio([ladder(4, 14)]) == UNBALANCED_RATIO

    def test_snakes_only(self):
        """Only snakes gives a zero ratio."""
        assert calculate_balance_ratio([snake(98, 78)]) == 0.0

    def test_ratio(self):
        """Ladder advancement over snake setback."""
        jumps = [ladder(10, 40), snake(90, 70)]
        assert calculate_balance_ratio(jumps) == pytest.approx(1.5)

    def test_is_balanced_within_tolerance(self):
        """Ratios within the tolerance of the target are balanced."""
        jumps = [ladder(10, 40), snake(90, 70)]  # 1.5
        assert is_balanced(jumps, 1.2) is True
        assert is_balanced(jumps, 1.2, tolerance=0.1) is False

    def test_ladders_only_never_balanced(self):
        """The sentinel ratio is never within tolerance of a real target."""
        assert is_balanced([ladder(4, 14)], 1.2) is False
