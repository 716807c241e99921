"""
Jump validation for procedurally generated boards.

Validates:
1. Single jumps (tile bounds, self-jumps, direction matching the jump kind)
2. Jump sets (duplicate start tiles, chained jumps landing on another start)
3. Placement legality (blocked tiles, occupied tiles, minimum spacing)
4. Balance between total ladder advancement and total snake setback
"""

import sys
from typing import Iterable, List, Optional

from .models import Jump, ValidationError, ValidationResult


# Returned when a board has ladders but no snakes to divide by
UNBALANCED_RATIO = sys.float_info.max

DEFAULT_TOLERANCE = 0.3


def validate_jump(jump: Jump, board_size: int) -> Optional[ValidationError]:
    """Validate a single jump against the board bounds and its direction.

    Returns None if the jump is valid, otherwise the first rule it breaks.
    """
    if jump.from_tile < 1 or jump.from_tile > board_size:
        return ValidationError(
            code="FROM_OUT_OF_BOUNDS",
            message=f"Jump start {jump.from_tile} is out of bounds (1-{board_size})",
            tile=jump.from_tile,
        )

    if jump.to_tile < 1 or jump.to_tile > board_size:
        return ValidationError(
            code="TO_OUT_OF_BOUNDS",
            message=f"Jump end {jump.to_tile} is out of bounds (1-{board_size})",
            tile=jump.from_tile,
        )

    if jump.from_tile == jump.to_tile:
        return ValidationError(
            code="SELF_JUMP",
            message=f"Jump at {jump.from_tile} goes to itself",
            tile=jump.from_tile,
        )

    if jump.is_ladder and jump.to_tile <= jump.from_tile:
        return ValidationError(
            code="LADDER_NOT_ASCENDING",
            message=f"Ladder at {jump.from_tile} goes down or stays same (to {jump.to_tile})",
            tile=jump.from_tile,
        )

    if not jump.is_ladder and jump.to_tile >= jump.from_tile:
        return ValidationError(
            code="SNAKE_NOT_DESCENDING",
            message=f"Snake at {jump.from_tile} goes up or stays same (to {jump.to_tile})",
            tile=jump.from_tile,
        )

    return None


def validate_jump_set(jumps: List[Jump], board_size: int) -> ValidationResult:
    """
    Validate a complete set of jumps.

    Returns a ValidationResult with:
    - valid: True if the set passes all checks
    - errors: duplicate starts, invalid single jumps and chained jumps
    - jump_count: number of jumps inspected
    """
    errors: List[ValidationError] = []

    seen_starts = set()
    for jump in jumps:
        if jump.from_tile in seen_starts:
            errors.append(ValidationError(
                code="DUPLICATE_START",
                message=f"Duplicate jump start position {jump.from_tile}",
                tile=jump.from_tile,
            ))
        seen_starts.add(jump.from_tile)

    for jump in jumps:
        error = validate_jump(jump, board_size)
        if error is not None:
            errors.append(error)

    # A token must never land on the mouth of a second jump
    for jump in jumps:
        if jump.to_tile in seen_starts and jump.to_tile != jump.from_tile:
            errors.append(ValidationError(
                code="CHAINED_JUMP",
                message=f"Jump at {jump.from_tile} lands on another jump start at {jump.to_tile}",
                tile=jump.from_tile,
            ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        jump_count=len(jumps),
    )


def is_tile_blocked(tile: int, blocked_tiles: Optional[Iterable[int]]) -> bool:
    """Check if a tile is blocked (usually the first and last tile)."""
    if not blocked_tiles:
        return False
    return tile in blocked_tiles


def are_jumps_too_close(tile_a: int, tile_b: int, min_distance: int) -> bool:
    """Check if two start tiles are closer than the minimum distance."""
    return abs(tile_a - tile_b) < min_distance


def can_place_jump_at(
    tile: int,
    existing_jumps: List[Jump],
    blocked_tiles: Optional[Iterable[int]],
    min_distance: int
) -> bool:
    """Check if a new jump may start at `tile`."""
    if is_tile_blocked(tile, blocked_tiles):
        return False

    for jump in existing_jumps:
        if jump.from_tile == tile or jump.to_tile == tile:
            return False
        if are_jumps_too_close(tile, jump.from_tile, min_distance):
            return False

    return True


def calculate_balance_ratio(jumps: List[Jump]) -> float:
    """Total ladder advancement divided by total snake setback."""
    ladder_total = sum(j.length for j in jumps if j.is_ladder)
    snake_total = sum(j.length for j in jumps if not j.is_ladder)

    if snake_total == 0:
        return UNBALANCED_RATIO if ladder_total > 0 else 1.0

    return ladder_total / snake_total


def is_balanced(
    jumps: List[Jump],
    target_ratio: float,
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """Check if the balance ratio is within `tolerance` of the target."""
    return abs(calculate_balance_ratio(jumps) - target_ratio) <= tolerance
