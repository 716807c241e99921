"""Jump validation for laddergen."""

from .validate import (
    validate_jump,
    validate_jump_set,
    is_tile_blocked,
    are_jumps_too_close,
    can_place_jump_at,
    calculate_balance_ratio,
    is_balanced,
    UNBALANCED_RATIO,
    DEFAULT_TOLERANCE,
)
from .models import Jump, ValidationError, ValidationResult

__all__ = [
    # Single jumps and jump sets
    "validate_jump",
    "validate_jump_set",
    # Placement
    "is_tile_blocked",
    "are_jumps_too_close",
    "can_place_jump_at",
    # Balance
    "calculate_balance_ratio",
    "is_balanced",
    "UNBALANCED_RATIO",
    "DEFAULT_TOLERANCE",
    # Models
    "Jump",
    "ValidationError",
    "ValidationResult",
]
