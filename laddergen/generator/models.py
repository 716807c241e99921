"""
Pydantic models for the generator layer.

This module contains the configuration, result and statistics models used by
the board generator, plus the structural pre-check run on a configuration
before any random draws are made.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

from ..verifiers.models import Jump, ValidationError


class GenerationConfig(BaseModel):
    """
    Configuration for procedural board generation.

    Structural consistency (positive dimensions, ordered ranges, start range
    inside the board) is checked by `validate_config`, not at construction,
    so an inconsistent configuration can still be loaded and reported on.
    """
    model_config = ConfigDict(frozen=True)

    # Board dimensions
    board_size: int = 100
    columns: int = 10

    # Ladders
    min_ladders: int = 5
    max_ladders: int = 10
    min_ladder_length: int = 5
    max_ladder_length: int = 40

    # Snakes
    min_snakes: int = 5
    max_snakes: int = 10
    min_snake_length: int = 5
    max_snake_length: int = 40

    # Placement rules
    min_distance_between_jumps: int = Field(default=3, ge=0)
    blocked_tiles: List[int] = Field(default_factory=lambda: [1, 100])
    min_start_tile: int = 2
    max_start_tile: int = 95

    # Balance
    balance_jumps: bool = True
    balance_ratio: float = 1.2
    balance_tolerance: float = Field(default=0.3, ge=0)

    # Generation limits
    seed: int = 0  # 0 = derive from time
    max_generation_attempts: int = Field(default=100, ge=1)
    max_placement_attempts: int = Field(default=50, ge=1)

    @property
    def rows(self) -> int:
        """Number of rows based on board size and columns."""
        return self.board_size // self.columns


def validate_config(config: GenerationConfig) -> Optional[ValidationError]:
    """Check a configuration for structural consistency.

    Returns None if the configuration can be generated from, otherwise the
    first problem found.
    """
    def config_error(code: str, message: str) -> ValidationError:
        return ValidationError(code=code, message=message, category="config")

    if config.board_size <= 0 or config.columns <= 0:
        return config_error("INVALID_BOARD_DIMENSIONS", "Board size and columns must be positive")

    if config.board_size % config.columns != 0:
        return config_error(
            "BOARD_NOT_DIVISIBLE",
            f"Board size {config.board_size} must be divisible by columns {config.columns}"
        )

    if config.min_ladders < 0 or config.max_ladders < config.min_ladders:
        return config_error(
            "INVALID_LADDER_COUNT",
            f"Invalid ladder count configuration ({config.min_ladders}-{config.max_ladders})"
        )

    if config.min_snakes < 0 or config.max_snakes < config.min_snakes:
        return config_error(
            "INVALID_SNAKE_COUNT",
            f"Invalid snake count configuration ({config.min_snakes}-{config.max_snakes})"
        )

    if config.min_ladder_length <= 0 or config.max_ladder_length < config.min_ladder_length:
        return config_error(
            "INVALID_LADDER_LENGTH",
            f"Invalid ladder length configuration ({config.min_ladder_length}-{config.max_ladder_length})"
        )

    if config.min_snake_length <= 0 or config.max_snake_length < config.min_snake_length:
        return config_error(
            "INVALID_SNAKE_LENGTH",
            f"Invalid snake length configuration ({config.min_snake_length}-{config.max_snake_length})"
        )

    if (
        config.min_start_tile < 1
        or config.max_start_tile > config.board_size
        or config.max_start_tile < config.min_start_tile
    ):
        return config_error(
            "INVALID_START_RANGE",
            f"Invalid start tile range ({config.min_start_tile}-{config.max_start_tile}) "
            f"for board size {config.board_size}"
        )

    return None


class GenerationResult(BaseModel):
    """Result of a board generation call."""
    success: bool
    jumps: List[Jump] = Field(default_factory=list)
    error: Optional[ValidationError] = None
    attempts: int = 0
    seed: int = 0
    rejections: Dict[str, int] = Field(default_factory=dict)  # reason code -> abandoned attempts


class BoardStats(BaseModel):
    """Summary figures for a generated board."""
    total_jumps: int = 0
    ladder_count: int = 0
    snake_count: int = 0
    total_ladder_length: int = 0
    total_snake_length: int = 0
    average_ladder_length: float = 0.0
    average_snake_length: float = 0.0
    balance_ratio: float = 1.0
