"""
Board generator: proposes random jump sets until one passes validation.

The whole call is a bounded nested loop of generation attempts, category
placements and per-jump placement attempts. Nothing is raised for an
unplaceable board; every outcome is reported through a GenerationResult.
"""

import logging
import random
import time
from collections import Counter
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .models import GenerationConfig, GenerationResult, validate_config
from .presets import DifficultyLevel, DifficultyPreset, apply_preset
from ..verifiers.models import Jump, ValidationError
from ..verifiers.validate import (
    can_place_jump_at,
    is_balanced,
    is_tile_blocked,
    validate_jump,
    validate_jump_set,
)


logger = logging.getLogger(__name__)


def _time_seed() -> int:
    """Derive a non-zero seed from the clock."""
    return (time.time_ns() & 0x7FFFFFFF) or 1


class BoardGenerator(BaseModel):
    """
    Generates ladder and snake placements for one board configuration.

    Each instance owns its own random stream. For a fixed non-zero seed and
    an identical configuration the generated jumps are reproducible; a zero
    seed draws one from the clock at construction.

    Attributes:
        config: Generation configuration
        seed: Effective seed of the random stream
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GenerationConfig = Field(default_factory=GenerationConfig)
    seed: Optional[int] = None
    _rng: random.Random = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        """Resolve the effective seed and create the random stream."""
        if not self.seed:
            self.seed = self.config.seed or _time_seed()
        self._rng = random.Random(self.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GenerationConfig] = None,
        seed: Optional[int] = None,
        **config_kwargs
    ) -> "BoardGenerator":
        """
        Factory method to create a generator.

        Args:
            config: Optional GenerationConfig instance
            seed: Optional non-zero seed, overriding config.seed
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new BoardGenerator instance
        """
        if config is None:
            config = GenerationConfig(**config_kwargs)
        return cls(config=config, seed=seed)

    def generate_board(self) -> GenerationResult:
        """
        Generate a complete board.

        Returns a GenerationResult with:
        - success: True if a valid (and, if requested, balanced) board was found
        - jumps: the accepted jumps, ladders first; empty on failure
        - error: the configuration error or the exhaustion error
        - attempts: generation attempts used
        - rejections: abandoned attempts counted by reason code
        """
        config = self.config

        config_error = validate_config(config)
        if config_error is not None:
            logger.warning("Invalid configuration: %s", config_error.message)
            return GenerationResult(success=False, error=config_error, seed=self.seed)

        rejections: Counter = Counter()
        last_error: Optional[ValidationError] = None

        for attempt in range(1, config.max_generation_attempts + 1):
            jumps, last_error = self._generate_candidate()

            if last_error is None:
                logger.info(
                    "Generated board with %d jumps after %d attempt(s) (seed %d)",
                    len(jumps), attempt, self.seed
                )
                return GenerationResult(
                    success=True,
                    jumps=jumps,
                    attempts=attempt,
                    seed=self.seed,
                    rejections=dict(rejections),
                )

            rejections[last_error.code] += 1
            logger.debug("Attempt %d rejected: %s", attempt, last_error.message)

        message = (
            f"Failed to generate valid board after {config.max_generation_attempts} attempts. "
            f"Last error: {last_error.message}"
        )
        logger.info(message)
        return GenerationResult(
            success=False,
            error=ValidationError(code="GENERATION_EXHAUSTED", message=message, category="exhausted"),
            attempts=config.max_generation_attempts,
            seed=self.seed,
            rejections=dict(rejections),
        )

    def generate_board_with_difficulty(
        self,
        difficulty: Union[DifficultyPreset, DifficultyLevel, str]
    ) -> GenerationResult:
        """Apply a difficulty preset to this generator's config, then generate.

        An unknown difficulty name is reported as a config error.
        """
        try:
            self.config = apply_preset(self.config, difficulty)
        except ValueError:
            return GenerationResult(
                success=False,
                error=ValidationError(
                    code="UNKNOWN_DIFFICULTY",
                    message=f"Unknown difficulty '{difficulty}'",
                    category="config",
                ),
                seed=self.seed,
            )
        return self.generate_board()

    def _generate_candidate(self) -> Tuple[List[Jump], Optional[ValidationError]]:
        """Run one generation attempt from an empty board."""
        config = self.config
        jumps: List[Jump] = []

        ladder_count = self._rng.randint(config.min_ladders, config.max_ladders)
        jumps, error = self._place_jumps(jumps, ladder_count, is_ladder=True)
        if error is not None:
            return jumps, error

        snake_count = self._rng.randint(config.min_snakes, config.max_snakes)
        jumps, error = self._place_jumps(jumps, snake_count, is_ladder=False)
        if error is not None:
            return jumps, error

        validation = validate_jump_set(jumps, config.board_size)
        if not validation.valid:
            return jumps, validation.errors[0]

        if config.balance_jumps and not is_balanced(jumps, config.balance_ratio, config.balance_tolerance):
            return jumps, ValidationError(
                code="UNBALANCED",
                message=f"Board is not balanced (target ratio {config.balance_ratio})",
                category="balance",
            )

        return jumps, None

    def _place_jumps(
        self,
        jumps: List[Jump],
        count: int,
        is_ladder: bool
    ) -> Tuple[List[Jump], Optional[ValidationError]]:
        """
        Try to place `count` jumps of one kind on top of `jumps`.

        A jump that cannot be placed is skipped; the category only fails if
        fewer than the configured minimum were placed.
        """
        placed = list(jumps)
        successful = 0

        for _ in range(count):
            jump, failure = self._place_single_jump(placed, is_ladder)
            if jump is None:
                logger.debug(failure.message)
                continue
            placed.append(jump)
            successful += 1

        minimum = self.config.min_ladders if is_ladder else self.config.min_snakes
        if successful < minimum:
            kind = "ladders" if is_ladder else "snakes"
            return placed, ValidationError(
                code="PLACEMENT_SHORTFALL",
                message=f"Only placed {successful} {kind}, minimum is {minimum}",
                category="placement",
            )

        return placed, None

    def _place_single_jump(
        self,
        existing: List[Jump],
        is_ladder: bool
    ) -> Tuple[Optional[Jump], Optional[ValidationError]]:
        """Try up to max_placement_attempts times to place one jump."""
        config = self.config

        for _ in range(config.max_placement_attempts):
            start = self._rng.randint(config.min_start_tile, config.max_start_tile)

            if not can_place_jump_at(
                start, existing, config.blocked_tiles, config.min_distance_between_jumps
            ):
                continue

            end = self._end_tile(start, is_ladder)
            if end < 1 or end > config.board_size:
                continue

            jump = Jump(from_tile=start, to_tile=end, is_ladder=is_ladder)
            if validate_jump(jump, config.board_size) is not None:
                continue

            # Destination must be free and not an endpoint of another jump
            if is_tile_blocked(end, config.blocked_tiles):
                continue
            if any(j.to_tile == end or j.from_tile == end for j in existing):
                continue

            return jump, None

        kind = "ladder" if is_ladder else "snake"
        return None, ValidationError(
            code=f"{kind.upper()}_PLACEMENT_FAILED",
            message=f"Failed to place {kind} after {config.max_placement_attempts} attempts",
            category="placement",
        )

    def _end_tile(self, start: int, is_ladder: bool) -> int:
        """Draw a length and compute the end tile, clamped to the board."""
        config = self.config
        if is_ladder:
            length = self._rng.randint(config.min_ladder_length, config.max_ladder_length)
            return min(start + length, config.board_size)

        length = self._rng.randint(config.min_snake_length, config.max_snake_length)
        return max(start - length, 1)
