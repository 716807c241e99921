"""Procedural board generation for laddergen."""

from .models import (
    GenerationConfig,
    GenerationResult,
    BoardStats,
    validate_config,
)
from .presets import (
    DifficultyLevel,
    DifficultyPreset,
    PRESETS,
    get_preset,
    apply_preset,
    preset_from_config,
)
from .board_generator import BoardGenerator

__all__ = [
    "GenerationConfig",
    "GenerationResult",
    "BoardStats",
    "validate_config",
    "DifficultyLevel",
    "DifficultyPreset",
    "PRESETS",
    "get_preset",
    "apply_preset",
    "preset_from_config",
    "BoardGenerator",
]
