"""Difficulty presets for board generation.

A preset overrides the ladder/snake count and length ranges, the balance
target and the minimum spacing of a GenerationConfig. Board dimensions,
blocked tiles, the start range, attempt budgets and the seed are left alone.
"""

from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel

from .models import GenerationConfig


class DifficultyLevel(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXTREME = "extreme"
    CUSTOM = "custom"


class DifficultyPreset(BaseModel):
    """A named override bundle for a GenerationConfig."""
    name: str = "Custom"
    description: str = "Custom difficulty configuration"

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

    # Balance
    balance_jumps: bool = True
    balance_ratio: float = 1.2

    # Placement
    min_distance_between_jumps: int = 3


# Fields a preset is allowed to write onto a config
PRESET_FIELDS = (
    "min_ladders",
    "max_ladders",
    "min_ladder_length",
    "max_ladder_length",
    "min_snakes",
    "max_snakes",
    "min_snake_length",
    "max_snake_length",
    "balance_jumps",
    "balance_ratio",
    "min_distance_between_jumps",
)


# Built-in tiers. Going down the list ladders get fewer and shorter, snakes
# get more numerous and longer, and the balance target drops.
PRESETS: Dict[DifficultyLevel, DifficultyPreset] = {
    DifficultyLevel.EASY: DifficultyPreset(
        name="Easy",
        description="Plenty of long ladders, a few short snakes",
        min_ladders=8, max_ladders=10,
        min_ladder_length=8, max_ladder_length=24,
        min_snakes=5, max_snakes=7,
        min_snake_length=5, max_snake_length=25,
        balance_ratio=1.5,
        min_distance_between_jumps=3,
    ),
    DifficultyLevel.MEDIUM: DifficultyPreset(
        name="Medium",
        description="Ladders and snakes roughly even",
        min_ladders=6, max_ladders=8,
        min_ladder_length=8, max_ladder_length=24,
        min_snakes=6, max_snakes=8,
        min_snake_length=6, max_snake_length=26,
        balance_ratio=1.0,
        min_distance_between_jumps=3,
    ),
    DifficultyLevel.HARD: DifficultyPreset(
        name="Hard",
        description="More snakes than ladders, snakes reach further",
        min_ladders=5, max_ladders=7,
        min_ladder_length=6, max_ladder_length=22,
        min_snakes=7, max_snakes=9,
        min_snake_length=8, max_snake_length=26,
        balance_ratio=0.7,
        min_distance_between_jumps=3,
    ),
    DifficultyLevel.EXTREME: DifficultyPreset(
        name="Extreme",
        description="A handful of short ladders against a board full of long snakes",
        min_ladders=3, max_ladders=5,
        min_ladder_length=5, max_ladder_length=20,
        min_snakes=10, max_snakes=12,
        min_snake_length=12, max_snake_length=40,
        balance_ratio=0.3,
        min_distance_between_jumps=2,
    ),
}


def get_preset(level: Union[DifficultyLevel, str]) -> Optional[DifficultyPreset]:
    """Look up a built-in preset by level or name. CUSTOM has none and returns None."""
    if not isinstance(level, DifficultyLevel):
        level = DifficultyLevel(level.lower())
    return PRESETS.get(level)


def apply_preset(
    config: GenerationConfig,
    preset: Union[DifficultyPreset, DifficultyLevel, str]
) -> GenerationConfig:
    """
    Return a copy of `config` with the preset's fields written onto it.

    Args:
        config: The configuration to override
        preset: A DifficultyPreset, or a DifficultyLevel (or its name)

    Returns:
        The overridden configuration; `config` itself for CUSTOM
    """
    if not isinstance(preset, DifficultyPreset):
        preset = get_preset(preset)
        if preset is None:
            return config

    return config.model_copy(update=preset.model_dump(include=set(PRESET_FIELDS)))


def preset_from_config(config: GenerationConfig, name: str, description: str = "") -> DifficultyPreset:
    """Capture the preset-controlled fields of a config as a named preset."""
    fields = {field: getattr(config, field) for field in PRESET_FIELDS}
    return DifficultyPreset(name=name, description=description, **fields)
