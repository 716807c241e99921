"""Procedural Snakes-and-Ladders board generation."""

from .verifiers import Jump, ValidationError, ValidationResult
from .generator import (
    BoardGenerator,
    GenerationConfig,
    GenerationResult,
    DifficultyLevel,
    DifficultyPreset,
    apply_preset,
)

__all__ = [
    "Jump",
    "ValidationError",
    "ValidationResult",
    "BoardGenerator",
    "GenerationConfig",
    "GenerationResult",
    "DifficultyLevel",
    "DifficultyPreset",
    "apply_preset",
]
