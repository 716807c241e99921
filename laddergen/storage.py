"""Loading configurations and saving generated boards."""

import json
from pathlib import Path
from typing import List, Union

import yaml

from .generator.models import GenerationConfig, GenerationResult
from .verifiers.models import Jump


def load_config(config_path: Union[str, Path]) -> GenerationConfig:
    """Load a generation configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GenerationConfig(**data)


def save_board(path: Union[str, Path], result: GenerationResult) -> None:
    """
    Save a generation result to a JSON file.

    Jumps are written as {"from", "to", "isLadder"} objects.

    Args:
        path: Path to save the board file
        result: The generation result to save
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(result.model_dump(by_alias=True), f, indent=2, default=str)


def load_board(path: Union[str, Path]) -> List[Jump]:
    """Load the jumps of a saved board (a saved result or a bare jump list)."""
    with open(Path(path)) as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("jumps", [])

    return [Jump(**item) for item in data]
