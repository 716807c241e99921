"""
Main entry point for generating Snakes-and-Ladders boards.

Usage:
    python -m laddergen.main
    python -m laddergen.main config.yaml --difficulty hard --seed 42
    python -m laddergen.main config.yaml --output boards/board1.json --render --verbose
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from .board import board_stats, describe_jumps, render_board
from .generator import BoardGenerator, DifficultyLevel, GenerationConfig
from .logger_config import configure_logging
from .storage import load_config, save_board


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a Snakes-and-Ladders board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  board_size: 100
  columns: 10
  min_ladders: 5
  max_ladders: 8
  min_snakes: 5
  max_snakes: 8
  blocked_tiles: [1, 100]
  balance_jumps: true
  balance_ratio: 1.2
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=[level.value for level in DifficultyLevel],
        default=DifficultyLevel.CUSTOM.value,
        help="Difficulty preset applied on top of the configuration"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Random seed (overrides the config seed when non-zero)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the board JSON (default: boards/<timestamp>.json)"
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print the board grid"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and generator debug logs"
    )

    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING")

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1
    else:
        config = GenerationConfig()

    # Determine output path
    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("boards") / f"board_{timestamp}.json"

    generator = BoardGenerator.create(config=config, seed=args.seed)

    if args.verbose:
        print(f"Config: {args.config or '(defaults)'}")
        print(f"Difficulty: {args.difficulty}")
        print(f"Seed: {generator.seed}")
        print(f"Output: {output_path}")
        print()

    result = generator.generate_board_with_difficulty(args.difficulty)

    if not result.success:
        print(f"Generation failed: {result.error.message}", file=sys.stderr)
        return 1

    save_board(output_path, result)

    if args.render:
        print(render_board(result.jumps, generator.config.board_size, generator.config.columns))
        print()

    if args.verbose:
        for line in describe_jumps(result.jumps):
            print(line)
        print()

    stats = board_stats(result.jumps)

    # Print summary
    print("=== Board Summary ===")
    print(f"Total jumps: {stats.total_jumps} (Ladders: {stats.ladder_count}, Snakes: {stats.snake_count})")
    print(f"Balance ratio: {stats.balance_ratio:.2f}")
    print(f"Attempts: {result.attempts}")
    print(f"Seed: {result.seed}")
    print(f"Saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
