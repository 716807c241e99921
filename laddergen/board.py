"""Board geometry and summary utilities for a presentation layer."""

from typing import Dict, List, Tuple

from .generator.models import BoardStats
from .verifiers.models import Jump
from .verifiers.validate import calculate_balance_ratio


# Hand-authored fallback board: 7 ladders and 8 snakes
CLASSIC_JUMPS: Tuple[Jump, ...] = (
    # Ladders (bottom to top)
    Jump(from_tile=4, to_tile=14, is_ladder=True),
    Jump(from_tile=9, to_tile=31, is_ladder=True),
    Jump(from_tile=21, to_tile=42, is_ladder=True),
    Jump(from_tile=28, to_tile=84, is_ladder=True),
    Jump(from_tile=40, to_tile=63, is_ladder=True),
    Jump(from_tile=51, to_tile=67, is_ladder=True),
    Jump(from_tile=71, to_tile=91, is_ladder=True),
    # Snakes (head to tail)
    Jump(from_tile=98, to_tile=78),
    Jump(from_tile=95, to_tile=75),
    Jump(from_tile=92, to_tile=73),
    Jump(from_tile=87, to_tile=36),
    Jump(from_tile=64, to_tile=60),
    Jump(from_tile=62, to_tile=19),
    Jump(from_tile=54, to_tile=34),
    Jump(from_tile=17, to_tile=7),
)


def tile_to_cell(tile: int, columns: int) -> Tuple[int, int]:
    """
    Convert a 1-based tile number to its (row, col) grid cell.

    Tiles start at the bottom-left and zigzag: even rows run left-to-right,
    odd rows right-to-left.
    """
    index = tile - 1
    row = index // columns
    col = index % columns
    if row % 2 == 1:
        col = columns - 1 - col
    return row, col


def apply_jumps(position: int, jumps: List[Jump]) -> int:
    """Return where a token landing on `position` ends up."""
    for jump in jumps:
        if jump.from_tile == position:
            return jump.to_tile
    return position


def render_board(jumps: List[Jump], board_size: int, columns: int) -> str:
    """Render the board as text, top row first.

    Ladder starts are tagged L, snake starts S.
    """
    if board_size <= 0 or columns <= 0:
        return ""

    starts: Dict[int, Jump] = {j.from_tile: j for j in jumps}
    width = len(str(board_size)) + 1
    rows = (board_size + columns - 1) // columns

    grid: Dict[Tuple[int, int], str] = {}
    for tile in range(1, board_size + 1):
        jump = starts.get(tile)
        tag = "" if jump is None else ("L" if jump.is_ladder else "S")
        grid[tile_to_cell(tile, columns)] = f"{tile}{tag}".rjust(width)

    lines = [
        ' '.join(grid.get((row, col), ' ' * width) for col in range(columns))
        for row in reversed(range(rows))
    ]

    return '\n'.join(lines)


def describe_jumps(jumps: List[Jump]) -> List[str]:
    """One line per jump, e.g. 'Ladder: 4 -> 14 (length: 10)'."""
    return [
        f"{'Ladder' if j.is_ladder else 'Snake'}: {j.from_tile} -> {j.to_tile} (length: {j.length})"
        for j in jumps
    ]


def board_stats(jumps: List[Jump]) -> BoardStats:
    """Compute counts, lengths and the balance ratio of a board."""
    ladders = [j.length for j in jumps if j.is_ladder]
    snakes = [j.length for j in jumps if not j.is_ladder]

    return BoardStats(
        total_jumps=len(jumps),
        ladder_count=len(ladders),
        snake_count=len(snakes),
        total_ladder_length=sum(ladders),
        total_snake_length=sum(snakes),
        average_ladder_length=sum(ladders) / len(ladders) if ladders else 0.0,
        average_snake_length=sum(snakes) / len(snakes) if snakes else 0.0,
        balance_ratio=calculate_balance_ratio(jumps),
    )
