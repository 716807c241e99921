"""Data models for jump validation."""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict


# Error categories
Category = Literal["config", "placement", "jump_set", "balance", "exhausted"]


class Jump(BaseModel):
    """
    A directed link between two tiles on the board.

    Ladders advance a token (to > from), snakes send it back (to < from).
    Serialized as {"from", "to", "isLadder"} for the board-rendering layer.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_tile: int = Field(..., alias="from")
    to_tile: int = Field(..., alias="to")
    is_ladder: bool = Field(False, alias="isLadder")

    @property
    def length(self) -> int:
        """Number of tiles the jump moves a token."""
        return abs(self.to_tile - self.from_tile)

    @property
    def kind(self) -> str:
        return "ladder" if self.is_ladder else "snake"


class ValidationError(BaseModel):
    """A single validation error."""
    code: str
    message: str
    tile: Optional[int] = None
    category: Category = "jump_set"


class ValidationResult(BaseModel):
    """Result of jump set validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    jump_count: int = 0

    @property
    def message(self) -> Optional[str]:
        """Message of the first error, if any."""
        return self.errors[0].message if self.errors else None
