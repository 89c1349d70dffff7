"""Parsed movement instruction."""

from dataclasses import dataclass

from grid_adventure.actions import Direction


@dataclass(frozen=True)
class Instruction:
    """A (direction, distance) pair derived from one command line.

    Instructions are transient: the reducer consumes them immediately and never
    stores them on ``State``.

    Attributes:
        direction: Which way to move.
        distance: Number of squares, always ``>= 1``.
    """

    direction: Direction
    distance: int

    def __post_init__(self) -> None:
        if self.distance < 1:
            raise ValueError(f"distance must be positive, got {self.distance}")
