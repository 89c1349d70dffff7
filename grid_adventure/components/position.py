"""Position component.

Immutable integer grid coordinates of the player token. Stored in
``State.position`` and replaced (never mutated) by successful moves.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
