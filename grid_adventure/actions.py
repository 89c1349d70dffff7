"""Direction enumeration.

``Direction`` values are the exact lower-case keywords accepted by the command
parser. ``DIRECTION_DELTAS`` is the canonical unit step per direction: the
grid origin is the top-left corner, so ``UP`` and ``LEFT`` decrease a
coordinate while ``DOWN`` and ``RIGHT`` increase it.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple


class Direction(StrEnum):
    """String enum of movement directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}
