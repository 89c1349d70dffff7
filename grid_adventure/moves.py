"""Movement validation.

Applies a parsed :class:`Instruction` to a :class:`Position`. The candidate
square is ``distance`` unit steps along the axis implied by the direction
(see :data:`grid_adventure.actions.DIRECTION_DELTAS`). Only the destination is
checked: there are no obstacles, so the path in between never matters.

The functions here never mutate anything; a rejected move simply raises and
the caller keeps its current position.
"""

from grid_adventure.actions import DIRECTION_DELTAS
from grid_adventure.components import Instruction, Position
from grid_adventure.errors import OutOfBounds
from grid_adventure.utils.grid import is_in_bounds


def candidate_position(pos: Position, instruction: Instruction) -> Position:
    """Destination of ``instruction`` from ``pos`` without bounds checking."""
    dx, dy = DIRECTION_DELTAS[instruction.direction]
    return Position(
        pos.x + dx * instruction.distance,
        pos.y + dy * instruction.distance,
    )


def apply_instruction(
    pos: Position, instruction: Instruction, width: int, height: int
) -> Position:
    """Validate and apply a move.

    Args:
        pos (Position): Current player position.
        instruction (Instruction): Parsed direction and distance.
        width (int): Grid width in squares.
        height (int): Grid height in squares.

    Returns:
        Position: The new position.

    Raises:
        OutOfBounds: If the destination lies outside the grid.
    """
    new_pos = candidate_position(pos, instruction)
    if not is_in_bounds(new_pos, width, height):
        raise OutOfBounds(width, height)
    return new_pos


def describe_move(instruction: Instruction, new_pos: Position) -> str:
    """Confirmation text for a successful move."""
    plural = "s" if instruction.distance > 1 else ""
    return (
        f"Moved {instruction.direction} {instruction.distance} square{plural}. "
        f"Now at position ({new_pos.x}, {new_pos.y})"
    )
