"""Grid bounds helper."""

from grid_adventure.components import Position


def is_in_bounds(pos: Position, width: int, height: int) -> bool:
    """Return True if ``pos`` lies within the ``width`` x ``height`` rectangle."""
    return 0 <= pos.x < width and 0 <= pos.y < height
