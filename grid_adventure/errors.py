"""Command failure classification.

Every way a submitted line can be rejected maps to one ``CommandError``
subclass carrying a fixed, user-facing ``message``. The reducer in
:mod:`grid_adventure.step` is the only place these are caught; it turns them
into error-kind chat entries.
"""

from grid_adventure.types import GRID_SIZE


class CommandError(ValueError):
    """Base class for rejected commands."""

    message: str = "Invalid command!"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MalformedCommand(CommandError):
    """Input did not split into exactly two tokens."""

    message = 'Invalid command! Use format: "direction number" (e.g., "up 2")'


class InvalidDistance(CommandError):
    """Distance token is not a positive base-10 integer."""

    message = "Invalid distance! Please enter a positive number."


class UnknownDirection(CommandError):
    """Direction token is not one of the recognized keywords."""

    message = "Invalid direction! Use: up, down, left, or right"


class OutOfBounds(CommandError):
    """Move would leave the grid."""

    def __init__(self, width: int = GRID_SIZE, height: int = GRID_SIZE) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Can't move there! Stay within the {width}x{height} grid.")
