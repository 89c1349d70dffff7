"""Common constants and enumerations."""

from enum import StrEnum, auto


GRID_SIZE = 10


class MessageKind(StrEnum):
    """Chat transcript entry categories (each maps to one render style)."""

    COMMAND = auto()
    RESPONSE = auto()
    ERROR = auto()
