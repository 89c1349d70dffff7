"""Command interpreter.

Turns one raw line typed by the player into an :class:`Instruction`. The
grammar is deliberately tiny::

    <direction> <distance>

where ``direction`` is one of ``up``, ``down``, ``left``, ``right`` and
``distance`` is a positive base-10 integer. Input is trimmed and lower-cased
first, then split on single spaces, so ``"Up 2"`` is accepted but
``"up  2"`` (two spaces) is not.

Checks run in a fixed order: token count, then distance, then direction. A
line such as ``"diagonal 0"`` is therefore reported as an invalid distance.
"""

import re

from grid_adventure.actions import MOVE_DIRECTIONS, Direction
from grid_adventure.components import Instruction
from grid_adventure.errors import InvalidDistance, MalformedCommand, UnknownDirection


_DISTANCE_RE = re.compile(r"[0-9]+")


def normalize_command(raw: str) -> str:
    """Trim and lower-case a raw input line."""
    return raw.strip().lower()


def parse_distance(token: str) -> int:
    """Parse a distance token.

    Raises:
        InvalidDistance: If ``token`` is not made only of ASCII digits or is zero.
    """
    if not _DISTANCE_RE.fullmatch(token):
        raise InvalidDistance()
    try:
        distance = int(token)
    except ValueError:
        # int() refuses digit strings past the interpreter's conversion limit
        raise InvalidDistance() from None
    if distance < 1:
        raise InvalidDistance()
    return distance


def parse_direction(token: str) -> Direction:
    """Parse a direction keyword.

    Raises:
        UnknownDirection: If ``token`` is not a :class:`Direction` value.
    """
    if token not in MOVE_DIRECTIONS:
        raise UnknownDirection()
    return Direction(token)


def parse_command(raw: str) -> Instruction:
    """Parse a command line into an instruction.

    Args:
        raw (str): Line as typed by the player.

    Returns:
        Instruction: Direction and distance to move.

    Raises:
        MalformedCommand: If the line does not have exactly two tokens.
        InvalidDistance: If the second token is not a positive integer.
        UnknownDirection: If the first token is not a direction keyword.
    """
    parts = normalize_command(raw).split(" ")
    if len(parts) != 2:
        raise MalformedCommand()

    direction_token, distance_token = parts
    distance = parse_distance(distance_token)
    direction = parse_direction(direction_token)
    return Instruction(direction=direction, distance=distance)
