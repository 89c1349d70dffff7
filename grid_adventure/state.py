"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole game at a single moment: where the player stands, the chat transcript
so far and whatever the player has typed but not yet submitted. The reducer
in :mod:`grid_adventure.step` is a pure function that takes a previous
``State`` plus a raw command line and returns a *new* ``State``; nothing is
mutated in place.

Design notes:

* The transcript is a persistent vector (``pyrsistent.PVector``) of
  :class:`ChatMessage` values. It is append-only, so insertion order is the
  chronological order of submissions.
* ``width`` / ``height`` live on the state so bounds checks never read a
  global; :data:`grid_adventure.types.GRID_SIZE` is only the default.
* Construction validates the position invariant. A ``State`` whose player is
  off the grid cannot exist.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from grid_adventure.components import ChatMessage, Position
from grid_adventure.types import GRID_SIZE, MessageKind
from grid_adventure.utils.grid import is_in_bounds


WELCOME_MESSAGE = (
    'Welcome to Grid Adventure! Type commands like "up 2" or "right 3" to move.'
)


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        width (int): Grid width in squares.
        height (int): Grid height in squares.
        position (Position): Current player coordinates.
        chat (PVector[ChatMessage]): Ordered, append-only transcript.
        pending_input (str): Text typed but not yet submitted.
        turn (int): Number of submissions processed so far.
    """

    width: int = GRID_SIZE
    height: int = GRID_SIZE
    position: Position = Position(0, 0)
    chat: PVector[ChatMessage] = pvector()
    pending_input: str = ""
    turn: int = 0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid must be non-empty, got {self.width}x{self.height}")
        if not is_in_bounds(self.position, self.width, self.height):
            raise ValueError(
                f"Position {self.position} outside {self.width}x{self.height} grid"
            )

    def append_chat(self, kind: MessageKind, text: str) -> PVector[ChatMessage]:
        """Transcript with one more entry (``self`` is left untouched)."""
        return self.chat.append(ChatMessage(kind, text))

    @property
    def description(self) -> PMap[str, Any]:
        """Plain serialization for the debug view.

        Returns:
            PMap[str, Any]: Persistent map of field name to a JSON-friendly value.
        """
        return pmap(
            {
                "width": self.width,
                "height": self.height,
                "position": {"x": self.position.x, "y": self.position.y},
                "chat": [
                    {"kind": str(msg.kind), "text": msg.text} for msg in self.chat
                ],
                "pending_input": self.pending_input,
                "turn": self.turn,
            }
        )


def new_game(width: int = GRID_SIZE, height: int = GRID_SIZE) -> State:
    """Fresh state: player at the origin and a single welcome line."""
    return State(
        width=width,
        height=height,
        position=Position(0, 0),
        chat=pvector([ChatMessage(MessageKind.RESPONSE, WELCOME_MESSAGE)]),
    )
