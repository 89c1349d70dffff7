"""Chat transcript entry."""

from dataclasses import dataclass

from grid_adventure.types import MessageKind


@dataclass(frozen=True)
class ChatMessage:
    """One line of the chat log.

    Attributes:
        kind: Whether the line echoes a command, confirms a move or reports an error.
        text: User-facing text, without any render prefix.
    """

    kind: MessageKind
    text: str
