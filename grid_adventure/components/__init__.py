"""grid_adventure.components
=================================

Aggregate import surface for the immutable value objects used by the engine.

The symbols re-exported here let downstream code import from a single
place, e.g.::

    from grid_adventure.components import Position, ChatMessage

All components are frozen ``@dataclass`` value objects; they carry no
behavior beyond their fields. Changes are expressed by building a new
:class:`grid_adventure.state.State` that references new instances.
"""

from .chat_message import ChatMessage
from .instruction import Instruction
from .position import Position

__all__ = [
    "ChatMessage",
    "Instruction",
    "Position",
]
