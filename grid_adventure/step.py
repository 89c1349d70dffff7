"""State reducer.

:func:`process_command` is the only gameplay entry point. It wires the
command interpreter (:mod:`grid_adventure.parser`) and the movement validator
(:mod:`grid_adventure.moves`) together and records the outcome in the chat
log. It is pure: it returns a *new* :class:`grid_adventure.state.State`.

Per submission, in order:

1. Echo the trimmed line as a command-kind entry.
2. Parse and validate. Any :class:`CommandError` becomes exactly one
   error-kind entry and the position is kept.
3. Otherwise replace the position and add one response-kind entry.
4. Clear ``pending_input`` and bump ``turn``.

Blank lines are not submissions: the state is returned unchanged.
"""

import logging
from dataclasses import replace

from grid_adventure.components import ChatMessage
from grid_adventure.errors import CommandError
from grid_adventure.moves import apply_instruction, describe_move
from grid_adventure.parser import parse_command
from grid_adventure.state import State
from grid_adventure.types import MessageKind


logger = logging.getLogger(__name__)


def process_command(state: State, raw: str) -> State:
    """Apply one submitted command line.

    Args:
        state (State): Previous immutable game state.
        raw (str): Line as typed by the player.

    Returns:
        State: Next state. Failed commands only extend the chat log.
    """
    text = raw.strip()
    if not text:
        return state

    chat = state.append_chat(MessageKind.COMMAND, text)

    try:
        instruction = parse_command(text)
        position = apply_instruction(
            state.position, instruction, state.width, state.height
        )
    except CommandError as e:
        logger.debug("Rejected %r: %s", text, type(e).__name__)
        return replace(
            state,
            chat=chat.append(ChatMessage(MessageKind.ERROR, e.message)),
            pending_input="",
            turn=state.turn + 1,
        )

    logger.info(
        "Moved %s %d from (%d, %d) to (%d, %d)",
        instruction.direction,
        instruction.distance,
        state.position.x,
        state.position.y,
        position.x,
        position.y,
    )
    return replace(
        state,
        position=position,
        chat=chat.append(
            ChatMessage(MessageKind.RESPONSE, describe_move(instruction, position))
        ),
        pending_input="",
        turn=state.turn + 1,
    )


def with_pending_input(state: State, text: str) -> State:
    """Record what the player has typed so far."""
    return replace(state, pending_input=text)


def submit(state: State) -> State:
    """Submit ``state.pending_input`` as a command."""
    return process_command(state, state.pending_input)
