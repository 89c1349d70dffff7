import logging
from typing import Tuple

import pytest

from grid_adventure.components import ChatMessage, Position
from grid_adventure.state import new_game
from grid_adventure.step import process_command, submit, with_pending_input
from grid_adventure.types import MessageKind
from tests.test_utils import chat_kinds, last_message, make_state


OUT_OF_BOUNDS = "Can't move there! Stay within the 10x10 grid."


def test_up_from_origin_is_rejected() -> None:
    state = make_state(pos=(0, 0))
    state2 = process_command(state, "up 2")
    assert state2.position == Position(0, 0)
    assert list(state2.chat) == [
        ChatMessage(MessageKind.COMMAND, "up 2"),
        ChatMessage(MessageKind.ERROR, OUT_OF_BOUNDS),
    ]


def test_up_from_center_moves() -> None:
    state = make_state(pos=(5, 5))
    state2 = process_command(state, "up 2")
    assert state2.position == Position(5, 3)
    assert last_message(state2) == ChatMessage(
        MessageKind.RESPONSE, "Moved up 2 squares. Now at position (5, 3)"
    )


def test_right_three_from_origin() -> None:
    state2 = process_command(make_state(), "right 3")
    assert state2.position == Position(3, 0)
    assert last_message(state2).kind == MessageKind.RESPONSE
    assert "3 squares" in last_message(state2).text


@pytest.mark.parametrize(
    "raw, expected_error",
    [
        ("diagonal 1", "Invalid direction! Use: up, down, left, or right"),
        ("up", 'Invalid command! Use format: "direction number" (e.g., "up 2")'),
        ("left 0", "Invalid distance! Please enter a positive number."),
        ("down 10", OUT_OF_BOUNDS),
    ],
)
def test_failures_append_error_and_keep_position(raw: str, expected_error: str) -> None:
    state = make_state(pos=(4, 4))
    state2 = process_command(state, raw)
    assert state2.position == Position(4, 4)
    assert chat_kinds(state2) == [MessageKind.COMMAND, MessageKind.ERROR]
    assert last_message(state2).text == expected_error


@pytest.mark.parametrize(
    "start, raw, expected",
    [
        ((0, 0), "down 9", (0, 9)),
        ((0, 0), "right 9", (9, 0)),
        ((9, 9), "up 9", (9, 0)),
        ((9, 9), "left 9", (0, 9)),
        ((2, 7), "left 1", (1, 7)),
    ],
)
def test_moves_to_computed_coordinate(
    start: Tuple[int, int], raw: str, expected: Tuple[int, int]
) -> None:
    state2 = process_command(make_state(pos=start), raw)
    assert state2.position == Position(*expected)
    assert chat_kinds(state2) == [MessageKind.COMMAND, MessageKind.RESPONSE]


def test_command_echo_is_trimmed_not_lowercased() -> None:
    state2 = process_command(make_state(), "  Right 2 ")
    assert state2.chat[0] == ChatMessage(MessageKind.COMMAND, "Right 2")
    assert last_message(state2).text == "Moved right 2 squares. Now at position (2, 0)"


def test_single_square_is_not_pluralized() -> None:
    state2 = process_command(make_state(), "down 1")
    assert last_message(state2).text == "Moved down 1 square. Now at position (0, 1)"


def test_every_submission_echoes_before_outcome() -> None:
    state = new_game()
    commands = ["right 3", "up 1", "diagonal 1", "down 2", "left 0", "left 1"]
    for raw in commands:
        state = process_command(state, raw)

    entries = list(state.chat)[1:]  # skip welcome line
    assert len(entries) == 2 * len(commands)
    for i, raw in enumerate(commands):
        echo, outcome = entries[2 * i], entries[2 * i + 1]
        assert echo == ChatMessage(MessageKind.COMMAND, raw)
        assert outcome.kind in (MessageKind.RESPONSE, MessageKind.ERROR)

    assert state.position == Position(2, 2)
    assert state.turn == len(commands)


def test_failed_command_does_not_touch_other_state() -> None:
    state = process_command(make_state(pos=(3, 3)), "right 2")
    state2 = process_command(state, "up 99")
    assert state2.position == state.position == Position(5, 3)
    assert list(state2.chat)[: len(state.chat)] == list(state.chat)
    assert len(state2.chat) == len(state.chat) + 2


def test_input_state_is_not_mutated() -> None:
    state = make_state(pos=(5, 5))
    process_command(state, "up 2")
    assert state.position == Position(5, 5)
    assert len(state.chat) == 0
    assert state.turn == 0


@pytest.mark.parametrize("raw", ["", "   ", "\n"])
def test_blank_input_is_ignored(raw: str) -> None:
    state = make_state(pending_input=raw)
    state2 = process_command(state, raw)
    assert state2 is state
    assert len(state2.chat) == 0
    assert state2.turn == 0
    assert state2.pending_input == raw


def test_oversized_distance_becomes_error_entry() -> None:
    raw = "up " + "1" * 5000
    state2 = process_command(make_state(pos=(5, 5)), raw)
    assert state2.position == Position(5, 5)
    assert list(state2.chat) == [
        ChatMessage(MessageKind.COMMAND, raw),
        ChatMessage(
            MessageKind.ERROR, "Invalid distance! Please enter a positive number."
        ),
    ]
    assert state2.turn == 1


def test_respects_state_grid_size() -> None:
    state = make_state(pos=(0, 0), width=3, height=3)
    state2 = process_command(state, "right 3")
    assert state2.position == Position(0, 0)
    assert last_message(state2).text == "Can't move there! Stay within the 3x3 grid."
    state3 = process_command(state, "right 2")
    assert state3.position == Position(2, 0)


@pytest.mark.parametrize("raw", ["right 1", "sideways 1"])
def test_submit_clears_pending_input(raw: str) -> None:
    state = with_pending_input(make_state(), raw)
    assert state.pending_input == raw
    state2 = submit(state)
    assert state2.pending_input == ""
    assert state2.chat[0] == ChatMessage(MessageKind.COMMAND, raw)


def test_logs_accepted_and_rejected_commands(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="grid_adventure.step")
    state = process_command(make_state(), "right 3")
    process_command(state, "up 5")

    records = [r for r in caplog.records if r.name == "grid_adventure.step"]
    messages = [record.getMessage() for record in records]
    assert "Moved right 3 from (0, 0) to (3, 0)" in messages
    assert any("OutOfBounds" in m for m in messages)
    levels = {record.levelno for record in records}
    assert levels == {logging.INFO, logging.DEBUG}
