"""Tests for InputAggregator"""

import logging

import pytest

from src.fpview.input.controller_state import ControllerState
from src.fpview.input.input_aggregator import InputAggregator
from src.fpview.input.input_surface import (
    CONTEXT_MENU,
    GAMEPAD_CONNECTED,
    GAMEPAD_DISCONNECTED,
    KEY_DOWN,
    KEY_UP,
    MOUSE_DOWN,
    MOUSE_MOVE,
    MOUSE_UP,
)


@pytest.fixture
def state():
    return ControllerState()


@pytest.fixture
def aggregator(surface, state, key_bindings):
    aggregator = InputAggregator(surface, state, key_bindings)
    yield aggregator
    aggregator.dispose()


def test_subscribes_to_every_input_event(surface, aggregator):
    """Test construction registers one listener per raw input event"""
    assert surface.listener_count() == 8
    assert not aggregator.disposed


def test_movement_keys_set_axis_intent(surface, state, aggregator, keys):
    """Test each movement key writes its axis and sign"""
    expected = {
        keys.W: ("z", -1.0),
        keys.S: ("z", 1.0),
        keys.A: ("x", -1.0),
        keys.D: ("x", 1.0),
        keys.SPACE: ("y", 1.0),
        keys.LEFT_SHIFT: ("y", -1.0),
    }
    for key, (axis, value) in expected.items():
        surface.emit(KEY_DOWN, key)
        assert getattr(state.movement_intent, axis) == value
        surface.emit(KEY_UP, key)
        assert getattr(state.movement_intent, axis) == 0.0


def test_key_up_zeroes_whole_axis(surface, state, aggregator, keys):
    """Test releasing one of two opposed keys clears the axis"""
    surface.emit(KEY_DOWN, keys.W)
    surface.emit(KEY_DOWN, keys.S)
    assert state.movement_intent.z == 1.0

    surface.emit(KEY_UP, keys.W)
    assert state.movement_intent.z == 0.0


def test_unbound_and_non_movement_keys_ignored(surface, state, aggregator, keys):
    """Test keys without a movement command leave intents alone"""
    surface.emit(KEY_DOWN, 4242)
    surface.emit(KEY_DOWN, keys.T)
    surface.emit(KEY_DOWN, keys.Q)
    assert (state.movement_intent.x, state.movement_intent.y, state.movement_intent.z) == (0.0, 0.0, 0.0)


def test_mouse_move_overwrites(surface, state, aggregator):
    """Test the latest motion event replaces the previous one"""
    surface.emit(MOUSE_MOVE, 4, 2)
    surface.emit(MOUSE_MOVE, -1, 7)
    assert state.look_intent.mouse_x == -1.0
    assert state.look_intent.mouse_y == 7.0


def test_mouse_down_requests_pointer_lock_once(surface, aggregator, lock_calls):
    """Test clicking captures the pointer only when not already captured"""
    surface.emit(MOUSE_DOWN, 1)
    surface.emit(MOUSE_DOWN, 1)
    assert lock_calls == [True]
    assert surface.pointer_locked


def test_mouse_up_and_context_menu_are_ignored(surface, state, aggregator, lock_calls):
    """Test mouse up and context menu change nothing"""
    before = state.snapshot()
    surface.emit(MOUSE_UP, 1)
    surface.emit(CONTEXT_MENU)
    assert state == before
    assert lock_calls == []


def test_gamepad_connect_and_disconnect(surface, state, aggregator, make_gamepad):
    """Test registry tracking and pad values dropped when the last pad leaves"""
    pad_a = make_gamepad(index=0)
    pad_b = make_gamepad(index=1)
    surface.emit(GAMEPAD_CONNECTED, pad_a)
    surface.emit(GAMEPAD_CONNECTED, pad_b)
    assert len(aggregator.gamepads) == 2

    state.movement_intent.x = 0.7
    state.look_intent.pad_x = 0.3

    surface.emit(GAMEPAD_DISCONNECTED, pad_a)
    assert state.movement_intent.x == 0.7

    surface.emit(GAMEPAD_DISCONNECTED, pad_b)
    assert len(aggregator.gamepads) == 0
    assert state.movement_intent.x == 0.0
    assert state.look_intent.pad_x == 0.0


def test_last_disconnect_keeps_held_keys(surface, state, aggregator, make_gamepad, keys):
    """Test axes held on the keyboard survive the last pad leaving"""
    pad = make_gamepad()
    surface.emit(GAMEPAD_CONNECTED, pad)
    surface.emit(KEY_DOWN, keys.W)

    # Stick values written over the keyboard axes
    state.movement_intent.x = 0.4
    state.movement_intent.z = 0.0
    aggregator.gamepad_driving = True

    surface.emit(GAMEPAD_DISCONNECTED, pad)

    assert state.movement_intent.z == -1.0
    assert state.movement_intent.x == 0.0
    assert not aggregator.gamepad_driving


def test_release_keeps_keyboard_movement_when_pad_idle(state, aggregator):
    """Test releasing pad input only restores movement the pad wrote"""
    state.movement_intent.y = 1.0
    state.look_intent.pad_y = 0.5

    aggregator.release_gamepad_input()

    assert state.movement_intent.y == 1.0
    assert state.look_intent.pad_y == 0.0


def test_unreadable_pad_still_registers(surface, aggregator, make_gamepad, caplog):
    """Test a pad that fails its first read is still registered"""
    pad = make_gamepad(index=2)
    pad.error = OSError("device gone")

    with caplog.at_level(logging.WARNING):
        surface.emit(GAMEPAD_CONNECTED, pad)

    assert 2 in aggregator.gamepads
    assert any("could not be read on connect" in r.message for r in caplog.records)


def test_poll_without_gamepad(aggregator):
    """Test polling with no pad returns None"""
    assert aggregator.poll_first_gamepad() is None


def test_poll_applies_dead_zone(surface, aggregator, make_gamepad):
    """Test each axis is dead-zoned on its own"""
    pad = make_gamepad(axes=[0.5, 0.02, 0.9, -0.03, -0.8, 0.0])
    surface.emit(GAMEPAD_CONNECTED, pad)

    poll = aggregator.poll_first_gamepad()
    assert poll.move_x == 0.5
    assert poll.move_z == 0.0
    assert poll.look_x == 0.0
    assert poll.look_y == -0.8
    assert poll.move_y == 0.0


def test_poll_vertical_buttons(surface, aggregator, make_gamepad):
    """Test ascend and descend buttons sum to the vertical intent"""
    pad = make_gamepad()
    surface.emit(GAMEPAD_CONNECTED, pad)
    layout = aggregator.layout

    pad.buttons[layout.ascend_button] = True
    assert aggregator.poll_first_gamepad().move_y == 1.0

    pad.buttons[layout.descend_button] = True
    assert aggregator.poll_first_gamepad().move_y == 0.0

    pad.buttons[layout.ascend_button] = False
    assert aggregator.poll_first_gamepad().move_y == -1.0


def test_poll_only_reads_first_pad(surface, aggregator, make_gamepad):
    """Test later pads are never consulted"""
    first = make_gamepad(index=0, axes=[0.0] * 6)
    second = make_gamepad(index=1, axes=[1.0] * 6)
    surface.emit(GAMEPAD_CONNECTED, first)
    surface.emit(GAMEPAD_CONNECTED, second)
    reads_before = second.reads

    assert aggregator.poll_first_gamepad().move_x == 0.0
    assert second.reads == reads_before


def test_malformed_snapshot_warns_once(surface, aggregator, make_gamepad, caplog):
    """Test a reading with too few axes is skipped with a single warning"""
    pad = make_gamepad(axes=[0.0, 0.0])
    surface.emit(GAMEPAD_CONNECTED, pad)

    with caplog.at_level(logging.WARNING):
        assert aggregator.poll_first_gamepad() is None
        assert aggregator.poll_first_gamepad() is None

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1

    # Recovery re-arms the warning
    pad.axes = [0.0] * 6
    assert aggregator.poll_first_gamepad() is not None


def test_read_error_returns_none(surface, aggregator, make_gamepad):
    """Test a device raising while read does not propagate"""
    pad = make_gamepad()
    surface.emit(GAMEPAD_CONNECTED, pad)
    pad.error = RuntimeError("backend error")

    assert aggregator.poll_first_gamepad() is None


def test_dispose_is_idempotent(surface, state, aggregator, keys):
    """Test dispose removes every listener and can be repeated"""
    aggregator.dispose()
    aggregator.dispose()

    assert aggregator.disposed
    assert surface.listener_count() == 0

    surface.emit(KEY_DOWN, keys.W)
    assert state.movement_intent.z == 0.0
