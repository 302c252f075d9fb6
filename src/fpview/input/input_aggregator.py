"""
Input Aggregator

Turns raw keyboard, mouse and gamepad input into the normalized intent
fields of a ControllerState. Owns every input subscription it makes.
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from .controller_state import ControllerState, MovementIntent
from .gamepad import GamepadDevice, GamepadLayout, GamepadRegistry
from .input_commands import get_movement_intent
from .input_surface import (
    InputSurface,
    Subscription,
    CONTEXT_MENU,
    MOUSE_MOVE,
    MOUSE_DOWN,
    MOUSE_UP,
    KEY_DOWN,
    KEY_UP,
    GAMEPAD_CONNECTED,
    GAMEPAD_DISCONNECTED,
)
from .key_bindings import KeyBindings
from .response_curves import apply_dead_zone

logger = logging.getLogger(__name__)


class GamepadPoll(NamedTuple):
    """Dead-zoned gamepad reading for one frame."""

    move_x: float
    move_z: float
    move_y: float
    look_x: float
    look_y: float


class InputAggregator:
    """
    Central input collector for the first-person controller.

    Responsibilities:
    - Subscribe to keyboard, mouse and gamepad events on an InputSurface
    - Translate keys to movement intents via KeyBindings
    - Store raw mouse motion as one-shot look intent
    - Request pointer capture on click
    - Track connected gamepads and poll the first one

    Usage:
        aggregator = InputAggregator(surface, state, key_bindings)
        poll = aggregator.poll_first_gamepad()
        ...
        aggregator.dispose()
    """

    def __init__(
        self,
        surface: InputSurface,
        state: ControllerState,
        key_bindings: KeyBindings,
        layout: Optional[GamepadLayout] = None,
    ):
        """
        Initialize aggregator and subscribe to the surface.

        Args:
            surface: Event source for raw input
            state: State whose intent fields this aggregator writes
            key_bindings: Key → command table
            layout: Gamepad axis/button assignment (default: GamepadLayout())
        """
        self.surface = surface
        self.state = state
        self.key_bindings = key_bindings
        self.layout = layout or GamepadLayout()
        self.gamepads = GamepadRegistry()
        self._faulty_gamepads = set()

        # Axes held on the keyboard, kept apart from the pad-overridden state
        self.key_intent = MovementIntent()
        self.gamepad_driving = False

        self._subscriptions: List[Subscription] = []
        self._subscribe(CONTEXT_MENU, self.on_context_menu)
        self._subscribe(MOUSE_MOVE, self.on_mouse_move)
        self._subscribe(MOUSE_DOWN, self.on_mouse_down)
        self._subscribe(MOUSE_UP, self.on_mouse_up)
        self._subscribe(KEY_DOWN, self.on_key_down)
        self._subscribe(KEY_UP, self.on_key_up)
        self._subscribe(GAMEPAD_CONNECTED, self.on_gamepad_connected)
        self._subscribe(GAMEPAD_DISCONNECTED, self.on_gamepad_disconnected)

    def _subscribe(self, event_name: str, callback) -> None:
        self._subscriptions.append(self.surface.add_listener(event_name, callback))

    @property
    def disposed(self) -> bool:
        return not self._subscriptions

    def dispose(self) -> None:
        """Remove every subscription. Safe to call more than once."""
        for subscription in self._subscriptions:
            subscription.remove()
        self._subscriptions.clear()

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------
    def on_key_down(self, key: int) -> None:
        intent = get_movement_intent(self.key_bindings.get_command(key))
        if intent is None:
            return
        self.key_intent.set(intent.axis, intent.value)
        self.state.movement_intent.set(intent.axis, intent.value)

    def on_key_up(self, key: int) -> None:
        # Releasing either key of an opposed pair zeroes the whole axis,
        # even if the other key is still held.
        intent = get_movement_intent(self.key_bindings.get_command(key))
        if intent is None:
            return
        self.key_intent.set(intent.axis, 0.0)
        self.state.movement_intent.set(intent.axis, 0.0)

    # ------------------------------------------------------------------
    # Mouse
    # ------------------------------------------------------------------
    def on_mouse_move(self, dx: float, dy: float) -> None:
        """
        Store relative mouse motion for the next update.

        Args:
            dx: Horizontal movement since the last event
            dy: Vertical movement since the last event (down is positive)
        """
        look = self.state.look_intent
        look.mouse_x = float(dx)
        look.mouse_y = float(dy)

    def on_mouse_down(self, button: int = 1) -> None:
        if self.surface.pointer_locked:
            logger.debug("The surface already has the pointer lock.")
            return
        logger.debug("The surface does not have the pointer lock yet. Requesting...")
        self.surface.request_pointer_lock()

    def on_mouse_up(self, button: int = 1) -> None:
        pass

    def on_context_menu(self, *args) -> None:
        # Suppressed; right-click carries no action
        pass

    # ------------------------------------------------------------------
    # Gamepads
    # ------------------------------------------------------------------
    def on_gamepad_connected(self, device: GamepadDevice) -> None:
        try:
            snapshot = device.read()
        except Exception as e:  # device may vanish between connect and read
            logger.warning("Gamepad %s could not be read on connect: %s", device.index, e)
        else:
            logger.debug(
                "Gamepad connected at index %d: %s. %d buttons, %d axes.",
                device.index, device.name, len(snapshot.buttons), len(snapshot.axes),
            )
        self.gamepads.connect(device)

    def on_gamepad_disconnected(self, device: GamepadDevice) -> None:
        logger.info("Gamepad disconnected from index %d: %s", device.index, device.name)
        self.gamepads.disconnect(device.index)
        self._faulty_gamepads.discard(device.index)

        if len(self.gamepads) == 0:
            self.release_gamepad_input(force=True)

    def release_gamepad_input(self, force: bool = False) -> None:
        """
        Stop gamepad values from feeding the controller.

        Pad look is zeroed. Movement falls back to the keys currently held
        if the pad wrote it last (or always, with force).
        """
        self.state.look_intent.clear_pad()
        if self.gamepad_driving or force:
            key = self.key_intent
            intent = self.state.movement_intent
            intent.x, intent.y, intent.z = key.x, key.y, key.z
            self.gamepad_driving = False

    def poll_first_gamepad(self) -> Optional[GamepadPoll]:
        """
        Read the first registered gamepad.

        Returns:
            Dead-zoned GamepadPoll, or None if no gamepad is registered or the
            device delivered an incomplete reading
        """
        device = self.gamepads.first()
        if device is None:
            return None

        layout = self.layout
        try:
            snapshot = self.gamepads.read_first()
            axes = snapshot.axes
            buttons = snapshot.buttons

            move_x = apply_dead_zone(axes[layout.move_x_axis], layout.dead_zone)
            move_z = apply_dead_zone(axes[layout.move_z_axis], layout.dead_zone)
            look_x = apply_dead_zone(axes[layout.look_x_axis], layout.dead_zone)
            look_y = apply_dead_zone(axes[layout.look_y_axis], layout.dead_zone)

            move_y = 0.0
            if buttons[layout.descend_button]:
                move_y -= 1.0
            if buttons[layout.ascend_button]:
                move_y += 1.0
        except IndexError:
            self._warn_once(device.index, "reading is missing expected axes/buttons, skipping gamepad input")
            return None
        except Exception as e:  # backend errors must not stop the render loop
            self._warn_once(device.index, f"could not be read: {e}")
            return None

        self._faulty_gamepads.discard(device.index)
        return GamepadPoll(move_x, move_z, move_y, look_x, look_y)

    def _warn_once(self, index: int, message: str) -> None:
        # Warn when a device starts failing, not on every frame it keeps failing
        if index in self._faulty_gamepads:
            return
        self._faulty_gamepads.add(index)
        logger.warning("Gamepad %d %s", index, message)
