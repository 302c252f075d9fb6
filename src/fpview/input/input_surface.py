"""
Input Surface

Event hub standing in for the display surface that receives raw input.
The window forwards its events here; controllers subscribe and hold the
returned Subscription handles so they can release them on teardown.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

# Events a surface understands
CONTEXT_MENU = "contextmenu"
MOUSE_MOVE = "mousemove"
MOUSE_DOWN = "mousedown"
MOUSE_UP = "mouseup"
KEY_DOWN = "keydown"
KEY_UP = "keyup"
GAMEPAD_CONNECTED = "gamepadconnected"
GAMEPAD_DISCONNECTED = "gamepaddisconnected"
POINTER_LOCK_CHANGE = "pointerlockchange"

EVENT_NAMES = frozenset({
    CONTEXT_MENU,
    MOUSE_MOVE,
    MOUSE_DOWN,
    MOUSE_UP,
    KEY_DOWN,
    KEY_UP,
    GAMEPAD_CONNECTED,
    GAMEPAD_DISCONNECTED,
    POINTER_LOCK_CHANGE,
})


class Subscription:
    """Handle for one registered listener. remove() is safe to call repeatedly."""

    def __init__(self, surface: "InputSurface", event_name: str, callback: Callable) -> None:
        self.surface = surface
        self.event_name = event_name
        self.callback = callback
        self.active = True

    def remove(self) -> None:
        if not self.active:
            return
        self.active = False
        self.surface._remove(self)


class InputSurface:
    """
    Dispatches raw input events to subscribed listeners.

    Also tracks exclusive pointer capture. The window backend supplies the
    function that actually grabs or releases the pointer via attach().
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Subscription]] = {name: [] for name in EVENT_NAMES}
        self._lock_handler: Optional[Callable[[bool], None]] = None
        self.pointer_locked = False

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def add_listener(self, event_name: str, callback: Callable) -> Subscription:
        """
        Register callback for event_name.

        Returns:
            Subscription handle; call remove() to unregister
        """
        if event_name not in self._listeners:
            raise ValueError(f"Unknown input event: {event_name}")
        subscription = Subscription(self, event_name, callback)
        self._listeners[event_name].append(subscription)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        listeners = self._listeners[subscription.event_name]
        if subscription in listeners:
            listeners.remove(subscription)

    def listener_count(self, event_name: Optional[str] = None) -> int:
        if event_name is not None:
            return len(self._listeners[event_name])
        return sum(len(listeners) for listeners in self._listeners.values())

    def emit(self, event_name: str, *args) -> None:
        """Call every listener registered for event_name, in registration order."""
        if event_name not in self._listeners:
            raise ValueError(f"Unknown input event: {event_name}")
        # Copy so listeners may unsubscribe while being dispatched
        for subscription in list(self._listeners[event_name]):
            if subscription.active:
                subscription.callback(*args)

    # ------------------------------------------------------------------
    # Pointer capture
    # ------------------------------------------------------------------
    @property
    def attached(self) -> bool:
        return self._lock_handler is not None

    def attach(self, lock_handler: Callable[[bool], None]) -> None:
        """
        Bind the backend pointer-capture function.

        Args:
            lock_handler: Called with True to grab the pointer, False to release it
        """
        self._lock_handler = lock_handler

    def detach(self) -> None:
        self._lock_handler = None
        self.pointer_locked = False

    def request_pointer_lock(self) -> None:
        """Grab the pointer exclusively. Raises RuntimeError before attach()."""
        self._set_pointer_lock(True)

    def exit_pointer_lock(self) -> None:
        """Release pointer capture. Raises RuntimeError before attach()."""
        self._set_pointer_lock(False)

    def _set_pointer_lock(self, locked: bool) -> None:
        if self._lock_handler is None:
            raise RuntimeError("Input surface has no window attached. Did you call attach()?")
        if self.pointer_locked == locked:
            return
        self._lock_handler(locked)
        self.pointer_locked = locked
        logger.debug("Pointer lock %s", "acquired" if locked else "released")
        self.emit(POINTER_LOCK_CHANGE, locked)
