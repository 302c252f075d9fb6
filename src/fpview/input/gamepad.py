"""
Gamepad Support

Snapshots of gamepad state, the registry of connected devices and a pygame
joystick source that announces connects/disconnects on an InputSurface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Protocol, Tuple

import pygame

from ..config.settings import (
    AXIS_DEAD_ZONE,
    GAMEPAD_MOVE_X_AXIS,
    GAMEPAD_MOVE_Z_AXIS,
    GAMEPAD_LOOK_X_AXIS,
    GAMEPAD_LOOK_Y_AXIS,
    GAMEPAD_ASCEND_BUTTON,
    GAMEPAD_DESCEND_BUTTON,
)
from .input_surface import InputSurface, GAMEPAD_CONNECTED, GAMEPAD_DISCONNECTED

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GamepadSnapshot:
    """Axis and button state of one gamepad at one instant."""

    index: int
    name: str
    axes: Tuple[float, ...]
    buttons: Tuple[bool, ...]


@dataclass(frozen=True, slots=True)
class GamepadLayout:
    """Which axes and buttons drive the camera."""

    move_x_axis: int = GAMEPAD_MOVE_X_AXIS
    move_z_axis: int = GAMEPAD_MOVE_Z_AXIS
    look_x_axis: int = GAMEPAD_LOOK_X_AXIS
    look_y_axis: int = GAMEPAD_LOOK_Y_AXIS
    ascend_button: int = GAMEPAD_ASCEND_BUTTON
    descend_button: int = GAMEPAD_DESCEND_BUTTON
    dead_zone: float = AXIS_DEAD_ZONE


class GamepadDevice(Protocol):
    """Anything that can report live gamepad state."""

    index: int
    name: str

    def read(self) -> GamepadSnapshot:
        ...


class GamepadRegistry:
    """
    Connected gamepads keyed by device index, in connection order.

    Only the first entry is ever consulted for camera input.
    """

    def __init__(self) -> None:
        self._devices: Dict[int, GamepadDevice] = {}
        self._snapshots: Dict[int, Optional[GamepadSnapshot]] = {}

    def connect(self, device: GamepadDevice) -> None:
        # Re-connecting an index keeps its original position
        self._devices[device.index] = device
        self._snapshots[device.index] = None

    def disconnect(self, index: int) -> Optional[GamepadDevice]:
        self._snapshots.pop(index, None)
        return self._devices.pop(index, None)

    def first(self) -> Optional[GamepadDevice]:
        for device in self._devices.values():
            return device
        return None

    def read_first(self) -> Optional[GamepadSnapshot]:
        """Read live state of the first device and remember it as last-known."""
        device = self.first()
        if device is None:
            return None
        snapshot = device.read()
        self._snapshots[device.index] = snapshot
        return snapshot

    def last_snapshot(self, index: int) -> Optional[GamepadSnapshot]:
        return self._snapshots.get(index)

    def clear(self) -> None:
        self._devices.clear()
        self._snapshots.clear()

    def __contains__(self, index: int) -> bool:
        return index in self._devices

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[GamepadDevice]:
        return iter(list(self._devices.values()))


class PygameGamepad:
    """GamepadDevice backed by a pygame joystick."""

    def __init__(self, joystick: "pygame.joystick.JoystickType") -> None:
        self.joystick = joystick
        self.index = joystick.get_instance_id()
        self.name = joystick.get_name()

    def read(self) -> GamepadSnapshot:
        js = self.joystick
        return GamepadSnapshot(
            index=self.index,
            name=self.name,
            axes=tuple(float(js.get_axis(i)) for i in range(js.get_numaxes())),
            buttons=tuple(bool(js.get_button(i)) for i in range(js.get_numbuttons())),
        )


class PygameGamepadSource:
    """
    Watches pygame's joystick list and reports changes as surface events.

    The window backend pumps pygame events; this only compares the set of
    joysticks with what it has already announced.
    """

    def __init__(self, surface: InputSurface) -> None:
        self.surface = surface
        self.devices: Dict[int, PygameGamepad] = {}
        if not pygame.joystick.get_init():
            pygame.joystick.init()

    def scan(self) -> None:
        present: Dict[int, "pygame.joystick.JoystickType"] = {}
        for device_index in range(pygame.joystick.get_count()):
            joystick = pygame.joystick.Joystick(device_index)
            present[joystick.get_instance_id()] = joystick

        for instance_id in list(self.devices):
            if instance_id not in present:
                device = self.devices.pop(instance_id)
                self.surface.emit(GAMEPAD_DISCONNECTED, device)

        for instance_id, joystick in present.items():
            if instance_id in self.devices:
                continue
            if not joystick.get_init():
                joystick.init()
            device = PygameGamepad(joystick)
            self.devices[instance_id] = device
            self.surface.emit(GAMEPAD_CONNECTED, device)

    def close(self) -> None:
        for device in self.devices.values():
            self.surface.emit(GAMEPAD_DISCONNECTED, device)
        self.devices.clear()
