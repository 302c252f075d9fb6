"""Per-session state of the first-person controller."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from ..config.settings import (
    MOVEMENT_SPEED,
    MOUSE_LOOK_SPEED,
    CONTROLLER_LOOK_SPEED,
    HEIGHT_SPEED,
    HEIGHT_COEFFICIENT,
    HEIGHT_MIN,
    HEIGHT_MAX,
    AUTO_FORWARD,
    ACTIVE_LOOK,
    LOOK_VERTICAL,
    CONSTRAIN_VERTICAL,
    VERTICAL_MIN,
    VERTICAL_MAX,
    USE_CONTROLLER,
)
from .input_commands import MovementAxis


@dataclass(slots=True)
class MovementIntent:
    """Signed per-axis movement in [-1, 1], in camera-local space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def get(self, axis: MovementAxis) -> float:
        return getattr(self, axis.value)

    def set(self, axis: MovementAxis, value: float) -> None:
        setattr(self, axis.value, float(value))

    def reset(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.z = 0.0


@dataclass(slots=True)
class LookIntent:
    """
    Look input for the current frame.

    mouse_x/mouse_y are one-shot (cleared after every update);
    pad_x/pad_y are re-sampled from the stick every frame.
    """

    mouse_x: float = 0.0
    mouse_y: float = 0.0
    pad_x: float = 0.0
    pad_y: float = 0.0

    def clear_mouse(self) -> None:
        self.mouse_x = 0.0
        self.mouse_y = 0.0

    def clear_pad(self) -> None:
        self.pad_x = 0.0
        self.pad_y = 0.0


@dataclass(slots=True)
class ControllerState:
    """Everything the first-person controller reads and integrates."""

    enabled: bool = True

    # Degrees; latitude is clamped, longitude wraps through trig
    latitude: float = 0.0
    longitude: float = 0.0

    movement_intent: MovementIntent = field(default_factory=MovementIntent)
    look_intent: LookIntent = field(default_factory=LookIntent)
    auto_speed_factor: float = 0.0

    movement_speed: float = MOVEMENT_SPEED
    mouse_look_speed: float = MOUSE_LOOK_SPEED
    controller_look_speed: float = CONTROLLER_LOOK_SPEED

    height_speed: bool = HEIGHT_SPEED
    height_coefficient: float = HEIGHT_COEFFICIENT
    height_min: float = HEIGHT_MIN
    height_max: float = HEIGHT_MAX

    auto_forward: bool = AUTO_FORWARD
    active_look: bool = ACTIVE_LOOK
    look_vertical: bool = LOOK_VERTICAL
    use_controller: bool = USE_CONTROLLER

    constrain_vertical: bool = CONSTRAIN_VERTICAL
    vertical_min: float = VERTICAL_MIN
    vertical_max: float = VERTICAL_MAX

    def snapshot(self) -> "ControllerState":
        """Independent copy, comparable with ==."""
        return copy.deepcopy(self)
