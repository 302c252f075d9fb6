"""
Input Commands

Defines the viewer's input commands using the Command Pattern.
Commands are abstract actions that can be triggered by any input device.
"""

from enum import Enum, auto
from typing import Dict, NamedTuple, Optional


class InputCommand(Enum):
    """
    All input commands understood by the viewer.

    Commands represent actions, not keys. This allows rebindable controls
    and multiple input sources (keyboard, gamepad).
    """

    # ========================================================================
    # Camera Movement
    # ========================================================================
    MOVE_FORWARD = auto()
    MOVE_BACKWARD = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()

    # ========================================================================
    # Articulated Rig (one positive/negative pair per joint)
    # ========================================================================
    RIG_AXIS_1_POSITIVE = auto()
    RIG_AXIS_1_NEGATIVE = auto()
    RIG_AXIS_2_POSITIVE = auto()
    RIG_AXIS_2_NEGATIVE = auto()
    RIG_AXIS_3_POSITIVE = auto()
    RIG_AXIS_3_NEGATIVE = auto()
    RIG_AXIS_4_POSITIVE = auto()
    RIG_AXIS_4_NEGATIVE = auto()
    RIG_AXIS_5_POSITIVE = auto()
    RIG_AXIS_5_NEGATIVE = auto()
    RIG_AXIS_6_POSITIVE = auto()
    RIG_AXIS_6_NEGATIVE = auto()

    # ========================================================================
    # System Commands
    # ========================================================================
    TOGGLE_CONTROL_MODE = auto()
    RELEASE_POINTER = auto()


class MovementAxis(Enum):
    """Camera-local movement axes."""

    X = "x"
    Y = "y"
    Z = "z"


class AxisIntent(NamedTuple):
    """A discrete contribution to one movement axis."""

    axis: MovementAxis
    value: float


# Forward is local -Z (the camera looks down -Z)
MOVEMENT_INTENTS: Dict[InputCommand, AxisIntent] = {
    InputCommand.MOVE_FORWARD: AxisIntent(MovementAxis.Z, -1.0),
    InputCommand.MOVE_BACKWARD: AxisIntent(MovementAxis.Z, 1.0),
    InputCommand.MOVE_LEFT: AxisIntent(MovementAxis.X, -1.0),
    InputCommand.MOVE_RIGHT: AxisIntent(MovementAxis.X, 1.0),
    InputCommand.MOVE_DOWN: AxisIntent(MovementAxis.Y, -1.0),
    InputCommand.MOVE_UP: AxisIntent(MovementAxis.Y, 1.0),
}


class RigIntent(NamedTuple):
    """A discrete contribution to one rig joint (0-based joint index)."""

    joint: int
    value: float


RIG_INTENTS: Dict[InputCommand, RigIntent] = {
    InputCommand.RIG_AXIS_1_POSITIVE: RigIntent(0, 1.0),
    InputCommand.RIG_AXIS_1_NEGATIVE: RigIntent(0, -1.0),
    InputCommand.RIG_AXIS_2_POSITIVE: RigIntent(1, 1.0),
    InputCommand.RIG_AXIS_2_NEGATIVE: RigIntent(1, -1.0),
    InputCommand.RIG_AXIS_3_POSITIVE: RigIntent(2, 1.0),
    InputCommand.RIG_AXIS_3_NEGATIVE: RigIntent(2, -1.0),
    InputCommand.RIG_AXIS_4_POSITIVE: RigIntent(3, 1.0),
    InputCommand.RIG_AXIS_4_NEGATIVE: RigIntent(3, -1.0),
    InputCommand.RIG_AXIS_5_POSITIVE: RigIntent(4, 1.0),
    InputCommand.RIG_AXIS_5_NEGATIVE: RigIntent(4, -1.0),
    InputCommand.RIG_AXIS_6_POSITIVE: RigIntent(5, 1.0),
    InputCommand.RIG_AXIS_6_NEGATIVE: RigIntent(5, -1.0),
}


def get_movement_intent(command: Optional[InputCommand]) -> Optional[AxisIntent]:
    """Movement axis and sign for a command, or None for non-movement commands."""
    if command is None:
        return None
    return MOVEMENT_INTENTS.get(command)


def get_rig_intent(command: Optional[InputCommand]) -> Optional[RigIntent]:
    if command is None:
        return None
    return RIG_INTENTS.get(command)
