"""
Input System

Collects keyboard, mouse and gamepad input into normalized intents and
drives the camera and rig controllers from them.
"""

from .controller_state import ControllerState, LookIntent, MovementIntent
from .gamepad import GamepadLayout, GamepadRegistry, GamepadSnapshot, PygameGamepadSource
from .input_aggregator import GamepadPoll, InputAggregator
from .input_commands import InputCommand, MovementAxis
from .input_surface import InputSurface, Subscription
from .key_bindings import KeyBindings
from .response_curves import CubicBezier, apply_dead_zone, ease_signed
from .controllers import OrientationController, RigPoseController

__all__ = [
    "ControllerState",
    "LookIntent",
    "MovementIntent",
    "GamepadLayout",
    "GamepadRegistry",
    "GamepadSnapshot",
    "PygameGamepadSource",
    "GamepadPoll",
    "InputAggregator",
    "InputCommand",
    "MovementAxis",
    "InputSurface",
    "Subscription",
    "KeyBindings",
    "CubicBezier",
    "apply_dead_zone",
    "ease_signed",
    "OrientationController",
    "RigPoseController",
]
