"""
Orientation Controller

First-person camera control. Each update integrates the current movement
and look intents into a camera translation and a latitude/longitude look
direction, then points the camera one unit along that direction.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from pyrr import Vector3

from ...config.settings import MIN_LATITUDE, MAX_LATITUDE
from ...core.camera import Camera
from ...core.spherical import clamp, map_linear, spherical_to_vector, vector_to_spherical
from ..controller_state import ControllerState
from ..gamepad import GamepadLayout
from ..input_aggregator import InputAggregator
from ..input_surface import InputSurface
from ..key_bindings import KeyBindings
from ..response_curves import CONTROLLER_LOOK_CURVE, CubicBezier, ease_signed

logger = logging.getLogger(__name__)

# Options accepted by configure(); each is a ControllerState field
CONFIG_OPTIONS = frozenset({
    "enabled",
    "movement_speed",
    "mouse_look_speed",
    "controller_look_speed",
    "height_speed",
    "height_coefficient",
    "height_min",
    "height_max",
    "auto_forward",
    "active_look",
    "look_vertical",
    "use_controller",
    "constrain_vertical",
    "vertical_min",
    "vertical_max",
})


class OrientationController:
    """
    Moves and aims a camera from keyboard, mouse and gamepad input.

    The look direction is kept as latitude/longitude in degrees rather than
    re-derived from the camera every frame. Mouse motion is consumed exactly
    once: it is cleared at the end of every enabled update.

    Usage:
        controller = OrientationController(camera, surface, key_bindings, movement_speed=10.0)
        controller.update(frametime)      # once per frame while enabled
        controller.dispose()              # on session end
    """

    def __init__(
        self,
        camera: Camera,
        surface: InputSurface,
        key_bindings: KeyBindings,
        layout: Optional[GamepadLayout] = None,
        look_curve: CubicBezier = CONTROLLER_LOOK_CURVE,
        **options,
    ) -> None:
        """
        Initialize the controller and bind it to camera and surface.

        Args:
            camera: Camera this controller drives
            surface: Input surface to subscribe to
            key_bindings: Key → command table
            layout: Gamepad axis/button assignment
            look_curve: Response curve for gamepad look axes
            **options: Initial configuration, see configure()
        """
        self.camera = camera
        self.state = ControllerState()
        self.look_curve = look_curve
        self.aggregator = InputAggregator(surface, self.state, key_bindings, layout)

        if options:
            self.configure(**options)

        self._set_orientation_from_camera()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def enabled(self) -> bool:
        return self.state.enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.state.enabled = bool(value)

    @property
    def latitude(self) -> float:
        return self.state.latitude

    @property
    def longitude(self) -> float:
        return self.state.longitude

    def configure(self, **options) -> None:
        """
        Set controller options.

        Recognized options: enabled, movement_speed, mouse_look_speed,
        controller_look_speed, height_speed, height_coefficient, height_min,
        height_max, auto_forward, active_look, look_vertical, use_controller,
        constrain_vertical, vertical_min, vertical_max (radians).

        Raises:
            ValueError: Unknown option, or an inverted height/vertical range.
                Nothing is changed when this is raised.
        """
        unknown = set(options) - CONFIG_OPTIONS
        if unknown:
            raise ValueError(f"Unknown controller option(s): {', '.join(sorted(unknown))}")

        state = self.state
        height_min = options.get("height_min", state.height_min)
        height_max = options.get("height_max", state.height_max)
        if height_max < height_min:
            raise ValueError(f"height_max ({height_max}) must not be below height_min ({height_min})")

        vertical_min = options.get("vertical_min", state.vertical_min)
        vertical_max = options.get("vertical_max", state.vertical_max)
        if vertical_max <= vertical_min:
            raise ValueError(f"vertical_max ({vertical_max}) must be above vertical_min ({vertical_min})")

        for name, value in options.items():
            setattr(state, name, value)

    # ------------------------------------------------------------------
    # Frame update
    # ------------------------------------------------------------------
    def update(self, delta_time: float) -> None:
        """
        Advance the controller by one frame.

        Args:
            delta_time: Seconds since the previous frame
        """
        state = self.state
        if not state.enabled:
            return

        self._merge_gamepad_input()

        camera = self.camera
        intent = state.movement_intent
        look = state.look_intent

        # Height-based speed ramp
        if state.height_speed:
            y = clamp(float(camera.position.y), state.height_min, state.height_max)
            state.auto_speed_factor = delta_time * (y - state.height_min) * state.height_coefficient
        else:
            state.auto_speed_factor = 0.0

        # Translation
        actual_move_speed = delta_time * state.movement_speed

        z_intent = intent.z
        if z_intent == 0.0 and state.auto_forward:
            z_intent = -1.0
        if abs(z_intent) > 0:
            camera.translate_z((actual_move_speed + state.auto_speed_factor) * z_intent)
        if abs(intent.x) > 0:
            camera.translate_x(actual_move_speed * intent.x)
        if abs(intent.y) > 0:
            camera.translate_y(actual_move_speed * intent.y)

        # Look
        actual_look_speed = delta_time * state.mouse_look_speed
        if not state.active_look:
            actual_look_speed = 0.0

        vertical_look_ratio = 1.0
        if state.constrain_vertical:
            vertical_look_ratio = math.pi / (state.vertical_max - state.vertical_min)

        # Mouse origin is top-left, so motion is subtracted
        state.longitude -= look.mouse_x * actual_look_speed
        state.longitude += look.pad_x * actual_look_speed * state.controller_look_speed

        if state.look_vertical:
            state.latitude -= look.mouse_y * actual_look_speed * vertical_look_ratio
            state.latitude += look.pad_y * actual_look_speed * vertical_look_ratio * state.controller_look_speed

        state.latitude = clamp(state.latitude, MIN_LATITUDE, MAX_LATITUDE)
        self._aim_camera()

        # Mouse motion is consumed even if active_look suppressed it
        look.clear_mouse()

    def _aim_camera(self) -> None:
        """Point the camera along the current latitude/longitude."""
        state = self.state
        phi = math.radians(90.0 - state.latitude)
        theta = math.radians(state.longitude)
        if state.constrain_vertical:
            phi = map_linear(phi, 0.0, math.pi, state.vertical_min, state.vertical_max)

        target = self.camera.position + spherical_to_vector(1.0, phi, theta)
        self.camera.look_at(target)

    def _merge_gamepad_input(self) -> None:
        aggregator = self.aggregator
        poll = aggregator.poll_first_gamepad() if self.state.use_controller else None
        if poll is None:
            # A pad that was not read this frame contributes nothing
            aggregator.release_gamepad_input()
            return

        # Gamepad overrides keyboard movement on frames it is present
        intent = self.state.movement_intent
        intent.x = poll.move_x
        intent.y = poll.move_y
        intent.z = poll.move_z
        aggregator.gamepad_driving = True

        # Inverted so pushing the stick right/up turns right/up
        look = self.state.look_intent
        look.pad_x = -ease_signed(poll.look_x, self.look_curve)
        look.pad_y = -ease_signed(poll.look_y, self.look_curve)

    # ------------------------------------------------------------------
    # Explicit orientation
    # ------------------------------------------------------------------
    def look_at(self, target: Vector3) -> None:
        """
        Turn the camera to face target and continue from that orientation.

        A target at the camera position is ignored.
        """
        if not self.camera.look_at(target):
            return
        self._set_orientation_from_camera()

    def look_at_xyz(self, x: float, y: float, z: float) -> None:
        self.look_at(Vector3([x, y, z]))

    def _set_orientation_from_camera(self) -> None:
        radius, phi, theta = vector_to_spherical(self.camera.get_forward())
        if radius == 0.0:
            logger.debug("Camera has no usable look direction, keeping latitude/longitude")
            return

        state = self.state
        if state.constrain_vertical:
            # Undo the pitch-band remap applied in update()
            phi = map_linear(phi, state.vertical_min, state.vertical_max, 0.0, math.pi)

        latitude = 90.0 - math.degrees(phi)
        state.longitude = math.degrees(theta)
        state.latitude = clamp(latitude, MIN_LATITUDE, MAX_LATITUDE)
        if state.latitude != latitude:
            # Targets near the poles are pulled back into the latitude band
            self._aim_camera()

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def dispose(self) -> None:
        """Release every input subscription. Safe to call more than once."""
        self.aggregator.dispose()

    def __enter__(self) -> "OrientationController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()
