#!/usr/bin/env python3
"""
fpview - Main Entry Point

Renders a grid of cubes and an articulated arm, and flies a first-person
camera through them with keyboard, mouse and gamepad.

Controls:
    Q               Toggle first-person control
    Click           Capture the pointer (first-person mode)
    Escape          Release the pointer
    WASD / arrows   Move, Space / Left Shift to rise / sink
    T/G Y/H U/J I/K O/L P/;   Pose the arm joints
"""

import logging
import sys

import moderngl
import moderngl_window as mglw
from moderngl_window import geometry
from pyrr import Matrix44, Vector3

from src.fpview.config.settings import (
    WINDOW_SIZE, ASPECT_RATIO, GL_VERSION, WINDOW_TITLE, RESIZABLE, WINDOW_BACKEND,
    CAMERA_START_POSITION,
    VIEWER_MOVEMENT_SPEED, VIEWER_MOUSE_LOOK_SPEED, VIEWER_CONTROLLER_LOOK_SPEED,
    RIG_SEGMENT_LENGTH,
    OVERLAY_CLICK_PROMPT, STATS_PANEL_ENABLED,
    LOG_LEVEL, LOG_FORMAT,
)
from src.fpview.core.camera import Camera
from src.fpview.core.rig import ArticulatedRig
from src.fpview.input.gamepad import PygameGamepadSource
from src.fpview.input.input_commands import InputCommand
from src.fpview.input.input_surface import (
    InputSurface,
    CONTEXT_MENU,
    MOUSE_MOVE,
    MOUSE_DOWN,
    MOUSE_UP,
    KEY_DOWN,
    KEY_UP,
    POINTER_LOCK_CHANGE,
)
from src.fpview.input.key_bindings import KeyBindings
from src.fpview.input.controllers import OrientationController, RigPoseController
from src.fpview.debug import StatsPanel
from src.fpview.ui import ControlOverlay


logger = logging.getLogger(__name__)

RIGHT_MOUSE_BUTTON = 2

VERTEX_SHADER = """
#version 330

in vec3 in_position;
in vec3 in_normal;

uniform mat4 m_proj;
uniform mat4 m_view;
uniform mat4 m_model;

out vec3 v_normal;

void main() {
    v_normal = mat3(m_model) * in_normal;
    gl_Position = m_proj * m_view * m_model * vec4(in_position, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330

in vec3 v_normal;

uniform vec3 color;
uniform vec3 light_dir;

out vec4 f_color;

void main() {
    float diffuse = max(dot(normalize(v_normal), -light_dir), 0.0);
    f_color = vec4(color * (0.25 + 0.75 * diffuse), 1.0);
}
"""


class FirstPersonViewer(mglw.WindowConfig):
    """Viewer window hosting the first-person and rig controllers"""

    gl_version = GL_VERSION
    title = WINDOW_TITLE
    window_size = WINDOW_SIZE
    aspect_ratio = ASPECT_RATIO
    resizable = RESIZABLE

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        # Enable core GL states
        self.ctx.enable(moderngl.DEPTH_TEST)
        self.ctx.enable(moderngl.CULL_FACE)

        self.program = self.ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
        self.program['light_dir'].value = tuple(Vector3([-0.4, -1.0, -0.3]).normalized)
        self.cube = geometry.cube(size=(1.0, 1.0, 1.0))
        self.segment = geometry.cube(
            size=(0.4, RIG_SEGMENT_LENGTH, 0.4),
            center=(0.0, RIG_SEGMENT_LENGTH / 2.0, 0.0),
        )
        self.cube_positions = [
            Vector3([x * 4.0, -8.0, z * 4.0])
            for x in range(-8, 9)
            for z in range(-8, 9)
        ]

        self.camera = Camera(position=Vector3(CAMERA_START_POSITION))
        self.rig = ArticulatedRig.default_arm()

        # Input: window events → surface → controllers
        self.surface = InputSurface()
        self.surface.attach(self._set_pointer_capture)
        self.key_bindings = KeyBindings(self.wnd.keys)

        self.fp_controller = OrientationController(
            self.camera,
            self.surface,
            self.key_bindings,
            movement_speed=VIEWER_MOVEMENT_SPEED,
            mouse_look_speed=VIEWER_MOUSE_LOOK_SPEED,
            controller_look_speed=VIEWER_CONTROLLER_LOOK_SPEED,
        )
        self.fp_controller.look_at(Vector3([0.0, 0.0, 0.0]))
        self.rig_controller = RigPoseController(self.surface, self.key_bindings, rig=self.rig)
        self.gamepad_source = PygameGamepadSource(self.surface)

        self._lock_subscription = self.surface.add_listener(POINTER_LOCK_CHANGE, self._on_pointer_lock_change)

        # Escape releases the pointer, so it must not close the window
        self.wnd.exit_key = None
        self.wnd.mouse_exclusivity = False
        self.wnd.cursor = True

        self.overlay = ControlOverlay()
        self.overlay.attach(self.wnd)
        self.overlay.show(OVERLAY_CLICK_PROMPT)

        # Optional stats panel
        self.stats_panel = None
        if STATS_PANEL_ENABLED:
            try:
                self.stats_panel = StatsPanel()
            except Exception as exc:
                logger.error("Stats panel disabled: %s", exc)

    # ------------------------------------------------------------------
    # Control mode
    # ------------------------------------------------------------------
    def _set_pointer_capture(self, locked: bool):
        self.wnd.mouse_exclusivity = locked
        self.wnd.cursor = not locked

    def _on_pointer_lock_change(self, locked: bool):
        if locked:
            self.overlay.hide()
        elif self.fp_controller.enabled:
            self.overlay.show(OVERLAY_CLICK_PROMPT)

    def toggle_control_mode(self):
        """Switch the first-person controller on or off."""
        enabled = not self.fp_controller.enabled
        self.fp_controller.enabled = enabled
        logger.info("First-person control %s", "enabled" if enabled else "disabled")

        if enabled:
            self.overlay.show(OVERLAY_CLICK_PROMPT)
        else:
            self.surface.exit_pointer_lock()
            self.overlay.hide()

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------
    def on_render(self, time, frametime):
        """
        Render a frame.

        Args:
            time: Total elapsed time (seconds)
            frametime: Time since last frame (seconds)
        """
        self.gamepad_source.scan()

        # Only one controller may write the camera; in free mode nothing does
        if self.fp_controller.enabled:
            self.fp_controller.update(frametime)
        self.rig_controller.update(frametime)

        if self.stats_panel is not None:
            if self.stats_panel.update(frametime, self.camera, self.fp_controller):
                self.overlay.set_status(self.stats_panel.lines[0])
                logger.debug(" | ".join(self.stats_panel.lines))

        self.ctx.clear(0.08, 0.09, 0.12)

        projection = self.camera.get_projection_matrix(self.wnd.aspect_ratio)
        self.program['m_proj'].write(projection.astype('f4').tobytes())
        self.program['m_view'].write(self.camera.get_view_matrix().astype('f4').tobytes())

        self.program['color'].value = (0.45, 0.55, 0.65)
        for position in self.cube_positions:
            model = Matrix44.from_translation(position)
            self.program['m_model'].write(model.astype('f4').tobytes())
            self.cube.render(self.program)

        self.program['color'].value = (0.9, 0.55, 0.2)
        for joint in self.rig:
            self.program['m_model'].write(joint.world_matrix().astype('f4').tobytes())
            self.segment.render(self.program)

    # ------------------------------------------------------------------
    # Window events
    # ------------------------------------------------------------------
    def on_key_event(self, key, action, modifiers):
        """
        Handle keyboard events.

        Args:
            key: Key code
            action: Action (press, release, repeat)
            modifiers: Modifier keys (shift, ctrl, etc.)
        """
        keys = self.wnd.keys

        if action == keys.ACTION_PRESS:
            command = self.key_bindings.get_command(key)
            if command == InputCommand.TOGGLE_CONTROL_MODE:
                self.toggle_control_mode()
                return
            if command == InputCommand.RELEASE_POINTER:
                self.surface.exit_pointer_lock()
                return
            self.surface.emit(KEY_DOWN, key)

        elif action == keys.ACTION_RELEASE:
            self.surface.emit(KEY_UP, key)

    def on_mouse_position_event(self, _x: int, _y: int, dx: int, dy: int):
        if self.fp_controller.enabled:
            self.surface.emit(MOUSE_MOVE, dx, dy)

    def on_mouse_drag_event(self, _x: int, _y: int, dx: int, dy: int):
        if self.fp_controller.enabled:
            self.surface.emit(MOUSE_MOVE, dx, dy)

    def on_mouse_press_event(self, x: int, y: int, button: int):
        if not self.fp_controller.enabled:
            return
        if button == RIGHT_MOUSE_BUTTON:
            self.surface.emit(CONTEXT_MENU)
        self.surface.emit(MOUSE_DOWN, button)

    def on_mouse_release_event(self, x: int, y: int, button: int):
        if self.fp_controller.enabled:
            self.surface.emit(MOUSE_UP, button)

    def on_close(self):
        self.gamepad_source.close()
        self._lock_subscription.remove()
        self.rig_controller.dispose()
        self.fp_controller.dispose()
        self.surface.detach()


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    args = sys.argv[1:]
    if "--window" not in args and "-wnd" not in args:
        args = ["--window", WINDOW_BACKEND, *args]
    mglw.run_window_config(FirstPersonViewer, args=args)


if __name__ == '__main__':
    main()
