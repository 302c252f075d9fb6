"""
Viewer Configuration Settings

All configuration constants for the viewer and its camera controls.
Modify these values to change default behavior.
"""

import math
from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
KEY_BINDINGS_PATH = PROJECT_ROOT / "keybindings.json"

# ============================================================================
# Window Configuration
# ============================================================================

WINDOW_SIZE = (1280, 720)  # Width, Height
ASPECT_RATIO = 16 / 9
WINDOW_TITLE = "fpview"
RESIZABLE = True
WINDOW_BACKEND = "pygame2"  # pygame window so joystick state keeps pumping

# OpenGL version (the demo shader only needs 3.3 core)
GL_VERSION = (3, 3)

# ============================================================================
# Camera Settings
# ============================================================================

DEFAULT_FOV = 75.0             # Degrees
NEAR_PLANE = 0.1
FAR_PLANE = 2000.0
CAMERA_START_POSITION = (0.0, 0.0, 30.0)
WORLD_UP = (0.0, 1.0, 0.0)

# ============================================================================
# First-Person Controller Defaults
# ============================================================================

MOVEMENT_SPEED = 1.0           # Units per second at full intent
MOUSE_LOOK_SPEED = 0.005       # Degrees per pixel per second
CONTROLLER_LOOK_SPEED = 1.0    # Multiplier on top of the mouse look speed

# Latitude limits in degrees (keeps the look point off the poles)
MIN_LATITUDE = -85.0
MAX_LATITUDE = 85.0

# Height-based speed ramp
HEIGHT_SPEED = False
HEIGHT_COEFFICIENT = 1.0
HEIGHT_MIN = 0.0
HEIGHT_MAX = 1.0

AUTO_FORWARD = False
ACTIVE_LOOK = True
LOOK_VERTICAL = True
USE_CONTROLLER = True

# Pitch band remap (radians)
CONSTRAIN_VERTICAL = False
VERTICAL_MIN = 0.0
VERTICAL_MAX = math.pi

# Values the demo viewer applies on top of the defaults
VIEWER_MOVEMENT_SPEED = 10.0
VIEWER_MOUSE_LOOK_SPEED = 5.0
VIEWER_CONTROLLER_LOOK_SPEED = 50.0

# ============================================================================
# Gamepad Settings
# ============================================================================

AXIS_DEAD_ZONE = 0.05          # Readings below this magnitude count as zero
GAMEPAD_MOVE_X_AXIS = 0        # Left stick horizontal
GAMEPAD_MOVE_Z_AXIS = 1        # Left stick vertical
GAMEPAD_LOOK_X_AXIS = 3        # Right stick horizontal
GAMEPAD_LOOK_Y_AXIS = 4        # Right stick vertical
GAMEPAD_ASCEND_BUTTON = 0      # A / cross
GAMEPAD_DESCEND_BUTTON = 10    # Right stick press

# Ease-in/ease-out curve for analog look (cubic bezier control points)
CONTROLLER_LOOK_CURVE_POINTS = (0.33, 0.0, 1.0, 0.66)

# ============================================================================
# Articulated Rig
# ============================================================================

RIG_JOINT_SPEED = 1.2          # Radians per second at full intent
RIG_JOINT_NAMES = ("base", "arm1", "arm2", "arm3", "arm4", "arm5")
RIG_JOINT_AXES = ("z", "x", "z", "y", "z", "y")
RIG_SEGMENT_LENGTH = 2.0
RIG_POSITION = (0.0, -5.0, 0.0)

# ============================================================================
# Overlay / Debug
# ============================================================================

OVERLAY_CLICK_PROMPT = "Click to control..."
STATS_PANEL_ENABLED = True
STATS_FRAME_SAMPLES = 60       # Average frame time over this many frames
STATS_REFRESH_INTERVAL = 0.5   # Seconds between panel refreshes

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
