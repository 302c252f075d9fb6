"""Shared fixtures: fake key table, fake gamepads and a wired-up controller"""

import pytest
from moderngl_window.context.base.keys import BaseKeys
from pyrr import Vector3

from src.fpview.core.camera import Camera
from src.fpview.input.controllers import OrientationController
from src.fpview.input.gamepad import GamepadSnapshot
from src.fpview.input.input_surface import InputSurface
from src.fpview.input.key_bindings import KeyBindings


class FakeKeys(BaseKeys):
    """Key table with fixed integer codes, no window backend needed"""

    W = 87
    A = 65
    S = 83
    D = 68
    UP = 1001
    DOWN = 1002
    LEFT = 1003
    RIGHT = 1004
    SPACE = 32
    LEFT_SHIFT = 1005
    T = 84
    G = 71
    Y = 89
    H = 72
    U = 85
    J = 74
    I = 73
    K = 75
    O = 79
    L = 76
    P = 80
    SEMICOLON = 59
    Q = 81
    ESCAPE = 256


class FakeGamepad:
    """GamepadDevice returning whatever axes/buttons the test sets"""

    def __init__(self, index=0, name="Fake Pad", axes=None, buttons=None):
        self.index = index
        self.name = name
        self.axes = list(axes) if axes is not None else [0.0] * 6
        self.buttons = list(buttons) if buttons is not None else [False] * 12
        self.error = None
        self.reads = 0

    def read(self):
        self.reads += 1
        if self.error is not None:
            raise self.error
        return GamepadSnapshot(self.index, self.name, tuple(self.axes), tuple(self.buttons))


@pytest.fixture
def keys():
    return FakeKeys


@pytest.fixture
def key_bindings(tmp_path):
    return KeyBindings(FakeKeys, config_path=tmp_path / "keybindings.json", load=False)


@pytest.fixture
def lock_calls():
    """Records every call the surface makes to the pointer-capture handler"""
    return []


@pytest.fixture
def surface(lock_calls):
    surface = InputSurface()
    surface.attach(lock_calls.append)
    return surface


@pytest.fixture
def make_gamepad():
    def _make(**kwargs):
        return FakeGamepad(**kwargs)
    return _make


@pytest.fixture
def camera():
    """Camera at the origin looking down -Z"""
    return Camera(Vector3([0.0, 0.0, 0.0]))


@pytest.fixture
def controller(camera, surface, key_bindings):
    controller = OrientationController(camera, surface, key_bindings)
    yield controller
    controller.dispose()
