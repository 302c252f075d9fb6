"""Rig Pose Controller: keyboard-driven joint rotation for an articulated rig."""

from __future__ import annotations

import logging
from typing import List, Optional

from ...config.settings import RIG_JOINT_NAMES, RIG_JOINT_SPEED
from ...core.rig import ArticulatedRig
from ...core.transforms import quaternion_from_axis_angle
from ..input_commands import get_rig_intent
from ..input_surface import InputSurface, Subscription, KEY_DOWN, KEY_UP
from ..key_bindings import KeyBindings

logger = logging.getLogger(__name__)


class RigPoseController:
    """Rotates rig joints while their keys are held."""

    def __init__(
        self,
        surface: InputSurface,
        key_bindings: KeyBindings,
        rig: Optional[ArticulatedRig] = None,
        joint_names=RIG_JOINT_NAMES,
        joint_speed: float = RIG_JOINT_SPEED,
    ) -> None:
        self.key_bindings = key_bindings
        self.joint_names = tuple(joint_names)
        self.joint_speed = joint_speed
        self.axis_intents: List[float] = [0.0] * len(self.joint_names)
        self.rig: Optional[ArticulatedRig] = None
        self.set_rig(rig)

        self._subscriptions: List[Subscription] = [
            surface.add_listener(KEY_DOWN, self.on_key_down),
            surface.add_listener(KEY_UP, self.on_key_up),
        ]

    def set_rig(self, rig: Optional[ArticulatedRig]) -> None:
        self.rig = rig
        if rig is not None:
            missing = [name for name in self.joint_names if rig.get(name) is None]
            if missing:
                logger.warning("Rig has no joint(s) %s, they will not move", ", ".join(missing))

    def on_key_down(self, key: int) -> None:
        intent = get_rig_intent(self.key_bindings.get_command(key))
        if intent is None or intent.joint >= len(self.axis_intents):
            return
        self.axis_intents[intent.joint] = intent.value

    def on_key_up(self, key: int) -> None:
        intent = get_rig_intent(self.key_bindings.get_command(key))
        if intent is None or intent.joint >= len(self.axis_intents):
            return
        self.axis_intents[intent.joint] = 0.0

    def update(self, delta_time: float) -> None:
        """Rotate each joint by intent * joint_speed * delta_time radians."""
        if self.rig is None:
            return

        for name, intent in zip(self.joint_names, self.axis_intents):
            if intent == 0.0:
                continue
            joint = self.rig.get(name)
            if joint is None:
                continue
            angle = intent * self.joint_speed * delta_time
            joint.apply_quaternion(quaternion_from_axis_angle(joint.axis, angle))

    def dispose(self) -> None:
        for subscription in self._subscriptions:
            subscription.remove()
        self._subscriptions.clear()
