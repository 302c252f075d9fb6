"""Tests for rotation helpers"""

import math

import numpy as np
import pytest
from pyrr import Quaternion, Vector3

from src.fpview.core.transforms import (
    axis_vector,
    look_rotation,
    normalise_quaternion,
    quaternion_from_axis_angle,
)


def test_axis_angle_rotation_is_right_handed():
    """Test a quarter turn about Y takes +X to -Z"""
    quat = quaternion_from_axis_angle("y", math.pi / 2)
    assert np.allclose(np.asarray(quat * Vector3([1.0, 0.0, 0.0])), [0.0, 0.0, -1.0])


def test_axis_angle_normalises_axis():
    """Test non-unit axes give the same rotation"""
    a = quaternion_from_axis_angle((0.0, 0.0, 5.0), 0.7)
    b = quaternion_from_axis_angle("z", 0.7)
    assert np.allclose(np.asarray(a), np.asarray(b))


def test_axis_angle_zero_axis_is_identity():
    """Test a zero axis gives no rotation"""
    quat = quaternion_from_axis_angle((0.0, 0.0, 0.0), 1.0)
    assert np.allclose(np.asarray(quat), [0.0, 0.0, 0.0, 1.0])


def test_axis_vector_lookup():
    """Test named axes and explicit vectors are both accepted"""
    assert np.allclose(np.asarray(axis_vector("z")), [0.0, 0.0, 1.0])
    assert np.allclose(np.asarray(axis_vector((1.0, 2.0, 3.0))), [1.0, 2.0, 3.0])
    with pytest.raises(KeyError):
        axis_vector("w")


def test_product_applies_right_operand_first():
    """Test a * b rotates by b, then by a"""
    a = quaternion_from_axis_angle("x", math.pi / 2)
    b = quaternion_from_axis_angle("z", math.pi / 2)
    point = Vector3([1.0, 0.0, 0.0])

    combined = (a * b) * point
    sequential = a * (b * point)
    assert np.allclose(np.asarray(combined), np.asarray(sequential))
    assert np.allclose(np.asarray(combined), [0.0, 0.0, 1.0])


def test_normalise_quaternion():
    """Test normalisation, with a degenerate quaternion falling back to identity"""
    assert np.allclose(np.asarray(normalise_quaternion([0.0, 0.0, 0.0, 0.0])), [0.0, 0.0, 0.0, 1.0])
    assert np.allclose(np.asarray(normalise_quaternion([0.0, 0.0, 0.0, 2.0])), [0.0, 0.0, 0.0, 1.0])


@pytest.mark.parametrize("direction", [
    (0.0, 0.0, -1.0),
    (1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0),
    (3.0, -1.0, 2.0),
    (-0.5, 4.0, 0.1),
])
def test_look_rotation_points_forward(direction):
    """Test local -Z ends up along the direction with local X horizontal"""
    quat = look_rotation(direction)
    expected = np.asarray(direction) / np.linalg.norm(direction)

    forward = np.asarray(quat * Vector3([0.0, 0.0, -1.0]))
    right = np.asarray(quat * Vector3([1.0, 0.0, 0.0]))
    assert np.allclose(forward, expected)
    assert abs(right[1]) < 1e-9


def test_look_rotation_straight_up():
    """Test looking along +Y keeps zero yaw"""
    quat = look_rotation((0.0, 2.0, 0.0))

    assert np.allclose(np.asarray(quat * Vector3([0.0, 0.0, -1.0])), [0.0, 1.0, 0.0])
    assert np.allclose(np.asarray(quat * Vector3([1.0, 0.0, 0.0])), [1.0, 0.0, 0.0])
    assert isinstance(quat, Quaternion)
