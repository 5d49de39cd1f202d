import math

import numpy as np
import pytest

from quatjulia.vecmath import length, normalize, quat_from_axis_angle, rotate_by_quat, vec3, wrap_unit


def test_quarter_turn_about_z():
    q = quat_from_axis_angle(vec3(0, 0, 1), math.pi / 2)
    assert rotate_by_quat(vec3(1, 0, 0), q) == pytest.approx([0, 1, 0], abs=1e-12)
    assert rotate_by_quat(vec3(0, 1, 0), q) == pytest.approx([-1, 0, 0], abs=1e-12)


def test_rotation_preserves_length():
    q = quat_from_axis_angle(normalize(vec3(1, 2, 3)), 0.7)
    v = vec3(0.3, -1.2, 2.0)
    assert length(rotate_by_quat(v, q)) == pytest.approx(length(v))


def test_zero_angle_is_identity():
    q = quat_from_axis_angle(vec3(0, 1, 0), 0.0)
    v = vec3(0.1, 0.2, 0.3)
    assert np.array_equal(rotate_by_quat(v, q), v)


def test_normalize_zero_vector():
    assert np.array_equal(normalize(vec3(0, 0, 0)), np.zeros(3))


@pytest.mark.parametrize("value, expected", [
    (0.25, 0.25),
    (1.25, 0.25),
    (-0.25, 0.75),
    (1.0, 0.0),
    (-1e-20, 0.0),
])
def test_wrap_unit(value, expected):
    assert wrap_unit(value) == pytest.approx(expected)
    assert 0.0 <= wrap_unit(value) < 1.0
