import pytest

from quatjulia.config import JULIA_SLIDER_MAX
from quatjulia.params import ParameterModel


def test_defaults(params):
    assert params.resolution_scale == 1.0
    assert params.iterations == 33
    assert list(params.julia) == pytest.approx([0.75, 0.25, 0.5])
    assert params.alt_color == 0
    assert params.alt_color_intensity == 9
    assert params.sphere_shrink == 1.0
    assert params.rotation_rate == pytest.approx(1 / 2000)


@pytest.mark.parametrize("knob, rate", [(0, 0.0), (1, 1 / 2000), (2, 8 / 2000), (5, 125 / 2000)])
def test_rotation_rate_is_cubic(params, knob, rate):
    params.set_value('rotation_rate_knob', knob)
    assert params.rotation_rate == pytest.approx(rate)


@pytest.mark.parametrize("name, value, expected", [
    ('resolution_scale', 3.0, 2.0),
    ('resolution_scale', 0.1, 0.5),
    ('iterations', 100, 64),
    ('iterations', 0, 1),
    ('alt_color', 150, 100),
    ('alt_color_intensity', -3, 0),
    ('sphere_shrink', 9.0, 4.0),
    ('rotation_rate_knob', 6.0, 5.0),
])
def test_values_are_clamped(params, name, value, expected):
    assert params.set_value(name, value) == expected
    assert getattr(params, name) == expected


def test_integer_params_stay_integers(params):
    params.set_value('iterations', 12.6)
    assert params.iterations == 13
    assert isinstance(params.iterations, int)


def test_julia_components_wrap(params):
    params.set_value('julia_x', 1.2)
    params.set_value('julia_y', -0.1)
    assert params.julia_x == pytest.approx(0.2)
    assert params.julia_y == pytest.approx(0.9)


def test_julia_slider_end_does_not_wrap(params):
    assert JULIA_SLIDER_MAX < 1.0
    assert params.set_value('julia_x', JULIA_SLIDER_MAX) == pytest.approx(JULIA_SLIDER_MAX)
    assert params.set_value('julia_y', 1.0) == 0.0


def test_unknown_parameter(params):
    with pytest.raises(KeyError):
        params.set_value('bogus', 1)


def test_listeners_receive_changes(params):
    seen = []
    params.subscribe(lambda name, value: seen.append((name, value)))
    params.set_value('alt_color', 40)
    params.set_value('iterations', 70)
    assert seen == [('alt_color', 40), ('iterations', 64)]


def test_advance_phase_wraps():
    params = ParameterModel()
    params.julia_z = 0.0
    params.set_value('rotation_rate_knob', 5.0)
    rate = params.rotation_rate

    total = 0.0
    for step in (0.5, 3.0, 7.25, 0.0, 12.0):
        params.advance_phase(step)
        total += step

    assert params.julia_z == pytest.approx((rate * total) % 1.0)
    assert 0.0 <= params.julia_z < 1.0
