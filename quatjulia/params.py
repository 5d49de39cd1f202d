import logging
from typing import Callable, List

from .config import (
    DEFAULT_JULIA_Z,
    INTEGER_PARAMS,
    PARAM_RANGES,
    ROTATION_RATE_SCALE,
)
from .vecmath import vec3, wrap_unit

logger = logging.getLogger(__name__)

WRAPPED_PARAMS = ('julia_x', 'julia_y')


def clamp(value, low, high):
    return max(low, min(high, value))


class ParameterModel:
    """
    Tunable fractal and render parameters.

    Every write goes through `set_value`, which clamps to the declared range
    and notifies listeners with `(name, value)`. The fractal constant's x/y
    wrap into [0, 1) instead of clamping; z is a phase advanced by
    `advance_phase`.
    """

    def __init__(self):
        for name, (default, _low, _high) in PARAM_RANGES.items():
            setattr(self, name, default)
        self.julia_z = DEFAULT_JULIA_Z
        self._listeners: List[Callable[[str, object], None]] = []

    @property
    def rotation_rate(self):
        return self.rotation_rate_knob ** 3 / ROTATION_RATE_SCALE

    @property
    def julia(self):
        return vec3(self.julia_x, self.julia_y, self.julia_z)

    def subscribe(self, callback):
        self._listeners.append(callback)

    def set_value(self, name, value):
        """Store a clamped value and notify listeners. Returns the stored value."""
        if name not in PARAM_RANGES:
            raise KeyError(f"Unknown parameter: {name}")

        _default, low, high = PARAM_RANGES[name]
        if name in WRAPPED_PARAMS:
            value = wrap_unit(value)
        elif name in INTEGER_PARAMS:
            value = int(clamp(round(value), low, high))
        else:
            value = float(clamp(value, low, high))

        setattr(self, name, value)
        logger.debug("Parameter %s = %s", name, value)
        for callback in self._listeners:
            callback(name, value)
        return value

    def step_iterations(self, delta):
        return self.set_value('iterations', self.iterations + delta)

    def advance_phase(self, elapsed):
        self.julia_z = wrap_unit(self.julia_z + self.rotation_rate * elapsed)
        return self.julia_z
