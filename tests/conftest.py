import pytest

from quatjulia.camera import CameraState
from quatjulia.clock import Clock
from quatjulia.input_router import InputRouter
from quatjulia.params import ParameterModel


class ManualTime:
    """Time source advanced by hand."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeRenderer:
    """Records every uniform upload and draw call."""

    def __init__(self):
        self.calls = []
        self.resized = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def count(self, name):
        return sum(1 for call, _args in self.calls if call == name)

    def last(self, name):
        for call, args in reversed(self.calls):
            if call == name:
                return args
        return None

    def reset(self):
        self.calls = []

    def resize(self, canvas_width, canvas_height, window_width, window_height):
        self.resized.append((canvas_width, canvas_height, window_width, window_height))

    def set_aspect_ratio(self, aspect_ratio):
        self._record('set_aspect_ratio', aspect_ratio)

    def set_pixel_size(self, pixel_size):
        self._record('set_pixel_size', pixel_size)

    def set_camera(self, position, forward, right, up, fov):
        self._record('set_camera', position.copy(), forward.copy(), right.copy(), up.copy(), fov)

    def set_julia(self, julia):
        self._record('set_julia', julia.copy())

    def set_time(self, seconds):
        self._record('set_time', seconds)

    def set_iterations(self, iterations):
        self._record('set_iterations', iterations)

    def set_alt_color(self, value):
        self._record('set_alt_color', value)

    def set_alt_color_intensity(self, value):
        self._record('set_alt_color_intensity', value)

    def set_sphere_shrink(self, value):
        self._record('set_sphere_shrink', value)

    def draw(self):
        self._record('draw')


@pytest.fixture
def manual_time():
    return ManualTime()


@pytest.fixture
def clock(manual_time):
    return Clock(manual_time)


@pytest.fixture
def camera():
    return CameraState()


@pytest.fixture
def params():
    return ParameterModel()


@pytest.fixture
def router(camera, params, clock):
    return InputRouter(camera, params, clock)


@pytest.fixture
def renderer():
    return FakeRenderer()
