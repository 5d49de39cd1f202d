import time

from .camera import CameraState
from .clock import Clock
from .input_router import InputRouter
from .params import ParameterModel
from .render_sync import RenderSync


class Explorer:
    """
    Owns the explorer state and runs one frame at a time.

    The host calls `frame()` at display refresh rate and forwards input
    events to `router`. Camera and parameters are shared with the router and
    the sync by reference.
    """

    def __init__(self, renderer, time_source=time.monotonic, capture_hook=None):
        self.renderer = renderer
        self.clock = Clock(time_source)
        self.camera = CameraState()
        self.params = ParameterModel()
        self.router = InputRouter(self.camera, self.params, self.clock, capture_hook=capture_hook)
        self.sync = RenderSync(renderer, self.camera, self.params, self.clock)
        self.params.subscribe(self.sync.on_param_changed)

    def frame(self):
        self.clock.tick()
        self.router.run_frame()
        changed = self.camera.update()
        self.sync.sync_frame(changed)
        self.renderer.draw()
        return changed
