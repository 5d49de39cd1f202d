import logging
from dataclasses import dataclass

from .config import SHADER_PARAMS

logger = logging.getLogger(__name__)


@dataclass
class Viewport:
    window_width: int = 1
    window_height: int = 1
    canvas_width: int = 1
    canvas_height: int = 1
    aspect_ratio: float = 1.0
    pixel_size: tuple = (1.0, 1.0)


class RenderSync:
    """
    Decides which uniforms to upload each frame.

    Camera uniforms go up only when the camera changed. Aspect ratio, pixel
    size, time and the fractal constant go up every frame. Iterations and the
    color/shape knobs go up only after a parameter-change event.
    """

    def __init__(self, renderer, camera, params, clock):
        self.renderer = renderer
        self.camera = camera
        self.params = params
        self.clock = clock
        self.viewport = Viewport()

        self.force_camera = True
        self.params_dirty = True

    def on_param_changed(self, name, value):
        if name in SHADER_PARAMS:
            self.params_dirty = True
        elif name == 'resolution_scale':
            self.resize(self.viewport.window_width, self.viewport.window_height)

    def resize(self, window_width, window_height):
        scale = self.params.resolution_scale
        width = max(1, int(window_width * scale))
        height = max(1, int(window_height * scale))

        self.viewport = Viewport(
            window_width=window_width,
            window_height=window_height,
            canvas_width=width,
            canvas_height=height,
            aspect_ratio=width / height,
            pixel_size=(1 / width, 1 / height),
        )
        self.renderer.resize(width, height, window_width, window_height)
        logger.debug("Canvas resized to %dx%d (window %dx%d)", width, height, window_width, window_height)

    def push_camera(self):
        c = self.camera
        self.renderer.set_camera(c.position, c.forward, c.right, c.up, c.fov)

    def push_params(self):
        p = self.params
        self.renderer.set_iterations(p.iterations)
        self.renderer.set_alt_color(p.alt_color / 100)
        self.renderer.set_alt_color_intensity(p.alt_color_intensity)
        self.renderer.set_sphere_shrink(p.sphere_shrink / 100)

    def sync_frame(self, camera_changed):
        if camera_changed or self.force_camera:
            self.push_camera()
            self.force_camera = False

        self.renderer.set_aspect_ratio(self.viewport.aspect_ratio)
        self.renderer.set_pixel_size(self.viewport.pixel_size)
        self.renderer.set_time(self.clock.elapsed_since_start)

        self.params.advance_phase(self.clock.elapsed_since_last_tick)
        self.renderer.set_julia(self.params.julia)

        if self.params_dirty:
            self.push_params()
            self.params_dirty = False
