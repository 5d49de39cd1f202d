import imgui

from ..config import (
    FPS_WINDOW_HEIGHT,
    FPS_WINDOW_OFFSET,
    FPS_WINDOW_WIDTH,
    HELP_TEXT,
    JULIA_SLIDER_MAX,
    PANEL_WIDTH,
    PARAM_RANGES,
)


class ParameterPanel:
    """
    imgui window for the tunable parameters.

    Widgets read the model every frame, so values changed elsewhere (scroll,
    pointer drag) show up immediately. Any edit is written back through
    `ParameterModel.set_value`.
    """

    def __init__(self, params):
        self.params = params

    def _slider_float(self, label, name, fmt="%.2f", step=None, high=None):
        _default, low, limit = PARAM_RANGES[name]
        if high is None:
            high = limit
        changed, value = imgui.slider_float(label, getattr(self.params, name), low, high, fmt)
        if changed:
            if step:
                value = round(value / step) * step
            self.params.set_value(name, value)

    def _slider_int(self, label, name):
        _default, low, high = PARAM_RANGES[name]
        changed, value = imgui.slider_int(label, getattr(self.params, name), low, high)
        if changed:
            self.params.set_value(name, value)

    def draw(self, fps_value):
        imgui.set_next_window_position(FPS_WINDOW_OFFSET, FPS_WINDOW_OFFSET, imgui.FIRST_USE_EVER)
        imgui.set_next_window_size(PANEL_WIDTH, 0, imgui.FIRST_USE_EVER)
        imgui.begin("Parameters", False, imgui.WINDOW_ALWAYS_AUTO_RESIZE)

        self._slider_float("Resolution", 'resolution_scale', "%.1f", step=0.1)
        self._slider_int("Iterations", 'iterations')
        self._slider_float("Rotation X", 'julia_x', "%.3f", high=JULIA_SLIDER_MAX)
        self._slider_float("Rotation Y", 'julia_y', "%.3f", high=JULIA_SLIDER_MAX)

        expanded, _visible = imgui.collapsing_header("Fractal Parameters", None, imgui.TREE_NODE_DEFAULT_OPEN)
        if expanded:
            self._slider_float("Rotation Rate", 'rotation_rate_knob')
            self._slider_int("Alt. Color", 'alt_color')
            self._slider_int("Alt. Color Intensity", 'alt_color_intensity')
            self._slider_float("Sphere Shrink", 'sphere_shrink', step=0.01)

        if imgui.collapsing_header("Controls")[0]:
            imgui.text_colored(HELP_TEXT, 0.7, 0.7, 0.7, 1.0)

        imgui.end()

        # --- FPS OVERLAY (Top Right) ---
        io = imgui.get_io()
        fps_x = io.display_size.x - FPS_WINDOW_WIDTH - FPS_WINDOW_OFFSET
        imgui.set_next_window_position(fps_x, FPS_WINDOW_OFFSET)
        imgui.set_next_window_size(FPS_WINDOW_WIDTH, FPS_WINDOW_HEIGHT)
        imgui.begin("FPS", False, imgui.WINDOW_NO_TITLE_BAR | imgui.WINDOW_NO_RESIZE | imgui.WINDOW_NO_MOVE | imgui.WINDOW_NO_SCROLLBAR | imgui.WINDOW_NO_INPUTS)
        imgui.text_colored("FPS: " + str(fps_value), 0.0, 1.0, 0.0, 1.0)
        imgui.end()
