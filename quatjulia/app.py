import argparse
import logging
import time

import glfw
import imgui
from imgui.integrations.glfw import GlfwRenderer
from OpenGL.GL import *

from .config import GL_CONTEXT_VERSION, SCREEN_SIZE, WINDOW_TITLE
from .controller import Explorer
from .input_router import PointerTracker
from .gui.panel import ParameterPanel
from .gui.themes import setup_theme
from .logging_config import setup_logging
from .renderer import ShaderRenderer
from .shader_source import RendererUnavailable

logger = logging.getLogger(__name__)


def connect_input(window, explorer):
    """Route GLFW callbacks to the explorer, chaining the imgui handlers."""
    router = explorer.router
    tracker = PointerTracker()
    previous = {}

    def chain(name, *args):
        callback = previous.get(name)
        if callback is not None:
            callback(*args)

    def set_capture(captured):
        if captured:
            glfw.set_input_mode(window, glfw.CURSOR, glfw.CURSOR_DISABLED)
            if glfw.raw_mouse_motion_supported():
                glfw.set_input_mode(window, glfw.RAW_MOUSE_MOTION, glfw.TRUE)
        else:
            glfw.set_input_mode(window, glfw.CURSOR, glfw.CURSOR_NORMAL)
        tracker.reset()
        router.set_pointer_captured(captured)

    router.capture_hook = set_capture

    def key_callback(win, key, scancode, action, mods):
        chain('key', win, key, scancode, action, mods)
        if action == glfw.PRESS:
            if not imgui.get_io().want_capture_keyboard:
                router.on_key_down(key)
        elif action == glfw.RELEASE:
            router.on_key_up(key)

    def cursor_pos_callback(win, x, y):
        chain('cursor_pos', win, x, y)
        dx, dy = tracker.delta(x, y)
        if dx or dy:
            router.on_pointer_move(dx, dy)

    def mouse_button_callback(win, button, action, mods):
        chain('mouse_button', win, button, action, mods)
        if action == glfw.PRESS:
            if router.pointer_captured or not imgui.get_io().want_capture_mouse:
                router.on_button_down(button)
        elif action == glfw.RELEASE:
            router.on_button_up(button)

    def scroll_callback(win, x_offset, y_offset):
        chain('scroll', win, x_offset, y_offset)
        if router.pointer_captured or not imgui.get_io().want_capture_mouse:
            router.on_scroll(y_offset)

    def framebuffer_size_callback(win, width, height):
        if width > 0 and height > 0:
            explorer.sync.resize(width, height)

    def focus_callback(win, focused):
        if not focused:
            router.cancel_all()
            if router.pointer_captured:
                set_capture(False)

    def iconify_callback(win, iconified):
        if iconified:
            router.cancel_all()

    previous['key'] = glfw.set_key_callback(window, key_callback)
    previous['cursor_pos'] = glfw.set_cursor_pos_callback(window, cursor_pos_callback)
    previous['mouse_button'] = glfw.set_mouse_button_callback(window, mouse_button_callback)
    previous['scroll'] = glfw.set_scroll_callback(window, scroll_callback)
    glfw.set_framebuffer_size_callback(window, framebuffer_size_callback)
    glfw.set_window_focus_callback(window, focus_callback)
    glfw.set_window_iconify_callback(window, iconify_callback)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive quaternion Julia fractal explorer")
    parser.add_argument("--width", type=int, default=SCREEN_SIZE[0], help="Window width in pixels")
    parser.add_argument("--height", type=int, default=SCREEN_SIZE[1], help="Window height in pixels")
    parser.add_argument("--resolution-scale", type=float, default=1.0,
                        help="Render resolution relative to the window (0.5 - 2.0)")
    parser.add_argument("--iterations", type=int, default=None, help="Initial iteration count (1 - 64)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    # Initialize GLFW
    if not glfw.init():
        logger.error("Failed to initialize GLFW")
        return 1

    glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, GL_CONTEXT_VERSION[0])
    glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, GL_CONTEXT_VERSION[1])
    glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
    glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, glfw.TRUE)

    window = glfw.create_window(args.width, args.height, WINDOW_TITLE, None, None)
    if not window:
        logger.error("Could not create an OpenGL %d.%d window", *GL_CONTEXT_VERSION)
        glfw.terminate()
        return 1

    glfw.make_context_current(window)
    glfw.swap_interval(1)

    try:
        renderer = ShaderRenderer()
    except RendererUnavailable as e:
        logger.error("Renderer unavailable: %s", e)
        glfw.terminate()
        return 1

    # Initialize ImGui
    imgui.create_context()
    impl = GlfwRenderer(window)
    setup_theme()

    explorer = Explorer(renderer, time_source=glfw.get_time)
    connect_input(window, explorer)
    panel = ParameterPanel(explorer.params)
    status = 0

    # Framebuffer setup can fail on any resize, including those raised from
    # the framebuffer size callback during poll_events
    try:
        explorer.sync.resize(*glfw.get_framebuffer_size(window))
        if args.resolution_scale != explorer.params.resolution_scale:
            explorer.params.set_value('resolution_scale', args.resolution_scale)
        if args.iterations is not None:
            explorer.params.set_value('iterations', args.iterations)

        logger.info("Explorer started (%dx%d)", args.width, args.height)

        # --- FPS tracking ---
        fps_clock = time.time()
        fps_frames = 0
        fps_value = 0

        # --- Main Loop ---
        while not glfw.window_should_close(window):
            glfw.poll_events()
            impl.process_inputs()
            imgui.new_frame()

            fps_frames += 1
            current_time = time.time()
            if current_time - fps_clock >= 1.0:
                fps_value = fps_frames
                fps_frames = 0
                fps_clock = current_time

            glClear(GL_COLOR_BUFFER_BIT)
            explorer.frame()
            panel.draw(fps_value)

            imgui.render()
            impl.render(imgui.get_draw_data())
            glfw.swap_buffers(window)
    except RendererUnavailable as e:
        logger.error("Renderer unavailable: %s", e)
        status = 1

    # Clean up
    renderer.release()
    impl.shutdown()
    glfw.terminate()
    logger.info("Explorer closed")
    return status
