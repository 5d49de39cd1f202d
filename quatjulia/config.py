import math

# --- Window ---
SCREEN_SIZE = (1280, 720)
WINDOW_TITLE = "Quaternion Julia Explorer"
GL_CONTEXT_VERSION = (3, 3)

# --- Camera Constants ---
ROTATE_SENSITIVITY = 1 / 600  # radians per pixel of pointer motion at fov 1
TRANSLATE_SENSITIVITY = 0.6  # per second of held key
JULIA_SENSITIVITY = 1 / 4000  # fractal constant units per pixel while dragging
KEY_ROTATE_SENSITIVITY = math.radians(60)  # radians per second of held arrow key
NORMALIZE_INTERVAL = 500  # rotating updates between re-orthonormalizations

DEFAULT_POSITION = (0.0, 0.0, 0.0)
DEFAULT_FORWARD = (1.0, 0.0, 0.0)
DEFAULT_RIGHT = (0.0, 1.0, 0.0)
DEFAULT_UP = (0.0, 0.0, 1.0)
DEFAULT_FOV = 1.0

# --- Fractal Parameters ---
# name: (default, min, max)
PARAM_RANGES = {
    'resolution_scale': (1.0, 0.5, 2.0),
    'iterations': (33, 1, 64),
    'julia_x': (0.75, 0.0, 1.0),
    'julia_y': (0.25, 0.0, 1.0),
    'rotation_rate_knob': (1.0, 0.0, 5.0),
    'alt_color': (0, 0, 100),
    'alt_color_intensity': (9, 0, 32),
    'sphere_shrink': (1.0, 0.0, 4.0),
}
INTEGER_PARAMS = ('iterations', 'alt_color', 'alt_color_intensity')
DEFAULT_JULIA_Z = 0.5
ROTATION_RATE_SCALE = 2000.0

# Parameters whose uniforms are pushed on write rather than every frame
SHADER_PARAMS = ('iterations', 'alt_color', 'alt_color_intensity', 'sphere_shrink')

# Julia x/y wrap at 1.0, so their sliders stop just short of it
JULIA_SLIDER_MAX = 0.999

# --- Key Bindings (GLFW key codes; letters match their ASCII code) ---
KEY_SPACE = 32
KEY_ESCAPE = 256
KEY_RIGHT = 262
KEY_LEFT = 263
KEY_DOWN = 264
KEY_UP = 265

MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1

KEY_BINDINGS = {
    ord('W'): 'forward',
    ord('S'): 'back',
    ord('D'): 'strafe_right',
    ord('A'): 'strafe_left',
    ord('E'): 'rise',
    ord('Q'): 'sink',
    ord('R'): 'zoom_in',
    ord('F'): 'zoom_out',
    KEY_LEFT: 'look_left',
    KEY_RIGHT: 'look_right',
    KEY_UP: 'look_up',
    KEY_DOWN: 'look_down',
}
RESET_KEY = KEY_SPACE
RELEASE_KEY = KEY_ESCAPE
DRAG_BUTTON = MOUSE_BUTTON_LEFT

# --- UI Constants ---
PANEL_WIDTH = 300
FPS_WINDOW_OFFSET = 10
FPS_WINDOW_WIDTH = 140
FPS_WINDOW_HEIGHT = 30

HELP_TEXT = (
    "Click the view to capture the mouse, Esc to release\n"
    "W/S A/D E/Q  move     R/F  zoom\n"
    "Arrows  look          Space  reset\n"
    "Drag  fractal constant\n"
    "Wheel  iterations"
)
