import logging
from dataclasses import dataclass

from .config import (
    DRAG_BUTTON,
    JULIA_SENSITIVITY,
    KEY_BINDINGS,
    KEY_ROTATE_SENSITIVITY,
    RELEASE_KEY,
    RESET_KEY,
    TRANSLATE_SENSITIVITY,
)

logger = logging.getLogger(__name__)


@dataclass
class KeyAction:
    """A held key's per-frame action. Cancelled actions never fire again."""
    key: int
    name: str
    cancelled: bool = False

    def cancel(self):
        self.cancelled = True


class InputRouter:
    """
    Turns classified input events into camera and parameter changes.

    Held keys are kept in an active-key table and fired from `run_frame`, which
    the frame loop calls once per frame after the clock tick. Pointer motion
    and scroll are applied as one-shot deltas when they arrive.
    """

    def __init__(self, camera, params, clock, bindings=None, capture_hook=None):
        self.camera = camera
        self.params = params
        self.clock = clock
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)
        # capture_hook(bool) asks the host to grab or release the pointer
        self.capture_hook = capture_hook

        self.active = {}
        self.pressed = set()
        self.buttons_down = set()
        self.pointer_captured = False
        self.scroll_remainder = 0.0

        t = self.camera.translate
        z = self.camera.zoom
        self.movement = {
            'forward': lambda s: t(s, 0, 0),
            'back': lambda s: t(-s, 0, 0),
            'strafe_right': lambda s: t(0, s, 0),
            'strafe_left': lambda s: t(0, -s, 0),
            'rise': lambda s: t(0, 0, s),
            'sink': lambda s: t(0, 0, -s),
            'zoom_in': lambda s: z(1 - s),
            'zoom_out': lambda s: z(1 + s),
            'look_left': lambda s: self._look(-s, 0),
            'look_right': lambda s: self._look(s, 0),
            'look_up': lambda s: self._look(0, -s),
            'look_down': lambda s: self._look(0, s),
        }

    def _look(self, dx, dy):
        scale = KEY_ROTATE_SENSITIVITY / TRANSLATE_SENSITIVITY
        scale *= self.camera.rotation_sensitivity / self.camera.base_sensitivity
        self.camera.rotate(dx * scale, dy * scale)

    def _fire(self, action):
        if action.cancelled:
            return
        self.movement[action.name](TRANSLATE_SENSITIVITY * self.clock.elapsed_since_last_tick)

    # --- Keys ---

    def on_key_down(self, key):
        if key in self.active or key in self.pressed:
            return

        name = self.bindings.get(key)
        if name is not None:
            action = KeyAction(key, name)
            self.active[key] = action
            self._fire(action)
        elif key == RESET_KEY:
            self.pressed.add(key)
            self.camera.initialize()
        elif key == RELEASE_KEY:
            self.pressed.add(key)
            self.release_pointer()

    def on_key_up(self, key):
        self.pressed.discard(key)
        action = self.active.pop(key, None)
        if action is not None:
            action.cancel()

    def run_frame(self):
        for action in list(self.active.values()):
            self._fire(action)

    def cancel_all(self):
        if self.active:
            logger.debug("Cancelling %d held key action(s)", len(self.active))
        for action in self.active.values():
            action.cancel()
        self.active.clear()
        self.pressed.clear()
        self.buttons_down.clear()

    # --- Pointer ---

    def on_button_down(self, button):
        self.buttons_down.add(button)
        if not self.pointer_captured and self.capture_hook is not None:
            self.capture_hook(True)

    def on_button_up(self, button):
        self.buttons_down.discard(button)

    def set_pointer_captured(self, captured):
        if captured != self.pointer_captured:
            logger.debug("Pointer capture %s", "granted" if captured else "released")
        self.pointer_captured = captured

    def release_pointer(self):
        if self.pointer_captured and self.capture_hook is not None:
            self.capture_hook(False)

    def on_pointer_move(self, dx, dy):
        if DRAG_BUTTON in self.buttons_down:
            self.params.set_value('julia_x', self.params.julia_x + dx * JULIA_SENSITIVITY)
            self.params.set_value('julia_y', self.params.julia_y - dy * JULIA_SENSITIVITY)
        elif self.pointer_captured:
            sensitivity = self.camera.rotation_sensitivity
            self.camera.rotate(dx * sensitivity, dy * sensitivity)

    # --- Scroll ---

    def on_scroll(self, direction):
        """Step iterations once per whole scroll unit; fractions carry over."""
        self.scroll_remainder = round(self.scroll_remainder + direction, 9)
        steps = int(self.scroll_remainder)
        if steps:
            self.scroll_remainder -= steps
            self.params.step_iterations(steps)


class PointerTracker:
    """Turns absolute cursor positions into relative deltas."""

    def __init__(self):
        self.last = None

    def reset(self):
        self.last = None

    def delta(self, x, y):
        if self.last is None:
            # First sample after a capture change; no reference point yet
            self.last = (x, y)
            return 0.0, 0.0
        dx = x - self.last[0]
        dy = y - self.last[1]
        self.last = (x, y)
        return dx, dy
