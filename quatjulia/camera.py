import logging
from dataclasses import dataclass

import numpy as np

from .config import (
    DEFAULT_FORWARD,
    DEFAULT_FOV,
    DEFAULT_POSITION,
    DEFAULT_RIGHT,
    DEFAULT_UP,
    NORMALIZE_INTERVAL,
    ROTATE_SENSITIVITY,
)
from .vecmath import length, normalize, quat_from_axis_angle, rotate_by_quat, vec3

logger = logging.getLogger(__name__)


@dataclass
class InputAccumulator:
    """
    Pending camera deltas for one update cycle.

    `zoom_factor` only records the zoom queued since the last update; `zoom`
    has already applied it to the field of view, so `update` never reads it.
    """
    rotate_x: float = 0.0
    rotate_y: float = 0.0
    trans_forward: float = 0.0
    trans_right: float = 0.0
    trans_up: float = 0.0
    zoom_factor: float = 1.0

    def clear(self):
        self.rotate_x = 0.0
        self.rotate_y = 0.0
        self.trans_forward = 0.0
        self.trans_right = 0.0
        self.trans_up = 0.0
        self.zoom_factor = 1.0


class CameraState:
    """
    Free-flying camera inside the unit sphere.

    Rotation and translation are queued by `rotate`/`translate` and applied
    together by `update`, once per frame. Zoom changes the field of view
    immediately. The basis is allowed to drift for a while and is then
    re-orthonormalized.
    """

    def __init__(self, base_sensitivity=ROTATE_SENSITIVITY, normalize_interval=NORMALIZE_INTERVAL):
        self.base_sensitivity = base_sensitivity
        self.normalize_interval = normalize_interval

        self.position = vec3(*DEFAULT_POSITION)
        self.forward = vec3(*DEFAULT_FORWARD)
        self.right = vec3(*DEFAULT_RIGHT)
        self.up = vec3(*DEFAULT_UP)
        self.fov = DEFAULT_FOV

        self.pending = InputAccumulator()
        self.dirty = False
        self.time_to_normalize = 0

    @property
    def rotation_sensitivity(self):
        """Pointer rotation sensitivity, reduced while zoomed in. No lower bound."""
        return min(self.base_sensitivity * self.fov, self.base_sensitivity)

    def initialize(self):
        self.position = vec3(*DEFAULT_POSITION)
        self.fov = DEFAULT_FOV
        self.dirty = True

    def rotate(self, dx, dy):
        self.pending.rotate_x += dx
        self.pending.rotate_y += dy
        self.dirty = True

    def translate(self, forward, right, up):
        self.pending.trans_forward += forward
        self.pending.trans_right += right
        self.pending.trans_up += up
        self.dirty = True

    def zoom(self, factor):
        self.pending.zoom_factor *= factor
        self.fov *= factor
        self.dirty = True

    def update(self):
        """Apply pending deltas. Returns True if the camera changed."""
        if not self.dirty:
            return False

        p = self.pending

        if p.rotate_x != 0 or p.rotate_y != 0:
            rotation = quat_from_axis_angle(self.up, p.rotate_x)
            self.forward = rotate_by_quat(self.forward, rotation)
            self.right = rotate_by_quat(self.right, rotation)

            # Pitch about the right axis after the yaw above
            rotation = quat_from_axis_angle(self.right, p.rotate_y)
            self.forward = rotate_by_quat(self.forward, rotation)
            self.up = rotate_by_quat(self.up, rotation)

            self.time_to_normalize += 1

        dist_to_sphere = 1.0 - length(self.position)
        if p.trans_forward != 0:
            self.position = self.position + self.forward * (p.trans_forward * dist_to_sphere)
        if p.trans_right != 0:
            self.position = self.position + self.right * (p.trans_right * dist_to_sphere)
        if p.trans_up != 0:
            self.position = self.position + self.up * (p.trans_up * dist_to_sphere)

        if self.time_to_normalize > self.normalize_interval:
            self.orthonormalize()

        p.clear()
        self.dirty = False
        return True

    def orthonormalize(self):
        self.forward = normalize(self.forward)
        self.right = normalize(np.cross(self.up, self.forward))
        self.up = normalize(np.cross(self.forward, self.right))
        self.time_to_normalize = 0
        logger.debug("Camera basis re-orthonormalized")
