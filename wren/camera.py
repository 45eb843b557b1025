# wren/camera.py
import math
from dataclasses import dataclass

import numpy as np

from wren.math import look_at, normalize
from wren.types import Vec3

PITCH_LIMIT = 89.0
WORLD_UP: Vec3 = (0.0, 1.0, 0.0)


@dataclass
class Camera:
    """
    Free-look camera driven by pointer deltas.

    Angles are in degrees. Yaw is left unbounded; pitch stays inside
    [-PITCH_LIMIT, PITCH_LIMIT] so forward is never parallel to WORLD_UP.
    """

    eye_position: Vec3 = (0.0, 0.0, 5.0)
    yaw: float = -90.0  # looking down -Z
    pitch: float = 0.0
    sensitivity: float = 0.1

    def apply_pointer_delta(self, dx: float, dy: float) -> None:
        """
        dx/dy are screen-space pixels (y grows downward), so moving the
        pointer up (negative dy) raises pitch.
        """
        self.yaw += dx * self.sensitivity
        self.pitch -= dy * self.sensitivity

        if self.pitch > PITCH_LIMIT:
            self.pitch = PITCH_LIMIT
        if self.pitch < -PITCH_LIMIT:
            self.pitch = -PITCH_LIMIT

    @property
    def forward(self) -> np.ndarray:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        return normalize(
            (
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            )
        )

    def view_matrix(self) -> np.ndarray:
        eye = np.asarray(self.eye_position, dtype=np.float64)
        return look_at(eye, eye + self.forward, WORLD_UP)
