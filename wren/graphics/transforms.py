# wren/graphics/transforms.py
import math
from dataclasses import dataclass, field

import numpy as np

from wren.camera import Camera
from wren.graphics.core.settings import ModelSettings, ProjectionSettings
from wren.math import (
    create_perspective_projection,
    rotation_matrix,
    scale_matrix,
    translation_matrix,
)

Y_AXIS = (0.0, 1.0, 0.0)
X_AXIS = (1.0, 0.0, 0.0)


@dataclass(slots=True)
class FrameTransforms:
    model: np.ndarray  # 4x4
    view: np.ndarray  # 4x4
    projection: np.ndarray  # 4x4


@dataclass(frozen=True)
class TransformPipeline:
    """
    Builds the three matrices for one frame.

    Nothing is cached between calls: the result depends only on the
    arguments and the (immutable) configuration.
    """

    aspect_ratio: float
    model_settings: ModelSettings = field(default_factory=ModelSettings)
    projection_settings: ProjectionSettings = field(
        default_factory=ProjectionSettings
    )

    def model_matrix(self, elapsed_seconds: float) -> np.ndarray:
        cfg = self.model_settings
        spin = math.radians(elapsed_seconds * cfg.spin_degrees_per_second)

        model = np.eye(4, dtype=np.float32)
        model = model @ translation_matrix(cfg.offset)
        model = model @ rotation_matrix(Y_AXIS, spin)
        model = model @ rotation_matrix(
            X_AXIS, math.radians(cfg.orientation_fix_degrees)
        )
        model = model @ scale_matrix(cfg.scale)
        return model

    def projection_matrix(self) -> np.ndarray:
        cfg = self.projection_settings
        return create_perspective_projection(
            cfg.fov_degrees, self.aspect_ratio, cfg.near, cfg.far
        )

    def compute_frame(self, elapsed_seconds: float, camera: Camera) -> FrameTransforms:
        return FrameTransforms(
            model=self.model_matrix(elapsed_seconds),
            view=camera.view_matrix(),
            projection=self.projection_matrix(),
        )
