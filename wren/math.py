# wren/math.py
"""
4x4 matrix helpers.

Matrices are float32 numpy arrays stored row-major and used with column
vectors (``p' = M @ p``), so translation lives in the last column. Upload
them with ``.T.tobytes()`` for GLSL.
"""

import math
from typing import Sequence

import numpy as np

from wren.types import Scalar


def normalize(v: Sequence[Scalar]) -> np.ndarray:
    arr = np.asarray(v, dtype=np.float64)
    mag = math.sqrt(float(np.dot(arr, arr)))
    if mag == 0.0:
        return arr
    return arr / mag


def translation_matrix(offset: Sequence[Scalar]) -> np.ndarray:
    mat = np.eye(4, dtype=np.float32)
    mat[0, 3] = offset[0]
    mat[1, 3] = offset[1]
    mat[2, 3] = offset[2]
    return mat


def scale_matrix(factor: Scalar) -> np.ndarray:
    """Uniform scale."""
    mat = np.eye(4, dtype=np.float32)
    mat[0, 0] = factor
    mat[1, 1] = factor
    mat[2, 2] = factor
    return mat


def rotation_matrix(axis: Sequence[Scalar], angle_rad: Scalar) -> np.ndarray:
    """
    Right-handed rotation of ``angle_rad`` radians about ``axis``
    (Rodrigues' formula). The axis does not need to be unit length.
    """
    x, y, z = normalize(axis)
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    t = 1.0 - c

    mat = np.eye(4, dtype=np.float32)

    mat[0, 0] = t * x * x + c
    mat[0, 1] = t * x * y - s * z
    mat[0, 2] = t * x * z + s * y

    mat[1, 0] = t * x * y + s * z
    mat[1, 1] = t * y * y + c
    mat[1, 2] = t * y * z - s * x

    mat[2, 0] = t * x * z - s * y
    mat[2, 1] = t * y * z + s * x
    mat[2, 2] = t * z * z + c

    return mat


def create_perspective_projection(
    fov_deg: float, aspect: float, near: float, far: float
) -> np.ndarray:
    """
    Creates a standard OpenGL Perspective Projection Matrix.
    fov_deg: Field of View in Degrees (Vertical)
    aspect: Width / Height
    near: Distance to near plane
    far: Distance to far plane

    Clip-space depth ends up in [-w, w] (GL convention).
    """
    if aspect <= 0:
        raise ValueError(f"aspect must be positive, got {aspect}")
    if not 0 < near < far:
        raise ValueError(f"expected 0 < near < far, got near={near} far={far}")

    tan_half_fov = math.tan(math.radians(fov_deg) / 2.0)

    mat = np.zeros((4, 4), dtype=np.float32)

    # Scale X (Width)
    mat[0, 0] = 1.0 / (aspect * tan_half_fov)

    # Scale Y (Height)
    mat[1, 1] = 1.0 / tan_half_fov

    # Remap Z (Depth)
    mat[2, 2] = (far + near) / (near - far)
    mat[2, 3] = (2.0 * far * near) / (near - far)

    # Perspective Division (w = -z)
    mat[3, 2] = -1.0

    return mat


def look_at(
    eye: Sequence[Scalar], target: Sequence[Scalar], up: Sequence[Scalar]
) -> np.ndarray:
    """
    Right-handed view matrix looking from ``eye`` toward ``target``.
    The camera looks down its local -Z.
    """
    eye_v = np.asarray(eye, dtype=np.float64)

    f = normalize(np.asarray(target, dtype=np.float64) - eye_v)
    s = normalize(np.cross(f, np.asarray(up, dtype=np.float64)))
    u = np.cross(s, f)

    # Row 2 is -f
    view = np.array(
        [
            [s[0], s[1], s[2], -np.dot(s, eye_v)],
            [u[0], u[1], u[2], -np.dot(u, eye_v)],
            [-f[0], -f[1], -f[2], np.dot(f, eye_v)],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float32,
    )
    return view
