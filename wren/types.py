# wren/types.py
from __future__ import annotations

from typing import Tuple, TypeAlias

Scalar: TypeAlias = float

Vec2 = Tuple[Scalar, Scalar]
Vec3 = Tuple[Scalar, Scalar, Scalar]

Color4 = Tuple[float, float, float, float]

# (dx, dy) in screen pixels, y growing downward
PointerDelta = Tuple[Scalar, Scalar]
