# wren/assets/types.py
from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from wren.types import Vec2, Vec3

VERTEX_FORMAT = "<3f 3f 2f"


@dataclass(frozen=True)
class VertexLayout:
    """Describes vertex attributes for VAO creation."""

    attributes: List[str]  # e.g. ["in_pos", "in_normal", "in_uv"]
    format: str  # moderngl buffer format string e.g. "3f 3f 2f"
    stride_bytes: int  # e.g. 32


DEFAULT_LAYOUT = VertexLayout(
    attributes=["in_pos", "in_normal", "in_uv"],
    format="3f 3f 2f",
    stride_bytes=struct.calcsize(VERTEX_FORMAT),
)


@dataclass(frozen=True, slots=True)
class Vertex:
    position: Vec3
    normal: Vec3
    tex_coord: Vec2

    def pack(self) -> bytes:
        return struct.pack(VERTEX_FORMAT, *self.position, *self.normal, *self.tex_coord)


@dataclass(frozen=True)
class MeshData:
    """
    Raw mesh data loaded from disk, ready for GPU upload.

    One vertex per face corner, no welding. ``indices`` holds one triple per
    triangle, each entry an offset into ``vertices``.
    """

    vertices: Tuple[Vertex, ...]
    indices: Tuple[int, ...]
    aabb: Tuple[Vec3, Vec3]
    vertex_layout: VertexLayout = field(default=DEFAULT_LAYOUT)
    index_element_size: int = 4  # bytes

    def __post_init__(self) -> None:
        if len(self.indices) % 3 != 0:
            raise ValueError(
                f"Index count {len(self.indices)} is not a multiple of 3"
            )
        n = len(self.vertices)
        for idx in self.indices:
            if not 0 <= idx < n:
                raise ValueError(f"Index {idx} outside vertex range 0..{n - 1}")

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def vertex_bytes(self) -> bytes:
        """Interleaved pos/normal/uv float32 blob, one stride per vertex."""
        return b"".join(v.pack() for v in self.vertices)

    @property
    def index_bytes(self) -> bytes:
        return np.asarray(self.indices, dtype="<u4").tobytes()


@dataclass(frozen=True)
class TextureData:
    """Raw texture data and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # 1 (R), 3 (RGB) or 4 (RGBA)


@dataclass(frozen=True)
class ShaderSource:
    """Raw shader source code."""

    source: str
    path: str  # For debugging / error reporting.
