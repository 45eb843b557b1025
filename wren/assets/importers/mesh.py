# wren/assets/importers/mesh.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from wren.assets.importers.base import AssetImporter
from wren.assets.types import MeshData, Vertex
from wren.errors import (
    EmptyMeshError,
    FaceIndexError,
    MalformedRecordError,
)
from wren.types import Vec2, Vec3

logger = logging.getLogger(__name__)

DEFAULT_NORMAL: Vec3 = (0.0, 1.0, 0.0)
DEFAULT_TEX_COORD: Vec2 = (0.0, 0.0)

# Corners read per face; anything after the third is dropped
FACE_CORNERS = 3


@dataclass
class AttributePools:
    """Vertex attributes in declaration order, 0-based."""

    positions: List[Vec3] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)
    tex_coords: List[Vec2] = field(default_factory=list)


def _parse_index(val: str) -> Optional[int]:
    """1-based file index to 0-based. Empty field means absent."""
    if not val:
        return None
    return int(val) - 1


def _parse_face_vertex(token: str) -> Tuple[int, Optional[int], Optional[int]]:
    """
    Parse a face vertex token: v, v/vt, v//vn or v/vt/vn.
    """
    parts = token.split("/")

    v = _parse_index(parts[0])
    vt = _parse_index(parts[1]) if len(parts) > 1 else None
    vn = _parse_index(parts[2]) if len(parts) > 2 else None

    if v is None:
        raise ValueError(f"missing position index in {token!r}")

    return v, vt, vn


def resolve_face_vertex_reference(pools: AttributePools, token: str) -> Vertex:
    """
    Build the Vertex a single face corner refers to.

    The position must exist, otherwise FaceIndexError. Missing or
    out-of-range texcoord/normal indices fall back to (0, 0) and (0, 1, 0).
    Raises ValueError for non-integer index fields.
    """
    v_idx, vt_idx, vn_idx = _parse_face_vertex(token)

    if not 0 <= v_idx < len(pools.positions):
        raise FaceIndexError(v_idx, len(pools.positions))

    normal = DEFAULT_NORMAL
    if vn_idx is not None and 0 <= vn_idx < len(pools.normals):
        normal = pools.normals[vn_idx]

    tex_coord = DEFAULT_TEX_COORD
    if vt_idx is not None and 0 <= vt_idx < len(pools.tex_coords):
        tex_coord = pools.tex_coords[vt_idx]

    return Vertex(
        position=pools.positions[v_idx], normal=normal, tex_coord=tex_coord
    )


def _floats(parts: List[str], count: int) -> Tuple[float, ...]:
    if len(parts) < count:
        raise ValueError(f"expected {count} values, got {len(parts)}")
    return tuple(float(p) for p in parts[:count])


class ObjImporter(AssetImporter[MeshData]):
    """
    Wavefront OBJ subset: v, vn, vt and triangular f records.

    Every face corner becomes its own vertex (flat-expanded, no welding),
    and the index buffer lists them in file order so winding is preserved.
    Other record kinds (o, g, s, usemtl, ...) are skipped.
    """

    def import_file(self, path: Path) -> MeshData:
        with open(path, "r", encoding="utf-8") as f:
            mesh = self.parse(f, name=str(path))
        return mesh

    def parse(self, source: str | Iterable[str], name: str = "<string>") -> MeshData:
        if isinstance(source, str):
            source = source.splitlines()

        pools = AttributePools()
        vertices: List[Vertex] = []
        indices: List[int] = []
        dropped_corners = 0

        for line_number, raw in enumerate(source, start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            parts = line.split()
            tag = parts[0]

            try:
                if tag == "v":
                    px, py, pz = _floats(parts[1:], 3)
                    pools.positions.append((px, py, pz))

                elif tag == "vn":
                    nx, ny, nz = _floats(parts[1:], 3)
                    pools.normals.append((nx, ny, nz))

                elif tag == "vt":
                    u, v = _floats(parts[1:], 2)
                    pools.tex_coords.append((u, v))

                elif tag == "f":
                    corners = parts[1:]
                    if len(corners) < FACE_CORNERS:
                        raise ValueError(
                            f"face needs {FACE_CORNERS} references, "
                            f"got {len(corners)}"
                        )
                    dropped_corners += len(corners) - FACE_CORNERS

                    for token in corners[:FACE_CORNERS]:
                        vertices.append(
                            resolve_face_vertex_reference(pools, token)
                        )
                        indices.append(len(vertices) - 1)

            except FaceIndexError as e:
                raise FaceIndexError(
                    e.index, e.pool_size, line_number=line_number
                ) from None
            except ValueError as e:
                raise MalformedRecordError(line_number, line, str(e)) from e

        if not vertices or not indices:
            raise EmptyMeshError(f"No geometry found in OBJ: {name}")

        if dropped_corners:
            logger.debug(
                "[%s] ignored %d face references beyond the first three",
                name,
                dropped_corners,
            )

        mesh = MeshData(
            vertices=tuple(vertices),
            indices=tuple(indices),
            aabb=_bounds(pools.positions),
        )

        logger.info(
            "Loaded OBJ file: %s (%d vertices, %d indices, %d triangles)",
            name,
            mesh.vertex_count,
            mesh.index_count,
            mesh.triangle_count,
        )
        logger.debug(
            "  raw data: %d pos | %d norms | %d uvs",
            len(pools.positions),
            len(pools.normals),
            len(pools.tex_coords),
        )
        (min_x, min_y, min_z), (max_x, max_y, max_z) = mesh.aabb
        logger.debug("  bounds X: %.3f to %.3f", min_x, max_x)
        logger.debug("  bounds Y: %.3f to %.3f", min_y, max_y)
        logger.debug("  bounds Z: %.3f to %.3f", min_z, max_z)

        return mesh


def _bounds(positions: List[Vec3]) -> Tuple[Vec3, Vec3]:
    xs = [p[0] for p in positions]
    ys = [p[1] for p in positions]
    zs = [p[2] for p in positions]
    return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))
