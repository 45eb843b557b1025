# wren/assets/__init__.py
from wren.assets.defaults import (
    DEFAULT_MESH_PATH,
    DEFAULT_TEXTURE_PATH,
    DefaultShaders,
)
from wren.assets.importers.mesh import (
    AttributePools,
    ObjImporter,
    resolve_face_vertex_reference,
)
from wren.assets.importers.shader import ShaderImporter
from wren.assets.importers.texture import TextureImporter
from wren.assets.types import (
    MeshData,
    ShaderSource,
    TextureData,
    Vertex,
    VertexLayout,
)

__all__ = [
    "AttributePools",
    "ObjImporter",
    "ShaderImporter",
    "TextureImporter",
    "resolve_face_vertex_reference",
    "MeshData",
    "TextureData",
    "ShaderSource",
    "Vertex",
    "VertexLayout",
    "DefaultShaders",
    "DEFAULT_MESH_PATH",
    "DEFAULT_TEXTURE_PATH",
]
