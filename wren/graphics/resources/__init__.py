# wren/graphics/resources/__init__.py
from wren.graphics.resources.buffer import GPUMesh
from wren.graphics.resources.shader import ShaderManager
from wren.graphics.resources.texture import GPUTexture

__all__ = [
    "ShaderManager",
    "GPUMesh",
    "GPUTexture",
]
