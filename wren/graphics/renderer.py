# wren/graphics/renderer.py
import logging
from typing import Optional

import moderngl

from wren.assets.defaults import DefaultShaders
from wren.assets.importers.shader import ShaderImporter
from wren.assets.types import MeshData, TextureData
from wren.graphics.resources.buffer import GPUMesh
from wren.graphics.resources.shader import ShaderManager
from wren.graphics.resources.texture import GPUTexture
from wren.graphics.transforms import FrameTransforms
from wren.types import Color4

logger = logging.getLogger(__name__)

TEXTURE_UNIT = 0


class Renderer:
    """
    Owns every GPU object of the viewer and issues the one indexed draw
    per frame.

    Raises ShaderCompileError from the constructor if the default shaders
    fail to compile or link.
    """

    def __init__(
        self,
        ctx: moderngl.Context,
        mesh: MeshData,
        texture: Optional[TextureData],
        clear_color: Color4 = (0.2, 0.3, 0.3, 1.0),
    ):
        self.ctx = ctx
        self.clear_color = clear_color

        self.shader_manager = ShaderManager(ctx)

        importer = ShaderImporter()
        vs = importer.import_file(DefaultShaders.VIEWER_VS.path)
        fs = importer.import_file(DefaultShaders.VIEWER_FS.path)
        self.program = self.shader_manager.get_program(vs.source, fs.source)

        self.mesh = GPUMesh(ctx, mesh)
        self.vao = self.mesh.get_vao(self.program)

        if texture is not None:
            self.texture = GPUTexture.from_data(ctx, texture)
        else:
            self.texture = GPUTexture.placeholder(ctx)

        self._u_model = self.program["u_model"]
        self._u_view = self.program["u_view"]
        self._u_proj = self.program["u_proj"]
        self.program["u_texture"].value = TEXTURE_UNIT

    def draw(self, frame: FrameTransforms) -> None:
        self.ctx.clear(*self.clear_color, depth=1.0)

        self.texture.use(TEXTURE_UNIT)

        # numpy is row-major, GLSL expects column-major
        self._u_model.write(frame.model.astype("f4").T.tobytes())
        self._u_view.write(frame.view.astype("f4").T.tobytes())
        self._u_proj.write(frame.projection.astype("f4").T.tobytes())

        self.vao.render(moderngl.TRIANGLES)

    def release(self) -> None:
        self.mesh.release()
        self.texture.release()
        self.shader_manager.release()
