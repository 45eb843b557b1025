# wren/graphics/resources/buffer.py
from typing import Dict

import moderngl

from wren.assets.types import MeshData


class GPUMesh:
    """
    Holds the GPU resources for a mesh: VBO, IBO and one VAO per program.
    """

    def __init__(self, ctx: moderngl.Context, data: MeshData) -> None:
        self._ctx = ctx
        self.layout = data.vertex_layout

        self.vbo = ctx.buffer(data.vertex_bytes)
        self.ibo = ctx.buffer(data.index_bytes)

        self._vaos: Dict[int, moderngl.VertexArray] = {}

    def get_vao(self, program: moderngl.Program) -> moderngl.VertexArray:
        """Retrieves or creates the indexed VAO for this program."""
        key = program.glo

        if key in self._vaos:
            return self._vaos[key]

        content = [(self.vbo, self.layout.format, *self.layout.attributes)]
        # Attributes the compiler optimised away (e.g. in_normal with an
        # unlit fragment shader) are skipped instead of raising.
        vao = self._ctx.vertex_array(
            program,
            content,
            index_buffer=self.ibo,
            index_element_size=4,
            skip_errors=True,
        )

        self._vaos[key] = vao
        return vao

    def release(self) -> None:
        for vao in self._vaos.values():
            vao.release()
        self._vaos.clear()

        self.vbo.release()
        self.ibo.release()
