# wren/graphics/resources/shader.py
import logging
from typing import List

import moderngl

from wren.errors import ShaderCompileError

logger = logging.getLogger(__name__)


class ShaderManager:
    """
    Compiles shader programs and owns them until release.
    """

    def __init__(self, ctx: moderngl.Context):
        self.ctx = ctx
        self._programs: List[moderngl.Program] = []

    def get_program(self, vert_source: str, frag_source: str) -> moderngl.Program:
        try:
            program = self.ctx.program(
                vertex_shader=vert_source, fragment_shader=frag_source
            )
        except moderngl.Error as e:
            # moderngl puts the driver's compile/link log in the message
            raise ShaderCompileError(str(e)) from e

        self._programs.append(program)
        return program

    def release(self) -> None:
        for prog in self._programs:
            prog.release()
        self._programs.clear()
