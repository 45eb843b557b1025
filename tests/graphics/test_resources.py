import moderngl
import pytest

from tests.conftest import TEXTURED_QUAD_OBJ
from wren.assets.importers.mesh import ObjImporter
from wren.errors import ShaderCompileError
from wren.graphics.resources.buffer import GPUMesh
from wren.graphics.resources.shader import ShaderManager


class FakeResource:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)
        self.released = False

    def release(self) -> None:
        self.released = True


class FakeContext:
    """Records the GL objects the resource wrappers ask for."""

    def __init__(self, compile_log: str = ""):
        self.compile_log = compile_log
        self.buffers = []
        self.programs = []
        self.vertex_arrays = []

    def buffer(self, data):
        self.buffers.append(FakeResource(data=data))
        return self.buffers[-1]

    def program(self, vertex_shader, fragment_shader):
        if self.compile_log:
            raise moderngl.Error(self.compile_log)
        self.programs.append(FakeResource(glo=len(self.programs) + 1))
        return self.programs[-1]

    def vertex_array(self, program, content, **kwargs):
        self.vertex_arrays.append(
            FakeResource(program=program, content=content, options=kwargs)
        )
        return self.vertex_arrays[-1]


@pytest.fixture
def quad_mesh():
    return ObjImporter().parse(TEXTURED_QUAD_OBJ)


def test_gpu_mesh_uploads_vertex_and_index_blobs(quad_mesh):
    ctx = FakeContext()

    GPUMesh(ctx, quad_mesh)

    vbo, ibo = ctx.buffers
    assert vbo.data == quad_mesh.vertex_bytes
    assert ibo.data == quad_mesh.index_bytes


def test_gpu_mesh_builds_one_indexed_vao_per_program(quad_mesh):
    ctx = FakeContext()
    mesh = GPUMesh(ctx, quad_mesh)
    first, second = FakeResource(glo=1), FakeResource(glo=2)

    vao = mesh.get_vao(first)

    assert mesh.get_vao(first) is vao
    assert mesh.get_vao(second) is not vao
    assert len(ctx.vertex_arrays) == 2

    (binding,) = vao.content
    assert binding[0] is mesh.vbo
    assert binding[1:] == (quad_mesh.vertex_layout.format,) + tuple(
        quad_mesh.vertex_layout.attributes
    )
    assert vao.options["index_buffer"] is mesh.ibo
    assert vao.options["index_element_size"] == 4


def test_gpu_mesh_release_frees_everything(quad_mesh):
    ctx = FakeContext()
    mesh = GPUMesh(ctx, quad_mesh)
    vao = mesh.get_vao(FakeResource(glo=1))

    mesh.release()

    assert vao.released
    assert all(buf.released for buf in ctx.buffers)


def test_shader_manager_releases_every_program_it_built():
    ctx = FakeContext()
    manager = ShaderManager(ctx)

    a = manager.get_program("vs", "fs")
    b = manager.get_program("vs", "fs")
    manager.release()

    assert a is not b
    assert a.released and b.released


def test_shader_manager_keeps_driver_log_verbatim():
    log = "0:7(12): error: `in_uv' undeclared"
    manager = ShaderManager(FakeContext(compile_log=log))

    with pytest.raises(ShaderCompileError) as excinfo:
        manager.get_program("vs", "fs")

    assert excinfo.value.log == log
