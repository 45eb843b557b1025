# wren/graphics/resources/texture.py
from __future__ import annotations

import moderngl

from wren.assets.types import TextureData


class GPUTexture:
    """
    Wrapper around moderngl.Texture.
    """

    def __init__(self, handle: moderngl.Texture, width: int, height: int):
        self.handle = handle
        self.width = width
        self.height = height

    @classmethod
    def from_data(cls, ctx: moderngl.Context, data: TextureData) -> GPUTexture:
        if data.components not in (1, 3, 4):
            raise ValueError(f"Unsupported component count {data.components}")

        handle = ctx.texture(
            size=(data.width, data.height),
            components=data.components,
            data=data.data,
        )
        handle.repeat_x = True
        handle.repeat_y = True
        handle.filter = (moderngl.LINEAR_MIPMAP_LINEAR, moderngl.LINEAR)
        handle.build_mipmaps()

        return cls(handle, data.width, data.height)

    @classmethod
    def placeholder(cls, ctx: moderngl.Context) -> GPUTexture:
        """1x1 RGBA texture with undefined contents, for failed loads."""
        handle = ctx.texture(size=(1, 1), components=4)
        return cls(handle, 1, 1)

    def use(self, location: int = 0) -> None:
        self.handle.use(location)

    def release(self) -> None:
        self.handle.release()
