# wren/assets/defaults/__init__.py
from enum import StrEnum
from pathlib import Path

DEFAULTS_ROOT = Path(__file__).parent


class DefaultShaders(StrEnum):
    VIEWER_VS = "shaders/viewer.vert"
    VIEWER_FS = "shaders/viewer.frag"

    @property
    def path(self) -> Path:
        return DEFAULTS_ROOT / self.value


# Relative to the working directory
DEFAULT_MESH_PATH = Path("models") / "cat.obj"
DEFAULT_TEXTURE_PATH = Path("textures") / "cat.jpg"


__all__ = [
    "DEFAULTS_ROOT",
    "DefaultShaders",
    "DEFAULT_MESH_PATH",
    "DEFAULT_TEXTURE_PATH",
]
