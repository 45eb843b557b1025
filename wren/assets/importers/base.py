# wren/assets/importers/base.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")  # CPU-side payload (MeshData, TextureData, ShaderSource)


class AssetImporter(ABC, Generic[T]):
    """
    Turns one file into a CPU-side payload. Importers never touch the GL
    context, so they run (and are tested) without a window.
    """

    @abstractmethod
    def import_file(self, path: Path) -> T: ...
