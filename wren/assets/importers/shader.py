# wren/assets/importers/shader.py
from pathlib import Path

from wren.assets.importers.base import AssetImporter
from wren.assets.types import ShaderSource


class ShaderImporter(AssetImporter[ShaderSource]):
    def import_file(self, path: Path) -> ShaderSource:
        source = Path(path).read_text(encoding="utf-8")
        if not source.strip():
            raise ValueError(f"Shader source is empty: {path}")

        return ShaderSource(source=source, path=str(path))
