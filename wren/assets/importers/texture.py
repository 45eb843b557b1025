# wren/assets/importers/texture.py
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from wren.assets.importers.base import AssetImporter
from wren.assets.types import TextureData
from wren.errors import TextureLoadError

logger = logging.getLogger(__name__)

# Pillow mode -> channel count the GPU side understands
MODE_COMPONENTS = {
    "L": 1,
    "RGB": 3,
    "RGBA": 4,
}

# Modes that decode losslessly to one of the above
_CONVERTIBLE = {
    "CMYK": "RGB",
    "YCbCr": "RGB",
    "1": "L",
}


class TextureImporter(AssetImporter[TextureData]):
    def import_file(self, path: Path) -> TextureData:
        try:
            with Image.open(path) as img:
                img.load()
                converted = self._normalize_mode(img)

                # GL samples with (0, 0) at the bottom-left
                converted = converted.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

                width, height = converted.size
                data = converted.tobytes()
        except (OSError, UnidentifiedImageError) as e:
            raise TextureLoadError(f"Failed to load texture {path}: {e}") from e

        components = MODE_COMPONENTS[converted.mode]
        logger.info(
            "Loaded texture: %s (%dx%d, %d channels)",
            path,
            width,
            height,
            components,
        )

        return TextureData(
            data=data, width=width, height=height, components=components
        )

    def _normalize_mode(self, img: Image.Image) -> Image.Image:
        mode = img.mode

        if mode in MODE_COMPONENTS:
            return img

        if mode == "P":
            has_alpha = "transparency" in img.info or img.palette.mode == "RGBA"
            return img.convert("RGBA" if has_alpha else "RGB")

        if mode in _CONVERTIBLE:
            return img.convert(_CONVERTIBLE[mode])

        # Two-channel (LA), 16-bit and float images would need a format the
        # shader does not expect. Refuse instead of guessing RGB.
        raise TextureLoadError(
            f"Unsupported texture layout {mode!r} "
            f"({len(img.getbands())} channels)"
        )
