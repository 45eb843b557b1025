# wren/graphics/core/__init__.py
from wren.graphics.core.settings import (
    AssetSettings,
    ModelSettings,
    ProjectionSettings,
    ViewerSettings,
    WindowSettings,
)
from wren.graphics.core.window import Window

__all__ = [
    "Window",
    "ViewerSettings",
    "WindowSettings",
    "ProjectionSettings",
    "ModelSettings",
    "AssetSettings",
]
