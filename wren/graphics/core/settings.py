# wren/graphics/core/settings.py
from dataclasses import dataclass, field
from pathlib import Path

from wren.assets.defaults import DEFAULT_MESH_PATH, DEFAULT_TEXTURE_PATH
from wren.types import Color4, Vec3


@dataclass(slots=True)
class WindowSettings:
    width: int = 800
    height: int = 600
    title: str = "Wren - OBJ Viewer"
    gl_version: tuple[int, int] = (3, 3)
    vsync: bool = True
    grab_pointer: bool = True

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Window size must be positive, got {self.width}x{self.height}"
            )

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass(slots=True)
class ProjectionSettings:
    fov_degrees: float = 45.0  # vertical
    near: float = 0.1
    far: float = 100.0

    def __post_init__(self) -> None:
        if not 0.0 < self.fov_degrees < 180.0:
            raise ValueError(f"fov must be in (0, 180), got {self.fov_degrees}")
        if not 0.0 < self.near < self.far:
            raise ValueError(
                f"expected 0 < near < far, got near={self.near} far={self.far}"
            )


@dataclass(slots=True)
class ModelSettings:
    """
    Placement of the single model. Applied as
    translate -> spin about Y -> orientation fix about X -> scale.
    """

    offset: Vec3 = (0.0, -1.5, 0.0)
    spin_degrees_per_second: float = 30.0
    orientation_fix_degrees: float = -90.0  # Z-up asset to Y-up world
    scale: float = 0.05


@dataclass(slots=True)
class AssetSettings:
    mesh_path: Path = DEFAULT_MESH_PATH
    texture_path: Path = DEFAULT_TEXTURE_PATH


@dataclass(slots=True)
class ViewerSettings:
    """
    The master configuration object handed to the viewer at startup.
    """

    window: WindowSettings = field(default_factory=WindowSettings)
    projection: ProjectionSettings = field(default_factory=ProjectionSettings)
    model: ModelSettings = field(default_factory=ModelSettings)
    assets: AssetSettings = field(default_factory=AssetSettings)

    clear_color: Color4 = (0.2, 0.3, 0.3, 1.0)
