# wren/core/application.py
from __future__ import annotations

import logging
import sys
from enum import Enum, auto
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

import pygame

from wren.assets.importers.mesh import ObjImporter
from wren.assets.importers.texture import TextureImporter
from wren.assets.types import MeshData, TextureData
from wren.camera import Camera
from wren.core.timing import ElapsedClock
from wren.errors import (
    MeshParseError,
    ShaderCompileError,
    StartupError,
    TextureLoadError,
)
from wren.graphics.core.settings import AssetSettings, ViewerSettings
from wren.graphics.core.window import Window
from wren.graphics.renderer import Renderer
from wren.graphics.transforms import FrameTransforms, TransformPipeline
from wren.input.handler import InputHandler
from wren.logging_config import setup_logging

logger = logging.getLogger(__name__)


class Surface(Protocol):
    def poll_events(self) -> List[pygame.event.Event]: ...
    def is_key_pressed(self, key: int) -> bool: ...
    def present(self) -> None: ...


class Backend(Protocol):
    def draw(self, frame: FrameTransforms) -> None: ...


class LoopState(Enum):
    RUNNING = auto()
    STOPPED = auto()


class RenderLoop:
    """
    Single-threaded frame driver.

    Each tick: poll input (pointer deltas go straight to the camera), check
    for exit, sample elapsed time, build the frame transforms, draw, present.
    Backend exceptions are not caught and end the loop.
    """

    def __init__(
        self,
        window: Surface,
        backend: Backend,
        camera: Camera,
        pipeline: TransformPipeline,
        input_handler: Optional[InputHandler] = None,
        clock: Optional[ElapsedClock] = None,
    ):
        self.window = window
        self.backend = backend
        self.camera = camera
        self.pipeline = pipeline
        self.input = input_handler or InputHandler()
        self.clock = clock or ElapsedClock()

        self.state = LoopState.STOPPED
        self.frame_index = 0

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def stop(self) -> None:
        self.state = LoopState.STOPPED

    def tick(self) -> None:
        for event in self.window.poll_events():
            delta = self.input.process_event(event)
            if delta is not None:
                self.camera.apply_pointer_delta(*delta)

        if self.input.quit_requested or self.window.is_key_pressed(
            pygame.K_ESCAPE
        ):
            self.stop()
            return

        frame = self.pipeline.compute_frame(self.clock.elapsed, self.camera)
        self.backend.draw(frame)
        self.window.present()
        self.frame_index += 1

    def run(self) -> None:
        self.state = LoopState.RUNNING
        self.clock.start()

        try:
            while self.state is LoopState.RUNNING:
                self.tick()
        except Exception:
            self.state = LoopState.STOPPED
            raise

        logger.info("Render loop stopped after %d frames", self.frame_index)


def load_assets(assets: AssetSettings) -> tuple[MeshData, Optional[TextureData]]:
    """
    Parse the mesh (fatal on failure) and decode the texture (not fatal:
    None is returned and the renderer binds a placeholder).
    """
    mesh = ObjImporter().import_file(assets.mesh_path)

    texture: Optional[TextureData] = None
    try:
        texture = TextureImporter().import_file(assets.texture_path)
    except TextureLoadError as e:
        logger.warning("%s; continuing with an empty texture", e)

    return mesh, texture


def _log_controls() -> None:
    logger.info("=== Controls ===")
    logger.info("Mouse: Look around")
    logger.info("ESC: exit")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point. ``argv`` excludes the program name; its only (optional)
    element overrides the mesh path. Returns the process exit code.
    """
    setup_logging()

    args = list(sys.argv[1:] if argv is None else argv)
    settings = ViewerSettings()
    if args:
        settings.assets.mesh_path = Path(args[0])

    try:
        mesh, texture = load_assets(settings.assets)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read OBJ file: %s", e)
        return 1
    except MeshParseError as e:
        logger.error("OBJ load failed: %s", e)
        return 1

    try:
        window = Window(settings.window)
    except StartupError as e:
        logger.error("%s", e)
        return 1

    try:
        try:
            renderer = Renderer(
                window.ctx, mesh, texture, clear_color=settings.clear_color
            )
        except ShaderCompileError as e:
            logger.error("Shader compilation failed:\n%s", e.log)
            return 1
        except (OSError, ValueError) as e:
            # missing or empty packaged shader source
            logger.error("Failed to load shader sources: %s", e)
            return 1

        try:
            pipeline = TransformPipeline(
                aspect_ratio=window.aspect_ratio,
                model_settings=settings.model,
                projection_settings=settings.projection,
            )
            loop = RenderLoop(window, renderer, Camera(), pipeline)

            _log_controls()
            loop.run()
        except Exception:
            logger.exception("Fatal error in render loop")
            return 1
        finally:
            renderer.release()
    finally:
        window.destroy()

    return 0
