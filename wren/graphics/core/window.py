# wren/graphics/core/window.py
import logging
from typing import List

import moderngl
import pygame

from wren.errors import StartupError
from wren.graphics.core.settings import WindowSettings

logger = logging.getLogger(__name__)


class Window:
    """
    Manages the OS Window and OpenGL Context.
    """

    def __init__(self, settings: WindowSettings):
        self.settings = settings

        try:
            if not pygame.get_init():
                pygame.init()

            major, minor = settings.gl_version
            pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, major)
            pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, minor)
            pygame.display.gl_set_attribute(
                pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
            )
            pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)
            pygame.display.gl_set_attribute(pygame.GL_DOUBLEBUFFER, 1)

            self._screen = pygame.display.set_mode(
                (settings.width, settings.height),
                pygame.OPENGL | pygame.DOUBLEBUF,
                vsync=int(settings.vsync),
            )
            pygame.display.set_caption(settings.title)

            self.ctx = moderngl.create_context(require=major * 100 + minor * 10)
        except (pygame.error, moderngl.Error, ValueError) as e:
            # create_context raises ValueError when the driver version is too low
            pygame.quit()
            raise StartupError(f"Failed to create window/context: {e}") from e

        self.ctx.enable(moderngl.DEPTH_TEST)

        if settings.grab_pointer:
            pygame.mouse.set_visible(False)
            pygame.event.set_grab(True)

        version = self.ctx.version_code
        logger.info(
            "OpenGL Context Created: %d.%d", version // 100, version % 100 // 10
        )

    @property
    def size(self) -> tuple[int, int]:
        return self._screen.get_size()

    @property
    def aspect_ratio(self) -> float:
        width, height = self.size
        return width / height

    def poll_events(self) -> List[pygame.event.Event]:
        return pygame.event.get()

    def is_key_pressed(self, key: int) -> bool:
        return bool(pygame.key.get_pressed()[key])

    def present(self) -> None:
        pygame.display.flip()

    def destroy(self) -> None:
        pygame.event.set_grab(False)
        pygame.mouse.set_visible(True)
        pygame.quit()
