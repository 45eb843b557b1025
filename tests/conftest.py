from dataclasses import dataclass, field
from typing import List

import pygame
import pytest

from wren.camera import Camera

TRIANGLE_OBJ = """
v 0 0 0
v 1 0 0
v 0 1 0
vn 0 0 1
f 1//1 2//1 3//1
"""

TEXTURED_QUAD_OBJ = """
# two triangles sharing an edge
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 1.0 1.0 0.0
v 0.0 1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0
vn 0.0 0.0 1.0
f 1/1/1 2/2/1 3/3/1
f 1/1/1 3/3/1 4/4/1
"""


@dataclass
class FakeWindow:
    """Stands in for the pygame window: scripted events per tick."""

    frames: List[List[pygame.event.Event]] = field(default_factory=list)
    held_keys: set = field(default_factory=set)
    presented: int = 0

    def poll_events(self) -> List[pygame.event.Event]:
        if self.frames:
            return self.frames.pop(0)
        return []

    def is_key_pressed(self, key: int) -> bool:
        return key in self.held_keys

    def present(self) -> None:
        self.presented += 1


@dataclass
class FakeBackend:
    frames: list = field(default_factory=list)

    def draw(self, frame) -> None:
        self.frames.append(frame)


@pytest.fixture
def camera():
    """Returns a camera in its startup pose."""
    return Camera()


@pytest.fixture
def obj_file(tmp_path):
    """Writes OBJ text to a temp file and returns its path."""

    def _write(content: str, name: str = "mesh.obj"):
        f = tmp_path / name
        f.write_text(content)
        return f

    return _write


def motion(dx: float, dy: float, pos=(400, 300)) -> pygame.event.Event:
    return pygame.event.Event(
        pygame.MOUSEMOTION, pos=pos, rel=(dx, dy), buttons=(0, 0, 0)
    )


def key_down(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="", scancode=0)
