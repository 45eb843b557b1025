# wren/input/handler.py
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from wren.types import PointerDelta


@dataclass
class PointerTracker:
    """
    Accumulates relative pointer motion into a virtual, unbounded position.

    With the pointer grabbed SDL pins the absolute position to the window
    edges, so only relative motion is trusted. The first report after start
    or a focus change only establishes the baseline and yields no delta, so
    the camera does not jump by whatever SDL accumulated in the meantime.
    """

    position: Optional[Tuple[float, float]] = None

    def move(self, rel_x: float, rel_y: float) -> PointerDelta:
        if self.position is None:
            self.position = (0.0, 0.0)
            return 0.0, 0.0

        x, y = self.position
        self.position = (x + rel_x, y + rel_y)
        return rel_x, rel_y

    def reset(self) -> None:
        self.position = None


class InputHandler:
    def __init__(self) -> None:
        self.pointer = PointerTracker()
        self.quit_requested = False

    def process_event(self, event: pygame.event.Event) -> Optional[PointerDelta]:
        """
        Feed Pygame events here.
        Returns the pointer delta for motion events, None otherwise.
        """
        if event.type == pygame.QUIT:
            self.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.quit_requested = True

        elif event.type == pygame.MOUSEMOTION:
            rel_x, rel_y = event.rel
            return self.pointer.move(float(rel_x), float(rel_y))

        elif event.type == pygame.WINDOWFOCUSGAINED:
            # Motion reported while unfocused is not ours to apply
            self.pointer.reset()

        return None
