import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class ElapsedClock:
    """
    Wall-clock seconds since start(). Animation driven from this runs at the
    same speed whatever the frame rate.
    """

    source: Callable[[], float] = field(default=time.perf_counter)

    _start: float | None = None

    def start(self) -> None:
        """Call this right before the main loop starts."""
        self._start = self.source()

    @property
    def elapsed(self) -> float:
        if self._start is None:
            return 0.0
        return self.source() - self._start
