import time
from typing import Callable, Optional


class Timer:
    """Single start/stop interval on a monotonic clock."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._start: float = 0.0
        self._end: Optional[float] = None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self):
        self._start = self._clock()
        self._end = None
        self._running = True

    def stop(self):
        if self._running:
            self._end = self._clock()
            self._running = False

    def elapsed_seconds(self) -> float:
        if self._running:
            return max(0.0, self._clock() - self._start)
        if self._end is not None:
            return max(0.0, self._end - self._start)
        return 0.0
