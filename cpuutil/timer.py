"""Monotonic elapsed-time measurement."""

from __future__ import annotations

import time
from typing import Callable


class ElapsedTimer:
    """Measures time since creation or the last restart, in microseconds."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._start_ns = clock()

    def restart(self) -> None:
        """Start measuring from now."""
        self._start_ns = self._clock()

    def elapsed_usec(self) -> int:
        """Whole microseconds since the start."""
        return (self._clock() - self._start_ns) // 1000