"""Wall-clock timer that reports in milliseconds."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO


@dataclass
class Timer:
    """Measures elapsed time; ``clock`` returns seconds."""

    clock: Callable[[], float] = time.perf_counter
    stream: Optional[TextIO] = None
    _start: float = field(default=0.0, init=False, repr=False)
    _elapsed: float = field(default=0.0, init=False, repr=False)

    @property
    def elapsed_ms(self) -> float:
        """Accumulated time from pauses, in milliseconds."""
        return self._elapsed * 1000.0

    def _emit(self, msg: str, ms: float) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        print(f"[{msg}{ms:g}ms]", file=out)

    def start(self) -> None:
        """Clear the accumulated time and start measuring."""
        self._elapsed = 0.0
        self._start = self.clock()

    def stop(self, msg: str) -> float:
        """Print and return the milliseconds since the last start."""
        ms = (self.clock() - self._start) * 1000.0
        self._emit(msg, ms)
        return ms

    def reset(self) -> None:
        """Clear the accumulated time."""
        self._elapsed = 0.0

    def restart(self) -> None:
        """Begin a new interval without clearing the accumulated time."""
        self._start = self.clock()

    def pause(self) -> None:
        """Add the time since the last (re)start to the accumulated time."""
        self._elapsed += self.clock() - self._start

    def report(self, msg: str) -> None:
        """Print the accumulated time."""
        self._emit(msg, self.elapsed_ms)