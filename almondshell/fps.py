"""Frames-per-second counting and a small demo entry point."""

from __future__ import annotations

import os
import threading
import time
from typing import Callable, Optional, Sequence

from almondshell.scene import Scene


class FPSCounter:
    """Counts updates and publishes the count once more than a second has passed."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self.fps = 0
        self._count = 0
        self._last_time = clock()

    def update(self) -> int:
        """Record a frame and return the current FPS value."""
        with self._lock:
            self._count += 1
            now = self._clock()
            if int((now - self._last_time) * 1000) > 1000:
                self.fps = self._count
                self._count = 0
                self._last_time = now
            return self.fps


def run_fps_counter(counter: FPSCounter) -> int:
    """Update the counter once and print the FPS."""
    fps = counter.update()
    print(f"FPS: {fps}")
    return fps


class _CounterScene(Scene):
    def load(self) -> None:
        counter = FPSCounter()
        threads = [
            threading.Thread(target=run_fps_counter, args=(counter,))
            for _ in range(os.cpu_count() or 1)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()


def main(argv: Optional[Sequence[str]] = None) -> int:
    print("Running linux application...")
    _CounterScene().load()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())