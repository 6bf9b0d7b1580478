"""
clock.py: Strictly increasing timestamps for bid ordering
"""
import threading
import time


class MonotonicClock:
    def __init__(self):
        """
        Wall-clock nanosecond source that never repeats or goes backwards.
        Two reads always compare strictly, which keeps tie-breaks deterministic.
        """
        self._lock = threading.Lock()
        self._last = 0

    def __call__(self) -> int:
        with self._lock:
            now = time.time_ns()
            if now <= self._last:
                now = self._last + 1
            self._last = now
            return now


default_clock = MonotonicClock()
