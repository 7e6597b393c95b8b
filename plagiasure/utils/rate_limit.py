import threading
import time
from typing import Callable


class RateLimiter:
    """
    Enforces a minimum interval between successive calls from one client.
    The first call never waits. ``sleep`` and ``clock`` are injectable so
    tests can run without real delays.
    """

    def __init__(
        self,
        min_interval: float,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.min_interval = max(0.0, min_interval)
        self._sleep = sleep
        self._clock = clock
        self._last_call = None
        # Shared clients serve concurrent requests; one caller waits at a time.
        self._lock = threading.Lock()

    def wait(self) -> float:
        """Block until the next call is allowed; returns seconds slept."""
        with self._lock:
            slept = 0.0
            if self._last_call is not None:
                delta = self._clock() - self._last_call
                if delta < self.min_interval:
                    slept = self.min_interval - delta
                    self._sleep(slept)
            self._last_call = self._clock()
            return slept
