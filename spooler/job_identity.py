import threading
import time
from typing import Callable


class JobIdentityGenerator:
    """
    Issues job identities from the wall clock at nanosecond resolution.

    Identities are strictly increasing within one process: when the clock
    has not advanced past the last issued value (coarse clocks, two requests
    in the same tick, clock stepping backwards) the last value + 1 is used.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns):
        self._clock = clock
        self._lock = threading.Lock()
        self._last = 0

    def new_identity(self) -> str:
        with self._lock:
            now = self._clock()
            if now <= self._last:
                now = self._last + 1
            self._last = now
            return str(now)
