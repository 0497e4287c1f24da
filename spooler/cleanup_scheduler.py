import heapq
import itertools
import logging
import threading
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from spooler.errors import SchedulerError

logger = logging.getLogger(__name__)


class CleanupScheduler:
    """
    Deferred, fire-and-forget deletion of spool files.

    Entries sit in a heap ordered by due time and are drained by a single
    daemon worker, started on the first schedule() call. Entries are never
    cancelled individually; shutdown() drops whatever is still pending.
    The delete callable must tolerate files that are already gone.
    """

    def __init__(self, delete: Callable[[Path], object], clock: Callable[[], float] = time.monotonic):
        self._delete = delete
        self._clock = clock
        self._cond = threading.Condition()
        self._queue: List[Tuple[float, int, Path]] = []
        self._sequence = itertools.count()
        self._thread: Optional[threading.Thread] = None
        self._running = False

    def schedule(self, path: Path, delay: float) -> None:
        """Delete `path` no earlier than `delay` seconds from now. Raises SchedulerError."""
        with self._cond:
            self._ensure_worker()
            heapq.heappush(self._queue, (self._clock() + delay, next(self._sequence), path))
            self._cond.notify()
        logger.debug("Scheduled deletion of %s in %.0f seconds", path, delay)

    def pending(self) -> int:
        with self._cond:
            return len(self._queue)

    def shutdown(self) -> None:
        with self._cond:
            self._running = False
            self._queue.clear()
            self._thread = None
            self._cond.notify_all()

    # ---------- Worker ----------

    def _ensure_worker(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return

        thread = threading.Thread(target=self._run, name="spool-cleanup", daemon=True)
        self._running = True
        try:
            thread.start()
        except RuntimeError as e:
            self._running = False
            raise SchedulerError(f"Could not schedule print job file deletion: {e}") from e
        self._thread = thread

    def _run(self) -> None:
        while True:
            with self._cond:
                while self._running and (not self._queue or self._queue[0][0] > self._clock()):
                    timeout = self._queue[0][0] - self._clock() if self._queue else None
                    self._cond.wait(timeout)
                if not self._running:
                    return
                _due, _seq, path = heapq.heappop(self._queue)

            try:
                self._delete(path)
            except Exception:
                # Keep the worker alive; later entries still need deleting.
                logger.exception("Deferred deletion of %s failed", path)
