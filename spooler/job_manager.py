"""
Print-job lifecycle manager

Single owner of the per-job flow:

    RECEIVED -> SPOOLED -> DISPATCH_ATTEMPTED -> DISPATCHED | DISPATCH_FAILED

with a timer edge SPOOLED -> EXPIRED that fires after the retention window
whatever the dispatch outcome.

Goals:
- Every accepted job is on disk before the print command sees it
- Every spooled job gets exactly one deferred deletion
- A failed dispatch keeps its spool file until the window elapses, so the
  payload can still be inspected or re-sent by hand
- Orphans from an unclean shutdown are swept before requests are accepted
"""

import logging
from dataclasses import dataclass
from datetime import datetime, UTC
from pathlib import Path
from typing import Optional

from spooler.config import Config
from spooler.dispatcher import Dispatcher, sink_for_platform
from spooler.errors import DispatchError, SchedulerError
from spooler.job_identity import JobIdentityGenerator
from spooler.spool_store import SpoolStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrintJob:
    identity: str
    path: Path
    size: int
    created_at: datetime


class PrintJobManager:
    def __init__(
            self,
            store: SpoolStore,
            dispatcher: Dispatcher,
            identities: Optional[JobIdentityGenerator] = None,
    ):
        self.store = store
        self.dispatcher = dispatcher
        self.identities = identities or JobIdentityGenerator()

    @classmethod
    def from_config(cls, config: Config) -> "PrintJobManager":
        store = SpoolStore(config.spool_dir, retention=config.retention_seconds)
        return cls(store, Dispatcher(sink_for_platform(config.printer_name)))

    # ---------- Lifecycle ----------

    def recover_orphans(self) -> list:
        """Remove spool files left behind by a previous run. Call once, before serving."""
        self.store.ensure_directory()
        removed = self.store.sweep_stale()
        if removed:
            logger.info("Removed %d orphaned print job file(s) from %s", len(removed), self.store.directory)
        return removed

    def shutdown(self) -> None:
        self.store.scheduler.shutdown()

    # ---------- Public API ----------

    def handle_submission(self, payload: bytes) -> PrintJob:
        """
        Spool `payload`, schedule its deletion and print it.

        Raises DirectoryError, SpoolWriteError or SchedulerError before
        anything is dispatched, and DispatchError after the job was spooled.
        """
        logger.debug("Received print job request (%d bytes).", len(payload))
        self.store.ensure_directory()

        identity = self.identities.new_identity()
        path = self.store.write(identity, payload)
        job = PrintJob(
            identity=identity,
            path=path,
            size=len(payload),
            created_at=datetime.now(UTC),
        )
        logger.debug("Created print job file: %s", path)

        try:
            self.store.schedule_delete(path)
        except SchedulerError:
            # never leave a spooled job without a pending deletion
            self.store.delete(path)
            raise

        try:
            self.dispatcher.dispatch(path)
        except DispatchError as e:
            logger.error("Print job %s failed: %s", job.identity, e)
            raise

        return job

    def stats(self) -> dict:
        return {
            "dispatched": self.dispatcher.dispatched,
            "pending_cleanups": self.store.scheduler.pending(),
        }
