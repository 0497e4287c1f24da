"""
Spool directory management.

Owns the on-disk representation of print jobs: one `printjob_<identity>.prn`
file per job under a single directory.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from spooler.cleanup_scheduler import CleanupScheduler
from spooler.errors import DirectoryError, SpoolWriteError

logger = logging.getLogger(__name__)

SPOOL_PREFIX = "printjob_"
SPOOL_SUFFIX = ".prn"
DEFAULT_RETENTION = 3600.0  # seconds


class SpoolStore:
    def __init__(
            self,
            directory: Path,
            *,
            retention: float = DEFAULT_RETENTION,
            scheduler: Optional[CleanupScheduler] = None,
    ) -> None:
        self.directory = Path(directory)
        self.retention = retention
        self.scheduler = scheduler or CleanupScheduler(self.delete)

    @staticmethod
    def file_name(identity: str) -> str:
        return f"{SPOOL_PREFIX}{identity}{SPOOL_SUFFIX}"

    def path_for(self, identity: str) -> Path:
        return self.directory / self.file_name(identity)

    def ensure_directory(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryError(f"Error creating directory {self.directory}: {e}") from e

    def sweep_stale(self) -> List[Path]:
        """Delete every spool file in the directory. Returns the files removed."""
        logger.debug("Starting cleanup of print jobs...")
        removed = []
        for path in sorted(self.directory.glob(f"*{SPOOL_SUFFIX}")):
            if not path.is_file():
                continue
            if self.delete(path):
                logger.debug("Deleted leftover print job file: %s", path)
                removed.append(path)
        logger.debug("Cleanup of print jobs completed.")
        return removed

    def write(self, identity: str, payload: bytes) -> Path:
        path = self.path_for(identity)
        try:
            # "x" refuses to replace a job that already holds this identity
            with open(path, "xb") as f:
                f.write(payload)
        except FileExistsError as e:
            raise SpoolWriteError(f"Print job file already exists: {path}") from e
        except OSError as e:
            self._discard(path)
            raise SpoolWriteError(f"Error writing print job file {path}: {e}") from e
        return path

    def schedule_delete(self, path: Path, after: Optional[float] = None) -> None:
        self.scheduler.schedule(path, self.retention if after is None else after)

    def delete(self, path: Path) -> bool:
        """
        Remove `path` now. Returns True when a file was removed.

        A file that is already gone is not an error. Any other failure is
        logged and swallowed; cleanup never fails the caller.
        """
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Print job file already removed: %s", path)
            return False
        except OSError as e:
            logger.warning("Failed to delete print job file: %s, error: %s", path, e)
            return False
        logger.debug("Print job file deleted: %s", path)
        return True

    def _discard(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError:
            return
