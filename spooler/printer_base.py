# spooler/printer_base.py

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from spooler.errors import DispatchError

logger = logging.getLogger(__name__)


class PrintSink(ABC):
    """
    Abstract print sink.

    A sink knows one platform's convention for handing a file to the OS
    printing subsystem. The job manager never sees the command line; it only
    learns whether the hand-off succeeded.
    """

    def __init__(self, printer_name: str = "") -> None:
        self.printer_name = printer_name

    @abstractmethod
    def command_for(self, file_path: Path) -> List[str]:
        """Return the argv that prints `file_path` on the configured printer."""
        raise NotImplementedError

    def print_file(self, file_path: Path) -> None:
        """
        Run the print command and wait for it to exit.

        Raises DispatchError when the command cannot be started or exits
        non-zero. The error text carries the command's output.
        """
        cmd = self.command_for(file_path)
        logger.debug("Running command: %s", " ".join(cmd))

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise DispatchError(f"{cmd[0]} could not be started: {e}") from e

        if proc.returncode != 0:
            out = (proc.stdout or "") + (proc.stderr or "")
            raise DispatchError(
                f"{cmd[0]} failed (rc={proc.returncode}): {out.strip()}",
                returncode=proc.returncode,
            )
