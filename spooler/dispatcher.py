"""
Hands spooled files to the platform print sink.
"""
from __future__ import annotations

import logging
import platform
import threading
from pathlib import Path
from typing import Optional

from spooler.lp_printer import LpPrintSink
from spooler.printer_base import PrintSink
from spooler.windows_printer import WindowsPrintSink

logger = logging.getLogger(__name__)


def sink_for_platform(printer_name: str = "", system: Optional[str] = None) -> PrintSink:
    system = system or platform.system()
    if system == "Windows":
        return WindowsPrintSink(printer_name)
    return LpPrintSink(printer_name)


class Dispatcher:
    def __init__(self, sink: PrintSink):
        self.sink = sink
        self._count_lock = threading.Lock()
        self._dispatched = 0

    @property
    def dispatched(self) -> int:
        """Dispatch attempts since startup. Telemetry only."""
        with self._count_lock:
            return self._dispatched

    def dispatch(self, path: Path) -> None:
        """Print `path` and block until the print command exits. Raises DispatchError."""
        # Counted on attempt, before the command's exit status is known
        with self._count_lock:
            self._dispatched += 1
            count = self._dispatched

        self.sink.print_file(path)
        logger.debug(
            "Print job sent to printer: %s (%d dispatched)",
            self.sink.printer_name or "Default Printer",
            count,
        )
