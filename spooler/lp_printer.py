# spooler/lp_printer.py

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from spooler.printer_base import PrintSink


class LpPrintSink(PrintSink):
    """
    CUPS / System V sink using the `lp` command.

    With no printer name the job goes to the system default destination,
    otherwise `-d <printer>` targets the named queue.
    """

    def __init__(
            self,
            printer_name: str = "",
            lp_path: str = "lp",
            extra_args: Optional[Sequence[str]] = None,
    ) -> None:
        super().__init__(printer_name)
        self._lp_path = lp_path
        self._extra_args = list(extra_args or [])

    def command_for(self, file_path: Path) -> List[str]:
        cmd = [self._lp_path]
        if self.printer_name:
            cmd += ["-d", self.printer_name]
        return [*cmd, *self._extra_args, str(file_path)]
