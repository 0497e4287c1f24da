# spooler/windows_printer.py

from __future__ import annotations

from pathlib import Path
from typing import List

from spooler.printer_base import PrintSink


class WindowsPrintSink(PrintSink):
    """
    Windows sink.

    The default printer gets the file through `print`. A named printer
    (usually a share such as \\\\host\\LabelPrinter) receives the raw bytes
    via `copy`, which suits printers that accept raw PRN data.
    """

    def command_for(self, file_path: Path) -> List[str]:
        if not self.printer_name:
            return ["print", str(file_path)]
        return ["cmd", "/c", "copy", str(file_path), self.printer_name]
