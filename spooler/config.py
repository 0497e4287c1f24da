"""
Process configuration, read once from a JSON document at startup.
"""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from spooler.errors import ConfigError

DEFAULT_CONFIG_PATH = "config.json"


class Config(BaseModel):
    """
    Server settings. Immutable once loaded.

    Unknown keys in the document are ignored; missing keys take the defaults below.
    """

    model_config = ConfigDict(frozen=True)

    https: StrictBool = False
    printer_name: StrictStr = ""
    debug: StrictBool = False
    print_dir: str = Field("temp-files", min_length=1, strict=True)
    port: int = Field(49155, ge=1, le=65535, strict=True)
    host: StrictStr = "0.0.0.0"
    retention_seconds: float = Field(3600.0, ge=0, strict=True)
    cert_file: StrictStr = "./certificates/server.crt"
    key_file: StrictStr = "./certificates/server.key"

    @property
    def spool_dir(self) -> Path:
        return Path(self.print_dir)

    @property
    def printer_label(self) -> str:
        return self.printer_name or "Default Printer"

    def check_certificates(self) -> None:
        """Raise ConfigError when HTTPS is enabled but key material is missing."""
        if not self.https:
            return
        for label, path in (("certificate", self.cert_file), ("key", self.key_file)):
            if not Path(path).is_file():
                raise ConfigError(f"HTTPS enabled but {label} file not found: {path}")


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e

    try:
        return Config.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
