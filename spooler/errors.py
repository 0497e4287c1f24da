"""
Error taxonomy for the print spool server.

Startup errors (ConfigError, DirectoryError) are fatal. Per-request errors
(SpoolWriteError, SchedulerError, DispatchError) become a 500 response
carrying str(error). Failed cleanup of a spool file is only ever logged and
has no exception type.
"""


class PrintServerError(Exception):
    """Base class for every error raised by the spooler package."""


class ConfigError(PrintServerError):
    """The configuration file is missing, unreadable or invalid."""


class DirectoryError(PrintServerError, OSError):
    """The spool directory could not be created."""


class SpoolWriteError(PrintServerError, OSError):
    """A job payload could not be written to the spool directory."""


class SchedulerError(PrintServerError):
    """The deferred deletion of a spool file could not be arranged."""


class DispatchError(PrintServerError):
    """The external print command failed or could not be started."""

    def __init__(self, message: str, *, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode
