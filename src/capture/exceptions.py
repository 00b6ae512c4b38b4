"""
Exceptions raised by the capture subsystem.

Command execution problems are values (see models.command); only the
failures below are raised.
"""


class NetdiagError(Exception):
    """Base class for netdiag errors."""


class CaptureSpawnError(NetdiagError):
    """The capture tool could not be started."""

    def __init__(self, program: str, message: str):
        self.program = program
        self.message = message
        super().__init__(f"Failed to start {program}: {message}")


class SessionStateError(NetdiagError):
    """A capture session was used outside its lifecycle."""


class StreamReadError(NetdiagError):
    """Reading the capture tool's output failed."""
