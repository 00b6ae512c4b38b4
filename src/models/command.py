"""
Result types for external command execution.

A CommandResult is one of three variants. Callers branch on the concrete
type (or on ``ok``) instead of catching exceptions.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union


def _lossy(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class CommandSuccess:
    """Process ran and exited with status 0."""
    stdout: bytes = b""

    ok = True

    @property
    def text(self) -> str:
        return _lossy(self.stdout)


@dataclass(frozen=True)
class CommandFailure:
    """Process ran and exited with a non-zero status."""
    stderr: bytes = b""
    returncode: int = 1

    ok = False

    @property
    def text(self) -> str:
        return _lossy(self.stderr)


@dataclass(frozen=True)
class SpawnError:
    """Process could not be started (missing or not executable)."""
    message: str

    ok = False

    @property
    def text(self) -> str:
        return self.message


CommandResult = Union[CommandSuccess, CommandFailure, SpawnError]


@dataclass(frozen=True)
class DiagnosticCheck:
    """One entry of the diagnostics battery."""
    description: str
    program: str
    args: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Ensure args is a tuple (immutable)
        if not isinstance(self.args, tuple):
            object.__setattr__(self, 'args', tuple(self.args))
