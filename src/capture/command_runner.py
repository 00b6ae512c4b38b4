"""
External command execution.

Every call spawns exactly one process, waits for it, and folds the outcome
into a CommandResult. Nothing here raises for a missing program or a
non-zero exit.
"""
import logging
import subprocess
from typing import Sequence

from models.command import CommandResult, CommandSuccess, CommandFailure, SpawnError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Runs external programs and reports their result as a value."""

    def run(self, program: str, args: Sequence[str] = ()) -> CommandResult:
        cmd = [program, *args]
        logger.debug("exec: %s", " ".join(cmd))

        try:
            completed = subprocess.run(cmd, capture_output=True, shell=False)
        except (OSError, ValueError) as e:
            # FileNotFoundError, PermissionError, embedded NUL in an argument, ...
            logger.debug("spawn failed for %s: %s", program, e)
            return SpawnError(message=f"{program}: {getattr(e, 'strerror', None) or e}")

        if completed.returncode == 0:
            return CommandSuccess(stdout=completed.stdout or b"")

        logger.debug("%s exited with %d", program, completed.returncode)
        return CommandFailure(stderr=completed.stderr or b"", returncode=completed.returncode)
