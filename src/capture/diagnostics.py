"""
Fixed battery of network connectivity checks.
"""
import logging
import time
from typing import Callable, Iterable, List, Optional, Tuple

from models.command import CommandResult, DiagnosticCheck
from .command_runner import CommandRunner

logger = logging.getLogger(__name__)

DEFAULT_CHECKS: Tuple[DiagnosticCheck, ...] = (
    DiagnosticCheck("Pinging Google DNS Server (8.8.8.8)", "ping", ("-c", "4", "8.8.8.8")),
    DiagnosticCheck("Fetching Public IP Address", "curl", ("ifconfig.me",)),
    DiagnosticCheck("Fetching Private IP Address", "sh", ("-c", "ifconfig -a | grep 'inet '")),
    DiagnosticCheck("Checking Established Connections", "sh", ("-c", "netstat -an | grep 'ESTABLISHED'")),
    DiagnosticCheck("Running Traceroute to Google", "sh", ("-c", "traceroute google.com")),
    DiagnosticCheck("Displaying Routing Table", "netstat", ("-rn", "-f", "inet")),
)


class DiagnosticsRunner:
    """Runs checks one after another; a failing check never stops the battery."""

    def __init__(self,
                 runner: Optional[CommandRunner] = None,
                 on_start: Optional[Callable[[DiagnosticCheck], None]] = None,
                 on_result: Optional[Callable[[DiagnosticCheck, CommandResult], None]] = None,
                 pause: float = 1.0):
        self._runner = runner or CommandRunner()
        self._on_start = on_start
        self._on_result = on_result
        self._pause = pause

    def run(self, checks: Iterable[DiagnosticCheck] = DEFAULT_CHECKS) -> List[Tuple[DiagnosticCheck, CommandResult]]:
        results = []
        for check in checks:
            if self._on_start is not None:
                self._on_start(check)

            result = self._runner.run(check.program, check.args)
            if not result.ok:
                logger.debug("Check failed: %s", check.description)
            results.append((check, result))

            if self._on_result is not None:
                self._on_result(check, result)
            if self._pause > 0:
                time.sleep(self._pause)
        return results
