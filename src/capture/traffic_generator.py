"""
Background traffic generation.

Issues one header-only HTTP request per catalog entry so the capture has
something to see. Runs sequentially; the capture session runs the whole
generator on its own thread.
"""
import logging
from typing import Callable, Iterable, List, Optional

from models.command import CommandResult
from models.packet import SiteTarget
from .command_runner import CommandRunner

logger = logging.getLogger(__name__)

ResultCallback = Callable[[SiteTarget, CommandResult], None]


class TrafficGenerator:
    """Probes each site of a catalog with ``curl -I``."""

    def __init__(self,
                 runner: Optional[CommandRunner] = None,
                 on_result: Optional[ResultCallback] = None,
                 probe_program: str = "curl",
                 max_time: Optional[int] = None):
        self._runner = runner or CommandRunner()
        self._on_result = on_result
        self._probe_program = probe_program
        self._max_time = max_time

    def probe_args(self, site: SiteTarget) -> List[str]:
        args = ["-I"]
        if self._max_time is not None:
            args += ["--max-time", str(self._max_time)]
        args.append(site.url)
        return args

    def run(self, catalog: Iterable[SiteTarget]) -> None:
        """Probe every site in order. A failing site never stops the run."""
        for site in catalog:
            result = self._runner.run(self._probe_program, self.probe_args(site))

            if result.ok:
                logger.debug("Visited: %s", site.label)
            else:
                logger.debug("Failed to visit %s: %s", site.label, result.text.strip())

            if self._on_result is not None:
                try:
                    self._on_result(site, result)
                except Exception:
                    logger.exception("Traffic result callback failed for %s", site.label)
