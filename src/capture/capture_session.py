"""
Live capture session.

Runs tcpdump on one interface/port, streams its textual output line by line
and, at the same time, drives background traffic from a separate thread.

Lifecycle::

    IDLE -> SPAWNING -> CAPTURING -> DRAINING -> TERMINATED

The tcpdump process is a scoped resource: whatever ends the capture loop
(packet limit, timeout, end of stream, read error, an exception), it is
terminated exactly once and waited for, and the traffic thread is joined
before start() returns.
"""
import logging
import queue
import subprocess
import threading
import time
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from models.packet import CapturedPacket, CaptureConfig, CaptureOutcome, SiteTarget, StopReason
from .exceptions import CaptureSpawnError, SessionStateError, StreamReadError
from .line_parser import parse_packet_line
from .sites import DEFAULT_SITES
from .traffic_generator import TrafficGenerator

logger = logging.getLogger(__name__)

PacketCallback = Callable[[CapturedPacket], None]

_END_OF_STREAM = object()


class SessionState(Enum):
    IDLE = "idle"
    SPAWNING = "spawning"
    CAPTURING = "capturing"
    DRAINING = "draining"
    TERMINATED = "terminated"


def _pump_lines(stream, lines: queue.Queue) -> None:
    """Forward output lines into the queue, followed by an end marker."""
    try:
        for raw in stream:
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8", errors="replace")
            lines.put(raw)
    except (OSError, ValueError) as e:
        lines.put(StreamReadError(str(e)))
    finally:
        lines.put(_END_OF_STREAM)


class CaptureSession:
    """
    One capture run. Single use: create a new session for every capture.

    Args:
        catalog: Sites probed by the traffic generator while capturing.
        traffic: Generator used for background traffic (default: curl probes).
        on_packet: Called with every parsed packet, in arrival order.
        popen: Process factory, subprocess.Popen compatible.
        capture_program: Name or path of the capture tool.
        terminate_grace: Seconds to wait for the tool after terminating it.
    """

    def __init__(self,
                 catalog: Iterable[SiteTarget] = DEFAULT_SITES,
                 traffic: Optional[TrafficGenerator] = None,
                 on_packet: Optional[PacketCallback] = None,
                 popen: Callable[..., subprocess.Popen] = subprocess.Popen,
                 capture_program: str = "tcpdump",
                 terminate_grace: float = 5.0):
        self._catalog = tuple(catalog)
        self._traffic = traffic or TrafficGenerator()
        self._on_packet = on_packet
        self._popen = popen
        self._capture_program = capture_program
        self._terminate_grace = terminate_grace
        self._packets: List[CapturedPacket] = []
        self.state = SessionState.IDLE

    @property
    def packets(self) -> Tuple[CapturedPacket, ...]:
        """Parsed packets so far, in arrival order."""
        return tuple(self._packets)

    def capture_args(self, config: CaptureConfig) -> List[str]:
        # -nn: no name/port resolution, -vvv: verbose, -l: line-buffered stdout
        return [
            self._capture_program,
            "-i", config.interface,
            "port", config.port,
            "-c", str(config.max_packets),
            "-nn", "-vvv", "-l",
        ]

    def start(self, config: CaptureConfig) -> CaptureOutcome:
        """
        Capture until the packet limit or the timeout is reached.

        Raises:
            CaptureSpawnError: If the capture tool cannot be started.
            SessionStateError: If the session was already started.
        """
        if self.state is not SessionState.IDLE:
            raise SessionStateError(f"Capture session is {self.state.value}, not idle")

        started = time.monotonic()
        traffic_thread = None
        try:
            with self._capture_process(config) as lines:
                traffic_thread = self._start_traffic()
                self.state = SessionState.CAPTURING
                read_count, reason = self._read_loop(lines, config, started)
        finally:
            if traffic_thread is not None:
                traffic_thread.join()
            self.state = SessionState.TERMINATED

        elapsed = time.monotonic() - started
        logger.info("Capture stopped (%s) after %d lines in %.2fs",
                    reason.value, read_count, elapsed)
        return CaptureOutcome(
            packets_captured=read_count,
            packets_parsed=len(self._packets),
            stop_reason=reason,
            elapsed_seconds=elapsed,
        )

    @contextmanager
    def _capture_process(self, config: CaptureConfig) -> Iterator[queue.Queue]:
        self.state = SessionState.SPAWNING
        cmd = self.capture_args(config)
        logger.debug("exec: %s", " ".join(cmd))

        try:
            process = self._popen(cmd, stdout=subprocess.PIPE)
        except (OSError, ValueError) as e:
            logger.debug("Failed to start %s: %s", self._capture_program, e)
            raise CaptureSpawnError(self._capture_program, str(e)) from e

        lines: queue.Queue = queue.Queue()
        pump = threading.Thread(
            target=_pump_lines,
            args=(process.stdout, lines),
            name="capture-line-pump",
            daemon=True,
        )
        try:
            pump.start()
            yield lines
        finally:
            self.state = SessionState.DRAINING
            self._release(process, pump)

    def _release(self, process: subprocess.Popen, pump: threading.Thread) -> None:
        """Terminate the capture tool once and wait for it. Never raises OSError."""
        try:
            process.terminate()
        except OSError as e:
            logger.warning("Failed to terminate %s: %s", self._capture_program, e)

        try:
            process.wait(timeout=self._terminate_grace)
        except (subprocess.TimeoutExpired, OSError) as e:
            logger.warning("%s did not exit cleanly: %s", self._capture_program, e)

        pump.join(timeout=1.0)
        if process.stdout is not None and not pump.is_alive():
            try:
                process.stdout.close()
            except OSError as e:
                logger.debug("Closing capture output failed: %s", e)

    def _start_traffic(self) -> threading.Thread:
        thread = threading.Thread(
            target=self._traffic.run,
            args=(self._catalog,),
            name="traffic-generator",
        )
        thread.start()
        return thread

    def _read_loop(self, lines: queue.Queue, config: CaptureConfig,
                   started: float) -> Tuple[int, StopReason]:
        # The stop predicate is evaluated after each read, never before the
        # first one. Each read waits at most until the deadline.
        deadline = started + config.timeout_seconds
        read_count = 0

        while True:
            try:
                item = lines.get(timeout=max(0.0, deadline - time.monotonic()))
            except queue.Empty:
                return read_count, StopReason.TIMEOUT

            if item is _END_OF_STREAM:
                return read_count, StopReason.STREAM_CLOSED
            if isinstance(item, StreamReadError):
                logger.error("Error reading packet: %s", item)
                return read_count, StopReason.READ_ERROR

            packet = parse_packet_line(item)
            if packet is not None:
                self._packets.append(packet)
                if self._on_packet is not None:
                    self._on_packet(packet)
            read_count += 1

            if read_count >= config.max_packets:
                return read_count, StopReason.PACKET_LIMIT
            if time.monotonic() - started >= config.timeout_seconds:
                return read_count, StopReason.TIMEOUT
