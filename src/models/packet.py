# Packet data model
"""
Capture data models for netdiag.

THESE MODELS ARE IMMUTABLE. A CapturedPacket is built once from one line of
capture output and never modified afterwards; the session only appends new
records to its tally.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict


@dataclass(frozen=True)  # IMMUTABLE: one record per output line
class CapturedPacket:
    """
    One packet as rendered by the capture tool's textual output.

    Fields are positional tokens of the tcpdump line, not decoded protocol
    fields. See capture.line_parser for the mapping and its limits.
    """
    timestamp: str
    """First token of the line, e.g. '12:00:00.123456'"""

    source: str
    """Third token, normally the source address (and port)"""

    protocol: str
    """Fifth token. For 'IP a > b: ...' lines this is the destination."""

    info: str
    """Everything from the sixth token on, joined with single spaces"""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SiteTarget:
    """A website probed by the traffic generator."""
    url: str
    label: str


@dataclass(frozen=True)
class CaptureConfig:
    """
    Configuration for one capture session.

    Supplied by the CLI layer. max_packets bounds the number of output
    lines read (parsed or not), timeout_seconds bounds wall-clock time.
    """
    interface: str
    port: str
    max_packets: int = 10
    timeout_seconds: int = 1

    def __post_init__(self):
        """Validate after initialization."""
        if self.max_packets <= 0:
            raise ValueError(f"max_packets must be positive, got {self.max_packets}")
        if self.timeout_seconds < 0:
            raise ValueError(f"timeout_seconds must not be negative, got {self.timeout_seconds}")
        if not self.interface:
            raise ValueError("interface must not be empty")
        if not str(self.port):
            raise ValueError("port must not be empty")
        # Accept ints from callers, keep the stored form textual
        if not isinstance(self.port, str):
            object.__setattr__(self, 'port', str(self.port))


class StopReason(Enum):
    """Why a capture loop ended."""
    PACKET_LIMIT = "packet_limit"
    TIMEOUT = "timeout"
    STREAM_CLOSED = "stream_closed"
    READ_ERROR = "read_error"


@dataclass(frozen=True)
class CaptureOutcome:
    """Summary of one finished capture session."""
    packets_captured: int
    """Lines read from the capture stream (the packet-count accounting)"""

    packets_parsed: int = 0
    """Lines that produced a CapturedPacket"""

    stop_reason: StopReason = StopReason.STREAM_CLOSED
    elapsed_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'packets_captured': self.packets_captured,
            'packets_parsed': self.packets_parsed,
            'stop_reason': self.stop_reason.value,
            'elapsed_seconds': round(self.elapsed_seconds, 3),
        }
