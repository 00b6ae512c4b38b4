"""
Live capture and network diagnostics subsystem.
"""

from .command_runner import CommandRunner
from .line_parser import parse_packet_line
from .traffic_generator import TrafficGenerator
from .capture_session import CaptureSession, SessionState
from .diagnostics import DiagnosticsRunner, DEFAULT_CHECKS
from .sites import DEFAULT_SITES
from .exceptions import NetdiagError, CaptureSpawnError, SessionStateError, StreamReadError

__all__ = [
    'CommandRunner',
    'parse_packet_line',
    'TrafficGenerator',
    'CaptureSession',
    'SessionState',
    'DiagnosticsRunner',
    'DEFAULT_CHECKS',
    'DEFAULT_SITES',
    'NetdiagError',
    'CaptureSpawnError',
    'SessionStateError',
    'StreamReadError',
]
