"""
Network diagnostics data models.
"""

from .packet import CapturedPacket, SiteTarget, CaptureConfig, CaptureOutcome, StopReason
from .command import (
    CommandResult,
    CommandSuccess,
    CommandFailure,
    SpawnError,
    DiagnosticCheck,
)

__all__ = [
    'CapturedPacket',
    'SiteTarget',
    'CaptureConfig',
    'CaptureOutcome',
    'StopReason',
    'CommandResult',
    'CommandSuccess',
    'CommandFailure',
    'SpawnError',
    'DiagnosticCheck',
]
