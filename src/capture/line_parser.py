"""
Parser for tcpdump's textual packet lines.

Pure and deterministic: the same line always gives the same result.

The mapping is positional, matching tcpdump's usual one-line rendering:

    token[0]   -> timestamp
    token[2]   -> source
    token[4]   -> protocol
    token[5:]  -> info (joined with single spaces)

Known limitation: this is a lossy convention, not a protocol decoder. For an
``IP src > dst: ...`` line the "protocol" slot holds the destination, and
verbose continuation lines are mapped the same way as any other line.
"""
from typing import Optional

from models.packet import CapturedPacket

MIN_TOKENS = 6


def parse_packet_line(line: str) -> Optional[CapturedPacket]:
    """Map one output line to a CapturedPacket, or None for banners/blank lines."""
    parts = line.split()
    if len(parts) < MIN_TOKENS:
        return None

    return CapturedPacket(
        timestamp=parts[0],
        source=parts[2],
        protocol=parts[4],
        info=" ".join(parts[5:]),
    )
