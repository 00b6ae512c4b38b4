"""
Console rendering for diagnostics and capture output.
"""
import json

import click

from models.command import CommandResult, CommandSuccess, DiagnosticCheck, SpawnError
from models.packet import CapturedPacket, CaptureOutcome, SiteTarget

COLUMNS = (("Timestamp", 20, "yellow"), ("Source", 20, "cyan"),
           ("Protocol", 10, "blue"), ("Info", 40, "green"))
RULE_WIDTH = 90


def tag(label: str, color: str) -> str:
    return click.style(f"[{label}]", fg=color)


def _row(values) -> str:
    # Pad before styling so escape codes don't count towards the width
    return " ".join(
        click.style(f"{value:<{width}}", fg=color)
        for value, (_, width, color) in zip(values, COLUMNS)
    )


def table_header() -> str:
    return _row([name for name, _, _ in COLUMNS]) + "\n" + "-" * RULE_WIDTH


def packet_row(packet: CapturedPacket) -> str:
    return _row([packet.timestamp, packet.source, packet.protocol, packet.info])


def packet_json(packet: CapturedPacket) -> str:
    return json.dumps(packet.to_dict(), separators=(",", ":"), ensure_ascii=True)


def outcome_json(outcome: CaptureOutcome) -> str:
    return json.dumps({"summary": outcome.to_dict()}, separators=(",", ":"), ensure_ascii=True)


def site_result(site: SiteTarget, result: CommandResult) -> str:
    if result.ok:
        return f"{tag('SUCCESS', 'green')} Visited: {click.style(site.label, fg='cyan')}"
    if isinstance(result, SpawnError):
        return f"{tag('ERROR', 'red')} Failed to visit {site.label}: {result.text}"
    return f"{tag('ERROR', 'red')} Failed to visit {site.label}"


def check_start(check: DiagnosticCheck) -> str:
    return click.style(check.description, fg="blue")


def check_result(check: DiagnosticCheck, result: CommandResult) -> str:
    if isinstance(result, CommandSuccess):
        return f"{tag('SUCCESS', 'green')}\n{result.text}"
    return f"{tag('ERROR', 'red')}\n{result.text}"
