"""
CLI commands for live capture.
"""
import click
from typing import Optional

from capture.capture_session import CaptureSession
from capture.exceptions import NetdiagError
from capture.interfaces import list_interfaces
from capture.sites import DEFAULT_SITES
from capture.traffic_generator import TrafficGenerator
from models.packet import CaptureConfig, StopReason
from . import render
from .render import tag


def capture_options(f):
    """Options shared by every command that starts a capture."""
    options = [
        click.option('--interface', '-i', default='en0', show_default=True, envvar='NETDIAG_INTERFACE',
                     help='Interface to capture from ("list" shows available interfaces)'),
        click.option('--port', '-p', default='53', show_default=True, envvar='NETDIAG_PORT',
                     help='Port filter passed to tcpdump'),
        click.option('--count', '-c', 'max_packets', type=click.IntRange(min=1), default=10,
                     show_default=True, envvar='NETDIAG_COUNT',
                     help='Stop after this many output lines'),
        click.option('--timeout', '-t', 'timeout_seconds', type=click.IntRange(min=0), default=1,
                     show_default=True, envvar='NETDIAG_TIMEOUT',
                     help='Stop after this many seconds'),
        click.option('--probe-timeout', type=click.IntRange(min=1), envvar='NETDIAG_PROBE_TIMEOUT',
                     help='Per-site limit for background requests (curl --max-time)'),
        click.option('--no-traffic', is_flag=True, help='Capture without visiting websites'),
        click.option('--format', 'format', type=click.Choice(['table', 'jsonl']), default='table',
                     show_default=True, help='Output format'),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def echo_interfaces() -> None:
    try:
        interfaces = list_interfaces()
    except (ImportError, OSError) as e:
        raise click.ClickException(f"Cannot list interfaces: {e}")

    click.echo("Available interfaces:")
    for iface in interfaces:
        ips = ", ".join(iface['ips']) or "-"
        click.echo(f"  {iface['name']:20} {ips}")


def run_capture(interface: str, port: str, max_packets: int, timeout_seconds: int,
                probe_timeout: Optional[int], no_traffic: bool, format: str) -> None:
    if interface == 'list':
        echo_interfaces()
        return

    try:
        config = CaptureConfig(interface=interface, port=port,
                               max_packets=max_packets, timeout_seconds=timeout_seconds)
    except ValueError as e:
        raise click.BadParameter(str(e))

    table = format == 'table'

    def on_site(site, result):
        # Keep stdout clean for JSON lines
        click.echo(render.site_result(site, result), err=not table)

    def on_packet(packet):
        click.echo(render.packet_row(packet) if table else render.packet_json(packet))

    session = CaptureSession(
        catalog=() if no_traffic else DEFAULT_SITES,
        traffic=TrafficGenerator(on_result=on_site, max_time=probe_timeout),
        on_packet=on_packet,
    )

    if table:
        click.echo(f"\n{tag('INFO', 'blue')} Capturing {max_packets} packets on "
                   f"{click.style(interface, fg='cyan')} (port {click.style(port, fg='cyan')})\n")
        if not no_traffic:
            click.echo(f"{tag('INFO', 'blue')} Visiting Websites While Capturing Traffic...\n")
        click.echo(render.table_header())

    try:
        outcome = session.start(config)
    except NetdiagError as e:
        raise click.ClickException(str(e))

    if not table:
        click.echo(render.outcome_json(outcome))
        return

    if outcome.stop_reason in (StopReason.PACKET_LIMIT, StopReason.TIMEOUT):
        click.echo(f"\n{tag('TIMEOUT', 'yellow')} Stopping capture after "
                   f"{outcome.packets_captured} packets or {timeout_seconds} seconds.")
    click.echo(f"\n{tag('SUMMARY', 'blue')} Summary: Captured {outcome.packets_captured} packets.\n")


@click.command()
@capture_options
def capture(**options):
    """
    Capture packets with tcpdump while visiting websites.

    Examples:
      netdiag capture -i en0 -p 53 -c 10 -t 1
      netdiag capture -i eth0 -p 443 --format jsonl --no-traffic
      netdiag capture -i list
    """
    run_capture(**options)


@click.command()
def interfaces():
    """List network interfaces available for capture."""
    echo_interfaces()
