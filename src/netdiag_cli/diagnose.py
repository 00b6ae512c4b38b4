"""
CLI command for the diagnostics battery.
"""
import click

from capture.diagnostics import DiagnosticsRunner
from .render import tag, check_start, check_result


@click.command()
@click.option('--pause', type=click.FloatRange(min=0), default=1.0, show_default=True,
              help='Seconds to wait after each check')
def diagnose(pause: float):
    """
    Run the network diagnostics battery.

    Pings 8.8.8.8, looks up the public and private IP addresses, lists
    established connections, traces the route to google.com and shows the
    routing table. A failing check is reported and the battery continues.
    """
    click.echo(f"\n{tag('INFO', 'blue')} Running Network Diagnostics...\n")

    runner = DiagnosticsRunner(
        on_start=lambda check: click.echo(check_start(check)),
        on_result=lambda check, result: click.echo(check_result(check, result)),
        pause=pause,
    )
    results = runner.run()

    passed = sum(1 for _, result in results if result.ok)
    click.echo(f"{tag('INFO', 'blue')} Network tests completed "
               f"({passed}/{len(results)} succeeded).\n")
