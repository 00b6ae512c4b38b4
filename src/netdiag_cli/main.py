"""
netdiag CLI - main entry point.
"""
import logging

import click

from .capture_cmd import capture, interfaces, capture_options, run_capture
from .diagnose import diagnose
from .logger_config import setup_logger


@click.group(invoke_without_command=True)
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Also write logs to this file')
@click.pass_context
def cli(ctx, verbose: bool, log_file):
    """netdiag - network diagnostics and live capture with background traffic."""
    setup_logger(log_file=log_file, level=logging.DEBUG if verbose else logging.WARNING)
    if ctx.invoked_subcommand is None:
        # Parse an empty command line so option envvars are honoured
        with run.make_context("run", [], parent=ctx) as run_ctx:
            run.invoke(run_ctx)


@click.command()
@click.option('--pause', type=click.FloatRange(min=0), default=1.0, show_default=True,
              help='Seconds to wait after each diagnostic check')
@capture_options
@click.pass_context
def run(ctx, pause: float, **options):
    """Run the diagnostics battery, then a capture session."""
    ctx.invoke(diagnose, pause=pause)
    run_capture(**options)


cli.add_command(diagnose)
cli.add_command(capture)
cli.add_command(interfaces)
cli.add_command(run)

if __name__ == "__main__":
    cli()
