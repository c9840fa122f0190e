"""CLI command demonstrating both spinner protocols.

Implements the 'linespin demo' command: a manually stepped spinner on stdout
followed by a background spinner on stderr that wraps a blocking call.
"""

import sys
import time

import click

from linespin.lib.errors import ConfigError
from linespin.lib.logging_config import get_logger, setup_logging
from linespin.lib.ui.controller import SpinnerController
from linespin.lib.ui.spinner import Spinner
from linespin.lib.ui.terminal import is_terminal
from linespin.models.spinner_config import SpinnerConfig

logger = get_logger(__name__)


def run_manual(label: str, duration: float, config: SpinnerConfig) -> None:
    """Step a spinner on stdout by hand until duration elapses."""
    spinner = Spinner(sys.stdout, label, config=config)
    logger.debug(f"Manual spinner mode: {spinner.mode.value}")
    deadline = time.monotonic() + duration
    while time.monotonic() < deadline:
        spinner.spin()
        time.sleep(config.tick_interval)
    spinner.clear()
    click.echo("done with stdout")


def run_background(label: str, duration: float, config: SpinnerConfig) -> None:
    """Block for duration while a background spinner animates stderr."""
    # Logging shares stderr, so nothing may be logged while the session runs
    logger.debug(f"Background spinner on a terminal: {is_terminal(sys.stderr)}")
    with SpinnerController.start(sys.stderr, label, config=config):
        time.sleep(duration)
    click.echo("done with stderr", err=True)


@click.command()
@click.option(
    "--manual-label",
    default="manual spinner...",
    show_default=True,
    help="Text shown before the manual spinner on stdout",
)
@click.option(
    "--background-label",
    default="helper function...",
    show_default=True,
    help="Text shown before the background spinner on stderr",
)
@click.option(
    "--mode",
    type=click.Choice(["manual", "background", "both"]),
    default="both",
    show_default=True,
    help="Which spinner protocol to demonstrate",
)
@click.option(
    "--duration",
    type=float,
    default=1.0,
    show_default=True,
    help="Seconds each spinner runs",
)
@click.option(
    "--interval",
    type=float,
    default=None,
    help="Seconds between frames (default: 0.1)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with debug information",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress logging output",
)
def demo(
    manual_label: str,
    background_label: str,
    mode: str,
    duration: float,
    interval: float | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Show a spinner while sleeping.

    Nothing is drawn when the target stream is not a terminal, so piping the
    output only leaves the "done" lines.

    Example:

        linespin demo --mode background --duration 2
    """
    setup_logging(verbose=verbose, quiet=quiet)

    logger.info(
        f"Demo command invoked: mode={mode}, duration={duration}, "
        f"interval={interval}"
    )

    try:
        config = SpinnerConfig.from_options(tick_interval=interval)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        click.secho("Error: Invalid spinner configuration", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(2)

    if mode in ("manual", "both"):
        run_manual(manual_label, duration, config)
    if mode in ("background", "both"):
        run_background(background_label, duration, config)
