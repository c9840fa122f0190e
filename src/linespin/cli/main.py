"""Entry point for the linespin command-line interface."""

import click

from linespin import __version__
from linespin.cli.commands.demo import demo


@click.group()
@click.version_option(version=__version__, prog_name="linespin")
def main() -> None:
    """linespin - single-line terminal spinner.

    Run 'linespin demo' to see both the manual and the background spinner.
    """


main.add_command(demo)


if __name__ == "__main__":  # pragma: no cover
    main()
