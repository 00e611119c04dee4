"""Entry point for the ``fluentval`` command line."""

import click

from fluentval import __version__
from fluentval.cli.commands.check import check, list_checks
from fluentval.lib.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="fluentval")
@click.option("--verbose", "-v", is_flag=True, help="Log every failed check")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors")
def main(verbose: bool, quiet: bool) -> None:
    """Validate single values with chainable checks.

    \b
    EXAMPLES:

        fluentval check 18 --type int -r min:16 -r max:56
        fluentval checks
    """
    setup_logging(verbose=verbose, quiet=quiet)


main.add_command(check)
main.add_command(list_checks)


if __name__ == "__main__":
    main()
