"""Main CLI entry point for Groot."""

import logging

import click
from colorama import init

from groot import __version__
from groot.core.config import get_config
from groot.core.repository import Repository
from groot.cli.output import BANNER
from groot.cli.commands import (init_cmd, add_cmd, commit_cmd, log_cmd, show_cmd,
                                restore_cmd, status_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def configure_logging(verbose: bool) -> None:
    """
    Configure the root logger for a command run.
    
    ``--verbose`` selects DEBUG; otherwise ``core.loglevel`` from the
    configuration is used, defaulting to WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = get_config(Repository.find_repository()).log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('groot').setLevel(level)


class GrootGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=GrootGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose):
    configure_logging(verbose)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(show_cmd)
cli.add_command(restore_cmd)
cli.add_command(status_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
