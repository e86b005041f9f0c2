"""CLI commands for Groot."""

from groot.cli.commands.init import init_cmd
from groot.cli.commands.add import add_cmd
from groot.cli.commands.commit import commit_cmd
from groot.cli.commands.log import log_cmd
from groot.cli.commands.show import show_cmd
from groot.cli.commands.restore import restore_cmd
from groot.cli.commands.status import status_cmd
from groot.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'show_cmd',
           'restore_cmd', 'status_cmd', 'config_cmd']
