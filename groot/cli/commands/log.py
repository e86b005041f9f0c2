"""Log command - show commit history."""

import click
from itertools import islice
from groot.core.errors import BrokenHistoryError
from groot.core.repository import Repository
from groot.cli.output import error, info
from colorama import Fore, Style


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show each commit on a single line')
def log_cmd(max_count, oneline):
    """
    Show commit history.
    
    Walks from HEAD through each parent to the first commit, newest first.
    
    Examples:
        groot log
        groot log -n 5
        groot log --oneline
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    history = repo.history()
    if max_count is not None:
        history = islice(history, max_count)
    
    shown = 0
    try:
        for commit in history:
            shown += 1
            summary = commit.message.split('\n')[0]
            if oneline:
                click.echo(f"{Fore.YELLOW}{commit.hash[:7]}{Style.RESET_ALL} {summary}")
                continue
            
            click.echo(f"{Fore.YELLOW}commit {commit.hash}{Style.RESET_ALL}")
            click.echo(f"Date: {commit.timestamp}")
            click.echo()
            for line in commit.message.split('\n'):
                click.echo(f"    {line}")
            click.echo()
    except BrokenHistoryError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    if shown == 0:
        click.echo(info("No commits yet"))
