"""Status command - show working tree status."""

import click
from groot.core.errors import GrootError
from groot.core.repository import Repository
from groot.operations.status import compute_status
from groot.cli.output import error, warning
from colorama import Fore, Style


@click.command('status')
def status_cmd():
    """
    Show the working tree status.
    
    Displays:
    - Changes staged for commit (in index)
    - Changes not staged for commit (committed files changed or deleted)
    - Untracked files (neither staged nor committed)
    
    Examples:
        groot status
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    try:
        report = compute_status(repo)
    except GrootError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    head = repo.graph.current_head()
    click.echo(f"HEAD: {head[:7] if head else '(no commits yet)'}")
    click.echo()
    
    click.echo("Changes to be committed:")
    for path in report.staged:
        click.echo(f"{Fore.GREEN}  staged:     {path}{Style.RESET_ALL}")
    
    click.echo()
    click.echo("Changes not staged for commit:")
    for path in report.modified:
        click.echo(f"{Fore.RED}  modified:   {path}{Style.RESET_ALL}")
    for path in report.deleted:
        click.echo(f"{Fore.RED}  deleted:    {path}{Style.RESET_ALL}")
    
    click.echo()
    click.echo("Untracked files:")
    if report.untracked:
        for path in report.untracked:
            click.echo(f"{Fore.RED}  {path}{Style.RESET_ALL}")
    else:
        click.echo("  (no untracked files)")
    
    if report.errors:
        click.echo()
        click.echo(warning(f"Could not read {len(report.errors)} path(s):"))
        for path in report.errors:
            click.echo(warning(f"  {path}"))
