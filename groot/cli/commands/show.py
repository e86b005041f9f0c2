"""Show command - display a commit and the changes it recorded."""

import click
from groot.core.errors import GrootError
from groot.core.repository import Repository
from groot.cli.output import error, info, warning, format_diff_parts
from colorama import Fore, Style


@click.command('show')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('commit', required=False, default='HEAD')
def show_cmd(no_color, commit):
    """
    Show commit details with diff.
    
    For every file in the commit, shows the diff against the same file in
    the parent commit, or marks it as new when the parent does not have it.
    
    Examples:
        groot show              # Show HEAD commit
        groot show abc123       # Show commit by digest prefix
        groot show --no-color abc123
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    use_color = not no_color and repo.config.use_color
    
    try:
        commit_hash = repo.graph.resolve(commit)
        commit_obj = repo.graph.read_commit(commit_hash)
        changes = repo.graph.changes(commit_hash)
    except GrootError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    if use_color:
        click.echo(f"{Fore.YELLOW}commit {commit_hash}{Style.RESET_ALL}")
    else:
        click.echo(f"commit {commit_hash}")
    if commit_obj.parent:
        click.echo(f"Parent: {commit_obj.parent}")
    click.echo(f"Date:   {commit_obj.timestamp}")
    click.echo()
    for line in commit_obj.message.split('\n'):
        click.echo(f"    {line}")
    click.echo()
    
    if not changes:
        click.echo(info("(no files in this commit)"))
        return
    
    for change in changes:
        click.echo(f"file: {change.path}")
        
        if change.unavailable:
            click.echo(warning(f"content unavailable: {change.unavailable}"))
        elif not change.has_parent:
            click.echo(info("first commit"))
            click.echo(change.new_content.rstrip('\n'))
        elif change.is_new:
            click.echo(info("new file in this commit"))
            click.echo(change.new_content.rstrip('\n'))
        elif change.is_unchanged:
            click.echo(info("(unchanged)"))
        else:
            click.echo("Diff:")
            click.echo(format_diff_parts(change.parts, color=use_color))
        click.echo()
